"""Static diagnostic descriptors, one per reported category."""

from dataclasses import dataclass
from enum import Enum


class Severity(str, Enum):
    """Default severity of a diagnostic category."""

    WARNING = "warning"


@dataclass(frozen=True)
class DiagnosticDescriptor:
    """Identity and wording of a diagnostic category. Never mutated after import."""

    id: str
    title: str
    message_template: str
    category: str
    severity: Severity
    enabled_by_default: bool
    description: str
    msgid: str
    """Pylint message id the category is reported under."""
    symbol: str
    """Pylint symbolic name, usable in ``# pylint: disable=...``."""

    @property
    def takes_argument(self) -> bool:
        """True when the message template has a placeholder for the region name."""
        return "%s" in self.message_template


NO_CONFIG = DiagnosticDescriptor(
    id="RR1999",
    title="No region-ruler configuration",
    message_template=(
        "Region name '%s' does not match default rules. "
        "Configure [tool.region-ruler] to customize allowed region names"
    ),
    category="Structure",
    severity=Severity.WARNING,
    enabled_by_default=True,
    description=(
        "No custom configuration found. Region name must match default naming rules "
        "or configure region_ruler.allowed_region_name or "
        "region_ruler.allowed_regex_pattern."
    ),
    msgid="W9701",
    symbol="region-name-not-default",
)

INVALID_NAME = DiagnosticDescriptor(
    id="RR2001",
    title="Invalid region name",
    message_template="Region name '%s' is not in the allowed names list",
    category="Structure",
    severity=Severity.WARNING,
    enabled_by_default=True,
    description="Region name must be in the configured allowed names list.",
    msgid="W9702",
    symbol="region-name-not-allowed",
)

INVALID_PATTERN = DiagnosticDescriptor(
    id="RR2002",
    title="Invalid region pattern",
    message_template="Region name '%s' does not match any allowed regex pattern",
    category="Structure",
    severity=Severity.WARNING,
    enabled_by_default=True,
    description="Region name must match at least one of the configured regex patterns.",
    msgid="W9703",
    symbol="region-name-pattern-mismatch",
)

EMPTY = DiagnosticDescriptor(
    id="RR2003",
    title="Empty region name",
    message_template="Region name cannot be empty",
    category="Structure",
    severity=Severity.WARNING,
    enabled_by_default=True,
    description="Region must have a name when empty names are not allowed.",
    msgid="W9704",
    symbol="region-name-empty",
)

SUPPORTED_DIAGNOSTICS: tuple[DiagnosticDescriptor, ...] = (
    NO_CONFIG,
    INVALID_NAME,
    INVALID_PATTERN,
    EMPTY,
)
