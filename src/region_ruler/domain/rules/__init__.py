"""Domain models for region rules: context, outcome and the rule protocol."""

from dataclasses import dataclass
from typing import ClassVar, Protocol

__all__ = [
    "RegionContext",
    "RegionRule",
    "RuleOutcome",
]

from region_ruler.domain.config import RegionConfiguration
from region_ruler.domain.constants import EMPTY_REGION_ARGUMENT
from region_ruler.domain.descriptors import DiagnosticDescriptor
from region_ruler.domain.diagnostics import RegionDiagnostic


@dataclass(frozen=True)
class RegionContext:
    """Everything a rule may look at for one region occurrence."""

    name: str
    location: object
    config: RegionConfiguration

    @property
    def is_empty(self) -> bool:
        return not self.name or self.name.isspace()

    @property
    def has_any_custom_config(self) -> bool:
        return self.config.has_custom_region_config or self.config.has_custom_pattern_config


@dataclass(frozen=True)
class RuleOutcome:
    """Verdict of a single rule. ``RuleOutcome.VALID`` is the shared passing instance."""

    is_valid: bool
    descriptor: DiagnosticDescriptor | None = None
    region_name: str | None = None

    VALID: ClassVar["RuleOutcome"]

    @classmethod
    def invalid(cls, descriptor: DiagnosticDescriptor, region_name: str) -> "RuleOutcome":
        return cls(is_valid=False, descriptor=descriptor, region_name=region_name)

    def to_diagnostic(self, location: object) -> RegionDiagnostic | None:
        """Synthesize the diagnostic for an invalid outcome; None for a valid one."""
        if self.is_valid or self.descriptor is None:
            return None
        name = self.region_name
        argument = EMPTY_REGION_ARGUMENT if not name or name.isspace() else name
        return RegionDiagnostic(descriptor=self.descriptor, location=location, argument=argument)


RuleOutcome.VALID = RuleOutcome(is_valid=True)


class RegionRule(Protocol):
    """A single naming policy. Lower ``priority`` values are evaluated first."""

    priority: int

    def can_handle(self, context: RegionContext) -> bool:
        """Return True if this rule applies to the region at all."""
        ...

    def evaluate(self, context: RegionContext) -> RuleOutcome:
        """Decide pass/fail for a region this rule can handle."""
        ...
