"""Per-unit configuration. Immutable value object built from a raw option mapping."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

import regex

from region_ruler.domain.constants import (
    ALLOW_EMPTY,
    ALLOWED_REGEX_PATTERN,
    ALLOWED_REGION_NAME,
    CASE_SENSITIVE,
    DEFAULT_ALLOW_EMPTY,
    DEFAULT_CASE_SENSITIVE,
    DEFAULT_REGION_NAMES,
    LIST_SEPARATORS,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NameComparer:
    """
    Ordinal name comparison, exact or case-insensitive.

    Insensitive mode lower-cases per character rather than casefolding, so
    names compare the way IGNORECASE patterns match ("straße" never equals
    "STRASSE" on either path).
    """

    case_sensitive: bool

    def key(self, name: str) -> str:
        """Return the form of ``name`` used for set membership."""
        return name if self.case_sensitive else name.lower()

    def keys(self, names: Iterable[str]) -> frozenset[str]:
        return frozenset(self.key(name) for name in names)

    def contains(self, keys: frozenset[str], name: str) -> bool:
        return self.key(name) in keys


@dataclass(frozen=True)
class RegionConfiguration:
    """
    Region naming policy for one analyzed unit.

    ``allowed_region_names`` holds comparer keys, so membership must go
    through ``is_allowed_name``. Without a custom name option it is the default
    set and ``has_custom_region_config`` is False; without a custom pattern
    option ``allowed_patterns`` is empty and ``has_custom_pattern_config`` is
    False.
    """

    allowed_region_names: frozenset[str]
    allowed_patterns: tuple[regex.Pattern[str], ...]
    has_custom_region_config: bool
    has_custom_pattern_config: bool
    case_sensitive: bool
    allow_empty: bool

    @property
    def comparer(self) -> NameComparer:
        return NameComparer(self.case_sensitive)

    def is_allowed_name(self, name: str) -> bool:
        return self.comparer.contains(self.allowed_region_names, name)


class ConfigurationResolver:
    """Turns a key/value option lookup into a validated RegionConfiguration."""

    def resolve(self, options: Mapping[str, str]) -> RegionConfiguration:
        """Build the configuration for one unit. Never raises on bad option values."""
        case_sensitive = self.parse_bool(options.get(CASE_SENSITIVE), DEFAULT_CASE_SENSITIVE)
        allow_empty = self.parse_bool(options.get(ALLOW_EMPTY), DEFAULT_ALLOW_EMPTY)
        comparer = NameComparer(case_sensitive)

        names, has_region_config = self._allowed_region_names(options, comparer)
        patterns, has_pattern_config = self._allowed_patterns(options, case_sensitive)

        return RegionConfiguration(
            allowed_region_names=names,
            allowed_patterns=patterns,
            has_custom_region_config=has_region_config,
            has_custom_pattern_config=has_pattern_config,
            case_sensitive=case_sensitive,
            allow_empty=allow_empty,
        )

    @staticmethod
    def split_list(value: str) -> list[str]:
        """Split a ',' or ';' delimited option into trimmed, non-blank entries."""
        tokens = regex.split(f"[{regex.escape(LIST_SEPARATORS)}]", value)
        return [token.strip() for token in tokens if token.strip()]

    @staticmethod
    def parse_bool(value: str | None, default: bool) -> bool:
        """Parse 'true'/'false' (any case, surrounding whitespace ignored); else default."""
        if value is None:
            return default
        normalized = value.strip().lower()
        if normalized == "true":
            return True
        if normalized == "false":
            return False
        return default

    def _allowed_region_names(
        self, options: Mapping[str, str], comparer: NameComparer
    ) -> tuple[frozenset[str], bool]:
        value = options.get(ALLOWED_REGION_NAME)
        if value is not None and value.strip():
            return comparer.keys(self.split_list(value)), True
        return comparer.keys(DEFAULT_REGION_NAMES), False

    def _allowed_patterns(
        self, options: Mapping[str, str], case_sensitive: bool
    ) -> tuple[tuple[regex.Pattern[str], ...], bool]:
        value = options.get(ALLOWED_REGEX_PATTERN)
        if value is None or not value.strip():
            return (), False

        flags = 0 if case_sensitive else regex.IGNORECASE
        patterns: list[regex.Pattern[str]] = []
        for token in self.split_list(value):
            try:
                patterns.append(regex.compile(token, flags))
            except regex.error as exc:
                logger.debug("Dropping malformed region pattern %r: %s", token, exc)
        return tuple(patterns), True
