"""Regex pattern rule (RR2002): region name must match a configured pattern."""

import logging

from region_ruler.domain.constants import REGEX_MATCH_TIMEOUT
from region_ruler.domain.descriptors import INVALID_PATTERN
from region_ruler.domain.rules import RegionContext, RuleOutcome

logger = logging.getLogger(__name__)


class RegexPatternRule:
    """
    Passes when any allowed pattern is found in the region name.

    Each match attempt is bounded by REGEX_MATCH_TIMEOUT. A timed-out attempt
    counts as a non-match for that pattern only; the remaining patterns are
    still tried.
    """

    priority: int = 5

    def can_handle(self, context: RegionContext) -> bool:
        config = context.config
        return (
            not context.is_empty
            and config.has_custom_pattern_config
            and bool(config.allowed_patterns)
        )

    def evaluate(self, context: RegionContext) -> RuleOutcome:
        for pattern in context.config.allowed_patterns:
            try:
                if pattern.search(context.name, timeout=REGEX_MATCH_TIMEOUT):
                    return RuleOutcome.VALID
            except TimeoutError:
                logger.debug(
                    "Pattern %r timed out on region name %r", pattern.pattern, context.name
                )
        return RuleOutcome.invalid(INVALID_PATTERN, context.name)
