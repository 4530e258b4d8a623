"""Allowed names rule (RR2001)."""

from region_ruler.domain.descriptors import INVALID_NAME
from region_ruler.domain.rules import RegionContext, RuleOutcome


class AllowedNamesRule:
    """Region name must be a member of the configured allowed_region_name list."""

    priority: int = 2

    def can_handle(self, context: RegionContext) -> bool:
        config = context.config
        return (
            not context.is_empty
            and config.has_custom_region_config
            and bool(config.allowed_region_names)
        )

    def evaluate(self, context: RegionContext) -> RuleOutcome:
        if context.config.is_allowed_name(context.name):
            return RuleOutcome.VALID
        return RuleOutcome.invalid(INVALID_NAME, context.name)
