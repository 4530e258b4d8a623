"""No-config rule: the built-in name set applies when nothing is configured."""

from region_ruler.domain.descriptors import NO_CONFIG
from region_ruler.domain.rules import RegionContext, RuleOutcome


class NoConfigRegionRule:
    """Rule for RR1999: region name must be one of the default names."""

    priority: int = 1

    def can_handle(self, context: RegionContext) -> bool:
        return not context.is_empty and not context.has_any_custom_config

    def evaluate(self, context: RegionContext) -> RuleOutcome:
        if context.config.is_allowed_name(context.name):
            return RuleOutcome.VALID
        return RuleOutcome.invalid(NO_CONFIG, context.name)
