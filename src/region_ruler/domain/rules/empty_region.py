"""Empty region rule: nameless regions when empty names are disallowed."""

from region_ruler.domain.constants import EMPTY_REGION_ARGUMENT
from region_ruler.domain.descriptors import EMPTY
from region_ruler.domain.rules import RegionContext, RuleOutcome


class EmptyRegionRule:
    """Rule for RR2003. Runs first so a blank name never reaches the name rules."""

    priority: int = 0

    def can_handle(self, context: RegionContext) -> bool:
        return context.is_empty and not context.config.allow_empty

    def evaluate(self, context: RegionContext) -> RuleOutcome:
        return RuleOutcome.invalid(EMPTY, EMPTY_REGION_ARGUMENT)
