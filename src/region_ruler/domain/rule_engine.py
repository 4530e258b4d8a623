"""Rule engine: priority-ordered evaluation of region rules.

Usage:
    engine = RuleEngine()
    outcomes = engine.evaluate(context)
    if not outcomes:
        # region passes
"""

from collections.abc import Iterable
from operator import attrgetter

from region_ruler.domain.diagnostics import RegionDiagnostic
from region_ruler.domain.rules import RegionContext, RegionRule, RuleOutcome
from region_ruler.domain.rules.allowed_names import AllowedNamesRule
from region_ruler.domain.rules.empty_region import EmptyRegionRule
from region_ruler.domain.rules.no_config import NoConfigRegionRule
from region_ruler.domain.rules.regex_pattern import RegexPatternRule


class RuleEngine:
    """
    Holds an immutable, priority-sorted rule tuple shared by every evaluation.

    Evaluation is re-entrant: the engine keeps no per-call state, so one
    instance may serve any number of units concurrently.
    """

    def __init__(self, rules: Iterable[RegionRule] | None = None) -> None:
        chosen = self._default_rules() if rules is None else rules
        self._rules: tuple[RegionRule, ...] = tuple(sorted(chosen, key=attrgetter("priority")))

    @staticmethod
    def _default_rules() -> list[RegionRule]:
        return [
            EmptyRegionRule(),
            NoConfigRegionRule(),
            AllowedNamesRule(),
            RegexPatternRule(),
        ]

    @property
    def rules(self) -> tuple[RegionRule, ...]:
        return self._rules

    def evaluate(self, context: RegionContext) -> tuple[RuleOutcome, ...]:
        """
        Run applicable rules in ascending priority.

        The first valid outcome ends evaluation with an empty result. Otherwise
        every invalid outcome is returned in priority order; more than one is
        possible when both name and pattern lists are configured.
        """
        failures: list[RuleOutcome] = []
        for rule in self._rules:
            if not rule.can_handle(context):
                continue
            outcome = rule.evaluate(context)
            if outcome.is_valid:
                return ()
            failures.append(outcome)
        return tuple(failures)

    def diagnostics(self, context: RegionContext) -> list[RegionDiagnostic]:
        """Evaluate and synthesize one diagnostic per invalid outcome."""
        results: list[RegionDiagnostic] = []
        for outcome in self.evaluate(context):
            diagnostic = outcome.to_diagnostic(context.location)
            if diagnostic is not None:
                results.append(diagnostic)
        return results
