"""Analyze the region markers of one source unit."""

import logging
from collections.abc import Iterable, Mapping

from region_ruler.domain.config import ConfigurationResolver
from region_ruler.domain.diagnostics import RegionDiagnostic
from region_ruler.domain.rule_engine import RuleEngine
from region_ruler.domain.rules import RegionContext

logger = logging.getLogger(__name__)


class AnalyzeRegionsUseCase:
    """
    Per-unit driver: resolve the configuration once, then evaluate every region.

    Input is a sequence of ``(region_name, location)`` pairs plus the raw
    option lookup for the unit. Output is the diagnostics of all regions, in
    region order.
    """

    def __init__(
        self,
        engine: RuleEngine | None = None,
        resolver: ConfigurationResolver | None = None,
    ) -> None:
        self._engine = engine or RuleEngine()
        self._resolver = resolver or ConfigurationResolver()

    def execute(
        self,
        regions: Iterable[tuple[str, object]],
        options: Mapping[str, str],
    ) -> list[RegionDiagnostic]:
        config = self._resolver.resolve(options)
        diagnostics: list[RegionDiagnostic] = []
        region_count = 0
        for name, location in regions:
            region_count += 1
            context = RegionContext(name=name, location=location, config=config)
            diagnostics.extend(self._engine.diagnostics(context))

        logger.debug(
            "Checked %d region(s): %d diagnostic(s) (custom names=%s, custom patterns=%s)",
            region_count,
            len(diagnostics),
            config.has_custom_region_config,
            config.has_custom_pattern_config,
        )
        return diagnostics
