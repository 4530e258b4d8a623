"""Region naming checks (W9701-W9704)."""

from typing import TYPE_CHECKING

from astroid import nodes
from pylint.checkers import BaseRawFileChecker

if TYPE_CHECKING:
    from pylint.lint import PyLinter

from region_ruler.domain.descriptors import SUPPORTED_DIAGNOSTICS
from region_ruler.domain.rule_msgs import RuleMsgBuilder
from region_ruler.infrastructure.config_file_loader import ConfigFileLoader
from region_ruler.infrastructure.gateways.region_comment_gateway import RegionCommentGateway
from region_ruler.use_cases.analyze_regions import AnalyzeRegionsUseCase


class RegionNameChecker(BaseRawFileChecker):
    """Region naming policy. Thin: extracts markers and delegates to AnalyzeRegionsUseCase."""

    name: str = "region-ruler"
    msgs = RuleMsgBuilder.build_msgs(SUPPORTED_DIAGNOSTICS)

    def __init__(
        self,
        linter: "PyLinter",
        config_loader: ConfigFileLoader | None = None,
        comment_gateway: RegionCommentGateway | None = None,
        analyze_regions: AnalyzeRegionsUseCase | None = None,
    ) -> None:
        super().__init__(linter)
        self.config_loader = config_loader or ConfigFileLoader()
        self._comment_gateway = comment_gateway or RegionCommentGateway()
        self._analyze_regions = analyze_regions or AnalyzeRegionsUseCase()

    def process_module(self, node: nodes.Module) -> None:
        """Check every region comment of the module against the unit's configuration."""
        with node.stream() as stream:
            markers = self._comment_gateway.extract_markers(stream.readline)
        if not markers:
            return

        options = self.config_loader.load_options(self._module_path(node))
        diagnostics = self._analyze_regions.execute(
            ((marker.name, marker.location) for marker in markers), options
        )
        for diagnostic in diagnostics:
            line, col_offset = diagnostic.location
            self.add_message(
                diagnostic.descriptor.msgid,
                line=line,
                col_offset=col_offset,
                args=diagnostic.message_args or None,
            )

    @staticmethod
    def _module_path(node: nodes.Module) -> str | None:
        path = getattr(node, "file", None)
        if not path or path.startswith("<"):
            return None
        return str(path)
