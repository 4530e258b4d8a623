"""
Pylint plugin entry point - composition root for the checker plugin.

Enable with ``pylint --load-plugins=region_ruler.infrastructure.checker``.
"""

from pylint.lint import PyLinter

from region_ruler.infrastructure.config_file_loader import ConfigFileLoader
from region_ruler.infrastructure.gateways.region_comment_gateway import RegionCommentGateway
from region_ruler.use_cases.analyze_regions import AnalyzeRegionsUseCase
from region_ruler.use_cases.checks.regions import RegionNameChecker


def register(linter: PyLinter) -> None:
    """Register checkers."""
    linter.register_checker(
        RegionNameChecker(
            linter,
            config_loader=ConfigFileLoader(),
            comment_gateway=RegionCommentGateway(),
            analyze_regions=AnalyzeRegionsUseCase(),
        )
    )
