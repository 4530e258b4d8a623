"""Load [tool.region-ruler] from pyproject.toml. Infrastructure I/O only."""

import logging
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib as toml_lib
else:
    import tomli as toml_lib

from region_ruler.domain.constants import OPTION_PREFIX

logger = logging.getLogger(__name__)


class ConfigFileLoader:
    """
    Finds the nearest pyproject.toml with a region-ruler table and flattens it.

    The result is the raw ``region_ruler.<key>`` -> string lookup consumed by
    ConfigurationResolver; values are not validated here.
    """

    SECTION_NAMES: tuple[str, ...] = ("region-ruler", "region_ruler")

    def load_options(self, start: Path | str | None = None) -> dict[str, str]:
        """Walk up from ``start`` (default: cwd). Returns {} when no section is found."""
        current_path = Path(start) if start is not None else Path.cwd()
        if current_path.is_file():
            current_path = current_path.parent
        current_path = current_path.resolve()

        for directory in (current_path, *current_path.parents):
            config_file = directory / "pyproject.toml"
            if not config_file.is_file():
                continue
            section = self._read_section(config_file)
            if section is not None:
                return self.flatten(section)
        return {}

    def _read_section(self, config_file: Path) -> dict[str, object] | None:
        try:
            with config_file.open("rb") as f:
                data = toml_lib.load(f)
        except (OSError, ValueError) as exc:
            # TOMLDecodeError and UnicodeDecodeError are both ValueErrors.
            logger.warning("Skipping unreadable config file %s: %s", config_file, exc)
            return None
        tool_section = data.get("tool", {}) or {}
        if not isinstance(tool_section, dict):
            logger.warning("Skipping config file %s: [tool] is not a table", config_file)
            return None
        for name in self.SECTION_NAMES:
            section = tool_section.get(name)
            if isinstance(section, dict):
                return section
        return None

    @staticmethod
    def flatten(section: dict[str, object]) -> dict[str, str]:
        """Convert TOML values to option strings: lists joined by ',', booleans as 'true'/'false'."""
        options: dict[str, str] = {}
        for key, value in section.items():
            if isinstance(value, bool):
                text = "true" if value else "false"
            elif isinstance(value, (list, tuple)):
                text = ",".join(str(item) for item in value)
            else:
                text = str(value)
            options[f"{OPTION_PREFIX}{key}"] = text
        return options
