"""Settings, optionally read from .archzoom.toml or [tool.archzoom]."""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path

try:
    import tomllib
except ImportError:
    import tomli as tomllib  # type: ignore[no-redef]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    maven_aggregate_name: str = "collected-maven-info"
    api_aggregate_name: str = "collected-api-info"
    suffix: str = ".json"
    # Service name used by API consumers that did not declare a target service
    default_service: str = "default"
    plantuml: str = "plantuml"
    render_timeout: int = 120

    @property
    def maven_filename(self) -> str:
        return self.maven_aggregate_name + self.suffix

    @property
    def api_filename(self) -> str:
        return self.api_aggregate_name + self.suffix


def load_settings(project_dir: Path | None = None) -> Settings:
    """Return settings for *project_dir*, falling back to defaults."""
    if project_dir is None:
        return Settings()
    table = _read_config_table(project_dir)
    if not table:
        return Settings()

    known = {f.name for f in fields(Settings)}
    overrides = {}
    for key, value in table.items():
        attr = key.replace("-", "_")
        if attr not in known:
            logger.warning("Ignoring unknown archzoom setting: %s", key)
            continue
        overrides[attr] = value
    logger.debug("Config overrides: %s", overrides)
    return replace(Settings(), **overrides)


def _read_config_table(project_dir: Path) -> dict | None:
    """Read the archzoom table from .archzoom.toml or pyproject.toml."""
    archzoom_toml = project_dir / ".archzoom.toml"
    if archzoom_toml.exists():
        try:
            with open(archzoom_toml, "rb") as f:
                data = tomllib.load(f)
            return data.get("archzoom", None)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.warning("Could not parse %s: %s", archzoom_toml, e)

    pyproject = project_dir / "pyproject.toml"
    if pyproject.exists():
        try:
            with open(pyproject, "rb") as f:
                data = tomllib.load(f)
            return data.get("tool", {}).get("archzoom", None)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.warning("Could not parse %s: %s", pyproject, e)

    return None
