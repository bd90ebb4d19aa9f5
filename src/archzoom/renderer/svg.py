"""Render PlantUML descriptions to SVG with the plantuml command-line tool."""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path

from archzoom.errors import RenderError
from archzoom.plantuml import split_key
from archzoom.writer import write_diagram

logger = logging.getLogger(__name__)

SVG_EXTENSION = "svg"


class PlantUmlRenderer:
    """Pipe diagram text through ``plantuml -tsvg -pipe``.

    GraphViz must be installed for PlantUML to lay out package diagrams;
    without it the SVG shows PlantUML's error message instead.
    """

    def __init__(self, executable: str = "plantuml", timeout: int = 120) -> None:
        self.executable = executable
        self.timeout = timeout

    def render_files(self, diagrams: dict[str, str], target_dir: Path) -> list[Path]:
        """Write one ``target_dir/svg/<name>.svg`` per diagram."""
        written: list[Path] = []
        for key, svg in self.render_strings(diagrams).items():
            name, extension = split_key(key)
            written.extend(write_diagram(svg, name, extension, target_dir))
        return written

    def render_strings(self, diagrams: dict[str, str]) -> dict[str, str]:
        """Return ``{"<name>.svg": svg_text}`` for every diagram."""
        plantuml_path = shutil.which(self.executable)
        if not plantuml_path:
            logger.warning(
                "%s not found on PATH — skipping SVG rendering. "
                "Install PlantUML and GraphViz to enable it.",
                self.executable,
            )
            return {}

        rendered: dict[str, str] = {}
        for key, text in diagrams.items():
            name, _ = split_key(key)
            rendered[f"{name}.{SVG_EXTENSION}"] = self._render(plantuml_path, key, text)
        logger.debug("Rendered %d diagram(s) to SVG", len(rendered))
        return rendered

    def _render(self, plantuml_path: str, key: str, text: str) -> str:
        try:
            result = subprocess.run(
                [plantuml_path, "-tsvg", "-pipe"],
                input=text,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except (OSError, subprocess.TimeoutExpired) as e:
            raise RenderError(f"Could not run plantuml for {key}: {e}") from e

        if result.returncode != 0:
            raise RenderError(
                f"plantuml failed for {key}: "
                f"{result.stderr.strip() if result.stderr else 'unknown error'}"
            )
        return result.stdout
