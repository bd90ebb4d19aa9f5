"""Persist diagram descriptions below a target folder."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def write_diagram(
    content: str, name: str, extension: str, target_dir: Path
) -> list[Path]:
    """Write *content* to ``target_dir/<extension>/<name>.<extension>``."""
    out_path = target_dir / extension / f"{name}.{extension}"
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(content, encoding="utf-8")
    logger.debug("Wrote %s", out_path)
    return [out_path]
