"""Locate and parse collected metadata files."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any, TypeVar

from archzoom.errors import MetadataError
from archzoom.model import ApiMetadata, CallDependency, ProjectMetadata

logger = logging.getLogger(__name__)

T = TypeVar("T")


def find_metadata_files(src_dirs: Iterable[Path], filename: str) -> list[Path]:
    """Return every file named *filename* below any of *src_dirs*, sorted per root."""
    found: list[Path] = []
    for src in src_dirs:
        if not src.is_dir():
            logger.warning("Source folder not found: %s", src)
            continue
        matches = sorted(p for p in src.rglob(filename) if p.is_file())
        logger.debug("Found %d %s file(s) under %s", len(matches), filename, src)
        found.extend(matches)
    return found


def load_project_metadata(paths: Iterable[Path]) -> list[ProjectMetadata]:
    return _load_records(paths, ProjectMetadata.from_dict)


def load_api_metadata(paths: Iterable[Path]) -> list[ApiMetadata]:
    return _load_records(paths, ApiMetadata.from_dict)


def load_call_dependencies(path: Path) -> list[CallDependency]:
    """Read a JSON list of already resolved call dependencies."""
    return _load_records([path], CallDependency.from_dict)


def _load_records(
    paths: Iterable[Path], convert: Callable[[dict[str, Any]], T]
) -> list[T]:
    """Parse each file as one JSON object or a list of them."""
    records: list[T] = []
    for path in paths:
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise MetadataError(f"Could not read {path}: {e}") from e

        items = data if isinstance(data, list) else [data]
        for item in items:
            if not isinstance(item, dict):
                raise MetadataError(f"{path}: expected a JSON object, got {item!r}")
            try:
                records.append(convert(item))
            except (KeyError, TypeError, AttributeError) as e:
                raise MetadataError(f"{path}: malformed record ({e})") from e
    return records
