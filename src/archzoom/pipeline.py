"""Orchestrator: collect → connect → build → write/render."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from archzoom.config import Settings
from archzoom.connectors import ServiceConnector
from archzoom.diagrams import DiagramBuilder, default_builders
from archzoom.loader import (
    find_metadata_files,
    load_api_metadata,
    load_project_metadata,
)
from archzoom.model import ApiMetadata, CallDependency, ProjectMetadata
from archzoom.plantuml import split_key
from archzoom.renderer.svg import PlantUmlRenderer
from archzoom.writer import write_diagram

logger = logging.getLogger(__name__)


def collect_metadata(
    src_dirs: Sequence[Path], settings: Settings
) -> tuple[list[ProjectMetadata], list[ApiMetadata]]:
    """Load the collected unit and API metadata found below *src_dirs*."""
    projects = load_project_metadata(
        find_metadata_files(src_dirs, settings.maven_filename)
    )
    apis = load_api_metadata(find_metadata_files(src_dirs, settings.api_filename))
    logger.debug(
        "Loaded %d unit(s) and %d API description(s)", len(projects), len(apis)
    )
    return projects, apis


def connect_services(
    apis: Sequence[ApiMetadata], connector: ServiceConnector | None
) -> list[CallDependency] | None:
    """Derive call dependencies, or ``None`` when there is nothing to connect."""
    if not apis:
        return None
    if connector is None:
        logger.warning(
            "Found %d API description(s) but no service connector — "
            "diagrams will not show calls between services.",
            len(apis),
        )
        return None
    dependencies = connector.connect_services(apis)
    logger.info("Found %d dependencies", len(dependencies or ()))
    return dependencies


def build_diagrams(
    projects: Sequence[ProjectMetadata],
    dependencies: Sequence[CallDependency] | None,
    builders: Sequence[DiagramBuilder] | None = None,
    settings: Settings | None = None,
) -> dict[str, str]:
    """Run every builder and merge their outputs in builder order."""
    diagrams: dict[str, str] = {}
    for builder in builders or default_builders(settings):
        output = builder.build(projects, dependencies)
        overlap = diagrams.keys() & output.keys()
        if overlap:
            logger.warning(
                "Diagram keys overwritten by %s: %s", builder.flavor, sorted(overlap)
            )
        diagrams.update(output)
    return diagrams


def generate_strings(
    src_dirs: Sequence[Path],
    *,
    visualize: bool = False,
    connector: ServiceConnector | None = None,
    settings: Settings | None = None,
) -> dict[str, str]:
    """Build all diagrams in memory; with *visualize*, add their SVG renderings."""
    settings = settings or Settings()
    projects, apis = collect_metadata(src_dirs, settings)
    dependencies = connect_services(apis, connector)
    diagrams = build_diagrams(projects, dependencies, settings=settings)

    if visualize:
        renderer = PlantUmlRenderer(settings.plantuml, settings.render_timeout)
        diagrams.update(renderer.render_strings(diagrams))
    return diagrams


def generate_files(
    src_dirs: Sequence[Path],
    target_dir: Path,
    *,
    visualize: bool = False,
    connector: ServiceConnector | None = None,
    settings: Settings | None = None,
) -> list[Path]:
    """Build all diagrams, write them below *target_dir* and return the files."""
    settings = settings or Settings()
    projects, apis = collect_metadata(src_dirs, settings)
    dependencies = connect_services(apis, connector)
    diagrams = build_diagrams(projects, dependencies, settings=settings)

    written: list[Path] = []
    for key, text in diagrams.items():
        name, extension = split_key(key)
        written.extend(write_diagram(text, name, extension, target_dir))

    if visualize:
        renderer = PlantUmlRenderer(settings.plantuml, settings.render_timeout)
        written.extend(renderer.render_files(diagrams, target_dir))

    logger.info("Generated %d file(s) in %s", len(written), target_dir)
    return written
