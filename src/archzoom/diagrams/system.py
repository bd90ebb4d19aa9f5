"""System overview: each system with its subsystems."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from archzoom.model import CallDependency, ProjectMetadata
from archzoom.plantuml import empty_package, group_label, output_key, quoted, wrap

logger = logging.getLogger(__name__)


def group_subsystems(projects: Sequence[ProjectMetadata]) -> dict[str, list[str]]:
    """Map each system to its distinct subsystems, in first-seen order."""
    groups: dict[str, dict[str, None]] = {}
    for project in projects:
        subsystems = groups.setdefault(group_label(project.system), {})
        subsystems[group_label(project.subsystem)] = None
    return {system: list(subsystems) for system, subsystems in groups.items()}


class SystemDiagramBuilder:
    flavor = "systems"

    def build(
        self,
        projects: Sequence[ProjectMetadata],
        dependencies: Sequence[CallDependency] | None = None,
    ) -> dict[str, str]:
        logger.info("Creating system diagram")
        lines: list[str] = []
        for system, subsystems in group_subsystems(projects).items():
            lines.append(f"package {quoted(system)} {{\n")
            lines.extend(empty_package(sub) for sub in subsystems)
            lines.append("}\n\n")
        return {output_key(self.flavor): wrap("".join(lines))}
