"""Package diagrams of the dependencies between the modules of each unit."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from archzoom.model import CallDependency, ProjectMetadata
from archzoom.plantuml import (
    diagram_key,
    empty_package,
    module_names,
    nest_in_services,
    output_key,
    quoted,
    service_labels,
    wrap,
)

logger = logging.getLogger(__name__)


class ModuleDiagramBuilder:
    """One diagram per unit with module-dependency data, plus ``all_modules``."""

    flavor = "modules"

    def build(
        self,
        projects: Sequence[ProjectMetadata],
        dependencies: Sequence[CallDependency] | None = None,
    ) -> dict[str, str]:
        logger.info("Creating module diagrams")
        per_unit: dict[str, str] = {}
        for project in projects:
            if project.module_dependencies is None:
                logger.info(
                    "No module dependency info found for: %s",
                    project.project_name or project.tag,
                )
                continue
            per_unit[project.tag] = wrap(module_diagram_body(project))

        result = {diagram_key(tag, self.flavor): text for tag, text in per_unit.items()}
        result[output_key("all_modules")] = nest_in_services(
            per_unit, service_labels(projects)
        )
        return result


def module_diagram_body(project: ProjectMetadata) -> str:
    """Return the unwrapped module diagram of *project*."""
    names = module_names(project)

    def name(tag: str) -> str:
        return names.get(tag.casefold(), tag)

    deps = project.module_dependencies or {}
    lines = [empty_package(name(module)) for module in deps]
    lines.append("\n")
    for module, targets in deps.items():
        for target in targets:
            lines.append(f"{quoted(name(module))} --> {quoted(name(target))}\n")
    return "".join(lines)
