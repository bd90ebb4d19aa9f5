"""Package diagrams of the components in each unit and the calls between them."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from archzoom.model import CallDependency, ProjectMetadata
from archzoom.plantuml import (
    component,
    diagram_key,
    nest_in_services,
    output_key,
    quoted,
    service_labels,
    wrap,
)
from archzoom.resolver import component_call_edges, known_components

logger = logging.getLogger(__name__)


class ComponentDiagramBuilder:
    """One diagram per unit with module-dependency data, plus ``all_components``.

    Call edges in ``all_components`` resolve against the components of every
    unit, including the skipped ones.
    """

    flavor = "components"

    def build(
        self,
        projects: Sequence[ProjectMetadata],
        dependencies: Sequence[CallDependency] | None = None,
    ) -> dict[str, str]:
        logger.info("Creating component diagrams")
        per_unit: dict[str, str] = {}
        for project in projects:
            if project.module_dependencies is None:
                logger.info(
                    "No module dependency info found for: %s",
                    project.project_name or project.tag,
                )
                continue
            per_unit[project.tag] = wrap(component_diagram_body(project))

        result = {diagram_key(tag, self.flavor): text for tag, text in per_unit.items()}
        result[output_key("all_components")] = nest_in_services(
            per_unit,
            service_labels(projects),
            trailer=call_edges_body(projects, dependencies),
        )
        return result


def component_diagram_body(project: ProjectMetadata) -> str:
    """Return the unwrapped component diagram of *project*."""
    lines: list[str] = []
    for module in project.components:
        lines.append(f"package {quoted(module.module_name)} {{ \n")
        lines.extend(f"{component(c.package_name)} \n" for c in module.components)
        lines.append("}\n\n")
    lines.append("\n")

    for module in project.components:
        for info in module.components:
            for dep in info.depends_on:
                lines.append(
                    f"{component(info.package_name)} ..> {component(dep)} : use \n"
                )
        lines.append("\n")
    return "".join(lines)


def call_edges_body(
    projects: Sequence[ProjectMetadata],
    dependencies: Sequence[CallDependency] | None,
) -> str:
    """Return one ``call`` edge per distinct (caller, callee) component pair."""
    if not dependencies:
        logger.info("No call dependencies between components found")
        return ""
    edges = component_call_edges(dependencies, known_components(projects))
    logger.debug(
        "Component call edges: %d from %d calls", len(edges), len(dependencies)
    )
    return "".join(
        f"{component(caller)} ..> {component(callee)} : call \n"
        for caller, callee in edges
    )
