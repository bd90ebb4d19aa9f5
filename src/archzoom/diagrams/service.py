"""Service landscape: systems, subsystems, services and the calls between them."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from archzoom.model import CallDependency, ProjectMetadata
from archzoom.plantuml import empty_package, group_label, output_key, quoted, wrap

logger = logging.getLogger(__name__)

EXTERNAL = "external"


def group_services(
    projects: Sequence[ProjectMetadata],
) -> dict[str, dict[str, list[str]]]:
    """Map system → subsystem → service display names, in input order."""
    groups: dict[str, dict[str, list[str]]] = {}
    for project in projects:
        subsystems = groups.setdefault(group_label(project.system), {})
        subsystems.setdefault(group_label(project.subsystem), []).append(
            project.project_name or project.tag
        )
    return groups


class ServiceDiagramBuilder:
    """Nested service packages followed by one edge per API call.

    Calls to ``external`` or to *default_service* share a single
    ``external`` package.
    """

    flavor = "services"

    def __init__(self, default_service: str = "default") -> None:
        self.default_service = default_service

    def build(
        self,
        projects: Sequence[ProjectMetadata],
        dependencies: Sequence[CallDependency] | None = None,
    ) -> dict[str, str]:
        logger.info("Creating service diagram")
        lines: list[str] = []
        for system, subsystems in group_services(projects).items():
            lines.append(f"package {quoted(system)} {{\n")
            for subsystem, services in subsystems.items():
                lines.append(f"package {quoted(subsystem)} {{\n")
                lines.extend(empty_package(service) for service in services)
                lines.append("}\n")
            lines.append("}\n\n")

        if dependencies is not None:
            if any(self._is_external(dep) for dep in dependencies):
                lines.append(empty_package(EXTERNAL))
            lines.append(service_edges_body(dependencies))
        return {output_key(self.flavor): wrap("".join(lines))}

    def _is_external(self, dep: CallDependency) -> bool:
        target = dep.depends_on.casefold()
        return target in (EXTERNAL, self.default_service.casefold())


def service_edges_body(dependencies: Sequence[CallDependency]) -> str:
    if not dependencies:
        logger.info("No dependencies between services found")
        return ""
    return "".join(
        f"{quoted(dep.service)}-->{quoted(dep.depends_on)} "
        f': "{dep.method} : {dep.path}"\n'
        for dep in dependencies
    )
