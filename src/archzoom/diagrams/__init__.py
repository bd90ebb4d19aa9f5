"""Diagram flavors, one builder per level of granularity."""

from __future__ import annotations

from archzoom.config import Settings
from archzoom.diagrams.base import DiagramBuilder
from archzoom.diagrams.component import ComponentDiagramBuilder
from archzoom.diagrams.module import ModuleDiagramBuilder
from archzoom.diagrams.service import ServiceDiagramBuilder
from archzoom.diagrams.system import SystemDiagramBuilder

__all__ = [
    "ComponentDiagramBuilder",
    "DiagramBuilder",
    "ModuleDiagramBuilder",
    "ServiceDiagramBuilder",
    "SystemDiagramBuilder",
    "default_builders",
]


def default_builders(settings: Settings | None = None) -> list[DiagramBuilder]:
    """Return all builders in merge order: modules, components, systems, services."""
    settings = settings or Settings()
    return [
        ModuleDiagramBuilder(),
        ComponentDiagramBuilder(),
        SystemDiagramBuilder(),
        ServiceDiagramBuilder(default_service=settings.default_service),
    ]
