"""Builder protocol — all diagram builders conform to this interface."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from archzoom.model import CallDependency, ProjectMetadata


class DiagramBuilder(Protocol):
    """Protocol for diagram flavors."""

    flavor: str

    def build(
        self,
        projects: Sequence[ProjectMetadata],
        dependencies: Sequence[CallDependency] | None,
    ) -> dict[str, str]:
        """Return a mapping from output key to PlantUML text."""
        ...
