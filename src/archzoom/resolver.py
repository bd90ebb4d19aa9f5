"""Resolve service call dependencies onto the components that own them."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from archzoom.model import CallDependency, ProjectMetadata

logger = logging.getLogger(__name__)

EXTERN = "EXTERN"


def known_components(projects: Iterable[ProjectMetadata]) -> list[str]:
    """Return all component package names across *projects*, in input order."""
    return [name for project in projects for name in project.component_names()]


def resolve_component(package: str, components: Sequence[str]) -> str:
    """Return the longest component name that prefixes *package*.

    Equal-length matches keep the first one seen.  Returns :data:`EXTERN` when
    no known component matches.
    """
    best = ""
    for candidate in components:
        if package.startswith(candidate) and len(candidate) > len(best):
            best = candidate
    return best or EXTERN


def component_call_edges(
    dependencies: Iterable[CallDependency] | None, components: Sequence[str]
) -> list[tuple[str, str]]:
    """Collapse call dependencies into unique (caller, callee) component pairs.

    Every known component that prefixes a call's ``service_package`` owns that
    call; calls with no owner are dropped.  The callee is resolved with
    :func:`resolve_component`.  Pairs keep the order of their first occurrence,
    and self-loops are kept.
    """
    edges: list[tuple[str, str]] = []
    seen: set[tuple[str, str]] = set()
    dropped = 0
    for dep in dependencies or ():
        owners = [c for c in components if dep.service_package.startswith(c)]
        if not owners:
            dropped += 1
            continue
        callee = resolve_component(dep.depends_on_package, components)
        for owner in owners:
            pair = (owner, callee)
            if pair not in seen:
                seen.add(pair)
                edges.append(pair)
    if dropped:
        logger.debug("Dropped %d call(s) without an owning component", dropped)
    return edges
