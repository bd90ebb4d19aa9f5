"""PlantUML boilerplate, output-key naming and tag → display-name lookups."""

from __future__ import annotations

from collections.abc import Iterable

from archzoom.model import ProjectMetadata

BEGIN_DIAGRAM = "@startuml\n skinparam componentStyle uml2\n\n"
END_DIAGRAM = "@enduml\n"

TEXT_EXTENSION = "txt"

# Package label for a unit whose system or subsystem was not collected.
UNASSIGNED = "unassigned"


def wrap(body: str) -> str:
    """Surround a diagram body with the fixed preamble and terminator."""
    return BEGIN_DIAGRAM + body + END_DIAGRAM


def unwrap(diagram: str) -> str:
    """Strip the preamble and terminator added by :func:`wrap`."""
    return diagram.removeprefix(BEGIN_DIAGRAM).removesuffix(END_DIAGRAM)


def nest_in_services(
    diagrams: dict[str, str], labels: dict[str, str], trailer: str = ""
) -> str:
    """Merge per-unit diagrams into one, each inside its service package.

    *diagrams* maps unit tags to wrapped diagrams; *trailer* is appended after
    the last service package (used for cross-unit edges).
    """
    parts: list[str] = []
    for tag, diagram in diagrams.items():
        label = labels.get(tag) or service_label(tag, None)
        parts.append(f"package {quoted(label)} {{ \n")
        parts.append(unwrap(diagram))
        parts.append("}\n\n")
    parts.append(trailer)
    return wrap("".join(parts))


def quoted(name: str) -> str:
    return f'"{name}"'


def component(name: str) -> str:
    return f'["{name}"]'


def empty_package(name: str) -> str:
    return f"package {quoted(name)} {{}}\n"


def group_label(value: str | None) -> str:
    return value or UNASSIGNED


def output_key(name: str) -> str:
    return f"{name}.{TEXT_EXTENSION}"


def diagram_key(tag: str, flavor: str) -> str:
    """Return the per-unit output key, e.g. ``core_plantUML_modules.txt``."""
    return output_key(f"{tag}_plantUML_{flavor}")


def split_key(key: str) -> tuple[str, str]:
    """Split an output key on its first ``.`` into ``(name, extension)``.

    Keys always carry an extension, so a key without a ``.`` is a caller bug.
    """
    name, sep, extension = key.partition(".")
    if not sep:
        raise ValueError(f"Output key without extension: {key!r}")
    return name, extension


def module_names(project: ProjectMetadata) -> dict[str, str]:
    """Map case-folded module tags to display names (first registration wins)."""
    names: dict[str, str] = {}
    for module in project.modules:
        names.setdefault(module.tag.casefold(), module.module_name)
    return names


def service_labels(projects: Iterable[ProjectMetadata]) -> dict[str, str]:
    """Map unit tags to their ``service: <name>`` package labels."""
    labels: dict[str, str] = {}
    for project in projects:
        labels.setdefault(project.tag, service_label(project.tag, project.project_name))
    return labels


def service_label(tag: str, project_name: str | None) -> str:
    return f"service: {project_name or tag}"
