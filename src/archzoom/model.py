"""Read-only data model for collected project and call-dependency metadata."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ModuleInfo:
    """A module of a build unit, identified by its tag."""

    tag: str
    module_name: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ModuleInfo:
        return cls(tag=data["tag"], module_name=data.get("moduleName") or data["tag"])


@dataclass(frozen=True)
class ComponentInfo:
    """A package-level component and the packages it uses within its unit."""

    package_name: str
    depends_on: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ComponentInfo:
        # dependsOn is a set upstream; keep first-seen order, drop repeats
        deps = tuple(dict.fromkeys(data.get("dependsOn") or ()))
        return cls(package_name=data["packageName"], depends_on=deps)


@dataclass(frozen=True)
class ModuleComponents:
    """The components that live in one module."""

    module_name: str
    components: tuple[ComponentInfo, ...] = ()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ModuleComponents:
        return cls(
            module_name=data["moduleName"],
            components=tuple(
                ComponentInfo.from_dict(c) for c in data.get("components") or ()
            ),
        )


@dataclass(frozen=True)
class ProjectMetadata:
    """Everything collected about one build unit (one metadata file record).

    ``module_dependencies`` is ``None`` when nothing was collected, which is
    distinct from an empty mapping.
    """

    tag: str
    project_name: str | None = None
    system: str | None = None
    subsystem: str | None = None
    module_dependencies: dict[str, tuple[str, ...]] | None = None
    modules: tuple[ModuleInfo, ...] = ()
    components: tuple[ModuleComponents, ...] = ()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ProjectMetadata:
        raw_deps = data.get("moduleDependencies")
        module_deps = None
        if raw_deps is not None:
            module_deps = {k: tuple(v or ()) for k, v in raw_deps.items()}
        return cls(
            tag=data["tag"],
            project_name=data.get("projectName"),
            system=data.get("system"),
            subsystem=data.get("subsystem"),
            module_dependencies=module_deps,
            modules=tuple(ModuleInfo.from_dict(m) for m in data.get("modules") or ()),
            components=tuple(
                ModuleComponents.from_dict(c) for c in data.get("components") or ()
            ),
        )

    def component_names(self) -> list[str]:
        """Return every component package name of this unit, in order."""
        return [c.package_name for mc in self.components for c in mc.components]


@dataclass(frozen=True)
class CallDependency:
    """One observed API call from one service to another."""

    service_package: str
    depends_on_package: str
    service: str
    depends_on: str
    method: str = ""
    path: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CallDependency:
        return cls(
            service_package=data.get("servicePackage") or "",
            depends_on_package=data.get("dependsOnPackage") or "",
            service=data["service"],
            depends_on=data["dependsOn"],
            method=data.get("method") or "",
            path=data.get("path") or "",
        )


@dataclass(frozen=True)
class ApiMetadata:
    """Collected API description of one service, kept opaque for connectors."""

    tag: str
    project_name: str | None = None
    payload: dict[str, Any] = field(default_factory=dict, compare=False)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ApiMetadata:
        return cls(tag=data["tag"], project_name=data.get("projectName"), payload=data)
