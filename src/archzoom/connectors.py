"""Service connectors turn collected API metadata into call dependencies."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from archzoom.loader import load_call_dependencies
from archzoom.model import ApiMetadata, CallDependency

logger = logging.getLogger(__name__)


class ServiceConnector(Protocol):
    """Protocol for matching API consumers to API providers."""

    def connect_services(
        self, api_metadata: Sequence[ApiMetadata]
    ) -> list[CallDependency] | None:
        """Return the calls between services described by *api_metadata*."""
        ...


class JsonDependencyConnector:
    """Serve call dependencies that were resolved ahead of time into a JSON file."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def connect_services(
        self, api_metadata: Sequence[ApiMetadata]
    ) -> list[CallDependency] | None:
        dependencies = load_call_dependencies(self.path)
        logger.debug(
            "Loaded %d call dependencies for %d API description(s) from %s",
            len(dependencies),
            len(api_metadata),
            self.path,
        )
        return dependencies
