"""Exceptions raised by archzoom's I/O collaborators."""

from __future__ import annotations


class ArchzoomError(Exception):
    """Base class for archzoom errors."""


class MetadataError(ArchzoomError, ValueError):
    """A collected metadata file could not be read or understood."""


class RenderError(ArchzoomError, RuntimeError):
    """The PlantUML renderer failed on a diagram."""
