"""Exceptions raised while building narratives."""

from __future__ import annotations


class NarrativeError(Exception):
    """Base class for all narrative rendering errors."""


class FormattingError(NarrativeError):
    """Markdown or markup that cannot be turned into XHTML."""


class StructuralError(NarrativeError):
    """A field the renderer needs is absent from the resource."""

    def __init__(self, resource_type: str, field: str):
        self.resource_type = resource_type
        self.field = field
        super().__init__(f"{resource_type}.{field} is required for rendering")


class RendererNotFoundError(NarrativeError, KeyError):
    """No renderer is registered for a resource type."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message
        return str(self.args[0]) if self.args else ""
