"""Renderer base class: the contract every resource renderer implements."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from fhir_narrative.renderers.context import RenderingContext
from fhir_narrative.xhtml import XhtmlNode


class ResourceRenderer(ABC):
    """Base class for all resource renderers.

    A renderer appends a narrative for one resource to a caller-owned
    :class:`XhtmlNode`.  Renderers keep no state between calls beyond their
    context, so one instance can be reused for any number of resources.
    """

    # FHIR resourceType this renderer handles
    resource_type: str = ""

    def __init__(self, context: RenderingContext | None = None):
        self.context = context or RenderingContext()

    @abstractmethod
    def render(self, x: XhtmlNode, resource: Any) -> bool:
        """Append the full narrative for *resource* to *x*."""

    @abstractmethod
    def display(self, resource: Any) -> str:
        """Return a one-line label for *resource*."""

    def describe(self, x: XhtmlNode, resource: Any) -> None:
        x.tx(self.display(resource))

    # --- shared helpers ---

    def add_markdown(self, x: XhtmlNode, text: str | None) -> None:
        self.context.markdown.render(x, text)

    def add_table_row(self, t: XhtmlNode, name: str, value: str | None) -> None:
        tr = t.tr()
        tr.td().add_text(name)
        tr.td().add_text(value)
