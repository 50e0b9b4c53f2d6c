"""Renderer registry: dispatches resources to renderers by resource type."""

from __future__ import annotations

import importlib
import logging
from typing import Any

from fhir_narrative.config import NarrativeConfig
from fhir_narrative.errors import RendererNotFoundError
from fhir_narrative.renderers.base import ResourceRenderer
from fhir_narrative.renderers.context import RenderingContext
from fhir_narrative.xhtml import XhtmlNode

logger = logging.getLogger(__name__)

# Built-in renderers, imported on first use
_BUILTIN_RENDERERS: dict[str, str] = {
    "CapabilityStatement":
        "fhir_narrative.renderers.capability_statement:CapabilityStatementRenderer",
}


def _import_renderer(dotted_path: str) -> type[ResourceRenderer]:
    """Import a renderer class from a dotted path like 'module.path:ClassName'."""
    module_path, class_name = dotted_path.rsplit(":", 1)
    module = importlib.import_module(module_path)
    return getattr(module, class_name)


def resource_type_of(resource: Any) -> str:
    rtype = getattr(resource, "resource_type", None)
    if not rtype:
        raise RendererNotFoundError(
            f"Cannot determine resource type of {type(resource).__name__}"
        )
    return rtype


class RendererRegistry:
    """Maps FHIR resource types to renderer implementations.

    Usage::

        registry = RendererRegistry(RenderingContext(prefix="http://hl7.org/fhir/"))
        x = XhtmlNode.div()
        registry.render(x, statement)
    """

    def __init__(self, context: RenderingContext | None = None) -> None:
        self.context = context or RenderingContext()
        self._renderers: dict[str, type[ResourceRenderer] | str] = dict(_BUILTIN_RENDERERS)
        self._instances: dict[str, ResourceRenderer] = {}

    @classmethod
    def from_config(cls, config: NarrativeConfig) -> RendererRegistry:
        registry = cls(RenderingContext.from_config(config))
        for resource_type, dotted in config.renderers.items():
            registry.register(resource_type, dotted)
        return registry

    def register(
        self,
        resource_type: str,
        renderer: type[ResourceRenderer] | str,
    ) -> None:
        """Register a renderer class (or its dotted path) for *resource_type*.

        Replaces any renderer already registered for the type.
        """
        if resource_type in self._renderers:
            name = renderer if isinstance(renderer, str) else renderer.__name__
            logger.info("Overriding renderer for %s with %s", resource_type, name)
        self._renderers[resource_type] = renderer
        self._instances.pop(resource_type, None)

    def get(self, resource_type: str) -> ResourceRenderer:
        """Return the renderer for *resource_type*, creating it on first use."""
        instance = self._instances.get(resource_type)
        if instance is not None:
            return instance

        entry = self._renderers.get(resource_type)
        if entry is None:
            raise RendererNotFoundError(
                f"No renderer registered for {resource_type}. "
                f"Available: {self.list_renderers() or 'none'}"
            )
        if isinstance(entry, str):
            logger.debug("Importing renderer %s for %s", entry, resource_type)
            cls = _import_renderer(entry)
            self._renderers[resource_type] = cls
        else:
            cls = entry

        instance = cls(self.context)
        self._instances[resource_type] = instance
        return instance

    def list_renderers(self) -> list[str]:
        return sorted(self._renderers.keys())

    # --- dispatch ---

    def render(self, x: XhtmlNode, resource: Any) -> bool:
        return self.get(resource_type_of(resource)).render(x, resource)

    def describe(self, x: XhtmlNode, resource: Any) -> None:
        self.get(resource_type_of(resource)).describe(x, resource)

    def display(self, resource: Any) -> str:
        return self.get(resource_type_of(resource)).display(resource)
