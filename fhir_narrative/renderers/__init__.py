"""Resource renderers and the registry that dispatches to them."""

from fhir_narrative.renderers.base import ResourceRenderer
from fhir_narrative.renderers.capability_statement import CapabilityStatementRenderer
from fhir_narrative.renderers.context import RenderingContext
from fhir_narrative.renderers.registry import RendererRegistry

__all__ = [
    "CapabilityStatementRenderer",
    "RendererRegistry",
    "RenderingContext",
    "ResourceRenderer",
]
