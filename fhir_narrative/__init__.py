"""XHTML narratives for FHIR conformance resources."""

from fhir_narrative.errors import (
    FormattingError,
    NarrativeError,
    RendererNotFoundError,
    StructuralError,
)
from fhir_narrative.renderers import (
    CapabilityStatementRenderer,
    RendererRegistry,
    RenderingContext,
    ResourceRenderer,
)
from fhir_narrative.xhtml import XhtmlNode

__version__ = "0.1.0"

__all__ = [
    "CapabilityStatementRenderer",
    "FormattingError",
    "NarrativeError",
    "RendererNotFoundError",
    "RendererRegistry",
    "RenderingContext",
    "ResourceRenderer",
    "StructuralError",
    "XhtmlNode",
]
