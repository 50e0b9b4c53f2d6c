"""Resource models consumed by the renderers."""

from fhir_narrative.models.capability import (
    CapabilityStatement,
    CapabilityStatementRest,
    CapabilityStatementRestResource,
    PublicationStatus,
    ResourceInteraction,
    RestfulCapabilityMode,
    SystemInteraction,
    SystemRestfulInteraction,
    TypeRestfulInteraction,
)

__all__ = [
    "CapabilityStatement",
    "CapabilityStatementRest",
    "CapabilityStatementRestResource",
    "PublicationStatus",
    "ResourceInteraction",
    "RestfulCapabilityMode",
    "SystemInteraction",
    "SystemRestfulInteraction",
    "TypeRestfulInteraction",
]
