"""CapabilityStatement data model.

Only the parts of the FHIR resource that the narrative uses are modelled.
Field aliases follow the FHIR JSON names so records can be built directly
from parsed JSON with ``CapabilityStatement.model_validate(data)``.
"""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Code systems
# ---------------------------------------------------------------------------

class RestfulCapabilityMode(str, Enum):
    client = "client"
    server = "server"


class SystemRestfulInteraction(str, Enum):
    transaction = "transaction"
    batch = "batch"
    search_system = "search-system"
    history_system = "history-system"


class TypeRestfulInteraction(str, Enum):
    read = "read"
    vread = "vread"
    update = "update"
    patch = "patch"
    delete = "delete"
    history_instance = "history-instance"
    history_type = "history-type"
    create = "create"
    search_type = "search-type"


class PublicationStatus(str, Enum):
    draft = "draft"
    active = "active"
    retired = "retired"
    unknown = "unknown"


# ---------------------------------------------------------------------------
# Components
# ---------------------------------------------------------------------------

class FhirModel(BaseModel):
    """Base for all resource parts: immutable, tolerant of unmodelled fields."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="ignore",
    )


class SystemInteraction(FhirModel):
    code: SystemRestfulInteraction
    documentation: str | None = None


class ResourceInteraction(FhirModel):
    code: TypeRestfulInteraction
    documentation: str | None = None


class CapabilityStatementRestResource(FhirModel):
    """One resource type exposed by a rest interface."""

    type: str | None = None
    profile: str | None = None
    documentation: str | None = None
    interaction: list[ResourceInteraction] = Field(default_factory=list)


class CapabilityStatementRest(FhirModel):
    """A RESTful interface declared by the statement."""

    mode: RestfulCapabilityMode | None = None
    documentation: str | None = None
    interaction: list[SystemInteraction] = Field(default_factory=list)
    resource: list[CapabilityStatementRestResource] = Field(default_factory=list)


class CapabilityStatement(FhirModel):
    resource_type: Literal["CapabilityStatement"] = Field(
        default="CapabilityStatement", alias="resourceType",
    )
    id: str | None = None
    url: str | None = None
    version: str | None = None
    name: str | None = None
    title: str | None = None
    status: PublicationStatus | None = None
    publisher: str | None = None
    description: str | None = None
    rest: list[CapabilityStatementRest] = Field(default_factory=list)

    def present(self) -> str:
        """Short human-readable label for the statement."""
        return self.title or self.name or self.url or self.resource_type
