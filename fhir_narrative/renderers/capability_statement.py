"""CapabilityStatement narrative: summary table plus a per-resource table."""

from __future__ import annotations

from collections.abc import Iterable
from typing import NamedTuple

from fhir_narrative.errors import StructuralError
from fhir_narrative.models.capability import (
    CapabilityStatement,
    CapabilityStatementRest,
    CapabilityStatementRestResource,
    ResourceInteraction,
    SystemInteraction,
    SystemRestfulInteraction,
    TypeRestfulInteraction,
)
from fhir_narrative.renderers.base import ResourceRenderer
from fhir_narrative.xhtml import XhtmlNode

PRESENT = "y"


class InteractionColumn(NamedTuple):
    code: TypeRestfulInteraction
    label: str
    tooltip: str
    optional: bool


# Column order of the resource table.  Optional columns are shown only when
# at least one resource in the interface supports the interaction.
INTERACTION_COLUMNS: tuple[InteractionColumn, ...] = (
    InteractionColumn(TypeRestfulInteraction.read, "Read",
                      "GET a resource (read interaction)", False),
    InteractionColumn(TypeRestfulInteraction.vread, "V-Read",
                      "GET past versions of resources (vread interaction)", True),
    InteractionColumn(TypeRestfulInteraction.search_type, "Search",
                      "GET all set of resources of the type (search interaction)", False),
    InteractionColumn(TypeRestfulInteraction.update, "Update",
                      "PUT a new resource version (update interaction)", False),
    InteractionColumn(TypeRestfulInteraction.patch, "Patch",
                      "PATCH a new resource version (patch interaction)", True),
    InteractionColumn(TypeRestfulInteraction.create, "Create",
                      "POST a new resource (create interaction)", False),
    InteractionColumn(TypeRestfulInteraction.delete, "Delete",
                      "DELETE a resource (delete interaction)", True),
    InteractionColumn(TypeRestfulInteraction.history_instance, "Updates",
                      "GET changes to a resource (history interaction on instance)", True),
    InteractionColumn(TypeRestfulInteraction.history_type, "History",
                      "GET changes for all resources of the type (history interaction on type)",
                      True),
)

SYSTEM_ROWS: tuple[tuple[str, SystemRestfulInteraction], ...] = (
    ("Transaction", SystemRestfulInteraction.transaction),
    ("System History", SystemRestfulInteraction.history_system),
    ("System Search", SystemRestfulInteraction.search_system),
)


def presence_marker(
    interactions: Iterable[ResourceInteraction | SystemInteraction],
    code: TypeRestfulInteraction | SystemRestfulInteraction,
) -> str:
    """Return ``"y"`` if *code* is among *interactions*, else ``""``."""
    for interaction in interactions:
        if interaction.code == code:
            return PRESENT
    return ""


def any_present(
    resources: Iterable[CapabilityStatementRestResource],
    code: TypeRestfulInteraction,
) -> bool:
    """True if at least one resource supports *code*."""
    return any(presence_marker(r.interaction, code) for r in resources)


def summary_text(statement: CapabilityStatement) -> str:
    return statement.present()


def select_columns(
    resources: list[CapabilityStatementRestResource],
) -> list[InteractionColumn]:
    """Columns for the resource table, in display order."""
    optional = {column.code for column in INTERACTION_COLUMNS if column.optional}
    supported: set[TypeRestfulInteraction] = set()
    for r in resources:
        supported.update(i.code for i in r.interaction if i.code in optional)
    return [
        column for column in INTERACTION_COLUMNS
        if not column.optional or column.code in supported
    ]


class CapabilityStatementRenderer(ResourceRenderer):
    resource_type = "CapabilityStatement"

    def render(self, x: XhtmlNode, resource: CapabilityStatement) -> bool:
        # Only the first interface is shown unless configured otherwise
        rests = resource.rest if self.context.all_rest_interfaces else resource.rest[:1]
        self._check_required(resource, rests)

        # Build detached so a failure leaves the caller's node untouched
        out = XhtmlNode(name="div")
        out.h2().add_text(resource.name)
        self.add_markdown(out, resource.description)
        for rest in rests:
            self._render_rest(out, rest)
        x.add_children(out.children)
        return True

    def display(self, resource: CapabilityStatement) -> str:
        return summary_text(resource)

    def _check_required(self, resource: CapabilityStatement,
                        rests: list[CapabilityStatementRest]) -> None:
        if resource.name is None:
            raise StructuralError(self.resource_type, "name")
        for rest in rests:
            if rest.mode is None:
                raise StructuralError(self.resource_type, "rest.mode")
            if any(not r.type for r in rest.resource):
                raise StructuralError(self.resource_type, "rest.resource.type")

    def _render_rest(self, x: XhtmlNode, rest: CapabilityStatementRest) -> None:
        t = x.table()
        self.add_table_row(t, "Mode", rest.mode.value.upper())
        self.add_table_row(t, "Description", rest.documentation or "")
        for label, code in SYSTEM_ROWS:
            self.add_table_row(t, label, presence_marker(rest.interaction, code))

        # Header columns depend on every resource, so select them first
        columns = select_columns(rest.resource)

        t = x.table()
        tr = t.tr()
        tr.th().b().tx("Resource Type")
        tr.th().b().tx("Profile")
        for column in columns:
            tr.th().b().attribute("title", column.tooltip).tx(column.label)

        for r in rest.resource:
            tr = t.tr()
            tr.td().add_text(r.type)
            td = tr.td()
            if r.profile:
                td.ah(self.context.prefix + r.profile).add_text(r.profile)
            for column in columns:
                tr.td().add_text(presence_marker(r.interaction, column.code))
