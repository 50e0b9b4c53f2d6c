"""Shared test fixtures for fhir-narrative."""

from __future__ import annotations

import pytest

from fhir_narrative.models import (
    CapabilityStatement,
    CapabilityStatementRest,
    CapabilityStatementRestResource,
    ResourceInteraction,
    RestfulCapabilityMode,
    SystemInteraction,
    TypeRestfulInteraction as T,
)
from fhir_narrative.renderers import CapabilityStatementRenderer, RenderingContext
from fhir_narrative.xhtml import XhtmlNode

PREFIX = "http://example.org/"


# --- Builders ---


def make_resource(type_, *codes, profile=None):
    return CapabilityStatementRestResource(
        type=type_,
        profile=profile,
        interaction=[ResourceInteraction(code=c) for c in codes],
    )


def make_rest(*resources, mode=RestfulCapabilityMode.server, documentation=None,
              system=()):
    return CapabilityStatementRest(
        mode=mode,
        documentation=documentation,
        interaction=[SystemInteraction(code=c) for c in system],
        resource=list(resources),
    )


def make_statement(*rests, name="Test Server", description=None, **kwargs):
    return CapabilityStatement(name=name, description=description, rest=list(rests), **kwargs)


# --- Tree helpers ---


def tables(x: XhtmlNode) -> list[XhtmlNode]:
    return x.element_children("table")


def rows(table: XhtmlNode) -> list[list[str]]:
    """Cell texts of each row, header included."""
    return [[cell.all_text() for cell in tr.element_children()] for tr in table.element_children("tr")]


# --- Fixtures ---


@pytest.fixture
def context():
    return RenderingContext(prefix=PREFIX)


@pytest.fixture
def renderer(context):
    return CapabilityStatementRenderer(context)


@pytest.fixture
def test_server():
    """Two resources where only Observation supports delete."""
    return make_statement(
        make_rest(
            make_resource("Patient", T.read, T.search_type, T.update, T.create),
            make_resource("Observation", T.read, T.search_type, T.update, T.create, T.delete),
            documentation="Basic server",
        ),
        description="A *test* server",
    )
