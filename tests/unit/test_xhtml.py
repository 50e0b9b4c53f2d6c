"""Unit tests for fhir_narrative.xhtml."""

from __future__ import annotations

import pytest

from fhir_narrative.xhtml import NodeType, XhtmlNode


class TestBuilding:
    def test_builders_return_child(self):
        x = XhtmlNode(name="div")
        td = x.table().tr().td()
        assert td.name == "td"
        assert x.render() == "<div><table><tr><td></td></tr></table></div>"

    def test_add_text_returns_self(self):
        x = XhtmlNode(name="td")
        assert x.add_text("a") is x
        assert x.tx("b") is x
        assert x.all_text() == "ab"

    @pytest.mark.parametrize("value", [None, ""])
    def test_blank_text_adds_nothing(self, value):
        x = XhtmlNode(name="td")
        x.add_text(value)
        assert x.children == []

    def test_attribute_none_is_skipped(self):
        t = XhtmlNode(name="div").table(None)
        assert t.attributes == {}
        t = XhtmlNode(name="div").table("grid")
        assert t.attributes == {"class": "grid"}

    def test_link(self):
        a = XhtmlNode(name="td").ah("http://x/y?a=1&b=2")
        a.add_text("y")
        assert a.render() == '<a href="http://x/y?a=1&amp;b=2">y</a>'

    def test_text_node_cannot_have_children(self):
        with pytest.raises(ValueError):
            XhtmlNode(NodeType.text, content="x").add_tag("b")


class TestRender:
    def test_escapes_text(self):
        x = XhtmlNode(name="p").add_text("<b> & \"q\"")
        assert x.render() == "<p>&lt;b&gt; &amp; \"q\"</p>"

    def test_escapes_attributes(self):
        x = XhtmlNode(name="b").attribute("title", 'say "hi"')
        assert x.render() == '<b title="say &quot;hi&quot;"></b>'

    def test_void_elements(self):
        x = XhtmlNode(name="p")
        x.add_tag("br")
        assert x.render() == "<p><br/></p>"

    def test_div_namespace(self):
        assert str(XhtmlNode.div()) == '<div xmlns="http://www.w3.org/1999/xhtml"></div>'


class TestInspection:
    def test_equality_is_structural(self):
        a, b = XhtmlNode.div(), XhtmlNode.div()
        a.h2().add_text("x")
        assert a != b
        b.h2().add_text("x")
        assert a == b

    def test_iter_by_name(self):
        x = XhtmlNode.div()
        x.table().tr().td()
        x.table().tr().td()
        assert len(list(x.iter("td"))) == 2
        assert len(list(x.iter())) == 7

    def test_element_children_skip_text(self):
        x = XhtmlNode(name="p").add_text("a")
        x.b()
        assert [c.name for c in x.element_children()] == ["b"]
