"""Minimal XHTML tree used as the output of every renderer.

Renderers receive an :class:`XhtmlNode` owned by the caller and append to
it.  Builder methods (``h2``, ``table``, ``tr``, ...) create a child element
and return it, so calls chain naturally::

    x = XhtmlNode.div()
    x.table().tr().td().add_text("Mode")
    print(x.render())
"""

from __future__ import annotations

import enum
from html import escape
from typing import Iterator

# Elements serialized without a closing tag
VOID_ELEMENTS = frozenset({
    "area", "base", "br", "col", "embed", "hr", "img", "input",
    "link", "meta", "param", "source", "track", "wbr",
})


class NodeType(str, enum.Enum):
    element = "element"
    text = "text"


class XhtmlNode:
    """An element or text node in an XHTML fragment."""

    def __init__(self, node_type: NodeType = NodeType.element,
                 name: str | None = None, content: str | None = None):
        self.node_type = node_type
        self.name = name
        self.content = content
        self.attributes: dict[str, str] = {}
        self.children: list[XhtmlNode] = []

    @classmethod
    def div(cls) -> XhtmlNode:
        node = cls(NodeType.element, "div")
        node.attributes["xmlns"] = "http://www.w3.org/1999/xhtml"
        return node

    # --- building ---

    def add_tag(self, name: str) -> XhtmlNode:
        if self.node_type != NodeType.element:
            raise ValueError("Text nodes cannot have children")
        child = XhtmlNode(NodeType.element, name)
        self.children.append(child)
        return child

    def add_text(self, text: str | None) -> XhtmlNode:
        """Append a text node.  ``None`` and empty strings add nothing.

        Returns ``self`` so a cell can be created and filled in one line.
        """
        if text:
            self.children.append(XhtmlNode(NodeType.text, content=text))
        return self

    tx = add_text

    def add_children(self, nodes: list[XhtmlNode]) -> XhtmlNode:
        self.children.extend(nodes)
        return self

    def attribute(self, name: str, value: str | None) -> XhtmlNode:
        if value is not None:
            self.attributes[name] = value
        return self

    def h2(self) -> XhtmlNode:
        return self.add_tag("h2")

    def table(self, css_class: str | None = None) -> XhtmlNode:
        return self.add_tag("table").attribute("class", css_class)

    def tr(self) -> XhtmlNode:
        return self.add_tag("tr")

    def th(self) -> XhtmlNode:
        return self.add_tag("th")

    def td(self) -> XhtmlNode:
        return self.add_tag("td")

    def b(self) -> XhtmlNode:
        return self.add_tag("b")

    def ah(self, href: str) -> XhtmlNode:
        return self.add_tag("a").attribute("href", href)

    # --- inspection ---

    def iter(self, name: str | None = None) -> Iterator[XhtmlNode]:
        """Depth-first iteration over element descendants (self included)."""
        if self.node_type == NodeType.element and (name is None or self.name == name):
            yield self
        for child in self.children:
            yield from child.iter(name)

    def element_children(self, name: str | None = None) -> list[XhtmlNode]:
        return [
            c for c in self.children
            if c.node_type == NodeType.element and (name is None or c.name == name)
        ]

    def all_text(self) -> str:
        if self.node_type == NodeType.text:
            return self.content or ""
        return "".join(c.all_text() for c in self.children)

    # --- serialization ---

    def render(self) -> str:
        if self.node_type == NodeType.text:
            return escape(self.content or "", quote=False)
        attrs = "".join(
            f' {k}="{escape(v, quote=True)}"' for k, v in self.attributes.items()
        )
        if self.name in VOID_ELEMENTS and not self.children:
            return f"<{self.name}{attrs}/>"
        inner = "".join(c.render() for c in self.children)
        return f"<{self.name}{attrs}>{inner}</{self.name}>"

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        if self.node_type == NodeType.text:
            return f"XhtmlNode(text={self.content!r})"
        return f"XhtmlNode(<{self.name}>, {len(self.children)} children)"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, XhtmlNode):
            return NotImplemented
        return (
            self.node_type == other.node_type
            and self.name == other.name
            and self.content == other.content
            and self.attributes == other.attributes
            and self.children == other.children
        )

    __hash__ = None  # mutable
