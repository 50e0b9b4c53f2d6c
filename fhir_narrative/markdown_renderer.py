"""Markdown to XHTML conversion for narrative text fields."""

from __future__ import annotations

import logging
from html.parser import HTMLParser

import markdown

from fhir_narrative.errors import FormattingError
from fhir_narrative.xhtml import VOID_ELEMENTS, XhtmlNode

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS: tuple[str, ...] = ("extra",)


# Narratives may not carry active content
FORBIDDEN_ELEMENTS = frozenset({
    "script", "style", "iframe", "object", "embed", "form", "input",
    "button", "textarea", "select", "base", "link", "meta",
})


class _TreeBuilder(HTMLParser):
    """Parses an HTML fragment into XhtmlNode children of a holder node."""

    def __init__(self):
        super().__init__(convert_charrefs=True)
        self.root = XhtmlNode(name="fragment")
        self._stack: list[XhtmlNode] = [self.root]

    def _add_element(self, tag, attrs) -> XhtmlNode:
        if tag in FORBIDDEN_ELEMENTS:
            raise FormattingError(f"Element <{tag}> is not allowed in a narrative")
        node = self._stack[-1].add_tag(tag)
        for name, value in attrs:
            if name.startswith("on"):
                raise FormattingError(f"Event attribute {name} is not allowed in a narrative")
            node.attribute(name, value if value is not None else name)
        return node

    def handle_starttag(self, tag, attrs):
        node = self._add_element(tag, attrs)
        if tag not in VOID_ELEMENTS:
            self._stack.append(node)

    def handle_startendtag(self, tag, attrs):
        self._add_element(tag, attrs)

    def handle_endtag(self, tag):
        if tag in VOID_ELEMENTS:
            return
        top = self._stack[-1]
        if top is self.root:
            raise FormattingError(f"Unexpected closing tag </{tag}> in markdown output")
        if top.name != tag:
            raise FormattingError(
                f"Unexpected closing tag </{tag}>, <{top.name}> is still open"
            )
        self._stack.pop()

    def handle_data(self, data):
        self._stack[-1].add_text(data)

    def finish(self) -> list[XhtmlNode]:
        self.close()
        if len(self._stack) > 1:
            open_tags = ", ".join(n.name for n in self._stack[1:])
            raise FormattingError(f"Unclosed tags in markdown output: {open_tags}")
        return self.root.children


class MarkdownRenderer:
    """Renders markdown text and appends the result to an output node.

    Uses Python-Markdown for the conversion; any raw HTML the text carries is
    passed through and must be well formed, without scripts, styles,
    forms or event handler attributes.
    """

    def __init__(self, extensions: list[str] | tuple[str, ...] = DEFAULT_EXTENSIONS):
        self.extensions = list(extensions)

    def to_nodes(self, text: str) -> list[XhtmlNode]:
        if not isinstance(text, str):
            raise FormattingError(f"Markdown must be text, got {type(text).__name__}")
        try:
            html = markdown.markdown(text, extensions=self.extensions)
        except (ImportError, AttributeError, ValueError) as e:
            # Raised by Python-Markdown for unknown or broken extensions
            raise FormattingError(f"Cannot render markdown: {e}") from e
        builder = _TreeBuilder()
        builder.feed(html)
        return builder.finish()

    def render(self, x: XhtmlNode, text: str | None) -> None:
        """Append the rendering of *text* to *x*.  Blank text adds nothing."""
        if text is None or (isinstance(text, str) and not text.strip()):
            return
        nodes = self.to_nodes(text)
        logger.debug("Rendered %d markdown block(s)", len(nodes))
        x.add_children(nodes)
