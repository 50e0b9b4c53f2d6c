"""Settings shared by every renderer in one rendering run."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from fhir_narrative.markdown_renderer import MarkdownRenderer

if TYPE_CHECKING:
    from fhir_narrative.config import NarrativeConfig


@dataclass(frozen=True)
class RenderingContext:
    """Immutable inputs to rendering besides the resource itself.

    ``prefix`` is prepended to relative references (e.g. profiles) when
    building links.
    """

    prefix: str = ""
    markdown: MarkdownRenderer = field(default_factory=MarkdownRenderer)
    all_rest_interfaces: bool = False

    @classmethod
    def from_config(cls, config: NarrativeConfig) -> RenderingContext:
        return cls(
            prefix=config.rendering.prefix,
            markdown=MarkdownRenderer(config.markdown.extensions),
            all_rest_interfaces=config.rendering.all_rest_interfaces,
        )
