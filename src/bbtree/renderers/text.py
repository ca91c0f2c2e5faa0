"""Plain text renderer.

Writes only the visible text of a tree: text and code contents and the
display text of links. Tags, attributions, link targets and images are
dropped. Useful for excerpts, search indexing and length checks.

Example:
    >>> from bbtree import parse, render_text
    >>> render_text(parse("[b]Hello[/b] [url=x.org]there[/url]"))
    'Hello there'
"""

from __future__ import annotations

from bbtree.nodes import DecorationStyle, ListStyle
from bbtree.renderers.base import Renderer


class TextRenderer(Renderer):
    """Render segments to unformatted text."""

    __slots__ = ()

    def text(self, content: str) -> None:
        self._out.write(content)

    def code(self, content: str) -> None:
        self._out.write(content)

    def image(self, src: str) -> None:
        pass

    def decoration_begin(self, style: DecorationStyle) -> None:
        pass

    def decoration_end(self, style: DecorationStyle) -> None:
        pass

    def quote_begin(self, attribution: str | None) -> None:
        pass

    def quote_end(self, attribution: str | None) -> None:
        pass

    def list_begin(self, style: ListStyle) -> None:
        pass

    def list_item_begin(self, style: ListStyle) -> None:
        pass

    def list_item_end(self, style: ListStyle) -> None:
        pass

    def list_end(self, style: ListStyle) -> None:
        pass

    def link_begin(self, target: str) -> None:
        pass

    def link_end(self, target: str) -> None:
        pass
