"""Render visitor contract.

``Renderer`` walks a segment tree depth-first, pre-order, and calls one
hook per leaf and a begin/end pair per compound segment. Subclasses
implement the hooks; the traversal is shared.

Hook order for a compound segment is always begin, children, end, even
when there are no children (begin and end are then called back to back).
For a list, each item is bracketed by ``list_item_begin`` and
``list_item_end`` inside ``list_begin``/``list_end``.

Errors:
    Hooks write to a sink. Whatever a hook raises stops the traversal at
    once and propagates unchanged; nothing is retried or resumed.

Example:
    class Outline(Renderer):
        ...  # implement every hook

    Outline(sys.stdout).render(parse("[b]Hi[/b]"))

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING

from bbtree.nodes import Code, Decorated, Image, Link, List, Quote, Segment, Text

if TYPE_CHECKING:
    from bbtree.nodes import DecorationStyle, ListStyle
    from bbtree.renderers.protocol import Sink


class Renderer(ABC):
    """Base render visitor.

    Every hook is abstract: a renderer cannot be instantiated until it
    handles every kind of segment.

    """

    __slots__ = ("_out",)

    def __init__(self, out: Sink) -> None:
        """Initialize renderer.

        Args:
            out: Sink that receives the rendered output
        """
        self._out = out

    def render(self, segments: Sequence[Segment]) -> None:
        """Render segments in order.

        Args:
            segments: Top-level segments (or any child sequence)
        """
        for segment in segments:
            self.render_segment(segment)

    def render_segment(self, segment: Segment) -> None:
        """Render one segment and, recursively, its children."""
        match segment:
            case Text():
                self.text(segment.content)
            case Decorated(style=style, children=children):
                self.decoration_begin(style)
                self.render(children)
                self.decoration_end(style)
            case Quote(attribution=attribution, children=children):
                name = attribution.text if attribution is not None else None
                self.quote_begin(name)
                self.render(children)
                self.quote_end(name)
            case Code():
                self.code(segment.content)
            case List(style=style, items=items):
                self.list_begin(style)
                for item in items:
                    self.list_item_begin(style)
                    self.render(item)
                    self.list_item_end(style)
                self.list_end(style)
            case Link(target=target, children=children):
                self.link_begin(target.text)
                self.render(children)
                self.link_end(target.text)
            case Image(src=src):
                self.image(src.text)
            case _:
                msg = f"cannot render {type(segment).__name__}"
                raise TypeError(msg)

    # -- Leaf hooks ------------------------------------------------------------

    @abstractmethod
    def text(self, content: str) -> None:
        """Output some plain text."""

    @abstractmethod
    def code(self, content: str) -> None:
        """Output a block of code with contents ``content``."""

    @abstractmethod
    def image(self, src: str) -> None:
        """Output an image referring to ``src``."""

    # -- Compound hooks --------------------------------------------------------

    @abstractmethod
    def decoration_begin(self, style: DecorationStyle) -> None:
        """Output the beginning of a decorated span."""

    @abstractmethod
    def decoration_end(self, style: DecorationStyle) -> None:
        """Output the end of a decorated span."""

    @abstractmethod
    def quote_begin(self, attribution: str | None) -> None:
        """Output the beginning of a block quote."""

    @abstractmethod
    def quote_end(self, attribution: str | None) -> None:
        """Output the end of a block quote."""

    @abstractmethod
    def list_begin(self, style: ListStyle) -> None:
        """Output the beginning of a list."""

    @abstractmethod
    def list_item_begin(self, style: ListStyle) -> None:
        """Output the beginning of a list item."""

    @abstractmethod
    def list_item_end(self, style: ListStyle) -> None:
        """Output the end of a list item."""

    @abstractmethod
    def list_end(self, style: ListStyle) -> None:
        """Output the end of a list."""

    @abstractmethod
    def link_begin(self, target: str) -> None:
        """Output the beginning of a link."""

    @abstractmethod
    def link_end(self, target: str) -> None:
        """Output the end of a link."""
