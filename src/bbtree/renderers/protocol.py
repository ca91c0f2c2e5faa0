"""Sink protocol for renderers.

Renderers write to any object with a ``write(str)`` method: an open text
file, ``sys.stdout``, ``io.StringIO`` or the in-memory ``StringBuilder``.

Example:
    from bbtree.renderers.protocol import Sink

    def render_page(sink: Sink, segments) -> None:
        HtmlRenderer(sink).render(segments)

"""

from typing import Protocol


class Sink(Protocol):
    """Protocol for render output targets.

    Whatever ``write`` raises (typically ``OSError``) aborts the render
    and reaches the caller unchanged.

    """

    def write(self, s: str, /) -> int:
        """Write ``s`` and return the number of characters written."""
        ...
