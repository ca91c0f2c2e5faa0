"""Verbatim tag parsing for bbtree parser.

Handles [code] and [img]. Their bodies are taken literally up to the first
closing tag; markup inside is not parsed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from bbtree.nodes import Code, Image

if TYPE_CHECKING:
    from bbtree.span import Span


class VerbatimParsingMixin:
    """Recognizers for tags with unparsed bodies.

    Required Host Methods (from other mixins):
        - _match_literal(pos, literal) -> int | None
        - _find_literal(pos, literal) -> int | None
        - _span(start, end) -> Span

    """

    def _try_parse_code(self, pos: int, depth: int) -> tuple[Code, int] | None:
        """Recognize ``[code]...[/code]``.

        The body runs to the first ``[/code]``, so
        ``[code]a[/code]b[/code]`` yields ``a`` and leaves ``b[/code]``.
        """
        result = self._parse_verbatim(pos, "[code]", "[/code]")
        if result is None:
            return None
        body, end = result
        return Code(self._span(pos, end), body), end

    def _try_parse_image(self, pos: int, depth: int) -> tuple[Image, int] | None:
        """Recognize ``[img]source[/img]``."""
        result = self._parse_verbatim(pos, "[img]", "[/img]")
        if result is None:
            return None
        src, end = result
        return Image(self._span(pos, end), src), end

    def _parse_verbatim(self, pos: int, open_tag: str, close_tag: str) -> tuple[Span, int] | None:
        body_start = self._match_literal(pos, open_tag)
        if body_start is None:
            return None
        body_end = self._find_literal(body_start, close_tag)
        if body_end is None:
            return None
        return self._span(body_start, body_end), body_end + len(close_tag)
