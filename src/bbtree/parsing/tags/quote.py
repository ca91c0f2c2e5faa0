"""Block quote parsing for bbtree parser.

Handles ``[quote]text[/quote]`` and ``[quote="author"]text[/quote]``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from bbtree.nodes import Quote

if TYPE_CHECKING:
    from bbtree.span import Span

_QUOTE_CLOSE = "[/quote]"


class QuoteParsingMixin:
    """Recognizer for block quotes.

    Required Host Attributes:
        - _source: str

    Required Host Methods (from other mixins):
        - _match_literal(pos, literal) -> int | None
        - _parse_body(pos, terminal, depth) -> tuple
        - _span(start, end) -> Span

    """

    def _try_parse_quote(self, pos: int, depth: int) -> tuple[Quote, int] | None:
        """Recognize a block quote.

        The attribution runs to the next double quote, which must be
        followed directly by ``]``. It may contain anything else, including
        brackets and newlines.
        """
        cursor = self._match_literal(pos, "[quote")
        if cursor is None:
            return None

        attribution: Span | None = None
        if self._source.startswith('="', cursor):
            attribution_start = cursor + 2
            attribution_end = self._source.find('"', attribution_start)
            if attribution_end == -1:
                return None
            attribution = self._span(attribution_start, attribution_end)
            cursor = attribution_end + 1

        if not self._source.startswith("]", cursor):
            return None

        children, body_end = self._parse_body(cursor + 1, (_QUOTE_CLOSE,), depth + 1)
        end = self._match_literal(body_end, _QUOTE_CLOSE)
        if end is None:
            return None
        return Quote(self._span(pos, end), attribution, children), end
