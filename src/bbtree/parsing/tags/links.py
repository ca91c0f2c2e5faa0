"""Link parsing for bbtree parser.

Handles the three [url] forms, tried in this order:

* ``[url]http://example.com/[/url]``: target doubles as display text
* ``[url="http://example.com/"]Foo[/url]``: quote-delimited target
* ``[url=example.com]Bar[/url]``: target runs to the first ``]``

Display text of the last two forms is parsed for nested markup.
"""

from __future__ import annotations

from bbtree.nodes import Link, Text

_URL_CLOSE = "[/url]"
_URL_TERMINAL = (_URL_CLOSE,)


class LinkParsingMixin:
    """Recognizer for links.

    Required Host Attributes:
        - _source: str

    Required Host Methods (from other mixins):
        - _match_literal(pos, literal) -> int | None
        - _find_literal(pos, literal) -> int | None
        - _parse_body(pos, terminal, depth) -> tuple
        - _span(start, end) -> Span

    """

    def _try_parse_url(self, pos: int, depth: int) -> tuple[Link, int] | None:
        return (
            self._parse_bare_url(pos)
            or self._parse_url_with_target(pos, depth, '[url="', '"]')
            or self._parse_url_with_target(pos, depth, "[url=", "]")
        )

    def _parse_bare_url(self, pos: int) -> tuple[Link, int] | None:
        """``[url]target[/url]``; the body is not parsed."""
        target_start = self._match_literal(pos, "[url]")
        if target_start is None:
            return None
        target_end = self._find_literal(target_start, _URL_CLOSE)
        if target_end is None:
            return None

        target = self._span(target_start, target_end)
        end = target_end + len(_URL_CLOSE)
        return Link(self._span(pos, end), target, (Text(target),)), end

    def _parse_url_with_target(
        self, pos: int, depth: int, opener: str, target_close: str
    ) -> tuple[Link, int] | None:
        target_start = self._match_literal(pos, opener)
        if target_start is None:
            return None
        target_end = self._source.find(target_close, target_start)
        if target_end == -1:
            return None

        body_start = target_end + len(target_close)
        children, body_end = self._parse_body(body_start, _URL_TERMINAL, depth + 1)
        end = self._match_literal(body_end, _URL_CLOSE)
        if end is None:
            return None
        return Link(self._span(pos, end), self._span(target_start, target_end), children), end
