"""Segment dispatch for bbtree parser.

Tries every tag recognizer in a fixed priority order, then falls back to
plain text. The first recognizer that succeeds wins.

Recognizer contract:
    ``_try_parse_<tag>(pos, depth) -> (segment, end) | None``

    On failure nothing is consumed and no state changes, so callers can
    simply try the next alternative. ``depth`` is the nesting depth of the
    body the tag would sit in; bodies are parsed at ``depth + 1``.

Memoisation:
    A recognizer's result depends only on ``(pos, depth)``, never on the
    enclosing terminal, so tag attempts are cached per parse. The text
    scanner probes the same offsets the dispatcher later lands on; the
    cache also stops runs of unterminated openers from re-parsing the same
    bodies over and over.
"""

from typing import TypeAlias

from bbtree.nodes import Segment
from bbtree.parsing.scanner import Terminal
from bbtree.utils.logger import get_logger

logger = get_logger(__name__)

#: Priority order of tag recognizers
TAG_RECOGNIZERS: tuple[str, ...] = (
    "_try_parse_bold",
    "_try_parse_italic",
    "_try_parse_underline",
    "_try_parse_center",
    "_try_parse_color",
    "_try_parse_size",
    "_try_parse_code",
    "_try_parse_image",
    "_try_parse_list",
    "_try_parse_quote",
    "_try_parse_url",
)

TagResult: TypeAlias = tuple[Segment, int] | None


class DispatchMixin:
    """Mixin choosing between tags and text at a position.

    Required Host Attributes:
        - _source: str
        - _max_nesting: int
        - _recognizers: tuple of bound recognizer methods, in TAG_RECOGNIZERS order
        - _tag_memo: dict[tuple[int, int], TagResult]
        - _nesting_capped: bool

    Required Host Methods (from other mixins):
        - _scan_text(pos, terminal, depth) -> tuple | None

    """

    def _try_tags(self, pos: int, depth: int) -> TagResult:
        """Try every recognizer at ``pos``; first success wins."""
        key = (pos, depth)
        memo = self._tag_memo
        if key in memo:
            return memo[key]

        result: TagResult = None
        if self._source.startswith("[", pos):
            if depth >= self._max_nesting:
                if not self._nesting_capped:
                    logger.debug("nesting limit %d reached at offset %d", self._max_nesting, pos)
                    self._nesting_capped = True
            else:
                for recognizer in self._recognizers:
                    result = recognizer(pos, depth)
                    if result is not None:
                        break

        memo[key] = result
        return result

    def _parse_segment(self, pos: int, terminal: Terminal, depth: int) -> TagResult:
        """Parse one segment at ``pos``.

        Returns:
            (segment, end offset), or None when the enclosing body is
            finished (terminal reached or input exhausted)

        """
        result = self._try_tags(pos, depth)
        if result is not None:
            return result
        return self._scan_text(pos, terminal, depth)

    def _parse_body(
        self, pos: int, terminal: Terminal, depth: int
    ) -> tuple[tuple[Segment, ...], int]:
        """Parse segments until the dispatcher reports no segment.

        The caller is responsible for matching its own closing literal at
        the returned offset.

        Returns:
            (children, offset where the body ended)

        """
        children: list[Segment] = []
        while (result := self._parse_segment(pos, terminal, depth)) is not None:
            segment, pos = result
            children.append(segment)
        return tuple(children), pos
