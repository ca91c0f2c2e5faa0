"""List parsing for bbtree parser.

Handles ``[list][*]one[*]two[/list]`` and its ``[list=1]`` / ``[list=a]``
variants. Each ``[*]`` opens an item; an item ends at the next ``[*]`` or
at ``[/list]``, whichever comes first.
"""

from __future__ import annotations

import re

from bbtree.nodes import List, ListStyle, Segment

# Matched against the folded source; the parameter itself is checked
# against the original text because it is case-sensitive.
_LIST_HEAD = re.compile(r"\[list(?:=(.))?\]")

_LIST_STYLES: dict[str | None, ListStyle] = {
    None: ListStyle.UNORDERED,
    "1": ListStyle.NUMERIC,
    "a": ListStyle.ALPHABETIC,
}

_BULLET = "[*]"
_LIST_CLOSE = "[/list]"
_ITEM_TERMINAL = (_BULLET, _LIST_CLOSE)


class ListParsingMixin:
    """Recognizer for lists.

    Required Host Attributes:
        - _source: str
        - _folded: str

    Required Host Methods (from other mixins):
        - _match_literal(pos, literal) -> int | None
        - _parse_body(pos, terminal, depth) -> tuple
        - _span(start, end) -> Span

    """

    def _try_parse_list(self, pos: int, depth: int) -> tuple[List, int] | None:
        """Recognize a list.

        The first ``[*]`` must directly follow the head; anything else
        between them fails the recognizer. ``[list][/list]`` is a valid
        empty list.
        """
        match = _LIST_HEAD.match(self._folded, pos)
        if match is None:
            return None

        param = self._source[match.start(1)] if match.group(1) is not None else None
        style = _LIST_STYLES.get(param)
        if style is None:
            return None

        items: list[tuple[Segment, ...]] = []
        cursor = match.end()
        while (item_start := self._match_literal(cursor, _BULLET)) is not None:
            children, cursor = self._parse_body(item_start, _ITEM_TERMINAL, depth + 1)
            items.append(children)

        end = self._match_literal(cursor, _LIST_CLOSE)
        if end is None:
            return None
        return List(self._span(pos, end), style, tuple(items)), end
