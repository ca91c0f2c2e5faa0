"""Plain-text scanning for bbtree parser.

Decides how much of the input is plain text before the next tag or the
end of the enclosing tag's body.

A terminal is the set of literals that close the enclosing body. It comes
in three shapes:

- ``()``: never matches (top level)
- ``("[/b]",)``: the single closing tag of a body
- ``("[*]", "[/list]")``: a list item, closed by the next bullet or the list end

Malformed markup such as a lone ``[b]`` must come out as literal text, so
the scanner retries every tag recognizer at every candidate offset. That
is quadratic in the worst case; memoised tag attempts (see dispatch) keep
common input cheap.
"""

from typing import TypeAlias

from bbtree.nodes import Text

Terminal: TypeAlias = tuple[str, ...]

#: Terminal of the top-level parse loop
NEVER: Terminal = ()


class TextScanMixin:
    """Mixin producing Text segments.

    Required Host Attributes:
        - _source: str
        - _source_len: int

    Required Host Methods (from other mixins):
        - _at_terminal(pos, terminal) -> bool
        - _try_tags(pos, depth) -> tuple | None
        - _span(start, end) -> Span

    """

    def _scan_text(self, pos: int, terminal: Terminal, depth: int) -> tuple[Text, int] | None:
        """Take the longest run of plain text starting at ``pos``.

        The first character is always taken: every recognizer has already
        failed there. The run ends before the first later offset where a
        terminal matches or some tag parses, or at end of input.

        Args:
            pos: Start offset
            terminal: Literals closing the enclosing body
            depth: Nesting depth of the enclosing body

        Returns:
            (Text, end offset), or None when input is exhausted or a terminal
            matches at ``pos`` (the enclosing body is finished)

        """
        if pos >= self._source_len or self._at_terminal(pos, terminal):
            return None

        # Every tag and every terminal starts with "[", so only those
        # offsets can end the run.
        source = self._source
        idx = source.find("[", pos + 1)
        while idx != -1:
            if self._at_terminal(idx, terminal) or self._try_tags(idx, depth) is not None:
                break
            idx = source.find("[", idx + 1)
        else:
            idx = self._source_len

        return Text(self._span(pos, idx)), idx
