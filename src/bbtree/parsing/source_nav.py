"""Source navigation utilities for bbtree parser.

Provides the mixin that matches tag literals against the source.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from bbtree.span import Span

if TYPE_CHECKING:
    from bbtree.parsing.scanner import Terminal


class SourceNavigationMixin:
    """Mixin providing literal matching over the source.

    Tag literals are lowercase ASCII and are compared against ``_folded``,
    a copy of the source with ASCII letters lowercased. Folding never
    changes length, so every offset is valid in both strings.

    Required Host Attributes:
        - _source: str
        - _folded: str
        - _source_len: int

    """

    _source: str
    _folded: str
    _source_len: int

    def _match_literal(self, pos: int, literal: str) -> int | None:
        """Match ``literal`` at ``pos`` ignoring ASCII case; return end offset."""
        if self._folded.startswith(literal, pos):
            return pos + len(literal)
        return None

    def _find_literal(self, pos: int, literal: str) -> int | None:
        """Offset of the first case-insensitive ``literal`` at or after ``pos``."""
        idx = self._folded.find(literal, pos)
        return None if idx == -1 else idx

    def _at_terminal(self, pos: int, terminal: Terminal) -> bool:
        """Check whether any terminal literal starts at ``pos``."""
        return self._folded.startswith(terminal, pos)

    def _span(self, start: int, end: int) -> Span:
        return Span(self._source, start, end)
