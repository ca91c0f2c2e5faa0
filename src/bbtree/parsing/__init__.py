"""Parsing subsystem for bbtree.

Provides mixin classes for modular parsing functionality:
- `SourceNavigationMixin`: Case-insensitive literal matching over the source
- `TextScanMixin`: Plain-text runs between tags
- `DispatchMixin`: Tag-or-text choice at a position, body loops
- `TagParsingMixin`: One recognizer per tag

Example:
    >>> from bbtree.parsing import (
    ...     DispatchMixin,
    ...     SourceNavigationMixin,
    ...     TagParsingMixin,
    ...     TextScanMixin,
    ... )
    >>> class Parser(SourceNavigationMixin, TextScanMixin, DispatchMixin, TagParsingMixin):
    ...     pass

"""

from bbtree.parsing.dispatch import TAG_RECOGNIZERS, DispatchMixin
from bbtree.parsing.scanner import NEVER, Terminal, TextScanMixin
from bbtree.parsing.source_nav import SourceNavigationMixin
from bbtree.parsing.tags import TagParsingMixin

__all__ = [
    "NEVER",
    "TAG_RECOGNIZERS",
    "DispatchMixin",
    "SourceNavigationMixin",
    "TagParsingMixin",
    "Terminal",
    "TextScanMixin",
]
