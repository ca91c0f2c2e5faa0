"""Recursive descent parser producing a typed segment tree.

There is no tokenizer pass: recognizers work directly on the source
string and either succeed, consuming a prefix, or fail without consuming
anything. Produces immutable (frozen) dataclass nodes for thread-safety.

Architecture:
The parser uses a mixin-based design for separation of concerns:
- `SourceNavigationMixin`: Case-insensitive literal matching
- `TextScanMixin`: Plain-text runs, the fallback for anything unrecognized
- `DispatchMixin`: Fixed-order tag dispatch and body loops
- `TagParsingMixin`: One recognizer per tag

Thread Safety:
- Parser produces immutable tree (frozen dataclasses)
- Configuration is read from ContextVar (thread-local)
- Safe to share the tree across threads

"""

from __future__ import annotations

from bbtree.colors import resolve_color_name
from bbtree.config import get_parse_config
from bbtree.errors import ParseError
from bbtree.nodes import Segment
from bbtree.parsing import (
    NEVER,
    TAG_RECOGNIZERS,
    DispatchMixin,
    SourceNavigationMixin,
    TagParsingMixin,
    TextScanMixin,
)
from bbtree.parsing.dispatch import TagResult
from bbtree.utils.logger import get_logger
from bbtree.utils.text import fold_ascii

logger = get_logger(__name__)


class Parser(
    SourceNavigationMixin,
    TextScanMixin,
    DispatchMixin,
    TagParsingMixin,
):
    """Recursive descent parser for BBCode.

    Usage:
        >>> parser = Parser("[b]Foo[i]bar[/i][/b]")
        >>> parser.parse()
        (Decorated(location=Span(0, 20, ...), style=Bold(), children=(...)),)

    Malformed markup never raises: a tag without a valid parameter or
    without its closer is kept as plain text.

    Thread Safety:
        Parser instances are single-use and not thread-safe. Create one per
        parse operation. Configuration is read from ContextVar (thread-local).
        The resulting tree is immutable and thread-safe.

    """

    __slots__ = (
        "_source",
        "_folded",
        "_source_len",
        "_max_nesting",
        "_color_resolver",
        "_recognizers",
        # Per-parse cache of tag attempts keyed by (offset, depth)
        "_tag_memo",
        "_nesting_capped",
    )

    def __init__(self, source: str) -> None:
        """Initialize parser with source text.

        Configuration is read from ContextVar, not passed as parameters.
        Use set_parse_config() or parse_config_context() before creating
        a Parser if you need non-default configuration.

        Args:
            source: BBCode source text

        """
        config = get_parse_config()

        self._source = source
        self._folded = fold_ascii(source)
        self._source_len = len(source)
        self._max_nesting = config.max_nesting
        self._color_resolver = config.color_resolver or resolve_color_name
        self._recognizers = tuple(getattr(self, name) for name in TAG_RECOGNIZERS)
        self._tag_memo: dict[tuple[int, int], TagResult] = {}
        self._nesting_capped = False

    def parse(self) -> tuple[Segment, ...]:
        """Parse the whole source into top-level segments.

        Returns:
            Segments in source order; their locations tile the source
            without gaps or overlaps.

        Raises:
            ParseError: Only if the parser itself is broken; no input
                triggers it.

        """
        segments: list[Segment] = []
        pos = 0
        try:
            while pos < self._source_len:
                result = self._parse_segment(pos, NEVER, 0)
                if result is None:
                    raise ParseError("no segment could be produced", offset=pos)
                segment, pos = result
                segments.append(segment)
        finally:
            memo_size = len(self._tag_memo)
            self._tag_memo.clear()

        logger.debug(
            "parsed %d top-level segments from %d characters (%d tag attempts)",
            len(segments),
            self._source_len,
            memo_size,
        )
        return tuple(segments)
