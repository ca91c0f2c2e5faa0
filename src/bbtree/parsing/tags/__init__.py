"""Tag recognizers for bbtree parser.

One mixin per family of tags. Every recognizer has the signature
``_try_parse_<tag>(pos, depth) -> (segment, end) | None`` and consumes
nothing on failure.
"""

from bbtree.parsing.tags.decoration import DecorationParsingMixin
from bbtree.parsing.tags.links import LinkParsingMixin
from bbtree.parsing.tags.lists import ListParsingMixin
from bbtree.parsing.tags.quote import QuoteParsingMixin
from bbtree.parsing.tags.verbatim import VerbatimParsingMixin


class TagParsingMixin(
    DecorationParsingMixin,
    VerbatimParsingMixin,
    ListParsingMixin,
    QuoteParsingMixin,
    LinkParsingMixin,
):
    """Combined tag recognizers."""


__all__ = [
    "DecorationParsingMixin",
    "LinkParsingMixin",
    "ListParsingMixin",
    "QuoteParsingMixin",
    "TagParsingMixin",
    "VerbatimParsingMixin",
]
