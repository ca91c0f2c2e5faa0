"""Typed segment tree for bbtree.

All segments are frozen dataclasses with slots for:
- Type safety: IDE autocomplete, catch errors at dev time
- Immutability: Safe sharing across threads
- Memory efficiency: __slots__ reduces memory footprint
- Pattern matching: match statements work naturally

Segment Hierarchy:
Node (base)
├── Text        plain text, never nested
├── Decorated   styled span (bold, color, size, ...)
├── Quote       block quote with optional attribution
├── Code        verbatim block
├── List        list of items, each a sequence of segments
├── Link        hyperlink with nested display text
└── Image       image reference

Every text-bearing field is a Span into the parsed source; nothing is
copied while the tree is built.

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias

from bbtree.span import Span

# Size parameter bounds (inclusive)
MIN_SIZE = 2
MAX_SIZE = 29

# =============================================================================
# Decoration styles
# =============================================================================


@dataclass(frozen=True, slots=True)
class Bold:
    """BBCode: [b]text[/b]"""


@dataclass(frozen=True, slots=True)
class Italic:
    """BBCode: [i]text[/i]"""


@dataclass(frozen=True, slots=True)
class Underline:
    """BBCode: [u]text[/u]"""


@dataclass(frozen=True, slots=True)
class Center:
    """Horizontally centered block.

    BBCode: [center]text[/center]

    """


@dataclass(frozen=True, slots=True)
class Color:
    """Text colored with sRGB components (as in CSS).

    BBCode: [color=#f80]text[/color], [color=#ff8800]...[/color] or
    [color=orange]...[/color]

    """

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for channel in (self.red, self.green, self.blue):
            if not 0 <= channel <= 255:
                msg = f"color channel out of range: {channel}"
                raise ValueError(msg)

    @property
    def hex(self) -> str:
        """CSS hex notation, e.g. ``#ff8800``."""
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"


@dataclass(frozen=True, slots=True)
class Size:
    """Text size.

    BBCode: [size=12]text[/size]

    Only 2 through 29 are valid; anything else raises ValueError.

    """

    value: int

    def __post_init__(self) -> None:
        if not MIN_SIZE <= self.value <= MAX_SIZE:
            msg = f"size must be between {MIN_SIZE} and {MAX_SIZE}, got {self.value}"
            raise ValueError(msg)


DecorationStyle: TypeAlias = Bold | Italic | Underline | Center | Color | Size


class ListStyle(Enum):
    """The general appearance of a list."""

    #: No particular order, like CSS ``list-style-type: disc``
    UNORDERED = "unordered"
    #: Numbered items, like CSS ``decimal``
    NUMERIC = "numeric"
    #: Latin letters, like CSS ``lower-alpha``
    ALPHABETIC = "alphabetic"


# =============================================================================
# Base Node
# =============================================================================


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all segments.

    ``location`` covers the whole construct in the source, tags included.

    """

    location: Span


# =============================================================================
# Leaf segments
# =============================================================================


@dataclass(frozen=True, slots=True)
class Text(Node):
    """Unadorned text.

    The text is the node's own location; there is no separate content field.

    """

    @property
    def content(self) -> str:
        return self.location.text


@dataclass(frozen=True, slots=True)
class Code(Node):
    """Verbatim code block. Markup inside is not parsed.

    BBCode: [code]10 PRINT "HI"[/code]
    HTML: <pre>10 PRINT "HI"</pre>

    """

    body: Span

    @property
    def content(self) -> str:
        return self.body.text


@dataclass(frozen=True, slots=True)
class Image(Node):
    """Image reference.

    BBCode: [img]https://example.com/cat.png[/img]
    HTML: <img src="https://example.com/cat.png">

    """

    src: Span


# =============================================================================
# Compound segments
# =============================================================================


@dataclass(frozen=True, slots=True)
class Decorated(Node):
    """A styled span of segments."""

    style: DecorationStyle
    children: tuple[Segment, ...]


@dataclass(frozen=True, slots=True)
class Quote(Node):
    """Block quote.

    BBCode: [quote]text[/quote] or [quote="author"]text[/quote]

    """

    attribution: Span | None
    children: tuple[Segment, ...]


@dataclass(frozen=True, slots=True)
class List(Node):
    """List of items; each item is itself a sequence of segments.

    BBCode: [list][*]one[*]two[/list], [list=1]..., [list=a]...

    """

    style: ListStyle
    items: tuple[tuple[Segment, ...], ...]


@dataclass(frozen=True, slots=True)
class Link(Node):
    """Hyperlink whose display text may hold nested segments.

    BBCode: [url]target[/url], [url="target"]text[/url], [url=target]text[/url]

    """

    target: Span
    children: tuple[Segment, ...]


Segment: TypeAlias = Text | Decorated | Quote | Code | List | Link | Image
