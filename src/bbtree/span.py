"""Zero-copy views into the parsed source.

Provides Span, the only way text reaches the segment tree. A span keeps a
reference to the original source string plus two offsets; the text itself
is sliced out on demand, so building the tree never copies leaf text.

Thread Safety:
Span is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open range ``[start, end)`` of a source string.

    Offsets count code points, exactly like Python string indexing.

    Attributes:
        source: The full source string the span points into
        start: Offset of the first character (inclusive)
        end: Offset past the last character (exclusive)

    Examples:
        >>> span = Span("[b]Hi[/b]", 3, 5)
        >>> span.text
        'Hi'
        >>> len(span)
        2

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.

    """

    source: str = field(repr=False)
    start: int
    end: int

    def __post_init__(self) -> None:
        if not 0 <= self.start <= self.end <= len(self.source):
            msg = f"span [{self.start}, {self.end}) outside source of length {len(self.source)}"
            raise ValueError(msg)

    @property
    def text(self) -> str:
        """The covered text (sliced from the source on each access)."""
        return self.source[self.start : self.end]

    def __str__(self) -> str:
        return self.text

    def __len__(self) -> int:
        return self.end - self.start

    def __repr__(self) -> str:
        return f"Span({self.start}, {self.end}, {self.text!r})"

    def span_to(self, end: Span) -> Span:
        """Create a new span from this span's start to ``end``'s end.

        Args:
            end: Span over the same source that ends the range

        Returns:
            New Span covering both
        """
        return Span(self.source, self.start, end.end)

    @classmethod
    def whole(cls, source: str) -> Span:
        """Span covering an entire source string."""
        return cls(source, 0, len(source))
