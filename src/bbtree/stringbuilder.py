"""In-memory render sink.

Renderers write many small fragments (a tag, an escaped run of text, a
closing tag). StringBuilder collects them in a list and joins once, so
rendering stays O(n) in the output size.

It has the ``write`` method of a text stream and can therefore be passed
anywhere a ``Sink`` is expected.

Thread Safety:
One StringBuilder per render call; nothing is shared.

"""

from __future__ import annotations


class StringBuilder:
    """Collects rendered fragments.

    Usage:
        >>> sb = StringBuilder()
        >>> sb.write("<b>")
        3
        >>> sb.append("Hello").append("</b>").build()
        '<b>Hello</b>'
        >>> sb.length
        12

    """

    __slots__ = ("_parts", "_length")

    def __init__(self) -> None:
        self._parts: list[str] = []
        self._length = 0

    def append(self, s: str) -> StringBuilder:
        """Add a fragment; empty fragments are skipped.

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
            self._length += len(s)
        return self

    def write(self, s: str, /) -> int:
        """Sink interface: add a fragment and report its length."""
        self.append(s)
        return len(s)

    @property
    def length(self) -> int:
        """Characters written so far."""
        return self._length

    def build(self) -> str:
        """Join every fragment into the final string."""
        return "".join(self._parts)

    def __len__(self) -> int:
        """Number of fragments (not characters)."""
        return len(self._parts)
