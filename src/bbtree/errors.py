"""Exception classes for bbtree.

Markup problems are never errors: a tag that does not parse is kept as
plain text. The exceptions here cover configuration limits, internal
defects and misuse of the byte-buffer bridge. Errors raised by a render
sink are not wrapped; they reach the caller unchanged.
"""

from __future__ import annotations


class BBTreeError(Exception):
    """Base exception for all bbtree errors.

    Subclass this for specific error categories.
    """

    pass


class ParseError(BBTreeError):
    """The parse loop reached a state it cannot make progress from.

    Parsing is total, so this signals a bug in bbtree rather than bad input.
    """

    def __init__(self, message: str, offset: int | None = None) -> None:
        """Initialize parse error with an optional source offset.

        Args:
            message: Error description
            offset: Source offset where the parser stopped (0-indexed)
        """
        self.message = message
        self.offset = offset
        location = f"offset {offset}: " if offset is not None else ""
        super().__init__(f"{location}{message}")


class SourceTooLargeError(BBTreeError):
    """Source exceeds the configured ``max_source_length``.

    Raised before any parsing happens.
    """

    def __init__(self, length: int, limit: int) -> None:
        """Initialize with the offending length and the configured cap.

        Args:
            length: Length of the rejected source
            limit: Configured maximum
        """
        self.length = length
        self.limit = limit
        super().__init__(f"source length {length} exceeds limit of {limit}")


class BufferReleasedError(BBTreeError):
    """A rendered buffer was read or released after it had been released."""

    pass
