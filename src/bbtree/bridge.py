"""Byte-buffer boundary for foreign callers.

``translate`` takes raw bytes from outside Python (a C extension, a
socket, a subprocess pipe), repairs invalid UTF-8 once, parses, renders
HTML and hands back an owned ``RenderedBuffer``.

Ownership:
    The caller owns the returned buffer and must call ``release()``
    exactly once, directly or by using the buffer as a context manager.
    Reading ``data`` after release, or releasing twice, raises
    BufferReleasedError.

Example:
    >>> with translate(b"[b]caf\\xc3\\xa9[/b]") as buf:
    ...     buf.data
    b'<b>caf\\xc3\\xa9</b>'
"""

from __future__ import annotations

from types import TracebackType

from bbtree import parse
from bbtree.errors import BufferReleasedError
from bbtree.renderers.html import HtmlRenderer
from bbtree.stringbuilder import StringBuilder
from bbtree.utils.logger import get_logger

logger = get_logger(__name__)


class RenderedBuffer:
    """UTF-8 encoded render output owned by the caller."""

    __slots__ = ("_data",)

    def __init__(self, data: bytes) -> None:
        self._data: bytes | None = data

    @property
    def data(self) -> bytes:
        """The rendered bytes.

        Raises:
            BufferReleasedError: If the buffer was already released
        """
        if self._data is None:
            raise BufferReleasedError("buffer read after release")
        return self._data

    @property
    def released(self) -> bool:
        return self._data is None

    def release(self) -> None:
        """Give the buffer back. Must be called exactly once.

        Raises:
            BufferReleasedError: If the buffer was already released
        """
        if self._data is None:
            raise BufferReleasedError("buffer released twice")
        self._data = None

    def __enter__(self) -> RenderedBuffer:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if not self.released:
            self.release()


def decode_input(raw: bytes) -> str:
    """Decode UTF-8, replacing invalid sequences with U+FFFD."""
    text = raw.decode("utf-8", errors="replace")
    repaired = text.count("\ufffd") - raw.count(b"\xef\xbf\xbd")
    if repaired:
        logger.debug("replaced %d invalid UTF-8 sequences", repaired)
    return text


def translate(raw: bytes) -> RenderedBuffer:
    """Render BBCode bytes to HTML bytes.

    The decoded text is produced once and the segment tree borrows from it
    for the whole parse and render.

    Args:
        raw: BBCode, UTF-8 encoded; invalid sequences are tolerated

    Returns:
        Owned buffer holding UTF-8 HTML; release it when done
    """
    text = decode_input(raw)
    sb = StringBuilder()
    HtmlRenderer(sb).render(parse(text))
    return RenderedBuffer(sb.build().encode("utf-8"))
