"""Text processing utilities for bbtree.

Escaping tables for HTML output and the ASCII-only case fold used to match
tag literals.

Example:
    >>> from bbtree.utils.text import escape_text
    >>> escape_text("a < b\\n")
    'a &lt; b<br>'
"""

from __future__ import annotations

import string

# Uppercase ASCII -> lowercase ASCII, everything else untouched. Unlike
# str.lower() this never changes string length, so offsets into the folded
# copy are offsets into the original.
_ASCII_FOLD = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)

_CODE_ESCAPES = str.maketrans({"&": "&amp;", "<": "&lt;", ">": "&gt;"})
_TEXT_ESCAPES = str.maketrans({"&": "&amp;", "<": "&lt;", ">": "&gt;", "\n": "<br>"})
_ATTRIBUTE_ESCAPES = str.maketrans({"<": "&lt;", ">": "&gt;", '"': "&quot;"})


def fold_ascii(text: str) -> str:
    """Lowercase ASCII letters only.

    Examples:
        >>> fold_ascii("[URL=Example.COM]")
        '[url=example.com]'
        >>> fold_ascii("\\u212a")  # KELVIN SIGN stays as it is
        '\\u212a'
    """
    return text.translate(_ASCII_FOLD)


def escape_text(text: str) -> str:
    """Escape ``&``, ``<``, ``>`` and turn newlines into ``<br>``."""
    return text.translate(_TEXT_ESCAPES)


def escape_code(text: str) -> str:
    """Escape ``&``, ``<`` and ``>``; newlines are kept for ``<pre>``."""
    return text.translate(_CODE_ESCAPES)


def escape_attribute(text: str) -> str:
    """Escape ``<``, ``>`` and ``"`` for a double-quoted attribute value."""
    return text.translate(_ATTRIBUTE_ESCAPES)
