"""Utility modules for bbtree.

Provides:
- text: escaping helpers for HTML output, ASCII case folding
- logger: get_logger for logging
"""

from bbtree.utils.logger import get_logger
from bbtree.utils.text import escape_attribute, escape_code, escape_text, fold_ascii

__all__ = [
    "escape_attribute",
    "escape_code",
    "escape_text",
    "fold_ascii",
    "get_logger",
]
