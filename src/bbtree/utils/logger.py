"""Loggers under the ``bbtree`` namespace.

Nothing here configures handlers; the CLI does that, library users do
it themselves.
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Logger for ``name``, prefixed with ``bbtree.`` unless already inside it.

    >>> get_logger("bbtree.parser").name
    'bbtree.parser'
    >>> get_logger("plugin").name
    'bbtree.plugin'
    """
    if name != "bbtree" and not name.startswith("bbtree."):
        name = f"bbtree.{name}"
    return logging.getLogger(name)
