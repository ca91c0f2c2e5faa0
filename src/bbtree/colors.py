"""CSS color name lookup.

Named colors in ``[color=name]`` are resolved through the CSS3 table that
ships with webcolors. Names are matched case-insensitively.

Example:
    >>> resolve_color_name("red")
    (255, 0, 0)
    >>> resolve_color_name("notacolor") is None
    True
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeAlias

import webcolors

RGB: TypeAlias = tuple[int, int, int]

#: Signature of a pluggable resolver (see ParseConfig.color_resolver)
ColorResolver: TypeAlias = Callable[[str], RGB | None]


def resolve_color_name(name: str) -> RGB | None:
    """Look up a CSS color name.

    Args:
        name: Color name such as ``"red"`` or ``"DarkOliveGreen"``

    Returns:
        ``(red, green, blue)`` or None when the name is unknown
    """
    try:
        rgb = webcolors.name_to_rgb(name)
    except ValueError:
        return None
    return (rgb.red, rgb.green, rgb.blue)
