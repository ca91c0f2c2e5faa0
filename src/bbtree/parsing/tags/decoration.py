"""Decorated span parsing for bbtree parser.

Handles [b], [i], [u], [center], [color=...] and [size=...].
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from bbtree.nodes import MAX_SIZE, MIN_SIZE, Bold, Center, Color, Decorated, Italic, Size, Underline

if TYPE_CHECKING:
    from bbtree.colors import RGB, ColorResolver
    from bbtree.nodes import DecorationStyle

# Heads are matched against the case-folded source.
# [color=#RGB], [color=#RRGGBB] or [color=name]
_COLOR_HEAD = re.compile(r"\[color=(?:#([0-9a-f]+)|([a-z0-9]+))\]")
_SIZE_HEAD = re.compile(r"\[size=([0-9]+)\]")

_BOLD = Bold()
_ITALIC = Italic()
_UNDERLINE = Underline()
_CENTER = Center()


def parse_hex_color(digits: str) -> RGB | None:
    """Parse the hex digits of ``#RGB`` or ``#RRGGBB``.

    In the short form each digit is doubled, so ``8`` means ``0x88``.

    Examples:
        >>> parse_hex_color("81f")
        (136, 17, 255)
        >>> parse_hex_color("01fe9a")
        (1, 254, 154)
        >>> parse_hex_color("abcd") is None
        True
    """
    if len(digits) == 3:
        return (int(digits[0] * 2, 16), int(digits[1] * 2, 16), int(digits[2] * 2, 16))
    if len(digits) == 6:
        return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))
    return None


class DecorationParsingMixin:
    """Recognizers for styled spans.

    Required Host Attributes:
        - _source: str
        - _folded: str
        - _color_resolver: ColorResolver

    Required Host Methods (from other mixins):
        - _match_literal(pos, literal) -> int | None
        - _parse_body(pos, terminal, depth) -> tuple
        - _span(start, end) -> Span

    """

    _color_resolver: ColorResolver

    def _try_parse_bold(self, pos: int, depth: int) -> tuple[Decorated, int] | None:
        """Recognize ``[b]This text is bold[/b]``."""
        return self._parse_simple_tag(pos, depth, "[b]", "[/b]", _BOLD)

    def _try_parse_italic(self, pos: int, depth: int) -> tuple[Decorated, int] | None:
        return self._parse_simple_tag(pos, depth, "[i]", "[/i]", _ITALIC)

    def _try_parse_underline(self, pos: int, depth: int) -> tuple[Decorated, int] | None:
        return self._parse_simple_tag(pos, depth, "[u]", "[/u]", _UNDERLINE)

    def _try_parse_center(self, pos: int, depth: int) -> tuple[Decorated, int] | None:
        return self._parse_simple_tag(pos, depth, "[center]", "[/center]", _CENTER)

    def _try_parse_color(self, pos: int, depth: int) -> tuple[Decorated, int] | None:
        """Recognize ``[color=#f80]``, ``[color=#ff8800]`` or ``[color=orange]``.

        An unknown name or a hex run that is not 3 or 6 digits long fails
        the recognizer.
        """
        match = _COLOR_HEAD.match(self._folded, pos)
        if match is None:
            return None

        if match.group(1) is not None:
            rgb = parse_hex_color(match.group(1))
        else:
            # Resolver sees the name as written
            rgb = self._color_resolver(self._source[match.start(2) : match.end(2)])
        if rgb is None:
            return None

        return self._parse_styled_body(pos, match.end(), depth, "[/color]", Color(*rgb))

    def _try_parse_size(self, pos: int, depth: int) -> tuple[Decorated, int] | None:
        """Recognize ``[size=N]`` for 2 <= N <= 29."""
        match = _SIZE_HEAD.match(self._folded, pos)
        if match is None:
            return None

        # Leading zeros are allowed; anything past two significant digits
        # is out of range, and int() rejects very long digit strings.
        digits = match.group(1).lstrip("0")
        if len(digits) > 2:
            return None
        value = int(digits or "0")
        if not MIN_SIZE <= value <= MAX_SIZE:
            return None

        return self._parse_styled_body(pos, match.end(), depth, "[/size]", Size(value))

    def _parse_simple_tag(
        self, pos: int, depth: int, open_tag: str, close_tag: str, style: DecorationStyle
    ) -> tuple[Decorated, int] | None:
        body_start = self._match_literal(pos, open_tag)
        if body_start is None:
            return None
        return self._parse_styled_body(pos, body_start, depth, close_tag, style)

    def _parse_styled_body(
        self, pos: int, body_start: int, depth: int, close_tag: str, style: DecorationStyle
    ) -> tuple[Decorated, int] | None:
        """Parse a body up to ``close_tag`` and wrap it in a Decorated node."""
        children, body_end = self._parse_body(body_start, (close_tag,), depth + 1)
        end = self._match_literal(body_end, close_tag)
        if end is None:
            return None
        return Decorated(self._span(pos, end), style, children), end
