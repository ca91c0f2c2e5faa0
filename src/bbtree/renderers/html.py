"""HTML renderer.

Writes simple, self-contained HTML: no stylesheet is assumed, colors and
sizes are inline styles.

Escaping:
- Text: ``&``, ``<``, ``>`` escaped, newlines become ``<br>``
- Code: same escapes, newlines kept (``<pre>`` preserves them)
- Attributes (image source, link target): ``<``, ``>``, ``"`` escaped

Thread Safety:
A renderer is bound to one sink; create one per output. Rendering never
touches shared state.
"""

from __future__ import annotations

from bbtree.nodes import Bold, Center, Color, DecorationStyle, Italic, ListStyle, Size, Underline
from bbtree.renderers.base import Renderer
from bbtree.utils.text import escape_attribute, escape_code, escape_text

_LIST_TAGS: dict[ListStyle, tuple[str, str]] = {
    ListStyle.UNORDERED: ("<ul>", "</ul>"),
    ListStyle.NUMERIC: ("<ol>", "</ol>"),
    ListStyle.ALPHABETIC: ('<ol type="a">', "</ol>"),
}


class HtmlRenderer(Renderer):
    """Render segments to HTML.

    Usage:
        >>> from bbtree import parse
        >>> from bbtree.stringbuilder import StringBuilder
        >>> sb = StringBuilder()
        >>> HtmlRenderer(sb).render(parse("[b]Hello[/b]\\nWorld"))
        >>> sb.build()
        '<b>Hello</b><br>World'

    """

    __slots__ = ()

    def text(self, content: str) -> None:
        self._out.write(escape_text(content))

    def code(self, content: str) -> None:
        self._out.write("<pre>")
        self._out.write(escape_code(content))
        self._out.write("</pre>")

    def image(self, src: str) -> None:
        self._out.write(f'<img src="{escape_attribute(src)}">')

    def decoration_begin(self, style: DecorationStyle) -> None:
        match style:
            case Bold():
                self._out.write("<b>")
            case Italic():
                self._out.write("<i>")
            case Underline():
                self._out.write("<u>")
            case Center():
                self._out.write('<div style="text-align:center">')
            case Color():
                self._out.write(f'<span style="color: {style.hex}">')
            case Size(value=value):
                self._out.write(f'<span style="font-size: {value}pt">')

    def decoration_end(self, style: DecorationStyle) -> None:
        match style:
            case Bold():
                self._out.write("</b>")
            case Italic():
                self._out.write("</i>")
            case Underline():
                self._out.write("</u>")
            case Center():
                self._out.write("</div>")
            case Color() | Size():
                self._out.write("</span>")

    def quote_begin(self, attribution: str | None) -> None:
        if attribution is not None:
            self._out.write(f"<div>{escape_text(attribution)} wrote:</div><blockquote>")
        else:
            self._out.write("<div>Quote:</div><blockquote>")

    def quote_end(self, attribution: str | None) -> None:
        self._out.write("</blockquote>")

    def list_begin(self, style: ListStyle) -> None:
        self._out.write(_LIST_TAGS[style][0])

    def list_item_begin(self, style: ListStyle) -> None:
        self._out.write("<li>")

    def list_item_end(self, style: ListStyle) -> None:
        self._out.write("</li>")

    def list_end(self, style: ListStyle) -> None:
        self._out.write(_LIST_TAGS[style][1])

    def link_begin(self, target: str) -> None:
        self._out.write(f'<a href="{escape_attribute(target)}">')

    def link_end(self, target: str) -> None:
        self._out.write("</a>")
