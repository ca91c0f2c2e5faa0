"""
bbtree: BBCode to a typed segment tree, and from there to HTML

Forum-style markup such as ``[b]``, ``[color=red]``, ``[quote]``,
``[list]`` and ``[url]`` is parsed into an immutable tree of frozen
dataclasses whose text fields are zero-copy views into the source.
Malformed markup never raises: anything that does not parse is kept as
plain text.

Quick Start:
    >>> from bbtree import parse, render
    >>> segments = parse("[b]Hello[/b], [i]World[/i]!")
    >>> render(segments)
    '<b>Hello</b>, <i>World</i>!'

    >>> # Or use the high-level BBCode class
    >>> from bbtree import BBCode
    >>> bb = BBCode(max_nesting=16)
    >>> bb("[url=example.com]site[/url]")
    '<a href="example.com">site</a>'

Custom output:
    Subclass ``Renderer`` and implement every hook, then
    ``render_to(segments, sink, renderer=MyRenderer)``.

Installation:
    pip install bbtree
"""

from collections.abc import Callable, Iterable, Sequence

from bbtree.colors import ColorResolver, resolve_color_name
from bbtree.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from bbtree.errors import (
    BBTreeError,
    BufferReleasedError,
    ParseError,
    SourceTooLargeError,
)
from bbtree.nodes import (
    Bold,
    Center,
    Code,
    Color,
    Decorated,
    DecorationStyle,
    Image,
    Italic,
    Link,
    List,
    ListStyle,
    Quote,
    Segment,
    Size,
    Text,
    Underline,
)
from bbtree.parser import Parser
from bbtree.renderers import HtmlRenderer, Renderer, Sink, TextRenderer
from bbtree.serialization import from_dict, from_json, to_dict, to_json
from bbtree.span import Span
from bbtree.stringbuilder import StringBuilder
from bbtree.visitor import BaseVisitor, transform

__version__ = "0.1.0"


def _parse_with(source: str, config: ParseConfig) -> tuple[Segment, ...]:
    limit = config.max_source_length
    if limit is not None and len(source) > limit:
        raise SourceTooLargeError(len(source), limit)
    return Parser(source).parse()


def parse(source: str, *, config: ParseConfig | None = None) -> tuple[Segment, ...]:
    """Parse BBCode source into a typed segment tree.

    Never fails on markup: unknown tags, bad parameters and missing
    closers all come back as Text.

    Args:
        source: BBCode source text
        config: Configuration for this call (uses the context's config if None)

    Returns:
        Top-level segments in source order

    Raises:
        SourceTooLargeError: If ``config.max_source_length`` is set and exceeded

    Example:
        >>> parse("[b]unterminated")
        (Text(location=Span(0, 15, '[b]unterminated')),)
    """
    if config is None:
        return _parse_with(source, get_parse_config())
    with parse_config_context(config):
        return _parse_with(source, config)


def render(segments: Sequence[Segment]) -> str:
    """Render segments to an HTML string.

    Example:
        >>> render(parse("a < b\\n[code]x < y\\n[/code]"))
        'a &lt; b<br><pre>x &lt; y\\n</pre>'
    """
    sb = StringBuilder()
    HtmlRenderer(sb).render(segments)
    return sb.build()


def render_text(segments: Sequence[Segment]) -> str:
    """Render only the visible text of segments."""
    sb = StringBuilder()
    TextRenderer(sb).render(segments)
    return sb.build()


def render_to(
    segments: Sequence[Segment],
    out: Sink,
    *,
    renderer: Callable[[Sink], Renderer] = HtmlRenderer,
) -> None:
    """Render segments into a sink.

    Errors raised by the sink (e.g. ``OSError`` from a closed pipe) stop
    rendering immediately and propagate unchanged.

    Args:
        segments: Segments to render
        out: Any object with ``write(str)``
        renderer: Renderer class (or factory) taking the sink
    """
    renderer(out).render(segments)


class BBCode:
    """High-level BBCode processor combining parser and renderer.

    Usage:
        >>> bb = BBCode()
        >>> bb("[b]Hello[/b]")
        '<b>Hello</b>'

        >>> # Access the tree
        >>> segments = bb.parse("[size=12]big[/size]")
        >>> segments[0].style
        Size(value=12)

    Thread Safety:
        Uses ContextVar for thread-local configuration. Safe to use multiple
        BBCode instances concurrently from different threads.

    """

    __slots__ = ("_config",)

    def __init__(
        self,
        *,
        max_nesting: int | None = None,
        max_source_length: int | None = None,
        color_resolver: ColorResolver | None = None,
    ) -> None:
        """Initialize BBCode processor.

        Args:
            max_nesting: Deepest tag nesting still recognized (default 64)
            max_source_length: Reject longer sources with SourceTooLargeError
            color_resolver: Custom ``[color=name]`` lookup (default: CSS names)
        """
        defaults = ParseConfig()
        # Build immutable config once (thread-safe, reused across calls)
        self._config = ParseConfig(
            max_nesting=defaults.max_nesting if max_nesting is None else max_nesting,
            max_source_length=max_source_length,
            color_resolver=color_resolver,
        )

    @property
    def config(self) -> ParseConfig:
        return self._config

    def __call__(self, source: str) -> str:
        """Parse and render BBCode to HTML in one call."""
        return render(self.parse(source))

    def parse(self, source: str) -> tuple[Segment, ...]:
        """Parse BBCode source into segments using this instance's config."""
        return parse(source, config=self._config)

    def parse_many(self, sources: Iterable[str]) -> list[tuple[Segment, ...]]:
        """Parse multiple sources.

        Sets config once, parses all, restores once.

        Example:
            >>> bb = BBCode()
            >>> [len(s) for s in bb.parse_many(["a", "[b]b[/b]c"])]
            [1, 2]
        """
        with parse_config_context(self._config):
            return [_parse_with(source, self._config) for source in sources]

    def render(self, segments: Sequence[Segment]) -> str:
        """Render segments to HTML."""
        return render(segments)


__all__ = [  # noqa: RUF022 (grouped by category)
    # Version
    "__version__",
    # Core API
    "parse",
    "render",
    "render_text",
    "render_to",
    "BBCode",
    # Segments
    "Segment",
    "Text",
    "Decorated",
    "Quote",
    "Code",
    "List",
    "Link",
    "Image",
    "Span",
    # Styles
    "DecorationStyle",
    "Bold",
    "Italic",
    "Underline",
    "Center",
    "Color",
    "Size",
    "ListStyle",
    # Parser
    "Parser",
    # Renderers
    "Renderer",
    "HtmlRenderer",
    "TextRenderer",
    "Sink",
    "StringBuilder",
    # Visitor + Transform
    "BaseVisitor",
    "transform",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Configuration (ContextVar-based)
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
    # Colors
    "ColorResolver",
    "resolve_color_name",
    # Errors
    "BBTreeError",
    "ParseError",
    "SourceTooLargeError",
    "BufferReleasedError",
]
