"""bbtree renderers.

Renderers walk a segment tree and write to a sink through per-kind hooks.

Available Renderers:
- Renderer: Abstract base with the shared traversal
- HtmlRenderer: Renders segments to simple HTML
- TextRenderer: Renders only the visible text

Thread Safety:
Each renderer writes to its own sink. Create one per output; the tree
itself can be rendered from many threads at once.

"""

from bbtree.renderers.base import Renderer
from bbtree.renderers.html import HtmlRenderer
from bbtree.renderers.protocol import Sink
from bbtree.renderers.text import TextRenderer

__all__ = ["HtmlRenderer", "Renderer", "Sink", "TextRenderer"]
