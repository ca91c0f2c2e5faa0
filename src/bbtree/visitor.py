"""Segment visitor and transformer for bbtree.

Provides a base visitor class with match-based dispatch and an immutable
transform function for rewriting frozen trees. For producing output use a
``Renderer`` instead; this module is for inspection and rewriting.

Example, collecting all link targets:

    class LinkCollector(BaseVisitor[None]):
        def __init__(self) -> None:
            self.targets: list[str] = []

        def visit_link(self, node: Link) -> None:
            self.targets.append(node.target.text)

    collector = LinkCollector()
    collector.visit_all(parse(source))

Example, dropping every image:

    segments = transform(parse(source), lambda n: None if isinstance(n, Image) else n)

Thread Safety:
    Visitors are NOT shared across threads by default (they may accumulate
    mutable state). Create a new visitor per thread. The transform function
    is pure and safe to call from any thread.

"""

import dataclasses
from collections.abc import Callable, Iterable
from typing import Generic, TypeVar

from bbtree.nodes import Code, Decorated, Image, Link, List, Quote, Segment, Text


T = TypeVar("T")


class BaseVisitor(Generic[T]):
    """Base segment visitor with match-based dispatch.

    Subclass and override ``visit_*`` methods for segment types you care
    about. Unhandled types fall through to ``visit_default``. Children are
    walked automatically after the ``visit_*`` call.

    """

    def visit(self, node: Segment) -> T:
        """Dispatch to the appropriate ``visit_*`` method.

        Walks children automatically after the visit method returns.

        """
        result = self._dispatch(node)
        self._walk_children(node)
        return result

    def visit_all(self, nodes: Iterable[Segment]) -> None:
        """Visit a sequence of segments, e.g. the result of ``parse``."""
        for node in nodes:
            self.visit(node)

    def visit_default(self, node: Segment) -> T:
        """Called for segment types without a specific ``visit_*`` method."""
        return None  # type: ignore[return-value]

    def visit_text(self, node: Text) -> T:
        return self.visit_default(node)

    def visit_decorated(self, node: Decorated) -> T:
        return self.visit_default(node)

    def visit_quote(self, node: Quote) -> T:
        return self.visit_default(node)

    def visit_code(self, node: Code) -> T:
        return self.visit_default(node)

    def visit_list(self, node: List) -> T:
        return self.visit_default(node)

    def visit_link(self, node: Link) -> T:
        return self.visit_default(node)

    def visit_image(self, node: Image) -> T:
        return self.visit_default(node)

    # -- Internal dispatch -----------------------------------------------------

    def _dispatch(self, node: Segment) -> T:
        """Match-based dispatch to visit_* methods."""
        match node:
            case Text():
                return self.visit_text(node)
            case Decorated():
                return self.visit_decorated(node)
            case Quote():
                return self.visit_quote(node)
            case Code():
                return self.visit_code(node)
            case List():
                return self.visit_list(node)
            case Link():
                return self.visit_link(node)
            case Image():
                return self.visit_image(node)
            case _:
                return self.visit_default(node)

    def _walk_children(self, node: Segment) -> None:
        """Recursively visit child segments."""
        match node:
            case Decorated(children=children) | Quote(children=children) | Link(children=children):
                for child in children:
                    self.visit(child)
            case List(items=items):
                for item in items:
                    for child in item:
                        self.visit(child)
            case _:
                pass  # Leaf segments: no children


def transform(
    segments: Iterable[Segment], fn: Callable[[Segment], Segment | None]
) -> tuple[Segment, ...]:
    """Apply a function to every segment, returning a new tree.

    The function ``fn`` is called bottom-up: children are transformed first,
    then the parent is transformed with its new children. This ensures ``fn``
    always receives segments with already-transformed children.

    Return ``None`` from ``fn`` to remove a segment. Removing every segment
    of a list item leaves an empty item; the item itself stays.

    Since all segments are frozen dataclasses, this produces a new immutable
    tree. The original tree is untouched.

    Args:
        segments: Top-level segments, e.g. the result of ``parse``.
        fn: Function that receives a segment and returns a (possibly new)
            segment, or None to remove it.

    Returns:
        The transformed top-level segments.

    """
    return _filtered(tuple(segments), fn)


def _filtered(
    children: tuple[Segment, ...], fn: Callable[[Segment], Segment | None]
) -> tuple[Segment, ...]:
    return tuple(
        result for c in children
        if (result := _transform_node(c, fn)) is not None
    )


def _transform_node(node: Segment, fn: Callable[[Segment], Segment | None]) -> Segment | None:
    """Transform a single segment bottom-up: children first, then self."""
    transformed = _transform_children(node, fn)
    return fn(transformed)


def _transform_children(node: Segment, fn: Callable[[Segment], Segment | None]) -> Segment:
    """Produce a new segment with children transformed."""
    match node:
        case Decorated(children=children) | Quote(children=children) | Link(children=children):
            new_children = _filtered(children, fn)
            if new_children != children:
                return dataclasses.replace(node, children=new_children)
        case List(items=items):
            new_items = tuple(_filtered(item, fn) for item in items)
            if new_items != items:
                return dataclasses.replace(node, items=new_items)
        case _:
            pass  # Leaf segments: return as-is

    return node
