"""Tests for BaseVisitor and transform."""

import dataclasses

from bbtree import BaseVisitor, parse, transform
from bbtree.nodes import Bold, Decorated, Image, Italic, Link, List, Segment, Text


class LinkCollector(BaseVisitor[None]):
    def __init__(self) -> None:
        self.targets: list[str] = []

    def visit_link(self, node: Link) -> None:
        self.targets.append(node.target.text)


class TypeCounter(BaseVisitor[None]):
    def __init__(self) -> None:
        self.counts: dict[str, int] = {}

    def visit_default(self, node: Segment) -> None:
        name = type(node).__name__
        self.counts[name] = self.counts.get(name, 0) + 1


class TestBaseVisitor:
    def test_collects_nested_links(self) -> None:
        collector = LinkCollector()
        collector.visit_all(parse("[b][url]a.org[/url][/b][list][*][url=b.org]x[/url][/list]"))
        assert collector.targets == ["a.org", "b.org"]

    def test_visits_every_segment(self) -> None:
        counter = TypeCounter()
        counter.visit_all(parse('x[quote="A"][i]y[/i][/quote][code]z[/code][img]i[/img]'))
        assert counter.counts == {"Text": 2, "Quote": 1, "Decorated": 1, "Code": 1, "Image": 1}

    def test_visit_returns_dispatch_result(self) -> None:
        class Namer(BaseVisitor[str]):
            def visit_text(self, node: Text) -> str:
                return "text"

            def visit_default(self, node: Segment) -> str:
                return "other"

        (segment,) = parse("[b]x[/b]")
        assert Namer().visit(segment) == "other"


class TestTransform:
    def test_identity_keeps_tree(self) -> None:
        segments = parse("[b]a[/b][list][*]b[/list]")
        assert transform(segments, lambda n: n) == segments

    def test_remove_images(self) -> None:
        segments = parse("a[img]x.png[/img][b][img]y.png[/img]c[/b]")
        result = transform(segments, lambda n: None if isinstance(n, Image) else n)
        assert len(result) == 2
        bold = result[1]
        assert isinstance(bold, Decorated)
        assert [c.content for c in bold.children] == ["c"]

    def test_replace_style(self) -> None:
        def italicize(node: Segment) -> Segment:
            if isinstance(node, Decorated) and node.style == Bold():
                return dataclasses.replace(node, style=Italic())
            return node

        (segment,) = transform(parse("[b][b]x[/b][/b]"), italicize)
        assert segment.style == Italic()
        assert segment.children[0].style == Italic()

    def test_emptied_list_item_stays(self) -> None:
        segments = parse("[list][*]a[*]b[/list]")
        (lst,) = transform(segments, lambda n: None if isinstance(n, Text) else n)
        assert isinstance(lst, List)
        assert lst.items == ((), ())

    def test_original_untouched(self) -> None:
        segments = parse("[b]x[/b]")
        transform(segments, lambda n: None if isinstance(n, Text) else n)
        assert len(segments[0].children) == 1
