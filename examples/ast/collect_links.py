"""Typed tree: collect every link target in a forum post."""

from bbtree import parse
from bbtree.nodes import Link
from bbtree.visitor import BaseVisitor


class LinkCollector(BaseVisitor[None]):
    """Collect link targets with their source offsets."""

    def __init__(self) -> None:
        self.links: list[tuple[str, int]] = []

    def visit_link(self, node: Link) -> None:
        self.links.append((node.target.text, node.location.start))


source = """[quote="Ann"]See [url=https://example.org/faq]the FAQ[/url][/quote]
[list]
[*]Docs: [url]https://example.org/docs[/url]
[*][b][url="https://example.org/a?b=c"]search[/url][/b]
[/list]"""

collector = LinkCollector()
collector.visit_all(parse(source))

for target, offset in collector.links:
    print(f"{offset:4d}  {target}")
