"""Property-based tests for parsing and rendering.

Uses Hypothesis to check invariants that must hold for any input:
- Parsing never raises
- Top-level segments tile the source
- Bracket-free input is a single text segment
- Well-formed markup renders to exactly its visible text
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from bbtree import parse, render, render_text
from bbtree.nodes import Text

# Characters that make up tags, whole tags, and some filler
_PIECES = list('[]/*="#abiucodelstzqrgmnf0123456789 \n') + [
    "[b]", "[/b]", "[i]", "[/i]", "[u]", "[/u]", "[center]", "[/center]",
    "[color=", "[color=#", "[/color]", "[size=", "[/size]",
    "[code]", "[/code]", "[img]", "[/img]",
    "[list]", "[list=1]", "[list=a]", "[*]", "[/list]",
    "[quote]", '[quote="', "[/quote]", "[url]", "[url=", '[url="', "[/url]",
]
_TAG_SOUP = st.lists(st.sampled_from(_PIECES), max_size=40).map("".join)
_PLAIN = st.text(alphabet="abc xyz.,!\n", max_size=8)


def _well_formed() -> st.SearchStrategy[tuple[str, str]]:
    """(source, visible text) pairs of valid nested markup."""

    def extend(children: st.SearchStrategy[tuple[str, str]]) -> st.SearchStrategy[tuple[str, str]]:
        def concat(parts: list[tuple[str, str]]) -> tuple[str, str]:
            return "".join(p[0] for p in parts), "".join(p[1] for p in parts)

        def listed(head: str) -> st.SearchStrategy[tuple[str, str]]:
            return st.lists(children, max_size=3).map(
                lambda items: (
                    head + "".join(f"[*]{i[0]}" for i in items) + "[/list]",
                    "".join(i[1] for i in items),
                )
            )

        return st.one_of(
            st.sampled_from(["b", "i", "u", "center", "quote", "size=12", "color=#0f0"]).flatmap(
                lambda tag: children.map(
                    lambda c: (f"[{tag}]{c[0]}[/{tag.split('=')[0]}]", c[1])
                )
            ),
            st.sampled_from(["[list]", "[list=1]", "[list=a]"]).flatmap(listed),
            children.map(lambda c: (f"[url=example.org]{c[0]}[/url]", c[1])),
            st.lists(children, min_size=2, max_size=3).map(concat),
        )

    leaf = st.one_of(
        _PLAIN.map(lambda t: (t, t)),
        _PLAIN.map(lambda t: (f"[code]{t}[/code]", t)),
        _PLAIN.map(lambda t: (f"[img]{t}[/img]", "")),
    )
    return st.recursive(leaf, extend, max_leaves=12)


class TestParseTotality:
    @given(_TAG_SOUP)
    @settings(max_examples=300)
    def test_never_raises_and_tiles_source(self, source: str) -> None:
        segments = parse(source)
        pos = 0
        for segment in segments:
            assert segment.location.start == pos
            assert segment.location.end > pos
            pos = segment.location.end
        assert pos == len(source)

    @given(_TAG_SOUP)
    def test_render_never_raises(self, source: str) -> None:
        render(parse(source))
        render_text(parse(source))

    @given(st.text(min_size=1).filter(lambda s: "[" not in s))
    def test_bracket_free_input_is_one_text(self, source: str) -> None:
        (segment,) = parse(source)
        assert isinstance(segment, Text)
        assert segment.content == source


class TestWellFormed:
    @given(_well_formed())
    @settings(max_examples=200)
    def test_visible_text_survives(self, case: tuple[str, str]) -> None:
        source, visible = case
        assert render_text(parse(source)) == visible


class TestLongParameters:
    @given(
        st.sampled_from(["[size=", "[color=#", "[color=", "[list="]),
        st.sampled_from("0123456789abcdef"),
        st.integers(min_value=1, max_value=6000),
        st.sampled_from(["]x[/size]", "]x[/color]", "][*]x[/list]", "]", ""]),
    )
    @settings(max_examples=50)
    def test_long_parameter_runs_never_raise(self, head: str, digit: str, count: int, tail: str) -> None:
        source = head + digit * count + tail
        segments = parse(source)
        assert sum(len(s.location) for s in segments) == len(source)
        render(segments)
