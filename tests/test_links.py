"""Tests for the three [url] forms."""

import pytest

from bbtree import parse
from bbtree.nodes import Bold, Link, Text
from bbtree.parsing import TAG_RECOGNIZERS


class TestBareUrl:
    def test_target_is_display_text(self) -> None:
        (link,) = parse("[URL]example.com[/URL]")
        assert isinstance(link, Link)
        assert link.target.text == "example.com"
        (text,) = link.children
        assert isinstance(text, Text)
        assert text.location == link.target

    def test_body_is_not_parsed(self) -> None:
        (link,) = parse("[url]a[b]x[/b][/url]")
        assert link.target.text == "a[b]x[/b]"
        assert [c.content for c in link.children] == ["a[b]x[/b]"]


class TestUrlWithTarget:
    def test_unquoted_target_runs_to_bracket(self) -> None:
        (link,) = parse('[url=example.com/"quote"]for [i]example[/url]')
        assert link.target.text == 'example.com/"quote"'
        assert [c.content for c in link.children] == ["for [i]example"]

    def test_quoted_target_with_markup(self) -> None:
        link, rest = parse('[url="example.com"][b]orly?[/b][/url]more')
        assert link.target.text == "example.com"
        (bold,) = link.children
        assert bold.style == Bold()
        assert [c.content for c in bold.children] == ["orly?"]
        assert rest.content == "more"

    def test_quoted_target_may_contain_bracket(self) -> None:
        (link,) = parse('[url="a]b"]x[/url]')
        assert link.target.text == "a]b"

    def test_unclosed_quote_falls_back_to_unquoted_form(self) -> None:
        (link,) = parse('[url="x]y[/url]')
        assert link.target.text == '"x'
        assert [c.content for c in link.children] == ["y"]

    def test_empty_display_text(self) -> None:
        (link,) = parse("[url=x][/url]")
        assert link.children == ()

    @pytest.mark.parametrize("source", ["[url=x]abc", "[url=x", "[url]x"])
    def test_malformed(self, source: str) -> None:
        (segment,) = parse(source)
        assert isinstance(segment, Text)
        assert segment.content == source


class TestDispatchOrder:
    def test_recognizer_priority(self) -> None:
        assert TAG_RECOGNIZERS == (
            "_try_parse_bold",
            "_try_parse_italic",
            "_try_parse_underline",
            "_try_parse_center",
            "_try_parse_color",
            "_try_parse_size",
            "_try_parse_code",
            "_try_parse_image",
            "_try_parse_list",
            "_try_parse_quote",
            "_try_parse_url",
        )
