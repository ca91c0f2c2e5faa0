"""Tests for dict and JSON serialization of segment trees."""

import json

import pytest

from bbtree import from_dict, from_json, parse, to_dict, to_json


class TestToDict:
    def test_text(self) -> None:
        (segment,) = parse("hi")
        assert to_dict(segment) == {"_type": "Text", "location": [0, 2]}

    def test_decorated(self) -> None:
        (segment,) = parse("[color=#fff]x[/color]")
        assert to_dict(segment) == {
            "_type": "Decorated",
            "location": [0, 21],
            "style": {"_type": "Color", "red": 255, "green": 255, "blue": 255},
            "children": [{"_type": "Text", "location": [12, 13]}],
        }

    def test_list(self) -> None:
        (segment,) = parse("[list=1][*]a[/list]")
        data = to_dict(segment)
        assert data["style"] == "numeric"
        assert data["items"] == [[{"_type": "Text", "location": [11, 12]}]]

    def test_quote_without_attribution(self) -> None:
        (segment,) = parse("[quote]a[/quote]")
        assert to_dict(segment)["attribution"] is None


class TestRoundTrip:
    @pytest.mark.parametrize(
        "source",
        [
            "plain",
            "[b]a[i]b[/i][/b][size=9]c[/size]",
            '[quote="Ann"]x[/quote][quote]y[/quote]',
            "[list=a][*]1[*][list][*]2[/list][/list]",
            '[url]a[/url][url="b"]c[/url][img]d[/img][code]e[/code]',
        ],
    )
    def test_json_round_trip(self, source: str) -> None:
        segments = parse(source)
        assert from_json(to_json(segments), source) == segments

    def test_deterministic(self) -> None:
        segments = parse("[b]x[/b]")
        assert to_json(segments) == to_json(parse("[b]x[/b]"))
        assert json.loads(to_json(segments, indent=2)) == json.loads(to_json(segments))


class TestErrors:
    def test_missing_type(self) -> None:
        with pytest.raises(ValueError, match="_type"):
            from_dict({"location": [0, 1]}, "x")

    def test_unknown_type(self) -> None:
        with pytest.raises(ValueError, match="Unknown segment type"):
            from_dict({"_type": "Table", "location": [0, 1]}, "x")

    def test_unknown_style(self) -> None:
        data = {"_type": "Decorated", "location": [0, 1], "style": {"_type": "Blink"}, "children": []}
        with pytest.raises(ValueError, match="Unknown decoration style"):
            from_dict(data, "x")

    def test_span_outside_source(self) -> None:
        with pytest.raises(ValueError):
            from_dict({"_type": "Text", "location": [0, 10]}, "x")

    def test_not_a_list(self) -> None:
        with pytest.raises(ValueError, match="Expected a list"):
            from_json("{}", "x")
