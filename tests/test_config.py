"""Tests for ContextVar-based parse configuration."""

import pytest

from bbtree import (
    BBCode,
    ParseConfig,
    SourceTooLargeError,
    get_parse_config,
    parse,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from bbtree.config import DEFAULT_MAX_NESTING
from bbtree.nodes import Text


class TestParseConfig:
    def test_defaults(self) -> None:
        config = ParseConfig()
        assert config.max_nesting == DEFAULT_MAX_NESTING == 64
        assert config.max_source_length is None
        assert config.color_resolver is None

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            ParseConfig().max_nesting = 3  # type: ignore[misc]

    @pytest.mark.parametrize("kwargs", [{"max_nesting": -1}, {"max_source_length": -5}])
    def test_rejects_negative(self, kwargs: dict[str, int]) -> None:
        with pytest.raises(ValueError):
            ParseConfig(**kwargs)

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = ParseConfig.from_dict({"max_nesting": 8, "theme": "dark"})
        assert config == ParseConfig(max_nesting=8)


class TestContext:
    def test_context_restores_previous(self) -> None:
        before = get_parse_config()
        with parse_config_context(ParseConfig(max_nesting=3)):
            assert get_parse_config().max_nesting == 3
        assert get_parse_config() is before

    def test_context_restores_on_error(self) -> None:
        before = get_parse_config()
        with pytest.raises(RuntimeError), parse_config_context(ParseConfig(max_nesting=3)):
            raise RuntimeError
        assert get_parse_config() is before

    def test_set_and_reset(self) -> None:
        set_parse_config(ParseConfig(max_nesting=0))
        try:
            (segment,) = parse("[b]x[/b]")
            assert isinstance(segment, Text)
        finally:
            reset_parse_config()
        assert get_parse_config() == ParseConfig()


class TestSourceLength:
    def test_limit_exceeded(self) -> None:
        with pytest.raises(SourceTooLargeError) as exc_info:
            parse("abcd", config=ParseConfig(max_source_length=3))
        assert exc_info.value.length == 4
        assert exc_info.value.limit == 3

    def test_limit_reached_exactly(self) -> None:
        assert len(parse("abc", config=ParseConfig(max_source_length=3))) == 1


class TestBBCode:
    def test_call_renders_html(self) -> None:
        assert BBCode()("[b]Hello[/b]") == "<b>Hello</b>"

    def test_options(self) -> None:
        bb = BBCode(max_nesting=16, max_source_length=100)
        assert bb.config == ParseConfig(max_nesting=16, max_source_length=100)

    def test_max_nesting_applies(self) -> None:
        assert BBCode(max_nesting=0)("[b]x[/b]") == "[b]x[/b]"

    def test_max_source_length_applies(self) -> None:
        with pytest.raises(SourceTooLargeError):
            BBCode(max_source_length=3)("abcd")

    def test_color_resolver(self) -> None:
        bb = BBCode(color_resolver=lambda name: (0, 0, 1) if name == "navyish" else None)
        assert bb("[color=navyish]x[/color]") == '<span style="color: #000001">x</span>'

    def test_parse_many(self) -> None:
        results = BBCode().parse_many(["a", "[b]b[/b]c"])
        assert [len(r) for r in results] == [1, 2]

    def test_config_is_scoped_to_call(self) -> None:
        before = get_parse_config()
        BBCode(max_nesting=1).parse("[b]x[/b]")
        assert get_parse_config() is before
