"""Tests for the byte-buffer bridge."""

import logging

import pytest

from bbtree.bridge import RenderedBuffer, decode_input, translate
from bbtree.errors import BufferReleasedError


class TestTranslate:
    def test_renders_utf8(self) -> None:
        buf = translate("[b]café[/b]".encode())
        try:
            assert buf.data == "<b>café</b>".encode()
        finally:
            buf.release()

    def test_invalid_utf8_is_replaced(self) -> None:
        with translate(b"\xff[b]x[/b]") as buf:
            assert buf.data == "�<b>x</b>".encode()

    def test_empty_input(self) -> None:
        with translate(b"") as buf:
            assert buf.data == b""


class TestRenderedBuffer:
    def test_release_once(self) -> None:
        buf = RenderedBuffer(b"x")
        assert not buf.released
        buf.release()
        assert buf.released

    def test_read_after_release(self) -> None:
        buf = RenderedBuffer(b"x")
        buf.release()
        with pytest.raises(BufferReleasedError):
            _ = buf.data

    def test_double_release(self) -> None:
        buf = RenderedBuffer(b"x")
        buf.release()
        with pytest.raises(BufferReleasedError):
            buf.release()

    def test_context_manager_releases(self) -> None:
        with RenderedBuffer(b"x") as buf:
            assert buf.data == b"x"
        assert buf.released

    def test_context_manager_tolerates_early_release(self) -> None:
        with RenderedBuffer(b"x") as buf:
            buf.release()
        assert buf.released


class TestDecodeInput:
    def test_valid(self) -> None:
        assert decode_input("[i]ü[/i]".encode()) == "[i]ü[/i]"

    def test_logs_repairs(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="bbtree"):
            assert decode_input(b"a\xffb\xfe") == "a�b�"
        assert "replaced 2 invalid UTF-8 sequences" in caplog.text

    def test_literal_replacement_character_not_counted(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="bbtree"):
            decode_input("�".encode())
        assert "replaced" not in caplog.text


class TestLogger:
    def test_namespacing(self) -> None:
        from bbtree.utils import get_logger

        assert get_logger("bbtree.parser").name == "bbtree.parser"
        assert get_logger("bbtree").name == "bbtree"
        assert get_logger("plugin").name == "bbtree.plugin"
