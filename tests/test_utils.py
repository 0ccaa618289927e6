"""Tests for the package helpers."""

from __future__ import annotations

import io
import sys

import pytest

from cssutil import utils
from cssutil.syntax.escapes import unescape
from cssutil.utils import intersperse, join, parser_error


class TestIntersperse:
    @pytest.mark.parametrize(
        ("items", "expected"),
        [((), []), (("a",), ["a"]), (("a", "b", "c"), ["a", "-", "b", "-", "c"])],
    )
    def test_intersperse(self, items: tuple[str, ...], expected: list[str]) -> None:
        assert list(intersperse(*items, separator="-")) == expected

    def test_join(self) -> None:
        assert join(iter(["a", "b"])) == "ab"


class TestDefaultParserError:
    @pytest.fixture
    def stderr(self, monkeypatch: pytest.MonkeyPatch) -> io.StringIO:
        stream = io.StringIO()
        monkeypatch.setattr(utils, "stderr", stream)
        monkeypatch.setattr(sys, "stdin", io.StringIO())  # Not a terminal, so the debugger is never entered
        return stream

    def test_reports_to_stderr(self, stderr: io.StringIO) -> None:
        parser_error()
        assert "parse error" in stderr.getvalue()

    def test_is_the_default_for_decoding(self, stderr: io.StringIO) -> None:
        """A backslash at the end of the text reaches the default hook, and decoding carries on."""
        assert unescape("a\\") == "a\ufffd"
        assert "parse error" in stderr.getvalue()
