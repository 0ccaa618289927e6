"""Tests for input preprocessing (code point filtering)."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from cssutil.syntax.code_points import is_surrogate
from cssutil.syntax.preprocessing import filter_code_points, preprocess


class TestPreprocess:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("", ""),
            ("a", "a"),
            ("a\r\nb", "a\nb"),
            ("a\rb", "a\nb"),
            ("a\fb", "a\nb"),
            ("\r", "\n"),
            ("\r\r\n", "\n\n"),
            ("\n\r", "\n\n"),
            ("a\0b", "a\ufffdb"),
            ("a\ud800b", "a\ufffdb"),
            ("\udfff", "\ufffd"),
        ],
    )
    def test_filter(self, text: str, expected: str) -> None:
        assert preprocess(text) == expected

    @given(text=st.text(alphabet=st.integers(min_value=0, max_value=0x10FFFF).map(chr)))
    def test_output_has_no_cr_ff_null_or_surrogates(self, text: str) -> None:
        result = preprocess(text)
        assert "\r" not in result
        assert "\f" not in result
        assert "\0" not in result
        assert not any(is_surrogate(cp) for cp in result)


class TestFilterCodePoints:
    def test_crlf_collapses_into_one_code_point(self) -> None:
        assert list(filter_code_points("a\r\nb")) == ["a", "\n", "b"]

    def test_lone_cr_followed_by_text(self) -> None:
        assert list(filter_code_points("\rx")) == ["\n", "x"]

    def test_cr_at_end(self) -> None:
        assert list(filter_code_points("a\r")) == ["a", "\n"]

    def test_is_lazy(self) -> None:
        cps = filter_code_points("\0a")
        assert next(cps) == "\ufffd"
        assert next(cps) == "a"

    @given(text=st.text(alphabet=st.integers(min_value=0, max_value=0x10FFFF).map(chr)))
    def test_only_crlf_pairs_shorten_the_text(self, text: str) -> None:
        """PROPERTY: one filtered code point per input code point, except for CR LF pairs."""
        assert len(list(filter_code_points(text))) == len(text) - text.count("\r\n")
