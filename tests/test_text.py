"""Tests for the shared whitespace and truncation helpers."""

from __future__ import annotations

import pytest

from legalsent.text import split_words, strip, truncate_code_units


def test_split_words_collapses_whitespace_runs() -> None:
    assert split_words("  alpha \t\n beta\u00a0gamma\u3000delta  ") == [
        "alpha",
        "beta",
        "gamma",
        "delta",
    ]


@pytest.mark.parametrize("separator", ["\x1c", "\x1d", "\x1e", "\x1f", "\x85"])
def test_split_words_keeps_information_separators_inside_words(separator: str) -> None:
    assert split_words(f"left{separator}right next") == [f"left{separator}right", "next"]


def test_split_words_breaks_on_byte_order_mark() -> None:
    assert split_words("one\ufefftwo") == ["one", "two"]


def test_split_words_empty_text() -> None:
    assert split_words("") == []
    assert split_words(" \n ") == []


def test_strip_uses_the_same_whitespace_set() -> None:
    assert strip("\ufeff clause \u2028") == "clause"
    assert strip("\x1cclause\x1f") == "\x1cclause\x1f"


def test_truncate_counts_astral_characters_as_two_units() -> None:
    assert truncate_code_units("\U0001F600" * 60, 100) == "\U0001F600" * 50
    assert truncate_code_units("ab\U0001F600", 3) == "ab"
    assert truncate_code_units("abc", 3) == "abc"
    assert truncate_code_units("abcd", 3) == "abc"
