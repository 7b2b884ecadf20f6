"""Tests for the emoji-in-text scanner and single-pass replacement."""

from __future__ import annotations

from emojikit.core.text import compile_alternation, find_emojis, replace_each, sub_emojis


def test_find_emojis_presentation_and_vs16() -> None:
    assert find_emojis("a😀b❤️c") == ["😀", "❤️"]


def test_find_emojis_ignores_plain_text_and_digits() -> None:
    assert find_emojis("hello 123 #*") == []


def test_skin_toned_emoji_matches_as_two_pieces() -> None:
    # Documented limitation of the heuristic.
    assert find_emojis("👋\U0001F3FD") == ["👋", "\U0001F3FD"]


def test_sub_emojis() -> None:
    assert sub_emojis("x 😀 y 🌍", lambda e: f"[{e}]") == "x [😀] y [🌍]"


def test_alternation_prefers_longest_target() -> None:
    pattern = compile_alternation(["a", "ab"])
    assert pattern.findall("ab a") == ["ab", "a"]


def test_alternation_suffix() -> None:
    pattern = compile_alternation(["x"], suffix="[0-9]*")
    assert pattern.findall("x12 x") == ["x12", "x"]


def test_replace_each_one_pick_per_distinct_match() -> None:
    picks = iter(["1", "2", "3"])
    pattern = compile_alternation(["a", "b"])
    assert replace_each("abab", pattern, lambda: next(picks)) == "1212"


def test_replace_each_does_not_rescan_output() -> None:
    pattern = compile_alternation(["a"])
    assert replace_each("aa", pattern, lambda: "aa") == "aaaa"
