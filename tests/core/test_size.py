"""Tests for emoji scaling and shape rendering."""

from __future__ import annotations

import pytest

from emojikit.core.size import (
    create_diamond,
    create_grid,
    create_progress_bar,
    create_pyramid,
    get_available_sizes,
    make_giant,
    make_huge,
    make_large,
    make_medium,
    make_small,
    make_tiny,
    repeat_emoji,
    scale_all_emojis,
    scale_emoji,
)
from emojikit.tables import EmojiSize

DOT = "·"


# ---------------------------------------------------------------------------
# scale_emoji
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "size,expected",
    [
        ("tiny", DOT + "🌟" + DOT),
        ("small", "🌟"),
        ("medium", "🌟🌟"),
        ("large", "🌟🌟🌟"),
        ("huge", "🌟 🌟 🌟 🌟"),
        ("giant", "🌟 🌟 🌟 🌟 🌟"),
    ],
)
def test_scale_emoji(size: str, expected: str) -> None:
    assert scale_emoji("🌟", size) == expected
    assert scale_emoji("🌟", EmojiSize(size)) == expected


def test_scale_emoji_unknown_size_echoes() -> None:
    assert scale_emoji("🌟", "enormous") == "🌟"


def test_convenience_functions() -> None:
    assert make_tiny("😀") == DOT + "😀" + DOT
    assert make_small("😀") == "😀"
    assert make_medium("😀") == "😀😀"
    assert make_large("😀") == "😀😀😀"
    assert make_huge("😀") == "😀 😀 😀 😀"
    assert make_giant("😀") == "😀 😀 😀 😀 😀"


def test_scale_all_emojis() -> None:
    assert scale_all_emojis("I ⭐ it", "medium") == "I ⭐⭐ it"
    assert scale_all_emojis("no emojis", "giant") == "no emojis"
    assert scale_all_emojis("I ⭐ it", "enormous") == "I ⭐ it"


# ---------------------------------------------------------------------------
# Shapes
# ---------------------------------------------------------------------------

def test_create_grid() -> None:
    assert create_grid("⭐", 2, 3) == "⭐⭐⭐\n⭐⭐⭐"
    assert create_grid("🌙", 1, 1) == "🌙"
    assert create_grid("🌙", 0, 4) == ""
    assert create_grid("🌙", 2, 0) == "\n"


def test_create_pyramid() -> None:
    assert create_pyramid("🔺", 3) == "  🔺\n 🔺🔺🔺\n🔺🔺🔺🔺🔺"
    assert create_pyramid("🔺", 1) == "🔺"
    assert create_pyramid("🔺", 0) == ""


def test_create_diamond_odd() -> None:
    assert create_diamond("💎", 3) == " 💎\n💎💎💎\n 💎"
    assert len(create_diamond("💎", 5).split("\n")) == 5


def test_create_diamond_even_rounds_up() -> None:
    assert create_diamond("💎", 4) == create_diamond("💎", 3)


def test_create_diamond_empty() -> None:
    assert create_diamond("💎", 0) == ""


# ---------------------------------------------------------------------------
# Progress bar
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "progress,length,filled",
    [
        (0.5, 10, 5),
        (1, 5, 5),
        (0, 3, 0),
        (1.5, 5, 5),
        (-0.2, 4, 0),
        (0.25, 10, 3),
        (0.33, 3, 1),
    ],
)
def test_create_progress_bar(progress: float, length: int, filled: int) -> None:
    bar = create_progress_bar("#", "-", progress, length)
    assert bar == "#" * filled + "-" * (length - filled)


def test_create_progress_bar_emojis() -> None:
    assert create_progress_bar("🟢", "⚪", 0.5, 10) == "🟢" * 5 + "⚪" * 5


def test_create_progress_bar_default_length() -> None:
    assert create_progress_bar("#", "-", 0.3) == "###-------"


def test_create_progress_bar_nan_and_zero_length() -> None:
    assert create_progress_bar("#", "-", float("nan"), 4) == "----"
    assert create_progress_bar("#", "-", 0.5, 0) == ""
    assert create_progress_bar("#", "-", 0.5, -3) == ""


# ---------------------------------------------------------------------------
# repeat_emoji / listings
# ---------------------------------------------------------------------------

def test_repeat_emoji() -> None:
    assert repeat_emoji("🎉", 3) == "🎉🎉🎉"
    assert repeat_emoji("🎈", 3, " ") == "🎈 🎈 🎈"
    assert repeat_emoji("🎊", 0) == ""
    assert repeat_emoji("🎊", -1) == ""


def test_available_sizes() -> None:
    assert get_available_sizes() == ["tiny", "small", "medium", "large", "huge", "giant"]
