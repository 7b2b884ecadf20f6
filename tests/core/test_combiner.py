"""Tests for ZWJ sequences, presets and patterns."""

from __future__ import annotations

from emojikit.core.combiner import (
    add_border,
    add_emoji_style,
    alternate,
    bullet_list,
    create_family,
    create_profession,
    decompose_zwj,
    get_available_presets,
    get_known_zwj_combinations,
    get_preset_sequence,
    is_zwj_sequence,
    join_with_zwj,
    mirror,
    sandwich,
    sequence,
    split_zwj,
    wave,
)
from emojikit.tables import KNOWN_ZWJ_SEQUENCES, VS16, ZWJ


# ---------------------------------------------------------------------------
# ZWJ sequences
# ---------------------------------------------------------------------------

def test_join_with_zwj() -> None:
    assert join_with_zwj("👨", "👩", "👧") == "👨" + ZWJ + "👩" + ZWJ + "👧"
    assert join_with_zwj("👍") == "👍"
    assert join_with_zwj() == ""


def test_create_family_is_known_sequence() -> None:
    family = create_family("👨", "👩", "👧", "👦")
    assert family in KNOWN_ZWJ_SEQUENCES


def test_create_profession() -> None:
    assert create_profession("👩", "💻") == "👩" + ZWJ + "💻"


def test_split_zwj_drops_empty_segments() -> None:
    assert split_zwj(ZWJ + "👨" + ZWJ + ZWJ + "👩" + ZWJ) == ["👨", "👩"]
    assert split_zwj("🐶") == ["🐶"]
    assert split_zwj("") == []


def test_is_zwj_sequence() -> None:
    assert is_zwj_sequence("👩" + ZWJ + "🚀")
    assert not is_zwj_sequence("🚀")


def test_decompose_known_sequence() -> None:
    rainbow_flag = "\U0001F3F3" + VS16 + ZWJ + "🌈"
    assert decompose_zwj(rainbow_flag) == ["\U0001F3F3" + VS16, "🌈"]


def test_decompose_unknown_sequence_splits() -> None:
    assert decompose_zwj("🐶" + ZWJ + "🐱") == ["🐶", "🐱"]


def test_decompose_non_sequence() -> None:
    assert decompose_zwj("🐶") is None


def test_known_combinations_are_copied() -> None:
    combos = get_known_zwj_combinations()
    assert len(combos) == 19
    key = next(iter(combos))
    combos[key].append("x")
    combos.clear()
    assert get_known_zwj_combinations()[key] == list(KNOWN_ZWJ_SEQUENCES[key])


def test_add_emoji_style() -> None:
    assert add_emoji_style("❤") == "❤" + VS16


# ---------------------------------------------------------------------------
# Presets
# ---------------------------------------------------------------------------

def test_get_preset_sequence() -> None:
    assert get_preset_sequence("moon") == "🌑🌒🌓🌔🌕🌖🌗🌘"
    assert get_preset_sequence("growth") == "🌱🌿🌳"


def test_get_preset_sequence_unknown() -> None:
    assert get_preset_sequence("nope") == ""


def test_available_presets() -> None:
    presets = get_available_presets()
    assert presets[0] == "love"
    assert {"weather", "time", "celebration"} <= set(presets)


# ---------------------------------------------------------------------------
# Patterns
# ---------------------------------------------------------------------------

def test_sequence() -> None:
    assert sequence(["🍎", "🍊"]) == "🍎🍊"
    assert sequence(["🍎", "🍊"], " - ") == "🍎 - 🍊"


def test_border_and_sandwich() -> None:
    assert add_border("⭐", "✨") == "✨⭐✨"
    assert sandwich("🥓", "🍞") == "🍞🥓🍞"


def test_alternate() -> None:
    assert alternate("🔴", "🔵", 5) == "🔴🔵🔴🔵🔴"
    assert alternate("🔴", "🔵", 0) == ""
    assert alternate("🔴", "🔵", -2) == ""


def test_wave() -> None:
    assert wave("🌊", 3) == "🌊 🌊🌊 🌊🌊🌊 🌊🌊 🌊"
    assert wave("🌊", 1) == "🌊"
    assert wave("🌊", 0) == ""


def test_mirror() -> None:
    assert mirror(["1", "2", "3"]) == "12321"
    assert mirror(["a"]) == "a"
    assert mirror([]) == ""


def test_bullet_list() -> None:
    assert bullet_list("✅", ["milk", "eggs"]) == "✅ milk\n✅ eggs"
    assert bullet_list("✅", []) == ""
