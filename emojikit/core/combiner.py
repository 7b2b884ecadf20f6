"""
Combining emojis into ZWJ sequences and simple text patterns.

Joining with ZWJ only asks for a ligature; whether the result renders as a
single glyph is up to the platform font.
"""

from __future__ import annotations

from typing import Optional, Sequence

from ..tables import KNOWN_ZWJ_SEQUENCES, PRESET_SEQUENCES, VS16, ZWJ


# ---------------------------------------------------------------------------
# ZWJ sequences
# ---------------------------------------------------------------------------

def join_with_zwj(*emojis: str) -> str:
    return ZWJ.join(emojis)


def create_family(*members: str) -> str:
    """Family sequence, e.g. ``create_family("👨", "👩", "👧")``."""
    return ZWJ.join(members)


def create_profession(person: str, item: str) -> str:
    """Person + tool sequence, e.g. ``create_profession("👩", "💻")``."""
    return person + ZWJ + item


def split_zwj(emoji: str) -> list[str]:
    """Split on ZWJ, dropping empty segments."""
    return [part for part in emoji.split(ZWJ) if part]


def is_zwj_sequence(emoji: str) -> bool:
    return ZWJ in emoji


def get_known_zwj_combinations() -> dict[str, list[str]]:
    return {seq: list(parts) for seq, parts in KNOWN_ZWJ_SEQUENCES.items()}


def decompose_zwj(emoji: str) -> Optional[list[str]]:
    """Components of a ZWJ sequence.

    Known precomposed sequences return their recorded components; any other
    string containing ZWJ is split on it; everything else returns None.
    """
    known = KNOWN_ZWJ_SEQUENCES.get(emoji)
    if known is not None:
        return list(known)
    if is_zwj_sequence(emoji):
        return split_zwj(emoji)
    return None


def add_emoji_style(char: str) -> str:
    return char + VS16


# ---------------------------------------------------------------------------
# Presets
# ---------------------------------------------------------------------------

def get_preset_sequence(preset: str) -> str:
    return PRESET_SEQUENCES.get(preset, "")


def get_available_presets() -> list[str]:
    return list(PRESET_SEQUENCES)


# ---------------------------------------------------------------------------
# Patterns
# ---------------------------------------------------------------------------

def sequence(emojis: Sequence[str], separator: str = "") -> str:
    return separator.join(emojis)


def add_border(emoji: str, border: str) -> str:
    return f"{border}{emoji}{border}"


def sandwich(center: str, outer: str) -> str:
    return f"{outer}{center}{outer}"


def alternate(emoji1: str, emoji2: str, count: int) -> str:
    """``count`` emojis alternating between the two, starting with ``emoji1``."""
    return "".join(emoji1 if i % 2 == 0 else emoji2 for i in range(max(0, count)))


def wave(emoji: str, max_count: int) -> str:
    """Runs of 1..max_count then back down to 1, separated by spaces.

    >>> wave("🌊", 3)
    '🌊 🌊🌊 🌊🌊🌊 🌊🌊 🌊'
    """
    rising = list(range(1, max_count + 1))
    falling = list(range(max_count - 1, 0, -1))
    return " ".join(emoji * n for n in rising + falling)


def mirror(emojis: Sequence[str]) -> str:
    """The sequence followed by its reverse, without repeating the pivot."""
    items = list(emojis)
    return "".join(items + items[::-1][1:])


def bullet_list(emoji: str, items: Sequence[str]) -> str:
    return "\n".join(f"{emoji} {item}" for item in items)
