"""Color themes used to recolor heart emojis."""

from __future__ import annotations

from enum import Enum, unique
from types import MappingProxyType
from typing import Mapping


@unique
class ColorTheme(Enum):
    GREEN = "green"
    BLUE = "blue"
    RED = "red"
    YELLOW = "yellow"
    PURPLE = "purple"
    PINK = "pink"


THEMED_EMOJIS: Mapping[ColorTheme, tuple[str, ...]] = MappingProxyType(
    {
        ColorTheme.GREEN: ("💚", "🥒", "🥦", "🥬", "🌲", "🌳", "🌴", "🌱", "🌿", "☘️", "🍀", "🐸", "🦎", "🐢", "🐊", "🟢", "🟩", "♻️"),
        ColorTheme.BLUE: ("💙", "🧊", "🌊", "💎", "🐳", "🐋", "🐬", "🦋", "🫐", "🔵", "🟦", "🌀", "💠", "🧿", "🥶", "🌌"),
        ColorTheme.RED: ("❤️", "🔴", "🟥", "🍎", "🍒", "🌹", "🐞", "🦞", "🦀", "🍅", "🌶️", "🎈", "♥️", "❣️", "💔", "🩸"),
        ColorTheme.YELLOW: ("💛", "🌟", "⭐", "🌻", "🌼", "🍋", "🍌", "🧀", "🟡", "🟨", "🐥", "🐤", "🌕", "🔆", "⚡", "🏆"),
        ColorTheme.PURPLE: ("💜", "🍇", "🍆", "🔮", "☂️", "🟣", "🟪", "👾", "🦄", "🌸", "🎵", "🪻"),
        ColorTheme.PINK: ("💗", "💖", "💕", "💓", "💞", "🌸", "🌷", "🎀", "🦩", "🐷", "🐖", "🧁", "🍧", "🩰", "🩷"),
    }
)

# Hearts that colorize_hearts() swaps for themed emojis.
HEART_EMOJIS: tuple[str, ...] = (
    "❤️", "💙", "💚", "💛", "💜", "🖤", "🤍", "🤎", "💗", "💖",
)
