"""
Static emoji lookup tables.

Every table is built once at import and exposed read-only. Each closed
enumeration (skin tone, color theme, mood, category, size) is an `Enum` whose
values are the public string names, so callers may pass either form.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Type, TypeVar

from ..errors import UnknownOptionError
from .category import ALL_EMOJIS, CATEGORY_EMOJIS, COIN_HEADS, COIN_TAILS, DICE_FACES, EmojiCategory
from .color_theme import HEART_EMOJIS, THEMED_EMOJIS, ColorTheme
from .mood import MOOD_BY_EMOJI, MOOD_EMOJIS, Mood
from .size import SIZE_CONFIGS, EmojiSize, SizeConfig
from .skin_tone import (
    MODIFIER_CLASS,
    SKIN_TONE_EMOJIS,
    SKIN_TONE_MODIFIERS,
    SUPPORTED_SKIN_TONE_EMOJIS,
    SkinTone,
)
from .zwj import KNOWN_ZWJ_SEQUENCES, PRESET_SEQUENCES, VS16, ZWJ

E = TypeVar("E", bound=Enum)

_KIND_NAMES = {
    SkinTone: "skin tone",
    ColorTheme: "color theme",
    Mood: "mood",
    EmojiCategory: "category",
    EmojiSize: "size",
}


def names(enum_cls: Type[Enum]) -> list[str]:
    """Public names of an enumeration, in declaration order."""
    return [member.value for member in enum_cls]


def coerce(enum_cls: Type[E], value: object) -> Optional[E]:
    """Resolve a member or its string name; None when unrecognized."""
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        try:
            return enum_cls(value)
        except ValueError:
            return None
    return None


def require(enum_cls: Type[E], value: object) -> E:
    """Like `coerce`, but raise UnknownOptionError when unrecognized."""
    member = coerce(enum_cls, value)
    if member is None:
        kind = _KIND_NAMES.get(enum_cls, enum_cls.__name__)
        raise UnknownOptionError(kind, value, names(enum_cls))
    return member


__all__ = [
    "ALL_EMOJIS",
    "CATEGORY_EMOJIS",
    "COIN_HEADS",
    "COIN_TAILS",
    "DICE_FACES",
    "EmojiCategory",
    "HEART_EMOJIS",
    "THEMED_EMOJIS",
    "ColorTheme",
    "MOOD_BY_EMOJI",
    "MOOD_EMOJIS",
    "Mood",
    "SIZE_CONFIGS",
    "EmojiSize",
    "SizeConfig",
    "MODIFIER_CLASS",
    "SKIN_TONE_EMOJIS",
    "SKIN_TONE_MODIFIERS",
    "SUPPORTED_SKIN_TONE_EMOJIS",
    "SkinTone",
    "KNOWN_ZWJ_SEQUENCES",
    "PRESET_SEQUENCES",
    "VS16",
    "ZWJ",
    "names",
    "coerce",
    "require",
]
