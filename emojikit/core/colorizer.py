"""
Skin tone and color-theme transformations.

Skin tone rules:
- apply: strip any modifier, then append the requested one only when the
  stripped base is a supported emoji; otherwise the input comes back as is.
- remove: strip every modifier code point.
- detect: the first tone (light -> dark) whose modifier occurs in the input.
"""

from __future__ import annotations

import logging
import random
from typing import Optional, Union

import regex

from ..tables import (
    HEART_EMOJIS,
    MODIFIER_CLASS,
    SKIN_TONE_EMOJIS,
    SKIN_TONE_MODIFIERS,
    SUPPORTED_SKIN_TONE_EMOJIS,
    THEMED_EMOJIS,
    ColorTheme,
    SkinTone,
    coerce,
    names,
)
from .rng import resolve
from .text import compile_alternation, replace_each

logger = logging.getLogger(__name__)

_MODIFIER_RE = regex.compile(MODIFIER_CLASS)
# A supported base followed by any existing modifiers.
_TONEABLE_RE = compile_alternation(SKIN_TONE_EMOJIS, suffix=MODIFIER_CLASS + "*")
_HEART_RE = compile_alternation(HEART_EMOJIS)

ToneLike = Union[SkinTone, str]
ThemeLike = Union[ColorTheme, str]


# ---------------------------------------------------------------------------
# Skin tones
# ---------------------------------------------------------------------------

def remove_skin_tone(emoji: str) -> str:
    return _MODIFIER_RE.sub("", emoji)


def apply_skin_tone(emoji: str, tone: ToneLike) -> str:
    """Apply ``tone`` to ``emoji``, replacing any existing tone.

    Unsupported emojis and unknown tones return the input unchanged.
    """
    member = coerce(SkinTone, tone)
    if member is None:
        logger.debug("unknown skin tone %r", tone)
        return emoji
    base = remove_skin_tone(emoji)
    if base not in SUPPORTED_SKIN_TONE_EMOJIS:
        return emoji
    return base + SKIN_TONE_MODIFIERS[member]


def get_skin_tone(emoji: str) -> Optional[SkinTone]:
    for tone, modifier in SKIN_TONE_MODIFIERS.items():
        if modifier in emoji:
            return tone
    return None


def apply_all_skin_tones(text: str, tone: ToneLike) -> str:
    """Apply ``tone`` to every supported emoji in ``text``.

    Emojis that already carry a tone are re-toned rather than stacked.
    """
    member = coerce(SkinTone, tone)
    if member is None:
        logger.debug("unknown skin tone %r", tone)
        return text
    modifier = SKIN_TONE_MODIFIERS[member]
    return _TONEABLE_RE.sub(lambda m: remove_skin_tone(m.group(0)) + modifier, text)


# ---------------------------------------------------------------------------
# Color themes
# ---------------------------------------------------------------------------

def get_colored_emoji(theme: ThemeLike, rng: Optional[random.Random] = None) -> str:
    """Random emoji from ``theme``; "" for an unknown theme."""
    member = coerce(ColorTheme, theme)
    if member is None:
        logger.debug("unknown color theme %r", theme)
        return ""
    return resolve(rng).choice(THEMED_EMOJIS[member])


def colorize_hearts(text: str, theme: ThemeLike, rng: Optional[random.Random] = None) -> str:
    """Swap heart emojis for random emojis of ``theme``.

    Each distinct heart gets one pick, shared by all of its occurrences.
    """
    member = coerce(ColorTheme, theme)
    if member is None:
        logger.debug("unknown color theme %r", theme)
        return text
    r = resolve(rng)
    return replace_each(text, _HEART_RE, lambda: get_colored_emoji(member, r))


def make_green(text: str, rng: Optional[random.Random] = None) -> str:
    return colorize_hearts(text, ColorTheme.GREEN, rng)


def make_blue(text: str, rng: Optional[random.Random] = None) -> str:
    return colorize_hearts(text, ColorTheme.BLUE, rng)


def get_emojis_for_theme(theme: ThemeLike) -> list[str]:
    member = coerce(ColorTheme, theme)
    if member is None:
        return []
    return list(THEMED_EMOJIS[member])


def get_available_themes() -> list[str]:
    return names(ColorTheme)


def get_available_skin_tones() -> list[str]:
    return names(SkinTone)
