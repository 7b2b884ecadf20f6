"""Skin tone modifiers and the base emojis that accept them.

The five Fitzpatrick modifiers occupy U+1F3FB..U+1F3FF. Table order is
light -> dark and is the order used when detecting a tone.
"""

from __future__ import annotations

from enum import Enum, unique
from types import MappingProxyType
from typing import Mapping


@unique
class SkinTone(Enum):
    LIGHT = "light"
    MEDIUM_LIGHT = "medium-light"
    MEDIUM = "medium"
    MEDIUM_DARK = "medium-dark"
    DARK = "dark"


SKIN_TONE_MODIFIERS: Mapping[SkinTone, str] = MappingProxyType(
    {
        SkinTone.LIGHT: "\U0001F3FB",
        SkinTone.MEDIUM_LIGHT: "\U0001F3FC",
        SkinTone.MEDIUM: "\U0001F3FD",
        SkinTone.MEDIUM_DARK: "\U0001F3FE",
        SkinTone.DARK: "\U0001F3FF",
    }
)

# Character class covering every modifier code point.
MODIFIER_CLASS = "[\U0001F3FB-\U0001F3FF]"

# Hands, people and activities that render with a modifier.
SKIN_TONE_EMOJIS: tuple[str, ...] = (
    "👋", "🤚", "🖐️", "✋", "🖖", "👌", "🤌", "🤏", "✌️", "🤞", "🤟", "🤘", "🤙",
    "👈", "👉", "👆", "🖕", "👇", "☝️", "👍", "👎", "✊", "👊", "🤛", "🤜", "👏",
    "🙌", "👐", "🤲", "🤝", "🙏", "✍️", "💅", "🤳", "💪", "🦵", "🦶", "👂", "🦻",
    "👃", "👶", "🧒", "👦", "👧", "🧑", "👱", "👨", "🧔", "👩", "🧓", "👴", "👵",
    "🙍", "🙎", "🙅", "🙆", "💁", "🙋", "🧏", "🙇", "🤦", "🤷", "👮", "🕵️", "💂",
    "🥷", "👷", "🤴", "👸", "👳", "👲", "🧕", "🤵", "👰", "🤰", "🤱", "👼", "🎅",
    "🤶", "🦸", "🦹", "🧙", "🧚", "🧛", "🧜", "🧝", "🧞", "🧟", "💆", "💇", "🚶",
    "🧍", "🧎", "🏃", "💃", "🕺", "🕴️", "👯", "🧖", "🧗", "🤸", "🏌️", "🏇", "⛷️",
    "🏂", "🏋️", "🤼", "🤽", "🤾", "🤺", "⛹️", "🏄", "🚣", "🏊", "🚴", "🚵", "🤹",
)

SUPPORTED_SKIN_TONE_EMOJIS: frozenset[str] = frozenset(SKIN_TONE_EMOJIS)
