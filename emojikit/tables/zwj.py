"""Zero-width-joiner constants, known ZWJ sequences and preset sequences."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

ZWJ = "\u200d"

# Variation Selector-16: request emoji (colored) presentation.
VS16 = "\ufe0f"

_MAN = "👨"
_WOMAN = "👩"
_GIRL = "👧"
_BOY = "👦"
_RED_HEART = "❤" + VS16


def _sequences(*components: tuple[str, ...]) -> Mapping[str, tuple[str, ...]]:
    return MappingProxyType({ZWJ.join(parts): parts for parts in components})


# Precomposed sequences that render as a single glyph -> their components.
KNOWN_ZWJ_SEQUENCES: Mapping[str, tuple[str, ...]] = _sequences(
    (_MAN, _WOMAN, _GIRL),
    (_MAN, _WOMAN, _BOY),
    (_MAN, _WOMAN, _GIRL, _BOY),
    (_MAN, "💻"),
    (_WOMAN, "💻"),
    (_MAN, "🔬"),
    (_WOMAN, "🔬"),
    (_MAN, "🎨"),
    (_WOMAN, "🎨"),
    (_MAN, "🚀"),
    (_WOMAN, "🚀"),
    (_MAN, "🍳"),
    (_WOMAN, "🍳"),
    ("\U0001F3F3" + VS16, "🌈"),
    ("🏴", "☠" + VS16),
    (_RED_HEART, "🔥"),
    (_RED_HEART, "🩹"),
    ("😶", "\U0001F32B" + VS16),
    ("🐻", "❄" + VS16),
)

PRESET_SEQUENCES: Mapping[str, str] = MappingProxyType(
    {
        "love": "💕💖💗💓💞",
        "weather": "☀\ufe0f\U0001F324\ufe0f⛅\U0001F325\ufe0f☁\ufe0f\U0001F327\ufe0f⛈\ufe0f\U0001F329\ufe0f",
        "moon": "🌑🌒🌓🌔🌕🌖🌗🌘",
        "time": "🕐🕑🕒🕓🕔🕕🕖🕗🕘🕙🕚🕛",
        "growth": "🌱🌿🌳",
        "fire": "🔥💥✨⚡",
        "ocean": "🌊🐚🐠🐟🦈🐙",
        "space": "🌍🌎🌏🌙⭐🌟💫🚀🛸👽",
        "food": "🍕🍔🌮🌯🥗🍜🍣🍱",
        "celebration": "🎉🎊🎈🎁🥳🎂🍰",
    }
)
