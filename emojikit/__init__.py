"""
emojikit: small utilities for manipulating emojis inside text.

- ``emojikit.core``: skin tones, ZWJ combining, moods, randomizing, sizing
- ``emojikit.tables``: the static lookup tables behind them
"""

from .core import *  # noqa: F401,F403
from .core import __all__ as _core_all
from .errors import EmojiKitError, UnknownOptionError
from .tables import ColorTheme, EmojiCategory, EmojiSize, Mood, SkinTone

__version__ = "0.1.0"

__all__ = [
    *_core_all,
    "EmojiKitError",
    "UnknownOptionError",
    "ColorTheme",
    "EmojiCategory",
    "EmojiSize",
    "Mood",
    "SkinTone",
]
