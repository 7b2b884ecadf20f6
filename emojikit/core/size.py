"""
Size and shape rendering.

Every shape is plain string repetition: no measurement of display width is
attempted, so alignment of pyramids and diamonds assumes one space per emoji
column. Negative counts are treated as 0.
"""

from __future__ import annotations

import logging
import math
from typing import Union

from ..tables import SIZE_CONFIGS, EmojiSize, coerce, names
from .text import sub_emojis

logger = logging.getLogger(__name__)

SizeLike = Union[EmojiSize, str]


def repeat_emoji(emoji: str, count: int, separator: str = "") -> str:
    return separator.join([emoji] * max(0, count))


def scale_emoji(emoji: str, size: SizeLike) -> str:
    """Render ``emoji`` at ``size``; an unknown size echoes the input."""
    member = coerce(EmojiSize, size)
    if member is None:
        logger.debug("unknown size %r", size)
        return emoji
    config = SIZE_CONFIGS[member]
    repeated = repeat_emoji(emoji, config.repeat, config.separator)
    if config.wrapper is not None:
        start, end = config.wrapper
        return f"{start}{repeated}{end}"
    return repeated


def make_tiny(emoji: str) -> str:
    return scale_emoji(emoji, EmojiSize.TINY)


def make_small(emoji: str) -> str:
    return scale_emoji(emoji, EmojiSize.SMALL)


def make_medium(emoji: str) -> str:
    return scale_emoji(emoji, EmojiSize.MEDIUM)


def make_large(emoji: str) -> str:
    return scale_emoji(emoji, EmojiSize.LARGE)


def make_huge(emoji: str) -> str:
    return scale_emoji(emoji, EmojiSize.HUGE)


def make_giant(emoji: str) -> str:
    return scale_emoji(emoji, EmojiSize.GIANT)


def scale_all_emojis(text: str, size: SizeLike) -> str:
    member = coerce(EmojiSize, size)
    if member is None:
        logger.debug("unknown size %r", size)
        return text
    return sub_emojis(text, lambda match: scale_emoji(match, member))


# ---------------------------------------------------------------------------
# Shapes
# ---------------------------------------------------------------------------

def create_grid(emoji: str, rows: int, cols: int) -> str:
    row = repeat_emoji(emoji, cols)
    return "\n".join([row] * max(0, rows))


def _centered_line(emoji: str, width: int, i: int) -> str:
    # Row i of a centered triangle whose widest row is 2*width - 1.
    return " " * (width - i) + repeat_emoji(emoji, 2 * i - 1)


def create_pyramid(emoji: str, height: int) -> str:
    """Centered triangle: row i holds 2i - 1 emojis."""
    return "\n".join(_centered_line(emoji, height, i) for i in range(1, height + 1))


def create_diamond(emoji: str, size: int) -> str:
    """Pyramid of height ceil(size / 2) followed by its mirror image."""
    mid = math.ceil(size / 2)
    rows = list(range(1, mid + 1)) + list(range(mid - 1, 0, -1))
    return "\n".join(_centered_line(emoji, mid, i) for i in rows)


def create_progress_bar(fill_emoji: str, empty_emoji: str, progress: float, length: int = 10) -> str:
    """Bar of ``length`` cells with ``progress`` (0..1) of them filled.

    Progress outside [0, 1] is clamped and NaN counts as 0. The filled count
    rounds halves up.
    """
    length = max(0, length)
    p = 0.0 if math.isnan(progress) else min(1.0, max(0.0, float(progress)))
    filled = int(math.floor(p * length + 0.5))
    return repeat_emoji(fill_emoji, filled) + repeat_emoji(empty_emoji, length - filled)


def get_available_sizes() -> list[str]:
    return names(EmojiSize)
