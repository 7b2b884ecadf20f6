"""
Random emoji selection and shuffling.

Uniform picks index into a table with ``rng.choice``; shuffles work on a copy
via ``rng.shuffle`` (Fisher-Yates), so inputs are never modified. Pass a
seeded ``random.Random`` as ``rng`` for reproducible output.
"""

from __future__ import annotations

import logging
import math
import random
from typing import Mapping, Optional, Sequence, TypeVar, Union

from ..tables import ALL_EMOJIS, CATEGORY_EMOJIS, COIN_HEADS, COIN_TAILS, DICE_FACES, EmojiCategory, coerce, names
from .rng import resolve
from .text import find_emojis, sub_emojis

logger = logging.getLogger(__name__)

T = TypeVar("T")
CategoryLike = Union[EmojiCategory, str]

# ALL_EMOJIS repeats a few emojis across categories; unique draws use this.
_DISTINCT_EMOJIS: tuple[str, ...] = tuple(dict.fromkeys(ALL_EMOJIS))


def random_emoji(rng: Optional[random.Random] = None) -> str:
    return resolve(rng).choice(ALL_EMOJIS)


def random_from_category(category: CategoryLike, rng: Optional[random.Random] = None) -> str:
    """Random emoji of ``category``; "" for an unknown category."""
    member = coerce(EmojiCategory, category)
    if member is None:
        logger.debug("unknown category %r", category)
        return ""
    return resolve(rng).choice(CATEGORY_EMOJIS[member])


def shuffle(items: Sequence[T], rng: Optional[random.Random] = None) -> list[T]:
    """Uniformly shuffled copy of ``items``."""
    result = list(items)
    resolve(rng).shuffle(result)
    return result


def random_emojis(count: int, unique: bool = False, rng: Optional[random.Random] = None) -> list[str]:
    """``count`` random emojis.

    With ``unique`` the result holds no repeats and is capped at the number of
    distinct emojis available.
    """
    r = resolve(rng)
    n = max(0, count)
    if unique:
        return shuffle(_DISTINCT_EMOJIS, r)[:n]
    return [r.choice(ALL_EMOJIS) for _ in range(n)]


def shuffle_emojis_in_text(text: str, rng: Optional[random.Random] = None) -> str:
    """Permute the emojis of ``text`` among their own positions."""
    shuffled = iter(shuffle(find_emojis(text), rng))
    return sub_emojis(text, lambda _match: next(shuffled))


def randomize_emojis(
    text: str,
    category: Optional[CategoryLike] = None,
    rng: Optional[random.Random] = None,
) -> str:
    """Replace each emoji in ``text`` with an independent random one.

    Picks come from ``category`` when given. An unknown category leaves the
    text unchanged.
    """
    r = resolve(rng)
    if category is None:
        return sub_emojis(text, lambda _match: random_emoji(r))
    member = coerce(EmojiCategory, category)
    if member is None:
        logger.debug("unknown category %r", category)
        return text
    return sub_emojis(text, lambda _match: random_from_category(member, r))


def pick_random(emojis: Sequence[str], rng: Optional[random.Random] = None) -> str:
    if not emojis:
        return ""
    return resolve(rng).choice(emojis)


def _clean_weight(w: float) -> float:
    v = float(w)
    # NaN fails the comparison and becomes 0 too.
    return v if v > 0 else 0.0


def weighted_random(weights: Mapping[str, float], rng: Optional[random.Random] = None) -> str:
    """Pick a key with probability proportional to its weight.

    Negative and NaN weights count as 0. Infinite weights win outright, split
    uniformly among themselves. Returns "" for an empty mapping and the first
    key when every weight is 0.
    """
    entries = [(emoji, _clean_weight(w)) for emoji, w in weights.items()]
    if not entries:
        return ""
    r = resolve(rng)
    infinite = [emoji for emoji, w in entries if math.isinf(w)]
    if infinite:
        return r.choice(infinite)
    peak = max(w for _, w in entries)
    if peak <= 0:
        return entries[0][0]
    # Normalizing by the peak keeps the total finite (at most len(entries)).
    entries = [(emoji, w / peak) for emoji, w in entries]
    total = sum(w for _, w in entries)
    draw = r.random() * total
    for emoji, w in entries:
        if draw < w:
            return emoji
        draw -= w
    # Float rounding can leave a sliver past the last bucket.
    return next(emoji for emoji, w in reversed(entries) if w > 0)


def emoji_password(length: int = 4, rng: Optional[random.Random] = None) -> str:
    return "".join(random_emojis(length, rng=rng))


def random_excluding(count: int, exclude: Sequence[str], rng: Optional[random.Random] = None) -> list[str]:
    """Up to ``count`` shuffled emojis from the pool minus ``exclude``."""
    excluded = set(exclude)
    pool = [e for e in ALL_EMOJIS if e not in excluded]
    return shuffle(pool, rng)[: max(0, count)]


def roll_dice(rng: Optional[random.Random] = None) -> str:
    return pick_random(DICE_FACES, rng)


def flip_coin(heads: str = COIN_HEADS, tails: str = COIN_TAILS, rng: Optional[random.Random] = None) -> str:
    return heads if resolve(rng).random() < 0.5 else tails


def get_available_categories() -> list[str]:
    return names(EmojiCategory)


def get_emojis_in_category(category: CategoryLike) -> list[str]:
    member = coerce(EmojiCategory, category)
    if member is None:
        return []
    return list(CATEGORY_EMOJIS[member])


def random_subset(category: CategoryLike, count: int, rng: Optional[random.Random] = None) -> list[str]:
    """Up to ``count`` distinct emojis of ``category``."""
    return shuffle(get_emojis_in_category(category), rng)[: max(0, count)]
