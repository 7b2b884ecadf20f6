"""Mood detection and mood-to-mood emoji substitution."""

from __future__ import annotations

import logging
import random
from typing import Optional, Union

from ..tables import MOOD_BY_EMOJI, MOOD_EMOJIS, Mood, coerce, names
from .rng import resolve
from .text import compile_alternation, replace_each

logger = logging.getLogger(__name__)

MoodLike = Union[Mood, str]

_ANY_MOOD_RE = compile_alternation(MOOD_BY_EMOJI)
_MOOD_RE = {mood: compile_alternation(emojis) for mood, emojis in MOOD_EMOJIS.items()}


def detect_mood(emoji: str) -> Optional[Mood]:
    return MOOD_BY_EMOJI.get(emoji)


def get_emoji_for_mood(mood: MoodLike, rng: Optional[random.Random] = None) -> str:
    """Random emoji expressing ``mood``; "" for an unknown mood."""
    member = coerce(Mood, mood)
    if member is None:
        logger.debug("unknown mood %r", mood)
        return ""
    return resolve(rng).choice(MOOD_EMOJIS[member])


def transform_mood(emoji: str, target_mood: MoodLike, rng: Optional[random.Random] = None) -> str:
    """Swap ``emoji`` for a random emoji of ``target_mood``.

    The input is returned unchanged when its mood is unknown, when the target
    is unknown, or when it already expresses the target mood.
    """
    target = coerce(Mood, target_mood)
    current = detect_mood(emoji)
    if current is None or target is None or current is target:
        return emoji
    return get_emoji_for_mood(target, rng)


def _shift(text: str, source: Optional[Mood], target: Mood, rng: Optional[random.Random]) -> str:
    pattern = _ANY_MOOD_RE if source is None else _MOOD_RE[source]
    r = resolve(rng)
    return replace_each(text, pattern, lambda: get_emoji_for_mood(target, r))


def transform_all_moods(text: str, target_mood: MoodLike, rng: Optional[random.Random] = None) -> str:
    """Replace every mood emoji in ``text`` with one of ``target_mood``.

    Each distinct emoji found gets one pick, shared by all its occurrences.
    Emojis already in the target mood are re-drawn as well.
    """
    target = coerce(Mood, target_mood)
    if target is None:
        logger.debug("unknown mood %r", target_mood)
        return text
    return _shift(text, None, target, rng)


def make_happy_sad(text: str, rng: Optional[random.Random] = None) -> str:
    return _shift(text, Mood.HAPPY, Mood.SAD, rng)


def make_sad_happy(text: str, rng: Optional[random.Random] = None) -> str:
    return _shift(text, Mood.SAD, Mood.HAPPY, rng)


def make_angry_cool(text: str, rng: Optional[random.Random] = None) -> str:
    """Angry emojis become calm ones."""
    return _shift(text, Mood.ANGRY, Mood.CALM, rng)


def get_available_moods() -> list[str]:
    return names(Mood)


def get_emojis_for_mood(mood: MoodLike) -> list[str]:
    member = coerce(Mood, mood)
    if member is None:
        return []
    return list(MOOD_EMOJIS[member])
