"""Mood categories and the derived emoji -> mood index."""

from __future__ import annotations

from enum import Enum, unique
from types import MappingProxyType
from typing import Mapping


@unique
class Mood(Enum):
    HAPPY = "happy"
    SAD = "sad"
    ANGRY = "angry"
    CALM = "calm"
    SURPRISED = "surprised"
    NEUTRAL = "neutral"


MOOD_EMOJIS: Mapping[Mood, tuple[str, ...]] = MappingProxyType(
    {
        Mood.HAPPY: ("😀", "😃", "😄", "😁", "😆", "😊", "🙂", "😋", "😎", "🤗", "🥰", "😍"),
        Mood.SAD: ("😢", "😭", "😿", "🥺", "😞", "😔", "😟", "🙁", "☹️", "😥", "😰"),
        Mood.ANGRY: ("😠", "😡", "🤬", "👿", "💢", "😤", "🔥", "💀"),
        Mood.CALM: ("😌", "😇", "🧘", "☮️", "🕊️", "🌸", "🍃", "✨"),
        Mood.SURPRISED: ("😮", "😯", "😲", "🤯", "😱", "🙀", "❗", "⁉️"),
        Mood.NEUTRAL: ("😐", "😑", "🫤", "😶", "🤔", "🫥"),
    }
)


def _build_reverse_index(table: Mapping[Mood, tuple[str, ...]]) -> Mapping[str, Mood]:
    index: dict[str, Mood] = {}
    for mood, emojis in table.items():
        for emoji in emojis:
            index[emoji] = mood
    return MappingProxyType(index)


MOOD_BY_EMOJI: Mapping[str, Mood] = _build_reverse_index(MOOD_EMOJIS)
