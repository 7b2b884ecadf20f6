"""Size presets for emoji scaling.

A size is a repeat count, a separator between the copies and an optional
pair of wrapper characters placed around the result.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, unique
from types import MappingProxyType
from typing import Mapping, Optional


@unique
class EmojiSize(Enum):
    TINY = "tiny"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    HUGE = "huge"
    GIANT = "giant"


@dataclass(frozen=True)
class SizeConfig:
    repeat: int
    separator: str = ""
    wrapper: Optional[tuple[str, str]] = None

    def __post_init__(self) -> None:
        if not isinstance(self.repeat, int) or isinstance(self.repeat, bool):
            raise TypeError("repeat must be an int")
        if self.repeat < 1:
            raise ValueError(f"repeat must be positive: {self.repeat}")
        if self.wrapper is not None and len(self.wrapper) != 2:
            raise ValueError("wrapper must be a (start, end) pair")


_MIDDLE_DOT = "·"

SIZE_CONFIGS: Mapping[EmojiSize, SizeConfig] = MappingProxyType(
    {
        EmojiSize.TINY: SizeConfig(repeat=1, wrapper=(_MIDDLE_DOT, _MIDDLE_DOT)),
        EmojiSize.SMALL: SizeConfig(repeat=1),
        EmojiSize.MEDIUM: SizeConfig(repeat=2),
        EmojiSize.LARGE: SizeConfig(repeat=3),
        EmojiSize.HUGE: SizeConfig(repeat=4, separator=" "),
        EmojiSize.GIANT: SizeConfig(repeat=5, separator=" "),
    }
)
