"""
Environment-driven configuration.

Parsing is forgiving: malformed or out-of-range values fall back to (or are
clamped to) the defaults rather than raising.

Variables:
- EMOJIKIT_SEED       seed for the default random source (unset = OS entropy;
                      clamped to the signed 64-bit range)
- EMOJIKIT_LOG_LEVEL  CLI log level when --verbose is not given
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def _env_int(name: str, default: Optional[int], *, lo: int, hi: int) -> Optional[int]:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        v = int(raw.strip())
    except ValueError:
        return default
    if v < lo:
        return int(lo)
    if v > hi:
        return int(hi)
    return int(v)


def _env_str(name: str, default: str) -> str:
    raw = os.environ.get(name)
    if raw is None:
        return default
    v = raw.strip()
    return v if v else default


@dataclass(frozen=True)
class EmojiKitConfig:
    seed: Optional[int] = None
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.seed is not None and (not isinstance(self.seed, int) or isinstance(self.seed, bool)):
            raise TypeError("seed must be an int or None")
        if self.log_level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {_LOG_LEVELS}: {self.log_level}")

    @property
    def log_level_value(self) -> int:
        return int(getattr(logging, self.log_level))


def load_config() -> EmojiKitConfig:
    """Read EmojiKitConfig from the process environment."""
    seed = _env_int("EMOJIKIT_SEED", None, lo=-(2**63), hi=2**63 - 1)
    level = _env_str("EMOJIKIT_LOG_LEVEL", "WARNING").upper()
    if level not in _LOG_LEVELS:
        level = "WARNING"
    return EmojiKitConfig(seed=seed, log_level=level)
