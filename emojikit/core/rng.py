"""
Injectable random source.

Every randomized operation takes an optional ``rng`` (any ``random.Random``).
When it is omitted the process-wide default generator is used; that generator
is seeded from ``EMOJIKIT_SEED`` when the variable is set, otherwise from OS
entropy.
"""

from __future__ import annotations

import random
from typing import Optional

from ..config import load_config

_DEFAULT_RNG = random.Random(load_config().seed)


def resolve(rng: Optional[random.Random]) -> random.Random:
    """Return ``rng`` itself, or the default generator when it is None."""
    return _DEFAULT_RNG if rng is None else rng


def seeded(seed: int) -> random.Random:
    """Fresh generator with a fixed seed (deterministic output)."""
    return random.Random(seed)

