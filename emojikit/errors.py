"""Exception types for emojikit.

The function libraries never raise on unrecognized input; they return a
fallback instead. These exceptions are used by the strict lookup helper
``emojikit.tables.require()`` for callers (the CLI) that prefer an error
over a silent fallback.
"""

from __future__ import annotations

from typing import Sequence


class EmojiKitError(Exception):
    """Base class for emojikit errors."""


class UnknownOptionError(EmojiKitError, ValueError):
    """Raised when a name does not match any member of a closed enumeration."""

    def __init__(self, kind: str, value: object, choices: Sequence[str]) -> None:
        self.kind = kind
        self.value = value
        self.choices = tuple(choices)
        super().__init__(f"unknown {kind} {value!r} (choose from: {', '.join(self.choices)})")
