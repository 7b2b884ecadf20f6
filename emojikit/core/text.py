"""
Emoji scanning inside free text.

``EMOJI_PATTERN`` is the coarse heuristic used by the "in text" operations:
one code point with default emoji presentation, or any emoji code point
followed by VS16. It is not a grapheme segmenter: a skin-toned emoji matches
as base + modifier, and flags and ZWJ families match piece by piece. Callers
rely on that exact splitting, so it is kept as is.
"""

from __future__ import annotations

from typing import Callable, Iterable

import regex

from ..tables import VS16

EMOJI_PATTERN = regex.compile(r"\p{Emoji_Presentation}|\p{Emoji}" + VS16)


def find_emojis(text: str) -> list[str]:
    """All heuristic emoji matches in ``text``, left to right."""
    return EMOJI_PATTERN.findall(text)


def sub_emojis(text: str, repl: Callable[[str], str]) -> str:
    """Replace each heuristic emoji match with ``repl(match)``."""
    return EMOJI_PATTERN.sub(lambda m: repl(m.group(0)), text)


def compile_alternation(targets: Iterable[str], suffix: str = "") -> regex.Pattern[str]:
    """Compile a literal alternation of ``targets``, longest first.

    ``suffix`` is appended verbatim (a regex fragment) after the group.
    """
    ordered = sorted(set(targets), key=lambda t: (-len(t), t))
    return regex.compile("(?:" + "|".join(regex.escape(t) for t in ordered) + ")" + suffix)


def replace_each(text: str, pattern: regex.Pattern[str], pick: Callable[[], str]) -> str:
    """Single-pass replacement: one ``pick()`` per distinct match.

    Every occurrence of the same matched text receives the same replacement,
    and replacements are never rescanned.
    """
    chosen: dict[str, str] = {}

    def _replace(m: regex.Match[str]) -> str:
        found = m.group(0)
        if found not in chosen:
            chosen[found] = pick()
        return chosen[found]

    return pattern.sub(_replace, text)
