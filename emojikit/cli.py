"""
Command-line front-end.

Usage:
    emojikit tone "👋 hi" --tone dark --all
    emojikit decompose 👩‍💻
    emojikit progress 🟢 ⚪ 0.5 --length 10
    emojikit random --count 5 --category food --seed 7

Every subcommand prints its result to stdout. Unknown option names (tones,
themes, moods, categories, sizes) exit with status 2.
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import Callable, Optional

from . import core
from .config import load_config
from .core.rng import seeded
from .errors import UnknownOptionError
from .log import setup_logging
from .tables import ColorTheme, EmojiCategory, EmojiSize, Mood, SkinTone, require

logger = logging.getLogger(__name__)

Handler = Callable[[argparse.Namespace, Optional[random.Random]], str]

_LISTINGS: dict[str, Callable[[], list[str]]] = {
    "tones": core.get_available_skin_tones,
    "themes": core.get_available_themes,
    "moods": core.get_available_moods,
    "categories": core.get_available_categories,
    "sizes": core.get_available_sizes,
    "presets": core.get_available_presets,
}


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------

def _tone(args: argparse.Namespace, rng: Optional[random.Random]) -> str:
    tone = require(SkinTone, args.tone)
    if args.all:
        return core.apply_all_skin_tones(args.text, tone)
    return core.apply_skin_tone(args.text, tone)


def _untone(args: argparse.Namespace, rng: Optional[random.Random]) -> str:
    return core.remove_skin_tone(args.text)


def _hearts(args: argparse.Namespace, rng: Optional[random.Random]) -> str:
    return core.colorize_hearts(args.text, require(ColorTheme, args.theme), rng)


def _combine(args: argparse.Namespace, rng: Optional[random.Random]) -> str:
    return core.join_with_zwj(*args.emojis)


def _split(args: argparse.Namespace, rng: Optional[random.Random]) -> str:
    return " ".join(core.split_zwj(args.sequence))


def _decompose(args: argparse.Namespace, rng: Optional[random.Random]) -> str:
    parts = core.decompose_zwj(args.sequence)
    if parts is None:
        return "(not a ZWJ sequence)"
    return " ".join(parts)


def _preset(args: argparse.Namespace, rng: Optional[random.Random]) -> str:
    return core.get_preset_sequence(args.name)


def _mood(args: argparse.Namespace, rng: Optional[random.Random]) -> str:
    mood = core.detect_mood(args.emoji)
    return "unknown" if mood is None else mood.value


def _transform(args: argparse.Namespace, rng: Optional[random.Random]) -> str:
    return core.transform_all_moods(args.text, require(Mood, args.to), rng)


def _random(args: argparse.Namespace, rng: Optional[random.Random]) -> str:
    if args.category is not None:
        category = require(EmojiCategory, args.category)
        if args.unique:
            return "".join(core.random_subset(category, args.count, rng))
        return "".join(core.random_from_category(category, rng) for _ in range(max(0, args.count)))
    return "".join(core.random_emojis(args.count, unique=args.unique, rng=rng))


def _shuffle(args: argparse.Namespace, rng: Optional[random.Random]) -> str:
    return core.shuffle_emojis_in_text(args.text, rng)


def _parse_weight(item: str) -> tuple[str, float]:
    emoji, sep, weight = item.rpartition("=")
    if not sep or not emoji:
        raise argparse.ArgumentTypeError(f"expected EMOJI=WEIGHT, got {item!r}")
    try:
        return emoji, float(weight)
    except ValueError:
        raise argparse.ArgumentTypeError(f"weight must be a number: {item!r}") from None


def _weighted(args: argparse.Namespace, rng: Optional[random.Random]) -> str:
    return core.weighted_random(dict(args.weights), rng)


def _dice(args: argparse.Namespace, rng: Optional[random.Random]) -> str:
    if args.coin:
        return core.flip_coin(rng=rng)
    return core.roll_dice(rng)


def _scale(args: argparse.Namespace, rng: Optional[random.Random]) -> str:
    return core.scale_all_emojis(args.text, require(EmojiSize, args.size))


def _grid(args: argparse.Namespace, rng: Optional[random.Random]) -> str:
    return core.create_grid(args.emoji, args.rows, args.cols)


def _pyramid(args: argparse.Namespace, rng: Optional[random.Random]) -> str:
    return core.create_pyramid(args.emoji, args.height)


def _diamond(args: argparse.Namespace, rng: Optional[random.Random]) -> str:
    return core.create_diamond(args.emoji, args.size)


def _progress(args: argparse.Namespace, rng: Optional[random.Random]) -> str:
    return core.create_progress_bar(args.fill, args.empty, args.progress, args.length)


def _list(args: argparse.Namespace, rng: Optional[random.Random]) -> str:
    return "\n".join(_LISTINGS[args.what]())


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="emojikit", description="Manipulate emojis inside text.")
    p.add_argument("--seed", type=int, default=None, help="Seed for random operations (overrides EMOJIKIT_SEED)")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="command", required=True)

    s = sub.add_parser("tone", help="Apply a skin tone")
    s.add_argument("text")
    s.add_argument("--tone", required=True, help="light, medium-light, medium, medium-dark or dark")
    s.add_argument("--all", action="store_true", help="Tone every supported emoji in the text")
    s.set_defaults(handler=_tone)

    s = sub.add_parser("untone", help="Strip skin tone modifiers")
    s.add_argument("text")
    s.set_defaults(handler=_untone)

    s = sub.add_parser("hearts", help="Recolor heart emojis with a theme")
    s.add_argument("text")
    s.add_argument("--theme", required=True)
    s.set_defaults(handler=_hearts)

    s = sub.add_parser("combine", help="Join emojis with a zero-width joiner")
    s.add_argument("emojis", nargs="+")
    s.set_defaults(handler=_combine)

    s = sub.add_parser("split", help="Split a ZWJ sequence")
    s.add_argument("sequence")
    s.set_defaults(handler=_split)

    s = sub.add_parser("decompose", help="Components of a ZWJ sequence")
    s.add_argument("sequence")
    s.set_defaults(handler=_decompose)

    s = sub.add_parser("preset", help="Print a preset emoji sequence")
    s.add_argument("name")
    s.set_defaults(handler=_preset)

    s = sub.add_parser("mood", help="Detect the mood of an emoji")
    s.add_argument("emoji")
    s.set_defaults(handler=_mood)

    s = sub.add_parser("transform", help="Shift every mood emoji to another mood")
    s.add_argument("text")
    s.add_argument("--to", required=True)
    s.set_defaults(handler=_transform)

    s = sub.add_parser("random", help="Random emojis")
    s.add_argument("--count", type=int, default=1)
    s.add_argument("--category", default=None)
    s.add_argument("--unique", action="store_true")
    s.set_defaults(handler=_random)

    s = sub.add_parser("shuffle", help="Shuffle the emojis inside text")
    s.add_argument("text")
    s.set_defaults(handler=_shuffle)

    s = sub.add_parser("weighted", help="Weighted random pick, e.g. 🍎=10 🍊=1")
    s.add_argument("weights", nargs="+", type=_parse_weight)
    s.set_defaults(handler=_weighted)

    s = sub.add_parser("dice", help="Roll a die (or flip a coin)")
    s.add_argument("--coin", action="store_true")
    s.set_defaults(handler=_dice)

    s = sub.add_parser("scale", help="Scale every emoji in text")
    s.add_argument("text")
    s.add_argument("--size", required=True)
    s.set_defaults(handler=_scale)

    s = sub.add_parser("grid", help="Grid of emojis")
    s.add_argument("emoji")
    s.add_argument("rows", type=int)
    s.add_argument("cols", type=int)
    s.set_defaults(handler=_grid)

    s = sub.add_parser("pyramid", help="Pyramid of emojis")
    s.add_argument("emoji")
    s.add_argument("height", type=int)
    s.set_defaults(handler=_pyramid)

    s = sub.add_parser("diamond", help="Diamond of emojis")
    s.add_argument("emoji")
    s.add_argument("size", type=int)
    s.set_defaults(handler=_diamond)

    s = sub.add_parser("progress", help="Emoji progress bar")
    s.add_argument("fill")
    s.add_argument("empty")
    s.add_argument("progress", type=float)
    s.add_argument("--length", type=int, default=10)
    s.set_defaults(handler=_progress)

    s = sub.add_parser("list", help="List available option names")
    s.add_argument("what", choices=sorted(_LISTINGS))
    s.set_defaults(handler=_list)

    return p


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = load_config()
    setup_logging(verbose=args.verbose, default_level=config.log_level_value)

    rng = seeded(args.seed) if args.seed is not None else None
    logger.debug("command=%s seed=%s", args.command, args.seed)

    try:
        out = args.handler(args, rng)
    except UnknownOptionError as exc:
        print(f"emojikit error: {exc}", file=sys.stderr)
        return 2

    print(out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
