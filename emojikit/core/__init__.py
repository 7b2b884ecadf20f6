"""
Emoji transformation libraries.

One module per concern, each a flat set of pure functions over the tables in
``emojikit.tables``. Randomized functions take an optional ``rng``.
"""

from .colorizer import (
    apply_all_skin_tones,
    apply_skin_tone,
    colorize_hearts,
    get_available_skin_tones,
    get_available_themes,
    get_colored_emoji,
    get_emojis_for_theme,
    get_skin_tone,
    make_blue,
    make_green,
    remove_skin_tone,
)
from .combiner import (
    add_border,
    add_emoji_style,
    alternate,
    bullet_list,
    create_family,
    create_profession,
    decompose_zwj,
    get_available_presets,
    get_known_zwj_combinations,
    get_preset_sequence,
    is_zwj_sequence,
    join_with_zwj,
    mirror,
    sandwich,
    sequence,
    split_zwj,
    wave,
)
from .mood import (
    detect_mood,
    get_available_moods,
    get_emoji_for_mood,
    get_emojis_for_mood,
    make_angry_cool,
    make_happy_sad,
    make_sad_happy,
    transform_all_moods,
    transform_mood,
)
from .randomizer import (
    emoji_password,
    flip_coin,
    get_available_categories,
    get_emojis_in_category,
    pick_random,
    random_emoji,
    random_emojis,
    random_excluding,
    random_from_category,
    random_subset,
    randomize_emojis,
    roll_dice,
    shuffle,
    shuffle_emojis_in_text,
    weighted_random,
)
from .size import (
    create_diamond,
    create_grid,
    create_progress_bar,
    create_pyramid,
    get_available_sizes,
    make_giant,
    make_huge,
    make_large,
    make_medium,
    make_small,
    make_tiny,
    repeat_emoji,
    scale_all_emojis,
    scale_emoji,
)

__all__ = [
    # colorizer
    "apply_all_skin_tones",
    "apply_skin_tone",
    "colorize_hearts",
    "get_available_skin_tones",
    "get_available_themes",
    "get_colored_emoji",
    "get_emojis_for_theme",
    "get_skin_tone",
    "make_blue",
    "make_green",
    "remove_skin_tone",
    # combiner
    "add_border",
    "add_emoji_style",
    "alternate",
    "bullet_list",
    "create_family",
    "create_profession",
    "decompose_zwj",
    "get_available_presets",
    "get_known_zwj_combinations",
    "get_preset_sequence",
    "is_zwj_sequence",
    "join_with_zwj",
    "mirror",
    "sandwich",
    "sequence",
    "split_zwj",
    "wave",
    # mood
    "detect_mood",
    "get_available_moods",
    "get_emoji_for_mood",
    "get_emojis_for_mood",
    "make_angry_cool",
    "make_happy_sad",
    "make_sad_happy",
    "transform_all_moods",
    "transform_mood",
    # randomizer
    "emoji_password",
    "flip_coin",
    "get_available_categories",
    "get_emojis_in_category",
    "pick_random",
    "random_emoji",
    "random_emojis",
    "random_excluding",
    "random_from_category",
    "random_subset",
    "randomize_emojis",
    "roll_dice",
    "shuffle",
    "shuffle_emojis_in_text",
    "weighted_random",
    # size
    "create_diamond",
    "create_grid",
    "create_progress_bar",
    "create_pyramid",
    "get_available_sizes",
    "make_giant",
    "make_huge",
    "make_large",
    "make_medium",
    "make_small",
    "make_tiny",
    "repeat_emoji",
    "scale_all_emojis",
    "scale_emoji",
]
