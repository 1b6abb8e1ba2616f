# Whim Document Library — (c) 2023 Evan Overman — MIT Licensed
"""
Color palette and rich theme used for whim console output.

`OneColors` holds hex color strings that can be dropped straight into rich
markup, e.g. `f"[{OneColors.DARK_RED}]error[/]"`. Attributes ending in `_b`
are the bold variants.
"""
from rich.theme import Theme


class OneColors:
    """One Dark inspired palette."""

    BLACK = "#282C34"
    GUTTER_GREY = "#4B5263"
    COMMENT_GREY = "#5C6370"
    WHITE = "#ABB2BF"
    DARK_RED = "#BE5046"
    LIGHT_RED = "#E06C75"
    GREEN = "#98C379"
    LIGHT_YELLOW = "#E5C07B"
    DARK_YELLOW = "#D19A66"
    BLUE = "#61AFEF"
    MAGENTA = "#C678DD"
    CYAN = "#56B6C2"

    BLUE_b = f"bold {BLUE}"
    CYAN_b = f"bold {CYAN}"
    GREEN_b = f"bold {GREEN}"
    DARK_RED_b = f"bold {DARK_RED}"


def get_theme() -> Theme:
    """Return the rich theme mapping whim's semantic style names to colors."""
    return Theme(
        {
            "whim.title": OneColors.BLUE_b,
            "whim.command": OneColors.CYAN,
            "whim.flag": OneColors.MAGENTA,
            "whim.value": OneColors.GREEN,
            "whim.comment": OneColors.COMMENT_GREY,
            "whim.error": OneColors.DARK_RED_b,
            "whim.warning": OneColors.DARK_YELLOW,
        }
    )
