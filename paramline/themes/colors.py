# Paramline Command Line Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Color constants and the Rich theme used by the Paramline console.

`OneColors` holds hex color strings that can be dropped straight into Rich
markup (`f"[{OneColors.DARK_RED}]error[/]"`). Suffix `_b` adds bold.
"""
from rich.theme import Theme


class OneColors:
    """One Dark inspired color palette."""

    BLACK = "#282C34"
    WHITE = "#ABB2BF"
    WHITE_b = "bold #ABB2BF"
    COMMENT_GREY = "#5C6370"
    DARK_RED = "#BE5046"
    DARK_RED_b = "bold #BE5046"
    GREEN = "#98C379"
    GREEN_b = "bold #98C379"
    LIGHT_YELLOW = "#E5C07B"
    DARK_YELLOW = "#D19A66"
    DARK_YELLOW_b = "bold #D19A66"
    BLUE = "#61AFEF"
    BLUE_b = "bold #61AFEF"
    MAGENTA = "#C678DD"
    CYAN = "#56B6C2"
    CYAN_b = "bold #56B6C2"


def get_one_theme() -> Theme:
    """Return the Rich theme with the styles used to render parsed parameters."""
    return Theme(
        {
            "parameter.name": OneColors.BLUE_b,
            "parameter.default": OneColors.WHITE,
            "parameter.string": OneColors.GREEN,
            "parameter.number": OneColors.DARK_YELLOW,
            "parameter.boolean": OneColors.MAGENTA,
            "parameter.array": OneColors.CYAN,
            "parameter.kind": OneColors.COMMENT_GREY,
            "error": OneColors.DARK_RED_b,
        }
    )
