"""Built-in border character sets."""

from __future__ import annotations

from dataclasses import dataclass

from .models import TableStyle


@dataclass(frozen=True)
class BorderStyle:
    """
    The eleven characters used to draw a table frame.

    Three junction characters for each of the top, middle (header/body
    separator) and bottom border lines, plus the horizontal fill and the
    vertical column separator.
    """

    top_left: str
    top_middle: str
    top_right: str
    middle_left: str
    middle_middle: str
    middle_right: str
    bottom_left: str
    bottom_middle: str
    bottom_right: str
    horizontal: str
    vertical: str


BORDER_STYLES: dict[TableStyle, BorderStyle] = {
    TableStyle.SIMPLE: BorderStyle(
        top_left="+", top_middle="+", top_right="+",
        middle_left="+", middle_middle="+", middle_right="+",
        bottom_left="+", bottom_middle="+", bottom_right="+",
        horizontal="-", vertical="|",
    ),
    TableStyle.DOUBLE: BorderStyle(
        top_left="╔", top_middle="╦", top_right="╗",
        middle_left="╠", middle_middle="╬", middle_right="╣",
        bottom_left="╚", bottom_middle="╩", bottom_right="╝",
        horizontal="═", vertical="║",
    ),
    TableStyle.ROUNDED: BorderStyle(
        top_left="╭", top_middle="┬", top_right="╮",
        middle_left="├", middle_middle="┼", middle_right="┤",
        bottom_left="╰", bottom_middle="┴", bottom_right="╯",
        horizontal="─", vertical="│",
    ),
}


def get_border_style(style: TableStyle | str | None) -> BorderStyle:
    """Return the border set for a style name, defaulting to simple."""
    return BORDER_STYLES[TableStyle.resolve(style)]
