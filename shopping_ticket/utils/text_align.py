"""
Fixed-width cell alignment.

Pads (or truncates) a value to a column width and appends the single
trailing space that separates ticket columns.
"""

from enum import Enum
from typing import List


class Alignment(Enum):
    """Horizontal alignment of a value inside its column."""
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


def format_cell(value: str, alignment: Alignment, width: int) -> str:
    """
    Align a value within a column of the given width.

    Values longer than the column are cut to its width before padding.
    The result always ends with one extra space.

    Args:
        value: Text to place in the cell
        alignment: How to distribute the padding
        width: Column width in characters

    Returns:
        Padded cell text, ``width + 1`` characters long
    """
    if len(value) > width:
        value = value[:width]

    padding = width - len(value)
    if alignment is Alignment.CENTER:
        before = padding // 2
    elif alignment is Alignment.LEFT:
        before = 0
    else:
        before = padding
    after = padding - before

    return ' ' * before + value + ' ' * after + ' '


def append_formatted(buffer: List[str], value: str, alignment: Alignment, width: int) -> None:
    """Append an aligned cell to a list of text fragments."""
    buffer.append(format_cell(value, alignment, width))
