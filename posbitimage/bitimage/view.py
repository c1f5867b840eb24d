from __future__ import annotations

from typing import List

from .codec import unpack_byte
from .types import BitImage


def dot_row(image: BitImage, row: int) -> List[bool]:
    """Return one dot per column for the given row, left to right."""
    if not 0 <= row < image.height:
        raise IndexError(f"row must be in range 0..{image.height - 1}, but was {row}")
    band = row // 8
    mask = 0x80 >> (row % 8)
    return [bool(image.image_data[column * image.y_size + band] & mask) for column in range(image.width)]


def dot_column(image: BitImage, column: int) -> List[bool]:
    """Return the dots of one column, top to bottom."""
    if not 0 <= column < image.width:
        raise IndexError(f"column must be in range 0..{image.width - 1}, but was {column}")
    dots: List[bool] = []
    for value in image.column_bytes(column):
        dots.extend(unpack_byte(value))
    return dots


def dot_matrix(image: BitImage) -> List[List[bool]]:
    """Return every column as produced by :func:`dot_column`."""
    return [dot_column(image, column) for column in range(image.width)]


def format_dots(image: BitImage, on: str = "#", off: str = ".") -> str:
    """Render the image as text, one line per dot row."""
    lines = []
    for row in range(image.height):
        lines.append("".join(on if dot else off for dot in dot_row(image, row)))
    return "\n".join(lines)
