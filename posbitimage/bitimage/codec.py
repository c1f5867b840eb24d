from __future__ import annotations

from typing import List, Sequence

from ..errors import FormatError
from .types import BitImage, validate_dimensions


def round_up8(value: int) -> int:
    return (value + 7) // 8 * 8


def row_bit(row: bytes, column: int) -> int:
    """Return the dot at ``column`` of a row packed MSB-first (leftmost dot in bit 7)."""
    return (row[column // 8] >> (7 - column % 8)) & 1


def band_byte(band: Sequence[bytes], column: int) -> int:
    """Stack one column of an 8-row band into a byte, top row in bit 7."""
    value = 0
    for i, row in enumerate(band):
        if row_bit(row, column):
            value |= 0x80 >> i
    return value


def pack_rows(rows: Sequence[bytes], width: int, invert: bool = False) -> BitImage:
    """Pack top-down rows of MSB-first dots into a column-major bit image.

    Every row must hold at least ``ceil(width / 8)`` bytes and the row count
    must be a multiple of 8. Columns past ``width`` up to the next byte
    boundary are packed as well.
    """
    if width <= 0:
        raise FormatError(f"Width must be greater than zero, but was {width}")
    if not rows or len(rows) % 8 != 0:
        raise FormatError(f"Row count must be a positive multiple of 8, but was {len(rows)}")
    padded_width = round_up8(width)
    row_bytes = padded_width // 8
    for row in rows:
        if len(row) < row_bytes:
            raise FormatError(f"Rows must be at least {row_bytes} bytes long")

    x_size = padded_width // 8
    y_size = len(rows) // 8
    validate_dimensions(x_size, y_size)

    bands = [rows[i : i + 8] for i in range(0, len(rows), 8)]
    mask = 0xFF if invert else 0x00
    out = bytearray()
    for column in range(padded_width):
        for band in bands:
            out.append(band_byte(band, column) ^ mask)
    return BitImage(x_size, y_size, bytes(out))


def fold_group(group: Sequence[bool], msb_first: bool) -> int:
    """Fold 8 dots into a byte, first dot in bit 0 unless ``msb_first``."""
    if msb_first:
        group = list(reversed(group))
    value = 0
    for bit, dot in enumerate(group):
        if dot:
            value |= 1 << bit
    return value


def pack_dot_matrix(columns: Sequence[Sequence[bool]], msb_first: bool = True) -> BitImage:
    """Build a bit image from a list of dot columns (left to right, top to bottom)."""
    if not columns:
        raise FormatError("Dot matrix must contain at least one column")
    length = len(columns[0])
    for index, column in enumerate(columns):
        if len(column) != length:
            raise FormatError(
                f"All columns must have the same length, column {index} has {len(column)} instead of {length}"
            )
    if len(columns) % 8 != 0:
        raise FormatError(f"Column count must be divisible by 8, but was {len(columns)}")
    if length % 8 != 0:
        raise FormatError(f"Column length must be divisible by 8, but was {length}")
    x_size = len(columns) // 8
    y_size = length // 8
    validate_dimensions(x_size, y_size)

    out = bytearray()
    for column in columns:
        for i in range(0, length, 8):
            out.append(fold_group(column[i : i + 8], msb_first))
    return BitImage(x_size, y_size, bytes(out))


def unpack_byte(value: int) -> List[bool]:
    """Unpack a byte into 8 dots, most significant bit first."""
    return [bool(value & (0x80 >> i)) for i in range(8)]
