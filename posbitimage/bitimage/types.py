from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Sequence, Union

from ..errors import DimensionError, FormatError

MAX_X_SIZE = 255
MAX_Y_SIZE = 48
MAX_DATA_SIZE = 1536

DEFINE_BIT_IMAGE = bytes([0x1D, 0x2A])


def validate_dimensions(x_size: int, y_size: int) -> None:
    """Check declared byte dimensions against the printer's storage limits."""
    if not 1 <= x_size <= MAX_X_SIZE:
        raise DimensionError(f"x_size must be in range 1..{MAX_X_SIZE}, but was {x_size}")
    if not 1 <= y_size <= MAX_Y_SIZE:
        raise DimensionError(f"y_size must be in range 1..{MAX_Y_SIZE}, but was {y_size}")
    if x_size * y_size > MAX_DATA_SIZE:
        raise DimensionError(
            f"x_size * y_size must not exceed {MAX_DATA_SIZE}, but was {x_size * y_size}"
        )


@dataclass(frozen=True)
class BitImage:
    """Column-major packed bit image.

    ``image_data`` holds ``x_size * 8`` columns of ``y_size`` bytes each. Every
    byte covers 8 vertically stacked dots, most significant bit on top.
    """

    x_size: int
    y_size: int
    image_data: bytes = field(default=b"", repr=False)

    def __post_init__(self) -> None:
        validate_dimensions(self.x_size, self.y_size)
        expected = self.x_size * self.y_size * 8
        data = bytes(self.image_data) if self.image_data else bytes(expected)
        if len(data) != expected:
            raise FormatError(f"image_data must be {expected} bytes long, but was {len(data)}")
        object.__setattr__(self, "image_data", data)

    @classmethod
    def from_bitmap(cls, data: bytes) -> "BitImage":
        from .bitmap import decode_bitmap

        return decode_bitmap(data)

    @classmethod
    def from_bitmap_file(cls, path: Union[str, Path]) -> "BitImage":
        from .bitmap import read_bitmap_file

        return read_bitmap_file(path)

    @classmethod
    def from_dot_matrix(cls, columns: Sequence[Sequence[bool]], msb_first: bool = True) -> "BitImage":
        from .codec import pack_dot_matrix

        return pack_dot_matrix(columns, msb_first=msb_first)

    @property
    def width(self) -> int:
        """Width in dots."""
        return self.x_size * 8

    @property
    def height(self) -> int:
        """Height in dots."""
        return self.y_size * 8

    @property
    def header(self) -> bytes:
        return DEFINE_BIT_IMAGE + bytes([self.x_size, self.y_size])

    def to_bytes(self) -> bytes:
        """Return the volatile bit image definition: header followed by the data."""
        return self.header + self.image_data

    def dot_row(self, row: int) -> List[bool]:
        from .view import dot_row

        return dot_row(self, row)

    def dot_column(self, column: int) -> List[bool]:
        from .view import dot_column

        return dot_column(self, column)

    def dot_matrix(self) -> List[List[bool]]:
        from .view import dot_matrix

        return dot_matrix(self)

    def column_bytes(self, column: int) -> bytes:
        start = column * self.y_size
        return self.image_data[start : start + self.y_size]
