"""Decoder for uncompressed 1-bit-per-pixel BMP files.

Only the fixed header fields needed to locate the pixel rows are read. The
palette is ignored: every pixel is assumed to use the default black-on-white
table where bit value 0 is black, so packed dots are inverted
unconditionally. Unused bits past the image width are forced to white first.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Union

from ..errors import FormatError
from .codec import pack_rows, round_up8
from .types import BitImage, validate_dimensions

log = logging.getLogger(__name__)

SIGNATURE = b"BM"
PIXEL_OFFSET_FIELD = 10
WIDTH_FIELD = 18
HEIGHT_FIELD = 22
BIT_COUNT_FIELD = 28
COMPRESSION_FIELD = 30
HEADER_SIZE = 34

FILLER_ROW_BYTE = 0xFF


@dataclass(frozen=True)
class RasterFrame:
    """Pixel rows of a BMP in top-down order, each trimmed to the image width."""

    width: int
    height: int
    rows: List[bytes]

    @property
    def row_bytes(self) -> int:
        return (self.width + 7) // 8


def _u16(data: bytes, offset: int) -> int:
    return int.from_bytes(data[offset : offset + 2], "little")


def _u32(data: bytes, offset: int) -> int:
    return int.from_bytes(data[offset : offset + 4], "little")


def _i32(data: bytes, offset: int) -> int:
    return int.from_bytes(data[offset : offset + 4], "little", signed=True)


def row_stride(width: int) -> int:
    """Bytes per stored row: ``ceil(width / 8)`` rounded up to a multiple of 4."""
    return ((width + 7) // 8 + 3) // 4 * 4


def read_raster_frame(data: bytes) -> RasterFrame:
    """Validate the header and return the pixel rows top-down."""
    if data[:2] != SIGNATURE:
        raise FormatError("Not a recognized raster container (missing BM signature)")
    if len(data) < HEADER_SIZE:
        raise FormatError(f"Header is truncated: {len(data)} bytes, expected at least {HEADER_SIZE}")
    bit_count = _u16(data, BIT_COUNT_FIELD)
    if bit_count != 1:
        raise FormatError(f"Unsupported color depth: {bit_count} bits per pixel, expected 1")
    compression = _u32(data, COMPRESSION_FIELD)
    if compression != 0:
        raise FormatError(f"Compressed rasters unsupported (compression type {compression})")

    offset = _u32(data, PIXEL_OFFSET_FIELD)
    width = _i32(data, WIDTH_FIELD)
    height = _i32(data, HEIGHT_FIELD)
    if width <= 0:
        raise FormatError(f"Width must be greater than zero, but was {width}")
    if height == 0:
        raise FormatError("Height must not be zero")
    row_count = abs(height)
    validate_dimensions(round_up8(width) // 8, round_up8(row_count) // 8)

    stride = row_stride(width)
    end = offset + stride * row_count
    if offset < HEADER_SIZE or end > len(data):
        raise FormatError(
            f"Pixel data is truncated: need bytes {offset}..{end}, buffer has {len(data)}"
        )
    log.debug(
        "BMP header: width=%d height=%d offset=%d stride=%d", width, height, offset, stride
    )

    row_bytes = (width + 7) // 8
    stored = [data[offset + i * stride : offset + (i + 1) * stride] for i in range(row_count)]
    if height > 0:
        stored.reverse()
    rows = [_whiten_tail(row[:row_bytes], width) for row in stored]
    return RasterFrame(width=width, height=row_count, rows=rows)


def _whiten_tail(row: bytes, width: int) -> bytes:
    """Set the unused low bits of the last byte to white."""
    spare = -width % 8
    if not spare:
        return row
    return row[:-1] + bytes([row[-1] | (0xFF >> (8 - spare))])


def pad_rows(frame: RasterFrame) -> List[bytes]:
    """Append white filler rows until the row count is a multiple of 8."""
    rows = list(frame.rows)
    missing = round_up8(len(rows)) - len(rows)
    if missing:
        log.debug("Appending %d filler rows", missing)
        rows.extend(bytes([FILLER_ROW_BYTE]) * frame.row_bytes for _ in range(missing))
    return rows


def decode_bitmap(data: bytes) -> BitImage:
    """Decode an uncompressed 1-bpp BMP into a bit image."""
    frame = read_raster_frame(bytes(data))
    return pack_rows(pad_rows(frame), frame.width, invert=True)


def read_bitmap_file(path: Union[str, Path]) -> BitImage:
    with open(path, "rb") as handle:
        data = handle.read()
    return decode_bitmap(data)
