from __future__ import annotations

from typing import Callable, List, Optional

import pytest

PALETTE = bytes([0, 0, 0, 0, 255, 255, 255, 0])


def build_bmp(
    width: int,
    rows: List[bytes],
    top_down: bool = False,
    bit_count: int = 1,
    compression: int = 0,
    pad_byte: int = 0,
    offset: Optional[int] = None,
) -> bytes:
    """Assemble a BMP with a BITMAPINFOHEADER from top-down rows."""
    row_bytes = (width + 7) // 8
    stride = (row_bytes + 3) // 4 * 4
    stored = [row[:row_bytes].ljust(stride, bytes([pad_byte])) for row in rows]
    if not top_down:
        stored = list(reversed(stored))
    pixels = b"".join(stored)
    data_offset = 14 + 40 + len(PALETTE) if offset is None else offset
    height = -len(rows) if top_down else len(rows)

    info = bytearray()
    info += (40).to_bytes(4, "little")
    info += width.to_bytes(4, "little", signed=True)
    info += height.to_bytes(4, "little", signed=True)
    info += (1).to_bytes(2, "little")
    info += bit_count.to_bytes(2, "little")
    info += compression.to_bytes(4, "little")
    info += len(pixels).to_bytes(4, "little")
    info += (2835).to_bytes(4, "little") * 2
    info += (2).to_bytes(4, "little") + (0).to_bytes(4, "little")

    header = bytearray(b"BM")
    header += (data_offset + len(pixels)).to_bytes(4, "little")
    header += bytes(4)
    header += data_offset.to_bytes(4, "little")
    body = bytes(header) + bytes(info) + PALETTE
    return body.ljust(data_offset, b"\x00") + pixels


@pytest.fixture
def make_bmp() -> Callable[..., bytes]:
    return build_bmp
