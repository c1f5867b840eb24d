from __future__ import annotations

from ..bitimage import BitImage
from .types import BitImagePrintMode, CodePage, Justification

ESC = 0x1B
FS = 0x1C
GS = 0x1D


def _check_byte(name: str, value: int, low: int = 0, high: int = 255) -> None:
    if not low <= value <= high:
        raise ValueError(f"{name} must be in range {low}..{high}, but was {value}")


def define_bit_image_cmd(image: BitImage) -> bytes:
    """Define a bit image in volatile storage (``GS *``). Does not print it."""
    return image.to_bytes()


def print_bit_image_cmd(mode: BitImagePrintMode = BitImagePrintMode.NORMAL) -> bytes:
    """Print the bit image defined in volatile storage (``GS /``)."""
    return bytes([GS, 0x2F, mode.value])


def define_nv_bit_image_cmd(slot: int, image: BitImage) -> bytes:
    """Define a bit image in non-volatile storage (``FS q``)."""
    _check_byte("slot", slot, 1, 255)
    header = bytes([FS, 0x71, slot])
    header += image.x_size.to_bytes(2, "little") + image.y_size.to_bytes(2, "little")
    return header + image.image_data


def print_nv_bit_image_cmd(slot: int, mode: BitImagePrintMode = BitImagePrintMode.NORMAL) -> bytes:
    """Print a bit image from non-volatile storage (``FS p``)."""
    _check_byte("slot", slot, 1, 255)
    return bytes([FS, 0x70, slot, mode.value])


def justification_cmd(justification: Justification) -> bytes:
    return bytes([ESC, 0x61, justification.value])


def cut_cmd(feed: int = 0xFF) -> bytes:
    """Feed ``feed`` dots and cut the paper."""
    _check_byte("feed", feed)
    return bytes([GS, 0x56, 0x42, feed])


def font_scale_cmd(height: int, width: int) -> bytes:
    _check_byte("height", height, 1, 8)
    _check_byte("width", width, 1, 8)
    return bytes([GS, 0x21, (height - 1) + 0x10 * (width - 1)])


def inverted_mode_cmd(enabled: bool) -> bytes:
    """White on black printing on or off."""
    return bytes([GS, 0x42, 0x01 if enabled else 0x00])


def upside_down_mode_cmd(enabled: bool) -> bytes:
    return bytes([ESC, 0x7B, 0x01 if enabled else 0x00])


def text_cmd(text: str, code_page: CodePage = CodePage.CP1252) -> bytes:
    """Select ``code_page``, print ``text`` and flush the line buffer.

    Characters the code page cannot represent are replaced with ``?``.
    """
    payload = bytes([ESC, 0x74, code_page.value])
    payload += text.encode(code_page.codec, errors="replace")
    payload += bytes([ESC, 0x64, 0x00])
    return payload
