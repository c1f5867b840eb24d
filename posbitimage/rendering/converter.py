from __future__ import annotations

import io
import os
from typing import Union

from PIL import Image, ImageOps

BITMAP_EXTENSIONS = {".bmp", ".dib"}

PathLike = Union[str, os.PathLike]


def _flatten(img: Image.Image) -> Image.Image:
    if img.mode in ("RGBA", "LA") or (img.mode == "P" and "transparency" in img.info):
        img = img.convert("RGBA")
        background = Image.new("RGBA", img.size, (255, 255, 255, 255))
        return Image.alpha_composite(background, img).convert("L")
    if img.mode not in ("1", "L"):
        return img.convert("L")
    return img


def to_monochrome(img: Image.Image, threshold: int = 128) -> Image.Image:
    """Threshold an image to mode ``1`` without dithering or resizing."""
    img = _flatten(ImageOps.exif_transpose(img))
    if img.mode == "1":
        return img
    return img.point(lambda p: 255 if p >= threshold else 0).convert("1", dither=Image.Dither.NONE)


def image_to_bitmap(source: Union[PathLike, Image.Image], threshold: int = 128) -> bytes:
    """Return ``source`` as an uncompressed 1-bpp BMP (black = 0, white = 1)."""
    if isinstance(source, Image.Image):
        img = to_monochrome(source, threshold)
    else:
        with Image.open(source) as opened:
            opened.load()
            img = to_monochrome(opened, threshold)
    out = io.BytesIO()
    img.save(out, format="BMP")
    return out.getvalue()


def load_bitmap(path: PathLike, convert: bool = False, threshold: int = 128) -> bytes:
    """Read a BMP as-is, or convert any other image Pillow can open."""
    ext = os.path.splitext(os.fspath(path))[1].lower()
    if ext in BITMAP_EXTENSIONS and not convert:
        with open(path, "rb") as handle:
            return handle.read()
    if not os.path.isfile(path):
        raise FileNotFoundError(f"File not found: {os.fspath(path)}")
    return image_to_bitmap(path, threshold)
