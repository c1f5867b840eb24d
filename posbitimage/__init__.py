from .bitimage import BitImage, decode_bitmap, pack_dot_matrix, read_bitmap_file
from .errors import BitImageError, DimensionError, FormatError

__version__ = "0.1.0"

__all__ = [
    "BitImage",
    "BitImageError",
    "decode_bitmap",
    "DimensionError",
    "FormatError",
    "pack_dot_matrix",
    "read_bitmap_file",
]
