from .bitmap import RasterFrame, decode_bitmap, read_bitmap_file, read_raster_frame
from .codec import pack_dot_matrix, pack_rows
from .types import MAX_DATA_SIZE, MAX_X_SIZE, MAX_Y_SIZE, BitImage, validate_dimensions
from .view import dot_column, dot_matrix, dot_row, format_dots

__all__ = [
    "BitImage",
    "decode_bitmap",
    "dot_column",
    "dot_matrix",
    "dot_row",
    "format_dots",
    "MAX_DATA_SIZE",
    "MAX_X_SIZE",
    "MAX_Y_SIZE",
    "pack_dot_matrix",
    "pack_rows",
    "RasterFrame",
    "read_bitmap_file",
    "read_raster_frame",
    "validate_dimensions",
]
