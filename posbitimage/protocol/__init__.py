from .commands import (
    cut_cmd,
    define_bit_image_cmd,
    define_nv_bit_image_cmd,
    font_scale_cmd,
    inverted_mode_cmd,
    justification_cmd,
    print_bit_image_cmd,
    print_nv_bit_image_cmd,
    text_cmd,
    upside_down_mode_cmd,
)
from .job import PrintJob, build_bit_image_job
from .types import BitImagePrintMode, CodePage, Justification

__all__ = [
    "BitImagePrintMode",
    "build_bit_image_job",
    "CodePage",
    "cut_cmd",
    "define_bit_image_cmd",
    "define_nv_bit_image_cmd",
    "font_scale_cmd",
    "inverted_mode_cmd",
    "Justification",
    "justification_cmd",
    "print_bit_image_cmd",
    "print_nv_bit_image_cmd",
    "PrintJob",
    "text_cmd",
    "upside_down_mode_cmd",
]
