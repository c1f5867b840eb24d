from .converter import BITMAP_EXTENSIONS, image_to_bitmap, load_bitmap, to_monochrome

__all__ = ["BITMAP_EXTENSIONS", "image_to_bitmap", "load_bitmap", "to_monochrome"]
