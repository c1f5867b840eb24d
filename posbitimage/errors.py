from __future__ import annotations


class BitImageError(ValueError):
    """Base class for errors raised while building or decoding a bit image."""


class FormatError(BitImageError):
    """Input is not something a bit image can be built from."""


class DimensionError(FormatError):
    """Declared width, height or their product is outside the printer limits."""
