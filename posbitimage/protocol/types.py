from __future__ import annotations

from enum import Enum


class Justification(Enum):
    LEFT = 0x00
    CENTER = 0x01
    RIGHT = 0x02


class BitImagePrintMode(Enum):
    NORMAL = 0x00
    DOUBLE_WIDTH = 0x01
    DOUBLE_HEIGHT = 0x02
    QUADRUPLE = 0x03


class CodePage(Enum):
    """Character code tables the printer supports for latin text.

    The value is the ``ESC t`` table number; :attr:`codec` names the matching
    Python codec.
    """

    CP437 = 0
    CP850 = 2
    CP860 = 3
    CP863 = 4
    CP865 = 5
    CP1252 = 16
    CP866 = 17
    CP852 = 18
    CP858 = 19

    @property
    def codec(self) -> str:
        return self.name.lower()
