from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..protocol import BitImagePrintMode, Justification
from ..transport import SERIAL_BAUD_RATE

DEFAULT_CUT_FEED = 0xFF
DEFAULT_THRESHOLD = 128


@dataclass
class PrintSettings:
    justification: Justification = Justification.CENTER
    mode: BitImagePrintMode = BitImagePrintMode.QUADRUPLE
    cut_feed: Optional[int] = DEFAULT_CUT_FEED
    nv_slot: Optional[int] = None
    convert: bool = False
    threshold: int = DEFAULT_THRESHOLD
    baud_rate: int = SERIAL_BAUD_RATE
