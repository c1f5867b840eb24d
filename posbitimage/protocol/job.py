from __future__ import annotations

from typing import Iterable, Optional, Protocol

from ..bitimage import BitImage
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
from .types import BitImagePrintMode, CodePage, Justification


class Transport(Protocol):
    async def write(self, data: bytes) -> None:
        ...


class PrintJob:
    """Ordered buffer of printer commands.

    Every method appends to the buffer and returns the job so calls can be
    chained. Nothing is sent until :meth:`send`.
    """

    def __init__(self) -> None:
        self._buffer = bytearray()
        self._inverted = False
        self._upside_down = False

    @property
    def data(self) -> bytes:
        return bytes(self._buffer)

    @property
    def inverted(self) -> bool:
        return self._inverted

    @property
    def upside_down(self) -> bool:
        return self._upside_down

    def __len__(self) -> int:
        return len(self._buffer)

    def reset(self) -> "PrintJob":
        """Drop every queued command. Toggle state is kept, the printer still has it."""
        self._buffer.clear()
        return self

    def add(self, sequence: Iterable[int]) -> "PrintJob":
        self._buffer += bytes(sequence)
        return self

    def cut(self, feed: int = 0xFF) -> "PrintJob":
        return self.add(cut_cmd(feed))

    def font_scale(self, height: int, width: int) -> "PrintJob":
        return self.add(font_scale_cmd(height, width))

    def text(self, text: str, code_page: CodePage = CodePage.CP1252) -> "PrintJob":
        return self.add(text_cmd(text, code_page))

    def toggle_inverted(self) -> "PrintJob":
        self.add(inverted_mode_cmd(not self._inverted))
        self._inverted = not self._inverted
        return self

    def toggle_upside_down(self) -> "PrintJob":
        self.add(upside_down_mode_cmd(not self._upside_down))
        self._upside_down = not self._upside_down
        return self

    def justify(self, justification: Justification) -> "PrintJob":
        return self.add(justification_cmd(justification))

    def define_bit_image(self, image: BitImage) -> "PrintJob":
        return self.add(define_bit_image_cmd(image))

    def print_bit_image(self, mode: BitImagePrintMode = BitImagePrintMode.NORMAL) -> "PrintJob":
        return self.add(print_bit_image_cmd(mode))

    def define_nv_bit_image(self, slot: int, image: BitImage) -> "PrintJob":
        return self.add(define_nv_bit_image_cmd(slot, image))

    def print_nv_bit_image(self, slot: int, mode: BitImagePrintMode = BitImagePrintMode.NORMAL) -> "PrintJob":
        return self.add(print_nv_bit_image_cmd(slot, mode))

    async def send(self, transport: Transport) -> None:
        """Write the queued commands. The buffer is not cleared."""
        await transport.write(self.data)


def build_bit_image_job(
    image: BitImage,
    justification: Justification = Justification.CENTER,
    mode: BitImagePrintMode = BitImagePrintMode.QUADRUPLE,
    cut_feed: Optional[int] = 0xFF,
    nv_slot: Optional[int] = None,
) -> PrintJob:
    """Queue a job that defines ``image``, prints it and optionally cuts.

    With ``nv_slot`` the image goes to non-volatile storage in that slot
    instead of the volatile bit image buffer.
    """
    job = PrintJob().justify(justification)
    if nv_slot is None:
        job.define_bit_image(image).print_bit_image(mode)
    else:
        job.define_nv_bit_image(nv_slot, image).print_nv_bit_image(nv_slot, mode)
    if cut_feed is not None:
        job.cut(cut_feed)
    return job
