from __future__ import annotations

import asyncio
import logging
import time

log = logging.getLogger(__name__)

SERIAL_BAUD_RATE = 115200
DEFAULT_CHUNK_SIZE = 256


class SerialTransport:
    """Writes to a printer attached to a serial port."""

    def __init__(
        self,
        port: str,
        baud_rate: int = SERIAL_BAUD_RATE,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        interval_ms: int = 0,
    ) -> None:
        if chunk_size <= 0:
            raise ValueError("chunk_size must be greater than zero")
        self._port = port
        self._baud_rate = baud_rate
        self._chunk_size = chunk_size
        self._interval_ms = interval_ms

    async def write(self, data: bytes) -> None:
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(None, self._write_blocking, data)

    def _write_blocking(self, data: bytes) -> None:
        try:
            import serial
        except Exception as exc:  # pragma: no cover
            raise RuntimeError("pyserial is required. Install with: pip install pyserial") from exc
        interval = max(0.0, self._interval_ms / 1000.0)
        try:
            with serial.Serial(self._port, self._baud_rate, timeout=1, write_timeout=5) as ser:
                offset = 0
                while offset < len(data):
                    chunk = data[offset : offset + self._chunk_size]
                    ser.write(chunk)
                    offset += len(chunk)
                    if interval:
                        time.sleep(interval)
                ser.flush()
        except Exception as exc:
            raise RuntimeError(f"Serial connection failed: {exc}") from exc
        log.info("Sent %d bytes to %s at %d baud", len(data), self._port, self._baud_rate)
