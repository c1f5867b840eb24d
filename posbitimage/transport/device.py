from __future__ import annotations

import asyncio
import logging
import os

log = logging.getLogger(__name__)

DEVICE_ENV_VAR = "POSBITIMAGE_DEVICE"
DEFAULT_DEVICE = "/dev/ttyUSB0"


def default_device() -> str:
    return os.environ.get(DEVICE_ENV_VAR) or DEFAULT_DEVICE


class DeviceTransport:
    """Writes raw bytes to a device node (or any file path)."""

    def __init__(self, path: str) -> None:
        self._path = path

    @property
    def path(self) -> str:
        return self._path

    async def write(self, data: bytes) -> None:
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(None, self._write_blocking, data)

    def _write_blocking(self, data: bytes) -> None:
        try:
            with open(self._path, "wb") as handle:
                handle.write(data)
                handle.flush()
        except OSError as exc:
            raise RuntimeError(f"Writing to {self._path} failed: {exc}") from exc
        log.info("Sent %d bytes to %s", len(data), self._path)
