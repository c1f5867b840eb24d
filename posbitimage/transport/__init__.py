from .device import DEFAULT_DEVICE, DEVICE_ENV_VAR, DeviceTransport, default_device
from .serial import SERIAL_BAUD_RATE, SerialTransport

__all__ = [
    "DEFAULT_DEVICE",
    "default_device",
    "DEVICE_ENV_VAR",
    "DeviceTransport",
    "SERIAL_BAUD_RATE",
    "SerialTransport",
]
