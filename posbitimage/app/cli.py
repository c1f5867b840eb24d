from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from ..bitimage import BitImage, decode_bitmap, format_dots
from ..protocol import BitImagePrintMode, Justification, PrintJob, build_bit_image_job
from ..rendering import load_bitmap
from ..transport import DEVICE_ENV_VAR, SERIAL_BAUD_RATE, DeviceTransport, SerialTransport, default_device
from .settings import DEFAULT_CUT_FEED, DEFAULT_THRESHOLD, PrintSettings

log = logging.getLogger(__name__)

JUSTIFICATIONS = {
    "left": Justification.LEFT,
    "center": Justification.CENTER,
    "right": Justification.RIGHT,
}

PRINT_MODES = {
    "normal": BitImagePrintMode.NORMAL,
    "double-width": BitImagePrintMode.DOUBLE_WIDTH,
    "double-height": BitImagePrintMode.DOUBLE_HEIGHT,
    "quadruple": BitImagePrintMode.QUADRUPLE,
}


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Print a monochrome BMP as an ESC/POS bit image."
    )
    parser.add_argument("path", help="1-bpp uncompressed BMP (other formats need --convert)")
    target = parser.add_mutually_exclusive_group()
    target.add_argument(
        "--device",
        metavar="PATH",
        help=f"Printer device node (default: ${DEVICE_ENV_VAR} or {default_device()})",
    )
    target.add_argument("--serial", metavar="PORT", help="Serial port to write to with pyserial")
    target.add_argument("--output", metavar="FILE", help="Write the command stream to FILE instead of a printer")
    target.add_argument("--preview", action="store_true", help="Show the decoded dots and exit")
    parser.add_argument("--baud", type=int, default=SERIAL_BAUD_RATE, help="Serial baud rate")
    parser.add_argument("--justify", choices=sorted(JUSTIFICATIONS), default="center")
    parser.add_argument("--mode", choices=list(PRINT_MODES), default="quadruple", help="Bit image print mode")
    parser.add_argument("--nv", type=int, metavar="SLOT", help="Store the image in non-volatile slot 1-255")
    parser.add_argument("--no-cut", action="store_true", help="Do not feed and cut after printing")
    parser.add_argument("--convert", action="store_true", help="Convert the input with Pillow first")
    parser.add_argument("--threshold", type=int, default=DEFAULT_THRESHOLD, help="Threshold used by --convert")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="More logging (repeat for debug)")
    return parser.parse_args(argv)


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _settings_from_args(args: argparse.Namespace) -> PrintSettings:
    return PrintSettings(
        justification=JUSTIFICATIONS[args.justify],
        mode=PRINT_MODES[args.mode],
        cut_feed=None if args.no_cut else DEFAULT_CUT_FEED,
        nv_slot=args.nv,
        convert=args.convert,
        threshold=args.threshold,
        baud_rate=args.baud,
    )


def load_image(path: str, settings: PrintSettings) -> BitImage:
    data = load_bitmap(path, convert=settings.convert, threshold=settings.threshold)
    image = decode_bitmap(data)
    log.info("Decoded %s: %dx%d dots (%d bytes)", path, image.width, image.height, len(image.image_data))
    return image


def build_print_data(image: BitImage, settings: PrintSettings) -> PrintJob:
    return build_bit_image_job(
        image,
        justification=settings.justification,
        mode=settings.mode,
        cut_feed=settings.cut_feed,
        nv_slot=settings.nv_slot,
    )


def _select_transport(args: argparse.Namespace, settings: PrintSettings):
    if args.serial:
        return SerialTransport(args.serial, settings.baud_rate)
    if args.output:
        return DeviceTransport(args.output)
    return DeviceTransport(args.device or default_device())


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    _configure_logging(args.verbose)
    try:
        settings = _settings_from_args(args)
        image = load_image(args.path, settings)
        if args.preview:
            print(format_dots(image))
            return 0
        job = build_print_data(image, settings)
        asyncio.run(job.send(_select_transport(args, settings)))
    except Exception as exc:
        print(str(exc), file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
