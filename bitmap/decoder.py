"""
Bitmap decoding.

Decoding never raises for a bad source: every failure comes back as a
DecodeResult with `error` set, and is logged. Callers check `result.ok` (or
call `result.unwrap()`) before using the image.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO

import numpy as np

from config import BI_RGB, MIN_BITS_PER_PIXEL
from .reader import read_header
from .types import BitmapHeader, DecodeResult

logger = logging.getLogger(__name__)


def _header_error(header: BitmapHeader) -> str | None:
    """Return why a header cannot be decoded, or None if it is usable."""
    if not header.has_magic:
        return f"missing BM signature (found {header.magic!r})"
    if header.compression != BI_RGB:
        return f"compressed bitmaps are not supported (compression={header.compression})"
    if header.bits_per_pixel < MIN_BITS_PER_PIXEL or header.bits_per_pixel % 8:
        return f"unsupported bit depth: {header.bits_per_pixel} bits per pixel"
    if header.width == 0 or header.height == 0:
        return f"image has no pixels ({header.width}x{header.height})"
    if not header.size_matches:
        return (
            f"declared file size {header.file_size} does not match "
            f"{header.pixel_offset} + {header.row_stride} * {header.height} "
            f"= {header.expected_file_size}"
        )
    return None


def decode_bitmap(data: bytes) -> DecodeResult:
    """Decode bitmap bytes into an RGB image.

    Rows are stored bottom-up on disk and come back top-down. Any bytes
    beyond blue, green and red in a wider pixel (alpha) are discarded.

    Args:
        data: Complete file contents.

    Returns:
        DecodeResult with the (height, width, 3) uint8 image on success,
        or with `error` describing why the data is not a valid image.
    """
    header = read_header(data)
    error = _header_error(header)
    if error is not None:
        logger.warning("Not a valid image: %s", error)
        return DecodeResult(header=header, error=error)

    stride = header.row_stride
    bpp = header.bytes_per_pixel
    start = header.pixel_offset
    needed = stride * header.height

    pixel_bytes = bytes(data[start:start + needed])
    missing = needed - len(pixel_bytes)
    if missing > len(data):
        error = (
            f"pixel array truncated: {len(pixel_bytes)} of {needed} bytes present "
            f"in a {len(data)}-byte file"
        )
        logger.warning("Not a valid image: %s", error)
        return DecodeResult(header=header, error=error)
    if missing > 0:
        logger.warning(
            "Pixel array truncated: %d of %d bytes present, reading the rest as zero",
            len(pixel_bytes),
            needed,
        )
        pixel_bytes = pixel_bytes.ljust(needed, b"\x00")

    rows = np.frombuffer(pixel_bytes, dtype=np.uint8).reshape(header.height, stride)
    pixels = rows[:, :header.width * bpp].reshape(header.height, header.width, bpp)

    # Bottom-up rows to top-down; BGR(A) to RGB
    image = pixels[::-1, :, 2::-1].copy()

    logger.debug(
        "Decoded %dx%d bitmap (%d bpp, stride %d)",
        header.width,
        header.height,
        header.bits_per_pixel,
        stride,
    )
    return DecodeResult(image=image, header=header)


def read_bitmap(source: str | Path | BinaryIO) -> DecodeResult:
    """Read and decode a bitmap from a path or an open binary stream.

    A path is opened and closed here; a stream is read but left open for
    its owner to close.
    """
    if hasattr(source, "read"):
        return decode_bitmap(source.read())

    try:
        with open(source, "rb") as fh:
            data = fh.read()
    except OSError as e:
        logger.warning("Could not read %s: %s", source, e)
        return DecodeResult(error=f"could not read {source}: {e}")

    return decode_bitmap(data)
