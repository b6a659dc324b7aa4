"""
Bitmap encoding.

Writes uncompressed 24-bit bitmaps: a 14-byte file header, a 40-byte info
header, then BGR rows from the bottom of the image up, each padded with
zero bytes to a multiple of four.
"""

from __future__ import annotations

import logging
import os
import struct
from pathlib import Path

import numpy as np

from config import (
    BI_RGB,
    BMP_MAGIC,
    BMP_RESOLUTION_PPM,
    INFO_HEADER_SIZE,
    OUTPUT_BITS_PER_PIXEL,
    PIXEL_ARRAY_OFFSET,
    ROW_ALIGNMENT,
)
from .types import BitmapHeader, validate_image

logger = logging.getLogger(__name__)

_FILE_HEADER_FORMAT = "<2sIHHI"
_INFO_HEADER_FORMAT = "<IiiHHIIiiII"


def build_header(width: int, height: int) -> BitmapHeader:
    """Build the header written for a width x height 24-bit image."""
    width_bytes = width * 3
    padding = (ROW_ALIGNMENT - width_bytes % ROW_ALIGNMENT) % ROW_ALIGNMENT
    array_bytes = (width_bytes + padding) * height
    return BitmapHeader(
        magic=BMP_MAGIC,
        file_size=PIXEL_ARRAY_OFFSET + array_bytes,
        pixel_offset=PIXEL_ARRAY_OFFSET,
        header_size=INFO_HEADER_SIZE,
        width=width,
        height=height,
        planes=1,
        bits_per_pixel=OUTPUT_BITS_PER_PIXEL,
        compression=BI_RGB,
        image_size=array_bytes,
        x_resolution=BMP_RESOLUTION_PPM,
        y_resolution=BMP_RESOLUTION_PPM,
        palette_size=0,
        important_colors=0,
    )


def pack_header(header: BitmapHeader) -> bytes:
    """Pack a header into its 54-byte on-disk form."""
    file_header = struct.pack(
        _FILE_HEADER_FORMAT,
        header.magic,
        header.file_size,
        0,
        0,
        header.pixel_offset,
    )
    info_header = struct.pack(
        _INFO_HEADER_FORMAT,
        header.header_size,
        header.width,
        header.height,
        header.planes,
        header.bits_per_pixel,
        header.compression,
        header.image_size,
        header.x_resolution,
        header.y_resolution,
        header.palette_size,
        header.important_colors,
    )
    return file_header + info_header


def encode_bitmap(img: np.ndarray) -> bytes:
    """Encode an RGB image as a 24-bit bitmap.

    Channel values are clamped into [0, 255] before packing.

    Raises:
        TypeError: If img is not a numpy array.
        ValueError: If img is not a non-empty (H, W, 3) array.
    """
    validate_image(img)
    height, width = img.shape[:2]
    header = build_header(width, height)

    pixels = np.clip(img, 0, 255).astype(np.uint8)
    # Top-down RGB to bottom-up BGR
    bgr = pixels[::-1, :, ::-1]

    padding = header.image_size // height - width * 3
    rows = np.zeros((height, width * 3 + padding), dtype=np.uint8)
    rows[:, :width * 3] = bgr.reshape(height, width * 3)

    return pack_header(header) + rows.tobytes()


def write_bitmap(path: str | Path, img: np.ndarray) -> bool:
    """Encode an image and write it to `path`.

    The bytes go to a temporary sibling file which is renamed over `path`
    once fully written, so a failed write never leaves a truncated bitmap
    at the destination.

    Returns:
        True on success, False if the destination could not be written
        (including a path with no file name, such as "" or ".").
    """
    path = Path(path)
    data = encode_bitmap(img)
    if not path.name:
        logger.warning("Could not write %r: no file name given", str(path))
        return False
    tmp_path = path.with_name(f".{path.name}.tmp")

    try:
        with open(tmp_path, "wb") as fh:
            fh.write(data)
        os.replace(tmp_path, path)
    except OSError as e:
        logger.warning("Could not write %s: %s", path, e)
        tmp_path.unlink(missing_ok=True)
        return False

    logger.debug("Wrote %d bytes to %s", len(data), path)
    return True
