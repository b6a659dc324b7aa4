"""
Type definitions for the bitmap codec.

Images are numpy arrays of shape (height, width, 3), dtype uint8, channels in
RGB order, row 0 at the top. The types here describe the on-disk header and
the outcome of a decode.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import NamedTuple, Sequence

import numpy as np

from config import (
    BMP_MAGIC,
    ROW_ALIGNMENT,
)


class BitmapDecodeError(ValueError):
    """Raised by DecodeResult.unwrap() when the source was not a valid bitmap."""


class Pixel(NamedTuple):
    """A single RGB pixel."""

    red: int
    green: int
    blue: int


@dataclass(frozen=True)
class BitmapHeader:
    """All fields of the 14-byte file header and the 40-byte info header.

    Attributes:
        magic: First two bytes of the file, b"BM" for a bitmap.
        file_size: Declared total file size in bytes.
        pixel_offset: Byte offset of the pixel array.
        header_size: Size of the info header (40 for BITMAPINFOHEADER).
        width: Image width in pixels.
        height: Image height in pixels.
        planes: Number of colour planes (always 1 in practice).
        bits_per_pixel: Bits used to store one pixel.
        compression: Compression method, 0 for uncompressed.
        image_size: Size of the raw pixel array, including padding.
        x_resolution: Horizontal resolution in pixels per meter.
        y_resolution: Vertical resolution in pixels per meter.
        palette_size: Number of palette entries.
        important_colors: Number of important colours.
    """

    magic: bytes
    file_size: int
    pixel_offset: int
    header_size: int
    width: int
    height: int
    planes: int
    bits_per_pixel: int
    compression: int
    image_size: int
    x_resolution: int
    y_resolution: int
    palette_size: int
    important_colors: int

    @property
    def bytes_per_pixel(self) -> int:
        return self.bits_per_pixel // 8

    @property
    def row_stride(self) -> int:
        """Bytes per pixel row including zero padding."""
        row_bytes = self.width * self.bits_per_pixel / 8
        return math.ceil(row_bytes / ROW_ALIGNMENT) * ROW_ALIGNMENT

    @property
    def padding(self) -> int:
        """Zero bytes appended to each pixel row."""
        return self.row_stride - self.width * self.bytes_per_pixel

    @property
    def expected_file_size(self) -> int:
        return self.pixel_offset + self.row_stride * self.height

    @property
    def size_matches(self) -> bool:
        """Whether the declared file size agrees with the pixel layout."""
        return self.file_size == self.expected_file_size

    @property
    def has_magic(self) -> bool:
        return self.magic == BMP_MAGIC

    def to_dict(self) -> dict:
        """Convert to a plain dict (magic decoded as ASCII)."""
        return {
            "magic": self.magic.decode("ascii", errors="replace"),
            "file_size": self.file_size,
            "pixel_offset": self.pixel_offset,
            "header_size": self.header_size,
            "width": self.width,
            "height": self.height,
            "planes": self.planes,
            "bits_per_pixel": self.bits_per_pixel,
            "compression": self.compression,
            "image_size": self.image_size,
            "x_resolution": self.x_resolution,
            "y_resolution": self.y_resolution,
            "palette_size": self.palette_size,
            "important_colors": self.important_colors,
        }


@dataclass
class DecodeResult:
    """Outcome of decoding a bitmap source.

    Exactly one of `image` and `error` is set. `header` is populated whenever
    the header could be read, even if the file was then rejected, so callers
    can report what was declared.
    """

    image: np.ndarray | None = None
    header: BitmapHeader | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.image is not None

    def unwrap(self) -> np.ndarray:
        """Return the decoded image or raise BitmapDecodeError."""
        if self.image is None:
            raise BitmapDecodeError(self.error or "not a valid image")
        return self.image


def pixel_at(img: np.ndarray, row: int, col: int) -> Pixel:
    """Return the pixel at (row, col) as a Pixel tuple."""
    red, green, blue = (int(v) for v in img[row, col, :3])
    return Pixel(red, green, blue)


def from_pixels(rows: Sequence[Sequence[Sequence[int]]]) -> np.ndarray:
    """Build an image from nested rows of (red, green, blue) values.

    Raises:
        ValueError: If there are no rows, a row is empty, or rows differ in length.
    """
    if not rows or not rows[0]:
        raise ValueError("Image must contain at least one row and one column")
    width = len(rows[0])
    for row in rows:
        if len(row) != width:
            raise ValueError("Image rows must have equal length")
    return np.array(
        [[tuple(p)[:3] for p in row] for row in rows],
        dtype=np.uint8,
    )


def validate_image(img: np.ndarray) -> None:
    """Validate an RGB image array.

    Raises:
        TypeError: If img is not a numpy array.
        ValueError: If img is not a non-empty (H, W, 3) array.
    """
    if not isinstance(img, np.ndarray):
        raise TypeError(f"Expected numpy.ndarray, got {type(img).__name__}")

    if img.ndim != 3 or img.shape[2] != 3:
        raise ValueError(
            f"Image must be an (H, W, 3) RGB array, got shape {img.shape}"
        )

    if img.size == 0:
        raise ValueError("Image array is empty")
