"""
Bitmap codec for uncompressed 24-bit (and wider, alpha discarded) files.

Key components:
- reader: little-endian integer extraction and header parsing
- decoder: read_bitmap() / decode_bitmap() -> DecodeResult
- encoder: write_bitmap() / encode_bitmap() producing 24-bit output
- types: BitmapHeader, DecodeResult, Pixel and image helpers

Images are numpy arrays of shape (height, width, 3), dtype uint8, RGB order,
row 0 at the top.
"""

from .types import (
    BitmapDecodeError,
    BitmapHeader,
    DecodeResult,
    Pixel,
    from_pixels,
    pixel_at,
    validate_image,
)
from .reader import read_uint_le, read_header
from .decoder import decode_bitmap, read_bitmap
from .encoder import build_header, encode_bitmap, pack_header, write_bitmap

__all__ = [
    # Types
    "BitmapDecodeError",
    "BitmapHeader",
    "DecodeResult",
    "Pixel",
    "from_pixels",
    "pixel_at",
    "validate_image",
    # Reading
    "read_uint_le",
    "read_header",
    "decode_bitmap",
    "read_bitmap",
    # Writing
    "build_header",
    "encode_bitmap",
    "pack_header",
    "write_bitmap",
]
