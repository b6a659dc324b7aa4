"""Little-endian integer extraction from raw bitmap bytes."""

from __future__ import annotations

from .types import BitmapHeader


def read_uint_le(data: bytes, offset: int, count: int) -> int:
    """Read an unsigned little-endian integer of `count` bytes at `offset`.

    Bytes past the end of `data` contribute zero, so a truncated file reads
    the same way a stream does once it runs out.

    Raises:
        ValueError: If count is not in 1..4 or offset is negative.
    """
    if not 1 <= count <= 4:
        raise ValueError(f"count must be between 1 and 4, got {count}")
    if offset < 0:
        raise ValueError(f"offset must be non-negative, got {offset}")

    chunk = bytes(data[offset:offset + count])
    return int.from_bytes(chunk.ljust(count, b"\x00"), "little")


def read_header(data: bytes) -> BitmapHeader:
    """Read every file and info header field at its fixed offset."""
    return BitmapHeader(
        magic=bytes(data[0:2]),
        file_size=read_uint_le(data, 2, 4),
        pixel_offset=read_uint_le(data, 10, 4),
        header_size=read_uint_le(data, 14, 4),
        width=read_uint_le(data, 18, 4),
        height=read_uint_le(data, 22, 4),
        planes=read_uint_le(data, 26, 2),
        bits_per_pixel=read_uint_le(data, 28, 2),
        compression=read_uint_le(data, 30, 4),
        image_size=read_uint_le(data, 34, 4),
        x_resolution=read_uint_le(data, 38, 4),
        y_resolution=read_uint_le(data, 42, 4),
        palette_size=read_uint_le(data, 46, 4),
        important_colors=read_uint_le(data, 50, 4),
    )
