"""Shared pytest fixtures: a hand-assembled 2x2 bitmap and test images."""

import numpy as np
import pytest

# 2x2, 24 bpp, rows padded to 8 bytes, 70 bytes total.
# Top row: red, green. Bottom row: blue, white.
SAMPLE_BMP = bytes.fromhex(
    # file header: magic, size 70, reserved, offset 54
    "424d" "46000000" "0000" "0000" "36000000"
    # info header: size 40, 2x2, 1 plane, 24 bpp, BI_RGB, 16 data bytes,
    # 2835 ppm both axes, no palette, no important colours
    "28000000" "02000000" "02000000" "0100" "1800" "00000000" "10000000"
    "130b0000" "130b0000" "00000000" "00000000"
    # bottom row (blue, white) then top row (red, green), BGR + 2 pad bytes
    "ff0000" "ffffff" "0000"
    "0000ff" "00ff00" "0000"
)


@pytest.fixture
def sample_bytes() -> bytes:
    return SAMPLE_BMP


@pytest.fixture
def sample_image() -> np.ndarray:
    return np.array(
        [
            [[255, 0, 0], [0, 255, 0]],
            [[0, 0, 255], [255, 255, 255]],
        ],
        dtype=np.uint8,
    )


@pytest.fixture
def sample_path(tmp_path, sample_bytes):
    path = tmp_path / "sample.bmp"
    path.write_bytes(sample_bytes)
    return path


@pytest.fixture
def random_image() -> np.ndarray:
    rng = np.random.default_rng(1300)
    return rng.integers(0, 256, (5, 7, 3), dtype=np.uint8)
