"""
Pixel transforms for RGB images.

All functions are pure: they take an (H, W, 3) uint8 image and return a new
uint8 image without mutating the input. Channel arithmetic is done in wider
types, truncated toward zero, then clamped to [0, 255].

Parameters (scale factors, rotation counts, enlarge factors) are expected to
be validated by the caller; see filters.registry.ParamSpec.
"""

from __future__ import annotations

import numpy as np

from bitmap import validate_image
from config import (
    CONTRAST_HIGHLIGHT_AVG,
    CONTRAST_SHADOW_AVG,
    HIGH_CONTRAST_THRESHOLD,
    THRESHOLD_BLACK_SUM,
    THRESHOLD_WHITE_SUM,
)
from geometry import rotate_clockwise, rotate_quarter_turns

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
RED = (255, 0, 0)
GREEN = (0, 255, 0)
BLUE = (0, 0, 255)


def _to_channels(values: np.ndarray) -> np.ndarray:
    """Truncate toward zero and clamp into uint8 channel values."""
    return np.clip(np.trunc(values), 0, 255).astype(np.uint8)


def _channel_sum(img: np.ndarray) -> np.ndarray:
    return img.astype(np.int64).sum(axis=2)


def _lighten_values(img: np.ndarray, scale: float) -> np.ndarray:
    return 255.0 - (255.0 - img.astype(np.float64)) * scale


def _darken_values(img: np.ndarray, scale: float) -> np.ndarray:
    return img.astype(np.float64) * scale


def vignette(img: np.ndarray) -> np.ndarray:
    """Darken pixels in proportion to their distance from the image center.

    Each channel is scaled by (rows - dist) / rows, where dist is the
    Euclidean distance from the pixel to (rows / 2, cols / 2).
    """
    validate_image(img)
    rows, cols = img.shape[:2]
    row_idx = np.arange(rows, dtype=np.float64)[:, None]
    col_idx = np.arange(cols, dtype=np.float64)[None, :]
    dist = np.sqrt((col_idx - cols / 2.0) ** 2 + (row_idx - rows / 2.0) ** 2)
    scale = (rows - dist) / rows
    return _to_channels(img.astype(np.float64) * scale[:, :, None])


def contrast_enhance(img: np.ndarray, scale: float) -> np.ndarray:
    """Lighten highlights and darken shadows ("clarendon").

    Pixels whose integer channel average is at least CONTRAST_HIGHLIGHT_AVG
    are lightened, those below CONTRAST_SHADOW_AVG are darkened, both by
    `scale` in (0, 1]. Mid-tones are left unchanged.
    """
    validate_image(img)
    avg = (_channel_sum(img) // 3)[:, :, None]
    result = np.where(
        avg >= CONTRAST_HIGHLIGHT_AVG,
        _lighten_values(img, scale),
        np.where(
            avg < CONTRAST_SHADOW_AVG,
            _darken_values(img, scale),
            img.astype(np.float64),
        ),
    )
    return _to_channels(result)


def grayscale(img: np.ndarray) -> np.ndarray:
    """Replace every channel with the floor of the channel average."""
    validate_image(img)
    avg = _channel_sum(img) // 3
    return np.repeat(avg[:, :, None], 3, axis=2).astype(np.uint8)


def rotate_90(img: np.ndarray) -> np.ndarray:
    """Rotate 90 degrees clockwise."""
    validate_image(img)
    return rotate_clockwise(img)


def rotate(img: np.ndarray, turns: int) -> np.ndarray:
    """Rotate clockwise by `turns` quarter turns.

    A multiple of four turns returns the input image unchanged.
    """
    validate_image(img)
    return rotate_quarter_turns(img, turns)


def enlarge(img: np.ndarray, x_scale: int, y_scale: int) -> np.ndarray:
    """Nearest-neighbour enlargement by integer factors.

    Output pixel (r, c) copies input pixel (r // y_scale, c // x_scale), so
    the result has rows * y_scale rows and cols * x_scale columns.
    """
    validate_image(img)
    taller = np.repeat(img, y_scale, axis=0)
    return np.repeat(taller, x_scale, axis=1)


def high_contrast(img: np.ndarray) -> np.ndarray:
    """Binarize: white where the channel average reaches the threshold, else black."""
    validate_image(img)
    avg = _channel_sum(img) / 3.0
    white = (avg >= HIGH_CONTRAST_THRESHOLD)[:, :, None]
    return np.where(white, np.uint8(255), np.uint8(0)).repeat(3, axis=2)


def lighten(img: np.ndarray, scale: float) -> np.ndarray:
    """Move every channel toward 255: 255 - (255 - channel) * scale."""
    validate_image(img)
    return _to_channels(_lighten_values(img, scale))


def darken(img: np.ndarray, scale: float) -> np.ndarray:
    """Move every channel toward 0: channel * scale."""
    validate_image(img)
    return _to_channels(_darken_values(img, scale))


def color_threshold(img: np.ndarray) -> np.ndarray:
    """Reduce the image to black, white, red, green and blue.

    Bright pixels (channel sum at or above THRESHOLD_WHITE_SUM) become white,
    dark ones (sum at or below THRESHOLD_BLACK_SUM) black. Everything else
    becomes the pure primary of its largest channel, ties going to red,
    then green.
    """
    validate_image(img)
    channels = img.astype(np.int64)
    red, green, blue = channels[:, :, 0], channels[:, :, 1], channels[:, :, 2]
    total = red + green + blue
    largest = channels.max(axis=2)

    conditions = [
        total >= THRESHOLD_WHITE_SUM,
        total <= THRESHOLD_BLACK_SUM,
        largest == red,
        largest == green,
    ]
    out = np.empty(img.shape, dtype=np.uint8)
    for channel in range(3):
        choices = [WHITE[channel], BLACK[channel], RED[channel], GREEN[channel]]
        out[:, :, channel] = np.select(conditions, choices, default=BLUE[channel])
    return out
