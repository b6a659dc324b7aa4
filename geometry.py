"""Quarter-turn rotation helpers shared by the rotate filters."""

from __future__ import annotations

import numpy as np


def rotate_clockwise(img: np.ndarray) -> np.ndarray:
    """Rotate an image 90 degrees clockwise.

    Pixel (row, col) of an R x C image lands at (col, R - 1 - row) of the
    C x R result.
    """
    return np.rot90(img, k=-1, axes=(0, 1)).copy()


def rotate_quarter_turns(img: np.ndarray, turns: int) -> np.ndarray:
    """Rotate clockwise by `turns` quarter turns.

    Only turns % 4 single rotations are performed; a whole number of full
    turns returns `img` itself.
    """
    turns = turns % 4
    if turns == 0:
        return img
    result = img
    for _ in range(turns):
        result = rotate_clockwise(result)
    return result
