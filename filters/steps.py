"""
Filter step classes with a common interface.

Each step is a frozen dataclass implementing FilterStep. Parameterised
filters carry their parameters as fields, so every step is applied the same
way regardless of what it needs:

    step = LightenStep(scale=0.5)
    out = step.apply(image)
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

import numpy as np

from .transforms import (
    color_threshold,
    contrast_enhance,
    darken,
    enlarge,
    grayscale,
    high_contrast,
    lighten,
    rotate,
    rotate_90,
    vignette,
)


class FilterStep(ABC):
    """Base class for filter steps.

    Steps must be pure: `apply` returns a new image and never mutates its
    input.
    """

    @abstractmethod
    def apply(self, img: np.ndarray) -> np.ndarray:
        """Apply this filter to an (H, W, 3) uint8 image."""
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name for logging."""
        pass


@dataclass(frozen=True)
class VignetteStep(FilterStep):
    def apply(self, img: np.ndarray) -> np.ndarray:
        return vignette(img)

    @property
    def name(self) -> str:
        return "vignette"


@dataclass(frozen=True)
class ContrastStep(FilterStep):
    """Clarendon-style contrast enhancement.

    Attributes:
        scale: Strength in (0, 1]; smaller values push highlights and
               shadows further.
    """

    scale: float

    def apply(self, img: np.ndarray) -> np.ndarray:
        return contrast_enhance(img, self.scale)

    @property
    def name(self) -> str:
        return f"clarendon(scale={self.scale})"


@dataclass(frozen=True)
class GrayscaleStep(FilterStep):
    def apply(self, img: np.ndarray) -> np.ndarray:
        return grayscale(img)

    @property
    def name(self) -> str:
        return "greyscale"


@dataclass(frozen=True)
class Rotate90Step(FilterStep):
    def apply(self, img: np.ndarray) -> np.ndarray:
        return rotate_90(img)

    @property
    def name(self) -> str:
        return "rotate(90)"


@dataclass(frozen=True)
class RotateStep(FilterStep):
    """Rotate clockwise by a number of quarter turns."""

    turns: int

    def apply(self, img: np.ndarray) -> np.ndarray:
        return rotate(img, self.turns)

    @property
    def name(self) -> str:
        return f"rotate({self.turns}x90)"


@dataclass(frozen=True)
class EnlargeStep(FilterStep):
    """Nearest-neighbour enlargement.

    Attributes:
        x_scale: Horizontal factor (columns are repeated this many times).
        y_scale: Vertical factor (rows are repeated this many times).
    """

    x_scale: int
    y_scale: int

    def apply(self, img: np.ndarray) -> np.ndarray:
        return enlarge(img, self.x_scale, self.y_scale)

    @property
    def name(self) -> str:
        return f"enlarge({self.x_scale}x{self.y_scale})"


@dataclass(frozen=True)
class HighContrastStep(FilterStep):
    def apply(self, img: np.ndarray) -> np.ndarray:
        return high_contrast(img)

    @property
    def name(self) -> str:
        return "high contrast"


@dataclass(frozen=True)
class LightenStep(FilterStep):
    scale: float

    def apply(self, img: np.ndarray) -> np.ndarray:
        return lighten(img, self.scale)

    @property
    def name(self) -> str:
        return f"lighten(scale={self.scale})"


@dataclass(frozen=True)
class DarkenStep(FilterStep):
    scale: float

    def apply(self, img: np.ndarray) -> np.ndarray:
        return darken(img, self.scale)

    @property
    def name(self) -> str:
        return f"darken(scale={self.scale})"


@dataclass(frozen=True)
class ColorThresholdStep(FilterStep):
    def apply(self, img: np.ndarray) -> np.ndarray:
        return color_threshold(img)

    @property
    def name(self) -> str:
        return "black, white, red, green, blue"
