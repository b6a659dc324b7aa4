"""
Image filters for decoded bitmaps.

This module provides pure, deterministic transforms over (H, W, 3) uint8
RGB images. All functions follow the pattern: input -> output with no
mutation of the original arrays.

Key components:
- transforms: the ten filter functions
- steps: FilterStep classes wrapping each transform with its parameters
- registry: FILTERS, the ordered menu of filters, and get_filter()
- pipeline: apply_filter() to decode, filter and encode one file
"""

from .transforms import (
    vignette,
    contrast_enhance,
    grayscale,
    rotate_90,
    rotate,
    enlarge,
    high_contrast,
    lighten,
    darken,
    color_threshold,
)
from .steps import (
    FilterStep,
    VignetteStep,
    ContrastStep,
    GrayscaleStep,
    Rotate90Step,
    RotateStep,
    EnlargeStep,
    HighContrastStep,
    LightenStep,
    DarkenStep,
    ColorThresholdStep,
)
from .registry import FILTERS, FILTER_KEYS, FilterSpec, ParamSpec, get_filter
from .pipeline import FilterRunResult, apply_filter

__all__ = [
    # Function API
    "vignette",
    "contrast_enhance",
    "grayscale",
    "rotate_90",
    "rotate",
    "enlarge",
    "high_contrast",
    "lighten",
    "darken",
    "color_threshold",
    # Class-based API
    "FilterStep",
    "VignetteStep",
    "ContrastStep",
    "GrayscaleStep",
    "Rotate90Step",
    "RotateStep",
    "EnlargeStep",
    "HighContrastStep",
    "LightenStep",
    "DarkenStep",
    "ColorThresholdStep",
    # Registry
    "FILTERS",
    "FILTER_KEYS",
    "FilterSpec",
    "ParamSpec",
    "get_filter",
    # Pipeline
    "FilterRunResult",
    "apply_filter",
]
