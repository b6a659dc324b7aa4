"""
Ordered registry of the available filters.

FILTERS is indexed 1..10 in menu order. Each entry knows which parameters
its step needs, and how to parse and validate them from user input, so a
caller can collect parameters before building the step:

    spec = get_filter("lighten")
    params = spec.parse_params({"scale": "0.5"})
    step = spec.build(**params)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Literal

from config import MAX_SCALE, MIN_COUNT, MIN_SCALE
from .steps import (
    ColorThresholdStep,
    ContrastStep,
    DarkenStep,
    EnlargeStep,
    FilterStep,
    GrayscaleStep,
    HighContrastStep,
    LightenStep,
    Rotate90Step,
    RotateStep,
    VignetteStep,
)

ParamKind = Literal["scale", "count"]


@dataclass(frozen=True)
class ParamSpec:
    """A parameter a filter needs from the caller.

    Attributes:
        name: Keyword argument passed to the step factory.
        prompt: Text shown when asking the user for the value.
        kind: "scale" for a float in (0, 1], "count" for an integer >= 1.
    """

    name: str
    prompt: str
    kind: ParamKind

    def parse(self, text: str) -> float | int:
        """Parse and validate raw user input.

        Raises:
            ValueError: If the text is not a number of the right kind or is
                        out of range.
        """
        text = str(text).strip()
        if self.kind == "scale":
            try:
                value = float(text)
            except ValueError:
                raise ValueError(f"{self.name} must be a number, got {text!r}")
            if not MIN_SCALE < value <= MAX_SCALE:
                raise ValueError(
                    f"{self.name} must be greater than {MIN_SCALE} and at most "
                    f"{MAX_SCALE}, got {value}"
                )
            return value

        try:
            count = int(text)
        except ValueError:
            raise ValueError(f"{self.name} must be an integer, got {text!r}")
        if count < MIN_COUNT:
            raise ValueError(f"{self.name} must be an integer >= {MIN_COUNT}, got {count}")
        return count


SCALE = ParamSpec("scale", "Enter scaling factor: ", "scale")
TURNS = ParamSpec("turns", "Enter number of 90 degree rotations: ", "count")
X_SCALE = ParamSpec("x_scale", "Enter X scale: ", "count")
Y_SCALE = ParamSpec("y_scale", "Enter Y scale: ", "count")


@dataclass(frozen=True)
class FilterSpec:
    """A registry entry pairing a display name with a step factory."""

    key: str
    display_name: str
    step_factory: Callable[..., FilterStep]
    params: tuple[ParamSpec, ...] = field(default_factory=tuple)

    @property
    def param_names(self) -> list[str]:
        return [p.name for p in self.params]

    def parse_params(self, raw: dict[str, Any]) -> dict[str, float | int]:
        """Parse raw values for every parameter this filter needs.

        Raises:
            ValueError: If a parameter is missing or invalid.
        """
        parsed = {}
        for param in self.params:
            if raw.get(param.name) is None:
                raise ValueError(f"{self.key} requires parameter '{param.name}'")
            parsed[param.name] = param.parse(raw[param.name])
        return parsed

    def build(self, **params: Any) -> FilterStep:
        """Create the step for this filter from already-validated parameters.

        Raises:
            ValueError: If a required parameter is missing.
        """
        missing = [name for name in self.param_names if name not in params]
        if missing:
            raise ValueError(f"{self.key} requires parameter(s): {', '.join(missing)}")
        return self.step_factory(**{name: params[name] for name in self.param_names})


FILTERS: tuple[FilterSpec, ...] = (
    FilterSpec("vignette", "vignette", VignetteStep),
    FilterSpec("clarendon", "clarendon", ContrastStep, (SCALE,)),
    FilterSpec("greyscale", "greyscale", GrayscaleStep),
    FilterSpec("rotate90", "rotate 90 degrees", Rotate90Step),
    FilterSpec("rotate", "rotate multiple 90 degrees", RotateStep, (TURNS,)),
    FilterSpec("enlarge", "enlarge", EnlargeStep, (X_SCALE, Y_SCALE)),
    FilterSpec("high-contrast", "high contrast", HighContrastStep),
    FilterSpec("lighten", "lighten", LightenStep, (SCALE,)),
    FilterSpec("darken", "darken", DarkenStep, (SCALE,)),
    FilterSpec("bwrgb", "black, white, red, green, blue", ColorThresholdStep),
)

FILTER_KEYS: tuple[str, ...] = tuple(f.key for f in FILTERS)


def get_filter(selector: int | str) -> FilterSpec:
    """Look up a filter by 1-based menu index or by key.

    Raises:
        KeyError: If no filter matches.
    """
    if isinstance(selector, str) and selector.strip().isdecimal():
        selector = int(selector)

    if isinstance(selector, int):
        if 1 <= selector <= len(FILTERS):
            return FILTERS[selector - 1]
        raise KeyError(f"No filter at index {selector} (expected 1-{len(FILTERS)})")

    key = selector.strip().lower()
    for spec in FILTERS:
        if spec.key == key:
            return spec
    raise KeyError(f"Unknown filter {selector!r} (choose from {', '.join(FILTER_KEYS)})")
