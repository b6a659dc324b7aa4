"""
Decode -> filter -> encode pipeline (reusable by the CLI commands).

Each run is independent: the input file is decoded into a fresh image, one
step is applied, and the result is written to the output path.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from bitmap import read_bitmap, write_bitmap
from .steps import FilterStep

logger = logging.getLogger(__name__)


@dataclass
class FilterRunResult:
    """Outcome of applying one filter to one file.

    Attributes:
        step_name: Name of the step that was applied.
        input_path: Source bitmap path.
        output_path: Destination bitmap path.
        input_shape: (height, width) of the decoded image, if decoding worked.
        output_shape: (height, width) of the filtered image, if it was produced.
        error: Why the run failed, or None on success.
    """

    step_name: str
    input_path: Path
    output_path: Path
    input_shape: tuple[int, int] | None = None
    output_shape: tuple[int, int] | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def apply_filter(
    input_path: str | Path,
    output_path: str | Path,
    step: FilterStep,
) -> FilterRunResult:
    """Decode `input_path`, apply `step`, and write the result to `output_path`.

    Failures (unreadable or invalid input, unwritable output) are reported in
    the returned result rather than raised.
    """
    result = FilterRunResult(
        step_name=step.name,
        input_path=Path(input_path),
        output_path=Path(output_path),
    )

    decoded = read_bitmap(result.input_path)
    if not decoded.ok:
        result.error = f"{result.input_path} is not a valid image: {decoded.error}"
        return result

    image = decoded.image
    result.input_shape = image.shape[:2]
    logger.debug(
        "Applying %s to %s (%dx%d)",
        step.name,
        result.input_path,
        image.shape[1],
        image.shape[0],
    )

    filtered = step.apply(image)
    result.output_shape = filtered.shape[:2]

    if not write_bitmap(result.output_path, filtered):
        result.error = f"could not write {result.output_path}"
        return result

    logger.debug(
        "Wrote %s (%dx%d)",
        result.output_path,
        filtered.shape[1],
        filtered.shape[0],
    )
    return result
