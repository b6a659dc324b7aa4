"""Tests for the filter registry, parameter parsing and step classes."""

import dataclasses

import numpy as np
import pytest

from filters import (
    FILTERS,
    DarkenStep,
    EnlargeStep,
    FilterStep,
    LightenStep,
    RotateStep,
    darken,
    get_filter,
)
from filters.registry import SCALE, TURNS

DEFAULT_PARAMS = {"scale": 0.5, "turns": 3, "x_scale": 2, "y_scale": 3}


class TestRegistryOrder:
    def test_ten_filters_in_menu_order(self):
        assert [f.display_name for f in FILTERS] == [
            "vignette",
            "clarendon",
            "greyscale",
            "rotate 90 degrees",
            "rotate multiple 90 degrees",
            "enlarge",
            "high contrast",
            "lighten",
            "darken",
            "black, white, red, green, blue",
        ]

    def test_keys_are_unique(self):
        keys = [f.key for f in FILTERS]
        assert len(set(keys)) == len(keys)

    def test_parameterised_filters(self):
        needs = {i: f.param_names for i, f in enumerate(FILTERS, start=1) if f.params}
        assert needs == {
            2: ["scale"],
            5: ["turns"],
            6: ["x_scale", "y_scale"],
            8: ["scale"],
            9: ["scale"],
        }


class TestGetFilter:
    def test_by_index(self):
        assert get_filter(1).key == "vignette"
        assert get_filter(10).key == "bwrgb"

    def test_by_numeric_string(self):
        assert get_filter("8").key == "lighten"

    def test_by_key(self):
        assert get_filter("enlarge").display_name == "enlarge"
        assert get_filter(" Darken ").key == "darken"

    @pytest.mark.parametrize("selector", [0, 11, "11", "sepia", "²"])
    def test_unknown_raises(self, selector):
        with pytest.raises(KeyError):
            get_filter(selector)


class TestParamSpec:
    @pytest.mark.parametrize("text,value", [("0.5", 0.5), ("1", 1.0), (" 0.01 ", 0.01)])
    def test_scale_accepts(self, text, value):
        assert SCALE.parse(text) == value

    @pytest.mark.parametrize("text", ["0", "-0.5", "1.5", "nan"])
    def test_scale_out_of_range_raises(self, text):
        with pytest.raises(ValueError, match="greater than"):
            SCALE.parse(text)

    def test_scale_not_a_number_raises(self):
        with pytest.raises(ValueError, match="must be a number"):
            SCALE.parse("bright")

    def test_count_accepts(self):
        assert TURNS.parse("3") == 3

    @pytest.mark.parametrize("text", ["0", "-2"])
    def test_count_too_small_raises(self, text):
        with pytest.raises(ValueError, match=">= 1"):
            TURNS.parse(text)

    @pytest.mark.parametrize("text", ["2.5", "two", ""])
    def test_count_not_an_integer_raises(self, text):
        with pytest.raises(ValueError, match="must be an integer"):
            TURNS.parse(text)


class TestBuild:
    def test_parse_params_then_build(self):
        spec = get_filter("enlarge")
        params = spec.parse_params({"x_scale": "2", "y_scale": "3", "scale": None})
        assert params == {"x_scale": 2, "y_scale": 3}
        assert spec.build(**params) == EnlargeStep(x_scale=2, y_scale=3)

    def test_parse_params_missing_raises(self):
        with pytest.raises(ValueError, match="requires parameter 'scale'"):
            get_filter("lighten").parse_params({"scale": None})

    def test_build_missing_raises(self):
        with pytest.raises(ValueError, match="turns"):
            get_filter("rotate").build()

    def test_build_ignores_unrelated_params(self):
        step = get_filter("rotate").build(**DEFAULT_PARAMS)
        assert step == RotateStep(turns=3)

    @pytest.mark.parametrize("spec", FILTERS, ids=lambda f: f.key)
    def test_every_filter_applies(self, spec, random_image):
        step = spec.build(**DEFAULT_PARAMS)
        assert isinstance(step, FilterStep)
        assert step.name
        out = step.apply(random_image)
        assert out.dtype == np.uint8
        assert out.shape[2] == 3


class TestSteps:
    def test_step_matches_function(self, random_image):
        out = DarkenStep(scale=0.25).apply(random_image)
        assert np.array_equal(out, darken(random_image, 0.25))

    def test_steps_are_frozen(self):
        step = LightenStep(scale=0.5)
        with pytest.raises(dataclasses.FrozenInstanceError):
            step.scale = 0.9

    def test_names_include_parameters(self):
        assert RotateStep(turns=2).name == "rotate(2x90)"
        assert EnlargeStep(x_scale=2, y_scale=3).name == "enlarge(2x3)"
