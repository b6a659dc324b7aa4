"""Tests for the bmpf CLI commands and the interactive menu."""

import logging

import numpy as np
import pytest

import bmpf
from bitmap import read_bitmap
from cli.menu import parse_selection, run_menu


def scripted(*responses):
    """Return an input() replacement answering with `responses`, then EOF."""
    answers = iter(responses)
    prompts = []

    def fake_input(prompt: str) -> str:
        prompts.append(prompt)
        try:
            return next(answers)
        except StopIteration:
            raise EOFError

    fake_input.prompts = prompts
    return fake_input


@pytest.fixture(autouse=True)
def _info_logs(caplog):
    caplog.set_level(logging.INFO)


class TestFiltersCommand:
    def test_lists_every_filter(self, caplog):
        assert bmpf.main(["filters"]) == 0
        assert "vignette" in caplog.text
        assert "black, white, red, green, blue" in caplog.text
        assert "x_scale, y_scale" in caplog.text


class TestApplyCommand:
    def test_apply_by_key(self, tmp_path, sample_path, caplog):
        out_path = tmp_path / "out.bmp"
        code = bmpf.main(["apply", "rotate", str(sample_path), str(out_path), "--turns", "1"])
        assert code == 0
        assert "Successfully applied rotate multiple 90 degrees!" in caplog.text
        out = read_bitmap(out_path).unwrap()
        assert tuple(out[0, 1]) == (255, 0, 0)

    def test_apply_by_number(self, tmp_path, sample_path):
        out_path = tmp_path / "out.bmp"
        assert bmpf.main(["apply", "7", str(sample_path), str(out_path)]) == 0
        out = read_bitmap(out_path).unwrap()
        assert set(np.unique(out)) <= {0, 255}

    def test_apply_enlarge(self, tmp_path, sample_path):
        out_path = tmp_path / "out.bmp"
        args = ["apply", "enlarge", str(sample_path), str(out_path), "--x", "2", "--y", "3"]
        assert bmpf.main(args) == 0
        assert read_bitmap(out_path).unwrap().shape == (6, 4, 3)

    def test_missing_parameter(self, tmp_path, sample_path, caplog):
        out_path = tmp_path / "out.bmp"
        assert bmpf.main(["apply", "lighten", str(sample_path), str(out_path)]) == 1
        assert "requires parameter 'scale'" in caplog.text
        assert not out_path.exists()

    def test_invalid_parameter(self, tmp_path, sample_path, caplog):
        out_path = tmp_path / "out.bmp"
        args = ["apply", "darken", str(sample_path), str(out_path), "--scale", "1.5"]
        assert bmpf.main(args) == 1
        assert not out_path.exists()

    def test_unknown_filter(self, tmp_path, sample_path, caplog):
        assert bmpf.main(["apply", "sepia", str(sample_path), str(tmp_path / "o.bmp")]) == 1
        assert "Unknown filter" in caplog.text

    def test_superscript_digit_is_unknown_filter(self, tmp_path, sample_path, caplog):
        assert bmpf.main(["apply", "²", str(sample_path), str(tmp_path / "o.bmp")]) == 1
        assert "Unknown filter" in caplog.text

    def test_empty_output_name(self, sample_path, caplog):
        assert bmpf.main(["apply", "greyscale", str(sample_path), ""]) == 1
        assert "could not write" in caplog.text

    def test_invalid_input_file(self, tmp_path, caplog):
        bad = tmp_path / "bad.bmp"
        bad.write_bytes(b"BM" + b"\x00" * 60)
        assert bmpf.main(["apply", "greyscale", str(bad), str(tmp_path / "o.bmp")]) == 1
        assert "not a valid image" in caplog.text


class TestInfoCommand:
    def test_valid_file(self, sample_path, caplog):
        assert bmpf.main(["info", str(sample_path)]) == 0
        assert "Valid 2x2 image" in caplog.text
        assert "2835" in caplog.text

    def test_size_mismatch(self, tmp_path, sample_bytes, caplog):
        path = tmp_path / "bad.bmp"
        path.write_bytes(sample_bytes[:2] + (99).to_bytes(4, "little") + sample_bytes[6:])
        assert bmpf.main(["info", str(path)]) == 1
        assert "does not match" in caplog.text

    def test_missing_file(self, tmp_path, caplog):
        assert bmpf.main(["info", str(tmp_path / "missing.bmp")]) == 1
        assert "could not read" in caplog.text


class TestMenu:
    def test_parse_selection(self):
        assert parse_selection(" 3 ") == 3
        assert parse_selection("abc") == 0
        assert parse_selection("") == 0
        assert parse_selection("²") == 0

    def test_quit_immediately(self, sample_path):
        fake = scripted("q")
        assert run_menu(str(sample_path), input_func=fake) == 0

    def test_prompts_for_input_file(self, sample_path):
        fake = scripted(str(sample_path), "Q")
        assert run_menu(input_func=fake) == 0
        assert fake.prompts[0] == "Enter input BMP filename: "

    def test_applies_filter_with_reprompt(self, tmp_path, sample_path, caplog):
        out_path = tmp_path / "dark.bmp"
        fake = scripted("9", "2", "abc", "0.5", str(out_path), "q")
        assert run_menu(str(sample_path), input_func=fake) == 0

        assert fake.prompts.count("Enter scaling factor: ") == 3
        assert "Invalid input!" in caplog.text
        assert "Successfully applied darken!" in caplog.text
        out = read_bitmap(out_path).unwrap()
        assert tuple(out[1, 1]) == (127, 127, 127)

    def test_change_image(self, tmp_path, sample_path, caplog):
        out_path = tmp_path / "gray.bmp"
        fake = scripted("11", str(sample_path), "3", str(out_path), "q")
        assert run_menu("other.bmp", input_func=fake) == 0
        assert "Change image selected" in caplog.text
        assert f"current: {sample_path}" in caplog.text
        assert out_path.exists()

    def test_ignores_out_of_range_selection(self, sample_path):
        fake = scripted("12", "0", "hello", "q")
        assert run_menu(str(sample_path), input_func=fake) == 0
        assert fake.prompts.count("Enter menu selection (Q/q to quit): ") == 4

    def test_invalid_image_reported(self, tmp_path, caplog):
        bad = tmp_path / "bad.bmp"
        bad.write_bytes(b"garbage")
        fake = scripted("3", str(tmp_path / "out.bmp"), "q")
        assert run_menu(str(bad), input_func=fake) == 0
        assert "not a valid image" in caplog.text
        assert not (tmp_path / "out.bmp").exists()

    def test_end_of_input_exits(self, sample_path):
        assert run_menu(str(sample_path), input_func=scripted()) == 0

    def test_superscript_digit_selection_is_ignored(self, sample_path):
        fake = scripted("²", "q")
        assert run_menu(str(sample_path), input_func=fake) == 0
        assert fake.prompts.count("Enter menu selection (Q/q to quit): ") == 2

    def test_empty_output_name_reported(self, sample_path, caplog):
        fake = scripted("3", "", "q")
        assert run_menu(str(sample_path), input_func=fake) == 0
        assert "could not write" in caplog.text
