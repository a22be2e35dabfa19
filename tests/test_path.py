from __future__ import annotations

import copy

import pytest

from svgpath import Path


def test_new_path_is_empty():
    assert str(Path()) == ""
    assert str(Path.new()) == ""


@pytest.mark.parametrize(
    ("method", "args", "expected"),
    [
        ("move_to", (1, 2), "M 1 2"),
        ("move_by", (-1, 2.5), "m -1 2.5"),
        ("line_to", (3, 4), "L 3 4"),
        ("line_by", (0.5, -0.5), "l 0.5 -0.5"),
        ("horizontal_line_to", (7,), "H 7"),
        ("horizontal_line_by", (-7,), "h -7"),
        ("vertical_line_to", (8,), "V 8"),
        ("vertical_line_by", (-8,), "v -8"),
        ("cubic_bezier_to", (1, 2, 3, 4, 5, 6), "C 1 2, 3 4, 5 6"),
        ("cubic_bezier_by", (1, 2, 3, 4, 5, 6), "c 1 2, 3 4, 5 6"),
        ("smooth_cubic_bezier_to", (1, 2, 3, 4), "S 1 2, 3 4"),
        ("smooth_cubic_bezier_by", (1, 2, 3, 4), "s 1 2, 3 4"),
        ("quadratic_bezier_to", (1, 2, 3, 4), "Q 1 2, 3 4"),
        ("quadratic_bezier_by", (1, 2, 3, 4), "q 1 2, 3 4"),
        ("smooth_quadratic_cubic_bezier_to", (1, 2), "T 1 2"),
        ("smooth_quadratic_cubic_bezier_by", (1, 2), "t 1 2"),
        ("elliptical_arc_to", (5, 5, 0, True, False, 10, 0), "A 5 5 0 1 0 10 0"),
        ("elliptical_arc_by", (5, 4, 30, False, True, -10, 0), "a 5 4 30 0 1 -10 0"),
    ],
)
def test_command_appends_letter_and_arguments(method, args, expected):
    prefix = "M 0 0"
    path = Path().move_to(0, 0)
    result = getattr(path, method)(*args)
    assert result is path
    assert str(path) == prefix + expected


def test_chained_commands_have_no_separator():
    path = Path().move_to(1, 2).line_to(3, 4)
    assert str(path) == "M 1 2L 3 4"


def test_close_appends_bare_z():
    assert str(Path().close()) == "Z"
    assert str(Path().move_to(0, 0).line_to(1, 0).close()) == "M 0 0L 1 0Z"
    assert str(Path().close().move_to(1, 1)) == "ZM 1 1"


def test_arc_flags_are_digits_not_words():
    text = str(Path().elliptical_arc_to(5, 5, 0, True, False, 10, 0))
    assert "True" not in text and "False" not in text
    assert text.split()[4:6] == ["1", "0"]


def test_non_finite_values_pass_through():
    path = Path().move_to(float("nan"), float("inf")).line_by(float("-inf"), 0)
    assert str(path) == "M NaN infl -inf 0"


def test_fractional_values_use_float32_text():
    assert str(Path().line_to(0.1, 1 / 3)) == "L 0.1 0.33333334"


def test_rendering_does_not_mutate():
    path = Path().move_to(1, 2).line_to(3, 4)
    first = str(path)
    second = str(path)
    assert first == second == "M 1 2L 3 4"
    path.close()
    assert str(path) == "M 1 2L 3 4Z"


def test_format_and_d_property_match_str():
    path = Path().move_to(1, 2)
    assert f"{path}" == "M 1 2"
    assert f'<path d="{path}"></path>' == '<path d="M 1 2"></path>'
    assert path.d == str(path)


def test_copy_is_independent():
    base = Path().move_to(0, 0)
    branch = base.copy().line_to(1, 1)
    other = copy.copy(base).line_to(2, 2)
    assert str(base) == "M 0 0"
    assert str(branch) == "M 0 0L 1 1"
    assert str(other) == "M 0 0L 2 2"


def test_equality_compares_rendered_text():
    assert Path().move_to(1, 2) == Path().move_to(1.0, 2.0)
    assert Path().move_to(1, 2) != Path().move_by(1, 2)
    assert repr(Path().move_to(1, 2)) == "Path('M 1 2')"


def test_output_is_plain_ascii():
    path = (
        Path()
        .move_to(-1.5, 2)
        .cubic_bezier_by(1, 2, 3, 4, 5, 6)
        .elliptical_arc_to(1, 1, 0, False, True, 0, 0)
        .close()
    )
    allowed = set("0123456789.-, ") | set("MmLlHhVvZCcSsQqTtAa")
    assert set(str(path)) <= allowed
