import logging

import pytest

from fpvsetup.__main__ import main
from fpvsetup.model.fov import subtended_angle
from fpvsetup.utils import format_angle


@pytest.fixture(autouse=True)
def _restore_logging():
    yield
    # main() attaches handlers bound to the captured streams
    logger = logging.getLogger("fpvsetup")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def test_portal_like_report(capsys):
    code = main(["--width", "60", "--height", "34", "--distance", "70"])
    out = capsys.readouterr().out

    assert code == 0
    assert "Portal-like" in out
    assert format_angle(subtended_angle(0.6, 0.7)) in out
    assert format_angle(subtended_angle(0.34, 0.7)) in out
    assert "Move the camera back 0.7 meters (0.7 units)" in out
    # No reference distance, so no focused section
    assert "Focused" not in out


def test_diagonal_and_aspect_input(capsys):
    code = main(["--diagonal", "27", "--aspect", "16:9", "--distance", "70", "--mode", "portal-like"])
    out = capsys.readouterr().out

    assert code == 0
    assert "aspect 16:9" in out
    assert "diagonal 27 inches" in out


def test_focused_report(capsys):
    code = main([
        "--width", "60", "--height", "34", "--distance", "70",
        "--mode", "focused", "--reference-distance", "2", "--reference-unit", "m",
    ])
    out = capsys.readouterr().out

    assert code == 0
    assert "Portal-like" not in out
    assert "accurate scale 2 meters away from the screen" in out
    assert "Scale factor: 1.35" in out


def test_app_units_in_setback(capsys):
    code = main([
        "--width", "60", "--height", "34", "--distance", "70",
        "--app-units-per-meter", "100", "--setback-unit", "cm",
    ])
    out = capsys.readouterr().out

    assert code == 0
    assert "Move the camera back 70 centimeters (70 units)" in out


def test_focused_without_reference_is_an_error(capsys):
    code = main(["--width", "60", "--height", "34", "--distance", "70", "--mode", "focused"])
    err = capsys.readouterr().err

    assert code == 2
    assert "reference-distance" in err


@pytest.mark.parametrize(
    "argv",
    [
        ["--width", "0", "--height", "34", "--distance", "70"],
        ["--width", "60", "--height", "34", "--distance", "-1"],
        ["--width", "60", "--distance", "70"],
        ["--distance", "70"],
        ["--diagonal", "27", "--aspect", "wide", "--distance", "70"],
        ["--width", "60", "--height", "34", "--distance", "70", "--distance-unit", "cubits"],
    ],
)
def test_invalid_input_exit_code(capsys, argv):
    assert main(argv) == 2
    assert "fpvsetup: error:" in capsys.readouterr().err


def test_missing_distance_is_a_usage_error():
    with pytest.raises(SystemExit) as exc:
        main(["--width", "60", "--height", "34"])
    assert exc.value.code == 2


@pytest.mark.parametrize("reference", ["0", "-2"])
def test_invalid_reference_distance_prints_no_partial_report(capsys, reference):
    code = main([
        "--width", "60", "--height", "34", "--distance", "70",
        "--mode", "both", "--reference-distance", reference,
    ])
    captured = capsys.readouterr()

    assert code == 2
    assert captured.out == ""
    assert "fpvsetup: error:" in captured.err


def test_reference_distance_relative_to_eye(capsys):
    code = main([
        "--width", "60", "--height", "34", "--distance", "70",
        "--mode", "focused", "--reference-distance", "70", "--relative-to", "eye",
    ])
    out = capsys.readouterr().out

    assert code == 0
    assert "accurate scale 70 centimeters away from the eye" in out
    # Eye-relative reference at the viewing distance reproduces the portal view
    assert format_angle(subtended_angle(0.6, 0.7)) in out
    assert out.rstrip().endswith("Scale factor: 1")


def test_extreme_aspect_ratio_from_diagonal(capsys):
    code = main(["--diagonal", "27", "--aspect", "1e200:1", "--distance", "70", "--mode", "portal-like"])

    assert code == 0
    assert "Portal-like" in capsys.readouterr().out
