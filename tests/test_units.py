import pytest

from fpvsetup.model.errors import InvalidInputError
from fpvsetup.model.units import (
    LengthUnit,
    UnitScale,
    conversion_rate,
    from_meters,
    parse_unit,
    to_meters,
    unit_label,
)


@pytest.mark.parametrize(
    "name, unit",
    [
        ("meters", LengthUnit.METERS),
        ("meter", LengthUnit.METERS),
        ("m", LengthUnit.METERS),
        ("CM", LengthUnit.CENTIMETERS),
        (" millimeter ", LengthUnit.MILLIMETERS),
        ("foot", LengthUnit.FEET),
        ("ft", LengthUnit.FEET),
        ("in", LengthUnit.INCHES),
        ('"', LengthUnit.INCHES),
        (LengthUnit.FEET, LengthUnit.FEET),
    ],
)
def test_parse_unit(name, unit):
    assert parse_unit(name) is unit


def test_parse_unit_unknown():
    with pytest.raises(InvalidInputError, match="furlongs"):
        parse_unit("furlongs")


def test_to_and_from_meters():
    assert to_meters(70, "cm") == pytest.approx(0.7)
    assert to_meters(1, "in") == pytest.approx(0.0254)
    assert from_meters(0.3048, "ft") == pytest.approx(1.0)
    assert from_meters(1.0, "mm") == pytest.approx(1000.0)


def test_conversion_rate():
    assert conversion_rate("m", "cm") == pytest.approx(100.0)
    assert conversion_rate("in", "cm") == pytest.approx(2.54)
    assert conversion_rate("ft", "in") == pytest.approx(12.0)
    assert conversion_rate("cm", "cm") == pytest.approx(1.0)


def test_unit_label():
    assert unit_label("ft") == "feet"
    assert unit_label("ft", plural=False) == "foot"


def test_unit_scale_from_real_per_app():
    # One application unit is half a meter
    scale = UnitScale.from_real_per_app(50, "cm")

    assert scale.app_units_per_meter == pytest.approx(2.0)
    assert scale.meters_per_app_unit == pytest.approx(0.5)
    assert scale.real_per_app("cm") == pytest.approx(50.0)
    assert scale.to_app_units(0.7) == pytest.approx(1.4)


def test_unit_scale_from_app_per_real():
    # Engines measuring in centimeters: one inch spans 2.54 units
    scale = UnitScale.from_app_per_real(2.54, "in")

    assert scale.app_units_per_meter == pytest.approx(100.0)
    assert scale.app_per_real("m") == pytest.approx(100.0)


def test_unit_scale_directions_are_reciprocal():
    scale = UnitScale.from_app_per_real(3.0, "ft")

    assert scale.app_per_real("ft") * scale.real_per_app("ft") == pytest.approx(1.0)


@pytest.mark.parametrize("value", [0.0, -2.0, float("nan")])
def test_unit_scale_rejects_invalid(value):
    with pytest.raises(InvalidInputError):
        UnitScale(app_units_per_meter=value)
    with pytest.raises(InvalidInputError):
        UnitScale.from_real_per_app(value)
