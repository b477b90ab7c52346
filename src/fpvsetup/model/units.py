"""
Length Units
============
Real-world length units accepted at the edges of the calculator, and the
scale between real-world meters and the units of the 3D application.

All lengths inside the model are meters. Units only appear when values are
read from the user or shown back to them.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Dict

from fpvsetup.model.errors import InvalidInputError, require_positive


class LengthUnit(StrEnum):
    METERS = "meters"
    CENTIMETERS = "centimeters"
    MILLIMETERS = "millimeters"
    FEET = "feet"
    INCHES = "inches"


@dataclass(frozen=True)
class UnitMetadata:
    singular: str
    symbol: str
    meters: float  # length of one unit in meters


UNIT_METADATA: Dict[LengthUnit, UnitMetadata] = {
    LengthUnit.METERS: UnitMetadata(singular="meter", symbol="m", meters=1.0),
    LengthUnit.CENTIMETERS: UnitMetadata(singular="centimeter", symbol="cm", meters=0.01),
    LengthUnit.MILLIMETERS: UnitMetadata(singular="millimeter", symbol="mm", meters=0.001),
    LengthUnit.FEET: UnitMetadata(singular="foot", symbol="ft", meters=0.3048),
    LengthUnit.INCHES: UnitMetadata(singular="inch", symbol="in", meters=0.0254),
}

# Every accepted spelling -> unit
_ALIASES: Dict[str, LengthUnit] = {}
for _unit, _meta in UNIT_METADATA.items():
    _ALIASES[_unit.value] = _unit
    _ALIASES[_meta.singular] = _unit
    _ALIASES[_meta.symbol] = _unit
_ALIASES['"'] = LengthUnit.INCHES
_ALIASES["'"] = LengthUnit.FEET


def parse_unit(name: str | LengthUnit) -> LengthUnit:
    """
    Resolve a unit from its name, singular form or symbol
    (e.g. "centimeters", "centimeter", "cm").
    """
    if isinstance(name, LengthUnit):
        return name
    key = str(name).strip().lower()
    if key not in _ALIASES:
        raise InvalidInputError(f"Unknown length unit '{name}'.")
    return _ALIASES[key]


def to_meters(value: float, unit: str | LengthUnit) -> float:
    """Convert a length given in `unit` to meters."""
    return value * UNIT_METADATA[parse_unit(unit)].meters


def from_meters(meters: float, unit: str | LengthUnit) -> float:
    """Express a length in meters in `unit`."""
    return meters / UNIT_METADATA[parse_unit(unit)].meters


def conversion_rate(a: str | LengthUnit, b: str | LengthUnit) -> float:
    """By what number a value in unit `a` needs to be multiplied to yield unit `b`."""
    return UNIT_METADATA[parse_unit(a)].meters / UNIT_METADATA[parse_unit(b)].meters


def unit_label(unit: str | LengthUnit, plural: bool = True) -> str:
    unit = parse_unit(unit)
    return unit.value if plural else UNIT_METADATA[unit].singular


@dataclass(frozen=True)
class UnitScale:
    """
    Relation between real-world length and application (engine) units.

    The user may enter either direction: how many application units one real
    unit spans, or how long one application unit is in real units. The other
    direction is the reciprocal.
    """
    app_units_per_meter: float = 1.0

    def __post_init__(self) -> None:
        require_positive(self.app_units_per_meter, "Application units per meter")

    @property
    def meters_per_app_unit(self) -> float:
        return 1.0 / self.app_units_per_meter

    @classmethod
    def from_app_per_real(cls, app_units: float, unit: str | LengthUnit = LengthUnit.METERS) -> UnitScale:
        """`app_units` application units span one `unit` of real length."""
        app_units = require_positive(app_units, "Application units per real unit")
        return cls(app_units_per_meter=app_units / to_meters(1.0, unit))

    @classmethod
    def from_real_per_app(cls, real_length: float, unit: str | LengthUnit = LengthUnit.METERS) -> UnitScale:
        """One application unit is `real_length` `unit`s long."""
        real_length = require_positive(real_length, "Real length per application unit")
        return cls(app_units_per_meter=1.0 / to_meters(real_length, unit))

    def app_per_real(self, unit: str | LengthUnit = LengthUnit.METERS) -> float:
        """Application units spanned by one `unit` of real length."""
        return self.app_units_per_meter * to_meters(1.0, unit)

    def real_per_app(self, unit: str | LengthUnit = LengthUnit.METERS) -> float:
        """Length of one application unit, expressed in `unit`."""
        return from_meters(self.meters_per_app_unit, unit)

    def to_app_units(self, meters: float) -> float:
        return meters * self.app_units_per_meter
