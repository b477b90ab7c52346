"""
Monitor Geometry
================
Physical measurements of the monitor and of the viewer's position.

Classes:
    MonitorGeometry: Width and height of the visible screen area.
    ViewerDistance: Distance from the eye to the screen plane.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple
import logging
import math

from fpvsetup.config import ASPECT_ROUNDING
from fpvsetup.model.aspect import find_common_aspect_ratio
from fpvsetup.model.errors import require_positive
from fpvsetup.model.units import LengthUnit, from_meters, to_meters

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MonitorGeometry:
    """
    Dimensions of a monitor, in meters.

    Monitors are often described by diagonal and aspect ratio rather than by
    width and height; use `from_diagonal` for those. Either way the stored
    representation is width and height, so both descriptions compare equal.
    """
    width: float
    height: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "width", require_positive(self.width, "Monitor width"))
        object.__setattr__(self, "height", require_positive(self.height, "Monitor height"))

    @classmethod
    def from_diagonal(cls, diagonal: float, aspect: float) -> MonitorGeometry:
        """
        Build the geometry from the diagonal length and the aspect ratio
        (`width / height`).

        With the aspect ratio a = w/h the diagonal satisfies
        diag^2 = h^2 * (a^2 + 1), hence h = diag / hypot(a, 1) and w = h * a.
        """
        diagonal = require_positive(diagonal, "Monitor diagonal")
        aspect = require_positive(aspect, "Aspect ratio")
        height = diagonal / math.hypot(aspect, 1.0)
        width = height * aspect
        logger.debug(f"Diagonal {diagonal:.4f} m at aspect {aspect:.4f} -> {width:.4f} x {height:.4f} m")
        return cls(width=width, height=height)

    @classmethod
    def from_unit(cls, width: float, height: float, unit: str | LengthUnit) -> MonitorGeometry:
        return cls(width=to_meters(width, unit), height=to_meters(height, unit))

    @classmethod
    def from_diagonal_unit(cls, diagonal: float, aspect: float, unit: str | LengthUnit) -> MonitorGeometry:
        return cls.from_diagonal(to_meters(diagonal, unit), aspect)

    @property
    def aspect(self) -> float:
        return self.width / self.height

    @property
    def diagonal(self) -> float:
        # Width and height are the catheti of the diagonal
        return math.hypot(self.width, self.height)

    def width_and_height(self, unit: str | LengthUnit = LengthUnit.METERS) -> Tuple[float, float]:
        return from_meters(self.width, unit), from_meters(self.height, unit)

    def common_aspect_ratio(self, rounding: float = ASPECT_ROUNDING) -> Tuple[float, float]:
        """
        The aspect ratio as a (numerator, denominator) pair, snapped to a
        common ratio when one is within `rounding`, else (aspect, 1.0).
        """
        return find_common_aspect_ratio(self.aspect, rounding) or (self.aspect, 1.0)


@dataclass(frozen=True)
class ViewerDistance:
    """Distance from the viewer's eye to the screen plane, in meters."""
    meters: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "meters", require_positive(self.meters, "Viewing distance"))

    @classmethod
    def from_unit(cls, value: float, unit: str | LengthUnit) -> ViewerDistance:
        return cls(meters=to_meters(value, unit))

    def to_unit(self, unit: str | LengthUnit) -> float:
        return from_meters(self.meters, unit)
