"""
FOV Calculator
==============
Pure functions turning physical monitor measurements into camera field of
view angles.

Two modes are provided:

Portal-like
    The camera FOV equals the visual angle the physical screen subtends at
    the viewer's eye. Content rendered this way makes the screen behave as a
    window into the 3D world, which improves the perception of depth.

Focused
    The FOV is chosen so that objects at a given reference distance from the
    camera appear at accurate real-world scale. The screen is treated as if
    it were pushed away to that distance, which narrows or widens the view
    like a zoom lens.

All lengths are meters, all returned angles are degrees. The trigonometric
helpers accept numpy arrays as well as scalars.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Optional, Union, TYPE_CHECKING
import logging

import numpy as np

from fpvsetup.model.errors import InvalidInputError, require_angle, require_positive
from fpvsetup.model.monitor import MonitorGeometry, ViewerDistance
from fpvsetup.model.units import UnitScale

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

FloatOrArray = Union[float, "npt.NDArray[np.float64]"]


class ViewMode(StrEnum):
    PORTAL_LIKE = "portal-like"
    FOCUSED = "focused"


@dataclass(frozen=True)
class FovResult:
    """Camera field of view for one monitor configuration."""
    mode: ViewMode
    horizontal: float  # degrees
    vertical: float  # degrees
    # Focused only: how much larger than the portal view objects appear
    scale_factor: Optional[float] = None

    @property
    def horizontal_radians(self) -> float:
        return float(np.deg2rad(self.horizontal))

    @property
    def vertical_radians(self) -> float:
        return float(np.deg2rad(self.vertical))


@dataclass(frozen=True)
class CameraSetback:
    """How far to move the camera back so the screen plane sits at the portal."""
    meters: float
    app_units: float


# ------------------------------------------------------------------------------
# Trigonometric primitives
# ------------------------------------------------------------------------------
def half_angle(extent: FloatOrArray, distance: FloatOrArray) -> FloatOrArray:
    """
    Half of the angle (radians) subtended by a segment of length `extent`
    seen head-on from `distance`.

    Splitting the viewer-to-screen triangle at the screen center gives two
    right triangles with opposite cathetus `extent / 2` and adjacent cathetus
    `distance`.
    """
    # A vanishing distance overflows the ratio to inf; atan(inf) is pi/2
    with np.errstate(over="ignore"):
        return np.arctan((np.asarray(extent) / 2.0) / np.asarray(distance))


def _full_angle_degrees(half: FloatOrArray) -> FloatOrArray:
    full = np.rad2deg(2.0 * np.asarray(half))
    if np.ndim(full) == 0:
        return float(full)
    return full


def subtended_angle(extent: FloatOrArray, distance: FloatOrArray) -> FloatOrArray:
    """Full angle (degrees) subtended by `extent` at `distance`."""
    extent = require_positive(extent, "Extent")
    distance = require_positive(distance, "Distance")
    return _full_angle_degrees(half_angle(extent, distance))


def extent_for_fov(fov: FloatOrArray, distance: FloatOrArray) -> FloatOrArray:
    """
    Inverse of `subtended_angle`: the extent that subtends `fov` degrees at
    `distance`, i.e. w = 2 * d * tan(fov / 2).
    """
    fov = require_angle(fov, "Field of view")
    distance = require_positive(distance, "Distance")
    extent = 2.0 * np.asarray(distance) * np.tan(np.deg2rad(fov) / 2.0)
    return float(extent) if np.ndim(extent) == 0 else extent


def distance_for_fov(fov: FloatOrArray, extent: FloatOrArray) -> FloatOrArray:
    """The viewing distance at which `extent` subtends `fov` degrees."""
    fov = require_angle(fov, "Field of view")
    extent = require_positive(extent, "Extent")
    distance = (np.asarray(extent) / 2.0) / np.tan(np.deg2rad(fov) / 2.0)
    return float(distance) if np.ndim(distance) == 0 else distance


def horizontal_to_vertical(fov: FloatOrArray, aspect: float) -> FloatOrArray:
    """Vertical FOV (degrees) matching a horizontal FOV on a screen of `aspect` = width / height."""
    fov = require_angle(fov, "Horizontal field of view")
    aspect = require_positive(aspect, "Aspect ratio")
    return _full_angle_degrees(np.arctan(np.tan(np.deg2rad(fov) / 2.0) / aspect))


def vertical_to_horizontal(fov: FloatOrArray, aspect: float) -> FloatOrArray:
    """Horizontal FOV (degrees) matching a vertical FOV on a screen of `aspect` = width / height."""
    fov = require_angle(fov, "Vertical field of view")
    aspect = require_positive(aspect, "Aspect ratio")
    return _full_angle_degrees(np.arctan(np.tan(np.deg2rad(fov) / 2.0) * aspect))


# ------------------------------------------------------------------------------
# Modes
# ------------------------------------------------------------------------------
def portal_like_fov(geometry: MonitorGeometry, distance: ViewerDistance) -> FovResult:
    """
    The FOV at which the rendered scene lines up with the real visual angle
    of the screen edges: 2 * atan((w / 2) / d), and likewise for the height.
    """
    d = distance.meters
    horizontal = _full_angle_degrees(half_angle(geometry.width, d))
    vertical = _full_angle_degrees(half_angle(geometry.height, d))
    logger.debug(
        f"Portal-like FOV for {geometry.width:.4f} x {geometry.height:.4f} m at {d:.4f} m: "
        f"{horizontal:.3f} x {vertical:.3f} deg"
    )
    return FovResult(mode=ViewMode.PORTAL_LIKE, horizontal=horizontal, vertical=vertical)


def focused_fov(
    geometry: MonitorGeometry,
    distance: ViewerDistance,
    reference_distance: float,
    relative_to_monitor: bool = False
) -> FovResult:
    """
    The FOV which shows objects `reference_distance` away from the camera at
    accurate scale.

    Starting from the portal-like half angle, the screen half extent is
    projected out to the eye-to-object distance, then the angle it subtends
    from the camera at `reference_distance` is taken.

    Args:
        geometry: Monitor dimensions.
        distance: Viewer distance from the screen.
        reference_distance: Camera-to-object distance in the 3D world, meters.
        relative_to_monitor: If True, `reference_distance` is measured from
            the screen plane (the object sits behind the screen), so the eye
            is `reference_distance + distance` away from it. If False it is
            measured from the eye.
    """
    reference_distance = require_positive(reference_distance, "Reference distance")
    d = distance.meters
    distance_from_eye = reference_distance + d if relative_to_monitor else reference_distance

    # tan(half angle) = opposite / adjacent; project the screen half extent
    # out to the object, then measure it from the camera.
    scale_factor = distance_from_eye / reference_distance
    half_h = np.arctan(np.tan(half_angle(geometry.width, d)) * scale_factor)
    half_v = np.arctan(np.tan(half_angle(geometry.height, d)) * scale_factor)

    horizontal = _full_angle_degrees(half_h)
    vertical = _full_angle_degrees(half_v)
    logger.debug(
        f"Focused FOV at {reference_distance:.4f} m "
        f"({'monitor' if relative_to_monitor else 'eye'}-relative): "
        f"{horizontal:.3f} x {vertical:.3f} deg, scale {scale_factor:.4f}"
    )
    return FovResult(
        mode=ViewMode.FOCUSED,
        horizontal=horizontal,
        vertical=vertical,
        scale_factor=scale_factor
    )


def calculate_fov(
    geometry: MonitorGeometry,
    distance: ViewerDistance,
    mode: ViewMode | str,
    reference_distance: Optional[float] = None,
    relative_to_monitor: bool = False
) -> FovResult:
    """Compute the FOV for the given mode."""
    try:
        mode = ViewMode(mode)
    except ValueError as e:
        raise InvalidInputError(f"Unknown view mode '{mode}'.") from e

    match mode:
        case ViewMode.PORTAL_LIKE:
            return portal_like_fov(geometry, distance)
        case ViewMode.FOCUSED:
            if reference_distance is None:
                raise InvalidInputError("Focused mode requires a reference distance.")
            return focused_fov(geometry, distance, reference_distance, relative_to_monitor)


def camera_setback(distance: ViewerDistance, unit_scale: UnitScale = UnitScale()) -> CameraSetback:
    """
    In portal-like mode the virtual camera stands where the eye is, so it
    has to be moved back from the intended screen plane by the viewing
    distance.
    """
    return CameraSetback(
        meters=distance.meters,
        app_units=unit_scale.to_app_units(distance.meters)
    )


def fov_sweep(
    geometry: MonitorGeometry,
    distances: npt.ArrayLike
) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]:
    """
    Portal-like horizontal and vertical FOV (degrees) for many viewing
    distances at once.
    """
    d = np.atleast_1d(require_positive(distances, "Viewing distances"))
    horizontal = np.rad2deg(2.0 * half_angle(geometry.width, d))
    vertical = np.rad2deg(2.0 * half_angle(geometry.height, d))
    return horizontal, vertical
