"""
Library and command-line tool for calculating optimal first-person 3D view
parameters from monitor size and distance.

The "portal-like" mode performs the trigonometry needed for the screen to
appear as a portal into the rendered 3D world. The "focused" mode gives a
camera FOV which shows objects at a given distance with accurate scale.
"""
from fpvsetup.model.aspect import COMMON_ASPECT_RATIOS, find_common_aspect_ratio, parse_aspect_ratio
from fpvsetup.model.errors import InvalidInputError
from fpvsetup.model.fov import (
    CameraSetback,
    FovResult,
    ViewMode,
    calculate_fov,
    camera_setback,
    distance_for_fov,
    extent_for_fov,
    focused_fov,
    fov_sweep,
    horizontal_to_vertical,
    portal_like_fov,
    subtended_angle,
    vertical_to_horizontal,
)
from fpvsetup.model.monitor import MonitorGeometry, ViewerDistance
from fpvsetup.model.state import SetupState
from fpvsetup.model.units import LengthUnit, UnitScale
