"""
Setup State (Data Model)
========================
This module defines the container for everything a front end collects from
the user and the results derived from it.

Why is this file needed?
------------------------
1. State Management: It holds the monitor geometry, the viewing distance,
   the application unit scale and the focused-mode settings in one place.
2. Decoupling: Front ends write inputs into this object and read both
   modes' outputs from it, without knowing the trigonometry.

Classes:
    SetupState: The main container class.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Optional

from fpvsetup.model.fov import CameraSetback, FovResult, camera_setback, focused_fov, portal_like_fov
from fpvsetup.model.monitor import MonitorGeometry, ViewerDistance
from fpvsetup.model.units import UnitScale

logger = logging.getLogger(__name__)


def _default_geometry() -> MonitorGeometry:
    # 24" 16:9, a typical desktop monitor
    return MonitorGeometry.from_diagonal(24 * 0.0254, 16 / 9)


def _default_distance() -> ViewerDistance:
    return ViewerDistance(0.6)


@dataclass
class SetupState:
    """
    Inputs of one calculation session.

    `relative_to_monitor` defaults to True here: users think of the
    reference distance as how far behind the screen an object is.
    """
    geometry: MonitorGeometry = field(default_factory=_default_geometry)
    distance: ViewerDistance = field(default_factory=_default_distance)
    unit_scale: UnitScale = field(default_factory=UnitScale)

    reference_distance: Optional[float] = None  # meters
    relative_to_monitor: bool = True

    def portal_like(self) -> FovResult:
        return portal_like_fov(self.geometry, self.distance)

    def setback(self) -> CameraSetback:
        return camera_setback(self.distance, self.unit_scale)

    def focused(self) -> Optional[FovResult]:
        """Focused-mode FOV, or None while no reference distance is set."""
        if self.reference_distance is None:
            return None
        return focused_fov(
            self.geometry,
            self.distance,
            self.reference_distance,
            relative_to_monitor=self.relative_to_monitor
        )

    def reset(self) -> None:
        """Restore every input to its default."""
        self.geometry = _default_geometry()
        self.distance = _default_distance()
        self.unit_scale = UnitScale()
        self.reference_distance = None
        self.relative_to_monitor = True
        logger.info("Setup state has been reset.")
