"""
Configuration & Defaults
========================
This module serves as the central registry for default units and global
constants used across the calculator and its front end.

Why is this file needed?
------------------------
1. Abstraction: It prevents default units and tolerances from being
   hardcoded in every front-end routine.
2. Consistency: The library, the CLI and the tests all read the same
   defaults, so the results they show agree.

Exports:
    DEFAULT_MONITOR_UNIT (str): Unit for monitor width and height input.
    DEFAULT_DIAGONAL_UNIT (str): Unit for the monitor diagonal input.
    DEFAULT_DISTANCE_UNIT (str): Unit for viewing and reference distance.
    DEFAULT_SETBACK_UNIT (str): Unit used to report the camera setback.
    ASPECT_ROUNDING (float): Tolerance for snapping to a common aspect ratio.
"""

# Unit names are the values of fpvsetup.model.units.LengthUnit
DEFAULT_MONITOR_UNIT: str = "centimeters"
DEFAULT_DIAGONAL_UNIT: str = "inches"
DEFAULT_DISTANCE_UNIT: str = "centimeters"
DEFAULT_SETBACK_UNIT: str = "meters"

# One application unit is one meter unless the user says otherwise
DEFAULT_APP_UNITS_PER_METER: float = 1.0

ASPECT_ROUNDING: float = 0.1

# Output formatting
DISPLAY_PRECISION: int = 3
DEGREE_SIGN: str = "°"
NAN_DISPLAY: str = "<error>"
INFINITY_DISPLAY: str = "∞"
