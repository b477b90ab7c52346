import math

from fpvsetup.config import DEGREE_SIGN, DISPLAY_PRECISION, INFINITY_DISPLAY, NAN_DISPLAY


def format_number(value: float, precision: int = DISPLAY_PRECISION) -> str:
    """
    Format a float for display: fixed precision with trailing zeros
    (and a dangling decimal point) stripped.

    >>> format_number(45.2397)
    '45.24'
    >>> format_number(2.0)
    '2'
    """
    if math.isnan(value):
        return NAN_DISPLAY
    if math.isinf(value):
        sign = "-" if value < 0 else ""
        return f"{sign}{INFINITY_DISPLAY}"

    formatted = f"{value:.{precision}f}"
    if "." in formatted:
        formatted = formatted.rstrip("0").rstrip(".")
    # "-0" after rounding a tiny negative value
    if formatted == "-0":
        formatted = "0"
    return formatted


def format_angle(degrees: float, precision: int = DISPLAY_PRECISION) -> str:
    """Format an angle in degrees with the degree sign."""
    return f"{format_number(degrees, precision)}{DEGREE_SIGN}"
