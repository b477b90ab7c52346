"""
Input Validation
================
The single error kind raised by the calculator and the checks that raise it.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Union

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt


class InvalidInputError(ValueError):
    """
    Raised when a length, distance, ratio or angle supplied to the
    calculator is non-positive or non-finite.

    No partial results are ever returned alongside this error; callers are
    expected to ask the user for new values.
    """


def require_positive(
    value: Union[float, npt.ArrayLike],
    name: str
) -> Union[float, npt.NDArray[np.float64]]:
    """
    Check that a value (or every element of an array) is finite and > 0.

    Returns:
        The value as a float, or as a float64 array when an array was given.

    Raises:
        InvalidInputError: If any element is zero, negative, NaN or infinite,
            or if the value is not numeric at all.
    """
    try:
        arr = np.asarray(value, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"{name} must be a number, got {value!r}.") from e

    if arr.size == 0:
        raise InvalidInputError(f"{name} must not be empty.")
    if not np.all(np.isfinite(arr)):
        raise InvalidInputError(f"{name} must be finite, got {value!r}.")
    if not np.all(arr > 0.0):
        raise InvalidInputError(f"{name} must be positive, got {value!r}.")

    if arr.ndim == 0:
        return float(arr)
    return arr


def require_angle(value: Union[float, npt.ArrayLike], name: str) -> Union[float, npt.NDArray[np.float64]]:
    """Check that an angle in degrees lies strictly between 0 and 180."""
    degrees = require_positive(value, name)
    if not np.all(np.asarray(degrees) < 180.0):
        raise InvalidInputError(f"{name} must be less than 180 degrees, got {value!r}.")
    return degrees
