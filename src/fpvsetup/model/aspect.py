"""Catalogue of commonly used monitor aspect ratios."""
from __future__ import annotations

from typing import List, Optional, Tuple

from fpvsetup.model.errors import InvalidInputError, require_positive


def _ratio(numerator: float, denominator: float) -> Tuple[float, Tuple[float, float]]:
    return numerator / denominator, (float(numerator), float(denominator))


# (ratio, (numerator, denominator)), in lookup priority order
COMMON_ASPECT_RATIOS: List[Tuple[float, Tuple[float, float]]] = [
    # Common
    _ratio(16, 9),
    # Not very common
    _ratio(16, 10),
    _ratio(4, 3),
    # Considerably less common
    _ratio(5, 4),
    _ratio(3, 2),
    # Ultrawide
    _ratio(17, 9),
    _ratio(21, 9),
    _ratio(32, 9),
    # Rare
    _ratio(1, 1),
    _ratio(4, 1),
]


def find_common_aspect_ratio(ratio: float, rounding: float) -> Optional[Tuple[float, float]]:
    """
    Find a common aspect ratio close to the given single-number ratio.

    A catalogue entry matches when it differs from `ratio` by less than
    `rounding`. The first match in catalogue order wins.

    Returns:
        (numerator, denominator), or None when nothing is close enough.
    """
    for common, pair in COMMON_ASPECT_RATIOS:
        if abs(ratio - common) < rounding:
            return pair
    return None


def parse_aspect_ratio(text: str) -> float:
    """
    Parse an aspect ratio written as "16:9", "16/9" or a plain number.
    """
    text = text.strip()
    for sep in (":", "/"):
        if sep in text:
            numerator, _, denominator = text.partition(sep)
            try:
                n, d = float(numerator), float(denominator)
            except ValueError as e:
                raise InvalidInputError(f"Malformed aspect ratio '{text}'.") from e
            n = require_positive(n, "Aspect ratio numerator")
            d = require_positive(d, "Aspect ratio denominator")
            return n / d

    try:
        value = float(text)
    except ValueError as e:
        raise InvalidInputError(f"Malformed aspect ratio '{text}'.") from e
    return require_positive(value, "Aspect ratio")
