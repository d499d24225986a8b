"""
Small stateless helpers used across the robotarm_sim package.

Provides unit conversions, the fixed-precision rounding used by the torque
contract, clamping, and finite-number coercion for user input.
"""

from __future__ import annotations

import math
from typing import Any, Optional

import numpy as np

from robotarm_sim.utils.constants import CM_PER_M, DISPLAY_DIGITS


def deg_to_rad(degrees: Any) -> Any:
    """Convert degrees to radians.

    Args:
        degrees: Scalar or NumPy array of angles in degrees.

    Returns:
        The same shape, in radians.
    """
    return degrees * np.pi / 180


def cm_to_m(cm: Any) -> Any:
    """Convert centimetres to metres.

    Args:
        cm: Scalar or NumPy array of lengths in centimetres.

    Returns:
        The same shape, in metres.
    """
    return cm / CM_PER_M


def round_fixed(value: float, digits: int = DISPLAY_DIGITS) -> float:
    """Round *value* to a fixed number of decimal digits.

    Negative zero is normalised to ``0.0``.

    Args:
        value: Scalar to round.
        digits: Number of decimal digits to keep.

    Returns:
        The rounded float.
    """
    return round(float(value), digits) + 0.0


def format_fixed(value: float, digits: int = DISPLAY_DIGITS) -> str:
    """Render *value* with exactly *digits* decimals (``'17.68'``)."""
    return f"{round_fixed(value, digits):.{digits}f}"


def clamp(value: float, lo: float, hi: float) -> float:
    """Return *value* clamped to the closed interval [*lo*, *hi*].

    Args:
        value: The scalar to clamp.
        lo: Lower bound (inclusive).
        hi: Upper bound (inclusive).

    Returns:
        The clamped scalar.
    """
    return max(lo, min(hi, value))


def coerce_finite(value: Any) -> Optional[float]:
    """Parse *value* as a finite float.

    Accepts numbers and numeric strings (surrounding whitespace allowed).
    Booleans are not treated as numbers.

    Args:
        value: Raw user input.

    Returns:
        The parsed float, or *None* when the input is non-numeric, NaN, or
        infinite.
    """
    if isinstance(value, bool) or value is None:
        return None
    try:
        parsed = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(parsed):
        return None
    return parsed
