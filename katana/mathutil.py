"""Commonly used floating point helpers and constants."""

from __future__ import annotations

import math
import random
from typing import TypeVar

T = TypeVar("T", int, float)

PI = math.pi
PI_OVER2 = PI / 2
PI_OVER4 = PI / 4
INVERSE_PI = 1.0 / PI
NORMALIZE_PI_OVER4 = math.sqrt(0.5)
INVERSE_180 = 1.0 / 180

RAND_MAX = 32767

__all__ = [
    "PI",
    "PI_OVER2",
    "PI_OVER4",
    "INVERSE_PI",
    "NORMALIZE_PI_OVER4",
    "INVERSE_180",
    "RAND_MAX",
    "lerp",
    "get_random_int",
    "get_random_float",
    "clamp",
    "is_in_range",
    "to_radians",
    "to_degrees",
]


def lerp(start: float, end: float, value: float) -> float:
    """Linearly interpolate between start and end; value is held to [0, 1]."""
    if value < 0:
        return start
    if value > 1:
        return end
    return start + (end - start) * value


def get_random_int(low: int = 0, high: int = RAND_MAX) -> int:
    """Return a random integer between low and high, both inclusive."""
    if high < low:
        raise ValueError(f"high ({high}) must not be less than low ({low})")
    return random.randint(low, high)


def get_random_float() -> float:
    """Return a random number between zero and one, both inclusive."""
    return random.randint(0, RAND_MAX) / RAND_MAX


def clamp(low: T, high: T, value: T) -> T:
    """Restrict value to the range [low, high]."""
    if value < low:
        return low
    if value > high:
        return high
    return value


def is_in_range(low: T, high: T, value: T) -> bool:
    """Tell whether value lies within [low, high]."""
    return low <= value <= high


def to_radians(degrees: float) -> float:
    """Convert an angle in degrees to radians."""
    return degrees * PI * INVERSE_180


def to_degrees(radians: float) -> float:
    """Convert an angle in radians to degrees."""
    return radians * 180 * INVERSE_PI