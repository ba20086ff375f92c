# objviewer/math/scalar.py
"""
Скалярные помощники: перевод углов и ограничение значения.
"""

from math import pi

RADIANS_TO_DEGREES = 180.0 / pi
DEGREES_TO_RADIANS = pi / 180.0


def to_degrees(radians: float) -> float:
    return radians * RADIANS_TO_DEGREES


def to_radians(degrees: float) -> float:
    return degrees * DEGREES_TO_RADIANS


def clamp(lo: float, hi: float, value: float) -> float:
    """Ограничить `value` отрезком [lo, hi]."""
    if value < lo:
        return lo
    if value > hi:
        return hi
    return value
