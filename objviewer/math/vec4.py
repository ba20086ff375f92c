# objviewer/math/vec4.py
"""
4‑мерный вектор (float32). Однородные координаты точек и RGBA‑цвета.
"""

import numpy as np
from typing import Tuple

from objviewer.math.vec3 import Vec3


class Vec4:
    """Короткий и быстрый вектор‑4 (float32)."""

    __slots__ = ("_v",)

    def __init__(self, x: float = 0.0, y: float = 0.0,
                 z: float = 0.0, w: float = 0.0):
        self._v = np.array([x, y, z, w], dtype=np.float32)

    @staticmethod
    def point(v: Vec3) -> "Vec4":
        """Точка в однородных координатах (w = 1)."""
        return Vec4(v.x, v.y, v.z, 1.0)

    @staticmethod
    def direction(v: Vec3) -> "Vec4":
        """Направление (w = 0) – на него не действует перенос."""
        return Vec4(v.x, v.y, v.z, 0.0)

    # -----------------------------------------------------------------
    # свойства
    # -----------------------------------------------------------------
    @property
    def x(self) -> float:
        return float(self._v[0])

    @property
    def y(self) -> float:
        return float(self._v[1])

    @property
    def z(self) -> float:
        return float(self._v[2])

    @property
    def w(self) -> float:
        return float(self._v[3])

    # -----------------------------------------------------------------
    # арифметика
    # -----------------------------------------------------------------
    def __add__(self, other: "Vec4") -> "Vec4":
        return Vec4(*(self._v + other._v))

    def __sub__(self, other: "Vec4") -> "Vec4":
        return Vec4(*(self._v - other._v))

    def __mul__(self, scalar: float) -> "Vec4":
        return Vec4(*(self._v * scalar))

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "Vec4":
        return Vec4(*(self._v / scalar))

    def dot(self, other: "Vec4") -> float:
        """Скалярное произведение."""
        return float(np.dot(self._v, other._v))

    def xyz(self) -> Vec3:
        return Vec3(self.x, self.y, self.z)

    def as_np(self) -> np.ndarray:
        """Копия 4‑компонентного ndarray (float32)."""
        return self._v.copy()

    def __repr__(self) -> str:
        return f"Vec4({self.x:.3f}, {self.y:.3f}, {self.z:.3f}, {self.w:.3f})"

    def to_tuple(self) -> Tuple[float, float, float, float]:
        return tuple(self._v.tolist())
