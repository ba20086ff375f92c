# objviewer/math/vec3.py
"""
3‑мерный вектор (float32): позиции, нормали, масштаб, углы Эйлера.
"""

import numpy as np
from typing import Tuple


class Vec3:
    """Короткий и быстрый вектор‑3 (float32)."""

    __slots__ = ("_v",)

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self._v = np.array([x, y, z], dtype=np.float32)

    @classmethod
    def from_iter(cls, values) -> "Vec3":
        x, y, z = values
        return cls(x, y, z)

    # -----------------------------------------------------------------
    # свойства (c‑сеттерами)
    # -----------------------------------------------------------------
    @property
    def x(self) -> float:
        return float(self._v[0])

    @x.setter
    def x(self, value: float) -> None:
        self._v[0] = float(value)

    @property
    def y(self) -> float:
        return float(self._v[1])

    @y.setter
    def y(self, value: float) -> None:
        self._v[1] = float(value)

    @property
    def z(self) -> float:
        return float(self._v[2])

    @z.setter
    def z(self, value: float) -> None:
        self._v[2] = float(value)

    # -----------------------------------------------------------------
    # арифметика (операторы возвращают новый объект)
    # -----------------------------------------------------------------
    def __add__(self, other: "Vec3") -> "Vec3":
        return Vec3(*(self._v + other._v))

    def __sub__(self, other: "Vec3") -> "Vec3":
        return Vec3(*(self._v - other._v))

    def __neg__(self) -> "Vec3":
        return Vec3(*(-self._v))

    def __mul__(self, scalar: float) -> "Vec3":
        return Vec3(*(self._v * scalar))

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "Vec3":
        return Vec3(*(self._v / scalar))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vec3):
            return NotImplemented
        return bool(np.array_equal(self._v, other._v))

    def __iter__(self):
        return iter(self.to_tuple())

    # -----------------------------------------------------------------
    # вспомогательные методы
    # -----------------------------------------------------------------
    def dot(self, other: "Vec3") -> float:
        """Скалярное произведение."""
        return float(np.dot(self._v, other._v))

    def cross(self, other: "Vec3") -> "Vec3":
        """Векторное произведение (правая тройка)."""
        a, b = self._v, other._v
        return Vec3(a[1] * b[2] - a[2] * b[1],
                    a[2] * b[0] - a[0] * b[2],
                    a[0] * b[1] - a[1] * b[0])

    def length(self) -> float:
        """Евклидова длина."""
        return float(np.sqrt(self.dot(self)))

    def normalized(self) -> "Vec3":
        """Нормализованный вектор (нулевой вектор остаётся нулевым)."""
        n = self.length()
        if n == 0.0:
            return Vec3()
        return Vec3(*(self._v / n))

    def as_np(self) -> np.ndarray:
        """Копия 3‑компонентного ndarray (float32)."""
        return self._v.copy()

    def __repr__(self) -> str:
        return f"Vec3({self.x:.3f}, {self.y:.3f}, {self.z:.3f})"

    def to_tuple(self) -> Tuple[float, float, float]:
        return tuple(self._v.tolist())
