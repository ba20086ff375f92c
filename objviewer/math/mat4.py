# objviewer/math/mat4.py
# ---------------------------------------------------------------
# Матрица 4×4 (float32), индексация m[строка, столбец].
# Соглашение – вектор‑столбец: (A @ B) @ v == A @ (B @ v),
# т.е. преобразования применяются справа налево.
# ---------------------------------------------------------------
import numpy as np
from math import tan, sin, cos

from objviewer.math import cofactor
from objviewer.math.vec3 import Vec3
from objviewer.math.vec4 import Vec4


def _as_np3(v) -> np.ndarray:
    if isinstance(v, Vec3):
        return v.as_np()
    return np.asarray(v, dtype=np.float32).reshape(3)


def _normalize(v: np.ndarray) -> np.ndarray:
    return v / np.sqrt(np.dot(v, v))


class Mat4:
    __slots__ = ("m",)

    def __init__(self, array: np.ndarray = None):
        if array is None:
            self.m = np.identity(4, dtype=np.float32)
        else:
            self.m = np.array(array, dtype=np.float32).reshape((4, 4))

    # -----------------------------------------------------------------
    # конструкторы
    # -----------------------------------------------------------------
    @staticmethod
    def identity():
        return Mat4(np.identity(4, dtype=np.float32))

    @staticmethod
    def translate(x: float, y: float, z: float):
        m = np.identity(4, dtype=np.float32)
        m[0, 3] = x
        m[1, 3] = y
        m[2, 3] = z
        return Mat4(m)

    @staticmethod
    def scale(sx: float, sy: float, sz: float):
        m = np.identity(4, dtype=np.float32)
        m[0, 0] = sx
        m[1, 1] = sy
        m[2, 2] = sz
        return Mat4(m)

    @staticmethod
    def rotate_x(angle: float):
        """Поворот вокруг X, угол в радианах."""
        c, s = cos(angle), sin(angle)
        m = np.identity(4, dtype=np.float32)
        m[1, 1] = c
        m[1, 2] = -s
        m[2, 1] = s
        m[2, 2] = c
        return Mat4(m)

    @staticmethod
    def rotate_y(angle: float):
        c, s = cos(angle), sin(angle)
        m = np.identity(4, dtype=np.float32)
        m[0, 0] = c
        m[0, 2] = s
        m[2, 0] = -s
        m[2, 2] = c
        return Mat4(m)

    @staticmethod
    def rotate_z(angle: float):
        c, s = cos(angle), sin(angle)
        m = np.identity(4, dtype=np.float32)
        m[0, 0] = c
        m[0, 1] = -s
        m[1, 0] = s
        m[1, 1] = c
        return Mat4(m)

    @staticmethod
    def orthographic(left: float, right: float, bottom: float, top: float,
                     z_near: float, z_far: float):
        """Правосторонняя ортографическая проекция, глубина в [0, 1]."""
        m = np.identity(4, dtype=np.float32)
        m[0, 0] = 2.0 / (right - left)
        m[1, 1] = 2.0 / (top - bottom)
        m[2, 2] = 1.0 / (z_near - z_far)
        m[0, 3] = (left + right) / (left - right)
        m[1, 3] = (top + bottom) / (bottom - top)
        m[2, 3] = z_near / (z_near - z_far)
        return Mat4(m)

    @staticmethod
    def perspective(fov_y: float, width: float, height: float,
                    z_near: float, z_far: float):
        """
        Правосторонняя перспектива, глубина в [0, 1].
        fov_y – вертикальный угол обзора в радианах,
        соотношение сторон берётся из width / height.
        """
        aspect = width / height
        y_scale = 1.0 / tan(fov_y / 2.0)
        x_scale = y_scale / aspect

        m = np.zeros((4, 4), dtype=np.float32)
        m[0, 0] = x_scale
        m[1, 1] = y_scale
        m[2, 2] = z_far / (z_near - z_far)
        m[2, 3] = z_near * z_far / (z_near - z_far)
        m[3, 2] = -1.0
        return Mat4(m)

    @staticmethod
    def look_at(eye, target, up) -> "Mat4":
        """View‑матрица: ортонормированный базис камеры (Грам–Шмидт)."""
        eye = _as_np3(eye)
        target = _as_np3(target)
        up = _as_np3(up)

        z_axis = _normalize(eye - target)
        x_axis = _normalize(np.cross(up, z_axis))
        y_axis = np.cross(z_axis, x_axis)

        m = np.identity(4, dtype=np.float32)
        m[0, :3] = x_axis
        m[1, :3] = y_axis
        m[2, :3] = z_axis

        m[0, 3] = -np.dot(x_axis, eye)
        m[1, 3] = -np.dot(y_axis, eye)
        m[2, 3] = -np.dot(z_axis, eye)

        return Mat4(m)

    # -----------------------------------------------------------------
    # композиция
    # -----------------------------------------------------------------
    def __matmul__(self, other):
        if isinstance(other, Mat4):
            return Mat4(np.dot(self.m, other.m))
        if isinstance(other, Vec4):
            return Vec4(*np.dot(self.m, other.as_np()))
        if isinstance(other, np.ndarray):
            return np.dot(self.m, other.astype(np.float32))
        return NotImplemented

    def __mul__(self, other):
        """Mat4 * Mat4 – то же, что @; Mat4 * число – поэлементно."""
        if isinstance(other, Mat4):
            return self @ other
        if isinstance(other, (int, float, np.floating)):
            return Mat4(self.m * other)
        return NotImplemented

    def __eq__(self, other) -> bool:
        if not isinstance(other, Mat4):
            return NotImplemented
        return bool(np.array_equal(self.m, other.m))

    __hash__ = None

    def allclose(self, other: "Mat4", atol: float = 1e-5) -> bool:
        return bool(np.allclose(self.m, other.m, atol=atol))

    def transform_point(self, p: Vec3) -> Vec3:
        """Применить к точке (w = 1), без перспективного деления."""
        return (self @ Vec4.point(p)).xyz()

    def transform_direction(self, d: Vec3) -> Vec3:
        return (self @ Vec4.direction(d)).xyz()

    # -----------------------------------------------------------------
    # обращение
    # -----------------------------------------------------------------
    def transpose(self) -> "Mat4":
        return Mat4(self.m.T)

    def determinant(self) -> float:
        return cofactor.determinant(self.m)

    def adjugate(self) -> "Mat4":
        return Mat4(cofactor.adjugate(self.m))

    def inverse(self) -> "Mat4":
        """Общая обратная матрица; для вырожденной – inf/nan без ошибки."""
        return Mat4(cofactor.inverse(self.m))

    def normal_matrix(self) -> "Mat4":
        """transpose(inverse(M)) – для нормалей при неравномерном масштабе."""
        return self.inverse().transpose()

    def __repr__(self):
        return f"Mat4({self.m})"

    def to_np(self) -> np.ndarray:
        return self.m.copy()

    def to_column_major(self) -> np.ndarray:
        """Транспонируем для загрузки в константный буфер (столбцы‑массив)."""
        return self.m.T.copy()
