# objviewer/scene/grid.py
# ---------------------------------------------------------------
# Опорная сетка в плоскости XZ с центром в начале координат.
# Все линии – один и тот же отрезок LINE_VERTICES, отличаются
# только model‑матрицей  T · S · Ry.
# ---------------------------------------------------------------

from math import pi
from typing import List

import numpy as np

from objviewer.math.mat4 import Mat4

LINE_VERTICES = np.array([[-0.5, 0.0, 0.0],
                          [0.5, 0.0, 0.0]], dtype=np.float32)


def line_matrix(x: float, z: float, sx: float, sz: float, y_rotation: float) -> Mat4:
    return Mat4.translate(x, 0.0, z) @ Mat4.scale(sx, 1.0, sz) @ Mat4.rotate_y(y_rotation)


def line_grid(x_squares_half: int, z_squares_half: int) -> List[Mat4]:
    """Матрицы линий: сначала параллельные X, затем параллельные Z."""
    x_lines = 1 + z_squares_half * 2
    z_lines = 1 + x_squares_half * 2
    x_len = float(z_lines - 1)
    z_len = float(x_lines - 1)

    matrices = []
    for i in range(x_lines):
        z = float(i - (x_lines - 1) // 2)
        matrices.append(line_matrix(0.0, z, x_len, 1.0, 0.0))
    for i in range(z_lines):
        x = float(i - (z_lines - 1) // 2)
        matrices.append(line_matrix(x, 0.0, 1.0, z_len, pi / 2.0))
    return matrices
