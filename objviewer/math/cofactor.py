# objviewer/math/cofactor.py
# ---------------------------------------------------------------
# Определитель, миноры и присоединённая матрица «по учебнику»:
# разложение Лапласа по первой строке для 2×2, 3×3 и 4×4.
# Подматрицы 3×3 / 2×2 – промежуточные ndarray, нигде не хранятся.
# ---------------------------------------------------------------

import numpy as np

_SUPPORTED_SIZES = (2, 3, 4)


def _check_square(m: np.ndarray) -> int:
    if m.ndim != 2 or m.shape[0] != m.shape[1]:
        raise ValueError(f"square matrix expected, got shape {m.shape}")
    n = m.shape[0]
    if n not in _SUPPORTED_SIZES:
        raise ValueError(f"unsupported matrix size {n}x{n}")
    return n


def sub_matrix(m: np.ndarray, row: int, col: int) -> np.ndarray:
    """Матрица без строки `row` и столбца `col`."""
    return np.delete(np.delete(m, row, axis=0), col, axis=1)


def determinant(m: np.ndarray) -> float:
    """
    Определитель через разложение по первой строке.

    Точный ноль (например, при двух одинаковых строках) гарантирован
    только для точной арифметики: целочисленных элементов. Для
    произвольных float остаётся погрешность округления порядка eps.
    """
    m = np.asarray(m)
    n = _check_square(m)
    if n == 2:
        return float(m[0, 0]) * float(m[1, 1]) - float(m[0, 1]) * float(m[1, 0])

    det = 0.0
    sign = 1.0
    for col in range(n):
        det += sign * float(m[0, col]) * determinant(sub_matrix(m, 0, col))
        sign = -sign
    return det


def minor(m: np.ndarray, row: int, col: int) -> float:
    return determinant(sub_matrix(np.asarray(m), row, col))


def cofactor_matrix(m: np.ndarray) -> np.ndarray:
    """Матрица алгебраических дополнений (знаки шахматкой, [0,0] = +)."""
    m = np.asarray(m)
    n = _check_square(m)
    if n == 2:
        # миноры 1×1 – просто противоположные элементы
        return np.array([[m[1, 1], -m[1, 0]],
                         [-m[0, 1], m[0, 0]]], dtype=np.float64)

    res = np.empty((n, n), dtype=np.float64)
    for row in range(n):
        for col in range(n):
            sign = 1.0 if (row + col) % 2 == 0 else -1.0
            res[row, col] = sign * minor(m, row, col)
    return res


def adjugate(m: np.ndarray) -> np.ndarray:
    """Присоединённая матрица = транспонированная матрица дополнений."""
    return cofactor_matrix(m).T


def inverse(m: np.ndarray) -> np.ndarray:
    """
    adj(M) * (1 / det(M)).

    Вырожденная матрица не вызывает исключения: результат состоит из
    inf/nan. Проверяйте determinant() заранее, если это важно.
    """
    det = np.float64(determinant(m))
    with np.errstate(divide="ignore", invalid="ignore"):
        inv_det = np.float64(1.0) / det
        return adjugate(m) * inv_det
