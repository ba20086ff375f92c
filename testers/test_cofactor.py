# -*- coding: utf-8 -*-
import numpy as np
import pytest

from objviewer.math import cofactor


def test_sub_matrix():
    m = np.arange(16, dtype=np.float32).reshape(4, 4)
    sub = cofactor.sub_matrix(m, 1, 2)
    assert sub.tolist() == [[0, 1, 3], [8, 9, 11], [12, 13, 15]]


def test_determinant_2x2_and_3x3():
    assert cofactor.determinant(np.array([[3, 8], [4, 6]])) == -14.0
    m3 = np.array([[6, 1, 1], [4, -2, 5], [2, 8, 7]])
    assert cofactor.determinant(m3) == -306.0


def test_determinant_4x4_matches_numpy():
    m = np.array([[4, 3, 2, 2],
                  [0, 1, -3, 3],
                  [0, -1, 3, 3],
                  [0, 3, 1, 1]], dtype=np.float32)
    assert np.isclose(cofactor.determinant(m), np.linalg.det(m.astype(np.float64)))
    assert cofactor.determinant(m) == -240.0


def test_determinant_identical_rows_integer_entries_is_exactly_zero():
    m = np.array([[1, 2, 3, 4],
                  [5, 6, 7, 8],
                  [1, 2, 3, 4],
                  [9, 1, 2, 7]], dtype=np.float32)
    assert cofactor.determinant(m) == 0.0


def test_determinant_identical_rows_float_entries_is_near_zero():
    rng = np.random.default_rng(0)
    for _ in range(20):
        m = rng.uniform(-10.0, 10.0, size=(4, 4)).astype(np.float32)
        m[2] = m[0]
        assert abs(cofactor.determinant(m)) < 1e-8


def test_cofactor_sign_pattern():
    c = cofactor.cofactor_matrix(np.identity(3))
    assert c.tolist() == np.identity(3).tolist()
    c = cofactor.cofactor_matrix(np.array([[1.0, 2.0], [3.0, 4.0]]))
    assert c.tolist() == [[4, -3], [-2, 1]]


def test_adjugate_is_transposed_cofactors():
    m = np.array([[1.0, 2.0], [3.0, 4.0]])
    assert cofactor.adjugate(m).tolist() == [[4, -2], [-3, 1]]


def test_inverse_3x3():
    m = np.array([[2.0, 0.0, 0.0], [0.0, 4.0, 0.0], [0.0, 0.0, 8.0]])
    assert np.allclose(cofactor.inverse(m), np.diag([0.5, 0.25, 0.125]))


@pytest.mark.parametrize("shape", [(1, 1), (5, 5), (2, 3)])
def test_unsupported_shapes(shape):
    with pytest.raises(ValueError):
        cofactor.determinant(np.ones(shape))
