"""
Tests for Matrix arithmetic: plus, minus, times (scalar and matrix).
"""

import numpy as np
import pytest

from densematrix import DimensionError, Matrix, ValidationError


# ═══════════════════════════════════════════════════════════════════════
# Addition and subtraction
# ═══════════════════════════════════════════════════════════════════════


class TestPlusMinus:

    def test_plus(self, a_2x2, b_2x2):
        assert a_2x2.plus(b_2x2).tolist() == [[6.0, 8.0], [10.0, 12.0]]

    def test_minus(self, a_2x2, b_2x2):
        assert b_2x2.minus(a_2x2).tolist() == [[4.0, 4.0], [4.0, 4.0]]

    def test_operators(self, a_2x2, b_2x2):
        assert a_2x2 + b_2x2 == a_2x2.plus(b_2x2)
        assert a_2x2 - b_2x2 == a_2x2.minus(b_2x2)

    def test_returns_new_instance(self, a_2x2, b_2x2):
        total = a_2x2 + b_2x2
        assert total is not a_2x2
        assert a_2x2.tolist() == [[1.0, 2.0], [3.0, 4.0]]

    def test_add_then_subtract_is_identity(self, random_pair):
        a, b = random_pair
        assert (a + b) - b == a

    def test_shape_mismatch_plus(self, a_2x2, a_2x3):
        with pytest.raises(ValidationError):
            a_2x2.plus(a_2x3)

    def test_shape_mismatch_minus(self, a_2x2, a_2x3):
        with pytest.raises(DimensionError, match="minus") as exc_info:
            a_2x3 - a_2x2
        assert exc_info.value.expected == (2, 3)
        assert exc_info.value.actual == (2, 2)

    def test_transposed_shape_mismatch(self, a_2x3):
        with pytest.raises(DimensionError):
            a_2x3 + a_2x3.T

    def test_plus_rejects_non_matrix(self, a_2x2):
        with pytest.raises(ValidationError, match="expected a Matrix operand"):
            a_2x2.plus([[1.0, 1.0], [1.0, 1.0]])

    def test_operator_with_scalar_unsupported(self, a_2x2):
        with pytest.raises(TypeError):
            a_2x2 + 1.0

    def test_operator_with_ndarray_unsupported(self, a_2x2):
        with pytest.raises(TypeError):
            np.ones((2, 2)) + a_2x2


# ═══════════════════════════════════════════════════════════════════════
# Scalar multiplication
# ═══════════════════════════════════════════════════════════════════════


class TestScalarTimes:

    def test_times_scalar(self, a_2x2):
        assert a_2x2.times(2.0).tolist() == [[2.0, 4.0], [6.0, 8.0]]

    def test_times_int(self, a_2x2):
        assert a_2x2.times(3) == Matrix([[3, 6], [9, 12]])

    def test_times_zero(self, a_2x3):
        assert a_2x3.times(0.0) == Matrix.zeros(2, 3)

    def test_operators_both_sides(self, a_2x2):
        assert a_2x2 * 2.5 == 2.5 * a_2x2 == a_2x2.times(2.5)

    def test_numpy_scalar_on_left(self, a_2x2):
        assert np.float64(2.0) * a_2x2 == a_2x2.times(2.0)

    def test_negation(self, a_2x2):
        assert (-a_2x2).tolist() == [[-1.0, -2.0], [-3.0, -4.0]]

    def test_shape_preserved(self, a_2x3):
        assert a_2x3.times(-1.5).shape == (2, 3)

    def test_rejects_non_scalar(self, a_2x2):
        with pytest.raises(ValidationError, match="real scalar"):
            a_2x2.times("2")

    def test_inf_times_zero_is_nan(self):
        with pytest.warns(RuntimeWarning):
            m = Matrix([[np.inf, 1.0]])
        product = m.times(0.0)
        assert np.isnan(product.at(0, 0))
        assert product.at(0, 1) == 0.0


# ═══════════════════════════════════════════════════════════════════════
# Matrix multiplication
# ═══════════════════════════════════════════════════════════════════════


class TestMatrixTimes:

    def test_square_product(self, a_2x2, b_2x2):
        assert a_2x2.times(b_2x2).tolist() == [[19.0, 22.0], [43.0, 50.0]]

    def test_matmul_operator(self, a_2x2, b_2x2):
        assert a_2x2 @ b_2x2 == a_2x2.times(b_2x2)

    def test_rectangular_product_shape(self, a_2x3):
        product = a_2x3 @ a_2x3.T
        assert product.shape == (2, 2)
        assert product.tolist() == [[14.0, 32.0], [32.0, 77.0]]

    def test_outer_product(self):
        column = Matrix([[1.0], [2.0], [3.0]])
        row = Matrix([[4.0, 5.0]])
        assert (column @ row).tolist() == [
            [4.0, 5.0],
            [8.0, 10.0],
            [12.0, 15.0],
        ]

    def test_inner_product(self):
        row = Matrix([[1.0, 2.0, 3.0]])
        assert (row @ row.T).tolist() == [[14.0]]

    def test_identity_right(self, a_2x3):
        assert a_2x3 @ Matrix.identity(3) == a_2x3

    def test_identity_left(self, a_2x3):
        assert Matrix.identity(2) @ a_2x3 == a_2x3

    def test_identity_random(self, rng):
        a = Matrix(rng.standard_normal((4, 6)))
        assert a @ Matrix.identity(6) == a
        assert Matrix.identity(4) @ a == a

    def test_matches_numpy(self, rng):
        x = rng.standard_normal((3, 5))
        y = rng.standard_normal((5, 2))
        np.testing.assert_allclose(
            (Matrix(x) @ Matrix(y)).to_array(), x @ y, rtol=1e-12
        )

    def test_bit_identical_to_triple_loop(self, rng):
        """Each cell accumulates products over k in order, starting at 0.0."""
        for _ in range(10):
            x = rng.standard_normal((6, 40))
            y = rng.standard_normal((40, 5))
            expected = np.zeros((6, 5))
            for i in range(6):
                for j in range(5):
                    total = 0.0
                    for k in range(40):
                        total += float(x[i, k]) * float(y[k, j])
                    expected[i, j] = total
            np.testing.assert_array_equal((Matrix(x) @ Matrix(y)).to_array(), expected)

    def test_product_hash_matches_loop_result(self, rng):
        x = rng.standard_normal((3, 30))
        y = rng.standard_normal((30, 3))
        expected = [[0.0] * 3 for _ in range(3)]
        for i in range(3):
            for j in range(3):
                for k in range(30):
                    expected[i][j] += float(x[i, k]) * float(y[k, j])
        product = Matrix(x) @ Matrix(y)
        assert product == Matrix(expected)
        assert hash(product) == hash(Matrix(expected))

    def test_inner_dimension_mismatch(self, a_2x3):
        with pytest.raises(ValidationError):
            a_2x3.times(a_2x3)

    def test_inner_dimension_mismatch_details(self, a_2x2, a_2x3):
        with pytest.raises(DimensionError) as exc_info:
            a_2x3 @ a_2x2
        assert exc_info.value.operation == "times"
        assert exc_info.value.expected == 3
        assert exc_info.value.actual == 2

    def test_star_between_matrices_unsupported(self, a_2x2, b_2x2):
        with pytest.raises(TypeError):
            a_2x2 * b_2x2

    def test_matmul_with_ndarray_unsupported(self, a_2x2):
        with pytest.raises(TypeError):
            a_2x2 @ np.eye(2)
