"""
Tests for addition, subtraction, multiplication, equality and trace.

numpy is the reference for random operands.
"""

from decimal import Decimal
from fractions import Fraction

import numpy as np
import pytest

from pymatrix import DimensionMismatchError, Matrix, NotSquareError


class TestAddSubtract:

    def test_add(self, a_2x3):
        other = Matrix(2, 3, [10, 20, 30, 40, 50, 60])
        assert (a_2x3 + other).tolist() == [[11, 22, 33], [44, 55, 66]]

    def test_subtract(self, a_2x3):
        other = Matrix(2, 3, [1, 1, 1, 1, 1, 1])
        assert (a_2x3 - other).tolist() == [[0, 1, 2], [3, 4, 5]]

    def test_zero_is_additive_identity(self, a_2x3):
        zero = Matrix(2, 3, element_type=int)
        assert a_2x3 + zero == a_2x3

    def test_self_difference_is_zero(self, a_2x3):
        assert a_2x3 - a_2x3 == Matrix(2, 3, element_type=int)

    def test_operands_unchanged(self, a_2x3):
        other = a_2x3.copy()
        a_2x3 + other
        a_2x3 - other
        assert a_2x3 == Matrix(2, 3, [1, 2, 3, 4, 5, 6])
        assert other == Matrix(2, 3, [1, 2, 3, 4, 5, 6])

    def test_add_against_numpy(self, rng):
        A = rng.standard_normal((4, 5))
        B = rng.standard_normal((4, 5))
        result = Matrix.from_array(A) + Matrix.from_array(B)
        np.testing.assert_allclose(result.to_numpy(), A + B, rtol=1e-15)

    @pytest.mark.parametrize("op", ["add", "subtract"])
    def test_shape_mismatch(self, a_2x3, b_3x2, op):
        with pytest.raises(DimensionMismatchError) as exc_info:
            getattr(a_2x3, op)(b_3x2)
        assert exc_info.value.operation == op

    def test_empty_matrices(self):
        assert Matrix(0, 0) + Matrix(0, 0) == Matrix(0, 0)
        assert Matrix(0, 0) - Matrix(0, 0) == Matrix(0, 0)

    def test_non_matrix_operand(self, a_2x3):
        with pytest.raises(TypeError):
            a_2x3 + 1

    @pytest.mark.parametrize("op", ["add", "subtract", "multiply"])
    def test_named_method_rejects_non_matrix(self, a_2x3, op):
        with pytest.raises(TypeError, match=f"{op}: expected a Matrix operand, got list"):
            getattr(a_2x3, op)([1, 2, 3])


class TestMultiply:

    def test_reference_product(self, a_2x3, b_3x2):
        product = a_2x3 * b_3x2
        assert product.shape == (2, 2)
        assert product.tolist() == [[58, 64], [139, 154]]

    def test_matmul_operator(self, a_2x3, b_3x2):
        assert a_2x3 @ b_3x2 == a_2x3 * b_3x2

    def test_against_numpy(self, random_pair):
        a, b, A, B = random_pair
        np.testing.assert_array_equal((a * b).to_numpy(), A @ B)

    def test_inner_dimension_mismatch(self, a_2x3):
        with pytest.raises(DimensionMismatchError) as exc_info:
            a_2x3 * a_2x3
        assert exc_info.value.operation == 'multiply'

    def test_chain_requires_both_inner_dimensions(self, a_2x3, b_3x2):
        c = Matrix(2, 4, list(range(8)))
        assert ((a_2x3 * b_3x2) * c).shape == (2, 4)
        with pytest.raises(DimensionMismatchError):
            (a_2x3 * b_3x2) * b_3x2

    def test_associative_for_integers(self, rng):
        A, B, C = (Matrix.from_array(rng.integers(-5, 5, size=s))
                   for s in [(3, 4), (4, 2), (2, 5)])
        assert (A * B) * C == A * (B * C)

    def test_outer_product_shape(self):
        col = Matrix(3, 1, [1, 2, 3])
        row = Matrix(1, 3, [4, 5, 6])
        assert (col * row).shape == (3, 3)
        assert (row * col).tolist() == [[32]]

    def test_empty_product(self):
        assert Matrix(0, 0) * Matrix(0, 0) == Matrix(0, 0)

    def test_fraction_elements(self):
        half = Fraction(1, 2)
        m = Matrix(2, 2, [half, half, half, half])
        assert (m * m).tolist() == [[Fraction(1, 2)] * 2] * 2
        assert (m * m).element_type is Fraction

    def test_decimal_elements(self):
        m = Matrix(1, 2, [Decimal("0.1"), Decimal("0.2")])
        n = Matrix(2, 1, [Decimal("10"), Decimal("10")])
        assert (m * n)[0, 0] == Decimal("3.0")


class TestEquality:

    def test_reflexive(self, a_2x3):
        assert a_2x3 == a_2x3

    def test_symmetric(self, a_2x3):
        other = a_2x3.copy()
        assert a_2x3 == other
        assert other == a_2x3

    def test_one_cell_differs(self, a_2x3):
        other = a_2x3.copy()
        other[1, 1] = 0
        assert a_2x3 != other
        assert other != a_2x3

    def test_same_cells_different_shape(self):
        """A 2x3 and a 3x2 with identical storage are not equal."""
        assert Matrix(2, 3, range(6)) != Matrix(3, 2, range(6))

    def test_nan_cell_never_equal(self):
        a = Matrix(1, 2, [float("nan"), 1.0])
        assert a != a.copy()
        assert not a == a

    def test_numpy_nan_against_numpy(self):
        A = np.array([[np.nan, 1.0]])
        assert (Matrix.from_array(A) == Matrix.from_array(A)) == bool(np.all(A == A))

    def test_not_equal_to_other_types(self, a_2x3):
        assert a_2x3 != [1, 2, 3, 4, 5, 6]

    def test_unhashable(self, a_2x3):
        with pytest.raises(TypeError):
            hash(a_2x3)


class TestTrace:

    def test_2x2(self):
        assert Matrix(2, 2, [1, 2, 3, 4]).trace() == 5

    def test_non_square(self, a_2x3):
        with pytest.raises(NotSquareError) as exc_info:
            a_2x3.trace()
        assert (exc_info.value.rows, exc_info.value.cols) == (2, 3)

    def test_against_numpy(self, rng):
        A = rng.standard_normal((6, 6))
        assert Matrix.from_array(A).trace() == pytest.approx(np.trace(A), rel=1e-14)

    def test_empty_matrix_trace_is_zero(self):
        assert Matrix(0, 0).trace() == 0

    def test_complex_trace(self):
        m = Matrix(2, 2, [1 + 1j, 5, 6, 2 - 3j])
        assert m.trace() == 3 - 2j
