"""
Tests for elementwise, scalar and matrix arithmetic.
"""

import warnings

import numpy as np
import pytest

from pymatrix import (
    DTypeError,
    Matrix,
    ShapeMismatchError,
    ValidationError,
    add,
    compatible_shape_for_elementwise,
    compatible_shape_for_multiply,
    divide,
    multiply,
    negate,
    subtract,
)


# ═══════════════════════════════════════════════════════════════════════
# Add / subtract
# ═══════════════════════════════════════════════════════════════════════


class TestAddSubtract:

    def test_add(self, x, y):
        assert str(x + y) == "[1,3,5;7,9,11;13,15,17]"

    def test_subtract(self, x, y):
        assert str(x - y) == "[1,1,1;1,1,1;1,1,1]"

    def test_add_scalar(self, x):
        assert str(x + 1) == "[2,3,4;5,6,7;8,9,10]"

    def test_reflected_add_scalar(self, x):
        assert 1 + x == x + 1

    def test_numpy_scalar_on_left(self, x):
        assert np.int64(1) + x == x + 1

    def test_subtract_scalar(self, x):
        assert str(x - 1) == "[0,1,2;3,4,5;6,7,8]"

    def test_scalar_minus_matrix_unsupported(self, x):
        with pytest.raises(TypeError):
            1 - x

    def test_add_then_subtract_is_identity(self, rng):
        a = Matrix(3, 4, rng.integers(-100, 100, size=12))
        b = Matrix(3, 4, rng.integers(-100, 100, size=12))
        assert (a + b) - b == a

    def test_operands_untouched(self, x, y):
        x + y
        x - y
        assert str(x) == "[1,2,3;4,5,6;7,8,9]"
        assert str(y) == "[0,1,2;3,4,5;6,7,8]"

    def test_result_keeps_kind(self):
        a = Matrix(1, 2, [1, 2], dtype="int16")
        assert (a + a).dtype == np.int16
        assert (a + 1).dtype == np.int16

    def test_shape_mismatch(self, x, rect):
        with pytest.raises(ShapeMismatchError) as exc_info:
            x + rect
        assert exc_info.value.operation == "add"
        assert exc_info.value.expected == (3, 3)
        assert exc_info.value.actual == (2, 3)

    def test_subtract_shape_mismatch(self, x, rect):
        with pytest.raises(ShapeMismatchError, match="subtract"):
            subtract(rect, x)

    def test_kind_mismatch(self):
        a = Matrix(1, 1, [1], dtype="int32")
        b = Matrix(1, 1, [1.0])
        with pytest.raises(DTypeError):
            a + b

    def test_lossy_scalar(self, x):
        with pytest.raises(ValidationError):
            x + 0.5

    def test_float_matrix_accepts_float_scalar(self):
        m = Matrix(1, 2, [1.0, 2.0], dtype="float32")
        assert (m + 0.5).dtype == np.float32

    def test_unsupported_operand(self, x):
        with pytest.raises(TypeError):
            x + "1"
        with pytest.raises(TypeError):
            x + [1, 2, 3]

    def test_function_form(self, x, y):
        assert add(x, y) == x + y


# ═══════════════════════════════════════════════════════════════════════
# Negate
# ═══════════════════════════════════════════════════════════════════════


class TestNegate:

    def test_negate(self, rect):
        assert str(-rect) == "[2,1,0;-1,-2,-3]"

    def test_negate_floats(self):
        assert str(-Matrix(1, 2, [0.5, -1.5])) == "[-0.5,1.5]"

    def test_double_negation(self, rect):
        assert -(-rect) == rect

    def test_unsigned_rejected(self):
        m = Matrix(1, 1, [1], dtype="uint8")
        with pytest.raises(DTypeError, match="unsigned"):
            negate(m)


# ═══════════════════════════════════════════════════════════════════════
# Multiply
# ═══════════════════════════════════════════════════════════════════════


class TestMultiply:

    def test_scalar(self, x):
        assert str(x * 2) == "[2,4,6;8,10,12;14,16,18]"

    def test_reflected_scalar(self, x):
        assert 2 * x == x * 2

    def test_matrix_product(self, x, y):
        assert str(x * y) == "[24,30,36;51,66,81;78,102,126]"

    def test_matmul_operator(self, x, y):
        assert x @ y == x * y

    def test_matmul_rejects_scalar(self, x):
        with pytest.raises(TypeError):
            x @ 2

    def test_rectangular_shapes(self, rect):
        product = rect * rect.T
        assert product.shape == (2, 2)
        assert str(product) == "[5,-4;-4,14]"

    def test_matches_numpy_integers(self, rng):
        a = rng.integers(-10, 10, size=(4, 3))
        b = rng.integers(-10, 10, size=(3, 5))
        out = Matrix.from_rows(a) * Matrix.from_rows(b)
        np.testing.assert_array_equal(out.to_numpy(), a @ b)

    def test_accumulation_order(self):
        """Products are summed strictly left to right over the inner index."""
        a = Matrix(1, 3, [1e16, 1.0, -1e16])
        b = Matrix(3, 1, [1.0, 1.0, 1.0])
        # ((1e16 + 1) - 1e16) == 0 in float64, unlike a pairwise or reordered sum
        assert (a * b)[0, 0] == ((1e16 + 1.0) + -1e16)

    def test_inner_dimension_mismatch(self, x, rect):
        with pytest.raises(ShapeMismatchError) as exc_info:
            x * rect
        assert exc_info.value.operation == "multiply"
        assert exc_info.value.expected == (3, 3)
        assert exc_info.value.actual == (2, 3)

    def test_zero_inner_dimension(self):
        a = Matrix(2, 0, [], dtype="int32")
        b = Matrix(0, 3, [], dtype="int32")
        out = a * b
        assert out.shape == (2, 3)
        assert out == Matrix.zeros(2, 3, dtype="int32")

    def test_identity_is_neutral(self, x):
        eye = Matrix.identity(3, dtype=x.dtype)
        assert x * eye == x
        assert eye * x == x

    def test_kind_mismatch(self, x):
        with pytest.raises(DTypeError):
            x * Matrix.identity(3, dtype="float64")

    def test_compatibility_queries(self, x, rect):
        assert compatible_shape_for_multiply(rect, x)
        assert not compatible_shape_for_multiply(x, rect)
        assert compatible_shape_for_elementwise(x, x.copy())
        assert not compatible_shape_for_elementwise(x, rect)

    def test_function_form(self, x, y):
        assert multiply(x, y) == x * y
        assert multiply(x, 3) == x * 3


# ═══════════════════════════════════════════════════════════════════════
# Divide
# ═══════════════════════════════════════════════════════════════════════


class TestDivide:

    def test_integer_division_promotes(self, x, y):
        z = x * y
        q = z / 2
        assert q.dtype == np.float64
        assert str(q) == "[12,15,18;25.5,33,40.5;39,51,63]"

    def test_matrix_by_matrix(self):
        a = Matrix(1, 3, [12, 51, 7])
        b = Matrix(1, 3, [2, 2, 7])
        q = a / b
        assert q.dtype == np.float64
        assert q.tolist() == [[6.0, 25.5, 1.0]]

    def test_float32_promotes_to_float64(self):
        m = Matrix(1, 1, [1.0], dtype="float32")
        assert (m / 4).dtype == np.float64

    def test_mixed_kinds_allowed(self):
        a = Matrix(1, 2, [3, 4], dtype="int8")
        b = Matrix(1, 2, [2.0, 8.0])
        assert (a / b).tolist() == [[1.5, 0.5]]

    def test_fractional_scalar(self, x):
        assert (x / 0.5) == x * 2

    def test_shape_mismatch(self, x, rect):
        with pytest.raises(ShapeMismatchError, match="divide"):
            x / rect

    def test_division_by_zero_warns(self):
        a = Matrix(1, 3, [1, -1, 0])
        with pytest.warns(RuntimeWarning, match="3 division"):
            q = a / 0
        assert str(q) == "[inf,-inf,NaN]"

    def test_warning_points_at_caller(self):
        a = Matrix(1, 2, [1, 2])
        with pytest.warns(RuntimeWarning) as record:
            a / 0
        assert record[0].filename == __file__

    def test_function_form_warning_points_at_caller(self):
        a = Matrix(1, 2, [1, 2])
        with pytest.warns(RuntimeWarning) as record:
            divide(a, 0)
        assert record[0].filename == __file__

    def test_huge_integer_scalar(self):
        with pytest.raises(ValidationError, match="does not fit in float64"):
            Matrix(1, 1, [1]) / 10**400

    def test_exact_division_is_silent(self, x):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            divide(x, 3)

    def test_invalid_rhs(self, x):
        with pytest.raises(ValidationError):
            divide(x, "2")

    def test_scalar_over_matrix_unsupported(self, x):
        with pytest.raises(TypeError):
            2 / x
