"""
Arithmetic kernels for Matrix.

One canonical function per operator. Operands are taken by reference and
never mutated; every result is a freshly allocated Matrix. The Matrix
operator methods are thin wrappers around these functions.
"""

from __future__ import annotations

import warnings
from typing import Any, Union

import numpy as np

from pymatrix.core.dtypes import DIVISION_DTYPE
from pymatrix.core.exceptions import DTypeError, ValidationError
from pymatrix.core.validation import (
    check_inner_dimension,
    check_same_kind,
    check_same_shape,
    check_scalar,
    is_scalar,
)
from pymatrix.matrix.matrix import Matrix


Operand = Union[Matrix, int, float, np.number]


def compatible_shape_for_elementwise(lhs: Matrix, rhs: Matrix) -> bool:
    """Whether add, subtract and divide accept this pair of matrices."""
    return lhs.shape == rhs.shape


def compatible_shape_for_multiply(lhs: Matrix, rhs: Matrix) -> bool:
    """Whether the matrix product lhs * rhs is defined."""
    return lhs.n_cols == rhs.n_rows


def add(lhs: Matrix, rhs: Operand) -> Matrix:
    """
    Elementwise sum of two matrices, or of a matrix and a broadcast scalar.

    Raises:
        ShapeMismatchError: If two matrices differ in shape
        DTypeError: If two matrices differ in element kind
        ValidationError: If a scalar is not representable in the kind
    """
    if isinstance(rhs, Matrix):
        check_same_shape(lhs.shape, rhs.shape, 'add')
        check_same_kind(lhs.dtype, rhs.dtype, 'add')
        return lhs._like(lhs._data + rhs._data)
    scalar = check_scalar(rhs, lhs.kind, 'add')
    return lhs._like(lhs._data + scalar)


def subtract(lhs: Matrix, rhs: Operand) -> Matrix:
    """
    Elementwise difference of two matrices, or a matrix minus a scalar.

    Raises:
        ShapeMismatchError: If two matrices differ in shape
        DTypeError: If two matrices differ in element kind
        ValidationError: If a scalar is not representable in the kind
    """
    if isinstance(rhs, Matrix):
        check_same_shape(lhs.shape, rhs.shape, 'subtract')
        check_same_kind(lhs.dtype, rhs.dtype, 'subtract')
        return lhs._like(lhs._data - rhs._data)
    scalar = check_scalar(rhs, lhs.kind, 'subtract')
    return lhs._like(lhs._data - scalar)


def negate(operand: Matrix) -> Matrix:
    """
    Elementwise negation.

    Raises:
        DTypeError: If the matrix holds an unsigned kind
    """
    if not operand.kind.is_signed:
        raise DTypeError(
            f"negate: unsigned kind {operand.kind.name} has no negation",
            actual=operand.kind.name,
        )
    return operand._like(np.negative(operand._data))


def _matmul(lhs: Matrix, rhs: Matrix) -> Matrix:
    n_rows, inner = lhs.shape
    n_cols = rhs.n_cols
    a = lhs._data.reshape(n_rows, inner)
    b = rhs._data.reshape(inner, n_cols)

    if inner == 0:
        out = np.full((n_rows, n_cols), lhs.kind.zero, dtype=lhs.dtype)
        return Matrix._from_storage(out.ravel(), n_rows, n_cols)

    # Seed with k = 0, then accumulate k = 1..inner-1 in order; every output
    # element sees the same sequence of roundings as the scalar triple loop.
    out = np.multiply.outer(a[:, 0], b[0, :])
    for k in range(1, inner):
        out += np.multiply.outer(a[:, k], b[k, :])
    return Matrix._from_storage(out.ravel(), n_rows, n_cols)


def multiply(lhs: Matrix, rhs: Operand) -> Matrix:
    """
    Matrix product of two matrices, or elementwise scaling by a scalar.

    The product requires ``lhs.n_cols == rhs.n_rows`` and has shape
    ``(lhs.n_rows, rhs.n_cols)``. Cost is O(n_rows * n_cols * inner).

    Raises:
        ShapeMismatchError: If the inner dimensions differ
        DTypeError: If two matrices differ in element kind
        ValidationError: If a scalar is not representable in the kind
    """
    if isinstance(rhs, Matrix):
        check_inner_dimension(lhs.shape, rhs.shape, 'multiply')
        check_same_kind(lhs.dtype, rhs.dtype, 'multiply')
        return _matmul(lhs, rhs)
    scalar = check_scalar(rhs, lhs.kind, 'multiply')
    return lhs._like(lhs._data * scalar)


def divide(lhs: Matrix, rhs: Operand, stacklevel: int = 2) -> Matrix:
    """
    Elementwise quotient, always computed and returned as float64.

    Both operands are converted to float64 before dividing, whatever their
    kind, so integer inputs keep their fractional results (51 / 2 -> 25.5).
    Division by zero follows IEEE-754 and emits a RuntimeWarning.
    ``stacklevel`` is forwarded to warnings.warn so the warning names the
    caller's line.

    Raises:
        ShapeMismatchError: If two matrices differ in shape
        ValidationError: If rhs is neither a Matrix nor a real number, or is
            too large for float64
    """
    numerator = lhs._data.astype(DIVISION_DTYPE)
    if isinstance(rhs, Matrix):
        check_same_shape(lhs.shape, rhs.shape, 'divide')
        denominator = rhs._data.astype(DIVISION_DTYPE)
    elif is_scalar(rhs):
        try:
            denominator = DIVISION_DTYPE.type(rhs)
        except (OverflowError, TypeError, ValueError) as e:
            raise ValidationError(
                f"divide: {rhs!r} does not fit in {DIVISION_DTYPE.name}"
            ) from e
    else:
        raise ValidationError(
            f"divide: expected a Matrix or a real number, got {type(rhs).__name__}"
        )

    with np.errstate(divide='ignore', invalid='ignore'):
        data = numerator / denominator

    n_zero = int(np.count_nonzero(np.broadcast_to(denominator, data.shape) == 0))
    if n_zero:
        n_bad = int(np.count_nonzero(~np.isfinite(data)))
        warnings.warn(
            f"divide: {n_zero} division(s) by zero, {n_bad} non-finite result(s)",
            RuntimeWarning,
            stacklevel=stacklevel,
        )

    return Matrix._from_storage(data, lhs.n_rows, lhs.n_cols)
