"""
Input validation utilities for pymatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No lossy integer casts: integer kinds must hold every value exactly
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from __future__ import annotations

import numbers
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from pymatrix.core.dtypes import NumericKind, kind_of
from pymatrix.core.exceptions import (
    DimensionError,
    DTypeError,
    IndexOutOfBoundsError,
    ShapeMismatchError,
    ValidationError,
)


def check_dimension(value: Any, name: str) -> int:
    """
    Verify a row or column count is a non-negative integer.

    Args:
        value: Candidate count
        name: Parameter name for error messages

    Returns:
        The count as a Python int

    Raises:
        ValidationError: If value is not an integer or is negative
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValidationError(
            f"{name}: expected a non-negative integer, got {type(value).__name__}"
        )
    value = int(value)
    if value < 0:
        raise ValidationError(f"{name}: must be non-negative, got {value}")
    return value


def check_array(
    values: ArrayLike,
    name: str,
    dtype: DTypeLike | None = None,
) -> NDArray[Any]:
    """
    Validate and convert input to a numpy array of a supported kind.

    Without ``dtype`` the kind is whatever numpy infers. With ``dtype`` the
    values are cast; for integer kinds every value must survive unchanged.

    Args:
        values: Input to validate
        name: Parameter name for error messages
        dtype: Requested element kind, or None to infer

    Returns:
        numpy.ndarray (a fresh copy) with a supported numeric dtype

    Raises:
        ValidationError: If input cannot be converted or a value is not
            representable in the requested kind
        DTypeError: If the resulting kind is not supported
    """
    if not isinstance(values, np.ndarray) and not hasattr(values, '__len__'):
        values = list(values)

    try:
        result = np.array(values)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types, "
            f"ragged rows or integers too large for int64"
        )

    if not np.issubdtype(result.dtype, np.number):
        raise DTypeError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data",
            actual=result.dtype.name,
        )

    if dtype is None:
        kind_of(result.dtype)
        return result

    kind = kind_of(dtype)
    if result.dtype == kind.dtype:
        return result

    with np.errstate(invalid='ignore', over='ignore'):
        cast = result.astype(kind.dtype)
    # Float kinds round to nearest; integer kinds must hold every value exactly
    if kind.is_integer and not np.array_equal(cast, result):
        raise ValidationError(
            f"{name}: values of kind {result.dtype} are not exactly "
            f"representable as {kind.name}"
        )
    return cast


def check_1d(array: NDArray[Any], name: str) -> None:
    """
    Verify array is 1-dimensional.

    Raises:
        DimensionError: If array is not 1D
    """
    if array.ndim != 1:
        raise DimensionError(
            f"{name}: expected 1D array, got {array.ndim}D with shape {array.shape}"
        )


def check_2d(array: NDArray[Any], name: str) -> None:
    """
    Verify array is 2-dimensional.

    Raises:
        DimensionError: If array is not 2D
    """
    if array.ndim != 2:
        raise DimensionError(
            f"{name}: expected 2D array, got {array.ndim}D with shape {array.shape}"
        )


def check_length(array: NDArray[Any], row: int, col: int, name: str) -> None:
    """
    Verify a flat array holds exactly row * col elements.

    Raises:
        DimensionError: If the element count does not match the shape
    """
    expected = row * col
    if array.shape[0] != expected:
        raise DimensionError(
            f"{name}: shape ({row}, {col}) needs {expected} values, "
            f"got {array.shape[0]}"
        )


def check_rectangular(rows: Any, name: str) -> None:
    """
    Verify a nested sequence has rows of one common length.

    Raises:
        ValidationError: If rows is not a sequence of sequences
        DimensionError: If the rows are ragged
    """
    if isinstance(rows, np.ndarray):
        return
    try:
        lengths = [len(r) for r in rows]
    except TypeError as e:
        raise ValidationError(f"{name}: expected a sequence of rows: {e}") from e
    if len(set(lengths)) > 1:
        raise DimensionError(f"{name}: rows have inconsistent lengths {lengths}")


def check_index(key: Any, shape: tuple[int, int]) -> tuple[int, int]:
    """
    Validate a (row, col) element key against a shape.

    Both coordinates are checked independently so that a column overflow
    can never wrap into the next row.

    Returns:
        (row, col) as Python ints

    Raises:
        TypeError: If key is not a pair of integers
        IndexOutOfBoundsError: If either coordinate is outside the shape
    """
    if not isinstance(key, tuple) or len(key) != 2:
        raise TypeError(f"matrix index must be a (row, col) pair, got {key!r}")
    for part in key:
        if isinstance(part, bool) or not isinstance(part, numbers.Integral):
            raise TypeError(
                f"matrix indices must be integers, got {type(part).__name__}"
            )
    i, j = int(key[0]), int(key[1])
    n_rows, n_cols = shape
    if not (0 <= i < n_rows and 0 <= j < n_cols):
        raise IndexOutOfBoundsError(
            f"index ({i}, {j}) out of bounds for matrix of shape {shape}",
            index=(i, j),
            shape=shape,
        )
    return i, j


def is_scalar(value: Any) -> bool:
    """Whether value is a real number usable as a matrix scalar."""
    return isinstance(value, (numbers.Real, np.integer, np.floating)) and not isinstance(
        value, (bool, np.bool_)
    )


def check_scalar(value: Any, kind: NumericKind, name: str) -> Any:
    """
    Convert a scalar to the given kind, exactly for integer kinds.

    Returns:
        numpy scalar of ``kind``

    Raises:
        ValidationError: If value is not a real number, or is not exactly
            representable in an integer kind
    """
    if not is_scalar(value):
        raise ValidationError(
            f"{name}: expected a real number, got {type(value).__name__}"
        )
    try:
        with np.errstate(invalid='ignore', over='ignore'):
            converted = kind.dtype.type(value)
    except (OverflowError, TypeError, ValueError) as e:
        raise ValidationError(f"{name}: {value!r} does not fit in {kind.name}") from e

    if kind.is_integer and converted != value:
        raise ValidationError(
            f"{name}: {value!r} is not exactly representable as {kind.name}"
        )
    return converted


def check_same_kind(lhs: np.dtype, rhs: np.dtype, operation: str) -> None:
    """
    Verify two operands share an element kind.

    Raises:
        DTypeError: If the kinds differ
    """
    if lhs != rhs:
        raise DTypeError(
            f"{operation}: operands must share an element kind, "
            f"got {lhs.name} and {rhs.name}",
            expected=lhs.name,
            actual=rhs.name,
        )


def check_same_shape(
    lhs: tuple[int, int],
    rhs: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two operands have identical shapes.

    Raises:
        ShapeMismatchError: If the shapes differ
    """
    if lhs != rhs:
        raise ShapeMismatchError(
            f"{operation}: shape mismatch, expected {lhs}, got {rhs}",
            operation=operation,
            expected=lhs,
            actual=rhs,
        )


def check_inner_dimension(
    lhs: tuple[int, int],
    rhs: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify the right operand has as many rows as the left has columns.

    Raises:
        ShapeMismatchError: If lhs columns != rhs rows
    """
    if lhs[1] != rhs[0]:
        expected = (lhs[1], rhs[1])
        raise ShapeMismatchError(
            f"{operation}: left operand {lhs} needs a right operand with "
            f"{lhs[1]} rows, got shape {rhs}",
            operation=operation,
            expected=expected,
            actual=rhs,
        )
