"""
Matrix: dense numeric matrix value type.

Storage is a single flat numpy array in row-major order; element (i, j)
lives at offset ``i * col + j``. The array's dtype is the element kind.
Shape is fixed at construction; the only mutation is single-element
assignment. Arithmetic always returns a new Matrix.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from pymatrix.core.dtypes import DEFAULT_PARSE_DTYPE, NumericKind, kind_of
from pymatrix.core.tolerances import EXACT, ToleranceTier, select_tolerance
from pymatrix.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_dimension,
    check_index,
    check_length,
    check_rectangular,
    check_same_shape,
    check_scalar,
    is_scalar,
)
from pymatrix.matrix._text import format_elements, parse_elements


class Matrix:
    """
    Dense row-major matrix of a single numeric kind.

    Construction:
        Matrix(2, 3, [-2, -1, 0, 1, 2, 3])
        Matrix.from_rows([[1, 2], [3, 4]], dtype='int32')
        Matrix.parse('[1,2;3,4]')
        Matrix.zeros(2, 2) / Matrix.identity(3)

    Operators:
        a + b, a - b, -a       elementwise (scalars broadcast)
        a * b, a @ b           matrix product (a * 2 scales)
        a / b                  elementwise, float64 result
    """

    # Let numpy scalars on the left defer to the reflected operators
    __array_ufunc__ = None
    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        row: int,
        col: int,
        values: ArrayLike,
        dtype: DTypeLike | None = None,
    ) -> None:
        """
        Build a ``row`` x ``col`` matrix from ``values`` in row-major order.

        Parameters
        ----------
        row, col : int
            Non-negative dimensions.
        values : array-like
            Flat sequence of exactly ``row * col`` numbers. Copied.
        dtype : dtype-like, optional
            Element kind. Inferred from ``values`` when omitted; when given,
            every value must be exactly representable in it.

        Raises
        ------
        ValidationError
            Bad dimensions or values not representable in ``dtype``.
        DimensionError
            ``len(values) != row * col`` or ``values`` is not flat.
        DTypeError
            Unsupported element kind.
        """
        row = check_dimension(row, 'row')
        col = check_dimension(col, 'col')
        data = check_array(values, 'values', dtype)
        check_1d(data, 'values')
        check_length(data, row, col, 'values')
        self._data = data
        self._row = row
        self._col = col
        self._kind = kind_of(data.dtype)

    @classmethod
    def _from_storage(cls, data: NDArray[Any], row: int, col: int) -> Matrix:
        """Wrap an already validated flat array without copying."""
        obj = cls.__new__(cls)
        obj._data = data
        obj._row = row
        obj._col = col
        obj._kind = kind_of(data.dtype)
        return obj

    def _like(self, data: NDArray[Any]) -> Matrix:
        """New matrix with this shape around fresh storage."""
        return Matrix._from_storage(data, self._row, self._col)

    # --- Factories ---

    @classmethod
    def from_rows(cls, rows: Any, dtype: DTypeLike | None = None) -> Matrix:
        """
        Build a matrix from a nested sequence (or 2D array) of rows.

        An empty sequence gives a 0 x 0 matrix.
        """
        if not isinstance(rows, np.ndarray) and not hasattr(rows, '__len__'):
            rows = list(rows)
        check_rectangular(rows, 'rows')
        data = check_array(rows, 'rows', dtype)
        if data.ndim == 1 and data.shape[0] == 0:
            return cls._from_storage(data, 0, 0)
        check_2d(data, 'rows')
        n_rows, n_cols = data.shape
        return cls._from_storage(data.ravel(), n_rows, n_cols)

    @classmethod
    def zeros(cls, row: int, col: int, dtype: DTypeLike = 'float64') -> Matrix:
        """Matrix of the kind's additive identity."""
        row = check_dimension(row, 'row')
        col = check_dimension(col, 'col')
        kind = kind_of(dtype)
        return cls._from_storage(np.full(row * col, kind.zero, dtype=kind.dtype), row, col)

    @classmethod
    def identity(cls, n: int, dtype: DTypeLike = 'float64') -> Matrix:
        """n x n matrix with the kind's one on the diagonal and zero elsewhere."""
        m = cls.zeros(n, n, dtype)
        m._data[:: n + 1] = m._kind.one
        return m

    @classmethod
    def parse(cls, text: str, dtype: DTypeLike = DEFAULT_PARSE_DTYPE) -> Matrix:
        """
        Parse the canonical text form, e.g. ``'[1,2,3;4,5,6]'``.

        Raises
        ------
        ParseMatrixError
            With ``kind`` set to the first violation found.
        """
        kind = kind_of(dtype)
        data, n_rows, n_cols = parse_elements(text, kind)
        return cls._from_storage(data, n_rows, n_cols)

    # --- Shape ---

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, columns)."""
        return (self._row, self._col)

    @property
    def n_rows(self) -> int:
        return self._row

    @property
    def n_cols(self) -> int:
        return self._col

    @property
    def dtype(self) -> np.dtype:
        """Element kind as a numpy dtype."""
        return self._data.dtype

    @property
    def kind(self) -> NumericKind:
        return self._kind

    def is_square(self) -> bool:
        return self._row == self._col

    # --- Element access ---

    def __getitem__(self, key: tuple[int, int]) -> Any:
        i, j = check_index(key, self.shape)
        return self._data[i * self._col + j].item()

    def __setitem__(self, key: tuple[int, int], value: Any) -> None:
        i, j = check_index(key, self.shape)
        self._data[i * self._col + j] = check_scalar(value, self._kind, 'value')

    # --- Structure ---

    def transpose(self) -> Matrix:
        """New (col, row) matrix with element (i, j) taken from (j, i)."""
        grid = self._data.reshape(self._row, self._col)
        return Matrix._from_storage(grid.T.flatten(), self._col, self._row)

    @property
    def T(self) -> Matrix:
        return self.transpose()

    def is_identity(self) -> bool:
        """
        Whether this is a square matrix with one on the diagonal and zero
        everywhere else, using the constants of the element kind.
        """
        if not self.is_square():
            return False
        n = self._row
        expected = np.full(n * n, self._kind.zero, dtype=self.dtype)
        expected[:: n + 1] = self._kind.one
        return bool(np.array_equal(self._data, expected))

    # --- Conversion ---

    def copy(self) -> Matrix:
        return self._like(self._data.copy())

    def to_numpy(self) -> NDArray[Any]:
        """2D copy of the contents."""
        return self._data.reshape(self._row, self._col).copy()

    def tolist(self) -> list[list[Any]]:
        """Contents as nested Python lists, one per row."""
        return self._data.reshape(self._row, self._col).tolist()

    # --- Comparison ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    def allclose(self, other: Matrix, tolerance: ToleranceTier | None = None) -> bool:
        """
        Approximate elementwise equality.

        The tolerance tier defaults to the loosest one needed by the two
        element kinds (exact for integers).

        Raises
        ------
        ShapeMismatchError
            If the shapes differ.
        """
        check_same_shape(self.shape, other.shape, 'allclose')
        tier = tolerance or select_tolerance(self.dtype, other.dtype)
        if tier == EXACT:
            return bool(np.array_equal(self._data, other._data))
        return bool(np.allclose(self._data, other._data, rtol=tier.rtol, atol=tier.atol))

    # --- Arithmetic ---

    def __add__(self, other: Any) -> Matrix:
        if not _is_operand(other):
            return NotImplemented
        from pymatrix.matrix._arithmetic import add
        return add(self, other)

    def __radd__(self, other: Any) -> Matrix:
        if not is_scalar(other):
            return NotImplemented
        from pymatrix.matrix._arithmetic import add
        return add(self, other)

    def __sub__(self, other: Any) -> Matrix:
        if not _is_operand(other):
            return NotImplemented
        from pymatrix.matrix._arithmetic import subtract
        return subtract(self, other)

    def __neg__(self) -> Matrix:
        from pymatrix.matrix._arithmetic import negate
        return negate(self)

    def __mul__(self, other: Any) -> Matrix:
        if not _is_operand(other):
            return NotImplemented
        from pymatrix.matrix._arithmetic import multiply
        return multiply(self, other)

    def __rmul__(self, other: Any) -> Matrix:
        if not is_scalar(other):
            return NotImplemented
        from pymatrix.matrix._arithmetic import multiply
        return multiply(self, other)

    def __matmul__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        from pymatrix.matrix._arithmetic import multiply
        return multiply(self, other)

    def __truediv__(self, other: Any) -> Matrix:
        if not _is_operand(other):
            return NotImplemented
        from pymatrix.matrix._arithmetic import divide
        return divide(self, other, stacklevel=3)

    # --- Text ---

    def __str__(self) -> str:
        return format_elements(self._data, self._col, self._kind)

    def __repr__(self) -> str:
        return f"Matrix(shape=({self._row}, {self._col}), dtype={self.dtype.name}, data={self})"


def _is_operand(value: Any) -> bool:
    return isinstance(value, Matrix) or is_scalar(value)


def format_matrix(matrix: Matrix) -> str:
    """Canonical text form of ``matrix``; same as ``str(matrix)``."""
    return str(matrix)


def parse_matrix(text: str, dtype: DTypeLike = DEFAULT_PARSE_DTYPE) -> Matrix:
    """Parse the canonical text form into a Matrix of ``dtype``."""
    return Matrix.parse(text, dtype)
