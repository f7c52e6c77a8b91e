"""
Tests for element access by (row, col).
"""

import pytest

from pymatrix import IndexOutOfBoundsError, Matrix, ValidationError


class TestGetItem:

    def test_read(self, x):
        assert x[2, 1] == 8
        assert x[0, 0] == 1

    def test_returns_python_number(self, x):
        assert type(x[1, 1]) is int

    def test_float_element(self):
        m = Matrix(1, 2, [0.5, 1.5])
        assert m[0, 1] == 1.5

    def test_row_out_of_bounds(self, x):
        with pytest.raises(IndexOutOfBoundsError) as exc_info:
            x[3, 0]
        assert exc_info.value.index == (3, 0)
        assert exc_info.value.shape == (3, 3)

    def test_column_out_of_bounds_does_not_wrap(self, rect):
        """Offset 0 * 3 + 3 exists in storage but is row 1."""
        with pytest.raises(IndexOutOfBoundsError):
            rect[0, 3]

    def test_negative_index(self, x):
        with pytest.raises(IndexError):
            x[-1, 0]

    def test_single_index_rejected(self, x):
        with pytest.raises(TypeError):
            x[0]


class TestSetItem:

    def test_write(self, x):
        x[1, 2] = 0
        assert str(x) == "[1,2,3;4,5,0;7,8,9]"

    def test_write_keeps_kind(self):
        m = Matrix(1, 1, [1], dtype="int8")
        m[0, 0] = 5
        assert m.dtype.name == "int8"
        assert m[0, 0] == 5

    def test_write_out_of_bounds(self, x):
        with pytest.raises(IndexOutOfBoundsError):
            x[0, 3] = 1

    def test_write_lossy_value(self, x):
        with pytest.raises(ValidationError):
            x[0, 0] = 1.5

    def test_write_overflow(self):
        m = Matrix(1, 1, [1], dtype="uint8")
        with pytest.raises(ValidationError):
            m[0, 0] = 256
