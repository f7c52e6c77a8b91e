"""
pymatrix: a dense numeric matrix value type for Python.

Construction, shape queries, element access, transpose and identity checks,
a canonical text format with its parser, and elementwise / matrix / scalar
arithmetic, all on top of a flat row-major numpy array.

Submodules:
    core: exceptions, validation, element kinds, tolerances
    matrix: the Matrix type and its operators
"""

__version__ = "0.1.0"

from pymatrix.core.exceptions import (
    MatrixError,
    ValidationError,
    DimensionError,
    DTypeError,
    ShapeMismatchError,
    IndexOutOfBoundsError,
    ParseErrorKind,
    ParseMatrixError,
)
from pymatrix.matrix import (
    Matrix,
    format_matrix,
    parse_matrix,
    add,
    subtract,
    negate,
    multiply,
    divide,
    compatible_shape_for_elementwise,
    compatible_shape_for_multiply,
)

__all__ = [
    "__version__",
    "Matrix",
    "format_matrix",
    "parse_matrix",
    "add",
    "subtract",
    "negate",
    "multiply",
    "divide",
    "compatible_shape_for_elementwise",
    "compatible_shape_for_multiply",
    "MatrixError",
    "ValidationError",
    "DimensionError",
    "DTypeError",
    "ShapeMismatchError",
    "IndexOutOfBoundsError",
    "ParseErrorKind",
    "ParseMatrixError",
]
