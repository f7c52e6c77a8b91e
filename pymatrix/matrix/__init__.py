"""
Matrix module.

Dense numeric matrix value type with a canonical text form and a full
arithmetic operator set.

Public API:
    Matrix                  - the value type
    format_matrix(m)        - canonical text form
    parse_matrix(text)      - inverse of format_matrix
    add / subtract / negate / multiply / divide
                            - canonical operator implementations
    compatible_shape_for_elementwise(a, b)
    compatible_shape_for_multiply(a, b)
"""

from pymatrix.matrix.matrix import Matrix, format_matrix, parse_matrix
from pymatrix.matrix._arithmetic import (
    add,
    subtract,
    negate,
    multiply,
    divide,
    compatible_shape_for_elementwise,
    compatible_shape_for_multiply,
)

__all__ = [
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
]
