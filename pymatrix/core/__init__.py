"""
Core infrastructure for pymatrix.

This module provides the shared abstractions used by the matrix domain.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    dtypes: Supported element kinds and their constants
    tolerances: Tolerance tiers for approximate comparison
"""

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
from pymatrix.core.dtypes import NumericKind, kind_of
from pymatrix.core.tolerances import ToleranceTier, select_tolerance

__all__ = [
    # Exceptions
    "MatrixError",
    "ValidationError",
    "DimensionError",
    "DTypeError",
    "ShapeMismatchError",
    "IndexOutOfBoundsError",
    "ParseErrorKind",
    "ParseMatrixError",
    # Kinds
    "NumericKind",
    "kind_of",
    # Tolerances
    "ToleranceTier",
    "select_tolerance",
]
