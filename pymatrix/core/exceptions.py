"""
Exception hierarchy for pymatrix.

All exceptions inherit from MatrixError to allow catching any
library-specific error. Shape and index failures are ordinary, recoverable
exceptions raised at the point of the failing call.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""

from enum import Enum


class MatrixError(Exception):
    """Base exception for all pymatrix errors."""
    pass


class ValidationError(MatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs (values, dimensions, scalars)
    fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Dimensions are incorrect or inconsistent.

    Raised when the number of values does not match ``row * col`` or when
    nested rows have different lengths.
    """
    pass


class DTypeError(ValidationError):
    """
    Element kind is unsupported or does not match.

    Attributes:
        expected: Expected kind name, if a specific one was required
        actual: Kind name that was received
    """

    def __init__(
        self,
        message: str,
        expected: str | None = None,
        actual: str | None = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class ShapeMismatchError(ValidationError):
    """
    Operand shapes are incompatible for an arithmetic operation.

    Attributes:
        operation: Name of the operation ('add', 'multiply', ...)
        expected: Shape the right operand was required to have
        actual: Shape the right operand actually had
    """

    def __init__(
        self,
        message: str,
        operation: str,
        expected: tuple[int, int],
        actual: tuple[int, int],
    ):
        super().__init__(message)
        self.operation = operation
        self.expected = expected
        self.actual = actual


class IndexOutOfBoundsError(ValidationError, IndexError):
    """
    Element index lies outside the matrix.

    Attributes:
        index: The offending (row, col) pair
        shape: Shape of the matrix that was indexed
    """

    def __init__(
        self,
        message: str,
        index: tuple[int, int],
        shape: tuple[int, int],
    ):
        super().__init__(message)
        self.index = index
        self.shape = shape


class ParseErrorKind(Enum):
    """Reason a matrix string could not be parsed."""
    WRONG_BRACKET_FORMAT = 'wrong_bracket_format'
    COLUMNS_NOT_ALIGNED = 'columns_not_aligned'
    PARSE_NUMBER_ERROR = 'parse_number_error'


class ParseMatrixError(MatrixError, ValueError):
    """
    Text could not be parsed as a matrix.

    Attributes:
        kind: ParseErrorKind describing the first violation found
        text: The input that was being parsed
        detail: Offending fragment (token or row), if any
    """

    def __init__(
        self,
        message: str,
        kind: ParseErrorKind,
        text: str | None = None,
        detail: str | None = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.text = text
        self.detail = detail
