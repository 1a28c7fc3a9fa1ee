"""
Exception hierarchy for PyMatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error. Each matrix contract violation has its own
class so callers can handle failures by kind.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyMatrixError(Exception):
    """Base exception for all PyMatrix errors."""
    pass


class ValidationError(PyMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.

    Base class for every shape-related failure: illegal dimension pairs,
    mismatched operands and non-square matrices.
    """
    pass


class IllegalDimensionsError(DimensionError):
    """
    A matrix cannot be built with the requested dimensions.

    Raised when exactly one of rows/cols is zero, or when either is
    negative.

    Attributes:
        rows: Requested number of rows
        cols: Requested number of columns
    """

    def __init__(self, message: str, rows: int, cols: int):
        super().__init__(message)
        self.rows = rows
        self.cols = cols


class DimensionMismatchError(DimensionError):
    """
    Two sizes that must agree do not.

    Raised when a flat cell sequence does not hold rows*cols items, and
    when the operands of +, - or * have incompatible shapes.

    Attributes:
        operation: Name of the failing operation ('construct', 'add', ...)
        expected: What the operation required (shape or count)
        actual: What it got
    """

    def __init__(
        self,
        message: str,
        operation: str,
        expected: tuple[int, ...] | int | None = None,
        actual: tuple[int, ...] | int | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.expected = expected
        self.actual = actual


class NotSquareError(DimensionError):
    """
    Operation requires a square matrix.

    Attributes:
        rows: Number of rows of the offending matrix
        cols: Number of columns of the offending matrix
    """

    def __init__(self, message: str, rows: int, cols: int):
        super().__init__(message)
        self.rows = rows
        self.cols = cols


class OutOfBoundsError(ValidationError, IndexError):
    """
    Element access outside the declared dimensions.

    Also an IndexError, so generic sequence-handling code that catches
    IndexError keeps working.

    Attributes:
        row: Requested row index
        col: Requested column index
        rows: Number of rows of the matrix
        cols: Number of columns of the matrix
    """

    def __init__(self, message: str, row: int, col: int, rows: int, cols: int):
        super().__init__(message)
        self.row = row
        self.col = col
        self.rows = rows
        self.cols = cols
