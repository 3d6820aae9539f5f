"""
Exception hierarchy for densematrix.

All exceptions inherit from DenseMatrixError to allow catching any
library-specific error. ValidationError is the single "invalid argument"
kind; its subclasses only narrow down which argument was wrong.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class DenseMatrixError(Exception):
    """Base exception for all densematrix errors."""
    pass


class ValidationError(DenseMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks: absent or
    non-numeric grids, bad scalars, non-Matrix operands.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised for empty or ragged grids and when two operands have shapes
    that the requested operation cannot combine.

    Attributes:
        operation: Name of the operation that rejected the shapes
        expected: Expected shape (or dimension), if meaningful
        actual: Shape (or dimension) that was supplied, if meaningful
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        expected: tuple[int, ...] | int | None = None,
        actual: tuple[int, ...] | int | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.expected = expected
        self.actual = actual


class IndexOutOfBoundsError(ValidationError):
    """
    Element access outside the grid.

    Negative indices are never wrapped around; they are out of bounds.

    Attributes:
        index: The (row, column) pair that was requested
        shape: Shape of the matrix that was indexed
    """

    def __init__(
        self,
        message: str,
        index: tuple[int, int] | None = None,
        shape: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.index = index
        self.shape = shape


class NonFiniteWarning(RuntimeWarning):
    """Matrix was constructed from data containing NaN or Inf."""
    pass
