"""
Input validation utilities for densematrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except integer -> float64 promotion)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from collections.abc import Sequence
from numbers import Integral, Real
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from densematrix.core.exceptions import (
    DimensionError,
    IndexOutOfBoundsError,
    ValidationError,
)


def check_not_none(value: Any, name: str) -> None:
    """
    Verify a required argument was supplied.

    Args:
        value: Argument to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If value is None
    """
    if value is None:
        raise ValidationError(f"{name}: must not be None")


def check_rectangular(cells: Any, name: str) -> None:
    """
    Verify a nested sequence has rows of identical length.

    numpy arrays are rectangular by construction and pass unchecked, as do
    inputs that are not sequences at all (check_2d rejects those later).

    Args:
        cells: Nested sequence (list of lists, tuple of tuples, ...)
        name: Parameter name for error messages

    Raises:
        DimensionError: If rows have different lengths, or some rows are
            sequences and others scalars
    """
    if isinstance(cells, (np.ndarray, str, bytes)) or not isinstance(cells, Sequence):
        return

    is_row = [
        isinstance(row, (Sequence, np.ndarray)) and not isinstance(row, (str, bytes))
        for row in cells
    ]
    if any(is_row) and not all(is_row):
        position = is_row.index(False)
        raise DimensionError(
            f"{name}: every row must be a sequence, got a scalar at row {position}",
            operation="construct",
        )

    lengths = [len(row) for row, flag in zip(cells, is_row) if flag]
    if len(set(lengths)) > 1:
        raise DimensionError(
            f"{name}: rows must all have the same length, got lengths {lengths}",
            operation="construct",
            expected=lengths[0],
            actual=next(n for n in lengths if n != lengths[0]),
        )


def check_array(array: ArrayLike, name: str) -> NDArray[np.float64]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data)
    as well as boolean and complex data, which have no faithful float64
    representation as matrix entries.

    The returned array may share memory with the input; callers that need
    ownership must copy it.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with dtype float64

    Raises:
        ValidationError: If input cannot be converted to a real numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if result.dtype == np.bool_:
        raise ValidationError(f"{name}: boolean dtype, expected real numeric data")

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype}, expected real numeric data"
        )

    # Reject non-numeric dtypes (strings, bytes, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if result.dtype != np.float64:
        result = result.astype(np.float64)

    return result


def check_2d(array: NDArray[np.float64], name: str) -> None:
    """
    Verify array is 2-dimensional.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        DimensionError: If array is not 2D
    """
    if array.ndim != 2:
        raise DimensionError(
            f"{name}: expected 2D array, got {array.ndim}D with shape {array.shape}",
            operation="construct",
            expected=2,
            actual=array.ndim,
        )


def check_non_empty(array: NDArray[np.float64], name: str) -> None:
    """
    Verify a 2D array has at least one row and one column.

    Args:
        array: 2D array to check
        name: Parameter name for error messages

    Raises:
        DimensionError: If either dimension is zero
    """
    n_rows, n_cols = array.shape
    if n_rows < 1:
        raise DimensionError(
            f"{name}: requires at least 1 row, got {n_rows}",
            operation="construct",
            actual=array.shape,
        )
    if n_cols < 1:
        raise DimensionError(
            f"{name}: requires at least 1 column, got {n_cols}",
            operation="construct",
            actual=array.shape,
        )


def check_same_shape(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two operands have identical shapes.

    Args:
        left: Shape of the left operand
        right: Shape of the right operand
        operation: Operation name for error messages

    Raises:
        DimensionError: If the shapes differ
    """
    if left != right:
        raise DimensionError(
            f"{operation}: operands must have the same shape, "
            f"got {left[0]}x{left[1]} and {right[0]}x{right[1]}",
            operation=operation,
            expected=left,
            actual=right,
        )


def check_inner_dimensions(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify the left operand's columns match the right operand's rows.

    Args:
        left: Shape of the left operand
        right: Shape of the right operand
        operation: Operation name for error messages

    Raises:
        DimensionError: If the inner dimensions differ
    """
    if left[1] != right[0]:
        raise DimensionError(
            f"{operation}: left operand has {left[1]} columns but right operand "
            f"has {right[0]} rows ({left[0]}x{left[1]} @ {right[0]}x{right[1]})",
            operation=operation,
            expected=left[1],
            actual=right[0],
        )


def check_index(row: Any, column: Any, shape: tuple[int, int]) -> None:
    """
    Verify a (row, column) pair addresses an element of the grid.

    Negative indices are rejected rather than counted from the end.

    Args:
        row: Zero-based row index
        column: Zero-based column index
        shape: Shape of the indexed matrix

    Raises:
        ValidationError: If either index is not an integer
        IndexOutOfBoundsError: If either index is outside the grid
    """
    for label, value in (("row", row), ("column", column)):
        if isinstance(value, bool) or not isinstance(value, Integral):
            raise ValidationError(
                f"{label} index must be an integer, got {type(value).__name__}"
            )

    n_rows, n_cols = shape
    if not (0 <= row < n_rows and 0 <= column < n_cols):
        raise IndexOutOfBoundsError(
            f"index ({row}, {column}) is out of bounds for a {n_rows}x{n_cols} matrix",
            index=(int(row), int(column)),
            shape=shape,
        )


def check_scalar(value: Any, name: str) -> float:
    """
    Validate a real scalar and return it as a Python float.

    Args:
        value: Scalar to check
        name: Parameter name for error messages

    Returns:
        value converted to float

    Raises:
        ValidationError: If value is not a real number (booleans excluded)
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, Real):
        raise ValidationError(
            f"{name}: expected a real scalar, got {type(value).__name__}"
        )
    return float(value)


def has_non_finite(array: NDArray[np.float64]) -> bool:
    """Check whether an array holds any NaN or Inf values."""
    return not bool(np.all(np.isfinite(array)))
