"""
Matrix: immutable dense matrix of float64 values.

The grid is held in one owned, row-major numpy buffer that is marked
read-only. It is copied on the way in (construction from caller data)
and on the way out (to_array), so no caller ever aliases internal state.
Every operation returns a new Matrix.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from densematrix.core.exceptions import NonFiniteWarning, ValidationError
from densematrix.core.formatting import DEFAULT_ATOL, DEFAULT_RTOL, format_rows
from densematrix.core.validation import (
    check_2d,
    check_array,
    check_index,
    check_inner_dimensions,
    check_non_empty,
    check_not_none,
    check_rectangular,
    check_same_shape,
    check_scalar,
    has_non_finite,
)


@dataclass(frozen=True, init=False, eq=False, repr=False)
class Matrix:
    """
    Immutable rectangular grid of double-precision values.

    Construction:
        Matrix([[1, 2], [3, 4]])
        Matrix(numpy_array)
        Matrix.identity(3)
        Matrix.zeros(2, 3)

    Operators:
        a + b, a - b      elementwise (shapes must match)
        a * 2.0, 2.0 * a  scalar scaling
        a @ b             matrix product
        -a                negation
        a == b            exact elementwise equality

    Invariants:
        rows >= 1, columns >= 1, all rows the same length. Ragged, empty,
        non-2D or non-numeric input raises ValidationError (or its
        DimensionError subclass) and no instance is created.
    """

    _cells: NDArray[np.float64]

    # numpy defers binary operators to Matrix instead of broadcasting over it
    __array_ufunc__ = None

    def __init__(self, cells: ArrayLike | Matrix) -> None:
        if isinstance(cells, Matrix):
            # Both buffers are read-only, so sharing is safe
            data = cells._cells
        else:
            check_not_none(cells, "cells")
            check_rectangular(cells, "cells")
            array = check_array(cells, "cells")
            check_2d(array, "cells")
            check_non_empty(array, "cells")
            if has_non_finite(array):
                warnings.warn(
                    "Matrix constructed from data containing NaN or Inf values",
                    NonFiniteWarning,
                    stacklevel=2,
                )
            data = np.array(array, dtype=np.float64, order='C', copy=True)
            data.flags.writeable = False
        object.__setattr__(self, '_cells', data)

    @classmethod
    def _wrap(cls, data: NDArray[np.float64]) -> Matrix:
        """Adopt a freshly computed array without re-validating it."""
        data = np.ascontiguousarray(data, dtype=np.float64)
        data.flags.writeable = False
        instance = object.__new__(cls)
        object.__setattr__(instance, '_cells', data)
        return instance

    @classmethod
    def identity(cls, size: int) -> Matrix:
        """Square identity matrix of the given size."""
        _check_dimension(size, "size")
        return cls._wrap(np.eye(size, dtype=np.float64))

    @classmethod
    def zeros(cls, rows: int, columns: int) -> Matrix:
        """All-zero matrix of the given shape."""
        _check_dimension(rows, "rows")
        _check_dimension(columns, "columns")
        return cls._wrap(np.zeros((rows, columns), dtype=np.float64))

    # === Pickling ===

    def __reduce__(self):
        # Rebuild through __init__ so the restored buffer is read-only again
        return (Matrix, (self.to_array(),))

    # === Shape and element access ===

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._cells.shape[0]

    @property
    def columns(self) -> int:
        """Number of columns."""
        return self._cells.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, columns) pair."""
        return (self.rows, self.columns)

    def at(self, row: int, column: int) -> float:
        """
        Element at zero-based coordinates.

        Parameters
        ----------
        row : int
            Row index, 0 <= row < rows.
        column : int
            Column index, 0 <= column < columns.

        Raises
        ------
        IndexOutOfBoundsError
            If either index is negative or past the end. Negative
            indices do not count from the end.
        """
        check_index(row, column, self.shape)
        return float(self._cells[row, column])

    def __getitem__(self, key: tuple[int, int]) -> float:
        if not isinstance(key, tuple) or len(key) != 2:
            raise ValidationError(
                f"Matrix index must be a (row, column) pair, got {key!r}"
            )
        return self.at(*key)

    def to_array(self) -> NDArray[np.float64]:
        """Fresh, writable copy of the grid as a 2D float64 array."""
        return self._cells.copy()

    def tolist(self) -> list[list[float]]:
        """Grid as nested Python lists, one list per row."""
        return self._cells.tolist()

    # === Arithmetic ===

    def plus(self, other: Matrix) -> Matrix:
        """
        Elementwise sum.

        Raises
        ------
        DimensionError
            If the operands have different shapes.
        """
        _check_operand(other, "plus")
        check_same_shape(self.shape, other.shape, "plus")
        with np.errstate(all='ignore'):
            return Matrix._wrap(self._cells + other._cells)

    def minus(self, other: Matrix) -> Matrix:
        """
        Elementwise difference.

        Raises
        ------
        DimensionError
            If the operands have different shapes.
        """
        _check_operand(other, "minus")
        check_same_shape(self.shape, other.shape, "minus")
        with np.errstate(all='ignore'):
            return Matrix._wrap(self._cells - other._cells)

    def times(self, factor: float | Matrix) -> Matrix:
        """
        Scalar scaling or matrix product, depending on the argument.

        Parameters
        ----------
        factor : float or Matrix
            A real scalar multiplies every element. A Matrix gives the
            standard product self @ factor, which requires
            self.columns == factor.rows and has shape
            (self.rows, factor.columns).

        Raises
        ------
        DimensionError
            If factor is a Matrix with incompatible inner dimension.
        ValidationError
            If factor is neither a real scalar nor a Matrix.
        """
        if isinstance(factor, Matrix):
            return self._matmul(factor)
        scalar = check_scalar(factor, "factor")
        with np.errstate(all='ignore'):
            return Matrix._wrap(self._cells * scalar)

    def _matmul(self, other: Matrix) -> Matrix:
        check_inner_dimensions(self.shape, other.shape, "times")
        # Each cell is summed over k in order, starting from 0.0, so results
        # are bit-identical to a plain triple loop
        out = np.zeros((self.rows, other.columns), dtype=np.float64)
        with np.errstate(all='ignore'):
            for k in range(self.columns):
                out += np.multiply.outer(self._cells[:, k], other._cells[k, :])
        return Matrix._wrap(out)

    def transpose(self) -> Matrix:
        """New matrix with rows and columns swapped."""
        return Matrix._wrap(self._cells.T)

    @property
    def T(self) -> Matrix:
        """Alias for transpose()."""
        return self.transpose()

    # === Structure ===

    def is_square(self) -> bool:
        return self.rows == self.columns

    def is_symmetric(self) -> bool:
        """
        True iff square and equal to its own transpose.

        Comparison is exact: no tolerance is applied, and a NaN anywhere
        makes the matrix non-symmetric because NaN never equals itself.
        """
        if not self.is_square():
            return False
        return bool(np.array_equal(self._cells, self._cells.T))

    def allclose(
        self,
        other: Matrix,
        rtol: float = DEFAULT_RTOL,
        atol: float = DEFAULT_ATOL,
    ) -> bool:
        """
        Toleranced elementwise comparison.

        Uses |a - b| <= atol + rtol * |b|. Matrices of different shape are
        never close.
        """
        _check_operand(other, "allclose")
        if self.shape != other.shape:
            return False
        return bool(np.allclose(self._cells, other._cells, rtol=rtol, atol=atol))

    # === Operator protocol ===

    def __add__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.minus(other)

    def __mul__(self, other: object) -> Matrix:
        # Matrix * Matrix is deliberately unsupported; use @
        if isinstance(other, Matrix) or not _is_real_scalar(other):
            return NotImplemented
        return self.times(other)

    def __rmul__(self, other: object) -> Matrix:
        if not _is_real_scalar(other):
            return NotImplemented
        return self.times(other)

    def __matmul__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._matmul(other)

    def __neg__(self) -> Matrix:
        return self.times(-1.0)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(
            np.array_equal(self._cells, other._cells)
        )

    def __hash__(self) -> int:
        # Adding 0.0 folds -0.0 into 0.0 so equal matrices hash equally
        return hash((self.shape, (self._cells + 0.0).tobytes()))

    # === Text ===

    def __str__(self) -> str:
        return format_rows(self._cells)

    def __repr__(self) -> str:
        return f"Matrix({self._cells.tolist()!r})"


def _check_operand(other: Any, operation: str) -> None:
    if not isinstance(other, Matrix):
        raise ValidationError(
            f"{operation}: expected a Matrix operand, got {type(other).__name__}"
        )


def _check_dimension(value: Any, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or value < 1:
        raise ValidationError(f"{name}: must be a positive integer, got {value!r}")


def _is_real_scalar(value: object) -> bool:
    try:
        check_scalar(value, "factor")
    except ValidationError:
        return False
    return True
