"""
Functional API for dense matrices.

Plain functions over Matrix, one per public operation. Each accepts a
Matrix or any array-like the Matrix constructor accepts, so callers can
pass nested lists or numpy arrays directly:

    add([[1, 2], [3, 4]], [[5, 6], [7, 8]])
    matrix_multiply(A, np.eye(2))
"""

from __future__ import annotations

from typing import Union

import numpy as np
from numpy.typing import ArrayLike, NDArray

from densematrix.dense.matrix import Matrix


MatrixLike = Union[Matrix, ArrayLike]


def _ensure_matrix(data: MatrixLike) -> Matrix:
    """Convert raw array to Matrix if needed."""
    if isinstance(data, Matrix):
        return data
    return Matrix(data)


def to_array(m: MatrixLike) -> NDArray[np.float64]:
    """Fresh 2D float64 copy of the grid."""
    return _ensure_matrix(m).to_array()


def rows(m: MatrixLike) -> int:
    return _ensure_matrix(m).rows


def columns(m: MatrixLike) -> int:
    return _ensure_matrix(m).columns


def at(m: MatrixLike, row: int, column: int) -> float:
    """
    Element at zero-based coordinates.

    Raises
    ------
    IndexOutOfBoundsError
        If either index is negative or >= the respective dimension.
    """
    return _ensure_matrix(m).at(row, column)


def add(m: MatrixLike, n: MatrixLike) -> Matrix:
    """
    Elementwise sum of two equally shaped matrices.

    Raises
    ------
    DimensionError
        If the shapes differ.
    """
    return _ensure_matrix(m).plus(_ensure_matrix(n))


def subtract(m: MatrixLike, n: MatrixLike) -> Matrix:
    """
    Elementwise difference m - n of two equally shaped matrices.

    Raises
    ------
    DimensionError
        If the shapes differ.
    """
    return _ensure_matrix(m).minus(_ensure_matrix(n))


def scalar_multiply(m: MatrixLike, scalar: float) -> Matrix:
    """Every element of m multiplied by scalar."""
    return _ensure_matrix(m).times(scalar)


def matrix_multiply(m: MatrixLike, n: MatrixLike) -> Matrix:
    """
    Matrix product m @ n.

    Parameters
    ----------
    m : Matrix or array-like
        Left operand, shape (r, k).
    n : Matrix or array-like
        Right operand, shape (k, c).

    Returns
    -------
    Matrix of shape (r, c).

    Raises
    ------
    DimensionError
        If m.columns != n.rows.
    """
    return _ensure_matrix(m).times(_ensure_matrix(n))


def transpose(m: MatrixLike) -> Matrix:
    return _ensure_matrix(m).transpose()


def is_square(m: MatrixLike) -> bool:
    return _ensure_matrix(m).is_square()


def is_symmetric(m: MatrixLike) -> bool:
    """Exact symmetry check; non-square matrices are never symmetric."""
    return _ensure_matrix(m).is_symmetric()


def format_matrix(m: MatrixLike) -> str:
    """
    Fixed-width text rendering.

    One line per row, each element as a 10-character field with 6
    decimals and '.' as the decimal separator, every line ending in a
    newline.
    """
    return str(_ensure_matrix(m))
