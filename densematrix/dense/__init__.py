"""
Dense matrix module.

Provides the immutable Matrix value type and a functional API over it.

Public API:
    Matrix              - Immutable float64 matrix
    add(m, n)           - Elementwise sum
    subtract(m, n)      - Elementwise difference
    scalar_multiply(m)  - Scale every element
    matrix_multiply(m)  - Matrix product
    transpose(m)        - Rows and columns swapped
    is_square(m)        - rows == columns
    is_symmetric(m)     - Exact symmetry check
    format_matrix(m)    - Fixed-width text rendering
"""

from densematrix.dense.matrix import Matrix
from densematrix.dense.operations import (
    to_array,
    rows,
    columns,
    at,
    add,
    subtract,
    scalar_multiply,
    matrix_multiply,
    transpose,
    is_square,
    is_symmetric,
    format_matrix,
)

__all__ = [
    "Matrix",
    "to_array",
    "rows",
    "columns",
    "at",
    "add",
    "subtract",
    "scalar_multiply",
    "matrix_multiply",
    "transpose",
    "is_square",
    "is_symmetric",
    "format_matrix",
]
