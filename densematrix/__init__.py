"""
densematrix: immutable dense matrices of float64 values.

A small value type for basic linear algebra: addition, subtraction,
scalar and matrix multiplication, transpose, and the square/symmetric
predicates. Every operation returns a new Matrix.

Submodules:
    core: Exceptions, validation, formatting constants
    dense: The Matrix type and its functional API
"""

__version__ = "0.1.0"

from densematrix.core.exceptions import (
    DenseMatrixError,
    ValidationError,
    DimensionError,
    IndexOutOfBoundsError,
    NonFiniteWarning,
)
from densematrix.dense import (
    Matrix,
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
    "__version__",
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
    "DenseMatrixError",
    "ValidationError",
    "DimensionError",
    "IndexOutOfBoundsError",
    "NonFiniteWarning",
]
