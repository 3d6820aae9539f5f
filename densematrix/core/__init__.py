"""
Core infrastructure for densematrix.

Shared abstractions used by the dense module.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    formatting: Text rendering and comparison constants
"""

from densematrix.core.exceptions import (
    DenseMatrixError,
    ValidationError,
    DimensionError,
    IndexOutOfBoundsError,
    NonFiniteWarning,
)

__all__ = [
    # Exceptions
    "DenseMatrixError",
    "ValidationError",
    "DimensionError",
    "IndexOutOfBoundsError",
    # Warnings
    "NonFiniteWarning",
]
