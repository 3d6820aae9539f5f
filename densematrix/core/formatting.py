"""
Text rendering and comparison constants.

Provides the fixed-width layout used by str(Matrix) plus the default
tolerances for toleranced comparison. These module-level constants are
the only configuration the package has.
"""

import numpy as np
from numpy.typing import NDArray
from typing import Any


# Minimum width of each rendered element, in characters
FIELD_WIDTH: int = 10

# Digits after the decimal point for each rendered element
DECIMALS: int = 6

# Default tolerance for numerical comparisons (relative)
DEFAULT_RTOL: float = 1e-12

# Default tolerance for considering values as zero (absolute)
DEFAULT_ATOL: float = 1e-14

# printf-style conversion; %-formatting ignores the process locale
_VALUE_FORMAT = f"%{FIELD_WIDTH}.{DECIMALS}f"

# Text for values that have no decimal expansion
_NAN_TEXT = "NaN"
_INF_TEXT = "Infinity"


def format_value(value: float) -> str:
    """
    Render a single value as a fixed-width decimal field.

    Values wider than FIELD_WIDTH overflow the field rather than being
    truncated. The decimal separator is always '.'. NaN and infinities
    render as NaN, Infinity and -Infinity.

    Args:
        value: Value to render

    Returns:
        Right-aligned text of at least FIELD_WIDTH characters
    """
    value = float(value)
    if np.isnan(value):
        return _NAN_TEXT.rjust(FIELD_WIDTH)
    if np.isinf(value):
        text = _INF_TEXT if value > 0 else "-" + _INF_TEXT
        return text.rjust(FIELD_WIDTH)
    return _VALUE_FORMAT % value


def format_rows(cells: NDArray[np.floating[Any]]) -> str:
    """
    Render a 2D array one row per line.

    Elements are concatenated without separators (the field width provides
    the spacing) and every row, including the last, ends with a newline.

    Args:
        cells: 2D array to render

    Returns:
        Rendered text
    """
    return "".join(
        "".join(format_value(x) for x in row) + "\n"
        for row in cells
    )
