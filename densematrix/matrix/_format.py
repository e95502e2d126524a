"""
Plain-text rendering of a matrix table.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray


def _cell_text(value: float, precision: int | None) -> str:
    if precision is None:
        return repr(float(value))
    return f"{value:.{precision}f}"


def format_table(
    table: NDArray[np.floating[Any]],
    precision: int | None = None,
) -> str:
    """
    Render a 2D table one row per line.

    Cells are right-aligned to the widest cell in the table and separated
    by two spaces.

    Parameters
    ----------
    table : ndarray
        2D array to render.
    precision : int or None
        Digits after the decimal point. None prints the shortest text that
        round-trips each float.
    """
    if precision is not None and precision < 0:
        raise ValueError(f"precision must be >= 0, got {precision}")

    cells = [[_cell_text(v, precision) for v in row] for row in table]
    width = max(len(c) for row in cells for c in row)

    lines = []
    for row in cells:
        lines.append("  ".join(c.rjust(width) for c in row))
    return "\n".join(lines)
