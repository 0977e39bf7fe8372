################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Shared numeric validation and display helpers."""

from __future__ import annotations

from typing import Any
from typing import List
from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from oasis_linalg.linalg_errors import DimensionError


def require_dimension(dimension: Any) -> int:
    """Return a validated fixed dimension."""
    if isinstance(dimension, bool) or not isinstance(dimension, int):
        raise DimensionError("dimension must be an int")
    if dimension <= 0:
        raise DimensionError("dimension must be positive")
    return dimension


def as_float_array(
    values: Any,
    shape: tuple[int, ...],
    name: str,
) -> NDArray[np.float64]:
    """Return a float64 copy of values with the expected shape."""
    try:
        array: NDArray[np.float64] = np.array(values, dtype=np.float64)
    except ValueError as exc:
        raise DimensionError(f"{name} must have shape {shape}") from exc
    if array.shape != shape:
        raise DimensionError(f"{name} must have shape {shape}, got {array.shape}")
    return array


def format_cell(value: float, precision: int) -> str:
    """Render a value in fixed point, reserving a sign column.

    NaN renders as ``NaN`` without a sign column, infinities as ``inf`` and
    ``-inf``.
    """
    if np.isnan(value):
        return "NaN"
    if value >= 0.0:
        return f" {value:.{precision}f}"
    return f"{value:.{precision}f}"


def render_rows(rows: Sequence[Sequence[float]], precision: int, padding: int) -> str:
    """Render rows of values as bracketed lines of centred cells.

    Every cell shares the width of the widest rendered value plus padding, so
    output is deterministic for identical values.
    """
    cells: List[List[str]] = [
        [format_cell(float(value), precision) for value in row] for row in rows
    ]
    width: int = max((len(cell) for row in cells for cell in row), default=0)
    width += padding

    output: str = ""
    for row_cells in cells:
        output += "[" + "".join(f"{cell:^{width}}" for cell in row_cells) + "]\n"
    return output
