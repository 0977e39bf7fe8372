################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""
Fixed-dimension square matrices

A matrix class exists per dimension N, obtained from ``matrix_type(N)`` or
``Matrix.of(N)``. Calling ``Matrix(rows)`` directly infers N from a square
input. ``Mat3`` adds construction of 3D rotation matrices.

Entries are indexed by ``(row, column)`` and every arithmetic operation
returns a new matrix.
"""

from __future__ import annotations

import functools
import logging
import operator
from typing import Any
from typing import ClassVar
from typing import List
from typing import Sequence
from typing import TypeVar
from typing import cast

import numpy as np
from numpy.typing import NDArray

from oasis_linalg.config.linalg_params import DISPLAY_PADDING
from oasis_linalg.config.linalg_params import DISPLAY_PRECISION
from oasis_linalg.config.linalg_params import InversionParams
from oasis_linalg.linalg_errors import DimensionError
from oasis_linalg.math_utils.numeric import as_float_array
from oasis_linalg.math_utils.numeric import render_rows
from oasis_linalg.math_utils.numeric import require_dimension
from oasis_linalg.vector import Vec3
from oasis_linalg.vector import Vector
from oasis_linalg.vector import vector_type


_LOG: logging.Logger = logging.getLogger(__name__)

MatrixT = TypeVar("MatrixT", bound="Matrix")


def _swap_rows(a: NDArray[np.float64], i: int, j: int) -> None:
    if i != j:
        a[[i, j]] = a[[j, i]]


def _scale_row(a: NDArray[np.float64], i: int, s: np.float64) -> None:
    a[i] *= s


def _subtract_row(a: NDArray[np.float64], i: int, j: int, s: np.float64) -> None:
    """Subtract ``s`` times row ``j`` from row ``i``."""
    a[i] -= s * a[j]


class Matrix:
    """Square N x N grid of doubles with N fixed by the class."""

    dimension: ClassVar[int] = 0

    def __new__(cls, rows: Any) -> Matrix:
        if cls.dimension == 0:
            try:
                array: NDArray[np.float64] = np.asarray(rows, dtype=np.float64)
            except ValueError as exc:
                raise DimensionError("rows must form a square matrix") from exc
            if array.ndim != 2 or array.shape[0] != array.shape[1]:
                raise DimensionError("rows must form a square matrix")
            cls = matrix_type(array.shape[0])
        return object.__new__(cls)

    def __init__(self, rows: Any) -> None:
        self._values: NDArray[np.float64] = as_float_array(
            rows, (self.dimension, self.dimension), "rows"
        )

    @staticmethod
    def of(dimension: int) -> type[Matrix]:
        """Return the matrix class of the given dimension."""
        return matrix_type(dimension)

    @classmethod
    def _fixed_dimension(cls) -> int:
        if cls.dimension == 0:
            raise DimensionError("dimension is not fixed, use Matrix.of(n)")
        return cls.dimension

    @classmethod
    def _from_array(cls: type[MatrixT], values: NDArray[np.float64]) -> MatrixT:
        matrix: MatrixT = object.__new__(cls)
        matrix._values = values
        return matrix

    @classmethod
    def column_type(cls) -> type[Vector]:
        """Return the vector class this matrix operates on."""
        return vector_type(cls._fixed_dimension())

    @classmethod
    def zero(cls: type[MatrixT]) -> MatrixT:
        """Return the zero matrix."""
        n: int = cls._fixed_dimension()
        return cls._from_array(np.zeros((n, n), dtype=np.float64))

    @classmethod
    def identity(cls: type[MatrixT]) -> MatrixT:
        """Return the identity matrix."""
        return cls._from_array(np.eye(cls._fixed_dimension(), dtype=np.float64))

    @classmethod
    def new(cls, rows: Any) -> Matrix:
        """Return a matrix holding the given rows."""
        return cls(rows)

    @classmethod
    def compose(cls, columns: Sequence[Vector]) -> Matrix:
        """Return the matrix whose j-th column is ``columns[j]``."""
        if cls.dimension == 0:
            if not columns:
                raise DimensionError("columns must not be empty")
            target: type[Matrix] = matrix_type(len(columns))
        else:
            target = cls
        n: int = target.dimension
        if len(columns) != n:
            raise DimensionError(f"expected {n} columns, got {len(columns)}")
        values: NDArray[np.float64] = np.zeros((n, n), dtype=np.float64)
        for j, column in enumerate(columns):
            if not isinstance(column, Vector) or column.dimension != n:
                raise DimensionError(f"column {j} must be a vector of dimension {n}")
            values[:, j] = column.to_array()
        return target._from_array(values)

    def _require_operand(self, other: Any, name: str) -> Matrix:
        if not isinstance(other, Matrix) or other.dimension != self.dimension:
            raise DimensionError(f"{name} must be a matrix of dimension {self.dimension}")
        return other

    def _check_index(self, index: Any) -> tuple[int, int]:
        if not isinstance(index, tuple) or len(index) != 2:
            raise IndexError("matrix index must be a (row, column) pair")
        row: int = operator.index(index[0])
        col: int = operator.index(index[1])
        if row < 0 or row >= self.dimension or col < 0 or col >= self.dimension:
            raise IndexError(
                f"index ({row}, {col}) out of range for dimension {self.dimension}"
            )
        return row, col

    def __getitem__(self, index: tuple[int, int]) -> float:
        return float(self._values[self._check_index(index)])

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        self._values[self._check_index(index)] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.dimension == other.dimension and bool(
            np.array_equal(self._values, other._values)
        )

    __hash__ = None  # type: ignore[assignment]

    def __add__(self: MatrixT, other: Matrix) -> MatrixT:
        return self.add(other)

    def __sub__(self: MatrixT, other: Matrix) -> MatrixT:
        return self.sub(other)

    def __reduce__(self) -> tuple[Any, ...]:
        return (_rebuild_matrix, (self.dimension, self.tolist()))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.tolist()!r})"

    def __str__(self) -> str:
        return self.format()

    def format(
        self, precision: int = DISPLAY_PRECISION, padding: int = DISPLAY_PADDING
    ) -> str:
        """Render one bracketed line per matrix row."""
        return render_rows(
            self._values,
            precision,
            padding,
        )

    def to_array(self) -> NDArray[np.float64]:
        """Return a copy of the entries as a numpy array."""
        return self._values.copy()

    def tolist(self) -> List[List[float]]:
        """Return the entries as nested lists of floats."""
        return [[float(value) for value in row] for row in self._values]

    def copy(self: MatrixT) -> MatrixT:
        """Return an independent copy of this matrix."""
        return self._from_array(self._values.copy())

    def almost_equal(self, other: Matrix, atol: float = 1e-9) -> bool:
        """Check approximate elementwise equality."""
        operand: Matrix = self._require_operand(other, "other")
        return bool(np.allclose(self._values, operand._values, rtol=0.0, atol=atol))

    def decompose(self) -> List[Vector]:
        """Return the columns of this matrix.

        This is useful for determining the axes of a rotated coordinate
        system.
        """
        column_type: type[Vector] = self.column_type()
        return [
            column_type(self._values[:, j].copy()) for j in range(self.dimension)
        ]

    def transpose(self: MatrixT) -> MatrixT:
        """Return the transpose."""
        return self._from_array(self._values.T.copy())

    def scale(self: MatrixT, scalar: float) -> MatrixT:
        """Return this matrix multiplied by a scalar."""
        return self._from_array(scalar * self._values)

    def add(self: MatrixT, other: Matrix) -> MatrixT:
        """Return the elementwise sum."""
        operand: Matrix = self._require_operand(other, "other")
        return self._from_array(self._values + operand._values)

    def sub(self: MatrixT, other: Matrix) -> MatrixT:
        """Return the elementwise difference."""
        operand: Matrix = self._require_operand(other, "other")
        return self._from_array(self._values - operand._values)

    def mult(self, vector: Vector) -> Vector:
        """Return the matrix-vector product."""
        if not isinstance(vector, Vector) or vector.dimension != self.dimension:
            raise DimensionError(f"vector must have dimension {self.dimension}")
        return self.column_type()(self._values @ vector.to_array())

    def matmult(self: MatrixT, other: Matrix) -> MatrixT:
        """Return the matrix-matrix product ``self @ other``."""
        operand: Matrix = self._require_operand(other, "other")
        return self._from_array(self._values @ operand._values)

    def inverse(self: MatrixT, params: InversionParams | None = None) -> MatrixT:
        """Return the inverse using Gauss-Jordan elimination.

        The pivot for column i is the row at or below i holding the largest
        raw value in that column, ties keeping the lowest row. Values are
        compared without taking magnitudes, unlike textbook partial pivoting.

        Singular matrices are not rejected. A zero pivot propagates inf and
        NaN into the result, and is reported as a warning unless disabled by
        ``params``.
        """
        n: int = self.dimension
        if params is None:
            params = InversionParams()
        warn: bool = params.warn_on_singular_pivot
        work: NDArray[np.float64] = self._values.copy()
        inverse: NDArray[np.float64] = np.eye(n, dtype=np.float64)

        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            for i in range(n):
                pivot_row: int = i
                for k in range(i + 1, n):
                    if work[k, i] > work[pivot_row, i]:
                        pivot_row = k

                _swap_rows(work, i, pivot_row)
                _swap_rows(inverse, i, pivot_row)

                pivot: np.float64 = work[i, i]
                if warn and (pivot == 0.0 or not np.isfinite(pivot)):
                    _LOG.warning(
                        "Inverting with pivot %s in column %d, result is not finite",
                        pivot,
                        i,
                    )

                s: np.float64 = np.divide(np.float64(1.0), pivot)
                _scale_row(work, i, s)
                _scale_row(inverse, i, s)

                for k in range(i + 1, n):
                    factor: np.float64 = work[k, i]
                    _subtract_row(work, k, i, factor)
                    _subtract_row(inverse, k, i, factor)

            # Upper triangular with unit diagonal, clear above the diagonal
            for i in range(n):
                for j in range(i + 1, n):
                    factor = work[i, j]
                    _subtract_row(work, i, j, factor)
                    _subtract_row(inverse, i, j, factor)

        return self._from_array(inverse)


class Mat3(Matrix):
    """Matrix of dimension 3 with rotation construction."""

    dimension: ClassVar[int] = 3

    @classmethod
    def rotation(cls, axis: Vector, angle: float) -> Mat3:
        """Return the right-handed rotation about an axis by an angle.

        Column i is the i-th basis vector rotated by ``Vec3.rotate``. The
        angle is in radians.
        """
        columns: List[Vector] = [
            basis.rotate(axis, angle) for basis in Vec3.basis()
        ]
        return cast(Mat3, cls.compose(columns))


@functools.lru_cache(maxsize=None)
def _matrix_type(dimension: int) -> type[Matrix]:
    if dimension == Mat3.dimension:
        return Mat3
    return type(
        f"Matrix{dimension}",
        (Matrix,),
        {"dimension": dimension, "__module__": __name__},
    )


def matrix_type(dimension: int) -> type[Matrix]:
    """Return the matrix class of the given fixed dimension."""
    return _matrix_type(require_dimension(dimension))


def _rebuild_matrix(dimension: int, rows: List[List[float]]) -> Matrix:
    return matrix_type(dimension)(rows)
