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
Fixed-dimension vectors

A vector class exists per dimension N, obtained from ``vector_type(N)`` or
``Vector.of(N)``. Calling ``Vector(values)`` directly infers N from the input
and returns an instance of the class for that dimension. The 3-dimensional
class is ``Vec3``, the only one exposing ``cross`` and ``rotate``.

Vectors own a private float64 array and every operation returns a new vector.
"""

from __future__ import annotations

import functools
import logging
import math
import operator
from typing import TYPE_CHECKING
from typing import Any
from typing import ClassVar
from typing import Iterator
from typing import List
from typing import Optional
from typing import Sequence
from typing import TypeVar

import numpy as np
from numpy.typing import NDArray

from oasis_linalg.config.linalg_params import DISPLAY_PADDING
from oasis_linalg.config.linalg_params import DISPLAY_PRECISION
from oasis_linalg.linalg_errors import DimensionError
from oasis_linalg.math_utils.numeric import as_float_array
from oasis_linalg.math_utils.numeric import render_rows
from oasis_linalg.math_utils.numeric import require_dimension
from oasis_linalg.math_utils.random_source import RandomSource


if TYPE_CHECKING:
    from oasis_linalg.matrix import Matrix


_LOG: logging.Logger = logging.getLogger(__name__)

# Probability of inheriting a gene from the mother
GENE_SELECTION_PROBABILITY: float = 0.5

VectorT = TypeVar("VectorT", bound="Vector")


class Vector:
    """Ordered sequence of N doubles with N fixed by the class."""

    dimension: ClassVar[int] = 0

    def __new__(cls, values: Any) -> Vector:
        if cls.dimension == 0:
            try:
                array: NDArray[np.float64] = np.asarray(values, dtype=np.float64)
            except ValueError as exc:
                raise DimensionError("values must be one-dimensional") from exc
            if array.ndim != 1:
                raise DimensionError("values must be one-dimensional")
            cls = vector_type(array.shape[0])
        return object.__new__(cls)

    def __init__(self, values: Any) -> None:
        self._values: NDArray[np.float64] = as_float_array(
            values, (self.dimension,), "values"
        )

    @staticmethod
    def of(dimension: int) -> type[Vector]:
        """Return the vector class of the given dimension."""
        return vector_type(dimension)

    @classmethod
    def _fixed_dimension(cls) -> int:
        if cls.dimension == 0:
            raise DimensionError("dimension is not fixed, use Vector.of(n)")
        return cls.dimension

    @classmethod
    def _from_array(cls: type[VectorT], values: NDArray[np.float64]) -> VectorT:
        vector: VectorT = object.__new__(cls)
        vector._values = values
        return vector

    @classmethod
    def zero(cls: type[VectorT]) -> VectorT:
        """Return the zero vector."""
        return cls._from_array(np.zeros(cls._fixed_dimension(), dtype=np.float64))

    @classmethod
    def new(cls, values: Any) -> Vector:
        """Return a vector holding the given values."""
        return cls(values)

    @classmethod
    def basis(cls: type[VectorT]) -> List[VectorT]:
        """Return the standard basis, the columns of the identity matrix."""
        identity: NDArray[np.float64] = np.eye(cls._fixed_dimension(), dtype=np.float64)
        return [cls._from_array(identity[:, j].copy()) for j in range(cls.dimension)]

    def _require_operand(self, other: Any, name: str) -> Vector:
        if not isinstance(other, Vector) or other.dimension != self.dimension:
            raise DimensionError(f"{name} must be a vector of dimension {self.dimension}")
        return other

    def _check_index(self, index: Any) -> int:
        idx: int = operator.index(index)
        if idx < 0 or idx >= self.dimension:
            raise IndexError(f"index {idx} out of range for dimension {self.dimension}")
        return idx

    def __getitem__(self, index: int) -> float:
        return float(self._values[self._check_index(index)])

    def __setitem__(self, index: int, value: float) -> None:
        self._values[self._check_index(index)] = value

    def __len__(self) -> int:
        return self.dimension

    def __iter__(self) -> Iterator[float]:
        return iter(self.tolist())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.dimension == other.dimension and bool(
            np.array_equal(self._values, other._values)
        )

    __hash__ = None  # type: ignore[assignment]

    def __add__(self: VectorT, other: Vector) -> VectorT:
        return self.add(other)

    def __sub__(self: VectorT, other: Vector) -> VectorT:
        return self.sub(other)

    def __reduce__(self) -> tuple[Any, ...]:
        return (_rebuild_vector, (self.dimension, self.tolist()))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.tolist()!r})"

    def __str__(self) -> str:
        return self.format()

    def format(
        self, precision: int = DISPLAY_PRECISION, padding: int = DISPLAY_PADDING
    ) -> str:
        """Render one bracketed row per coordinate."""
        return render_rows(
            [[value] for value in self._values],
            precision,
            padding,
        )

    def to_array(self) -> NDArray[np.float64]:
        """Return a copy of the values as a numpy array."""
        return self._values.copy()

    def tolist(self) -> List[float]:
        """Return the values as a list of floats."""
        return [float(value) for value in self._values]

    def copy(self: VectorT) -> VectorT:
        """Return an independent copy of this vector."""
        return self._from_array(self._values.copy())

    def almost_equal(self, other: Vector, atol: float = 1e-9) -> bool:
        """Check approximate elementwise equality."""
        operand: Vector = self._require_operand(other, "other")
        return bool(np.allclose(self._values, operand._values, rtol=0.0, atol=atol))

    def scale(self: VectorT, scalar: float) -> VectorT:
        """Return this vector multiplied by a scalar."""
        return self._from_array(scalar * self._values)

    def add(self: VectorT, other: Vector) -> VectorT:
        """Return the elementwise sum."""
        operand: Vector = self._require_operand(other, "other")
        return self._from_array(self._values + operand._values)

    def sub(self: VectorT, other: Vector) -> VectorT:
        """Return the elementwise difference."""
        operand: Vector = self._require_operand(other, "other")
        return self._from_array(self._values - operand._values)

    def dot(self, other: Vector) -> float:
        """Return the sum of elementwise products."""
        operand: Vector = self._require_operand(other, "other")
        return float(np.dot(self._values, operand._values))

    def norm(self) -> float:
        """Return the Euclidean norm."""
        return math.sqrt(float(np.sum(self._values * self._values)))

    def normalize(self: VectorT) -> VectorT:
        """Return the unit vector parallel to this vector.

        The norm must be non-zero. A zero vector yields NaN entries.
        """
        with np.errstate(divide="ignore", invalid="ignore"):
            inv_norm: np.float64 = np.divide(np.float64(1.0), np.float64(self.norm()))
            return self._from_array(inv_norm * self._values)

    def mult(self: VectorT, matrix: Matrix) -> VectorT:
        """Return ``output[i] = sum_j matrix[i, j] * self[j]``."""
        if matrix.dimension != self.dimension:
            raise DimensionError(f"matrix must have dimension {self.dimension}")
        return self._from_array(matrix.to_array() @ self._values)

    def check(
        self,
        lower: Sequence[Optional[float]],
        upper: Sequence[Optional[float]],
    ) -> bool:
        """Return True when every coordinate satisfies its optional bounds."""
        if len(lower) != self.dimension or len(upper) != self.dimension:
            raise DimensionError(f"bounds must have length {self.dimension}")
        for i, value in enumerate(self._values):
            low: Optional[float] = lower[i]
            if low is not None and value < low:
                return False
            high: Optional[float] = upper[i]
            if high is not None and value > high:
                return False
        return True

    @classmethod
    def _parents(cls, mother: Vector, father: Vector) -> type[Vector]:
        if not isinstance(mother, Vector):
            raise DimensionError("mother must be a vector")
        if cls.dimension not in (0, mother.dimension):
            raise DimensionError(f"mother must be a vector of dimension {cls.dimension}")
        mother._require_operand(father, "father")
        return type(mother)

    @classmethod
    def child(
        cls,
        mother: Vector,
        father: Vector,
        stdev: float,
        rng: RandomSource,
    ) -> Vector:
        """Generate a child vector for genetic optimization.

        Each gene is taken from the mother or the father with equal
        probability, then mutated with Gaussian noise N(0, stdev^2). Draws
        happen per coordinate in that order.

        Args:
            mother: First parent
            father: Second parent, same dimension as the mother
            stdev: Standard deviation of the mutation noise
            rng: Source of the coin flips and noise draws

        Returns:
            A new vector of the parents' dimension
        """
        child_type: type[Vector] = cls._parents(mother, father)
        values: NDArray[np.float64] = np.zeros(mother.dimension, dtype=np.float64)
        for i in range(mother.dimension):
            if rng.random() < GENE_SELECTION_PROBABILITY:
                gene: float = float(mother._values[i])
            else:
                gene = float(father._values[i])
            values[i] = gene + float(rng.normal(0.0, stdev))
        return child_type._from_array(values)

    @classmethod
    def child_discrete(
        cls,
        mother: Vector,
        father: Vector,
        permitted: Sequence[float],
        rng: RandomSource,
    ) -> Vector:
        """Generate a child vector for discrete genetic optimization.

        Genes are selected as in ``child``. Each gene is then replaced, with
        probability 1/N, by a value drawn uniformly from ``permitted``.
        """
        child_type: type[Vector] = cls._parents(mother, father)
        mutation_rate: float = 1.0 / mother.dimension
        values: NDArray[np.float64] = np.zeros(mother.dimension, dtype=np.float64)
        for i in range(mother.dimension):
            if rng.random() < GENE_SELECTION_PROBABILITY:
                values[i] = mother._values[i]
            else:
                values[i] = father._values[i]

            if rng.random() < mutation_rate:
                values[i] = float(rng.choice(permitted))
                _LOG.debug("Discrete mutation at index %d: %s", i, values[i])
        return child_type._from_array(values)


class Vec3(Vector):
    """Vector of dimension 3 with cross product and rotation."""

    dimension: ClassVar[int] = 3

    def cross(self, other: Vector) -> Vec3:
        """Return the cross product ``self x other``."""
        operand: Vector = self._require_operand(other, "other")
        a: NDArray[np.float64] = self._values
        b: NDArray[np.float64] = operand._values
        return Vec3._from_array(
            np.array(
                [
                    a[1] * b[2] - a[2] * b[1],
                    a[2] * b[0] - a[0] * b[2],
                    a[0] * b[1] - a[1] * b[0],
                ],
                dtype=np.float64,
            )
        )

    def rotate(self, axis: Vector, angle: float) -> Vec3:
        """Rotate about an axis using Rodrigues' rotation formula.

        The rotation is right-handed and the angle is in radians:
            v_rot = v cos(t) + k (v . k) (1 - cos(t)) + (k x v) sin(t)
        where k is the normalized axis.
        """
        k: Vec3 = Vec3._from_array(self._require_operand(axis, "axis").to_array())
        k = k.normalize()
        # Zero axis propagates NaN
        cos_angle: float = math.cos(angle)
        sin_angle: float = math.sin(angle)
        return (
            self.scale(cos_angle)
            + k.scale(self.dot(k) * (1.0 - cos_angle))
            + k.cross(self).scale(sin_angle)
        )


@functools.lru_cache(maxsize=None)
def _vector_type(dimension: int) -> type[Vector]:
    if dimension == Vec3.dimension:
        return Vec3
    return type(
        f"Vector{dimension}",
        (Vector,),
        {"dimension": dimension, "__module__": __name__},
    )


def vector_type(dimension: int) -> type[Vector]:
    """Return the vector class of the given fixed dimension."""
    return _vector_type(require_dimension(dimension))


def _rebuild_vector(dimension: int, values: List[float]) -> Vector:
    return vector_type(dimension)(values)
