################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Tests for fixed-dimension vectors."""

from __future__ import annotations

import math
import pickle
from typing import List

import numpy as np
import pytest

from oasis_linalg.linalg_errors import DimensionError
from oasis_linalg.matrix import Matrix
from oasis_linalg.vector import Vec3
from oasis_linalg.vector import Vector
from oasis_linalg.vector import vector_type


def test_dimension_inferred_from_values() -> None:
    """Checks direct construction picks the class for the input length."""
    vec: Vector = Vector([1.0, 2.0, 3.0, 4.0])
    assert vec.dimension == 4
    assert type(vec) is vector_type(4)
    assert isinstance(Vector([1.0, 2.0, 3.0]), Vec3)


def test_vector_type_is_cached() -> None:
    """Checks one class exists per dimension."""
    assert vector_type(5) is vector_type(5)
    assert Vector.of(5) is vector_type(5)
    assert vector_type(3) is Vec3


def test_invalid_dimension_rejected() -> None:
    """Checks non-positive and non-int dimensions are rejected."""
    with pytest.raises(DimensionError):
        vector_type(0)
    with pytest.raises(DimensionError):
        vector_type(-2)
    with pytest.raises(DimensionError):
        vector_type(True)
    with pytest.raises(DimensionError):
        Vector([])


def test_new_rejects_wrong_length() -> None:
    """Checks a fixed-dimension class rejects mismatched values."""
    with pytest.raises(DimensionError):
        vector_type(4).new([1.0, 2.0, 3.0])
    with pytest.raises(DimensionError):
        Vector([[1.0, 2.0], [3.0, 4.0]])


def test_zero_requires_fixed_dimension() -> None:
    """Checks class constructors need a fixed dimension."""
    assert vector_type(2).zero() == Vector([0.0, 0.0])
    with pytest.raises(DimensionError):
        Vector.zero()


def test_basis_is_orthonormal() -> None:
    """Checks basis vectors are unit vectors along each axis."""
    for n in (1, 2, 3, 5):
        basis: List[Vector] = vector_type(n).basis()
        assert len(basis) == n
        for i in range(n):
            for j in range(n):
                assert basis[i][j] == (1.0 if i == j else 0.0)
                assert basis[i].dot(basis[j]) == (1.0 if i == j else 0.0)


def test_basis_matches_identity_columns() -> None:
    """Checks the basis equals the decomposed identity matrix."""
    assert Vec3.basis() == Matrix.of(3).identity().decompose()


def test_scale_returns_new_vector() -> None:
    """Checks scaling leaves the original untouched."""
    vec: Vector = Vector([1.0, -2.0, 0.5])
    scaled: Vector = vec.scale(2.0)
    assert scaled == Vector([2.0, -4.0, 1.0])
    assert vec == Vector([1.0, -2.0, 0.5])


def test_dot_commutes() -> None:
    """Checks dot products are commutative."""
    a: Vector = Vector([1.0, 2.0, 3.0, 4.0])
    b: Vector = Vector([-2.0, 0.5, 1.0, 3.0])
    assert a.dot(b) == b.dot(a)
    assert a.dot(b) == 14.0


def test_norm() -> None:
    """Checks the Euclidean norm."""
    assert Vector([3.0, 4.0]).norm() == 5.0
    assert Vector([0.0, 0.0, 0.0]).norm() == 0.0
    assert math.isclose(Vector([1.0, 1.0, 1.0, 1.0]).norm(), 2.0)


def test_normalize_unit_norm() -> None:
    """Checks normalization yields unit norm."""
    unit: Vector = Vector([3.0, 0.0, 4.0]).normalize()
    assert np.isclose(unit.norm(), 1.0)
    assert unit.almost_equal(Vector([0.6, 0.0, 0.8]))


def test_normalize_zero_propagates_nan() -> None:
    """Checks normalizing the zero vector yields NaN without raising."""
    result: Vector = vector_type(3).zero().normalize()
    assert np.all(np.isnan(result.to_array()))


def test_add_and_sub() -> None:
    """Checks elementwise addition and subtraction."""
    a: Vector = Vector([1.0, 2.0])
    b: Vector = Vector([0.5, -1.0])
    assert a.add(b) == Vector([1.5, 1.0])
    assert a.sub(b) == Vector([0.5, 3.0])
    assert a + b == a.add(b)
    assert a - b == a.sub(b)


def test_dimension_mismatch_raises() -> None:
    """Checks binary operations reject other dimensions."""
    a: Vector = Vector([1.0, 2.0])
    b: Vector = Vector([1.0, 2.0, 3.0])
    with pytest.raises(DimensionError):
        a.add(b)
    with pytest.raises(DimensionError):
        a - b
    with pytest.raises(DimensionError):
        a.dot(b)
    with pytest.raises(DimensionError):
        a.mult(Matrix.of(3).identity())


def test_indexing() -> None:
    """Checks index reads, writes and bounds."""
    vec: Vector = Vector([1.0, 2.0, 3.0])
    assert vec[2] == 3.0
    vec[0] = 7.5
    assert vec.tolist() == [7.5, 2.0, 3.0]
    assert len(vec) == 3
    assert list(vec) == [7.5, 2.0, 3.0]
    with pytest.raises(IndexError):
        vec[3]
    with pytest.raises(IndexError):
        vec[-1]


def test_value_semantics() -> None:
    """Checks vectors never alias their inputs or each other."""
    source: np.ndarray = np.array([1.0, 2.0, 3.0])
    vec: Vector = Vector(source)
    source[0] = 100.0
    assert vec[0] == 1.0

    copy: Vector = vec.copy()
    copy[1] = -1.0
    assert vec[1] == 2.0

    exported: np.ndarray = vec.to_array()
    exported[2] = 0.0
    assert vec[2] == 3.0


def test_mult_identity() -> None:
    """Checks multiplying by the identity returns the same vector."""
    rng: np.random.Generator = np.random.default_rng(3)
    for n in (1, 2, 3, 6):
        vec: Vector = Vector(rng.normal(size=n))
        identity: Matrix = Matrix.of(n).identity()
        assert vec.mult(identity) == vec
        assert identity.mult(vec) == vec


def test_mult_sums_over_rows() -> None:
    """Checks output[i] is the sum over j of matrix[i, j] * self[j]."""
    matrix: Matrix = Matrix([[1.0, 2.0], [3.0, 4.0]])
    vec: Vector = Vector([1.0, -1.0])
    assert vec.mult(matrix) == Vector([-1.0, -1.0])
    assert vec.mult(matrix) == matrix.mult(vec)


def test_check_bounds() -> None:
    """Checks optional per-coordinate bounds."""
    lower: List[float | None] = [0.0, None, None]
    upper: List[float | None] = [None, 5.0, None]
    assert not Vector([3.0, 10.0, -2.0]).check(lower, upper)
    assert Vector([3.0, 4.0, -2.0]).check(lower, upper)
    assert not Vector([-1.0, 4.0, -2.0]).check(lower, upper)
    assert Vector([0.0, 5.0, 1e9]).check(lower, upper)


def test_check_rejects_wrong_bound_length() -> None:
    """Checks bounds must match the dimension."""
    with pytest.raises(DimensionError):
        Vector([1.0, 2.0]).check([None], [None, None])


def test_equality_and_repr() -> None:
    """Checks structural equality and debug representation."""
    assert Vector([1.0, 2.0]) == Vector([1.0, 2.0])
    assert Vector([1.0, 2.0]) != Vector([1.0, 2.5])
    assert Vector([1.0, 2.0]) != Vector([1.0, 2.0, 0.0])
    assert repr(Vector([1.0, 2.0])) == "Vector2([1.0, 2.0])"
    assert repr(Vector([1.0, 2.0, 3.0])) == "Vec3([1.0, 2.0, 3.0])"


def test_pickle_keeps_dimension() -> None:
    """Checks vectors survive pickling with their class."""
    vec: Vector = Vector([1.0, 2.0, 3.0, 4.0])
    restored: Vector = pickle.loads(pickle.dumps(vec))
    assert restored == vec
    assert type(restored) is vector_type(4)


def test_three_dimensional_operations_only_on_vec3() -> None:
    """Checks cross and rotate are absent for other dimensions."""
    assert not hasattr(Vector([1.0, 2.0, 3.0, 4.0]), "cross")
    assert not hasattr(Vector([1.0, 2.0]), "rotate")
    assert hasattr(Vector([1.0, 2.0, 3.0]), "cross")
