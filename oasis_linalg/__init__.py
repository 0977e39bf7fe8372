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
Fixed-dimension linear algebra: vectors, square matrices, 3D rotations,
Gauss-Jordan inversion and genetic crossover of vectors
"""

from __future__ import annotations

from oasis_linalg.config.linalg_params import DisplayParams
from oasis_linalg.config.linalg_params import InversionParams
from oasis_linalg.config.linalg_params import LinalgParams
from oasis_linalg.config.params_yaml import load_params_yaml
from oasis_linalg.linalg_errors import DimensionError
from oasis_linalg.linalg_errors import LinalgError
from oasis_linalg.linalg_errors import LinalgParamsError
from oasis_linalg.math_utils.random_source import RandomSource
from oasis_linalg.math_utils.random_source import default_random_source
from oasis_linalg.matrix import Mat3
from oasis_linalg.matrix import Matrix
from oasis_linalg.matrix import matrix_type
from oasis_linalg.vector import Vec3
from oasis_linalg.vector import Vector
from oasis_linalg.vector import vector_type


__all__ = [
    "DimensionError",
    "DisplayParams",
    "InversionParams",
    "LinalgError",
    "LinalgParams",
    "LinalgParamsError",
    "Mat3",
    "Matrix",
    "RandomSource",
    "Vec3",
    "Vector",
    "default_random_source",
    "load_params_yaml",
    "matrix_type",
    "vector_type",
]
