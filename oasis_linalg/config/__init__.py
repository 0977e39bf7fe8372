################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Configuration for the linear algebra core."""

from oasis_linalg.config.linalg_params import LinalgParams
from oasis_linalg.config.params_yaml import load_params_yaml


__all__ = ["LinalgParams", "load_params_yaml"]
