################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Exceptions raised by the fixed-dimension linear algebra core."""


class LinalgError(ValueError):
    """Base class for linear algebra errors."""


class DimensionError(LinalgError):
    """Raised when operand dimensions do not match the fixed dimension."""


class LinalgParamsError(LinalgError):
    """Raised when linear algebra parameter validation fails."""
