################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""YAML loading for linear algebra parameters."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from oasis_linalg.config.linalg_params import LinalgParams
from oasis_linalg.linalg_errors import LinalgParamsError


_LOG: logging.Logger = logging.getLogger(__name__)


def parse_params_yaml(text: str) -> LinalgParams:
    """Parse a YAML document into validated parameters.

    An empty document yields the default parameters.
    """
    try:
        data: Any = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise LinalgParamsError(f"Invalid parameter YAML: {exc}") from exc

    if data is None:
        return LinalgParams.defaults()
    if not isinstance(data, dict):
        raise LinalgParamsError("Parameter YAML must be a mapping")

    return LinalgParams.from_mapping(data)


def load_params_yaml(path: str | Path) -> LinalgParams:
    """Load validated parameters from a YAML file."""
    file_path: Path = Path(path)
    _LOG.debug("Loading linear algebra parameters from %s", file_path)
    return parse_params_yaml(file_path.read_text(encoding="utf-8"))
