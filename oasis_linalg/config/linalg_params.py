################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Structured configuration schema for the linear algebra core."""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import fields
from dataclasses import replace
from typing import Any
from typing import Mapping

from oasis_linalg.linalg_errors import LinalgParamsError


# Number of decimals used when rendering entries
DISPLAY_PRECISION: int = 8
# Extra width added to the widest rendered cell
DISPLAY_PADDING: int = 2

# Log a warning when inversion meets a zero or non-finite pivot
INVERSION_WARN_ON_SINGULAR_PIVOT: bool = True


def _require_int(value: Any, name: str) -> None:
    """Require an int value, rejecting bools."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise LinalgParamsError(f"{name} must be an int")


def _require_non_negative_int(value: Any, name: str) -> None:
    """Require a non-negative int value."""
    _require_int(value, name)
    if value < 0:
        raise LinalgParamsError(f"{name} must be non-negative")


def _require_bool(value: Any, name: str) -> None:
    """Require a bool value."""
    if not isinstance(value, bool):
        raise LinalgParamsError(f"{name} must be a bool")


@dataclass(frozen=True)
class DisplayParams:
    """Fixed-point rendering of vectors and matrices."""

    # Number of decimals used when rendering entries
    precision: int = DISPLAY_PRECISION
    # Extra width added to the widest rendered cell
    padding: int = DISPLAY_PADDING


@dataclass(frozen=True)
class InversionParams:
    """Diagnostics for Gauss-Jordan inversion."""

    # Log a warning when inversion meets a zero or non-finite pivot
    warn_on_singular_pivot: bool = INVERSION_WARN_ON_SINGULAR_PIVOT


@dataclass(frozen=True)
class LinalgParams:
    """Complete configuration tree for the linear algebra core."""

    display: DisplayParams
    inversion: InversionParams

    @classmethod
    def defaults(cls) -> LinalgParams:
        """Return the default parameter tree."""
        return cls(display=DisplayParams(), inversion=InversionParams())

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> LinalgParams:
        """Build a validated parameter tree from a nested mapping.

        Sections and keys that are absent keep their defaults. Unknown
        sections or keys raise LinalgParamsError.
        """
        sections: dict[str, type] = {
            "display": DisplayParams,
            "inversion": InversionParams,
        }
        overrides: dict[str, Any] = {}
        for section_name, section_values in mapping.items():
            section_type: type | None = sections.get(section_name)
            if section_type is None:
                raise LinalgParamsError(f"Unknown section: {section_name}")
            if section_values is None:
                continue
            if not isinstance(section_values, Mapping):
                raise LinalgParamsError(f"{section_name} must be a mapping")
            known: set[str] = {field.name for field in fields(section_type)}
            for key in section_values:
                if key not in known:
                    raise LinalgParamsError(f"Unknown key: {section_name}.{key}")
            overrides[section_name] = section_type(**dict(section_values))

        params: LinalgParams = cls.defaults().replace(**overrides)
        params.validate()
        return params

    def validate(self) -> None:
        """Validate parameter invariants and constraints."""
        _require_non_negative_int(self.display.precision, "display.precision")
        _require_non_negative_int(self.display.padding, "display.padding")
        _require_bool(
            self.inversion.warn_on_singular_pivot,
            "inversion.warn_on_singular_pivot",
        )

    def replace(self, **namespace_overrides: Any) -> LinalgParams:
        """Return a modified copy of the parameters."""
        return replace(self, **namespace_overrides)

    def as_nested_dict(self) -> dict[str, Any]:
        """Return a nested dict representation for debugging."""
        return {
            section.name: {
                field.name: getattr(getattr(self, section.name), field.name)
                for field in fields(getattr(self, section.name))
            }
            for section in fields(self)
        }
