################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of geomkernel
#
#  SPDX-License-Identifier: Apache-2.0
#
################################################################################

"""Structured configuration schema for the geometry kernel."""

from __future__ import annotations

import math
from dataclasses import dataclass
from dataclasses import fields
from dataclasses import replace
from pathlib import Path
from typing import Any

import yaml

from geomkernel.math_utils.units import Tolerance


# Component-wise tolerance for approximate equality
TOLERANCE_APPROX_EPS: float = Tolerance.APPROX_EPS
# Scale magnitude at or below which a decomposed transform is not invertible
TOLERANCE_INVERT_EPS: float = Tolerance.INVERT_EPS
# Determinant magnitude at or below which a matrix transform is not invertible
TOLERANCE_SINGULAR_EPS: float = Tolerance.SINGULAR_EPS


class KernelParamsError(Exception):
    """Raised when kernel parameter validation fails."""


def _require_non_negative(value: float, name: str) -> None:
    """Require a finite, non-negative value."""
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        raise KernelParamsError(f"{name} must be a number")
    if not math.isfinite(value):
        raise KernelParamsError(f"{name} must be finite")
    if value < 0.0:
        raise KernelParamsError(f"{name} must be non-negative")


@dataclass(frozen=True)
class ToleranceParams:
    """Tolerances used by comparisons and singularity checks."""

    # Component-wise tolerance for approximate equality
    approx_eps: float = TOLERANCE_APPROX_EPS
    # Scale magnitude treated as zero when inverting a decomposed transform
    invert_eps: float = TOLERANCE_INVERT_EPS
    # Determinant magnitude treated as zero when inverting a matrix transform
    singular_eps: float = TOLERANCE_SINGULAR_EPS


@dataclass(frozen=True)
class KernelParams:
    """Complete configuration tree for the geometry kernel."""

    tolerance: ToleranceParams

    @classmethod
    def defaults(cls) -> KernelParams:
        """Return the default parameter tree."""
        return cls(tolerance=ToleranceParams())

    @classmethod
    def from_nested_dict(cls, data: dict[str, Any]) -> KernelParams:
        """Build parameters from a nested dict, filling gaps with defaults."""
        if not isinstance(data, dict):
            raise KernelParamsError("parameters must be a mapping")

        unknown: set[str] = set(data) - {"tolerance"}
        if unknown:
            raise KernelParamsError(f"unknown namespaces: {sorted(unknown)}")

        tolerance_data: Any = data.get("tolerance") or {}
        if not isinstance(tolerance_data, dict):
            raise KernelParamsError("tolerance must be a mapping")
        known: set[str] = {field.name for field in fields(ToleranceParams)}
        unknown = set(tolerance_data) - known
        if unknown:
            raise KernelParamsError(f"unknown tolerance keys: {sorted(unknown)}")

        params: KernelParams = cls(tolerance=ToleranceParams(**tolerance_data))
        params.validate()
        return params

    @classmethod
    def load_yaml(cls, path: str | Path) -> KernelParams:
        """Load parameters from a YAML file."""
        with open(path, "r", encoding="utf-8") as handle:
            try:
                data: Any = yaml.safe_load(handle)
            except yaml.YAMLError as exc:
                raise KernelParamsError(f"invalid YAML in {path}: {exc}") from exc

        return cls.from_nested_dict(data or {})

    def validate(self) -> None:
        """Validate parameter invariants and constraints."""
        _require_non_negative(self.tolerance.approx_eps, "tolerance.approx_eps")
        _require_non_negative(self.tolerance.invert_eps, "tolerance.invert_eps")
        _require_non_negative(self.tolerance.singular_eps, "tolerance.singular_eps")

    def replace(self, **namespace_overrides: Any) -> KernelParams:
        """Return a modified copy of the parameters."""
        return replace(self, **namespace_overrides)

    def as_nested_dict(self) -> dict[str, Any]:
        """Return a nested dict representation for debugging."""
        return _dataclass_to_dict(self)


def _dataclass_to_dict(value: Any) -> Any:
    """Convert dataclasses into plain Python values."""
    if hasattr(value, "__dataclass_fields__"):
        return {
            field.name: _dataclass_to_dict(getattr(value, field.name))
            for field in fields(value)
        }
    return value
