################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of geomkernel
#
#  SPDX-License-Identifier: Apache-2.0
#
################################################################################

"""High-level configuration wrapper for the geometry kernel."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any
from typing import Optional
from typing import TypeVar

from geomkernel.transform.affine_matrix import AffineMatrix3
from geomkernel.transform.transform import Transform

from .kernel_params import KernelParams
from .kernel_params import KernelParamsError


TransformT = TypeVar("TransformT", bound=Transform)


class KernelConfigError(Exception):
    """Raised when kernel configuration validation fails."""


@dataclass(frozen=True)
class KernelConfig:
    """Convenience wrapper around kernel parameters."""

    params: KernelParams

    def __init__(self, params: KernelParams) -> None:
        """Initialize the configuration wrapper and validate."""
        object.__setattr__(self, "params", params)
        self.validate()

    @classmethod
    def from_yaml(cls, path: str | Path) -> KernelConfig:
        """Load and validate a configuration file."""
        try:
            params: KernelParams = KernelParams.load_yaml(path)
        except KernelParamsError as exc:
            raise KernelConfigError(str(exc)) from exc
        return cls(params)

    def validate(self) -> None:
        """Validate parameter invariants and cross-field policies."""
        try:
            self.params.validate()
        except KernelParamsError as exc:
            raise KernelConfigError(str(exc)) from exc

        if self.params.tolerance.invert_eps >= 1.0:
            raise KernelConfigError(
                "tolerance.invert_eps must be below 1 so unit scale stays invertible"
            )

        if self.params.tolerance.singular_eps >= 1.0:
            raise KernelConfigError(
                "tolerance.singular_eps must be below 1 so the identity stays "
                "invertible"
            )

    def approx_eps(self) -> float:
        """Return the approximate-equality tolerance."""
        return self.params.tolerance.approx_eps

    def invert_eps(self) -> float:
        """Return the decomposed-scale singularity tolerance."""
        return self.params.tolerance.invert_eps

    def singular_eps(self) -> float:
        """Return the matrix-determinant singularity tolerance."""
        return self.params.tolerance.singular_eps

    def inversion_eps(self, transform: Transform) -> float:
        """Return the singularity tolerance for a transform representation.

        Matrix transforms are judged by their determinant, every other
        representation by its scale.
        """
        if isinstance(transform, AffineMatrix3):
            return self.singular_eps()
        return self.invert_eps()

    def invert(self, transform: TransformT) -> Optional[TransformT]:
        """Invert a transform with the configured tolerance."""
        return transform.invert(self.inversion_eps(transform))

    def invert_self(self, transform: Transform) -> bool:
        """Invert a transform in place with the configured tolerance."""
        return transform.invert_self(self.inversion_eps(transform))

    def almost_equal(self, a: Any, b: Any) -> bool:
        """Compare two kernel values with the configured tolerance."""
        return bool(a.almost_equal(b, self.approx_eps()))
