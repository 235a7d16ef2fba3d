################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of geomkernel
#
#  SPDX-License-Identifier: Apache-2.0
#
################################################################################
"""Rotation capability consumed by the transform types."""

from __future__ import annotations

from typing import Any
from typing import Protocol
from typing import TypeVar
from typing import runtime_checkable

import numpy as np
from numpy.typing import NDArray

from geomkernel.geometry_types.point import Point
from geomkernel.geometry_types.vector import Vector


RotationT = TypeVar("RotationT", bound="Rotation")
VectorT = TypeVar("VectorT", bound=Vector)
PointT = TypeVar("PointT", bound=Point)


@runtime_checkable
class Rotation(Protocol):
    """Rotation about the origin of an N-dimensional space.

    Implementations compose associatively and have an exact inverse.
    ``a.concat(b)`` rotates by ``b`` first, then by ``a``.
    """

    DIM: int

    @classmethod
    def identity(cls: type[RotationT]) -> RotationT: ...

    def rotate_vector(self, vec: VectorT) -> VectorT: ...

    def rotate_point(self, point: PointT) -> PointT: ...

    def concat(self: RotationT, other: RotationT) -> RotationT: ...

    def invert(self: RotationT) -> RotationT: ...

    def as_matrix(self) -> NDArray[np.float64]: ...

    def almost_equal(self, other: Any, eps: float = ...) -> bool: ...


def require_same_rotation(rot: Any, other: Any) -> None:
    """Raise TypeError unless both rotations share a representation."""
    if type(rot) is not type(other):
        raise TypeError(
            f"cannot concatenate {type(rot).__name__} with {type(other).__name__}"
        )


def require_dim(value: Any, dim: int, name: str) -> None:
    """Raise ValueError unless a point or vector has the given dimension."""
    if getattr(value, "DIM", None) != dim:
        raise ValueError(f"{name} must be {dim}-dimensional")
