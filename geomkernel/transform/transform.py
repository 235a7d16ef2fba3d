################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of geomkernel
#
#  SPDX-License-Identifier: Apache-2.0
#
################################################################################
"""Abstract contract shared by every affine transform representation."""

from __future__ import annotations

import abc
import dataclasses
from typing import Any
from typing import Optional
from typing import TypeVar

from geomkernel.geometry_types.point import Point
from geomkernel.geometry_types.point import point_type
from geomkernel.geometry_types.ray import Ray
from geomkernel.geometry_types.vector import Vector


TransformT = TypeVar("TransformT", bound="Transform")


class Transform(abc.ABC):
    """An affine transformation that can be applied to points and vectors.

    Points are moved by the full map, vectors only by its linear part:
    translation never affects a displacement.

    Composition order:
        ``a.concat(b)`` is the transform that applies ``b`` first and then
        ``a``. Equivalently ``b`` happens in ``a``'s local frame, which matches
        the matrix product ``A @ B`` acting on column vectors.

    Subclasses are frozen dataclasses; the ``*_self`` helpers swap their field
    values for those of a freshly computed result.
    """

    @classmethod
    @abc.abstractmethod
    def identity(cls: type[TransformT]) -> TransformT:
        """Return the transform that leaves everything unchanged."""

    @abc.abstractmethod
    def transform_vector(self, vec: Vector) -> Vector:
        """Apply the linear part of the transform to a vector."""

    @abc.abstractmethod
    def transform_point(self, point: Point) -> Point:
        """Apply the full transform to a point."""

    @abc.abstractmethod
    def concat(self: TransformT, other: TransformT) -> TransformT:
        """Return the transform applying ``other`` first, then this one."""

    @abc.abstractmethod
    def invert(
        self: TransformT, eps: Optional[float] = None
    ) -> Optional[TransformT]:
        """Return the inverse, or None if it is singular within ``eps``.

        ``None`` selects the default tolerance of the representation.
        """

    def transform_ray(self, ray: Ray) -> Ray:
        """Move the ray origin as a point and turn its direction as a vector."""
        return Ray(
            self.transform_point(ray.origin), self.transform_vector(ray.direction)
        )

    def transform_as_point(self, vec: Vector) -> Vector:
        """Transform a vector as if it were a point, returning a vector."""
        point: Point = point_type(vec.DIM).from_vector(vec)
        return self.transform_point(point).to_vector()

    def concat_self(self: TransformT, other: TransformT) -> None:
        """Replace this transform with ``self.concat(other)``."""
        self._assign(self.concat(other))

    def invert_self(self, eps: Optional[float] = None) -> bool:
        """Replace this transform with its inverse.

        Returns False and leaves the transform unchanged when it is singular.
        """
        inverse: Optional[Transform] = self.invert(eps)
        if inverse is None:
            return False
        self._assign(inverse)
        return True

    def _assign(self, other: Any) -> None:
        for field in dataclasses.fields(self):  # type: ignore[arg-type]
            object.__setattr__(self, field.name, getattr(other, field.name))
