################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of geomkernel
#
#  SPDX-License-Identifier: Apache-2.0
#
################################################################################
"""Affine transforms stored as a single 4x4 homogeneous matrix."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from geomkernel.geometry_types.point import Point3
from geomkernel.geometry_types.vector import Vector3
from geomkernel.geometry_types.vector import Vector4
from geomkernel.math_utils.linalg import Linalg
from geomkernel.math_utils.units import Tolerance
from geomkernel.math_utils.validation import as_float_matrix
from geomkernel.rotation.rotation import Rotation
from geomkernel.rotation.rotation import require_dim

from .transform import Transform


_LOG: logging.Logger = logging.getLogger(__name__)

# Bottom row of every affine homogeneous matrix
AFFINE_BOTTOM_ROW: NDArray[np.float64] = np.array([0.0, 0.0, 0.0, 1.0])


@dataclass(frozen=True, eq=False)
class AffineMatrix3(Transform):
    """A 3D affine map as a homogeneous matrix.

    Covers translation, rotation, non-uniform scale and shear. The bottom row
    is assumed to be ``[0, 0, 0, 1]`` but is not enforced; see ``is_affine``.
    """

    mat: NDArray[np.float64]

    def __post_init__(self) -> None:
        """Validate the matrix shape and freeze storage."""
        object.__setattr__(self, "mat", as_float_matrix(self.mat, (4, 4), "mat"))

    @classmethod
    def identity(cls) -> "AffineMatrix3":
        """Return the identity transform."""
        return cls(np.eye(4, dtype=float))

    @staticmethod
    def from_translation(offset: Vector3) -> "AffineMatrix3":
        """Create a pure translation."""
        require_dim(offset, 3, "offset")
        return AffineMatrix3(Linalg.translation_matrix(offset.data))

    @staticmethod
    def from_scale(factor: float | Vector3) -> "AffineMatrix3":
        """Create a scale about the origin, uniform or per axis."""
        factors: NDArray[np.float64]
        if isinstance(factor, Vector3):
            factors = np.asarray(factor.data, dtype=float)
        else:
            factors = np.full(3, float(factor))
        return AffineMatrix3(Linalg.scale_matrix(factors))

    @staticmethod
    def from_rotation(rotation: Rotation) -> "AffineMatrix3":
        """Create a rotation about the origin."""
        if rotation.DIM != 3:
            raise ValueError("rotation must be 3-dimensional")
        return AffineMatrix3(Linalg.extend_linear(rotation.as_matrix()))

    def transform_vector(self, vec: Vector3) -> Vector3:
        """Multiply ``[v, 0]`` so the translation column drops out."""
        require_dim(vec, 3, "vec")
        extended: Vector4 = vec.extend(0.0)
        return Vector4(self.mat @ extended.data).truncate()

    def transform_point(self, point: Point3) -> Point3:
        """Multiply ``[p, 1]`` and divide by the homogeneous coordinate."""
        require_dim(point, 3, "point")
        result: Vector4 = Vector4(self.mat @ point.to_homogeneous().data)
        return Point3.from_homogeneous(result)

    def concat(self, other: "AffineMatrix3") -> "AffineMatrix3":
        """Return the matrix product ``self @ other``."""
        if not isinstance(other, AffineMatrix3):
            raise TypeError(f"cannot concatenate AffineMatrix3 with {type(other)}")
        return AffineMatrix3(self.mat @ other.mat)

    def invert(self, eps: Optional[float] = None) -> Optional["AffineMatrix3"]:
        """Return the inverse matrix, or None when the determinant is ~0.

        ``eps`` defaults to ``Tolerance.SINGULAR_EPS``. The threshold is
        absolute: the determinant scales with the cube of a uniform scale, so
        ``from_scale(1e-5)`` (det 1e-15) counts as singular at the default.
        Pass a smaller ``eps`` for such matrices.
        """
        tol: float = Tolerance.SINGULAR_EPS if eps is None else eps
        if Linalg.is_singular(self.mat, tol):
            _LOG.debug("Matrix transform is singular within eps=%s", tol)
            return None
        return AffineMatrix3(np.linalg.inv(self.mat))

    def as_matrix4(self) -> NDArray[np.float64]:
        """Return a writeable copy of the homogeneous matrix."""
        return np.array(self.mat, dtype=float)

    def is_affine(self, eps: float = Tolerance.APPROX_EPS) -> bool:
        """Return True when the bottom row is ``[0, 0, 0, 1]`` within eps."""
        return bool(np.allclose(self.mat[3], AFFINE_BOTTOM_ROW, rtol=0.0, atol=eps))

    def almost_equal(self, other: Any, eps: float = Tolerance.APPROX_EPS) -> bool:
        """Check element-wise equality within eps."""
        if not isinstance(other, AffineMatrix3):
            return False
        return bool(np.allclose(self.mat, other.mat, rtol=0.0, atol=eps))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AffineMatrix3):
            return NotImplemented
        return bool(np.array_equal(self.mat, other.mat))

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return str(self.mat.tolist())
