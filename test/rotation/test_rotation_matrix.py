################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of geomkernel
#
#  SPDX-License-Identifier: Apache-2.0
#
################################################################################
"""Tests for matrix rotations."""

from __future__ import annotations

import numpy as np
import pytest
from numpy.typing import NDArray

from geomkernel.geometry_types.point import Point2
from geomkernel.geometry_types.vector import Vector2
from geomkernel.geometry_types.vector import Vector3
from geomkernel.math_utils.linalg import SO3
from geomkernel.rotation.quat import Quaternion
from geomkernel.rotation.rotation import Rotation
from geomkernel.rotation.rotation_matrix import Rotation2
from geomkernel.rotation.rotation_matrix import RotationMatrix3


def test_identity_is_exact() -> None:
    """Checks identity rotations keep the exact identity matrix."""
    assert np.array_equal(RotationMatrix3.identity().as_matrix(), np.eye(3))
    assert np.array_equal(Rotation2.identity().as_matrix(), np.eye(2))
    v: Vector3 = Vector3.from_xyz(1.0, -2.0, 0.5)
    assert RotationMatrix3.identity().rotate_vector(v) == v


def test_satisfies_rotation_protocol() -> None:
    """Checks matrix rotations satisfy the rotation protocol."""
    assert isinstance(RotationMatrix3.identity(), Rotation)
    assert isinstance(Rotation2.identity(), Rotation)


def test_inverse_is_transpose() -> None:
    """Checks the inverse of a rotation matrix is its transpose."""
    R: RotationMatrix3 = RotationMatrix3.from_axis_angle(Vector3.unit_x(), 0.4)
    inv: RotationMatrix3 = R.invert()
    assert np.array_equal(inv.as_matrix(), R.as_matrix().T)
    assert R.concat(inv).almost_equal(RotationMatrix3.identity())


def test_concat_matches_matrix_product() -> None:
    """Checks composition multiplies matrices in order."""
    a: RotationMatrix3 = RotationMatrix3.from_axis_angle(Vector3.unit_z(), 0.3)
    b: RotationMatrix3 = RotationMatrix3.from_axis_angle(Vector3.unit_y(), -0.8)
    expected: NDArray[np.float64] = a.as_matrix() @ b.as_matrix()
    assert np.allclose(a.concat(b).as_matrix(), expected)


def test_concat_rejects_mixed_types() -> None:
    """Checks 2D and 3D rotations cannot be composed."""
    with pytest.raises(TypeError):
        Rotation2.identity().concat(RotationMatrix3.identity())  # type: ignore[arg-type]


def test_projects_non_orthonormal_input() -> None:
    """Checks drifted matrices are projected onto SO(3)."""
    drifted: NDArray[np.float64] = SO3.exp(
        np.array([0.1, 0.2, 0.3], dtype=float)
    ) + 1e-3 * np.ones((3, 3))
    R: RotationMatrix3 = RotationMatrix3(drifted)
    mat: NDArray[np.float64] = R.as_matrix()
    assert np.allclose(mat.T @ mat, np.eye(3), atol=1e-9)
    assert np.isclose(np.linalg.det(mat), 1.0)


def test_quaternion_conversion() -> None:
    """Checks conversion to and from quaternions."""
    q: Quaternion = Quaternion.from_axis_angle(Vector3.from_xyz(1.0, 1.0, 0.0), 1.2)
    R: RotationMatrix3 = RotationMatrix3.from_quaternion(q)
    assert np.allclose(R.as_matrix(), q.as_matrix())
    assert R.to_quaternion().almost_equal(q)


def test_as_matrix_returns_copy() -> None:
    """Checks callers cannot mutate a rotation through as_matrix."""
    R: RotationMatrix3 = RotationMatrix3.identity()
    mat: NDArray[np.float64] = R.as_matrix()
    mat[0, 0] = 5.0
    assert R == RotationMatrix3.identity()


def test_rotation2_angle() -> None:
    """Checks planar rotations by angle."""
    r: Rotation2 = Rotation2.from_angle(np.pi / 2.0)
    assert np.isclose(r.angle(), np.pi / 2.0)
    assert r.rotate_vector(Vector2.from_xy(1.0, 0.0)).almost_equal(
        Vector2.from_xy(0.0, 1.0)
    )
    assert r.rotate_point(Point2.from_xy(0.0, 1.0)).almost_equal(
        Point2.from_xy(-1.0, 0.0)
    )
    assert np.isclose(r.concat(r).angle(), np.pi)
    assert np.isclose(r.invert().angle(), -np.pi / 2.0)


def test_rejects_wrong_shape() -> None:
    """Checks malformed matrices are rejected."""
    with pytest.raises(ValueError):
        RotationMatrix3(np.eye(2))
    with pytest.raises(ValueError):
        Rotation2(np.full((2, 2), np.inf))
    with pytest.raises(ValueError):
        Rotation2.identity().rotate_vector(Vector3.unit_x())  # type: ignore[arg-type]
