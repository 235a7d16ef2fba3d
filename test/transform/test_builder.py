################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of geomkernel
#
#  SPDX-License-Identifier: Apache-2.0
#
################################################################################
"""Tests for the fluent matrix builder."""

from __future__ import annotations

import numpy as np
import pytest
from numpy.typing import NDArray

from geomkernel.geometry_types.point import Point3
from geomkernel.geometry_types.vector import Vector3
from geomkernel.rotation.quat import Quaternion
from geomkernel.rotation.rotation_matrix import RotationMatrix3
from geomkernel.transform.affine_matrix import AffineMatrix3
from geomkernel.transform.builder import Transform3D
from geomkernel.transform.builder import Transform3DIntermediate
from geomkernel.transform.decomposed import Decomposed


def _apply(mat: NDArray[np.float64], point: Point3) -> Point3:
    return AffineMatrix3(mat).transform_point(point)


def test_get_returns_decomposed() -> None:
    """Checks the builder wraps a decomposed transform."""
    t: Transform3D = Transform3D(
        2.0, Quaternion.identity(), Vector3.from_xyz(1.0, 0.0, 0.0)
    )
    expected: Decomposed = Decomposed(
        2.0, Quaternion.identity(), Vector3.from_xyz(1.0, 0.0, 0.0)
    )
    assert t.get() == expected


def test_step_order_matters() -> None:
    """Checks the step requested last is applied last."""
    t: Transform3D = Transform3D(
        2.0, Quaternion.identity(), Vector3.from_xyz(1.0, 0.0, 0.0)
    )
    scale_then_translate: NDArray[np.float64] = t.scale().translate().as_matrix4()
    translate_then_scale: NDArray[np.float64] = t.translate().scale().as_matrix4()
    origin: Point3 = Point3.origin()
    assert _apply(scale_then_translate, origin) == Point3.from_xyz(1.0, 0.0, 0.0)
    assert _apply(translate_then_scale, origin) == Point3.from_xyz(2.0, 0.0, 0.0)


def test_each_step_multiplies_on_the_left() -> None:
    """Checks every step computes step @ previous."""
    q: Quaternion = Quaternion.from_axis_angle(Vector3.unit_y(), 0.4)
    disp: Vector3 = Vector3.from_xyz(1.0, -2.0, 0.5)
    t: Transform3D = Transform3D(3.0, q, disp)
    T: NDArray[np.float64] = AffineMatrix3.from_translation(disp).as_matrix4()
    R: NDArray[np.float64] = AffineMatrix3.from_rotation(q).as_matrix4()
    S: NDArray[np.float64] = AffineMatrix3.from_scale(3.0).as_matrix4()
    assert np.allclose(t.rotate().scale().translate().as_matrix4(), T @ S @ R)
    assert np.allclose(t.translate().rotate().as_matrix4(), R @ T)


def test_scale_rotate_translate_matches_decomposed() -> None:
    """Checks the conventional chain reproduces the decomposed matrix."""
    rng: np.random.Generator = np.random.default_rng(0)
    for _ in range(10):
        q: Quaternion = Quaternion.from_rotvec(rng.normal(size=3))
        disp: Vector3 = Vector3(rng.normal(size=3))
        t: Transform3D = Transform3D(float(rng.uniform(0.5, 2.0)), q, disp)
        built: NDArray[np.float64] = t.scale().rotate().translate().as_matrix4()
        assert np.allclose(built, t.get().as_matrix4())


def test_intermediates_are_independent() -> None:
    """Checks branching a chain leaves earlier intermediates unchanged."""
    t: Transform3D = Transform3D(
        2.0, Quaternion.identity(), Vector3.from_xyz(0.0, 1.0, 0.0)
    )
    first: Transform3DIntermediate = t.scale()
    before: NDArray[np.float64] = first.as_matrix4()
    first.translate()
    first.rotate()
    assert np.array_equal(first.as_matrix4(), before)
    assert first.decomposed == t.get()
    assert first.decomposed is not t.get()


def test_chain_unaffected_by_in_place_changes_to_source() -> None:
    """Checks in-place edits of get() do not reach chains already started."""
    t: Transform3D = Transform3D(
        2.0, Quaternion.identity(), Vector3.from_xyz(1.0, 0.0, 0.0)
    )
    chain: Transform3DIntermediate = t.scale()
    before: NDArray[np.float64] = chain.translate().as_matrix4()
    assert t.get().invert_self()
    after: NDArray[np.float64] = chain.translate().as_matrix4()
    assert np.array_equal(before, after)
    assert t.get().scale == 0.5
    restarted: NDArray[np.float64] = t.scale().translate().as_matrix4()
    assert np.allclose(restarted[:3, 3], [-0.5, 0.0, 0.0])


def test_to_affine() -> None:
    """Checks the accumulated matrix converts to a matrix transform."""
    t: Transform3D = Transform3D(
        1.0, Quaternion.identity(), Vector3.from_xyz(0.0, 0.0, 4.0)
    )
    affine: AffineMatrix3 = t.translate().to_affine()
    assert affine.transform_point(Point3.origin()) == Point3.from_xyz(0.0, 0.0, 4.0)


def test_rejects_other_rotation_types() -> None:
    """Checks the builder requires a quaternion and a 3D displacement."""
    with pytest.raises(ValueError):
        Transform3D(1.0, RotationMatrix3.identity(), Vector3.zero())  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        Transform3D(1.0, Quaternion.identity(), Point3.origin())  # type: ignore[arg-type]
