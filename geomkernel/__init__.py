################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of geomkernel
#
#  SPDX-License-Identifier: Apache-2.0
#
################################################################################

"""
Points, vectors and affine transforms in 2D and 3D
"""

from __future__ import annotations

from geomkernel.config.kernel_config import KernelConfig
from geomkernel.geometry_types.point import Point2
from geomkernel.geometry_types.point import Point3
from geomkernel.geometry_types.ray import Ray
from geomkernel.geometry_types.vector import Vector2
from geomkernel.geometry_types.vector import Vector3
from geomkernel.geometry_types.vector import Vector4
from geomkernel.rotation.quat import Quaternion
from geomkernel.rotation.rotation import Rotation
from geomkernel.rotation.rotation_matrix import Rotation2
from geomkernel.rotation.rotation_matrix import RotationMatrix3
from geomkernel.transform.affine_matrix import AffineMatrix3
from geomkernel.transform.builder import Transform3D
from geomkernel.transform.builder import Transform3DIntermediate
from geomkernel.transform.decomposed import Decomposed
from geomkernel.transform.transform import Transform


__all__ = [
    "AffineMatrix3",
    "Decomposed",
    "KernelConfig",
    "Point2",
    "Point3",
    "Quaternion",
    "Ray",
    "Rotation",
    "Rotation2",
    "RotationMatrix3",
    "Transform",
    "Transform3D",
    "Transform3DIntermediate",
    "Vector2",
    "Vector3",
    "Vector4",
]
