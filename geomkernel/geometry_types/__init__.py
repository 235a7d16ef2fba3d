################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of geomkernel
#
#  SPDX-License-Identifier: Apache-2.0
#
################################################################################

"""Point, vector and ray value types."""

from __future__ import annotations

from geomkernel.geometry_types.point import Point
from geomkernel.geometry_types.point import Point2
from geomkernel.geometry_types.point import Point3
from geomkernel.geometry_types.point import point_type
from geomkernel.geometry_types.ray import Ray
from geomkernel.geometry_types.vector import Vector
from geomkernel.geometry_types.vector import Vector2
from geomkernel.geometry_types.vector import Vector3
from geomkernel.geometry_types.vector import Vector4
from geomkernel.geometry_types.vector import vector_type


__all__ = [
    "Point",
    "Point2",
    "Point3",
    "Ray",
    "Vector",
    "Vector2",
    "Vector3",
    "Vector4",
    "point_type",
    "vector_type",
]
