################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of geomkernel
#
#  SPDX-License-Identifier: Apache-2.0
#
################################################################################

"""Rotation representations implementing the rotation capability."""

from __future__ import annotations

from geomkernel.rotation.quat import Quaternion
from geomkernel.rotation.rotation import Rotation
from geomkernel.rotation.rotation_matrix import Rotation2
from geomkernel.rotation.rotation_matrix import RotationMatrix3


__all__ = [
    "Quaternion",
    "Rotation",
    "Rotation2",
    "RotationMatrix3",
]
