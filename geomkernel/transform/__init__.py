################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of geomkernel
#
#  SPDX-License-Identifier: Apache-2.0
#
################################################################################

"""Affine transform representations."""

from __future__ import annotations

from geomkernel.transform.affine_matrix import AffineMatrix3
from geomkernel.transform.builder import Transform3D
from geomkernel.transform.builder import Transform3DIntermediate
from geomkernel.transform.decomposed import Decomposed
from geomkernel.transform.transform import Transform


__all__ = [
    "AffineMatrix3",
    "Decomposed",
    "Transform",
    "Transform3D",
    "Transform3DIntermediate",
]
