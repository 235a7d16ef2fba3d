################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of geomkernel
#
#  SPDX-License-Identifier: Apache-2.0
#
################################################################################
"""Fluent construction of homogeneous matrices from a 3D transform.

Each builder step multiplies a new matrix on the left of everything
accumulated so far, so the step requested last is applied last::

    t = Transform3D(2.0, Quaternion.identity(), Vector3.from_xyz(1, 0, 0))
    t.scale().translate().as_matrix4()  # scale first, then translate
"""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import replace

import numpy as np
from numpy.typing import NDArray

from geomkernel.geometry_types.vector import Vector3
from geomkernel.math_utils.linalg import Linalg
from geomkernel.math_utils.validation import as_float_matrix
from geomkernel.rotation.quat import Quaternion

from .affine_matrix import AffineMatrix3
from .decomposed import Decomposed


class Transform3D:
    """A 3D scale, quaternion rotation and displacement."""

    def __init__(self, scale: float, rot: Quaternion, disp: Vector3) -> None:
        """Initialize the wrapped decomposed transform."""
        if not isinstance(rot, Quaternion):
            raise ValueError("rot must be a Quaternion")
        if not isinstance(disp, Vector3):
            raise ValueError("disp must be a Vector3")
        self._decomposed: Decomposed = Decomposed(scale, rot, disp)

    def get(self) -> Decomposed:
        """Return the wrapped decomposed transform."""
        return self._decomposed

    def translate(self) -> "Transform3DIntermediate":
        """Start a chain with the displacement step."""
        return self._start().translate()

    def scale(self) -> "Transform3DIntermediate":
        """Start a chain with the uniform scale step."""
        return self._start().scale()

    def rotate(self) -> "Transform3DIntermediate":
        """Start a chain with the rotation step."""
        return self._start().rotate()

    def _start(self) -> "Transform3DIntermediate":
        # Chains own a copy; in-place helpers on get() must not reach them
        return Transform3DIntermediate(
            replace(self._decomposed), np.eye(4, dtype=float)
        )


@dataclass(frozen=True, eq=False)
class Transform3DIntermediate:
    """A partially built matrix plus the transform its steps are read from.

    Each chain holds its own copy of the decomposed value, taken when the
    chain starts. Later changes to the source do not affect it, and the chain
    may outlive the ``Transform3D`` that started it.
    """

    decomposed: Decomposed
    mat: NDArray[np.float64]

    def __post_init__(self) -> None:
        """Validate the accumulated matrix and freeze storage."""
        object.__setattr__(self, "mat", as_float_matrix(self.mat, (4, 4), "mat"))

    def translate(self) -> "Transform3DIntermediate":
        """Apply the displacement after the accumulated steps."""
        step: NDArray[np.float64] = Linalg.translation_matrix(
            self.decomposed.disp.data
        )
        return self._then(step)

    def scale(self) -> "Transform3DIntermediate":
        """Apply the uniform scale after the accumulated steps."""
        step: NDArray[np.float64] = Linalg.scale_matrix(
            np.full(3, self.decomposed.scale)
        )
        return self._then(step)

    def rotate(self) -> "Transform3DIntermediate":
        """Apply the rotation after the accumulated steps."""
        step: NDArray[np.float64] = Linalg.extend_linear(
            self.decomposed.rot.as_matrix()
        )
        return self._then(step)

    def as_matrix4(self) -> NDArray[np.float64]:
        """Return a writeable copy of the accumulated matrix."""
        return np.array(self.mat, dtype=float)

    def to_affine(self) -> AffineMatrix3:
        """Return the accumulated matrix as a matrix transform."""
        return AffineMatrix3(self.mat)

    def _then(self, step: NDArray[np.float64]) -> "Transform3DIntermediate":
        return Transform3DIntermediate(self.decomposed, step @ self.mat)
