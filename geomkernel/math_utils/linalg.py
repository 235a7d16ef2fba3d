################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of geomkernel
#
#  SPDX-License-Identifier: Apache-2.0
#
################################################################################
"""Linear algebra utilities for rotations and homogeneous matrices."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from .units import Tolerance
from .units import assert_finite


class SO3:
    """Rotation matrices of 3D space."""

    # Rotation angle below which the second-order series replaces Rodrigues
    SMALL_ANGLE: float = 1.0e-8

    @staticmethod
    def hat(w: NDArray[np.float64]) -> NDArray[np.float64]:
        """Return the matrix ``W`` with ``W @ v == cross(w, v)``."""
        vec: NDArray[np.float64] = np.asarray(w, dtype=float)
        Linalg.ensure_shape(vec, (3,), "w")
        assert_finite(vec, "w")
        return np.cross(np.eye(3, dtype=float), vec)

    @staticmethod
    def exp(w: NDArray[np.float64]) -> NDArray[np.float64]:
        """Return the rotation about ``w`` by ``|w|`` radians (Rodrigues)."""
        W: NDArray[np.float64] = SO3.hat(w)
        W2: NDArray[np.float64] = W @ W
        theta: float = float(np.linalg.norm(w))
        eye: NDArray[np.float64] = np.eye(3, dtype=float)
        if theta < SO3.SMALL_ANGLE:
            return eye + W + 0.5 * W2
        return (
            eye
            + (np.sin(theta) / theta) * W
            + ((1.0 - np.cos(theta)) / (theta * theta)) * W2
        )

    @staticmethod
    def project_to_so3(R: NDArray[np.float64]) -> NDArray[np.float64]:
        """Return the rotation closest to ``R`` in the Frobenius norm.

        Uses the polar factor ``U @ Vt`` of the SVD, flipping the last
        singular direction when that factor is a reflection.
        """
        mat: NDArray[np.float64] = np.asarray(R, dtype=float)
        Linalg.ensure_shape(mat, (3, 3), "R")
        assert_finite(mat, "R")
        U: NDArray[np.float64]
        Vt: NDArray[np.float64]
        U, _, Vt = np.linalg.svd(mat)
        if np.linalg.det(U @ Vt) < 0.0:
            U[:, -1] = -U[:, -1]
        return U @ Vt


class Linalg:
    """General linear algebra helpers."""

    @staticmethod
    def ensure_shape(x: NDArray[np.float64], shape: tuple[int, ...], name: str) -> None:
        """Ensure an array has the expected shape."""
        if x.shape != shape:
            raise ValueError(f"{name} must have shape {shape}")

    @staticmethod
    def translation_matrix(offset: NDArray[np.float64]) -> NDArray[np.float64]:
        """Build an (N+1)x(N+1) homogeneous translation matrix."""
        vec: NDArray[np.float64] = np.asarray(offset, dtype=float)
        if vec.ndim != 1:
            raise ValueError("offset must be a 1D array")
        n: int = vec.shape[0]
        mat: NDArray[np.float64] = np.eye(n + 1, dtype=float)
        mat[:n, n] = vec
        return mat

    @staticmethod
    def scale_matrix(factors: NDArray[np.float64]) -> NDArray[np.float64]:
        """Build an (N+1)x(N+1) homogeneous per-axis scale matrix."""
        vec: NDArray[np.float64] = np.asarray(factors, dtype=float)
        if vec.ndim != 1:
            raise ValueError("factors must be a 1D array")
        return np.diag(np.append(vec, 1.0))

    @staticmethod
    def extend_linear(linear: NDArray[np.float64]) -> NDArray[np.float64]:
        """Embed an NxN linear map in an (N+1)x(N+1) homogeneous matrix."""
        mat: NDArray[np.float64] = np.asarray(linear, dtype=float)
        if mat.ndim != 2 or mat.shape[0] != mat.shape[1]:
            raise ValueError("linear must be a square matrix")
        n: int = mat.shape[0]
        result: NDArray[np.float64] = np.eye(n + 1, dtype=float)
        result[:n, :n] = mat
        return result

    @staticmethod
    def is_singular(
        mat: NDArray[np.float64], eps: float = Tolerance.SINGULAR_EPS
    ) -> bool:
        """Return True when the determinant magnitude is at or below eps."""
        det: float = float(np.linalg.det(mat))
        return not np.isfinite(det) or abs(det) <= eps
