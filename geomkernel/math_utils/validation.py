################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of geomkernel
#
#  SPDX-License-Identifier: Apache-2.0
#
################################################################################

"""Validation helpers for raw component inputs."""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray


# Array kinds accepted as coordinate components (signed, unsigned, float)
NUMERIC_KINDS: str = "iuf"


def freeze(array: NDArray[Any]) -> NDArray[Any]:
    """Return a read-only array, copying writeable input first."""
    if array.flags.writeable:
        array = array.copy()
        array.flags.writeable = False
    return array


def as_components(values: Any, dim: int, name: str) -> NDArray[Any]:
    """Return a read-only numeric array with shape (dim,).

    Arrays that are already read-only are shared rather than copied, which
    lets points and vectors reinterpret each other without allocation.
    """
    array: NDArray[Any] = np.asarray(values)
    if array.dtype.kind not in NUMERIC_KINDS:
        raise ValueError(f"{name} must be numeric")
    if array.shape != (dim,):
        raise ValueError(f"{name} must have {dim} elements")

    return freeze(array)


def as_float_matrix(
    values: Any, shape: tuple[int, int], name: str
) -> NDArray[np.float64]:
    """Return a read-only float matrix reshaped to the target shape."""
    array: NDArray[np.float64] = np.asarray(values, dtype=np.float64)
    if array.size != shape[0] * shape[1]:
        raise ValueError(f"{name} must have {shape[0] * shape[1]} elements")

    return freeze(array.reshape(shape))


def as_scalar(value: Any, name: str) -> float:
    """Return a real scalar as a Python float."""
    array: NDArray[Any] = np.asarray(value)
    if array.shape != () or array.dtype.kind not in NUMERIC_KINDS:
        raise ValueError(f"{name} must be a real scalar")

    return float(array)
