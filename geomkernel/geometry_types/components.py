################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of geomkernel
#
#  SPDX-License-Identifier: Apache-2.0
#
################################################################################
"""Fixed-size component storage shared by points and vectors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from typing import ClassVar
from typing import Iterator

import numpy as np
from numpy.typing import NDArray

from geomkernel.math_utils.units import Tolerance
from geomkernel.math_utils.validation import as_components


@dataclass(frozen=True, eq=False, repr=False)
class Components:
    """N numeric components stored in a read-only numpy array.

    Subclasses fix the dimension through ``DIM``. Two values compare equal
    only when they have the same concrete type, so a point never equals the
    vector with the same coordinates.
    """

    data: NDArray[Any]

    DIM: ClassVar[int] = 0

    def __post_init__(self) -> None:
        """Validate the component count and freeze storage."""
        object.__setattr__(
            self, "data", as_components(self.data, self.DIM, type(self).__name__)
        )

    @property
    def x(self) -> Any:
        """Return the first component."""
        return self.data[0].item()

    @property
    def y(self) -> Any:
        """Return the second component."""
        return self.data[1].item()

    @property
    def z(self) -> Any:
        """Return the third component."""
        return self.data[2].item()

    @property
    def w(self) -> Any:
        """Return the fourth component."""
        return self.data[3].item()

    def to_list(self) -> list[Any]:
        """Return the components as Python scalars."""
        return self.data.tolist()

    def almost_equal(self, other: Any, eps: float = Tolerance.APPROX_EPS) -> bool:
        """Check component-wise equality within eps."""
        if type(other) is not type(self):
            return False
        return bool(np.allclose(self.data, other.data, rtol=0.0, atol=eps))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Components):
            return NotImplemented
        return type(other) is type(self) and bool(
            np.array_equal(self.data, other.data)
        )

    def __hash__(self) -> int:
        return hash((type(self), tuple(self.data.tolist())))

    def __getitem__(self, index: int) -> Any:
        return self.data[index].item()

    def __len__(self) -> int:
        return self.DIM

    def __iter__(self) -> Iterator[Any]:
        return iter(self.data.tolist())

    def __str__(self) -> str:
        return "[" + ", ".join(str(c) for c in self.data.tolist()) + "]"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.data.tolist()})"
