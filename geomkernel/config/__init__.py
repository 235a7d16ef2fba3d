################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of geomkernel
#
#  SPDX-License-Identifier: Apache-2.0
#
################################################################################

"""Configuration schema and validation."""

from geomkernel.config.kernel_config import KernelConfig
from geomkernel.config.kernel_config import KernelConfigError
from geomkernel.config.kernel_params import KernelParams
from geomkernel.config.kernel_params import KernelParamsError
from geomkernel.config.kernel_params import ToleranceParams


__all__ = [
    "KernelConfig",
    "KernelConfigError",
    "KernelParams",
    "KernelParamsError",
    "ToleranceParams",
]
