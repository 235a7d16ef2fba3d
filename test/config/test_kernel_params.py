################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of geomkernel
#
#  SPDX-License-Identifier: Apache-2.0
#
################################################################################

"""Tests for the kernel parameter schema."""

from __future__ import annotations

import dataclasses
from pathlib import Path

import pytest

from geomkernel.config.kernel_params import TOLERANCE_APPROX_EPS
from geomkernel.config.kernel_params import KernelParams
from geomkernel.config.kernel_params import KernelParamsError
from geomkernel.config.kernel_params import ToleranceParams


def test_defaults_validate() -> None:
    """Defaults should validate successfully."""
    params: KernelParams = KernelParams.defaults()
    params.validate()
    assert params.tolerance.approx_eps == TOLERANCE_APPROX_EPS


def test_negative_tolerance_rejected() -> None:
    """Negative tolerances should raise an error."""
    params: KernelParams = KernelParams.defaults().replace(
        tolerance=dataclasses.replace(
            KernelParams.defaults().tolerance, invert_eps=-1.0
        )
    )
    with pytest.raises(KernelParamsError):
        params.validate()


def test_non_numeric_tolerance_rejected() -> None:
    """Non-numeric and non-finite tolerances should raise an error."""
    for value in ("small", True, float("inf")):
        params: KernelParams = KernelParams(
            tolerance=ToleranceParams(singular_eps=value)  # type: ignore[arg-type]
        )
        with pytest.raises(KernelParamsError):
            params.validate()


def test_nested_dict_round_trip() -> None:
    """Nested dict conversion should preserve every value."""
    params: KernelParams = KernelParams.defaults().replace(
        tolerance=ToleranceParams(approx_eps=1e-3, invert_eps=1e-4, singular_eps=0.0)
    )
    data: dict = params.as_nested_dict()
    assert data == {
        "tolerance": {"approx_eps": 1e-3, "invert_eps": 1e-4, "singular_eps": 0.0}
    }
    assert KernelParams.from_nested_dict(data) == params


def test_partial_dict_uses_defaults() -> None:
    """Missing keys should fall back to defaults."""
    params: KernelParams = KernelParams.from_nested_dict(
        {"tolerance": {"approx_eps": 0.5}}
    )
    assert params.tolerance.approx_eps == 0.5
    assert params.tolerance.invert_eps == ToleranceParams().invert_eps
    assert KernelParams.from_nested_dict({}) == KernelParams.defaults()


def test_unknown_keys_rejected() -> None:
    """Unknown namespaces and keys should raise an error."""
    with pytest.raises(KernelParamsError):
        KernelParams.from_nested_dict({"format": {}})
    with pytest.raises(KernelParamsError):
        KernelParams.from_nested_dict({"tolerance": {"eps": 1.0}})
    with pytest.raises(KernelParamsError):
        KernelParams.from_nested_dict({"tolerance": [1.0]})


def test_load_yaml(tmp_path: Path) -> None:
    """YAML files should load into validated parameters."""
    path: Path = tmp_path / "kernel.yaml"
    path.write_text("tolerance:\n  approx_eps: 0.001\n", encoding="utf-8")
    params: KernelParams = KernelParams.load_yaml(path)
    assert params.tolerance.approx_eps == 0.001

    empty: Path = tmp_path / "empty.yaml"
    empty.write_text("", encoding="utf-8")
    assert KernelParams.load_yaml(empty) == KernelParams.defaults()


def test_load_invalid_yaml(tmp_path: Path) -> None:
    """Malformed YAML should raise a parameter error."""
    path: Path = tmp_path / "broken.yaml"
    path.write_text("tolerance: [unclosed\n", encoding="utf-8")
    with pytest.raises(KernelParamsError):
        KernelParams.load_yaml(path)
