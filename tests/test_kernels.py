# -*- coding: utf-8 -*-
"""Numba transfer-function kernels and the strict IEEE toggle."""

import math

import numpy as np
import pytest

import chroma_kernels as ck
from chroma_spaces import XYZ, Lab, RGB


@pytest.fixture
def strict_ieee():
    ck.set_strict_ieee(True)
    yield
    ck.set_strict_ieee(False)


def test_strict_toggle(strict_ieee):
    assert ck.is_strict_ieee()


def test_fast_mode_is_default():
    assert not ck.is_strict_ieee()


def test_strict_and_fast_kernels_agree(strict_ieee):
    values = ck.as_vector([0.0, 0.001, 0.2, 0.9])
    strict = (ck.compand_srgb(values), ck.lab_f(values))

    ck.set_strict_ieee(False)
    fast = (ck.compand_srgb(values), ck.lab_f(values))

    np.testing.assert_allclose(strict[0], fast[0], rtol=1e-12)
    np.testing.assert_allclose(strict[1], fast[1], rtol=1e-12)


def test_conversions_under_strict_mode(strict_ieee):
    source = XYZ(0.3, 0.35, 0.4)
    assert Lab.from_xyz(source).to_xyz().components == pytest.approx(source.components)
    assert RGB.from_xyz(source).to_xyz().components == pytest.approx(source.components)


def test_lab_f_pair_is_continuous_at_the_break():
    at = ck.as_vector([ck.LAB_EPSILON])
    # Both segments meet at f = 6/29
    np.testing.assert_allclose(ck.lab_f(at), [6.0 / 29.0], rtol=1e-9)
    np.testing.assert_allclose(ck.lab_f(at * (1.0 + 1e-9)), [6.0 / 29.0], rtol=1e-8)
    np.testing.assert_allclose(ck.lab_f_inv(ck.lab_f(at)), at, rtol=1e-9)


def test_signed_cbrt():
    np.testing.assert_allclose(ck.signed_cbrt(ck.as_vector([-8.0, 0.0, 27.0])), [-2.0, 0.0, 3.0])


def test_rect_to_polar_wraps_hue():
    L, C, h = ck.rect_to_polar(ck.as_vector([0.5, 0.0, -1.0]))
    assert C == pytest.approx(1.0)
    assert h == pytest.approx(1.5 * math.pi)


def test_polar_round_trip():
    lab = ck.as_vector([0.3, -0.2, 0.1])
    np.testing.assert_allclose(ck.polar_to_rect(ck.rect_to_polar(lab)), lab, atol=1e-15)


def test_pq_round_trip():
    values = ck.as_vector([1e-4, 0.5, 100.0, 1000.0])
    np.testing.assert_allclose(ck.pq_decode(ck.pq_encode(values)), values, rtol=1e-9)


def test_parametric_inverse():
    values = ck.as_vector([0.0, 0.002, 0.3, 1.0])
    args = (2.4, 0.948, 0.052, 0.077, 0.04)
    stored = ck.compand_parametric(values, *args)
    np.testing.assert_allclose(ck.linearize_parametric(stored, *args), values, atol=1e-12)


def test_luminance_curve_break_point():
    np.testing.assert_allclose(
        ck.compand_luminance(ck.as_vector([ck.LAB_EPSILON])), [0.08], rtol=1e-9
    )


def test_as_vector_flattens():
    vector = ck.as_vector([[1, 2, 3]])
    assert vector.shape == (3,)
    assert vector.dtype == np.float64


def test_each_switchable_curve_has_fast_and_strict_builds():
    for fast, strict in (ck._LAB_F, ck._LAB_F_INV, ck._SRGB_OETF, ck._SRGB_EOTF):
        assert fast.targetoptions["fastmath"]
        assert not strict.targetoptions["fastmath"]
        assert fast.py_func is strict.py_func


def test_dispatch_follows_toggle(strict_ieee):
    values = ck.as_vector([0.5])
    np.testing.assert_array_equal(ck.linearize_srgb(values), ck._SRGB_EOTF[1](values))
