# -*- coding: utf-8 -*-
"""Oklab and OkLCh."""

import pytest

from chroma_spaces import XYZ, OkLab, OkLCh


@pytest.mark.parametrize("xyz, expected", [
    ((0.950, 1.000, 1.089), (1.000, 0.000, 0.000)),
    ((1.000, 0.000, 0.000), (0.450, 1.236, -0.019)),
    ((0.000, 1.000, 0.000), (0.922, -0.671, 0.263)),
    ((0.000, 0.000, 1.000), (0.153, -1.415, -0.449)),
])
def test_reference_values(xyz, expected):
    assert OkLab.from_xyz(XYZ(*xyz)).components == pytest.approx(expected, abs=1e-3)


def test_to_xyz():
    xyz = OkLab(1.0, 0.0, 0.0).to_xyz()
    assert xyz.components == pytest.approx((0.950, 1.000, 1.089), abs=1e-3)


def test_negative_cone_response_round_trips():
    source = XYZ(1.0, 0.0, 0.0)
    back = OkLab.from_xyz(source).to_xyz()
    assert back.components == pytest.approx(source.components, abs=1e-9)


def test_oklch_achromatic():
    lch = OkLCh.from_xyz(XYZ(0.950, 1.000, 1.089))
    assert lch.lightness == pytest.approx(1.0, abs=1e-3)
    assert lch.chroma == pytest.approx(0.0, abs=1e-3)


def test_oklch_round_trip():
    source = XYZ(0.3, 0.2, 0.1, opacity=0.4)
    lch = OkLCh.from_xyz(source)
    back = lch.to_xyz()

    assert 0.0 <= lch.hue < 2.0 * 3.141592653589793
    assert back.components == pytest.approx(source.components, abs=1e-9)
    assert back.opacity == 0.4
