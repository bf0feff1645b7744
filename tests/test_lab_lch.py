# -*- coding: utf-8 -*-
"""CIELAB and its cylindrical form."""

import pytest

from chroma_illuminants import StandardIlluminant, TwoDegree
from chroma_spaces import XYZ, Lab, LabColorSpace, LChab, LchAbColorSpace, XyzColorSpace

SAMPLE = (0.489, 0.4362, 0.0625)
SAMPLE_LAB = (0.719738, 0.214481, 0.745288)


def test_lab_from_xyz():
    lab = Lab.from_xyz(XYZ(*SAMPLE))
    assert lab.components == pytest.approx(SAMPLE_LAB, abs=1e-4)
    assert lab.reference_white == TwoDegree.D65


def test_lab_to_xyz():
    xyz = Lab(*SAMPLE_LAB).to_xyz()
    assert xyz.x == pytest.approx(SAMPLE[0], abs=1e-3)
    assert xyz.y == pytest.approx(SAMPLE[1], abs=1e-4)
    assert xyz.z == pytest.approx(SAMPLE[2], abs=1e-4)
    assert xyz.reference_white == TwoDegree.D65


def test_white_maps_to_unit_lightness():
    white = XYZ(*TwoDegree.D50.tristimulus(), color_space=XyzColorSpace.under(TwoDegree.D50))
    lab = Lab.from_xyz(white, LabColorSpace().for_white(TwoDegree.D50))
    assert lab.components == pytest.approx((1.0, 0.0, 0.0), abs=1e-9)


def test_black_maps_to_zero():
    assert Lab.from_xyz(XYZ(0.0, 0.0, 0.0)).components == pytest.approx((0.0, 0.0, 0.0))


def test_dark_linear_segment_round_trip():
    source = XYZ(0.001, 0.0008, 0.0005)
    back = Lab.from_xyz(source).to_xyz()
    assert back.components == pytest.approx(source.components, abs=1e-12)


def test_non_positive_white_component_is_undefined():
    # x + y > 1 gives a negative Z for the white
    odd = StandardIlluminant("Odd", (0.6, 0.5))
    space = LabColorSpace().for_white(odd)
    assert Lab(0.5, 0.0, 0.0, color_space=space).to_xyz() is None

    xyz = XYZ(0.2, 0.2, 0.2, color_space=XyzColorSpace.under(odd))
    assert Lab.from_xyz(xyz, space) is None


class TestLChab:

    def test_from_xyz(self):
        lch = LChab.from_xyz(XYZ(*SAMPLE))
        assert lch.lightness == pytest.approx(0.719738, abs=1e-4)
        assert lch.chroma == pytest.approx(0.775536, abs=1e-4)
        assert lch.hue == pytest.approx(1.290585, abs=1e-4)

    def test_to_xyz(self):
        xyz = LChab(0.719738, 0.775536, 1.290585).to_xyz()
        assert xyz.components == pytest.approx(SAMPLE, abs=1e-3)

    def test_hue_in_lower_half_plane_is_wrapped(self):
        lch = LChab.from_parent(Lab(0.5, 0.1, -0.1))
        assert 0.0 <= lch.hue < 2.0 * 3.141592653589793
        assert lch.hue == pytest.approx(7.0 * 3.141592653589793 / 4.0)

    def test_space_follows_parent(self):
        space = LchAbColorSpace(parent=LabColorSpace().for_white(TwoDegree.D50))
        lch = LChab.from_xyz(XYZ(*SAMPLE), space)
        assert lch.reference_white == TwoDegree.D50
        assert lch.color_space == space
