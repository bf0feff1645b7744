# -*- coding: utf-8 -*-
"""RGB profiles, companding curves and hexadecimal I/O."""

import numpy as np
import pytest

from chroma_illuminants import TwoDegree
from chroma_spaces import (
    DISPLAY_P3,
    RGB,
    SRGB,
    XYZ,
    GammaCompanding,
    LinearCompanding,
    LuminanceCompanding,
    ParametricCompanding,
    RgbColorSpace,
    RgbProfile,
    SrgbCompanding,
    XyzColorSpace,
)
from chroma_spaces.rgb import Companding

SAMPLE = (0.20654008, 0.12197225, 0.05136952)
SAMPLE_RGB = (0.70573936, 0.19248266, 0.22354169)


class TestProfile:

    def test_derived_srgb_matrix(self):
        expected = [
            [0.4124, 0.3576, 0.1805],
            [0.2126, 0.7152, 0.0722],
            [0.0193, 0.1192, 0.9505],
        ]
        np.testing.assert_allclose(RgbProfile().to_xyz, expected, atol=5e-4)

    def test_matrices_are_inverse(self):
        profile = RgbProfile(reference_white=TwoDegree.D50)
        np.testing.assert_allclose(profile.to_rgb @ profile.to_xyz, np.eye(3), atol=1e-12)

    def test_white_maps_to_unit_rgb(self):
        profile = RgbProfile()
        np.testing.assert_allclose(
            profile.to_rgb @ TwoDegree.D65.tristimulus(), [1.0, 1.0, 1.0], atol=1e-12
        )

    def test_single_matrix_completes_the_pair(self):
        profile = RgbProfile(to_xyz_matrix=SRGB.profile.to_xyz_matrix)
        np.testing.assert_allclose(profile.to_rgb @ profile.to_xyz, np.eye(3), atol=1e-12)

    def test_primary_with_zero_y_raises(self):
        with pytest.raises(ValueError):
            RgbProfile(blue=(0.15, 0.0))

    def test_wrong_matrix_shape_raises(self):
        with pytest.raises(ValueError):
            RgbProfile(to_xyz_matrix=((1.0, 0.0), (0.0, 1.0)))

    def test_with_white_rederives_matrices(self):
        d50 = RgbProfile().with_white(TwoDegree.D50)
        assert d50 == RgbProfile(reference_white=TwoDegree.D50)

    def test_spaces_are_values(self):
        assert RgbColorSpace() == RgbColorSpace()
        assert RgbColorSpace() != RgbColorSpace().for_white(TwoDegree.E)
        assert hash(RgbColorSpace()) == hash(RgbColorSpace())


class TestConversion:

    def test_from_xyz(self):
        rgb = RGB.from_xyz(XYZ(*SAMPLE))
        assert rgb.red == pytest.approx(SAMPLE_RGB[0], abs=1e-4)
        assert rgb.green == pytest.approx(SAMPLE_RGB[1], abs=2e-4)
        assert rgb.blue == pytest.approx(SAMPLE_RGB[2], abs=1e-4)

    def test_to_xyz(self):
        xyz = RGB(*SAMPLE_RGB).to_xyz()
        assert xyz.components == pytest.approx(SAMPLE, abs=2e-4)
        assert xyz.reference_white == TwoDegree.D65

    def test_published_srgb_preset(self):
        rgb = RGB.from_xyz(XYZ(*SAMPLE), SRGB)
        assert rgb.components == pytest.approx(SAMPLE_RGB, abs=5e-4)

    def test_black(self):
        assert RGB.from_xyz(XYZ(0.0, 0.0, 0.0)).components == pytest.approx((0.0, 0.0, 0.0))

    def test_default_space_follows_source_white(self):
        d50 = XYZ(*TwoDegree.D50.tristimulus(), color_space=XyzColorSpace.under(TwoDegree.D50))
        rgb = RGB.from_xyz(d50)

        assert rgb.reference_white == TwoDegree.D50
        assert rgb.components == pytest.approx((1.0, 1.0, 1.0), abs=1e-9)

    def test_out_of_gamut_values_are_not_clamped(self):
        rgb = RGB.from_xyz(XYZ(0.0, 1.0, 0.0))
        assert rgb.red < 0.0 or rgb.blue < 0.0
        assert rgb.green > 1.0

    @pytest.mark.parametrize("space", [
        DISPLAY_P3,
        RgbColorSpace(RgbProfile(companding=GammaCompanding(2.2))),
        RgbColorSpace(RgbProfile(companding=LuminanceCompanding())),
        RgbColorSpace(RgbProfile(companding=LinearCompanding())),
    ], ids=["display-p3", "gamma", "luminance", "linear"])
    def test_round_trip(self, space):
        source = XYZ(*SAMPLE, opacity=0.6)
        rgb = RGB.from_xyz(source, space)
        back = rgb.to_xyz()

        assert back.components == pytest.approx(source.components, abs=1e-9)
        assert back.opacity == 0.6


class TestCompanding:

    @pytest.mark.parametrize("curve", [
        LinearCompanding(),
        GammaCompanding(2.2),
        SrgbCompanding(),
        LuminanceCompanding(),
        ParametricCompanding(2.4, 0.948, 0.052, 0.077, 0.04),
    ])
    def test_curves_satisfy_protocol_and_invert(self, curve):
        assert isinstance(curve, Companding)
        values = np.array([0.0, 0.001, 0.02, 0.5, 1.0])
        np.testing.assert_allclose(curve.linearize(curve.compand(values)), values, atol=1e-10)

    def test_srgb_reference_points(self):
        np.testing.assert_allclose(
            SrgbCompanding().compand(np.array([0.0031308, 0.5, 1.0])),
            [0.04045, 0.735357, 1.0],
            atol=1e-5,
        )

    def test_parametric_linear_segment(self):
        curve = ParametricCompanding(2.4, 0.948, 0.052, 0.077, 0.04)
        np.testing.assert_allclose(curve.linearize(np.array([0.02])), [0.02 * 0.077])


class TestHex:

    def test_from_hex_string(self):
        rgb = RGB.from_hex("#8EE5EE")
        assert rgb.components == pytest.approx((142 / 255, 229 / 255, 238 / 255))

    def test_from_hex_without_hash(self):
        assert RGB.from_hex("8ee5ee") == RGB.from_hex("#8EE5EE")

    def test_from_hex_integer(self):
        assert RGB.from_hex(0xFF0000).components == (1.0, 0.0, 0.0)

    def test_invalid_hex_is_none(self):
        assert RGB.from_hex("#GG0000") is None

    def test_from_hex_keeps_space(self):
        assert RGB.from_hex("#102030", DISPLAY_P3).color_space == DISPLAY_P3

    def test_to_hex_round_trip(self):
        assert RGB.from_hex("#8EE5EE").to_hex() == "#8EE5EE"

    def test_to_hex_clamps(self):
        assert RGB(1.2, -0.1, 0.5).to_hex() == "#FF0080"

    @pytest.mark.parametrize("text", ["#0x_ff", "#FFF", "8E#E5EE", "#8EE5EE00", "##8EE5EE", "#8E E5E"])
    def test_malformed_hex_is_none(self, text):
        assert RGB.from_hex(text) is None

    def test_surrounding_whitespace_is_ignored(self):
        assert RGB.from_hex("  #8ee5ee ") == RGB.from_hex("#8EE5EE")
