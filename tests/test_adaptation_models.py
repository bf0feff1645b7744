# -*- coding: utf-8 -*-
"""CIE 1994, CMCCAT2000 and Zhai-Luo chromatic adaptation."""

import math

import pytest

from chroma_adaptation import (
    ChromaticAdaptation,
    Cie1994Adaptation,
    CmcCat2000Adaptation,
    ZhaiLuoAdaptation,
    cmccat2000_degree_of_adaptation,
)
from chroma_illuminants import StandardIlluminant, TenDegree, TwoDegree
from chroma_spaces import XYZ, XyzColorSpace


def xyz_under(illuminant, x, y, z, opacity=1.0):
    return XYZ(x, y, z, opacity, XyzColorSpace.under(illuminant))


def white(x, y, z):
    return StandardIlluminant.from_tristimulus(x, y, z, name="")


# ═══════════════════════════════════════════════════════════════════════════════
# CIE 1994
# ═══════════════════════════════════════════════════════════════════════════════
class TestCie1994:

    def test_example_incandescent_to_daylight(self):
        adapt = Cie1994Adaptation(1000, TwoDegree.D65, 1000, background_luminance_factor=0.20)
        result = adapt(xyz_under(TwoDegree.A, 0.28, 0.2126, 0.0527))

        assert result.x == pytest.approx(0.2403, abs=1e-4)
        assert result.y == pytest.approx(0.2116, abs=1e-4)
        assert result.z == pytest.approx(0.1764, abs=1e-4)
        assert result.reference_white == TwoDegree.D65

    def test_example_illuminance_change(self):
        adapt = Cie1994Adaptation(100, TwoDegree.D65, 1000, background_luminance_factor=0.50)
        result = adapt(xyz_under(TwoDegree.D65, 0.2177, 0.1918, 0.1673))

        assert result.x == pytest.approx(0.2113, abs=1e-4)
        assert result.y == pytest.approx(0.1943, abs=1e-4)
        assert result.z == pytest.approx(0.1950, abs=1e-4)
        assert result.reference_white == TwoDegree.D65

    def test_identity(self):
        source = xyz_under(TwoDegree.D65, 0.3, 0.35, 0.4, opacity=0.5)
        result = Cie1994Adaptation(500, TwoDegree.D65, 500)(source)

        # The published five-digit inverse of the fundamental primaries
        # bounds the same-white round trip to a few 1e-6.
        assert result.components == pytest.approx(source.components, abs=1e-5)
        assert result.opacity == 0.5

    def test_response_below_noise_floor_warns_and_yields_nan(self):
        adapt = Cie1994Adaptation(100, TwoDegree.D65, 1000)
        with pytest.warns(RuntimeWarning):
            result = adapt(xyz_under(TwoDegree.A, 0.0, 0.0, 0.5))
        assert math.isnan(result.x)


# ═══════════════════════════════════════════════════════════════════════════════
# CMCCAT2000
# ═══════════════════════════════════════════════════════════════════════════════
class TestCmcCat2000:

    SAMPLE = (0.2248, 0.2274, 0.0854)

    def test_average_surround(self):
        adapt = CmcCat2000Adaptation(200, TenDegree.D65, 200, viewing_condition="average")
        result = adapt(xyz_under(TenDegree.A, *self.SAMPLE))

        assert result.x == pytest.approx(0.1953, abs=1e-4)
        assert result.y == pytest.approx(0.2307, abs=1e-4)
        assert result.z == pytest.approx(0.2497, abs=1e-4)
        assert result.reference_white == TenDegree.D65

    @pytest.mark.parametrize("surround", ["dim", "dark"])
    def test_dim_and_dark_surround(self, surround):
        adapt = CmcCat2000Adaptation(200, TenDegree.D65, 200, viewing_condition=surround)
        result = adapt(xyz_under(TenDegree.A, *self.SAMPLE))

        assert result.x == pytest.approx(0.2011, abs=1e-4)
        assert result.y == pytest.approx(0.2300, abs=1e-4)
        assert result.z == pytest.approx(0.2168, abs=1e-4)

    def test_degree_of_adaptation_clamped_high(self):
        adapt = CmcCat2000Adaptation(1, TwoDegree.D65, 100000)
        assert adapt.degree_of_adaptation == 1.0

    def test_degree_of_adaptation_clamped_low(self):
        adapt = CmcCat2000Adaptation(1e-6, TwoDegree.D65, 1e-12)
        assert adapt.degree_of_adaptation == 0.0

        # No adaptation at all: tristimulus values pass through
        source = xyz_under(TwoDegree.A, *self.SAMPLE)
        result = adapt(source)
        assert result.components == pytest.approx(source.components, abs=1e-10)
        assert result.reference_white == TwoDegree.D65

    def test_degree_of_adaptation_inside_range(self):
        D = cmccat2000_degree_of_adaptation(200, 200, "average")
        assert D == pytest.approx(0.08 * math.log10(200) + 0.76)

    def test_identity_and_opacity(self):
        source = xyz_under(TwoDegree.D50, 0.3, 0.35, 0.4, opacity=0.5)
        result = CmcCat2000Adaptation(300, TwoDegree.D50, 300)(source)

        assert result.components == pytest.approx(source.components, abs=1e-10)
        assert result.opacity == 0.5

    def test_unknown_viewing_condition_raises(self):
        with pytest.raises(ValueError):
            CmcCat2000Adaptation(200, TwoDegree.D65, 200, viewing_condition="bright")

    def test_non_positive_luminance_raises(self):
        with pytest.raises(ValueError):
            CmcCat2000Adaptation(0, TwoDegree.D65, 200)


# ═══════════════════════════════════════════════════════════════════════════════
# Zhai-Luo
# ═══════════════════════════════════════════════════════════════════════════════
class TestZhaiLuo:

    @pytest.mark.parametrize("transform, expected", [
        ("cat02", (0.39186, 0.42155, 0.19237)),
        ("cat16", (0.40374, 0.43694, 0.20517)),
    ])
    def test_incandescent_to_daylight(self, transform, expected):
        adapt = ZhaiLuoAdaptation(
            0.9407, TwoDegree.D65, 0.98,
            baseline_illuminant=white(1.0, 1.0, 1.0),
            transform=transform,
        )
        result = adapt(xyz_under(TwoDegree.A, 0.489, 0.4362, 0.0625))

        assert result.components == pytest.approx(expected, abs=1e-4)
        assert result.reference_white == TwoDegree.D65

    @pytest.mark.parametrize("transform, expected", [
        ("cat02", (0.57032, 0.58934, 0.64763)),
        ("cat16", (0.56771, 0.58813, 0.64669)),
    ])
    def test_media_whites(self, transform, expected):
        reference = white(1.05432, 1.0, 1.37392)
        adapt = ZhaiLuoAdaptation(
            0.6709, reference, 0.5331,
            baseline_illuminant=white(0.97079, 1.0, 1.41798),
            transform=transform,
        )
        result = adapt(xyz_under(white(0.92288, 1.0, 0.38775), 0.52034, 0.58824, 0.23703))

        assert result.components == pytest.approx(expected, abs=1e-5)
        assert result.reference_white == reference

    def test_identity(self):
        source = xyz_under(TwoDegree.D65, 0.3, 0.35, 0.4, opacity=0.75)
        adapt = ZhaiLuoAdaptation(0.8, TwoDegree.D65, 0.8, TwoDegree.E)
        result = adapt(source)

        assert result.components == pytest.approx(source.components, abs=1e-10)
        assert result.opacity == 0.75

    def test_out_of_range_degree_warns(self):
        with pytest.warns(UserWarning):
            ZhaiLuoAdaptation(1.2, TwoDegree.D65, 0.9, TwoDegree.E)

    def test_unknown_transform_raises(self):
        with pytest.raises(ValueError):
            ZhaiLuoAdaptation(0.9, TwoDegree.D65, 0.9, TwoDegree.E, transform="bradford")


@pytest.mark.parametrize("strategy", [
    Cie1994Adaptation(1000, TwoDegree.D65, 1000),
    CmcCat2000Adaptation(200, TwoDegree.D65, 200),
    ZhaiLuoAdaptation(0.9, TwoDegree.D65, 0.9, TwoDegree.E),
])
def test_strategies_satisfy_protocol_and_adapt_xyz(strategy):
    assert isinstance(strategy, ChromaticAdaptation)

    result = xyz_under(TwoDegree.A, 0.2, 0.2, 0.1).adapt(strategy)
    assert result.reference_white == TwoDegree.D65
