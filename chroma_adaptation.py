# -*- coding: utf-8 -*-
"""
Chroma: Colour spaces and chromatic adaptation for colorimetry
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: chroma_adaptation.py — Chromatic adaptation transforms.

Every strategy is a frozen, callable value satisfying the
``ChromaticAdaptation`` protocol: it takes an XYZ colour (whose own profile
names the source white) and returns an XYZ colour tagged with the strategy's
``reference_illuminant``.  Inputs are never mutated; opacity is carried
through unchanged.

Strategies:
  1. LinearAdaptation       von Kries family, any cone-response basis
                            (Bradford by default; the conversion graph's
                            implicit strategy).
  2. Cie1994Adaptation      CIE 109-1994, luminance-dependent incomplete
                            adaptation with a noise term n = 1.
  3. CmcCat2000Adaptation   CMCCAT2000 with the degree of adaptation D
                            clamped to [0, 1].
  4. ZhaiLuoAdaptation      two-step, media-dependent degree of adaptation
                            anchored on a baseline illuminant (CAT02/CAT16).

Numerical notes:
  * CIE 1994 raises fractional powers of (R1 + n) etc.  Inputs whose
    fundamental responses fall below -n have no defined result; a
    RuntimeWarning is issued and NaN propagates.  No clamping is applied.
  * Zhai-Luo degrees of adaptation are used as given, even outside [0, 1].

References:
    [1] Lindbloom, B., "Chromatic Adaptation", brucelindbloom.com
    [2] CIE 109-1994, "A method of predicting corresponding colours under
        different chromatic and illuminance adaptations"
    [3] Li, C., Luo, M. R., Rigg, B., Hunt, R. W. G., "CMC 2000 chromatic
        adaptation transform: CMCCAT2000", Color Res. Appl. 27(1) (2002)
    [4] Zhai, Q., Luo, M. R., "Study of chromatic adaptation via neutral
        white matches on different viewing media", Opt. Express 26(6) (2018)
    [5] Bianco, S., Schettini, R., "Two new von Kries based chromatic
        adaptation transforms", Color Res. Appl. 35(3) (2010)
"""

from __future__ import annotations

import functools
import math
import warnings
from dataclasses import dataclass, field
from typing import (
    TYPE_CHECKING,
    Dict,
    Final,
    Literal,
    NamedTuple,
    Protocol,
    Sequence,
    Tuple,
    TypeAlias,
    runtime_checkable,
)

import numpy as np

from chroma_illuminants import StandardIlluminant, XyChromaticity

if TYPE_CHECKING:
    from chroma_spaces.xyz import XYZ

__all__ = [
    # --- Types ---
    "AdaptationTransform",
    "ChromaticAdaptation",
    "ViewingCondition",
    "ZhaiLuoTransform",

    # --- Transforms ---
    "XYZ_SCALING",
    "VON_KRIES",
    "BRADFORD",
    "SHARP",
    "HUNTER_POINTER_ESTEVES",
    "THORNTONS",
    "CMCCAT97",
    "CMCCAT2000",
    "CAT02",
    "CAT02_CORRECTED",
    "CAT16",
    "BIANCO_SCHETTINI",
    "BIANCO_SCHETTINI_POSITIVITY",
    "TRANSFORMS",

    # --- Functions ---
    "adaptation_matrix",
    "cmccat2000_degree_of_adaptation",

    # --- Strategies ---
    "LinearAdaptation",
    "Cie1994Adaptation",
    "CmcCat2000Adaptation",
    "ZhaiLuoAdaptation",
]

Matrix3: TypeAlias = Tuple[Tuple[float, float, float], ...]
ViewingCondition = Literal["average", "dim", "dark"]
ZhaiLuoTransform = Literal["cat02", "cat16"]


# ═══════════════════════════════════════════════════════════════════════════════
# 1.  Cone-response bases
# ═══════════════════════════════════════════════════════════════════════════════
def _freeze_matrix(matrix: Sequence[Sequence[float]] | np.ndarray) -> Matrix3:
    """Nested-tuple copy of a 3x3 matrix (hashable, usable as a cache key)."""
    arr = np.asarray(matrix, dtype=np.float64)
    if arr.shape != (3, 3):
        raise ValueError(f"Adaptation transforms must be 3x3, got shape {arr.shape}")
    return tuple(tuple(float(v) for v in row) for row in arr)


class AdaptationTransform(NamedTuple):
    """
    A cone-response basis ``R`` projecting XYZ into sharpened LMS.

    The matrix is stored row-major as nested tuples and applied to column
    vectors: ``lms = R @ xyz``.
    """
    name: str
    matrix: Matrix3

    @property
    def array(self) -> np.ndarray:
        """The basis as a read-only (3, 3) float64 array."""
        return _basis(self.matrix)[0]

    @property
    def inverse(self) -> np.ndarray:
        """``R⁻¹`` as a read-only (3, 3) float64 array."""
        return _basis(self.matrix)[1]

    @classmethod
    def custom(cls, matrix: Sequence[Sequence[float]] | np.ndarray,
               name: str = "Custom") -> AdaptationTransform:
        """
        Wrap a caller-supplied basis.

        Only the shape is checked; a singular matrix surfaces as
        ``numpy.linalg.LinAlgError`` on first use.
        """
        return cls(name, _freeze_matrix(matrix))


@functools.lru_cache(maxsize=32)
def _basis(matrix: Matrix3) -> Tuple[np.ndarray, np.ndarray]:
    """Cached ``(R, R⁻¹)`` pair; both arrays are flagged read-only."""
    forward = np.array(matrix, dtype=np.float64)
    inverse = np.linalg.inv(forward)
    forward.flags.writeable = False
    inverse.flags.writeable = False
    return forward, inverse


XYZ_SCALING: Final = AdaptationTransform("XYZ Scaling", (
    (1.0, 0.0, 0.0),
    (0.0, 1.0, 0.0),
    (0.0, 0.0, 1.0),
))

VON_KRIES: Final = AdaptationTransform("von Kries", (
    ( 0.40024, 0.70760, -0.08081),
    (-0.22630, 1.16532,  0.04570),
    ( 0.00000, 0.00000,  0.91822),
))

BRADFORD: Final = AdaptationTransform("Bradford", (
    ( 0.8951,  0.2664, -0.1614),
    (-0.7502,  1.7135,  0.0367),
    ( 0.0389, -0.0685,  1.0296),
))

SHARP: Final = AdaptationTransform("Sharp", (
    ( 1.2694, -0.0988, -0.1706),
    (-0.8364,  1.8006,  0.0357),
    ( 0.0297, -0.0315,  1.0018),
))

HUNTER_POINTER_ESTEVES: Final = AdaptationTransform("Hunter-Pointer-Estévez", (
    ( 0.38971, 0.68898, -0.07868),
    (-0.22981, 1.18340,  0.04641),
    ( 0.00000, 0.00000,  1.00000),
))

THORNTONS: Final = AdaptationTransform("Thornton", (
    ( 1.8818,  0.4094,  0.3482),
    (-0.8130,  1.6431,  0.1190),
    ( 0.0198, -0.0405,  0.9382),
))

CMCCAT97: Final = AdaptationTransform("CMCCAT97", (
    ( 0.8951, -0.7502,  0.0389),
    ( 0.2664,  1.7135,  0.0685),
    (-0.1614,  0.0367,  1.0296),
))

CMCCAT2000: Final = AdaptationTransform("CMCCAT2000", (
    ( 0.7982,  0.3389, -0.1371),
    (-0.5918,  1.5512,  0.0406),
    ( 0.0008,  0.0239,  0.9753),
))

CAT02: Final = AdaptationTransform("CAT02", (
    ( 0.7328,  0.4296, -0.1624),
    (-0.7036,  1.6975,  0.0061),
    ( 0.0030,  0.0136,  0.9834),
))

# Last row replaced so that equal-energy white maps to equal cone responses
CAT02_CORRECTED: Final = AdaptationTransform("CAT02 (corrected)", (
    ( 0.7328,  0.4296, -0.1624),
    (-0.7036,  1.6975,  0.0061),
    ( 0.0000,  0.0000,  1.0000),
))

CAT16: Final = AdaptationTransform("CAT16", (
    ( 0.401288,  0.650173, -0.051461),
    (-0.250268,  1.204414,  0.045854),
    (-0.002079,  0.048952,  0.953127),
))

BIANCO_SCHETTINI: Final = AdaptationTransform("Bianco-Schettini", (
    ( 0.8752,  0.2787, -0.1539),
    (-0.8904,  1.8709,  0.0195),
    (-0.0061,  0.0162,  0.9899),
))

BIANCO_SCHETTINI_POSITIVITY: Final = AdaptationTransform("Bianco-Schettini (positivity)", (
    ( 0.6489,  0.3915, -0.0404),
    (-0.3775,  1.3055,  0.0720),
    (-0.0271,  0.0888,  0.9383),
))

TRANSFORMS: Final[Dict[str, AdaptationTransform]] = {
    "xyz_scaling": XYZ_SCALING,
    "von_kries": VON_KRIES,
    "bradford": BRADFORD,
    "sharp": SHARP,
    "hunter_pointer_esteves": HUNTER_POINTER_ESTEVES,
    "thorntons": THORNTONS,
    "cmccat97": CMCCAT97,
    "cmccat2000": CMCCAT2000,
    "cat02": CAT02,
    "cat02_corrected": CAT02_CORRECTED,
    "cat16": CAT16,
    "bianco_schettini": BIANCO_SCHETTINI,
    "bianco_schettini_positivity": BIANCO_SCHETTINI_POSITIVITY,
}


# ═══════════════════════════════════════════════════════════════════════════════
# 2.  Shared contract
# ═══════════════════════════════════════════════════════════════════════════════
@runtime_checkable
class ChromaticAdaptation(Protocol):
    """
    Minimal interface every adaptation strategy satisfies.

    reference_illuminant → the white the result is expressed under
    __call__(xyz)        → the corresponding XYZ colour under that white
    """
    reference_illuminant: StandardIlluminant

    def __call__(self, xyz: XYZ) -> XYZ: ...


# ═══════════════════════════════════════════════════════════════════════════════
# 3.  Linear (von Kries) adaptation
# ═══════════════════════════════════════════════════════════════════════════════
@functools.lru_cache(maxsize=64)
def _get_cached_adaptation_matrix(
    test_white: XyChromaticity,
    reference_white: XyChromaticity,
    transform_matrix: Matrix3,
) -> np.ndarray:
    """
    Cached worker for the von Kries composite matrix.

    Derivation (column vectors):
        M = R⁻¹ · diag(R·W_ref / R·W_test) · R
    """
    R, R_inv = _basis(transform_matrix)

    # 1. Whites at Y = 1 -> cone responses
    test_lms = R @ test_white.to_tristimulus()
    ref_lms = R @ reference_white.to_tristimulus()

    # 2. Von Kries gains on the diagonal
    M_gain = np.diag(ref_lms / test_lms)

    # 3. Composite matrix
    M = R_inv @ M_gain @ R
    M.flags.writeable = False
    return M


def adaptation_matrix(
    test_white_point: XyChromaticity,
    reference_white_point: XyChromaticity,
    transform: AdaptationTransform = BRADFORD,
) -> np.ndarray:
    """
    Computes the linear adaptation matrix between two white points.

    Args:
        test_white_point: Chromaticity of the source white.
        reference_white_point: Chromaticity of the destination white.
        transform: Cone-response basis.

    Returns:
        Read-only (3, 3) matrix for column-vector multiplication.

    Raises:
        ValueError: If either white point has ``y == 0``.
    """
    test = XyChromaticity(*test_white_point)
    ref = XyChromaticity(*reference_white_point)
    if test.y == 0.0 or ref.y == 0.0:
        raise ValueError("White points with y == 0 have no tristimulus value.")
    return _get_cached_adaptation_matrix(test, ref, transform.matrix)


@dataclass(slots=True, frozen=True)
class LinearAdaptation:
    """
    Von Kries-type adaptation in a chosen cone-response basis.

    Parameters
    ----------
    reference_illuminant : StandardIlluminant
        White the adapted colour is expressed under.
    transform : AdaptationTransform
        Cone-response basis, Bradford by default.
    """
    reference_illuminant: StandardIlluminant
    transform: AdaptationTransform = BRADFORD

    def matrix_from(self, test_illuminant: StandardIlluminant) -> np.ndarray:
        """Adaptation matrix from ``test_illuminant`` to the reference white."""
        return adaptation_matrix(
            test_illuminant.white_point,
            self.reference_illuminant.white_point,
            self.transform,
        )

    def __call__(self, xyz: XYZ) -> XYZ:
        if xyz.reference_white == self.reference_illuminant:
            return xyz.with_tristimulus(xyz.tristimulus, self.reference_illuminant)
        M = self.matrix_from(xyz.reference_white)
        return xyz.with_tristimulus(M @ xyz.tristimulus, self.reference_illuminant)


# ═══════════════════════════════════════════════════════════════════════════════
# 4.  CIE 1994
# ═══════════════════════════════════════════════════════════════════════════════
# Fundamental primary system (von Kries basis) and its published inverse
_M_CIE1994_FUNDAMENTAL: Final[np.ndarray] = np.array([
    [ 0.40024, 0.70760, -0.08081],
    [-0.22630, 1.16532,  0.04570],
    [ 0.00000, 0.00000,  0.91822],
], dtype=np.float64)

_M_CIE1994_TRISTIMULUS: Final[np.ndarray] = np.array([
    [1.85995, -1.12939, 0.21990],
    [0.36119,  0.63881, 0.00000],
    [0.00000,  0.00000, 1.08906],
], dtype=np.float64)

_CIE1994_NOISE: Final[float] = 1.0


def _relative_chromaticity(white: XyChromaticity) -> np.ndarray:
    """Transformed relative chromaticity (ξ, η, ζ) of a white point."""
    x, y = white
    return np.array([
        (0.48105 * x + 0.78841 * y - 0.08081) / y,
        (-0.27200 * x + 1.11962 * y + 0.04570) / y,
        0.91822 * (1.0 - x - y) / y,
    ], dtype=np.float64)


def _cie1994_exponents(responses: np.ndarray) -> np.ndarray:
    """Exponents β1(r0), β1(g0), β2(b0) for effective adapting responses."""
    p_rg = responses[:2] ** 0.4495
    p_b = responses[2] ** 0.5128
    beta_rg = (6.469 + 6.362 * p_rg) / (6.469 + p_rg)
    beta_b = (8.414 + 8.091 * p_b) / (8.414 + p_b) * 0.7844
    return np.array([beta_rg[0], beta_rg[1], beta_b], dtype=np.float64)


@dataclass(slots=True, frozen=True)
class Cie1994Adaptation:
    """
    CIE 1994 corresponding-colour transform.

    Parameters
    ----------
    test_illuminance : float
        Illuminance of the test field in lux.
    reference_illuminant : StandardIlluminant
        White of the reference field.
    reference_illuminance : float
        Illuminance of the reference field in lux.
    background_luminance_factor : float
        Y tristimulus of the adapting background as a fraction
        (1.0 for a perfect reflecting diffuser, 0.2 for a 20 % grey).
    """
    test_illuminance: float
    reference_illuminant: StandardIlluminant
    reference_illuminance: float
    background_luminance_factor: float = 1.0

    def __call__(self, xyz: XYZ) -> XYZ:
        n = _CIE1994_NOISE
        y0 = self.background_luminance_factor

        # Step 1: fundamental primaries of the input (scaled to Y = 100)
        rgb1 = _M_CIE1994_FUNDAMENTAL @ (100.0 * xyz.tristimulus)
        if np.any(rgb1 + n < 0.0):
            warnings.warn(
                "CIE 1994 adaptation: fundamental response below the noise "
                f"floor ({rgb1!r}); the result is undefined (NaN).",
                RuntimeWarning,
                stacklevel=2,
            )

        # Step 2: relative chromaticities and adapting responses of both fields
        coords1 = _relative_chromaticity(xyz.reference_white.white_point)
        coords2 = _relative_chromaticity(self.reference_illuminant.white_point)

        with np.errstate(invalid="ignore"):
            beta1 = _cie1994_exponents(coords1 * (y0 * self.test_illuminance) / np.pi)
            beta2 = _cie1994_exponents(coords2 * (y0 * self.reference_illuminance) / np.pi)

            white1 = 100.0 * y0 * coords1 + n
            white2 = 100.0 * y0 * coords2 + n

            # Coupling coefficient from the red and green channels
            k1 = (white1[0] / (20.0 * coords1[0] + n)) ** ((2.0 / 3.0) * beta1[0])
            k2 = (white2[0] / (20.0 * coords2[0] + n)) ** ((2.0 / 3.0) * beta2[0])
            k3 = (white1[1] / (20.0 * coords1[1] + n)) ** ((1.0 / 3.0) * beta1[1])
            k4 = (white2[1] / (20.0 * coords2[1] + n)) ** ((1.0 / 3.0) * beta2[1])
            K = (k1 / k2) * (k3 / k4)

            # Corresponding fundamental responses in the reference field
            rgb2 = white2 * K ** (1.0 / beta2) * ((rgb1 + n) / white1) ** (beta1 / beta2) - n

        # Step 3: back to tristimulus values
        xyz2 = (_M_CIE1994_TRISTIMULUS @ rgb2) / 100.0
        return xyz.with_tristimulus(xyz2, self.reference_illuminant)


# ═══════════════════════════════════════════════════════════════════════════════
# 5.  CMCCAT2000
# ═══════════════════════════════════════════════════════════════════════════════
_SURROUND_FACTOR: Final[Dict[str, float]] = {
    "average": 1.0,
    "dim": 0.8,
    "dark": 0.8,
}


def cmccat2000_degree_of_adaptation(
    test_luminance: float,
    reference_luminance: float,
    viewing_condition: ViewingCondition = "average",
) -> float:
    """
    Degree of adaptation D of CMCCAT2000, clamped to [0, 1].

        D = F·(0.08·log10(0.5·(LA1 + LA2)) + 0.76 − 0.45·(LA1 − LA2)/(LA1 + LA2))

    Raises:
        ValueError: For an unknown viewing condition or non-positive
            adapting luminances.
    """
    try:
        F = _SURROUND_FACTOR[viewing_condition]
    except KeyError:
        raise ValueError(
            f"Unknown viewing condition {viewing_condition!r}; "
            f"expected one of {sorted(_SURROUND_FACTOR)}"
        ) from None
    if test_luminance <= 0.0 or reference_luminance <= 0.0:
        raise ValueError(
            "CMCCAT2000 adapting luminances must be positive, got "
            f"{test_luminance!r} and {reference_luminance!r}"
        )

    total = test_luminance + reference_luminance
    D = F * (
        0.08 * math.log10(0.5 * total)
        + 0.76
        - 0.45 * (test_luminance - reference_luminance) / total
    )
    return min(max(D, 0.0), 1.0)


@dataclass(slots=True, frozen=True)
class CmcCat2000Adaptation:
    """
    CMCCAT2000 chromatic adaptation.

    Parameters
    ----------
    test_luminance : float
        Luminance of the test adapting field in cd/m².
    reference_illuminant : StandardIlluminant
        White of the reference field.
    reference_luminance : float
        Luminance of the reference adapting field in cd/m².
    viewing_condition : {"average", "dim", "dark"}
        Surround; sets F = 1.0, 0.8, 0.8.

    The clamped degree of adaptation is exposed as ``degree_of_adaptation``.
    """
    test_luminance: float
    reference_illuminant: StandardIlluminant
    reference_luminance: float
    viewing_condition: ViewingCondition = "average"
    degree_of_adaptation: float = field(init=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "degree_of_adaptation",
            cmccat2000_degree_of_adaptation(
                self.test_luminance, self.reference_luminance, self.viewing_condition
            ),
        )

    def __call__(self, xyz: XYZ) -> XYZ:
        R, R_inv = _basis(CMCCAT2000.matrix)
        test_white = xyz.reference_white.tristimulus(100.0)
        ref_white = self.reference_illuminant.tristimulus(100.0)

        # Step 1: cone responses of the sample and both whites
        rgb = R @ (100.0 * xyz.tristimulus)
        rgb_w = R @ test_white
        rgb_wr = R @ ref_white

        # Step 2/3: per-channel scaling
        D = self.degree_of_adaptation
        alpha = D * (test_white[1] / ref_white[1])
        rgb_c = rgb * (alpha * (rgb_wr / rgb_w) + 1.0 - D)

        # Step 4: corresponding tristimulus values
        return xyz.with_tristimulus((R_inv @ rgb_c) / 100.0, self.reference_illuminant)


# ═══════════════════════════════════════════════════════════════════════════════
# 6.  Zhai-Luo
# ═══════════════════════════════════════════════════════════════════════════════
_ZHAI_LUO_TRANSFORMS: Final[Dict[str, AdaptationTransform]] = {
    "cat02": CAT02,
    "cat16": CAT16,
}


@dataclass(slots=True, frozen=True)
class ZhaiLuoAdaptation:
    """
    Two-step chromatic adaptation with independent degrees of adaptation.

    Both fields are first adapted to a common ``baseline_illuminant``; the
    ratio of the two per-channel scale factors then maps the test field
    onto the reference field.

    Parameters
    ----------
    test_degree_of_adaptation : float
        Dβ of the test field (nominally in [0, 1]; not clamped).
    reference_illuminant : StandardIlluminant
        White of the reference field; the result is tagged with it.
    reference_degree_of_adaptation : float
        Dδ of the reference field (nominally in [0, 1]; not clamped).
    baseline_illuminant : StandardIlluminant
        Common anchor white (equal-energy E in the published examples).
    transform : {"cat02", "cat16"}
        Cone-response basis.
    """
    test_degree_of_adaptation: float
    reference_illuminant: StandardIlluminant
    reference_degree_of_adaptation: float
    baseline_illuminant: StandardIlluminant
    transform: ZhaiLuoTransform = "cat02"

    def __post_init__(self) -> None:
        if self.transform not in _ZHAI_LUO_TRANSFORMS:
            raise ValueError(
                f"Zhai-Luo adaptation supports {sorted(_ZHAI_LUO_TRANSFORMS)}, "
                f"got {self.transform!r}"
            )
        for label, D in (("test", self.test_degree_of_adaptation),
                         ("reference", self.reference_degree_of_adaptation)):
            if not 0.0 <= D <= 1.0:
                warnings.warn(
                    f"Zhai-Luo {label} degree of adaptation {D!r} lies outside "
                    "[0, 1]; it is used as given.",
                    stacklevel=3,
                )

    def __call__(self, xyz: XYZ) -> XYZ:
        R, R_inv = _basis(_ZHAI_LUO_TRANSFORMS[self.transform].matrix)
        D_test = self.test_degree_of_adaptation
        D_ref = self.reference_degree_of_adaptation

        white_test = xyz.reference_white.tristimulus()
        white_ref = self.reference_illuminant.tristimulus()
        white_base = self.baseline_illuminant.tristimulus()

        # Step 1: cone-like responses
        rgb = R @ xyz.tristimulus
        rgb_w_test = R @ white_test
        rgb_w_ref = R @ white_ref
        rgb_w_base = R @ white_base

        # Step 2: per-channel scale factors of each field towards the baseline
        scale_test = D_test * (white_test[1] / white_base[1]) * (rgb_w_base / rgb_w_test) + 1.0 - D_test
        scale_ref = D_ref * (white_ref[1] / white_base[1]) * (rgb_w_base / rgb_w_ref) + 1.0 - D_ref

        # Step 3/4: combined scaling and back to XYZ
        rgb_ref = (scale_test / scale_ref) * rgb
        return xyz.with_tristimulus(R_inv @ rgb_ref, self.reference_illuminant)
