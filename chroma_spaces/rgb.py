# -*- coding: utf-8 -*-
"""
Chroma: Colour spaces and chromatic adaptation for colorimetry
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: rgb.py — Additive RGB spaces defined by primaries, white and a
companding curve.

Matrix derivation (when no matrix is supplied):
    P        = [XYZ_r | XYZ_g | XYZ_b]      primaries at Y = 1, as columns
    S        = P⁻¹ · XYZ_white
    to_xyz   = P · diag(S)
    to_rgb   = to_xyz⁻¹

If only one matrix is supplied the other is its inverse.  Matrices are
stored as nested tuples so a profile stays a hashable value.

Companding (encode: linear -> stored, decode: stored -> linear):
  * LinearCompanding        identity
  * GammaCompanding(γ)      v^(1/γ) / v^γ
  * SrgbCompanding          IEC 61966-2-1
  * LuminanceCompanding     L* curve
  * ParametricCompanding    ICC parametricCurveType, function type 3

References:
    - Lindbloom, B., "RGB/XYZ Matrices", brucelindbloom.com
    - IEC 61966-2-1:1999 (sRGB)
    - ICC.1:2022, §10.18 parametricCurveType
"""

from __future__ import annotations

import string
from dataclasses import dataclass, field, replace
from typing import ClassVar, Optional, Protocol, Tuple, Union, runtime_checkable

import numpy as np

import chroma_kernels as ck
from chroma_illuminants import StandardIlluminant, TwoDegree, XyChromaticity

from .base import (
    Color,
    ColorSpace,
    ColorSpaceProfile,
    ComponentModel,
    ModelComponent,
    binds,
)
from .xyz import XYZ, XyzColorSpace

__all__ = [
    # --- Companding ---
    "Companding",
    "LinearCompanding",
    "GammaCompanding",
    "SrgbCompanding",
    "LuminanceCompanding",
    "ParametricCompanding",

    # --- Space & colour ---
    "RgbProfile",
    "RgbColorSpace",
    "RGB",

    # --- Presets ---
    "SRGB",
    "DISPLAY_P3",
]

Matrix3 = Tuple[Tuple[float, float, float], ...]


# ═══════════════════════════════════════════════════════════════════════════════
# 1.  Companding curves
# ═══════════════════════════════════════════════════════════════════════════════
@runtime_checkable
class Companding(Protocol):
    """Transfer function between linear light and stored RGB values."""

    def compand(self, linear: np.ndarray) -> np.ndarray: ...

    def linearize(self, stored: np.ndarray) -> np.ndarray: ...


@dataclass(slots=True, frozen=True)
class LinearCompanding:
    def compand(self, linear: np.ndarray) -> np.ndarray:
        return ck.as_vector(linear).copy()

    def linearize(self, stored: np.ndarray) -> np.ndarray:
        return ck.as_vector(stored).copy()


@dataclass(slots=True, frozen=True)
class GammaCompanding:
    gamma: float

    def compand(self, linear: np.ndarray) -> np.ndarray:
        return ck.compand_gamma(ck.as_vector(linear), self.gamma)

    def linearize(self, stored: np.ndarray) -> np.ndarray:
        return ck.linearize_gamma(ck.as_vector(stored), self.gamma)


@dataclass(slots=True, frozen=True)
class SrgbCompanding:
    def compand(self, linear: np.ndarray) -> np.ndarray:
        return ck.compand_srgb(ck.as_vector(linear))

    def linearize(self, stored: np.ndarray) -> np.ndarray:
        return ck.linearize_srgb(ck.as_vector(stored))


@dataclass(slots=True, frozen=True)
class LuminanceCompanding:
    def compand(self, linear: np.ndarray) -> np.ndarray:
        return ck.compand_luminance(ck.as_vector(linear))

    def linearize(self, stored: np.ndarray) -> np.ndarray:
        return ck.linearize_luminance(ck.as_vector(stored))


@dataclass(slots=True, frozen=True)
class ParametricCompanding:
    """
    ICC parametric curve type 3.

    Decode: ``(a·v + b)^γ`` for ``v >= d``, ``c·v`` below.
    """
    gamma: float
    a: float
    b: float
    c: float
    d: float

    def compand(self, linear: np.ndarray) -> np.ndarray:
        return ck.compand_parametric(
            ck.as_vector(linear), self.gamma, self.a, self.b, self.c, self.d
        )

    def linearize(self, stored: np.ndarray) -> np.ndarray:
        return ck.linearize_parametric(
            ck.as_vector(stored), self.gamma, self.a, self.b, self.c, self.d
        )


# ═══════════════════════════════════════════════════════════════════════════════
# 2.  Profile
# ═══════════════════════════════════════════════════════════════════════════════
def _freeze(matrix: Union[np.ndarray, Matrix3]) -> Matrix3:
    arr = np.asarray(matrix, dtype=np.float64)
    if arr.shape != (3, 3):
        raise ValueError(f"RGB conversion matrices must be 3x3, got shape {arr.shape}")
    return tuple(tuple(float(v) for v in row) for row in arr)


def _derive_to_xyz(
    red: XyChromaticity,
    green: XyChromaticity,
    blue: XyChromaticity,
    white: StandardIlluminant,
) -> np.ndarray:
    primaries = np.column_stack([
        red.to_tristimulus(),
        green.to_tristimulus(),
        blue.to_tristimulus(),
    ])
    scale = np.linalg.solve(primaries, white.tristimulus())
    return primaries * scale


@dataclass(slots=True, frozen=True)
class RgbProfile(ColorSpaceProfile):
    """
    Primaries, companding curve and the derived XYZ <-> linear RGB matrices.

    Defaults to the sRGB primaries and curve under the given white.

    Raises:
        ValueError: If a primary has ``y <= 0`` or a matrix is not 3x3.
    """
    companding: Companding = SrgbCompanding()
    red: XyChromaticity = XyChromaticity(0.64, 0.33)
    green: XyChromaticity = XyChromaticity(0.30, 0.60)
    blue: XyChromaticity = XyChromaticity(0.15, 0.06)
    to_xyz_matrix: Optional[Matrix3] = None
    to_rgb_matrix: Optional[Matrix3] = None

    def __post_init__(self) -> None:
        for label in ("red", "green", "blue"):
            coordinate = XyChromaticity(*getattr(self, label))
            if not coordinate.y > 0.0:
                raise ValueError(f"The {label} primary needs a positive y, got {coordinate.y!r}")
            object.__setattr__(self, label, coordinate)

        if self.to_xyz_matrix is None and self.to_rgb_matrix is None:
            to_xyz = _derive_to_xyz(self.red, self.green, self.blue, self.reference_white)
            object.__setattr__(self, "to_xyz_matrix", _freeze(to_xyz))
            object.__setattr__(self, "to_rgb_matrix", _freeze(np.linalg.inv(to_xyz)))
        elif self.to_rgb_matrix is None:
            to_xyz = np.array(self.to_xyz_matrix, dtype=np.float64)
            object.__setattr__(self, "to_xyz_matrix", _freeze(to_xyz))
            object.__setattr__(self, "to_rgb_matrix", _freeze(np.linalg.inv(to_xyz)))
        elif self.to_xyz_matrix is None:
            to_rgb = np.array(self.to_rgb_matrix, dtype=np.float64)
            object.__setattr__(self, "to_rgb_matrix", _freeze(to_rgb))
            object.__setattr__(self, "to_xyz_matrix", _freeze(np.linalg.inv(to_rgb)))
        else:
            object.__setattr__(self, "to_xyz_matrix", _freeze(self.to_xyz_matrix))
            object.__setattr__(self, "to_rgb_matrix", _freeze(self.to_rgb_matrix))

    @property
    def to_xyz(self) -> np.ndarray:
        """Linear RGB -> XYZ matrix."""
        return np.array(self.to_xyz_matrix, dtype=np.float64)

    @property
    def to_rgb(self) -> np.ndarray:
        """XYZ -> linear RGB matrix."""
        return np.array(self.to_rgb_matrix, dtype=np.float64)

    def with_white(self, illuminant: StandardIlluminant) -> RgbProfile:
        """Same primaries and curve; matrices re-derived for ``illuminant``."""
        return replace(
            self,
            reference_white=illuminant,
            to_xyz_matrix=None,
            to_rgb_matrix=None,
        )


# ═══════════════════════════════════════════════════════════════════════════════
# 3.  Space and colour
# ═══════════════════════════════════════════════════════════════════════════════
@dataclass(slots=True, frozen=True)
class RgbColorSpace(ColorSpace):
    model: ClassVar[ComponentModel] = ComponentModel("RGB", (
        ModelComponent("red", "R"),
        ModelComponent("green", "G"),
        ModelComponent("blue", "B"),
    ))

    profile: RgbProfile = field(default_factory=RgbProfile)


@binds(RgbColorSpace)
@dataclass(slots=True, frozen=True)
class RGB(Color):
    """
    Companded RGB colour.

    Components are the stored (non-linear) values, nominally in [0, 1].
    """
    red: float
    green: float
    blue: float
    opacity: float = 1.0
    color_space: RgbColorSpace = field(default_factory=RgbColorSpace)

    @classmethod
    def _default_space(cls, xyz: XYZ) -> RgbColorSpace:
        # sRGB primaries under the colour's own white: no adaptation
        return RgbColorSpace(RgbProfile(reference_white=xyz.reference_white))

    def to_xyz(self) -> XYZ:
        profile = self.color_space.profile
        linear = profile.companding.linearize(ck.as_vector(self.components))
        xyz = profile.to_xyz @ linear
        return XYZ(*xyz.tolist(), self.opacity, XyzColorSpace(ColorSpaceProfile(profile.reference_white)))

    @classmethod
    def _from_xyz_in_space(cls, xyz: XYZ, color_space: ColorSpace) -> RGB:
        profile = color_space.profile  # type: ignore[attr-defined]
        linear = profile.to_rgb @ xyz.tristimulus
        r, g, b = profile.companding.compand(linear).tolist()
        return cls(r, g, b, xyz.opacity, color_space)

    @classmethod
    def from_hex(
        cls,
        value: Union[str, int],
        color_space: Optional[RgbColorSpace] = None,
    ) -> Optional[RGB]:
        """
        Build a colour from ``"#RRGGBB"`` / ``"RRGGBB"`` or a 24-bit integer.

        Returns None when a string is not exactly six hexadecimal digits
        after an optional leading ``#``.
        """
        if isinstance(value, str):
            digits = value.strip().removeprefix("#")
            if len(digits) != 6 or not all(c in string.hexdigits for c in digits):
                return None
            value = int(digits, 16)
        if color_space is None:
            color_space = RgbColorSpace()
        return cls(
            ((value >> 16) & 0xFF) / 255.0,
            ((value >> 8) & 0xFF) / 255.0,
            (value & 0xFF) / 255.0,
            1.0,
            color_space,
        )

    def to_hex(self) -> str:
        """``"#RRGGBB"`` with components clamped to [0, 1] and rounded."""
        channels = np.clip(ck.as_vector(self.components), 0.0, 1.0)
        r, g, b = (int(round(v * 255.0)) for v in channels)
        return f"#{r:02X}{g:02X}{b:02X}"


# ═══════════════════════════════════════════════════════════════════════════════
# 4.  Presets
# ═══════════════════════════════════════════════════════════════════════════════
SRGB: RgbColorSpace = RgbColorSpace(RgbProfile(
    reference_white=TwoDegree.D65,
    companding=SrgbCompanding(),
    red=XyChromaticity(0.64, 0.33),
    green=XyChromaticity(0.30, 0.60),
    blue=XyChromaticity(0.15, 0.06),
    to_xyz_matrix=(
        (0.4124, 0.3576, 0.1805),
        (0.2126, 0.7152, 0.0722),
        (0.0193, 0.1192, 0.9505),
    ),
    to_rgb_matrix=(
        ( 3.2406, -1.5372, -0.4986),
        (-0.9689,  1.8758,  0.0415),
        ( 0.0557, -0.2040,  1.0570),
    ),
))

DISPLAY_P3: RgbColorSpace = RgbColorSpace(RgbProfile(
    reference_white=TwoDegree.D65,
    companding=ParametricCompanding(2.4, 0.948, 0.052, 0.077, 0.04),
    red=XyChromaticity(0.680, 0.320),
    green=XyChromaticity(0.265, 0.690),
    blue=XyChromaticity(0.150, 0.060),
))
