# -*- coding: utf-8 -*-
"""
Chroma: Colour spaces and chromatic adaptation for colorimetry
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: oklab.py — Oklab and its cylindrical form OkLCh.

    lms  = M1 · XYZ
    lms' = ∛lms          (sign-preserving)
    Lab  = M2 · lms'

No white scaling is applied; Oklab is defined for D65 XYZ.

References:
    - Ottosson, B., "A perceptual color space for image processing" (2020)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Final

import numpy as np

import chroma_kernels as ck

from .base import (
    AlternativeColor,
    AlternativeColorSpace,
    Color,
    ColorSpace,
    ColorSpaceProfile,
    ComponentModel,
    ModelComponent,
    binds,
)
from .xyz import XYZ, XyzColorSpace

__all__ = ["OkLabColorSpace", "OkLab", "OkLchColorSpace", "OkLCh"]

# XYZ (D65) -> approximate cone responses
M1: Final[np.ndarray] = np.array([
    [0.8189330101, 0.3618667424, -0.1288597137],
    [0.0329845436, 0.9293118715,  0.0361456387],
    [0.0482003018, 0.2643662691,  0.6338517070],
], dtype=np.float64)

# Compressed cone responses -> Lab
M2: Final[np.ndarray] = np.array([
    [0.2104542553,  0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050,  0.4505937099],
    [0.0259040371,  0.7827717662, -0.8086757660],
], dtype=np.float64)

_M1_INV: Final[np.ndarray] = np.linalg.inv(M1)
_M2_INV: Final[np.ndarray] = np.linalg.inv(M2)


@dataclass(slots=True, frozen=True)
class OkLabColorSpace(ColorSpace):
    model: ClassVar[ComponentModel] = ComponentModel("Oklab", (
        ModelComponent("lightness", "L", "Perceived lightness"),
        ModelComponent("a", "a", "Green-red axis"),
        ModelComponent("b", "b", "Blue-yellow axis"),
    ))

    profile: ColorSpaceProfile = field(default_factory=ColorSpaceProfile)


@binds(OkLabColorSpace)
@dataclass(slots=True, frozen=True)
class OkLab(Color):
    """Oklab colour; L ≈ 1 for the D65 white."""
    lightness: float
    a: float
    b: float
    opacity: float = 1.0
    color_space: OkLabColorSpace = field(default_factory=OkLabColorSpace)

    def to_xyz(self) -> XYZ:
        lms_prime = _M2_INV @ ck.as_vector(self.components)
        xyz = _M1_INV @ (lms_prime ** 3)
        return XYZ(*xyz.tolist(), self.opacity, XyzColorSpace(self.color_space.profile))

    @classmethod
    def _from_xyz_in_space(cls, xyz: XYZ, color_space: ColorSpace) -> OkLab:
        lms = M1 @ xyz.tristimulus
        L, a, b = (M2 @ ck.signed_cbrt(lms)).tolist()
        return cls(L, a, b, xyz.opacity, color_space)


@dataclass(slots=True, frozen=True)
class OkLchColorSpace(AlternativeColorSpace):
    model: ClassVar[ComponentModel] = ComponentModel("OkLCh", (
        ModelComponent("lightness", "L", "Perceived lightness"),
        ModelComponent("chroma", "C", "Chroma"),
        ModelComponent("hue", "h", "Hue angle in radians"),
    ))

    parent: OkLabColorSpace = field(default_factory=OkLabColorSpace)


@binds(OkLchColorSpace)
@dataclass(slots=True, frozen=True)
class OkLCh(AlternativeColor):
    """Cylindrical Oklab; hue in radians on [0, 2π)."""
    parent_type: ClassVar = OkLab

    lightness: float
    chroma: float
    hue: float
    opacity: float = 1.0
    color_space: OkLchColorSpace = field(default_factory=OkLchColorSpace)

    def to_parent(self) -> OkLab:
        L, a, b = ck.polar_to_rect(ck.as_vector(self.components)).tolist()
        return OkLab(L, a, b, self.opacity, self.color_space.parent)

    @classmethod
    def from_parent(cls, parent: OkLab) -> OkLCh:
        L, C, h = ck.rect_to_polar(ck.as_vector(parent.components)).tolist()
        return cls(L, C, h, parent.opacity, OkLchColorSpace(parent=parent.color_space))
