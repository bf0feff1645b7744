# -*- coding: utf-8 -*-
"""
Chroma: Colour spaces and chromatic adaptation for colorimetry
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: jzazbz.py — Jzazbz (Jab) and its cylindrical form JCh.

Forward transform:
    1. X' = b·X − (b−1)·Z,  Y' = g·Y − (g−1)·X
    2. LMS  = M_lms · (X', Y', Z)
    3. LMS' = PQ(LMS)                 (ST 2084 with the Jzazbz exponent p)
    4. Iab  = M_iab · LMS'
    5. J    = (1+d)·I / (1+d·I) − d0

Inputs are taken as absolute luminance in cd/m² by the quantizer, so
relative XYZ (Y = 1 for the white) gives small J values.

References:
    - Safdar, M., Cui, G., Kim, Y. J., Luo, M. R., "Perceptually uniform
      color space for image signals including high dynamic range and wide
      gamut", Opt. Express 25(13) (2017)
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

__all__ = ["JabColorSpace", "Jab", "JchColorSpace", "JCh"]

# --- Model constants ---
JZ_B: Final[float] = 1.15
JZ_G: Final[float] = 0.66
JZ_D: Final[float] = -0.56
JZ_D0: Final[float] = 1.6295499532821566e-11

M_LMS: Final[np.ndarray] = np.array([
    [ 0.41478972, 0.579999, 0.0146480],
    [-0.2015100,  1.120649, 0.0531008],
    [-0.0166008,  0.264800, 0.6684799],
], dtype=np.float64)

M_IAB: Final[np.ndarray] = np.array([
    [0.5,       0.5,       0.0],
    [3.524000, -4.066708,  0.542708],
    [0.199076,  1.096799, -1.295875],
], dtype=np.float64)

_M_LMS_INV: Final[np.ndarray] = np.linalg.inv(M_LMS)
_M_IAB_INV: Final[np.ndarray] = np.linalg.inv(M_IAB)


@dataclass(slots=True, frozen=True)
class JabColorSpace(ColorSpace):
    model: ClassVar[ComponentModel] = ComponentModel("Jzazbz", (
        ModelComponent("lightness", "Jz", "Lightness"),
        ModelComponent("a", "az", "Red-green axis"),
        ModelComponent("b", "bz", "Yellow-blue axis"),
    ))

    profile: ColorSpaceProfile = field(default_factory=ColorSpaceProfile)


@binds(JabColorSpace)
@dataclass(slots=True, frozen=True)
class Jab(Color):
    """Jzazbz colour."""
    lightness: float
    a: float
    b: float
    opacity: float = 1.0
    color_space: JabColorSpace = field(default_factory=JabColorSpace)

    def to_xyz(self) -> XYZ:
        J = self.lightness + JZ_D0
        I = J / (1.0 + JZ_D - JZ_D * J)

        lms_prime = _M_IAB_INV @ ck.as_vector((I, self.a, self.b))
        lms = ck.pq_decode(lms_prime)
        x_prime, y_prime, z = (_M_LMS_INV @ lms).tolist()

        # Undo the blue-yellow pre-adaptation
        x = (x_prime + (JZ_B - 1.0) * z) / JZ_B
        y = (y_prime + (JZ_G - 1.0) * x) / JZ_G
        return XYZ(x, y, z, self.opacity, XyzColorSpace(self.color_space.profile))

    @classmethod
    def _from_xyz_in_space(cls, xyz: XYZ, color_space: ColorSpace) -> Jab:
        x_prime = JZ_B * xyz.x - (JZ_B - 1.0) * xyz.z
        y_prime = JZ_G * xyz.y - (JZ_G - 1.0) * xyz.x

        lms = M_LMS @ ck.as_vector((x_prime, y_prime, xyz.z))
        I, a, b = (M_IAB @ ck.pq_encode(lms)).tolist()
        J = ((1.0 + JZ_D) * I) / (1.0 + JZ_D * I) - JZ_D0
        return cls(J, a, b, xyz.opacity, color_space)


@dataclass(slots=True, frozen=True)
class JchColorSpace(AlternativeColorSpace):
    model: ClassVar[ComponentModel] = ComponentModel("JzCzhz", (
        ModelComponent("lightness", "Jz", "Lightness"),
        ModelComponent("chroma", "Cz", "Chroma"),
        ModelComponent("hue", "hz", "Hue angle in radians"),
    ))

    parent: JabColorSpace = field(default_factory=JabColorSpace)


@binds(JchColorSpace)
@dataclass(slots=True, frozen=True)
class JCh(AlternativeColor):
    """Cylindrical Jzazbz; hue in radians on [0, 2π)."""
    parent_type: ClassVar = Jab

    lightness: float
    chroma: float
    hue: float
    opacity: float = 1.0
    color_space: JchColorSpace = field(default_factory=JchColorSpace)

    def to_parent(self) -> Jab:
        J, a, b = ck.polar_to_rect(ck.as_vector(self.components)).tolist()
        return Jab(J, a, b, self.opacity, self.color_space.parent)

    @classmethod
    def from_parent(cls, parent: Jab) -> JCh:
        J, C, h = ck.rect_to_polar(ck.as_vector(parent.components)).tolist()
        return cls(J, C, h, parent.opacity, JchColorSpace(parent=parent.color_space))
