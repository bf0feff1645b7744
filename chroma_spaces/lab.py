# -*- coding: utf-8 -*-
"""
Chroma: Colour spaces and chromatic adaptation for colorimetry
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: lab.py — CIE 1976 L*a*b* and its cylindrical form LCh(ab).

Components are the CIELAB values divided by 100, so L lies in [0, 1].
The white is the reference illuminant's XYZ at Y = 1; a white with any
non-positive component makes the conversion undefined (None).

References:
    - CIE 15:2004 "Colorimetry", §8.2.1
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Optional

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

__all__ = ["LabColorSpace", "Lab", "LchAbColorSpace", "LChab"]


@dataclass(slots=True, frozen=True)
class LabColorSpace(ColorSpace):
    model: ClassVar[ComponentModel] = ComponentModel("Lab", (
        ModelComponent("lightness", "L", "Perceptual lightness"),
        ModelComponent("a", "a", "Green-red opponent axis"),
        ModelComponent("b", "b", "Blue-yellow opponent axis"),
    ))

    profile: ColorSpaceProfile = field(default_factory=ColorSpaceProfile)


@binds(LabColorSpace)
@dataclass(slots=True, frozen=True)
class Lab(Color):
    """CIELAB colour (components scaled by 1/100)."""
    lightness: float
    a: float
    b: float
    opacity: float = 1.0
    color_space: LabColorSpace = field(default_factory=LabColorSpace)

    def to_xyz(self) -> Optional[XYZ]:
        white = self.reference_white.tristimulus()
        if np.any(white <= 0.0):
            return None

        # 1. Intermediate f-values from L*, a*, b*
        L, a, b = 100.0 * self.lightness, 100.0 * self.a, 100.0 * self.b
        fy = (L + 16.0) / 116.0
        fx = fy + a / 500.0
        fz = fy - b / 200.0

        # 2. Undo the compression and scale by the white
        ratios = ck.lab_f_inv(ck.as_vector((fx, fy, fz)))
        xyz = ratios * white
        return XYZ(*xyz.tolist(), self.opacity, XyzColorSpace(self.color_space.profile))

    @classmethod
    def _from_xyz_in_space(cls, xyz: XYZ, color_space: ColorSpace) -> Optional[Lab]:
        white = color_space.reference_white.tristimulus()
        if np.any(white <= 0.0):
            return None

        fx, fy, fz = ck.lab_f(ck.as_vector(xyz.tristimulus / white)).tolist()
        return cls(
            (116.0 * fy - 16.0) / 100.0,
            (500.0 * (fx - fy)) / 100.0,
            (200.0 * (fy - fz)) / 100.0,
            xyz.opacity,
            color_space,
        )


@dataclass(slots=True, frozen=True)
class LchAbColorSpace(AlternativeColorSpace):
    model: ClassVar[ComponentModel] = ComponentModel("LCh(ab)", (
        ModelComponent("lightness", "L", "Perceptual lightness"),
        ModelComponent("chroma", "C", "Distance from the neutral axis"),
        ModelComponent("hue", "h", "Hue angle in radians"),
    ))

    parent: LabColorSpace = field(default_factory=LabColorSpace)


@binds(LchAbColorSpace)
@dataclass(slots=True, frozen=True)
class LChab(AlternativeColor):
    """Cylindrical CIELAB; hue in radians on [0, 2π)."""
    parent_type: ClassVar = Lab

    lightness: float
    chroma: float
    hue: float
    opacity: float = 1.0
    color_space: LchAbColorSpace = field(default_factory=LchAbColorSpace)

    def to_parent(self) -> Lab:
        L, a, b = ck.polar_to_rect(ck.as_vector(self.components)).tolist()
        return Lab(L, a, b, self.opacity, self.color_space.parent)

    @classmethod
    def from_parent(cls, parent: Lab) -> LChab:
        L, C, h = ck.rect_to_polar(ck.as_vector(parent.components)).tolist()
        return cls(L, C, h, parent.opacity, LchAbColorSpace(parent=parent.color_space))
