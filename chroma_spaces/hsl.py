# -*- coding: utf-8 -*-
"""
Chroma: Colour spaces and chromatic adaptation for colorimetry
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: hsl.py — HSL and HSV cylindrical forms of an RGB space.

Both are pure re-parameterisations of the RGB cube; no colorimetry is
involved.  The hue is stored in radians.  Achromatic colours (chroma 0)
get hue 0; the saturation is 0 wherever its denominator vanishes.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import ClassVar, Tuple

import chroma_kernels as ck

from .base import (
    AlternativeColor,
    AlternativeColorSpace,
    ComponentModel,
    ModelComponent,
    binds,
)
from .rgb import RGB, RgbColorSpace

__all__ = ["HslColorSpace", "HSL", "HsvColorSpace", "HSV"]


def _hue_degrees(red: float, green: float, blue: float, max_c: float, chroma: float) -> float:
    """Max-channel piecewise hue in degrees on [0, 360)."""
    if chroma == 0.0:
        return 0.0
    if max_c == red:
        hue = 60.0 * ((green - blue) / chroma)
    elif max_c == green:
        hue = 60.0 * (2.0 + (blue - red) / chroma)
    else:
        hue = 60.0 * (4.0 + (red - green) / chroma)
    if hue < 0.0:
        hue += 360.0
    # A tiny negative hue rounds up to exactly 360
    if hue >= 360.0:
        hue = 0.0
    return hue


def _sector(hue: float, chroma: float) -> Tuple[float, float, float]:
    """(r, g, b) before the lightness offset; zero outside [0°, 360°)."""
    x = chroma * (1.0 - abs(math.fmod(hue / 60.0, 2.0) - 1.0))
    if 0.0 <= hue < 60.0:
        return chroma, x, 0.0
    if 60.0 <= hue < 120.0:
        return x, chroma, 0.0
    if 120.0 <= hue < 180.0:
        return 0.0, chroma, x
    if 180.0 <= hue < 240.0:
        return 0.0, x, chroma
    if 240.0 <= hue < 300.0:
        return x, 0.0, chroma
    if 300.0 <= hue < 360.0:
        return chroma, 0.0, x
    return 0.0, 0.0, 0.0


# ═══════════════════════════════════════════════════════════════════════════════
# HSL
# ═══════════════════════════════════════════════════════════════════════════════
@dataclass(slots=True, frozen=True)
class HslColorSpace(AlternativeColorSpace):
    model: ClassVar[ComponentModel] = ComponentModel("HSL", (
        ModelComponent("hue", "H", "Hue angle in radians"),
        ModelComponent("saturation", "S"),
        ModelComponent("lightness", "L"),
    ))

    parent: RgbColorSpace = field(default_factory=RgbColorSpace)


@binds(HslColorSpace)
@dataclass(slots=True, frozen=True)
class HSL(AlternativeColor):
    parent_type: ClassVar = RGB

    hue: float
    saturation: float
    lightness: float
    opacity: float = 1.0
    color_space: HslColorSpace = field(default_factory=HslColorSpace)

    def to_parent(self) -> RGB:
        hue = self.hue * ck.RAD2DEG
        chroma = (1.0 - abs(2.0 * self.lightness - 1.0)) * self.saturation
        m = self.lightness - chroma / 2.0
        r, g, b = _sector(hue, chroma)
        return RGB(r + m, g + m, b + m, self.opacity, self.color_space.parent)

    @classmethod
    def from_parent(cls, parent: RGB) -> HSL:
        r, g, b = parent.red, parent.green, parent.blue
        max_c = max(r, g, b)
        min_c = min(r, g, b)
        chroma = max_c - min_c
        lightness = (max_c + min_c) / 2.0

        if lightness == 0.0 or lightness == 1.0:
            saturation = 0.0
        else:
            saturation = chroma / (1.0 - abs(2.0 * lightness - 1.0))

        hue = _hue_degrees(r, g, b, max_c, chroma) * ck.DEG2RAD
        return cls(hue, saturation, lightness, parent.opacity,
                   HslColorSpace(parent=parent.color_space))


# ═══════════════════════════════════════════════════════════════════════════════
# HSV
# ═══════════════════════════════════════════════════════════════════════════════
@dataclass(slots=True, frozen=True)
class HsvColorSpace(AlternativeColorSpace):
    model: ClassVar[ComponentModel] = ComponentModel("HSV", (
        ModelComponent("hue", "H", "Hue angle in radians"),
        ModelComponent("saturation", "S"),
        ModelComponent("value", "V"),
    ))

    parent: RgbColorSpace = field(default_factory=RgbColorSpace)


@binds(HsvColorSpace)
@dataclass(slots=True, frozen=True)
class HSV(AlternativeColor):
    parent_type: ClassVar = RGB

    hue: float
    saturation: float
    value: float
    opacity: float = 1.0
    color_space: HsvColorSpace = field(default_factory=HsvColorSpace)

    def to_parent(self) -> RGB:
        hue = self.hue * ck.RAD2DEG
        chroma = self.value * self.saturation
        m = self.value - chroma
        r, g, b = _sector(hue, chroma)
        return RGB(r + m, g + m, b + m, self.opacity, self.color_space.parent)

    @classmethod
    def from_parent(cls, parent: RGB) -> HSV:
        r, g, b = parent.red, parent.green, parent.blue
        max_c = max(r, g, b)
        chroma = max_c - min(r, g, b)
        saturation = 0.0 if max_c == 0.0 else chroma / max_c

        hue = _hue_degrees(r, g, b, max_c, chroma) * ck.DEG2RAD
        return cls(hue, saturation, max_c, parent.opacity,
                   HsvColorSpace(parent=parent.color_space))
