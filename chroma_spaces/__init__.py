# -*- coding: utf-8 -*-
"""
Chroma: Colour spaces and chromatic adaptation for colorimetry
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Package: chroma_spaces — Colour types and their colour spaces.

    Reference types   XYZ, Lab, OkLab, Jab, RGB
    Alternative types xyY, LChab, OkLCh, JCh, HSL, HSV
"""

from .base import (
    AlternativeColor,
    Color,
    ColorSpace,
    ColorSpaceProfile,
    ComponentModel,
    ModelComponent,
    convert,
)
from .xyz import XYZ, XyzColorSpace, XyyColorSpace, xyY
from .lab import Lab, LabColorSpace, LChab, LchAbColorSpace
from .oklab import OkLab, OkLabColorSpace, OkLCh, OkLchColorSpace
from .jzazbz import Jab, JabColorSpace, JCh, JchColorSpace
from .rgb import (
    DISPLAY_P3,
    SRGB,
    Companding,
    GammaCompanding,
    LinearCompanding,
    LuminanceCompanding,
    ParametricCompanding,
    RGB,
    RgbColorSpace,
    RgbProfile,
    SrgbCompanding,
)
from .hsl import HSL, HslColorSpace, HSV, HsvColorSpace

__all__ = [
    # --- Framework ---
    "AlternativeColor",
    "Color",
    "ColorSpace",
    "ColorSpaceProfile",
    "ComponentModel",
    "ModelComponent",
    "convert",

    # --- XYZ family ---
    "XYZ", "XyzColorSpace", "xyY", "XyyColorSpace",

    # --- CIELAB family ---
    "Lab", "LabColorSpace", "LChab", "LchAbColorSpace",

    # --- Oklab family ---
    "OkLab", "OkLabColorSpace", "OkLCh", "OkLchColorSpace",

    # --- Jzazbz family ---
    "Jab", "JabColorSpace", "JCh", "JchColorSpace",

    # --- RGB family ---
    "RGB", "RgbColorSpace", "RgbProfile",
    "Companding", "LinearCompanding", "GammaCompanding", "SrgbCompanding",
    "LuminanceCompanding", "ParametricCompanding",
    "SRGB", "DISPLAY_P3",
    "HSL", "HslColorSpace", "HSV", "HsvColorSpace",
]
