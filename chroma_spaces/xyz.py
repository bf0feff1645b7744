# -*- coding: utf-8 -*-
"""
Chroma: Colour spaces and chromatic adaptation for colorimetry
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: xyz.py — CIE 1931 XYZ (the anchor space) and xyY.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Optional, Sequence, Union

import numpy as np

from chroma_adaptation import ChromaticAdaptation, LinearAdaptation
from chroma_illuminants import StandardIlluminant, XyChromaticity

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

__all__ = ["XyzColorSpace", "XYZ", "XyyColorSpace", "xyY"]


@dataclass(slots=True, frozen=True)
class XyzColorSpace(ColorSpace):
    """CIE XYZ; the profile carries only a reference white."""
    model: ClassVar[ComponentModel] = ComponentModel("XYZ", (
        ModelComponent("x", "X", "Mix of cone responses, roughly red"),
        ModelComponent("y", "Y", "Luminance"),
        ModelComponent("z", "Z", "Quasi-equal to the S cone response"),
    ))

    profile: ColorSpaceProfile = field(default_factory=ColorSpaceProfile)

    @classmethod
    def under(cls, illuminant: StandardIlluminant) -> XyzColorSpace:
        """XYZ space with the given reference white."""
        return cls(ColorSpaceProfile(reference_white=illuminant))


@binds(XyzColorSpace)
@dataclass(slots=True, frozen=True)
class XYZ(Color):
    """
    A tristimulus value relative to ``color_space.reference_white``.

    Values are on the relative scale where the perfect diffuser has Y = 1.
    """
    x: float
    y: float
    z: float
    opacity: float = 1.0
    color_space: XyzColorSpace = field(default_factory=XyzColorSpace)

    @property
    def tristimulus(self) -> np.ndarray:
        """(X, Y, Z) as a float64 column vector."""
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    @property
    def chromaticity(self) -> Optional[XyChromaticity]:
        """(x, y) chromaticity; None for a zero tristimulus sum."""
        return XyChromaticity.from_tristimulus(self.x, self.y, self.z)

    def with_tristimulus(
        self,
        values: Union[Sequence[float], np.ndarray],
        reference_white: StandardIlluminant,
    ) -> XYZ:
        """New XYZ with this colour's opacity under ``reference_white``."""
        return XYZ(
            float(values[0]),
            float(values[1]),
            float(values[2]),
            self.opacity,
            XyzColorSpace.under(reference_white),
        )

    def adapt(self, target: Union[StandardIlluminant, ChromaticAdaptation]) -> XYZ:
        """
        Re-express the colour under another white.

        ``target`` is either an illuminant (linear Bradford adaptation) or
        any adaptation strategy.
        """
        if isinstance(target, StandardIlluminant):
            target = LinearAdaptation(target)
        return target(self)

    def to_xyz(self) -> XYZ:
        return self

    @classmethod
    def _from_xyz_in_space(cls, xyz: XYZ, color_space: ColorSpace) -> XYZ:
        return cls(xyz.x, xyz.y, xyz.z, xyz.opacity, color_space)


@dataclass(slots=True, frozen=True)
class XyyColorSpace(AlternativeColorSpace):
    """Chromaticity plus luminance; shares the XYZ profile."""
    model: ClassVar[ComponentModel] = ComponentModel("xyY", (
        ModelComponent("x", "x", "Chromaticity x"),
        ModelComponent("y", "y", "Chromaticity y"),
        ModelComponent("luminance", "Y", "Luminance"),
    ))

    parent: XyzColorSpace = field(default_factory=XyzColorSpace)


@binds(XyyColorSpace)
@dataclass(slots=True, frozen=True)
class xyY(AlternativeColor):
    """CIE xyY colour."""
    parent_type: ClassVar = XYZ

    x: float
    y: float
    luminance: float
    opacity: float = 1.0
    color_space: XyyColorSpace = field(default_factory=XyyColorSpace)

    @property
    def chromaticity(self) -> XyChromaticity:
        return XyChromaticity(self.x, self.y)

    def to_parent(self) -> Optional[XYZ]:
        """None when ``y == 0``."""
        tristimulus = self.chromaticity.to_tristimulus(self.luminance)
        if tristimulus is None:
            return None
        return XYZ(*tristimulus.tolist(), self.opacity, self.color_space.parent)

    @classmethod
    def from_parent(cls, parent: XYZ) -> Optional[xyY]:
        """None when ``X + Y + Z == 0``."""
        coordinate = parent.chromaticity
        if coordinate is None:
            return None
        return cls(
            coordinate.x,
            coordinate.y,
            parent.y,
            parent.opacity,
            XyyColorSpace(parent=parent.color_space),
        )
