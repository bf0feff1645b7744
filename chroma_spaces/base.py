# -*- coding: utf-8 -*-
"""
Chroma: Colour spaces and chromatic adaptation for colorimetry
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: base.py — Profiles, colour spaces and the colour base classes.

Every colour is an immutable value owning its colour space.  Conversions
between types always pass through XYZ:

    colour.to_xyz() -> [adapt to target white] -> Target.from_xyz(xyz, space)

"Reference" colour types (XYZ, Lab, OkLab, Jab, RGB) convert to XYZ
directly.  "Alternative" types (xyY, LCh, OkLCh, JCh, HSL, HSV) are exact
re-parameterisations of a parent type and share its profile; they reach
XYZ through that parent.

Undefined geometry (zero denominators, non-positive whites) yields None
rather than raising.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import (
    TYPE_CHECKING,
    Callable,
    ClassVar,
    NamedTuple,
    Optional,
    Tuple,
    Type,
    TypeVar,
)

from chroma_illuminants import StandardIlluminant, TwoDegree

if TYPE_CHECKING:
    from chroma_adaptation import ChromaticAdaptation
    from .xyz import XYZ

__all__ = [
    "ModelComponent",
    "ComponentModel",
    "ColorSpaceProfile",
    "ColorSpace",
    "Color",
    "AlternativeColor",
    "binds",
    "adapt_to_white",
    "convert",
]

C = TypeVar("C", bound="Color")


# ═══════════════════════════════════════════════════════════════════════════════
# 1.  Descriptors and profiles
# ═══════════════════════════════════════════════════════════════════════════════
class ModelComponent(NamedTuple):
    """One axis of a colour model."""
    name: str
    abbreviation: str
    description: str = ""


@dataclass(slots=True, frozen=True)
class ComponentModel:
    """Names of the axes of a colour model (informational only)."""
    name: str
    components: Tuple[ModelComponent, ...]


@dataclass(slots=True, frozen=True)
class ColorSpaceProfile:
    """Mathematical definition shared by every space: the reference white."""
    reference_white: StandardIlluminant = TwoDegree.D65

    def with_white(self, illuminant: StandardIlluminant) -> ColorSpaceProfile:
        """Same profile under another reference white."""
        return replace(self, reference_white=illuminant)


# ═══════════════════════════════════════════════════════════════════════════════
# 2.  Colour spaces
# ═══════════════════════════════════════════════════════════════════════════════
class ColorSpace:
    """
    Base for all colour spaces.

    Reference spaces are frozen dataclasses with a ``profile`` field;
    alternative spaces hold a ``parent`` space and expose its profile.
    """
    __slots__ = ()

    model: ClassVar[ComponentModel]
    color_type: ClassVar[Type[Color]]

    @property
    def reference_white(self) -> StandardIlluminant:
        return self.profile.reference_white  # type: ignore[attr-defined]

    def for_white(self, illuminant: StandardIlluminant) -> ColorSpace:
        """Returns the same space under another reference white."""
        return replace(self, profile=self.profile.with_white(illuminant))  # type: ignore[attr-defined]


class AlternativeColorSpace(ColorSpace):
    """Space whose profile is inherited from a ``parent`` reference space."""
    __slots__ = ()

    @property
    def profile(self) -> ColorSpaceProfile:
        return self.parent.profile  # type: ignore[attr-defined]

    def for_white(self, illuminant: StandardIlluminant) -> ColorSpace:
        return replace(self, parent=self.parent.for_white(illuminant))  # type: ignore[attr-defined]


def binds(space_type: Type[ColorSpace]) -> Callable[[Type[C]], Type[C]]:
    """
    Class decorator linking a colour type to its colour-space type.

    Must sit above ``@dataclass`` so it receives the final (slotted) class.
    """
    def decorator(color_type: Type[C]) -> Type[C]:
        color_type.space_type = space_type
        space_type.color_type = color_type
        return color_type
    return decorator


# ═══════════════════════════════════════════════════════════════════════════════
# 3.  Adaptation helper
# ═══════════════════════════════════════════════════════════════════════════════
def adapt_to_white(
    xyz: XYZ,
    reference_white: StandardIlluminant,
    adaptation: Optional[ChromaticAdaptation] = None,
) -> XYZ:
    """
    Re-express ``xyz`` under ``reference_white``.

    Without an explicit strategy the linear Bradford transform is used.

    Raises:
        ValueError: If ``adaptation`` targets a different white.
    """
    if adaptation is not None and adaptation.reference_illuminant != reference_white:
        raise ValueError(
            f"Adaptation targets {adaptation.reference_illuminant.name!r} but the "
            f"destination space uses {reference_white.name!r}."
        )
    if xyz.reference_white == reference_white:
        return xyz
    if adaptation is None:
        return xyz.adapt(reference_white)
    return adaptation(xyz)


# ═══════════════════════════════════════════════════════════════════════════════
# 4.  Colours
# ═══════════════════════════════════════════════════════════════════════════════
class Color:
    """
    Base for all colour values.

    Subclasses are frozen dataclasses whose leading fields are the colour
    components, followed by ``opacity`` and ``color_space``.  They must
    implement ``to_xyz()`` and ``_from_xyz_in_space()``.
    """
    __slots__ = ()

    space_type: ClassVar[Type[ColorSpace]]

    @property
    def components(self) -> Tuple[float, ...]:
        """Colour components in model order (opacity excluded)."""
        return tuple(
            getattr(self, f.name)
            for f in fields(self)  # type: ignore[arg-type]
            if f.name not in ("opacity", "color_space")
        )

    @property
    def reference_white(self) -> StandardIlluminant:
        return self.color_space.reference_white  # type: ignore[attr-defined]

    def to_xyz(self) -> Optional[XYZ]:
        """Override in subclass: return the colour as XYZ, or None if undefined."""
        raise NotImplementedError(
            f"{self.__class__.__name__} must implement to_xyz()"
        )

    @classmethod
    def _from_xyz_in_space(cls: Type[C], xyz: XYZ, color_space: ColorSpace) -> Optional[C]:
        """Override in subclass: build from XYZ already under the space's white."""
        raise NotImplementedError(
            f"{cls.__name__} must implement _from_xyz_in_space()"
        )

    @classmethod
    def _default_space(cls, xyz: XYZ) -> ColorSpace:
        """Space used by ``from_xyz`` when none is given."""
        return cls.space_type()

    @classmethod
    def from_xyz(
        cls: Type[C],
        xyz: XYZ,
        color_space: Optional[ColorSpace] = None,
        adaptation: Optional[ChromaticAdaptation] = None,
    ) -> Optional[C]:
        """
        Build a colour of this type from XYZ.

        Args:
            xyz: Source colour.
            color_space: Destination space; the type's default when omitted.
            adaptation: Strategy used when the reference whites differ.
                Bradford when omitted.

        Returns:
            The new colour, or None if the conversion is undefined.

        Raises:
            ValueError: If ``adaptation`` targets a different white than
                ``color_space``.
        """
        if color_space is None:
            color_space = cls._default_space(xyz)
        adapted = adapt_to_white(xyz, color_space.reference_white, adaptation)
        return cls._from_xyz_in_space(adapted, color_space)

    def convert(
        self,
        color_space: ColorSpace,
        adaptation: Optional[ChromaticAdaptation] = None,
    ) -> Optional[Color]:
        """Convert into ``color_space`` via XYZ; None if any step is undefined."""
        xyz = self.to_xyz()
        if xyz is None:
            return None
        return color_space.color_type.from_xyz(xyz, color_space, adaptation)


class AlternativeColor(Color):
    """
    Colour defined as an exact re-parameterisation of a parent type.

    Subclasses implement ``to_parent()`` and ``from_parent()``.
    """
    __slots__ = ()

    parent_type: ClassVar[Type[Color]]

    def to_parent(self) -> Optional[Color]:
        """Override in subclass: the equivalent parent colour."""
        raise NotImplementedError(
            f"{self.__class__.__name__} must implement to_parent()"
        )

    @classmethod
    def from_parent(cls: Type[C], parent: Color) -> Optional[C]:
        """Override in subclass: re-parameterise a parent colour."""
        raise NotImplementedError(
            f"{cls.__name__} must implement from_parent()"
        )

    def to_xyz(self) -> Optional[XYZ]:
        parent = self.to_parent()
        if parent is None:
            return None
        return parent.to_xyz()

    @classmethod
    def _default_space(cls, xyz: XYZ) -> ColorSpace:
        return cls.space_type(parent=cls.parent_type._default_space(xyz))  # type: ignore[call-arg]

    @classmethod
    def _from_xyz_in_space(cls: Type[C], xyz: XYZ, color_space: ColorSpace) -> Optional[C]:
        parent = cls.parent_type._from_xyz_in_space(xyz, color_space.parent)  # type: ignore[attr-defined]
        if parent is None:
            return None
        return cls.from_parent(parent)  # type: ignore[attr-defined]


def convert(
    color: Color,
    color_space: ColorSpace,
    adaptation: Optional[ChromaticAdaptation] = None,
) -> Optional[Color]:
    """Functional form of :meth:`Color.convert`."""
    return color.convert(color_space, adaptation)
