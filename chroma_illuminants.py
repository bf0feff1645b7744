# -*- coding: utf-8 -*-
"""
Chroma: Colour spaces and chromatic adaptation for colorimetry
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: chroma_illuminants.py — Chromaticity coordinates and CIE standard
illuminants.

An illuminant is identified by its white point chromaticity and the
observer field of view only; the descriptive text (name, group, details)
is metadata and does not take part in equality or hashing.

Chromaticities are the CIE 15:2004 values for the 1931 2° and the
1964 10° standard observers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Final, NamedTuple, Optional, Tuple

import numpy as np

__all__ = [
    "XyChromaticity",
    "StandardIlluminant",
    "TwoDegree",
    "TenDegree",
    "ILLUMINANTS",
    "get_illuminant",
]


# ═══════════════════════════════════════════════════════════════════════════════
# 1.  Chromaticity coordinate
# ═══════════════════════════════════════════════════════════════════════════════
class XyChromaticity(NamedTuple):
    """CIE 1931 (x, y) chromaticity; ``z = 1 - x - y``."""
    x: float
    y: float

    @property
    def z(self) -> float:
        return 1.0 - self.x - self.y

    def to_tristimulus(self, luminosity: float = 1.0) -> Optional[np.ndarray]:
        """
        XYZ tristimulus vector with the given luminance ``Y``.

        Returns None when ``y == 0`` (the chromaticity has no defined
        tristimulus value).
        """
        if self.y == 0.0:
            return None
        scale = luminosity / self.y
        return np.array([scale * self.x, luminosity, scale * self.z], dtype=np.float64)

    @classmethod
    def from_tristimulus(cls, x: float, y: float, z: float) -> Optional[XyChromaticity]:
        """Normalise XYZ by ``X + Y + Z``; None when the sum is zero."""
        total = x + y + z
        if total == 0.0:
            return None
        return cls(float(x / total), float(y / total))


# ═══════════════════════════════════════════════════════════════════════════════
# 2.  Illuminant value type
# ═══════════════════════════════════════════════════════════════════════════════
@dataclass(slots=True, frozen=True)
class StandardIlluminant:
    """
    A reference white: chromaticity plus descriptive metadata.

    Parameters
    ----------
    name : str
        Short identifier, e.g. ``"D65"``.
    white_point : XyChromaticity
        Chromaticity of the white.  ``y`` must be positive.
    group : str
        Illuminant family, e.g. ``"Daylight Illuminants"``.
    details : str
        Free-form description.
    field_of_view : float
        Observer field of view in degrees (2 or 10 for the CIE observers).
    """
    name: str = field(compare=False)
    white_point: XyChromaticity
    group: str = field(default="", compare=False)
    details: str = field(default="", compare=False)
    field_of_view: float = 2.0

    def __post_init__(self) -> None:
        wp = self.white_point
        if not isinstance(wp, XyChromaticity):
            wp = XyChromaticity(float(wp[0]), float(wp[1]))
            object.__setattr__(self, "white_point", wp)
        if not wp.y > 0.0:
            raise ValueError(
                f"Illuminant '{self.name}' needs a positive y chromaticity, "
                f"got {wp.y!r}"
            )

    def tristimulus(self, luminosity: float = 1.0) -> np.ndarray:
        """XYZ of the white scaled to the given luminance ``Y``."""
        # y > 0 is enforced at construction
        return self.white_point.to_tristimulus(luminosity)

    @classmethod
    def from_tristimulus(
        cls,
        x: float,
        y: float,
        z: float,
        name: str = "Custom",
        field_of_view: float = 2.0,
    ) -> StandardIlluminant:
        """
        Build an illuminant from the XYZ tristimulus values of its white.

        Raises:
            ValueError: If ``X + Y + Z`` is zero.
        """
        coordinate = XyChromaticity.from_tristimulus(x, y, z)
        if coordinate is None:
            raise ValueError("White point tristimulus values sum to zero.")
        return cls(name=name, white_point=coordinate, field_of_view=field_of_view)


# ═══════════════════════════════════════════════════════════════════════════════
# 3.  Standard tables
# ═══════════════════════════════════════════════════════════════════════════════
_INCANDESCENT: Final[str] = "Standard Incandescent Illuminants"
_ENERGY: Final[str]       = "Energy Based Illuminants"
_DAYLIGHT: Final[str]     = "Daylight Illuminants"
_FLUORESCENT: Final[str]  = "Standard Fluorescent Illuminants"
_BROADBAND: Final[str]    = "Broadband Fluorescent Illuminants"
_TRIBAND: Final[str]      = "Narrow Tri-band Fluorescent Illuminants"
_OBSOLETE: Final[str]     = "Obsolete Illuminants"

# name -> (group, details)
_DESCRIPTIONS: Final[Dict[str, Tuple[str, str]]] = {
    "A":   (_INCANDESCENT, "Incandescent / tungsten, 2856 K"),
    "B":   (_OBSOLETE,     "Direct sunlight at noon, 4874 K"),
    "C":   (_OBSOLETE,     "Average / north sky daylight, 6774 K"),
    "E":   (_ENERGY,       "Equal energy, 5454 K"),
    "D50": (_DAYLIGHT,     "Horizon light, ICC profile PCS, 5003 K"),
    "D55": (_DAYLIGHT,     "Mid-morning / mid-afternoon daylight, 5503 K"),
    "D65": (_DAYLIGHT,     "Noon daylight: television, sRGB color space, 6504 K"),
    "D75": (_DAYLIGHT,     "North sky daylight, 7504 K"),
    "F1":  (_FLUORESCENT,  "Daylight fluorescent, 6430 K"),
    "F2":  (_FLUORESCENT,  "Cool white fluorescent, 4230 K"),
    "F3":  (_FLUORESCENT,  "White fluorescent, 3450 K"),
    "F4":  (_FLUORESCENT,  "Warm white fluorescent, 2940 K"),
    "F5":  (_FLUORESCENT,  "Daylight fluorescent, 6350 K"),
    "F6":  (_FLUORESCENT,  "Lite white fluorescent, 4150 K"),
    "F7":  (_BROADBAND,    "D65 simulator, daylight simulator, 6500 K"),
    "F8":  (_BROADBAND,    "D50 simulator, Sylvania F40 Design 50, 5000 K"),
    "F9":  (_BROADBAND,    "Cool white deluxe fluorescent, 4150 K"),
    "F10": (_TRIBAND,      "Philips TL85, Ultralume 50, 5000 K"),
    "F11": (_TRIBAND,      "Philips TL84, Ultralume 40, 4000 K"),
    "F12": (_TRIBAND,      "Philips TL83, Ultralume 30, 3000 K"),
}

_XY_2DEG: Final[Dict[str, Tuple[float, float]]] = {
    "A":   (0.44757, 0.40745),
    "B":   (0.34842, 0.35161),
    "C":   (0.31006, 0.31616),
    "E":   (1.0 / 3.0, 1.0 / 3.0),
    "D50": (0.34567, 0.35850),
    "D55": (0.33242, 0.34743),
    "D65": (0.31271, 0.32902),
    "D75": (0.29902, 0.31485),
    "F1":  (0.31310, 0.33727),
    "F2":  (0.37208, 0.37529),
    "F3":  (0.40910, 0.39430),
    "F4":  (0.44018, 0.40329),
    "F5":  (0.31379, 0.34531),
    "F6":  (0.37790, 0.38835),
    "F7":  (0.31292, 0.32933),
    "F8":  (0.34588, 0.35875),
    "F9":  (0.37417, 0.37281),
    "F10": (0.34609, 0.35986),
    "F11": (0.38052, 0.37713),
    "F12": (0.43695, 0.40441),
}

_XY_10DEG: Final[Dict[str, Tuple[float, float]]] = {
    "A":   (0.45117, 0.40594),
    "B":   (0.34980, 0.35270),
    "C":   (0.31039, 0.31905),
    "E":   (1.0 / 3.0, 1.0 / 3.0),
    "D50": (0.34773, 0.35952),
    "D55": (0.33411, 0.34877),
    "D65": (0.31382, 0.33100),
    "D75": (0.29968, 0.31740),
    "F1":  (0.31811, 0.33559),
    "F2":  (0.37925, 0.36733),
    "F3":  (0.41761, 0.38324),
    "F4":  (0.44920, 0.39074),
    "F5":  (0.31975, 0.34246),
    "F6":  (0.38660, 0.37847),
    "F7":  (0.31569, 0.32960),
    "F8":  (0.34902, 0.35939),
    "F9":  (0.37829, 0.37045),
    "F10": (0.35090, 0.35444),
    "F11": (0.38541, 0.37123),
    "F12": (0.44256, 0.39717),
}


def _build_table(
    coordinates: Dict[str, Tuple[float, float]],
    field_of_view: float,
) -> Dict[str, StandardIlluminant]:
    table: Dict[str, StandardIlluminant] = {}
    for name, (x, y) in coordinates.items():
        group, details = _DESCRIPTIONS[name]
        table[name] = StandardIlluminant(
            name=name,
            white_point=XyChromaticity(x, y),
            group=group,
            details=details,
            field_of_view=field_of_view,
        )
    return table


_TABLE_2DEG: Final = _build_table(_XY_2DEG, 2.0)
_TABLE_10DEG: Final = _build_table(_XY_10DEG, 10.0)


class TwoDegree:
    """Illuminants for the CIE 1931 2° standard observer."""
    A: Final[StandardIlluminant]   = _TABLE_2DEG["A"]
    B: Final[StandardIlluminant]   = _TABLE_2DEG["B"]
    C: Final[StandardIlluminant]   = _TABLE_2DEG["C"]
    E: Final[StandardIlluminant]   = _TABLE_2DEG["E"]
    D50: Final[StandardIlluminant] = _TABLE_2DEG["D50"]
    D55: Final[StandardIlluminant] = _TABLE_2DEG["D55"]
    D65: Final[StandardIlluminant] = _TABLE_2DEG["D65"]
    D75: Final[StandardIlluminant] = _TABLE_2DEG["D75"]
    F1: Final[StandardIlluminant]  = _TABLE_2DEG["F1"]
    F2: Final[StandardIlluminant]  = _TABLE_2DEG["F2"]
    F3: Final[StandardIlluminant]  = _TABLE_2DEG["F3"]
    F4: Final[StandardIlluminant]  = _TABLE_2DEG["F4"]
    F5: Final[StandardIlluminant]  = _TABLE_2DEG["F5"]
    F6: Final[StandardIlluminant]  = _TABLE_2DEG["F6"]
    F7: Final[StandardIlluminant]  = _TABLE_2DEG["F7"]
    F8: Final[StandardIlluminant]  = _TABLE_2DEG["F8"]
    F9: Final[StandardIlluminant]  = _TABLE_2DEG["F9"]
    F10: Final[StandardIlluminant] = _TABLE_2DEG["F10"]
    F11: Final[StandardIlluminant] = _TABLE_2DEG["F11"]
    F12: Final[StandardIlluminant] = _TABLE_2DEG["F12"]

    ALL: Final[Tuple[StandardIlluminant, ...]] = tuple(_TABLE_2DEG.values())


class TenDegree:
    """Illuminants for the CIE 1964 10° supplementary standard observer."""
    A: Final[StandardIlluminant]   = _TABLE_10DEG["A"]
    B: Final[StandardIlluminant]   = _TABLE_10DEG["B"]
    C: Final[StandardIlluminant]   = _TABLE_10DEG["C"]
    E: Final[StandardIlluminant]   = _TABLE_10DEG["E"]
    D50: Final[StandardIlluminant] = _TABLE_10DEG["D50"]
    D55: Final[StandardIlluminant] = _TABLE_10DEG["D55"]
    D65: Final[StandardIlluminant] = _TABLE_10DEG["D65"]
    D75: Final[StandardIlluminant] = _TABLE_10DEG["D75"]
    F1: Final[StandardIlluminant]  = _TABLE_10DEG["F1"]
    F2: Final[StandardIlluminant]  = _TABLE_10DEG["F2"]
    F3: Final[StandardIlluminant]  = _TABLE_10DEG["F3"]
    F4: Final[StandardIlluminant]  = _TABLE_10DEG["F4"]
    F5: Final[StandardIlluminant]  = _TABLE_10DEG["F5"]
    F6: Final[StandardIlluminant]  = _TABLE_10DEG["F6"]
    F7: Final[StandardIlluminant]  = _TABLE_10DEG["F7"]
    F8: Final[StandardIlluminant]  = _TABLE_10DEG["F8"]
    F9: Final[StandardIlluminant]  = _TABLE_10DEG["F9"]
    F10: Final[StandardIlluminant] = _TABLE_10DEG["F10"]
    F11: Final[StandardIlluminant] = _TABLE_10DEG["F11"]
    F12: Final[StandardIlluminant] = _TABLE_10DEG["F12"]

    ALL: Final[Tuple[StandardIlluminant, ...]] = tuple(_TABLE_10DEG.values())


# (name, field of view) -> illuminant
ILLUMINANTS: Final[Dict[Tuple[str, float], StandardIlluminant]] = {
    **{(name, 2.0): illum for name, illum in _TABLE_2DEG.items()},
    **{(name, 10.0): illum for name, illum in _TABLE_10DEG.items()},
}


def get_illuminant(name: str, field_of_view: float = 2.0) -> StandardIlluminant:
    """
    Look up a standard illuminant by name, case-insensitively.

    Raises:
        ValueError: If no illuminant matches ``(name, field_of_view)``.
    """
    key = (name.strip().upper(), float(field_of_view))
    try:
        return ILLUMINANTS[key]
    except KeyError:
        available = sorted({n for n, _ in ILLUMINANTS})
        raise ValueError(
            f"Unknown illuminant {name!r} at {field_of_view}°. "
            f"Available: {', '.join(available)} at 2° or 10°."
        ) from None
