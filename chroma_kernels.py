# -*- coding: utf-8 -*-
"""
Chroma: Colour spaces and chromatic adaptation for colorimetry
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: chroma_kernels.py — JIT-compiled transfer functions.

Every non-linear, per-component step used by the colour types lives here
as a Numba kernel operating on a contiguous 1-D float64 array:

  * CIELAB f(t) and its inverse (exact rational CIE constants).
  * Companding curves: sRGB (IEC 61966-2-1), power-law gamma, L* and the
    ICC parametric curve type 3.
  * SMPTE ST 2084 perceptual quantizer used by Jzazbz.
  * Sign-preserving cube root used by Oklab.
  * Rectangular <-> polar maps for the cylindrical spaces (hue in radians,
    wrapped into [0, 2π)).

Strict mode:
    ``set_strict_ieee(True)`` swaps the sRGB and CIELAB kernels to
    ``fastmath=False`` variants that keep strict IEEE 754 semantics
    (inf / NaN propagation, no FP reassociation).

    The flag is a single process-wide module global.  Toggling it is not
    thread-safe: set it once at start-up, not while other threads are
    converting colours.

References:
    - CIE 15:2004 "Colorimetry"
    - IEC 61966-2-1:1999 (sRGB Standard)
    - ICC.1:2022 (parametricCurveType, function type 3)
    - SMPTE ST 2084:2014 (Perceptual Quantizer)
"""

import math

import numpy as np
import numpy.typing as npt
from numba import njit
from typing import Final, Sequence, TypeAlias

__all__ = [
    # --- Type Aliases ---
    "ArrayFloat",

    # --- Constants ---
    "LAB_EPSILON",
    "LAB_KAPPA",
    "TWO_PI",
    "DEG2RAD",
    "RAD2DEG",

    # --- Configuration ---
    "set_strict_ieee",
    "is_strict_ieee",

    # --- Helpers ---
    "as_vector",

    # --- Dispatchers ---
    "compand_srgb",
    "linearize_srgb",
    "lab_f",
    "lab_f_inv",

    # --- Kernels ---
    "compand_gamma",
    "linearize_gamma",
    "compand_luminance",
    "linearize_luminance",
    "compand_parametric",
    "linearize_parametric",
    "pq_encode",
    "pq_decode",
    "signed_cbrt",
    "rect_to_polar",
    "polar_to_rect",
]

# --- Type Aliases ---
ArrayFloat: TypeAlias = npt.NDArray[np.float64]

# --- Exact Rational Math Constants ---
# Defined by CIE 1976 for the Lab transformation.
# delta = 6/29 is the threshold where the function switches from cubic to linear.
_LAB_DELTA: Final[float] = 6.0 / 29.0
LAB_EPSILON: Final[float] = _LAB_DELTA * _LAB_DELTA * _LAB_DELTA  # 216/24389
LAB_KAPPA: Final[float]   = (116.0 * 29.0 * 29.0) / (3.0 * 6.0 * 6.0) # 24389/27

TWO_PI: Final[float]  = 2.0 * np.pi
DEG2RAD: Final[float] = np.pi / 180.0
RAD2DEG: Final[float] = 180.0 / np.pi

# --- SMPTE ST 2084 constants as used by Jzazbz (Safdar et al. 2017) ---
# The exponent p carries the extra 1.7 factor of the Jzazbz definition.
PQ_C1: Final[float] = 3424.0 / 2.0**12
PQ_C2: Final[float] = 2413.0 / 2.0**7
PQ_C3: Final[float] = 2392.0 / 2.0**7
PQ_N: Final[float]  = 2610.0 / 2.0**14
PQ_P: Final[float]  = 1.7 * 2523.0 / 2.0**5
PQ_PEAK: Final[float] = 10000.0


# --- Runtime Configuration ---
# When True, the sRGB and CIELAB dispatchers use the fastmath=False kernels.
#
# Toggle at runtime via:
#     import chroma_kernels as ck
#     ck.set_strict_ieee(True)   # enable strict mode
#     ck.set_strict_ieee(False)  # back to fast mode (default)
_STRICT_IEEE: bool = False

def set_strict_ieee(enabled: bool = True) -> None:
    """
    Toggle between fast (default) and strict IEEE 754 Numba kernels.

    When ``enabled=True``, the sRGB companding curve and the CIELAB
    f(t) pair use ``fastmath=False`` kernels that guarantee correct
    inf/NaN propagation.

    The setting is process-wide and unsynchronised; it is not safe to
    flip while other threads run conversions.

    Args:
        enabled: If True, use strict IEEE mode.
    """
    global _STRICT_IEEE
    _STRICT_IEEE = bool(enabled)

def is_strict_ieee() -> bool:
    """Returns True when the strict IEEE 754 kernels are active."""
    return _STRICT_IEEE


def as_vector(values: Sequence[float]) -> ArrayFloat:
    """Pack colour components into the contiguous float64 layout the kernels expect."""
    return np.ascontiguousarray(values, dtype=np.float64).ravel()


# =============================================================================
# 1. SWITCHABLE TRANSFER FUNCTIONS (CIELAB f(t) PAIR, sRGB)
# =============================================================================
# Each curve is written once as plain Python and compiled twice:
#   [0] fastmath=True   reassociation allowed, may differ in the last ulp
#   [1] fastmath=False  strict IEEE 754, correct inf/NaN propagation
# The strict build is not cached on disk: both builds share one source
# location, and numba's cache index does not key on fastmath.

def _compile_pair(py_func):
    """Fast and strict Numba builds of ``py_func``, indexed by ``_STRICT_IEEE``."""
    return (
        njit(cache=True, fastmath=True)(py_func),
        njit(cache=False, fastmath=False)(py_func),
    )


def _lab_f_py(t: ArrayFloat) -> ArrayFloat:
    """
    Non-linear transfer function f(t) for CIELAB.

    Cube root above ϵ, linear slope κ/116 below it so the curve stays
    finite at zero.
    """
    out = np.empty_like(t)
    for i in range(t.size):
        v = t[i]
        if v > LAB_EPSILON:
            out[i] = v ** (1.0/3.0)
        else:
            out[i] = (LAB_KAPPA * v + 16.0) / 116.0
    return out


def _lab_f_inv_py(t: ArrayFloat) -> ArrayFloat:
    """
    Inverse of the CIELAB transfer function.

    ``t > 6/29`` is the same test as ``t³ > ϵ`` for the chroma terms and
    ``L > κϵ`` for the lightness term, so one kernel serves all three
    channels.
    """
    out = np.empty_like(t)
    for i in range(t.size):
        v = t[i]
        if v > _LAB_DELTA:
            out[i] = v * v * v
        else:
            out[i] = (116.0 * v - 16.0) / LAB_KAPPA
    return out


def _srgb_oetf_py(linear: ArrayFloat) -> ArrayFloat:
    """sRGB OETF (linear -> stored), IEC 61966-2-1."""
    out = np.empty_like(linear)
    for i in range(linear.size):
        v = linear[i]
        if v <= 0.0031308:
            out[i] = 12.92 * v
        else:
            out[i] = 1.055 * v ** (1.0/2.4) - 0.055
    return out


def _srgb_eotf_py(stored: ArrayFloat) -> ArrayFloat:
    """sRGB EOTF (stored -> linear), IEC 61966-2-1."""
    out = np.empty_like(stored)
    for i in range(stored.size):
        v = stored[i]
        if v <= 0.04045:
            out[i] = v / 12.92
        else:
            out[i] = ((v + 0.055) / 1.055) ** 2.4
    return out


_LAB_F: Final = _compile_pair(_lab_f_py)
_LAB_F_INV: Final = _compile_pair(_lab_f_inv_py)
_SRGB_OETF: Final = _compile_pair(_srgb_oetf_py)
_SRGB_EOTF: Final = _compile_pair(_srgb_eotf_py)


def lab_f(t: ArrayFloat) -> ArrayFloat:
    """CIELAB f(t) in the active precision mode."""
    return _LAB_F[_STRICT_IEEE](t)

def lab_f_inv(t: ArrayFloat) -> ArrayFloat:
    """Inverse CIELAB f(t) in the active precision mode."""
    return _LAB_F_INV[_STRICT_IEEE](t)

def compand_srgb(linear: ArrayFloat) -> ArrayFloat:
    """sRGB OETF in the active precision mode."""
    return _SRGB_OETF[_STRICT_IEEE](linear)

def linearize_srgb(stored: ArrayFloat) -> ArrayFloat:
    """sRGB EOTF in the active precision mode."""
    return _SRGB_EOTF[_STRICT_IEEE](stored)


# =============================================================================
# 2. COMPANDING CURVES
# =============================================================================

@njit(cache=True, fastmath=True)
def compand_gamma(linear: ArrayFloat, gamma: float) -> ArrayFloat:
    """Pure power-law encoding ``v^(1/γ)``."""
    out = np.empty_like(linear)
    inv_gamma = 1.0 / gamma
    for i in range(linear.size):
        out[i] = linear[i] ** inv_gamma
    return out

@njit(cache=True, fastmath=True)
def linearize_gamma(stored: ArrayFloat, gamma: float) -> ArrayFloat:
    """Pure power-law decoding ``v^γ``."""
    out = np.empty_like(stored)
    for i in range(stored.size):
        out[i] = stored[i] ** gamma
    return out

@njit(cache=True, fastmath=True)
def compand_luminance(linear: ArrayFloat) -> ArrayFloat:
    """
    L* companding: the CIE lightness curve rescaled to [0, 1].

    Linear segment ``vκ/100`` below ϵ, ``1.16·∛v − 0.16`` above.
    """
    out = np.empty_like(linear)
    for i in range(linear.size):
        v = linear[i]
        if v <= LAB_EPSILON:
            out[i] = v * LAB_KAPPA / 100.0
        else:
            out[i] = 1.16 * v ** (1.0/3.0) - 0.16
    return out

@njit(cache=True, fastmath=True)
def linearize_luminance(stored: ArrayFloat) -> ArrayFloat:
    """Inverse of :func:`compand_luminance`; the break point κϵ/100 is 0.08."""
    out = np.empty_like(stored)
    for i in range(stored.size):
        v = stored[i]
        if v <= 0.08:
            out[i] = 100.0 * v / LAB_KAPPA
        else:
            t = (v + 0.16) / 1.16
            out[i] = t * t * t
    return out

@njit(cache=True, fastmath=True)
def linearize_parametric(stored: ArrayFloat, gamma: float, a: float,
                         b: float, c: float, d: float) -> ArrayFloat:
    """
    ICC parametric curve type 3 (stored -> linear).

        Y = (a·X + b)^γ    for X >= d
        Y = c·X            for X <  d
    """
    out = np.empty_like(stored)
    for i in range(stored.size):
        v = stored[i]
        if v >= d:
            out[i] = (a * v + b) ** gamma
        else:
            out[i] = c * v
    return out

@njit(cache=True, fastmath=True)
def compand_parametric(linear: ArrayFloat, gamma: float, a: float,
                       b: float, c: float, d: float) -> ArrayFloat:
    """Inverse of :func:`linearize_parametric` (linear -> stored)."""
    out = np.empty_like(linear)
    limit = (a * d + b) ** gamma
    inv_gamma = 1.0 / gamma
    for i in range(linear.size):
        v = linear[i]
        if v >= limit:
            out[i] = (v ** inv_gamma - b) / a
        else:
            out[i] = v / c
    return out


# =============================================================================
# 3. PERCEPTUAL QUANTIZER & CUBE ROOT
# =============================================================================

@njit(cache=True, fastmath=True)
def pq_encode(values: ArrayFloat) -> ArrayFloat:
    """
    Perceptual quantizer with the Jzazbz exponent.

        v' = ((c1 + c2·(v/10000)^n) / (1 + c3·(v/10000)^n))^p
    """
    out = np.empty_like(values)
    for i in range(values.size):
        part = (values[i] / PQ_PEAK) ** PQ_N
        out[i] = ((PQ_C1 + PQ_C2 * part) / (1.0 + PQ_C3 * part)) ** PQ_P
    return out

@njit(cache=True, fastmath=True)
def pq_decode(values: ArrayFloat) -> ArrayFloat:
    """Inverse of :func:`pq_encode`."""
    out = np.empty_like(values)
    inv_p = 1.0 / PQ_P
    inv_n = 1.0 / PQ_N
    for i in range(values.size):
        part = values[i] ** inv_p
        out[i] = PQ_PEAK * ((PQ_C1 - part) / (PQ_C3 * part - PQ_C2)) ** inv_n
    return out

@njit(cache=True, fastmath=True)
def signed_cbrt(values: ArrayFloat) -> ArrayFloat:
    """Real cube root that keeps the sign of negative inputs."""
    out = np.empty_like(values)
    for i in range(values.size):
        v = values[i]
        if v < 0.0:
            out[i] = -((-v) ** (1.0/3.0))
        else:
            out[i] = v ** (1.0/3.0)
    return out


# =============================================================================
# 4. CYLINDRICAL MAPS
# =============================================================================

@njit(cache=True, fastmath=True)
def rect_to_polar(lab: ArrayFloat) -> ArrayFloat:
    """
    (L, a, b) -> (L, C, h) with the hue in radians on [0, 2π).
    """
    out = np.empty_like(lab)
    a, b = lab[1], lab[2]
    h = math.atan2(b, a)
    if h < 0.0:
        h += TWO_PI
    out[0] = lab[0]
    out[1] = math.hypot(a, b)
    out[2] = h
    return out

@njit(cache=True, fastmath=True)
def polar_to_rect(lch: ArrayFloat) -> ArrayFloat:
    """(L, C, h) -> (L, a, b); h in radians."""
    out = np.empty_like(lch)
    C, h = lch[1], lch[2]
    out[0] = lch[0]
    out[1] = C * math.cos(h)
    out[2] = C * math.sin(h)
    return out
