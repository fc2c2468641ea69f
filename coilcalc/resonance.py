"""
LC resonance math for air-core coil characterization.

Method after M. A. Covington (73 Magazine, September 1990): measure the
coil's resonant frequency with a known shunt capacitor CT across it (F2)
and without it (F1). The coil's own distributed capacitance CD sits in
parallel with CT, so:

    F1 = 1 / (2π·sqrt(L·CD))
    F2 = 1 / (2π·sqrt(L·(CD + CT)))

Dividing the two and solving:

    CD = CT / ((F1/F2)² − 1)
    L  = 1 / ((2π·F2)² · (CD + CT)) − LS

All arithmetic is numpy float64 so IEEE-754 semantics hold: F1 == F2
yields an infinite CD, a negative inductance yields a nan frequency.
Nothing here raises on bad numbers.
"""

import logging

import numpy as np
from typing import Optional, Union

logger = logging.getLogger(__name__)

ArrayLike = Union[float, np.ndarray]

# Correction offsets for parasitics not otherwise modeled (H, F)
STRAY_INDUCTANCE_H = 0.0
STRAY_CAPACITANCE_F = 0.0

# Known shunt capacitor. Covington's worked example used 150 pF.
DEFAULT_CAPACITOR_PF = 100.0
REFERENCE_CAPACITOR_PF = 150.0

# Trial capacitors for the resonance table: 2^i pF
TABLE_EXPONENTS = np.arange(1, 10)

_IEEE = dict(divide='ignore', invalid='ignore', over='ignore')


def _scale(value: ArrayLike, factor: float) -> ArrayLike:
    with np.errstate(**_IEEE):
        return np.asarray(value, dtype=np.float64) * factor


def mhz_to_hz(value: ArrayLike) -> ArrayLike:
    """Convert MHz to Hz."""
    return _scale(value, 1e6)


def hz_to_mhz(value: ArrayLike) -> ArrayLike:
    """Convert Hz to MHz."""
    return _scale(value, 1e-6)


def pf_to_f(value: ArrayLike) -> ArrayLike:
    """Convert picofarads to Farads."""
    return _scale(value, 1e-12)


def f_to_pf(value: ArrayLike) -> ArrayLike:
    """Convert Farads to picofarads."""
    return _scale(value, 1e12)


def uh_to_h(value: ArrayLike) -> ArrayLike:
    """Convert microhenries to Henries."""
    return _scale(value, 1e-6)


def h_to_uh(value: ArrayLike) -> ArrayLike:
    """Convert Henries to microhenries."""
    return _scale(value, 1e6)


def resonant_frequency(inductance_h: ArrayLike, capacitance_f: ArrayLike) -> ArrayLike:
    """
    Resonant frequency of an ideal LC tank, F = 1 / (2π·sqrt(L·C)).

    Either argument may be an array; the result broadcasts.

    Args:
        inductance_h: Inductance in Henries.
        capacitance_f: Capacitance in Farads.

    Returns:
        Frequency in Hz (nan for negative L·C, inf for zero).
    """
    L = np.asarray(inductance_h, dtype=np.float64)
    C = np.asarray(capacitance_f, dtype=np.float64)
    with np.errstate(**_IEEE):
        F = 1.0 / (2 * np.pi * np.sqrt(L * C))
    return F[()] if F.ndim == 0 else F


def distributed_capacitance(
    f_with_cap_hz: float,
    f_without_cap_hz: float,
    known_cap_f: float,
) -> float:
    """
    Self-capacitance of the winding from the two-frequency measurement.

    A without-cap frequency of exactly 0 means "not measured" and gives
    CD = 0, so the inductance falls back to CT alone.

    Args:
        f_with_cap_hz: F2, resonance with the shunt capacitor (Hz).
        f_without_cap_hz: F1, resonance of the bare coil (Hz), or 0.
        known_cap_f: CT, the shunt capacitor (F).

    Returns:
        CD in Farads. inf/nan when F1 == F2, per IEEE division.
    """
    F2 = np.float64(f_with_cap_hz)
    F1 = np.float64(f_without_cap_hz)
    if F1 == 0:
        return np.float64(0.0)

    with np.errstate(**_IEEE):
        CD = np.float64(known_cap_f) / ((F1 / F2) ** 2 - 1.0)

    if not np.isfinite(CD):
        logger.warning("Distributed capacitance is not finite (F1=%g Hz, F2=%g Hz)", F1, F2)
    return CD


def inductance(
    f_with_cap_hz: float,
    known_cap_f: float,
    distrib_cap_f: float = 0.0,
    stray_inductance_h: float = STRAY_INDUCTANCE_H,
) -> float:
    """
    Coil inductance from its resonance against CD + CT.

    Args:
        f_with_cap_hz: F2 (Hz).
        known_cap_f: CT (F).
        distrib_cap_f: CD (F), 0 when only F2 was measured.
        stray_inductance_h: LS, subtracted from the result (H).

    Returns:
        L in Henries.
    """
    F2 = np.float64(f_with_cap_hz)
    with np.errstate(**_IEEE):
        L = 1.0 / ((2.0 * np.pi * F2) ** 2 * (np.float64(distrib_cap_f) + known_cap_f))
        L = L - stray_inductance_h

    if not np.isfinite(L):
        logger.warning("Inductance is not finite (F2=%g Hz)", F2)
    return L


def trial_capacitances_f() -> np.ndarray:
    """Trial capacitors for the resonance table, 2, 4, ... 512 pF in Farads."""
    return pf_to_f(2.0 ** TABLE_EXPONENTS)


def resonance_sweep(inductance_h: float, capacitances_f: Optional[np.ndarray] = None) -> np.ndarray:
    """
    Resonant frequency of the coil against each of a set of capacitors.

    Args:
        inductance_h: Coil inductance (H).
        capacitances_f: Capacitors to sweep (F). Defaults to trial_capacitances_f().

    Returns:
        Array of frequencies (Hz), same order as capacitances_f.
    """
    if capacitances_f is None:
        capacitances_f = trial_capacitances_f()
    return np.atleast_1d(resonant_frequency(inductance_h, capacitances_f))
