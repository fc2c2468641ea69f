"""
Coil characterization operations.

Turns a CoilMeasurement into a CoilCharacteristics record (forward mode),
and an inductance into a resonant frequency against the known capacitor
(inverse mode). The physics lives in coilcalc.resonance; this module only
handles units and records.
"""

import logging
import math
from typing import List

from coilcalc import resonance as rz
from coilcalc.models import CoilCharacteristics, CoilMeasurement, InverseResult, ResonancePoint

logger = logging.getLogger(__name__)


def characterize_coil(measurement: CoilMeasurement, with_table: bool = False) -> CoilCharacteristics:
    """
    Compute inductance and distributed capacitance from a measurement.

    Args:
        measurement: Frequencies (MHz) and the known capacitor (pF).
        with_table: Also compute the resonance table against the trial capacitors.

    Returns:
        CoilCharacteristics. distributed_capacitance_pf is 0 when only the
        with-cap frequency was supplied.
    """
    F2 = rz.mhz_to_hz(measurement.freq_with_cap_mhz)
    F1 = rz.mhz_to_hz(measurement.freq_without_cap_mhz) if measurement.has_reference_frequency else 0.0
    CT = rz.pf_to_f(measurement.capacitor_pf)
    logger.debug("Characterizing coil: F2=%g Hz, F1=%g Hz, CT=%g F", F2, F1, CT)

    CD = rz.distributed_capacitance(F2, F1, CT)
    L = rz.inductance(F2, CT, CD, stray_inductance_h=rz.STRAY_INDUCTANCE_H)
    logger.debug("Derived CD=%g F, L=%g H", CD, L)

    cd_pf = 0.0 if CD == 0.0 else float(rz.f_to_pf(CD - rz.STRAY_CAPACITANCE_F))
    l_uh = float(rz.h_to_uh(L))
    _warn_if_not_finite("inductance (uH)", l_uh)
    _warn_if_not_finite("distributed capacitance (pF)", cd_pf)

    return CoilCharacteristics(
        inductance_uh=l_uh,
        distributed_capacitance_pf=cd_pf,
        capacitor_pf=measurement.capacitor_pf,
        resonances=resonance_table(L) if with_table else [],
    )


def resonance_table(inductance_h: float) -> List[ResonancePoint]:
    """Resonant frequency of the coil against 2, 4, ... 512 pF."""
    caps = rz.trial_capacitances_f()
    freqs = rz.resonance_sweep(inductance_h, caps)
    return [
        ResonancePoint(capacitance_pf=float(rz.f_to_pf(c)), frequency_mhz=float(rz.hz_to_mhz(f)))
        for c, f in zip(caps, freqs)
    ]


def compute_frequency(inductance_uh: float, capacitor_pf: float = rz.DEFAULT_CAPACITOR_PF) -> InverseResult:
    """
    Resonant frequency of a coil of known inductance against the known capacitor.

    Distributed capacitance is not accounted for, so feeding back an
    inductance from characterize_coil() only reproduces F2 exactly when
    CD was 0.
    """
    L = rz.uh_to_h(inductance_uh)
    CT = rz.pf_to_f(capacitor_pf)
    F = rz.resonant_frequency(L, CT)
    logger.debug("Inverse: L=%g H, CT=%g F -> F=%g Hz", L, CT, F)
    f_mhz = float(rz.hz_to_mhz(F))
    _warn_if_not_finite("frequency (MHz)", f_mhz)
    return InverseResult(
        inductance_uh=inductance_uh,
        capacitor_pf=capacitor_pf,
        frequency_mhz=f_mhz,
    )


def _warn_if_not_finite(name: str, value: float) -> None:
    if not math.isfinite(value):
        logger.warning("Reported %s is not finite: %s", name, value)
