"""
Tests for the LC resonance math.

Validates against Covington's worked example (0.58 / 1.77 MHz, 150 pF):
1. Distributed capacitance and inductance
2. Single-frequency fallback (CD = 0)
3. Resonance sweep against 2..512 pF
4. IEEE behavior on degenerate inputs (no exceptions)
"""

import logging
import warnings

import numpy as np
import pytest
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(__file__))))

from coilcalc.resonance import (
    resonant_frequency,
    distributed_capacitance,
    inductance,
    trial_capacitances_f,
    resonance_sweep,
    mhz_to_hz,
    h_to_uh,
    pf_to_f,
    REFERENCE_CAPACITOR_PF,
)


F2 = mhz_to_hz(0.58)
F1 = mhz_to_hz(1.77)
CT = pf_to_f(REFERENCE_CAPACITOR_PF)

# Covington's published table (MHz) for 2, 4, ... 512 pF
REFERENCE_TABLE = [
    5.3164836, 3.7593216, 2.6582418, 1.8796608, 1.3291209,
    0.9398304, 0.6645605, 0.4699152, 0.3322802,
]


class TestWorkedExample:
    """Reproduce the published 73 Magazine example."""

    def test_distributed_capacitance(self):
        CD = distributed_capacitance(F2, F1, CT)
        assert CD * 1e12 == pytest.approx(18.04, abs=0.01)

    def test_inductance(self):
        CD = distributed_capacitance(F2, F1, CT)
        L = inductance(F2, CT, CD)
        assert L * 1e6 == pytest.approx(448.09, abs=0.01)

    def test_inductance_resonates_at_f2(self):
        """L against CD + CT must give back the with-cap frequency."""
        CD = distributed_capacitance(F2, F1, CT)
        L = inductance(F2, CT, CD)
        assert resonant_frequency(L, CD + CT) == pytest.approx(F2, rel=1e-12)

    def test_bare_coil_resonates_at_f1(self):
        CD = distributed_capacitance(F2, F1, CT)
        L = inductance(F2, CT, CD)
        assert resonant_frequency(L, CD) == pytest.approx(F1, rel=1e-9)


class TestSingleFrequency:
    """Only F2 measured: CD is forced to zero."""

    def test_zero_f1_gives_zero_cd(self):
        assert distributed_capacitance(F2, 0.0, CT) == 0.0

    def test_inductance_from_ct_only(self):
        L = inductance(F2, CT)
        expected = 1.0 / ((2 * np.pi * F2) ** 2 * CT)
        assert L == pytest.approx(expected)

    def test_stray_inductance_subtracted(self):
        L = inductance(F2, CT)
        assert inductance(F2, CT, stray_inductance_h=1e-6) == pytest.approx(L - 1e-6)


class TestResonanceSweep:
    """Resonant frequency table against the trial capacitors."""

    def test_trial_capacitances(self):
        caps = trial_capacitances_f() * 1e12
        np.testing.assert_allclose(caps, [2, 4, 8, 16, 32, 64, 128, 256, 512])

    def test_matches_reference_table(self):
        CD = distributed_capacitance(F2, F1, CT)
        L = inductance(F2, CT, CD)
        freqs = resonance_sweep(L) * 1e-6
        np.testing.assert_allclose(freqs, REFERENCE_TABLE, atol=1e-7)

    def test_doubling_capacitance_divides_by_sqrt2(self):
        freqs = resonance_sweep(400e-6)
        ratios = freqs[:-1] / freqs[1:]
        np.testing.assert_allclose(ratios, np.sqrt(2.0))

    def test_custom_capacitors(self):
        freqs = resonance_sweep(1e-6, np.array([1e-9]))
        assert freqs.shape == (1,)
        assert freqs[0] == pytest.approx(1.0 / (2 * np.pi * np.sqrt(1e-15)))


class TestDegenerateInputs:
    """Bad numbers propagate as inf/nan instead of raising."""

    def test_equal_frequencies_give_infinite_cd(self):
        CD = distributed_capacitance(F2, F2, CT)
        assert np.isinf(CD)

    def test_infinite_cd_gives_zero_inductance(self):
        L = inductance(F2, CT, np.inf)
        assert L == 0.0

    def test_negative_inductance_gives_nan_frequency(self):
        assert np.isnan(resonant_frequency(-1e-6, CT))

    def test_zero_inductance_gives_infinite_frequency(self):
        assert np.isinf(resonant_frequency(0.0, CT))

    def test_scalar_in_scalar_out(self):
        F = resonant_frequency(1e-6, 1e-9)
        assert np.ndim(F) == 0


class TestNonFiniteLogging:
    """Non-finite derived values are logged, never raised or warned about by numpy."""

    def test_infinite_cd_logs_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="coilcalc.resonance"):
            distributed_capacitance(F2, F2, CT)
        records = [r for r in caplog.records if r.name == "coilcalc.resonance"]
        assert len(records) == 1
        assert records[0].levelno == logging.WARNING
        assert "Distributed capacitance is not finite" in records[0].getMessage()

    def test_zero_f2_logs_inductance_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="coilcalc.resonance"):
            L = inductance(0.0, CT)
        assert np.isinf(L)
        assert any("Inductance is not finite" in r.getMessage() for r in caplog.records)

    def test_finite_values_log_nothing(self, caplog):
        with caplog.at_level(logging.WARNING, logger="coilcalc.resonance"):
            inductance(F2, CT, distributed_capacitance(F2, F1, CT))
        assert caplog.records == []

    def test_unit_overflow_is_silent(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assert np.isinf(h_to_uh(1e306))
            assert np.isinf(mhz_to_hz(1e305))
