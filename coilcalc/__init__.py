"""
coilcalc

Air-core coil characterization from resonant-frequency measurements:
inductance and distributed capacitance from readings taken with and
without a known shunt capacitor, plus the inverse (frequency from
inductance) and a resonance table against standard capacitors.
"""

from coilcalc.resonance import resonant_frequency, distributed_capacitance, inductance, resonance_sweep
from coilcalc.models import CoilMeasurement, CoilCharacteristics, InverseResult, ResonancePoint
from coilcalc.calculator import characterize_coil, compute_frequency, resonance_table

__version__ = "0.1.0"
