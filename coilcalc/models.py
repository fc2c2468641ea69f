"""Pydantic models for coil measurements and computed characteristics."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from coilcalc.resonance import DEFAULT_CAPACITOR_PF


# --- Inputs ---

class CoilMeasurement(BaseModel):
    """Resonant frequencies read off a grid-dip meter or signal generator."""
    freq_with_cap_mhz: float = Field(..., description="Resonance with the known capacitor across the coil (MHz)")
    freq_without_cap_mhz: Optional[float] = Field(None, description="Resonance of the bare coil (MHz)")
    capacitor_pf: float = Field(DEFAULT_CAPACITOR_PF, description="Known shunt capacitor (pF)")

    @property
    def has_reference_frequency(self) -> bool:
        # 0 is how the bare-coil frequency reads when it was not measured
        return bool(self.freq_without_cap_mhz)


# --- Results ---

class ResonancePoint(BaseModel):
    capacitance_pf: float
    frequency_mhz: float


class CoilCharacteristics(BaseModel):
    """Inductance and self-capacitance derived from a CoilMeasurement."""
    inductance_uh: float = Field(..., description="Coil inductance (uH)")
    distributed_capacitance_pf: float = Field(0.0, description="Winding self-capacitance (pF), 0 if not measured")
    capacitor_pf: float = Field(..., description="Known shunt capacitor used (pF)")
    resonances: List[ResonancePoint] = Field(default_factory=list)

    @property
    def has_distributed_capacitance(self) -> bool:
        return self.distributed_capacitance_pf != 0.0


class InverseResult(BaseModel):
    inductance_uh: float
    capacitor_pf: float
    frequency_mhz: float
