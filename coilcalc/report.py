"""
Plain-text console report.

The layout and precision match the historical compute_L output, e.g.

    Inductance (uH): 448.09
    Distrib Capacitance (pF): 18.04
    Resonant Frequencies with this coil:
     C (pF)   F (MHz)
        2     5.3164836
"""

from typing import Iterable, List

from coilcalc.models import CoilCharacteristics, InverseResult, ResonancePoint

TABLE_HEADER = "Resonant Frequencies with this coil:"
TABLE_LABELS = " C (pF)   F (MHz)"


def format_inductance(value_uh: float) -> str:
    return f"Inductance (uH): {value_uh:.2f}"


def format_distributed_capacitance(value_pf: float) -> str:
    return f"Distrib Capacitance (pF): {value_pf:.2f}"


def format_frequency(value_mhz: float) -> str:
    return f"F = {value_mhz:.3f} MHz"


def format_resonance_table(points: Iterable[ResonancePoint]) -> List[str]:
    lines = [TABLE_HEADER, TABLE_LABELS]
    for p in points:
        lines.append(f"{p.capacitance_pf:5.0f}     {p.frequency_mhz:.7f}")
    return lines


def format_characteristics(result: CoilCharacteristics) -> List[str]:
    """Forward-mode report; the capacitance line only appears when CD was measured."""
    lines = [format_inductance(result.inductance_uh)]
    if result.has_distributed_capacitance:
        lines.append(format_distributed_capacitance(result.distributed_capacitance_pf))
    if result.resonances:
        lines.extend(format_resonance_table(result.resonances))
    return lines


def format_inverse(result: InverseResult) -> List[str]:
    return [format_frequency(result.frequency_mhz)]
