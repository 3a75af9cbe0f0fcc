"""
Code-minimum efficiency tables for the baseline HVAC systems
Based on ASHRAE 90.1-2007 Tables 6.8.1A-D, converted to EIR

Chiller kW/ton values are converted with EIR = (kW/ton) / 3.517.
DX tiers follow the capacity bands <65, 65-135, 135-240, 240-760 and
>=760 kBTUh; heat pumps stop at the >=240 kBTUh band.
"""

from dataclasses import dataclass, field
from typing import Dict, Tuple


@dataclass(frozen=True)
class EfficiencyTables:
    """Efficiency values keyed by baseline system number and capacity tier"""
    # system number -> EIR per DX capacity tier
    dx_cooling_eir: Dict[int, Tuple[str, ...]] = field(default_factory=dict)
    # system number -> EIR per chiller tons tier (<150, 150-300, >=300), single chiller plants
    single_chiller_eir: Dict[int, Tuple[str, str, str]] = field(default_factory=dict)
    paired_chiller_eir: Tuple[str, str, str] = ('', '', '')
    centrifugal_chiller_eir: Tuple[str, str, str] = ('', '', '')
    boiler_afue: str = '0.8'
    # (below threshold, at or above threshold)
    furnace_afue: Tuple[str, str] = ('0.78', '0.8')
    furnace_threshold_btuh: float = 225000
    # heat pump heating EIR per tier (<65, 65-135, >=135 kBTUh)
    heat_pump_heating_eir: Tuple[str, str, str] = ('0.44', '0.31', '0.32')


# Water cooled screw/scroll: 0.790 / 0.718 / 0.639 kW/ton
SCREW_CHILLER_EIR = ('0.2246', '0.2042', '0.1817')

# Centrifugal: 0.703 / 0.634 / 0.576 kW/ton
CENTRIFUGAL_CHILLER_EIR = ('0.1999', '0.1803', '0.1638')

PACKAGED_AC_EIR = ('0.2857', '0.3050', '0.3110', '0.3420', '0.3530')
PACKAGED_HP_EIR = ('0.2857', '0.3110', '0.3170', '0.3420')

DEFAULT_EFFICIENCY_TABLES = EfficiencyTables(
    dx_cooling_eir={
        3: PACKAGED_AC_EIR,
        4: PACKAGED_HP_EIR,
        5: PACKAGED_AC_EIR,
        6: PACKAGED_AC_EIR,
    },
    single_chiller_eir={
        7: SCREW_CHILLER_EIR,
        8: SCREW_CHILLER_EIR,
    },
    paired_chiller_eir=SCREW_CHILLER_EIR,
    centrifugal_chiller_eir=CENTRIFUGAL_CHILLER_EIR,
)
