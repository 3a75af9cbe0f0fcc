"""
Baseline Equipment Efficiency
Code-minimum cooling and heating efficiency for the eight baseline HVAC
systems, sized from floor area and design rates.

System numbers:
    1-2  packaged terminal units          (DX curve / PTHP)
    3-6  packaged rooftop units           (tiered DX table)
    7-8  chilled water plants             (screw/scroll or centrifugal)

Both functions are pure. An unknown system number returns an empty result
and logs an UnsupportedConfiguration warning.
"""

import logging
import math
from bisect import bisect_right
from dataclasses import dataclass
from typing import Optional, Sequence

from data.efficiency_tables import DEFAULT_EFFICIENCY_TABLES, EfficiencyTables
from models.enums import EfficiencyMetric
from models.schemas import EfficiencyResult
from services.error_types import UnsupportedConfiguration, log_error_with_context

logger = logging.getLogger(__name__)

BTUH_PER_TON = 12000
DX_TIERS_BTUH = (65000, 135000, 240000, 760000)
CHILLER_TIERS_TONS = (150, 300)
HEAT_PUMP_TIERS_BTUH = (65000, 135000)

SINGLE_CHILLER_MAX_TONS = 300
CENTRIFUGAL_MIN_TONS = 600
MAX_CHILLER_TONS = 800
MIN_CENTRIFUGAL_CHILLERS = 2


@dataclass
class ChillerPlant:
    """How a cooling load is split across chillers"""
    chiller_count: int
    tons_per_chiller: int
    description: str


def tier_value(values: Sequence[str], boundaries: Sequence[float], x: float) -> str:
    """Value for the tier containing x; a boundary belongs to the tier above it"""
    index = bisect_right(boundaries, x)
    return values[min(index, len(values) - 1)]


def kbtuh_label(btuh: float) -> str:
    return f"{math.floor(btuh / 1000)} kBTUh"


def size_chiller_plant(total_tons: int) -> ChillerPlant:
    """
    Split a cooling load into chillers.

    Under 300 tons one screw/scroll chiller carries the load; up to 600 tons
    two equal screw/scroll chillers; from 600 tons centrifugal chillers, at
    least two and none above 800 tons.
    """
    if total_tons < SINGLE_CHILLER_MAX_TONS:
        return ChillerPlant(1, total_tons, 'Water cooled screw/scroll')

    if total_tons < CENTRIFUGAL_MIN_TONS:
        return ChillerPlant(2, math.ceil(total_tons / 2), 'Water cooled screw/scroll')

    count = MIN_CENTRIFUGAL_CHILLERS
    per_chiller = math.ceil(total_tons / count)
    if per_chiller > MAX_CHILLER_TONS:
        count = math.ceil(total_tons / MAX_CHILLER_TONS)
        per_chiller = math.ceil(total_tons / count)
    return ChillerPlant(count, per_chiller, 'Centrifugal')


def _unsupported(hvac_id, engine: str) -> EfficiencyResult:
    log_error_with_context(UnsupportedConfiguration(hvac_id, engine), {'stage': 'efficiency'})
    return EfficiencyResult.empty()


def get_cool_eff(area: float, hvac_id: int, cooling_rate: float,
                 tables: Optional[EfficiencyTables] = None) -> EfficiencyResult:
    """
    Minimum cooling efficiency for a baseline system.

    Args:
        area: Conditioned floor area, SqFt
        hvac_id: Baseline system number 1-8
        cooling_rate: Design SqFt per ton of cooling
        tables: Efficiency tables, defaults to the 90.1-2007 values

    Returns:
        EfficiencyResult with EIR, or an empty result for unknown systems
    """
    if cooling_rate <= 0:
        raise ValueError(f"Cooling rate must be positive, got {cooling_rate}")
    tables = tables or DEFAULT_EFFICIENCY_TABLES

    tons = math.ceil(area / cooling_rate)
    btuh = tons * BTUH_PER_TON

    if hvac_id in (1, 2):
        eir = 3.2769 / (12.5 - 0.213 * btuh / 1000) - 0.03987
        return EfficiencyResult(
            tech_type='DX',
            description='New construction',
            capacity=kbtuh_label(btuh),
            value=f"{eir:.2f}",
            metric=EfficiencyMetric.eir,
        )

    if hvac_id in tables.dx_cooling_eir:
        return EfficiencyResult(
            tech_type='DX',
            description='Air Conditioners',
            capacity=kbtuh_label(btuh),
            value=tier_value(tables.dx_cooling_eir[hvac_id], DX_TIERS_BTUH, btuh),
            metric=EfficiencyMetric.eir,
        )

    if hvac_id in tables.single_chiller_eir:
        plant = size_chiller_plant(tons)
        if plant.chiller_count == 1:
            values = tables.single_chiller_eir[hvac_id]
        elif plant.description == 'Centrifugal':
            values = tables.centrifugal_chiller_eir
        else:
            values = tables.paired_chiller_eir
        logger.debug(f"{tons} tons -> {plant.chiller_count} x {plant.tons_per_chiller} ton {plant.description}")
        return EfficiencyResult(
            tech_type='Chiller',
            description=plant.description,
            capacity=f"{plant.tons_per_chiller} Tons",
            chiller_count=plant.chiller_count,
            value=tier_value(values, CHILLER_TIERS_TONS, plant.tons_per_chiller),
            metric=EfficiencyMetric.eir,
        )

    return _unsupported(hvac_id, 'cooling')


def get_heat_eff(area: float, hvac_id: int, heating_rate: float,
                 tables: Optional[EfficiencyTables] = None) -> EfficiencyResult:
    """
    Minimum heating efficiency for a baseline system.

    Args:
        area: Conditioned floor area, SqFt
        hvac_id: Baseline system number 1-8
        heating_rate: Design BTU/h per SqFt
        tables: Efficiency tables, defaults to the 90.1-2007 values
    """
    tables = tables or DEFAULT_EFFICIENCY_TABLES
    btuh = area * heating_rate
    capacity = kbtuh_label(btuh)

    if hvac_id in (1, 5, 7):
        return EfficiencyResult(tech_type='HW Boiler', description='Gas Fired', capacity=capacity,
                                value=tables.boiler_afue, metric=EfficiencyMetric.afue)

    if hvac_id == 2:
        eir = 1 / (3.2 - 0.026 * btuh / 1000)
        return EfficiencyResult(tech_type='Elec HP', description='PTHP', capacity=capacity,
                                value=f"{eir:.2f}", metric=EfficiencyMetric.eir)

    if hvac_id == 3:
        small, large = tables.furnace_afue
        afue = small if btuh < tables.furnace_threshold_btuh else large
        return EfficiencyResult(tech_type='Furnace', description='Gas Fired', capacity=capacity,
                                value=afue, metric=EfficiencyMetric.afue)

    if hvac_id == 4:
        eir = tier_value(tables.heat_pump_heating_eir, HEAT_PUMP_TIERS_BTUH, btuh)
        return EfficiencyResult(tech_type='Elec HP', description='Air cooled (heating mode)',
                                capacity=capacity, value=eir, metric=EfficiencyMetric.eir)

    if hvac_id in (6, 8):
        # electric resistance has no rated efficiency
        return EfficiencyResult(tech_type='Elec Res', capacity=capacity)

    return _unsupported(hvac_id, 'heating')
