"""
Baseline Analyzer
Derives the code baseline for a project from its comparison fields: location,
utility rates, economizer requirement, baseline HVAC system with its cooling
and heating efficiencies, lighting power density, envelope, occupancy and
schedule type.
"""

import logging
from typing import List, Optional, Tuple

from data.efficiency_tables import EfficiencyTables
from domain.calculations.efficiency import get_cool_eff, get_heat_eff
from models.enums import HeatingFuel, ScheduleType
from models.schemas import (
    BaselineSummary, CompareFields, Envelope, OccupancyAssumption, SystemRecord
)
from services.error_types import UpstreamDependencyError
from services.lookup_tables import BaselineLookups
from utils.logging_utils import log_operation

logger = logging.getLogger(__name__)

RESIDENTIAL_BUILDING_TYPE = 'MULTI-FAMILY'
NO_ECONOMIZER_ZONES = {'1A', '1B', '2A', '3A', '4A'}
DEFAULT_OCCUPANCY_NAME = 'ALL OTHERS'

# Residential systems bypass the size matrix
RESIDENTIAL_SYSTEMS = {HeatingFuel.fossil_fuel: 1, HeatingFuel.electric: 2}

SCHEDULE_TYPES = {
    'RETAIL': ScheduleType.retail,
    'HOTEL': ScheduleType.hotel_function,
    'MOTEL': ScheduleType.hotel_function,
    'DORMITORY': ScheduleType.residential_setback,
    'MULTI-FAMILY': ScheduleType.residential_setback,
}


def is_residential(building_type: str) -> bool:
    return building_type == RESIDENTIAL_BUILDING_TYPE


def select_matrix_row(number_floors: int, area: float) -> int:
    """Row of the baseline system matrix for a building's size"""
    if number_floors <= 3 and area < 25000:
        return 1
    if number_floors <= 5 and area < 25000:
        return 2
    if number_floors <= 5 and area <= 150000:
        return 3
    return 4


def select_system(fields: CompareFields, lookups: BaselineLookups) -> SystemRecord:
    if is_residential(fields.building_type):
        return lookups.system(RESIDENTIAL_SYSTEMS[fields.hvac_heating_type])

    row = lookups.hvac_matrix_row(select_matrix_row(fields.number_floors, fields.area))
    if fields.hvac_heating_type == HeatingFuel.fossil_fuel:
        number = row.fossil_fuel_system
    else:
        number = row.electric_system
    return lookups.system(number)


def get_rates(state: str, building_type: str, lookups: BaselineLookups) -> Tuple[str, str]:
    """Electric and gas rate labels for the state"""
    rate = lookups.rates(state)
    if is_residential(building_type):
        electric, gas = rate.residential_electric, rate.residential_gas
    else:
        electric, gas = rate.commercial_electric, rate.commercial_gas
    return f"{electric} ¢/kW-hr", f"{gas} $/therm"


def get_economizer(climate_zone: str, lookups: BaselineLookups) -> str:
    if climate_zone in NO_ECONOMIZER_ZONES:
        return f"{climate_zone}: No economizer is required"
    temp = lookups.shut_off_temperature(climate_zone)
    return f"{climate_zone}: requires economizer with high limit shutOff of {temp}°F"


def get_lpd(building_type: str, lookups: BaselineLookups) -> str:
    return f"{lookups.lpd(building_type):.1f} W/SqFt"


def get_envelope(climate_zone: str, building_type: str, lookups: BaselineLookups) -> Envelope:
    """Envelope row for the climate zone number (first character of the zone)"""
    if not climate_zone[:1].isdigit():
        raise UpstreamDependencyError('envelope', climate_zone)
    residential = is_residential(building_type)
    row = lookups.envelope(int(climate_zone[0]), residential)
    return Envelope(**row.dict(exclude={'zone', 'residential'}), residential=residential)


def get_occupancy_assumption(assumptions: List[OccupancyAssumption],
                             building_type: str) -> Optional[OccupancyAssumption]:
    """
    Occupancy row whose eQuest building types, then space types, contain the
    building type; falls back to the 'ALL OTHERS' row.
    """
    for attribute in ('equest_building_types', 'equest_space_types'):
        for assumption in assumptions:
            if any(building_type in item for item in getattr(assumption, attribute)):
                return assumption

    for assumption in assumptions:
        if assumption.name == DEFAULT_OCCUPANCY_NAME:
            return assumption
    return None


def get_schedule_type(building_type: str) -> ScheduleType:
    return SCHEDULE_TYPES.get(building_type, ScheduleType.non_residential)


def _area_label(area: float) -> str:
    value = int(area) if float(area).is_integer() else area
    return f"{value} SqFt"


def analyze_baseline(fields: CompareFields, lookups: BaselineLookups,
                     tables: Optional[EfficiencyTables] = None) -> BaselineSummary:
    """
    Build the baseline summary for a project.

    Raises:
        UpstreamDependencyError: a reference table has no row for a project input
    """
    with log_operation("baseline_analysis", {'zip_code': fields.zip_code,
                                             'building_type': fields.building_type}, logger) as ctx:
        location = lookups.zip_code(fields.zip_code)
        electric_rate, gas_rate = get_rates(location.state, fields.building_type, lookups)

        system = select_system(fields, lookups)
        cooling = get_cool_eff(fields.area, system.number, fields.cooling_sqft_per_ton, tables)
        heating = get_heat_eff(fields.area, system.number, fields.heating_btu_per_sqft, tables)
        ctx['system'] = system.number
        logger.debug(f"Baseline system {system.number} ({system.system_type}) for "
                     f"{fields.number_floors} floors / {fields.area} SqFt")

        occupancy = get_occupancy_assumption(lookups.occupancy_assumptions(), fields.building_type)
        if occupancy is None:
            raise UpstreamDependencyError('occupancy assumption', fields.building_type)

        return BaselineSummary(
            location=f"{location.city}-{location.state}",
            area=_area_label(fields.area),
            electric_rate=electric_rate,
            gas_rate=gas_rate,
            climate_zone=location.climate_zone,
            economizer=get_economizer(location.climate_zone, lookups),
            hvac_system_number=system.number,
            air_side=system.system_type,
            cooling=cooling,
            heating=heating,
            lighting=get_lpd(fields.building_type, lookups),
            envelope=get_envelope(location.climate_zone, fields.building_type, lookups),
            occupancy=occupancy,
            schedule_type=get_schedule_type(fields.building_type),
        )
