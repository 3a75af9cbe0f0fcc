"""
Reference Lookup Tables for Baseline Analysis
Zip code / climate zone, utility rates, economizer shut-off temperatures,
baseline system selection, LPD, envelope and occupancy tables.

Tables are read-only keyed stores. A missing row raises
UpstreamDependencyError since none of these values can be defaulted safely.

CSV files expected in the lookup directory:
    zip_codes.csv         ZIP, CITY, STATE, COUNTYNAME, CLIMATEZONE
    rates.csv             State, Residential_Electric, Commercial_Electric, Residential_Gas, Commercial_Gas
    shut_off.csv          Zone, Temp
    hvac_matrix.csv       Id, FF, Electric (row ids from select_matrix_row)
    systems.csv           Number, SystemType
    lpd.csv               Type, LPD
    envelope.csv          Zone, Residential, Roof, Wall, Floor, Window, Skylight, SHGC, SC, Door
    occupancy.csv         Name, PeoplePer1000SF, AreaPerPerson, SensibleHeatPerPerson,
                          LatentHeatPerPerson, ReceptacleLoadWPerSf, EquestBuildingType, EquestSpaceType
                          (the two type columns are '|'-separated lists)
"""

import csv
import logging
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Protocol, Tuple, Union

from models.schemas import (
    EnvelopeRecord, HvacMatrixRow, OccupancyAssumption, RateRecord, SystemRecord, ZipCodeRecord
)
from services.error_types import UpstreamDependencyError

logger = logging.getLogger(__name__)


class BaselineLookups(Protocol):
    """Keyed reference data the baseline analyzer queries"""

    def zip_code(self, zip_code: int) -> ZipCodeRecord: ...

    def rates(self, state: str) -> RateRecord: ...

    def shut_off_temperature(self, climate_zone: str) -> str: ...

    def hvac_matrix_row(self, row_id: int) -> HvacMatrixRow: ...

    def system(self, number: int) -> SystemRecord: ...

    def lpd(self, building_type: str) -> float: ...

    def envelope(self, zone: int, residential: bool) -> EnvelopeRecord: ...

    def occupancy_assumptions(self) -> List[OccupancyAssumption]: ...


@dataclass
class InMemoryLookups:
    """BaselineLookups backed by plain dicts"""
    zip_codes: Dict[int, ZipCodeRecord] = field(default_factory=dict)
    rate_rows: Dict[str, RateRecord] = field(default_factory=dict)
    shut_off_temps: Dict[str, str] = field(default_factory=dict)
    hvac_matrix: Dict[int, HvacMatrixRow] = field(default_factory=dict)
    systems: Dict[int, SystemRecord] = field(default_factory=dict)
    lpd_by_type: Dict[str, float] = field(default_factory=dict)
    envelopes: Dict[Tuple[int, bool], EnvelopeRecord] = field(default_factory=dict)
    occupancy: List[OccupancyAssumption] = field(default_factory=list)

    def zip_code(self, zip_code: int) -> ZipCodeRecord:
        return self._get(self.zip_codes, int(zip_code), 'zip code')

    def rates(self, state: str) -> RateRecord:
        return self._get(self.rate_rows, state.upper(), 'rate')

    def shut_off_temperature(self, climate_zone: str) -> str:
        return self._get(self.shut_off_temps, climate_zone.upper(), 'economizer shut-off')

    def hvac_matrix_row(self, row_id: int) -> HvacMatrixRow:
        return self._get(self.hvac_matrix, row_id, 'HVAC matrix')

    def system(self, number: int) -> SystemRecord:
        return self._get(self.systems, number, 'HVAC system')

    def lpd(self, building_type: str) -> float:
        return self._get(self.lpd_by_type, building_type.upper(), 'LPD')

    def envelope(self, zone: int, residential: bool) -> EnvelopeRecord:
        return self._get(self.envelopes, (zone, residential), 'envelope')

    def occupancy_assumptions(self) -> List[OccupancyAssumption]:
        return list(self.occupancy)

    @staticmethod
    def _get(table: dict, key, table_name: str):
        try:
            return table[key]
        except KeyError:
            raise UpstreamDependencyError(table_name, key) from None


def _read_rows(path: Path) -> List[Dict[str, str]]:
    if not path.exists():
        logger.warning(f"Lookup table {path} not found")
        return []
    with open(path, 'r', encoding='utf-8-sig', newline='') as f:
        reader = csv.DictReader(f)
        return [{k.strip(): (v or '').strip() for k, v in row.items() if k} for row in reader]


def _split(value: str) -> List[str]:
    return [item.strip() for item in value.split('|') if item.strip()]


def _is_true(value: str) -> bool:
    return value.strip().lower() in ('true', '1', 'yes', 'y')


def load_lookups_from_dir(data_dir: Union[str, Path]) -> InMemoryLookups:
    """Build lookups from the CSV files in ``data_dir``"""
    data_dir = Path(data_dir)
    lookups = InMemoryLookups()

    for row in _read_rows(data_dir / 'zip_codes.csv'):
        record = ZipCodeRecord(
            zip_code=int(row['ZIP']),
            city=row['CITY'],
            state=row['STATE'],
            county=row.get('COUNTYNAME', ''),
            climate_zone=row['CLIMATEZONE'].upper(),
        )
        lookups.zip_codes[record.zip_code] = record

    for row in _read_rows(data_dir / 'rates.csv'):
        lookups.rate_rows[row['State'].upper()] = RateRecord(
            state=row['State'].upper(),
            residential_electric=row['Residential_Electric'],
            commercial_electric=row['Commercial_Electric'],
            residential_gas=row['Residential_Gas'],
            commercial_gas=row['Commercial_Gas'],
        )

    for row in _read_rows(data_dir / 'shut_off.csv'):
        lookups.shut_off_temps[row['Zone'].upper()] = row['Temp']

    for row in _read_rows(data_dir / 'hvac_matrix.csv'):
        matrix_row = HvacMatrixRow(
            row_id=int(row['Id']),
            fossil_fuel_system=int(row['FF']),
            electric_system=int(row['Electric']),
        )
        lookups.hvac_matrix[matrix_row.row_id] = matrix_row

    for row in _read_rows(data_dir / 'systems.csv'):
        system = SystemRecord(number=int(row['Number']), system_type=row['SystemType'])
        lookups.systems[system.number] = system

    for row in _read_rows(data_dir / 'lpd.csv'):
        lookups.lpd_by_type[row['Type'].upper()] = float(row['LPD'])

    for row in _read_rows(data_dir / 'envelope.csv'):
        envelope = EnvelopeRecord(
            zone=int(row['Zone']),
            residential=_is_true(row.get('Residential', '')),
            roof=row.get('Roof', ''),
            wall=row.get('Wall', ''),
            floor=row.get('Floor', ''),
            window_u_value=row.get('Window', ''),
            window_shgc=row.get('SHGC', ''),
            window_sc=row.get('SC', ''),
            skylight=row.get('Skylight', ''),
            door=row.get('Door', ''),
        )
        lookups.envelopes[(envelope.zone, envelope.residential)] = envelope

    for row in _read_rows(data_dir / 'occupancy.csv'):
        lookups.occupancy.append(OccupancyAssumption(
            name=row['Name'],
            people_per_1000_sf=float(row['PeoplePer1000SF']),
            area_per_person=float(row['AreaPerPerson']),
            sensible_heat_per_person=float(row['SensibleHeatPerPerson']),
            latent_heat_per_person=float(row['LatentHeatPerPerson']),
            receptacle_load_w_per_sf=float(row['ReceptacleLoadWPerSf']),
            equest_building_types=_split(row.get('EquestBuildingType', '')),
            equest_space_types=_split(row.get('EquestSpaceType', '')),
        ))

    logger.info(f"Loaded lookups from {data_dir}: {len(lookups.zip_codes)} zip codes, "
                f"{len(lookups.rate_rows)} rate rows, {len(lookups.envelopes)} envelope rows")
    return lookups


@lru_cache(maxsize=4)
def get_lookups(data_dir: str) -> InMemoryLookups:
    """Cached lookups per directory"""
    return load_lookups_from_dir(data_dir)
