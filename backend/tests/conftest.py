"""
Pytest configuration and fixtures
"""
from pathlib import Path
from typing import Dict, List

import pytest

from models.enums import HeatingFuel
from models.schemas import (
    CompareFields, EnvelopeRecord, HvacMatrixRow, OccupancyAssumption, RateRecord,
    SystemRecord, ZipCodeRecord
)
from services.lookup_tables import InMemoryLookups

FIXTURES_DIR = Path(__file__).parent / "fixtures"
DELIMITER = "$ ---------------------------------------------------------"


def build_inp(blocks: Dict[str, List[str]], root: bool = True) -> List[str]:
    """Lines of an INP file with one three-line header per block"""
    lines = ["INPUT .."] if root else []
    for name, body in blocks.items():
        lines.extend(["", DELIMITER, f"$              {name}", DELIMITER, ""])
        lines.extend(body)
    return lines


@pytest.fixture
def make_inp():
    return build_inp


@pytest.fixture
def sample_inp_path() -> Path:
    return FIXTURES_DIR / "sample_office.inp"


@pytest.fixture
def sample_inp_lines(sample_inp_path) -> List[str]:
    return sample_inp_path.read_text(encoding="latin-1").splitlines()


@pytest.fixture
def office_fields() -> CompareFields:
    """Four story office in Miami"""
    return CompareFields(
        zip_code=33101,
        area=42000,
        number_floors=4,
        building_type="office",
        hvac_heating_type=HeatingFuel.fossil_fuel,
        cooling_sqft_per_ton=350,
        heating_btu_per_sqft=30,
    )


@pytest.fixture
def lookups() -> InMemoryLookups:
    """Small reference data set covering two climate zones"""
    return InMemoryLookups(
        zip_codes={
            33101: ZipCodeRecord(zip_code=33101, city="Miami", state="FL",
                                 county="Miami-Dade", climate_zone="1A"),
            80202: ZipCodeRecord(zip_code=80202, city="Denver", state="CO",
                                 county="Denver", climate_zone="5B"),
        },
        rate_rows={
            "FL": RateRecord(state="FL", residential_electric="11.42", commercial_electric="9.38",
                             residential_gas="1.92", commercial_gas="1.12"),
            "CO": RateRecord(state="CO", residential_electric="12.22", commercial_electric="10.05",
                             residential_gas="0.95", commercial_gas="0.78"),
        },
        shut_off_temps={"5B": "75"},
        hvac_matrix={
            1: HvacMatrixRow(row_id=1, fossil_fuel_system=3, electric_system=4),
            2: HvacMatrixRow(row_id=2, fossil_fuel_system=5, electric_system=6),
            3: HvacMatrixRow(row_id=3, fossil_fuel_system=5, electric_system=6),
            4: HvacMatrixRow(row_id=4, fossil_fuel_system=7, electric_system=8),
        },
        systems={
            1: SystemRecord(number=1, system_type="PTAC"),
            2: SystemRecord(number=2, system_type="PTHP"),
            3: SystemRecord(number=3, system_type="PSZ-AC"),
            4: SystemRecord(number=4, system_type="PSZ-HP"),
            5: SystemRecord(number=5, system_type="Packaged VAV w/ Reheat"),
            6: SystemRecord(number=6, system_type="Packaged VAV w/ PFP Boxes"),
            7: SystemRecord(number=7, system_type="VAV w/ Reheat"),
            8: SystemRecord(number=8, system_type="VAV w/ PFP Boxes"),
        },
        lpd_by_type={"OFFICE": 1.0, "MULTI-FAMILY": 0.7, "RETAIL": 1.5},
        envelopes={
            (1, False): EnvelopeRecord(zone=1, residential=False, roof="U-0.063", wall="U-0.124",
                                       floor="U-0.322", window_u_value="U-1.20", window_shgc="0.25",
                                       window_sc="0.29", skylight="U-1.98", door="U-0.700"),
            (1, True): EnvelopeRecord(zone=1, residential=True, roof="U-0.048", wall="U-0.124",
                                      floor="U-0.322", window_u_value="U-1.20", window_shgc="0.25",
                                      window_sc="0.29", skylight="U-1.98", door="U-0.700"),
            (5, False): EnvelopeRecord(zone=5, residential=False, roof="U-0.048", wall="U-0.084",
                                       floor="U-0.052", window_u_value="U-0.55", window_shgc="0.40",
                                       window_sc="0.46", skylight="U-1.17", door="U-0.700"),
        },
        occupancy=[
            OccupancyAssumption(name="OFFICE", people_per_1000_sf=5, area_per_person=200,
                                sensible_heat_per_person=250, latent_heat_per_person=200,
                                receptacle_load_w_per_sf=1.5,
                                equest_building_types=["OFFICE BUILDING", "SMALL OFFICE"],
                                equest_space_types=["OPEN OFFICE"]),
            OccupancyAssumption(name="RETAIL", people_per_1000_sf=15, area_per_person=67,
                                sensible_heat_per_person=250, latent_heat_per_person=200,
                                receptacle_load_w_per_sf=0.25,
                                equest_building_types=["RETAIL STORE"],
                                equest_space_types=["SALES FLOOR"]),
            OccupancyAssumption(),
        ],
    )
