from pydantic import BaseModel, Field, validator
from typing import List, Union

from models.enums import EfficiencyMetric, HeatingFuel, ScheduleType


class ProjectFileResult(BaseModel):
    """Building parameters derived from one INP file"""
    shading_coefficient: str = ''
    glass_conductance: str = ''
    wall_u_value: str = ''
    roof_u_value: str = ''
    door_u_value: str = ''
    floor_u_value: str = ''
    lpd: List[float] = Field(default_factory=list, description="Unique lighting power densities, W/SqFt")
    electric_rate: str = ''
    gas_rate: str = ''
    hvac_types: List[str] = Field(default_factory=list)
    cooling_eir: List[str] = Field(default_factory=list)
    heating_eir: List[str] = Field(default_factory=list)
    chiller_eir: List[str] = Field(default_factory=list)
    capacity_ratios: List[str] = Field(default_factory=list)
    heat_input_ratios: List[str] = Field(default_factory=list, description="1/HIR, 3 decimals")
    has_economizer: bool = False
    area: str = Field('', description="Conditioned floor area, e.g. '1200 SqFt'")
    schedules: str = ScheduleType.non_residential.value
    latent_heat_per_person: str = ''
    sensible_heat_per_person: str = ''
    receptacle_load_w_per_sf: str = ''
    area_per_person: str = ''

    class Config:
        frozen = True


class CompareFields(BaseModel):
    """Project inputs the baseline analyzer compares against"""
    zip_code: int
    area: float = Field(..., gt=0, description="Gross floor area in SqFt")
    number_floors: int = Field(..., ge=1)
    building_type: str
    hvac_heating_type: HeatingFuel
    cooling_sqft_per_ton: float = Field(..., gt=0)
    heating_btu_per_sqft: float = Field(..., gt=0)

    @validator('building_type')
    def normalize_building_type(cls, v):
        return v.strip().upper()


class EfficiencyResult(BaseModel):
    """Code-minimum efficiency for one piece of equipment"""
    tech_type: str = ''
    description: str = ''
    capacity: str = ''
    chiller_count: int = 0
    value: str = ''
    metric: EfficiencyMetric = EfficiencyMetric.none

    @classmethod
    def empty(cls) -> "EfficiencyResult":
        return cls()

    @property
    def is_empty(self) -> bool:
        return not self.tech_type

    def summary(self) -> str:
        """Single-line description, e.g. 'DX, Air Conditioners: 60 kBTUh, 0.2857 EIR'"""
        text = f"{self.tech_type}, {self.description}" if self.description else self.tech_type
        text += f": {self.capacity}"
        if self.value:
            text += f", {self.value} {self.metric.value}"
        return text


class ZipCodeRecord(BaseModel):
    zip_code: int
    city: str
    state: str
    county: str = ''
    climate_zone: str


class RateRecord(BaseModel):
    state: str
    residential_electric: str
    commercial_electric: str
    residential_gas: str
    commercial_gas: str


class HvacMatrixRow(BaseModel):
    """System numbers for one size row of the selection matrix"""
    row_id: int
    fossil_fuel_system: int
    electric_system: int


class SystemRecord(BaseModel):
    number: int
    system_type: str


class Envelope(BaseModel):
    roof: str = ''
    wall: str = ''
    floor: str = ''
    window_u_value: str = ''
    window_shgc: str = ''
    window_sc: str = ''
    skylight: str = ''
    door: str = ''
    residential: bool = False


class EnvelopeRecord(Envelope):
    zone: int


class OccupancyAssumption(BaseModel):
    name: str = 'ALL OTHERS'
    people_per_1000_sf: float = 10
    area_per_person: float = 100
    sensible_heat_per_person: float = 250
    latent_heat_per_person: float = 200
    receptacle_load_w_per_sf: float = 1
    equest_building_types: List[str] = Field(default_factory=list)
    equest_space_types: List[str] = Field(default_factory=list)


class BaselineSummary(BaseModel):
    """Code baseline derived from the project inputs"""
    location: str
    area: str
    electric_rate: str
    gas_rate: str
    climate_zone: str
    economizer: str
    hvac_system_number: int
    air_side: str
    cooling: EfficiencyResult
    heating: EfficiencyResult
    lighting: str
    envelope: Envelope
    occupancy: OccupancyAssumption
    schedule_type: ScheduleType

    @property
    def cooling_summary(self) -> str:
        return self.cooling.summary()

    @property
    def heating_summary(self) -> str:
        return self.heating.summary()


class FileOccupancy(BaseModel):
    """Occupancy loads as read from an INP file"""
    name: str = ''
    people_per_1000_sf: float = 10
    area_per_person: str = ''
    sensible_heat_per_person: str = ''
    latent_heat_per_person: str = ''
    receptacle_load_w_per_sf: str = ''


class FileSummary(BaseModel):
    """Display record for one parsed INP file, laid out like BaselineSummary"""
    location: str = '-'
    area: str = ''
    electric_rate: str = ''
    gas_rate: str = ''
    air_side: str = ''
    cooling: List[str] = Field(default_factory=list)
    heating: List[str] = Field(default_factory=list)
    economizer: str = ''
    lighting: Union[List[str], str] = Field(default_factory=list, description="'-' when the file has no LPD")
    envelope: Envelope = Field(default_factory=Envelope)
    occupancy: FileOccupancy = Field(default_factory=FileOccupancy)
    schedules: str = ''
