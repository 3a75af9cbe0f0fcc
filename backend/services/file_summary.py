"""
File Summary
Turns the values extracted from one INP file into the same display layout the
baseline analyzer produces, so a project's baseline and proposed models can be
shown side by side with the code baseline.
"""

import logging
import re
from typing import List, Optional

from infrastructure.extractors.base import leading_float
from models.enums import FileSource
from models.schemas import Envelope, FileOccupancy, FileSummary, ProjectFileResult

logger = logging.getLogger(__name__)

DEFAULT_CHILLER_VALUE = 'Default Value'
FILE_PEOPLE_PER_1000_SF = 10
RATIO = re.compile(r'\{(\d+(?:\.\d+)?)/(\d+(?:\.\d+)?)\}')


def evaluate_ratio(text: str) -> float:
    """
    Numeric value of a rate or shading coefficient.

    ``{a/b}`` is divided out; otherwise the leading number is used. Anything
    else, including a zero denominator, gives 0.
    """
    match = RATIO.search(text or '')
    if match:
        numerator, denominator = float(match.group(1)), float(match.group(2))
        return numerator / denominator if denominator else 0.0
    value = leading_float(text)
    return value if value is not None else 0.0


def format_number(value: float) -> str:
    """Shortest text for a number: 1.0 -> '1', 0.125 -> '0.125'"""
    return str(int(value)) if float(value).is_integer() else repr(float(value))


def cooling_labels(result: ProjectFileResult) -> List[str]:
    """Cooling EIRs, or the chiller EIRs when the file has no DX cooling"""
    if result.cooling_eir:
        return [f" {value} EIR" for value in result.cooling_eir]
    if result.chiller_eir and result.chiller_eir[0] == DEFAULT_CHILLER_VALUE:
        return [f" {value}" for value in result.chiller_eir]
    return [f" {value} EIR" for value in result.chiller_eir]


def heating_labels(result: ProjectFileResult) -> List[str]:
    """Furnace AFUEs first, then heating EIRs; COP and AFUE entries keep their own tag"""
    labels = [f" {value} AFUE" for value in result.heat_input_ratios]
    for value in result.heating_eir:
        if 'COP' in value or 'AFUE' in value:
            labels.append(value)
        else:
            labels.append(f" {value} EIR")
    return labels


def envelope_from_file(result: ProjectFileResult) -> Envelope:
    shading = format_number(evaluate_ratio(result.shading_coefficient))
    return Envelope(
        roof=f"U-{result.roof_u_value}",
        wall=f"U-{result.wall_u_value}",
        floor=f"U-{result.floor_u_value or '0'}",
        window_u_value=f"U-{result.glass_conductance}",
        window_shgc=shading,
        window_sc=shading,
        skylight='-',
        door=f"U-{result.door_u_value or '0'}",
    )


def summarize_file_result(result: Optional[ProjectFileResult], source: FileSource) -> FileSummary:
    """
    Display record for a parsed baseline or proposed INP file.

    Args:
        result: Values extracted from the file, or None when the project has
            no file of this kind
        source: Whether the file is the project's baseline or proposed model

    Returns:
        FileSummary; all fields empty when ``result`` is None
    """
    if result is None:
        logger.debug(f"No {source.value} file, returning an empty summary")
        return FileSummary()

    return FileSummary(
        location='-',
        area=result.area,
        electric_rate=f"{format_number(evaluate_ratio(result.electric_rate))} ¢/kW-hr",
        gas_rate=f"{format_number(evaluate_ratio(result.gas_rate))} $/therm",
        air_side='-'.join(result.hvac_types) if result.hvac_types else '-',
        cooling=cooling_labels(result),
        heating=heating_labels(result),
        economizer='Yes' if result.has_economizer else 'No',
        lighting=[f" {format_number(lpd)} W/SqFt" for lpd in result.lpd] if result.lpd else '-',
        envelope=envelope_from_file(result),
        occupancy=FileOccupancy(
            name='Baseline' if source == FileSource.baseline else 'Proposed',
            people_per_1000_sf=FILE_PEOPLE_PER_1000_SF,
            area_per_person=result.area_per_person,
            sensible_heat_per_person=result.sensible_heat_per_person,
            latent_heat_per_person=result.latent_heat_per_person,
            receptacle_load_w_per_sf=result.receptacle_load_w_per_sf,
        ),
        schedules=result.schedules,
    )
