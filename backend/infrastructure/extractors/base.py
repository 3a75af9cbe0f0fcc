"""
Shared pieces for the INP extractors: block lookup by name, the per-file
accumulator each extractor writes into, and value parsing helpers.
"""

import logging
import math
import re
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from infrastructure.inp.model import Block, Record
from models.enums import BlockName, ScheduleType
from models.schemas import ProjectFileResult
from services.error_types import ExtractionWarning, log_error_with_context

logger = logging.getLogger(__name__)

LEADING_FLOAT = re.compile(r'^\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)')
QUOTED_NAME = re.compile(r'"([^"]+)"')


class UniqueList(list):
    """List that ignores values it already holds, keeping first-seen order"""

    def add(self, value) -> bool:
        if value in self:
            return False
        self.append(value)
        return True

    def add_all(self, values: Iterable) -> None:
        for value in values:
            self.add(value)


class BlockIndex:
    """Records of all same-named blocks, concatenated in file order"""

    def __init__(self, blocks: Iterable[Block]):
        self._records: Dict[str, List[Record]] = {}
        for block in blocks:
            self._records.setdefault(block.name, []).extend(block.records)

    def has(self, name) -> bool:
        return _key(name) in self._records

    def records(self, *names) -> List[Record]:
        found = []
        for name in names:
            found.extend(self._records.get(_key(name), []))
        return found


def _key(name) -> str:
    return name.value if isinstance(name, BlockName) else name


@dataclass
class ExtractionContext:
    """Mutable accumulator for one extraction pass, frozen into a ProjectFileResult"""
    shading_coefficient: str = ''
    glass_conductance: str = ''
    wall_u_value: str = ''
    roof_u_value: str = ''
    door_u_value: str = ''
    floor_u_value: str = ''
    lpd: UniqueList = field(default_factory=UniqueList)
    electric_rate: str = ''
    gas_rate: str = ''
    hvac_types: UniqueList = field(default_factory=UniqueList)
    cooling_eir: UniqueList = field(default_factory=UniqueList)
    heating_eir: UniqueList = field(default_factory=UniqueList)
    chiller_eir: UniqueList = field(default_factory=UniqueList)
    capacity_ratios: UniqueList = field(default_factory=UniqueList)
    heat_input_ratios: UniqueList = field(default_factory=UniqueList)
    has_economizer: bool = False
    area: str = ''
    schedules: str = ScheduleType.non_residential.value
    latent_heat_per_person: str = ''
    sensible_heat_per_person: str = ''
    receptacle_load_w_per_sf: str = ''
    area_per_person: str = ''
    # polygon name -> floor multiplier, read before the floor area is summed
    multipliers: Dict[str, int] = field(default_factory=dict)

    def mark_economizer(self):
        self.has_economizer = True

    def freeze(self) -> ProjectFileResult:
        return ProjectFileResult(
            shading_coefficient=self.shading_coefficient,
            glass_conductance=self.glass_conductance,
            wall_u_value=self.wall_u_value,
            roof_u_value=self.roof_u_value,
            door_u_value=self.door_u_value,
            floor_u_value=self.floor_u_value,
            lpd=list(self.lpd),
            electric_rate=self.electric_rate,
            gas_rate=self.gas_rate,
            hvac_types=list(self.hvac_types),
            cooling_eir=list(self.cooling_eir),
            heating_eir=list(self.heating_eir),
            chiller_eir=list(self.chiller_eir),
            capacity_ratios=list(self.capacity_ratios),
            heat_input_ratios=list(self.heat_input_ratios),
            has_economizer=self.has_economizer,
            area=self.area,
            schedules=self.schedules,
            latent_heat_per_person=self.latent_heat_per_person,
            sensible_heat_per_person=self.sensible_heat_per_person,
            receptacle_load_w_per_sf=self.receptacle_load_w_per_sf,
            area_per_person=self.area_per_person,
        )


class InpExtractor:
    """Base class: one extractor owns a fixed set of result fields"""

    name = 'extractor'

    def extract(self, blocks: BlockIndex, context: ExtractionContext) -> None:
        raise NotImplementedError

    def warn(self, message: str, **details) -> None:
        log_error_with_context(ExtractionWarning(self.name, message, details), {'stage': 'extraction'})

    def warn_missing(self, block_name) -> None:
        self.warn(f"Block '{_key(block_name)}' not found", block=_key(block_name))


def strip_parens(text: str) -> str:
    return text.replace('(', '').replace(')', '').strip()


def leading_float(text: str) -> Optional[float]:
    """Number at the start of ``text``, ignoring trailing units or junk"""
    match = LEADING_FLOAT.match(text or '')
    return float(match.group(1)) if match else None


def parse_number(text: str) -> Optional[float]:
    """Whole-string numeric value, or None"""
    try:
        value = float((text or '').strip())
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def inverted(text: str) -> Optional[str]:
    """``1/x`` to 3 decimals, or None for non-numeric and zero input"""
    value = parse_number(text)
    if value is None or value == 0:
        return None
    return f"{1 / value:.3f}"


def quoted_name(text: str) -> str:
    match = QUOTED_NAME.search(text)
    return match.group(1) if match else text
