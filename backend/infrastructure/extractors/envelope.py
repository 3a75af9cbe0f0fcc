"""
Envelope Extractor
Baseline glazing properties and construction U-values
"""

import logging
from typing import Iterable, List, Optional

from infrastructure.extractors.base import BlockIndex, ExtractionContext, InpExtractor
from infrastructure.inp.model import Record
from models.enums import BlockName

logger = logging.getLogger(__name__)


def find_record(records: Iterable[Record], names: List[str]) -> Optional[Record]:
    """First record carrying any of the given keys"""
    for record in records:
        if record.has_any(*names):
            return record
    return None


class GlazingExtractor(InpExtractor):
    """Shading coefficient and glass conductance of the baseline glass type"""

    name = 'glazing'

    def extract(self, blocks: BlockIndex, context: ExtractionContext) -> None:
        if not blocks.has(BlockName.glass_types):
            self.warn_missing(BlockName.glass_types)
            return

        glass = find_record(blocks.records(BlockName.glass_types), ['Baseline Glass'])
        if glass is None:
            self.warn("No 'Baseline Glass' record in glass types")
            return

        context.shading_coefficient = glass.text('SHADING-COEF')
        context.glass_conductance = glass.text('GLASS-CONDUCT')


class MaterialsExtractor(InpExtractor):
    """U-values for wall, roof, door and floor constructions"""

    name = 'materials'

    def __init__(self):
        # first record in file order carrying any of the names wins
        self.constructions = {
            'wall': ['Baseline Wall', 'Proposed Wall'],
            'roof': ['Baseline Roof', 'Proposed Roof'],
            'door': ['Baseline Door', 'Proposed Door'],
            'floor': ['EL1 IFlr Construction'],
        }
        self.required = ('wall', 'roof')

    def extract(self, blocks: BlockIndex, context: ExtractionContext) -> None:
        if not blocks.has(BlockName.materials):
            self.warn_missing(BlockName.materials)
            return

        records = blocks.records(BlockName.materials)
        context.door_u_value = '0'
        context.floor_u_value = '0'

        for component, names in self.constructions.items():
            record = find_record(records, names)
            if record is None:
                if component in self.required:
                    self.warn(f"No {component} construction found", candidates=names)
                continue
            u_value = record.text('U-VALUE')
            if u_value:
                setattr(context, f"{component}_u_value", u_value)
            elif component in self.required:
                self.warn(f"{record.name} has no U-VALUE")
