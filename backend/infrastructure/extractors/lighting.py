"""
Lighting Extractor
Unique lighting power densities from misc cost related objects
"""

import logging

from infrastructure.extractors.base import (
    BlockIndex, ExtractionContext, InpExtractor, leading_float, strip_parens
)
from models.enums import BlockName

logger = logging.getLogger(__name__)

LPD_FIELD = 'LIGHTING-W/AREA'


class LightingExtractor(InpExtractor):
    """Collects LIGHTING-W/AREA values, e.g. ``( 1.1 )`` -> 1.1"""

    name = 'lighting'

    def extract(self, blocks: BlockIndex, context: ExtractionContext) -> None:
        if not blocks.has(BlockName.misc_objects):
            self.warn_missing(BlockName.misc_objects)
            return

        for record in blocks.records(BlockName.misc_objects):
            raw = record.text(LPD_FIELD)
            if not raw:
                continue
            value = leading_float(strip_parens(raw))
            if value is None:
                logger.debug(f"Skipping non-numeric {LPD_FIELD} '{raw}' on {record.name}")
                continue
            context.lpd.add(value)

        logger.info(f"Found {len(context.lpd)} lighting power densities")
