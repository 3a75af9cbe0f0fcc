"""
Schedule and Occupancy Extractors
Operating schedule names and per-person occupancy loads from the misc cost
related objects.
"""

import logging

from infrastructure.extractors.base import (
    BlockIndex, ExtractionContext, InpExtractor, UniqueList, quoted_name, strip_parens
)
from models.enums import BlockName

logger = logging.getLogger(__name__)


class ScheduleExtractor(InpExtractor):
    """Unique schedule names joined with ', '"""

    name = 'schedules'

    def __init__(self):
        # LIGHTING-SCHEDUL is truncated in eQuest output
        self.schedule_fields = ['PEOPLE-SCHEDULE', 'LIGHTING-SCHEDUL', 'EQUIP-SCHEDULE', 'INF-SCHEDULE']

    def extract(self, blocks: BlockIndex, context: ExtractionContext) -> None:
        if not blocks.has(BlockName.misc_objects):
            return

        names = UniqueList()
        for record in blocks.records(BlockName.misc_objects):
            for key in self.schedule_fields:
                value = record.text(key)
                if value:
                    names.add(quoted_name(value))

        context.schedules = ', '.join(names)


class OccupancyExtractor(InpExtractor):
    """Loads of the first space carrying PEOPLE-HG-LAT; later spaces are ignored"""

    name = 'occupancy'

    def __init__(self):
        self.default_sensible_heat = '250'
        self.default_area_per_person = '100'

    def extract(self, blocks: BlockIndex, context: ExtractionContext) -> None:
        if not blocks.has(BlockName.misc_objects):
            return

        for record in blocks.records(BlockName.misc_objects):
            latent = record.text('PEOPLE-HG-LAT')
            if not latent:
                continue

            context.latent_heat_per_person = latent
            context.sensible_heat_per_person = record.text('PEOPLE-HG-SENS') or self.default_sensible_heat
            context.receptacle_load_w_per_sf = strip_parens(record.text('EQUIPMENT-W/AREA'))
            context.area_per_person = record.text('AREA/PERSON') or self.default_area_per_person
            logger.debug(f"Occupancy loads taken from {record.name}")
            return
