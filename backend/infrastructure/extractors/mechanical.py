"""
Mechanical Systems Extractor
HVAC system types, cooling/heating EIRs, boiler ratios, economizer flag and
chiller EIRs, plus the furnace / heat pump fallback used when a model carries
no heating efficiency on its systems or boilers.
"""

import logging

from infrastructure.extractors.base import (
    BlockIndex, ExtractionContext, InpExtractor, inverted, leading_float, parse_number
)
from models.enums import BlockName

logger = logging.getLogger(__name__)

SYSTEM_BLOCKS = (BlockName.chilled_water_meters, BlockName.hvac_systems)

# Placeholder values eQuest writes for meters and zones, not equipment types
SENTINEL_TYPES = {'SUM', 'NONE', 'UNCONDITIONED', 'CONDITIONED'}

DEFAULT_CHILLER_EIR = 'Default Value'


def add_type(context: ExtractionContext, value: str) -> None:
    if value and value not in SENTINEL_TYPES:
        context.hvac_types.add(value)


class HVACExtractor(InpExtractor):
    """Primary pass over system records and boilers"""

    name = 'hvac'

    def __init__(self):
        self.type_fields = ('TYPE', 'HEAT-SOURCE', 'CHW-LOOP')

    def extract(self, blocks: BlockIndex, context: ExtractionContext) -> None:
        if not any(blocks.has(name) for name in SYSTEM_BLOCKS):
            self.warn_missing(BlockName.chilled_water_meters)
        else:
            self._extract_systems(blocks, context)

        if not blocks.has(BlockName.boilers):
            self.warn_missing(BlockName.boilers)
        else:
            self._extract_boilers(blocks, context)

        logger.info(f"Found {len(context.hvac_types)} HVAC types, "
                    f"{len(context.cooling_eir)} cooling EIRs, {len(context.heating_eir)} heating EIRs")

    def _extract_systems(self, blocks: BlockIndex, context: ExtractionContext) -> None:
        for record in blocks.records(*SYSTEM_BLOCKS):
            for key in self.type_fields:
                add_type(context, record.text(key))

            cooling = record.text('COOLING-EIR')
            if parse_number(cooling) is not None:
                context.cooling_eir.add(cooling.strip())

            heating = record.text('HEATING-EIR')
            if parse_number(heating) is not None:
                context.heating_eir.add(heating.strip())

            if record.text('ECONO-LIMIT-T'):
                context.mark_economizer()

    def _extract_boilers(self, blocks: BlockIndex, context: ExtractionContext) -> None:
        for record in blocks.records(BlockName.boilers):
            add_type(context, record.text('TYPE'))

            capacity_ratio = record.text('CAPACITY-RATIO')
            if leading_float(capacity_ratio) is not None:
                context.capacity_ratios.add(capacity_ratio.strip())

            heat_input_ratio = record.text('HEAT-INPUT-RATIO')
            value = leading_float(heat_input_ratio)
            if value is None:
                continue
            if value == 0:
                logger.debug(f"Skipping zero HEAT-INPUT-RATIO on boiler {record.name}")
                continue
            context.heat_input_ratios.add(f"{1 / value:.3f}")


class ChillerExtractor(InpExtractor):
    """ELEC-INPUT-RATIO of each chiller, or a placeholder when none is set"""

    name = 'chillers'

    def extract(self, blocks: BlockIndex, context: ExtractionContext) -> None:
        if not blocks.has(BlockName.chillers):
            self.warn_missing(BlockName.chillers)
            return

        for record in blocks.records(BlockName.chillers):
            ratio = record.text('ELEC-INPUT-RATIO').strip()
            if ratio:
                context.chiller_eir.add(ratio)

        if not context.chiller_eir:
            context.chiller_eir.add(DEFAULT_CHILLER_EIR)


class HeatingFallbackExtractor(InpExtractor):
    """
    Furnace and heat pump efficiencies taken from zone/system records.

    Runs only when the primary pass found neither a heating EIR nor a boiler
    heat input ratio. Furnace HIRs are inverted into heat input ratios; heat
    pump EIRs are tagged with their unit kind in the heating EIR list.
    """

    name = 'heating_fallback'

    def extract(self, blocks: BlockIndex, context: ExtractionContext) -> None:
        if context.heating_eir or context.heat_input_ratios:
            return

        records = blocks.records(*SYSTEM_BLOCKS)
        if not records:
            return

        logger.info("No heating efficiency found, scanning for furnaces and heat pumps")
        self._extract_furnaces(records, context)
        self._extract_heat_pumps(records, context)

    def _extract_furnaces(self, records, context: ExtractionContext) -> None:
        for record in records:
            if record.text('ZONE-HEAT-SOURCE') == 'FURNACE':
                context.hvac_types.add('FURNACE')

            furnace_ratio = inverted(record.text('FURNACE-HIR'))
            if furnace_ratio is not None:
                context.heat_input_ratios.add(furnace_ratio)

    def _extract_heat_pumps(self, records, context: ExtractionContext) -> None:
        for record in records:
            if record.text('HEAT-SOURCE') != 'HEAT-PUMP':
                continue
            context.hvac_types.add('HEAT-PUMP')

            heating = record.text('HEATING-EIR').strip()
            if parse_number(heating) is not None:
                context.heating_eir.add(f"{heating} AFUE")

            cop = inverted(record.text('COOLING-EIR'))
            if cop is not None:
                context.heating_eir.add(f"{cop} COP")
