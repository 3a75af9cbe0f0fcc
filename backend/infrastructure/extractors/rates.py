"""
Utility Rate Extractor
Electric and gas energy charges from the utility rate records
"""

import logging

from infrastructure.extractors.base import BlockIndex, ExtractionContext, InpExtractor
from models.enums import BlockName

logger = logging.getLogger(__name__)


class UtilityRateExtractor(InpExtractor):

    name = 'utility_rates'

    def __init__(self):
        self.electric_names = ('Electricity', 'Electricity Rate')
        self.gas_names = ('NG', 'Natural Gas', 'Natural Gas Rate')

    def extract(self, blocks: BlockIndex, context: ExtractionContext) -> None:
        if not blocks.has(BlockName.utility_rates):
            self.warn_missing(BlockName.utility_rates)
            return

        for record in blocks.records(BlockName.utility_rates):
            charge = record.text('ENERGY-CHG').strip()
            if charge.endswith('}'):
                charge = charge[:-1].strip()

            if record.has_any(*self.electric_names):
                context.electric_rate = charge
            if record.has_any(*self.gas_names):
                context.gas_rate = charge
