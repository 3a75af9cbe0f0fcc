"""
Floor Area Extractor
Conditioned floor area from the floor polygons, each scaled by the
MULTIPLIER of the FLOOR object that references it.

    "EL1 Ground Flr" = FLOOR
       POLYGON          = "EL1 Floor Polygon"
       MULTIPLIER       = 3
       ..
    "EL1 Floor Polygon" = POLYGON
       V1               = ( 0, 0 )
       V2               = ( 100, 0 )
       ...
"""

import logging
import re
from typing import Dict, Iterable, List, Optional, Tuple

from domain.core.geometry import round_half_up
from infrastructure.extractors.base import (
    BlockIndex, ExtractionContext, InpExtractor, leading_float, quoted_name
)
from infrastructure.inp.model import FloorPolygon, Record
from models.enums import BlockName

logger = logging.getLogger(__name__)

NUMBER = r'[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?'
VERTEX = re.compile(rf'^\(\s*({NUMBER})\s*,\s*({NUMBER})\s*\)$')
FLOOR_POLYGON = re.compile(r'Floor Polygon')


def parse_vertex(value) -> Optional[Tuple[float, float]]:
    if not isinstance(value, str):
        return None
    match = VERTEX.match(value.strip())
    if not match:
        return None
    return float(match.group(1)), float(match.group(2))


def floor_polygon_name(record: Record) -> Optional[str]:
    for key in record.keys():
        if FLOOR_POLYGON.search(key):
            return key
    return None


def extract_floor_polygons(records: Iterable[Record],
                           multipliers: Optional[Dict[str, int]] = None) -> List[FloorPolygon]:
    """Floor polygons in file order, each carrying its multiplier (default 1)"""
    multipliers = multipliers or {}
    polygons = []
    for record in records:
        name = floor_polygon_name(record)
        if name is None:
            continue
        vertices = [vertex for vertex in map(parse_vertex, record.values()) if vertex is not None]
        polygons.append(FloorPolygon(name, vertices, multipliers.get(name) or 1))
    return polygons


class FloorMultiplierExtractor(InpExtractor):
    """Polygon name -> MULTIPLIER table from FLOOR objects"""

    name = 'floor_multipliers'

    def extract(self, blocks: BlockIndex, context: ExtractionContext) -> None:
        if not blocks.has(BlockName.misc_objects):
            return

        for record in blocks.records(BlockName.misc_objects):
            if 'FLOOR' not in record.values() or not record.text('MULTIPLIER'):
                continue
            polygon = quoted_name(record.text('POLYGON'))
            multiplier = leading_float(record.text('MULTIPLIER'))
            if not polygon or multiplier is None:
                self.warn(f"Floor {record.name} has an unusable POLYGON/MULTIPLIER pair")
                continue
            context.multipliers[polygon] = int(multiplier)

        logger.debug(f"Floor multipliers: {context.multipliers}")


class FloorAreaExtractor(InpExtractor):
    """Sum of floor polygon areas times multipliers, as '<n> SqFt'"""

    name = 'floor_area'

    def extract(self, blocks: BlockIndex, context: ExtractionContext) -> None:
        if not blocks.has(BlockName.polygons):
            self.warn_missing(BlockName.polygons)
            return

        polygons = extract_floor_polygons(blocks.records(BlockName.polygons), context.multipliers)
        total = sum(polygon.area for polygon in polygons)
        context.area = f"{round_half_up(total)} SqFt"

        logger.info(f"Conditioned area {context.area} from {len(polygons)} floor polygons")
