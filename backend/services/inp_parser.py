"""
INP Parsing Service
Entry points for decoding an eQuest INP file into blocks and extracting the
building parameters used for baseline comparison.

    blocks = parse_inp_file(lines)
    result = get_inp_values(blocks)
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

from infrastructure.extractors.base import BlockIndex, ExtractionContext, InpExtractor
from infrastructure.extractors.envelope import GlazingExtractor, MaterialsExtractor
from infrastructure.extractors.floor_area import FloorAreaExtractor, FloorMultiplierExtractor
from infrastructure.extractors.lighting import LightingExtractor
from infrastructure.extractors.mechanical import ChillerExtractor, HVACExtractor, HeatingFallbackExtractor
from infrastructure.extractors.rates import UtilityRateExtractor
from infrastructure.extractors.schedule import OccupancyExtractor, ScheduleExtractor
from infrastructure.inp.model import Block, RawLine
from infrastructure.inp.segmenter import segment_lines
from models.schemas import ProjectFileResult
from services.error_types import ExtractionWarning, categorize_exception, log_error_with_context
from utils.logging_utils import Timer, log_operation

logger = logging.getLogger(__name__)


def default_extractors() -> List[InpExtractor]:
    """
    Extractors in run order. Floor multipliers come before the floor area
    and the heating fallback runs after the primary HVAC pass.
    """
    return [
        FloorMultiplierExtractor(),
        GlazingExtractor(),
        MaterialsExtractor(),
        LightingExtractor(),
        UtilityRateExtractor(),
        HVACExtractor(),
        ChillerExtractor(),
        FloorAreaExtractor(),
        ScheduleExtractor(),
        OccupancyExtractor(),
        HeatingFallbackExtractor(),
    ]


def parse_inp_file(lines: Iterable[Union[str, RawLine]]) -> List[Block]:
    """
    Split INP lines into named blocks with their records.

    Raises:
        StructuralParseError: a header or record boundary is malformed
    """
    with log_operation("inp_segmentation", logger=logger) as ctx:
        blocks = segment_lines(lines)
        ctx["blocks"] = len(blocks)
        ctx["records"] = sum(len(block) for block in blocks)
    return blocks


def get_inp_values(blocks: Sequence[Block],
                   extractors: Optional[List[InpExtractor]] = None) -> ProjectFileResult:
    """
    Run every extractor over the blocks and freeze the result.

    A failing extractor is logged and leaves its fields at their defaults;
    the others still run.
    """
    index = BlockIndex(blocks)
    context = ExtractionContext()
    extractors = extractors or default_extractors()

    with Timer(f"inp_extraction ({len(extractors)} extractors)", logger):
        for extractor in extractors:
            try:
                extractor.extract(index, context)
            except Exception as e:
                log_error_with_context(
                    ExtractionWarning(extractor.name, f"Extractor failed: {e}",
                                      {'error_type': type(e).__name__}),
                    {'stage': 'extraction', 'blocks': len(blocks)},
                )

    return context.freeze()


def analyze_inp_content(content: str) -> ProjectFileResult:
    """Parse and extract from the decoded text of an INP file"""
    return get_inp_values(parse_inp_file(content.splitlines()))


def analyze_inp_path(path: Union[str, Path], encoding: str = 'latin-1') -> ProjectFileResult:
    """
    Read an INP file from disk and extract its building parameters.

    Raises:
        CriticalError: the file cannot be read or decoded
        StructuralParseError: the file is not a well-formed INP file
    """
    path = Path(path)
    with log_operation("inp_file_analysis", {'file': path.name}, logger):
        try:
            content = path.read_text(encoding=encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise categorize_exception(e) from e
        return analyze_inp_content(content)
