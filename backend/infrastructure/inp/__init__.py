"""
eQuest / DOE-2 INP decoder
Segments a file into named blocks and assembles each block body into records
"""

from .model import RawLine, Record, Block, FloorPolygon
from .expressions import normalize_line, evaluate_arithmetic, ExpressionError
from .records import RecordAssembler, assemble_records
from .segmenter import LineSegmenter, segment_lines

__all__ = [
    'RawLine', 'Record', 'Block', 'FloorPolygon',
    'normalize_line', 'evaluate_arithmetic', 'ExpressionError',
    'RecordAssembler', 'assemble_records',
    'LineSegmenter', 'segment_lines',
]
