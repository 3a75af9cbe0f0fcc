"""
Line Segmenter
Splits the raw lines of an INP file into named blocks.

eQuest marks every block with a three-line header:

    $ ---------------------------------------------------------
    $              Glass Types
    $ ---------------------------------------------------------

Everything up to the next header is the block body, which is normalized
line by line and handed to the record assembler.
"""

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional, Union

from infrastructure.inp.expressions import normalize_line
from infrastructure.inp.model import Block, RawLine
from infrastructure.inp.records import RecordAssembler, is_comment
from models.enums import BlockName
from services.error_types import StructuralParseError

logger = logging.getLogger(__name__)

DELIMITER_MARKER = '$ -'
ROOT_MARKER = re.compile(r'^\s*INPUT\s*\.\.')


class SegmenterState(Enum):
    SCANNING = 'scanning'
    HEADER_NAME_EXPECTED = 'header_name_expected'
    AFTER_HEADER = 'after_header'
    IN_BODY = 'in_body'


@dataclass
class _SegmentationState:
    """Everything one pass over a file mutates"""
    phase: SegmenterState = SegmenterState.SCANNING
    blocks: List[Block] = field(default_factory=list)
    current: Optional[Block] = None
    body: List[RawLine] = field(default_factory=list)
    delimiter_line: int = 0


def is_delimiter(text: str) -> bool:
    return DELIMITER_MARKER in text


def header_name(text: str) -> str:
    return text.strip().lstrip('$').strip()


def has_unbalanced_quotes(text: str) -> bool:
    return text.count('"') % 2 == 1


class LineSegmenter:
    """State machine over the ordered lines of one file"""

    def __init__(self, assembler: Optional[RecordAssembler] = None):
        self.assembler = assembler or RecordAssembler()

    def segment(self, lines: Iterable[Union[str, RawLine]]) -> List[Block]:
        state = _SegmentationState()

        for number, raw in enumerate(lines, start=1):
            line = raw if isinstance(raw, RawLine) else RawLine(raw.rstrip('\r\n'), number)
            if not line.stripped:
                continue

            if line.number == 1 and ROOT_MARKER.match(line.text):
                state.blocks.append(Block(BlockName.root.value, start_line=line.number))
                continue

            if is_delimiter(line.text):
                self._on_delimiter(state, line)
                continue

            if state.phase == SegmenterState.HEADER_NAME_EXPECTED:
                self._open_block(state, line)
            elif state.phase in (SegmenterState.AFTER_HEADER, SegmenterState.IN_BODY):
                if state.phase == SegmenterState.AFTER_HEADER:
                    logger.debug(f"Block '{state.current.name}' header has no closing delimiter "
                                 f"(line {line.number})")
                    state.phase = SegmenterState.IN_BODY
                self._add_body_line(state, line)
            # lines before the first header belong to no block

        if state.phase == SegmenterState.HEADER_NAME_EXPECTED:
            raise StructuralParseError(
                "Block delimiter at end of file has no name line",
                line_number=state.delimiter_line,
                block_name=state.current.name if state.current else None,
            )
        self._flush(state)

        logger.debug(f"Segmented {len(state.blocks)} blocks")
        return state.blocks

    def _on_delimiter(self, state: _SegmentationState, line: RawLine):
        if state.phase == SegmenterState.AFTER_HEADER:
            state.phase = SegmenterState.IN_BODY
            return
        if state.phase == SegmenterState.HEADER_NAME_EXPECTED:
            raise StructuralParseError(
                "Block delimiter is not followed by a name line",
                line_number=state.delimiter_line,
                block_name=state.current.name if state.current else None,
            )
        self._flush(state)
        state.phase = SegmenterState.HEADER_NAME_EXPECTED
        state.delimiter_line = line.number

    def _open_block(self, state: _SegmentationState, line: RawLine):
        name = header_name(line.text)
        if not name:
            raise StructuralParseError(
                "Block header has an empty name",
                line_number=line.number,
            )
        state.current = Block(name, start_line=line.number)
        state.blocks.append(state.current)
        state.phase = SegmenterState.AFTER_HEADER

    def _add_body_line(self, state: _SegmentationState, line: RawLine):
        if not is_comment(line.text) and has_unbalanced_quotes(line.text):
            raise StructuralParseError(
                "Unbalanced quotes in block body",
                line_number=line.number,
                block_name=state.current.name,
            )
        state.body.append(RawLine(normalize_line(line.text, line.number), line.number))

    def _flush(self, state: _SegmentationState):
        if state.current is not None and state.body:
            state.current.records.extend(self.assembler.assemble(state.body, state.current.name))
        state.body = []


def segment_lines(lines: Iterable[Union[str, RawLine]]) -> List[Block]:
    return LineSegmenter().segment(lines)
