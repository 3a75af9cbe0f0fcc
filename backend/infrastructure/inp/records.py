"""
Record Assembler
Turns the body lines of one block into an ordered list of records.

A record runs until a line ending in ``..``:

    "Baseline Glass" = GLASS-TYPE
       SHADING-COEF     = 0.61
       GLASS-CONDUCT    = 0.57
       ..

Field lines split at the first ``=``. Lines without ``=`` are either an
implicit record name, a nullary key (``SITE-PARAMETERS`` directly followed by
``..``), or a continuation of the last field's value list.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from infrastructure.inp.model import RawLine, Record
from services.error_types import IncompleteRecordError

logger = logging.getLogger(__name__)

TERMINATOR = '..'
SEPARATOR = re.compile(r'^[\W_]+$')


def is_terminator(text: str) -> bool:
    return text.strip().endswith(TERMINATOR)


def is_comment(text: str) -> bool:
    return text.lstrip().startswith('$')


def is_separator(text: str) -> bool:
    stripped = text.strip()
    return bool(SEPARATOR.match(stripped)) and not stripped.endswith(TERMINATOR)


def unquote(text: str) -> str:
    """Trim whitespace and one pair of surrounding quotes"""
    text = text.strip()
    if len(text) >= 2 and text[0] == text[-1] and text[0] in '"\'' and text[0] not in text[1:-1]:
        return text[1:-1].strip()
    return text


def clean_record_name(text: str) -> str:
    return re.sub(r'[\s*$]+', '', text)


@dataclass
class _AssemblyState:
    """Per-body accumulator; never shared between calls"""
    record: Record = field(default_factory=Record)
    last_key: Optional[str] = None
    records: List[Record] = field(default_factory=list)

    def set(self, key: str, value, line: RawLine, remember: bool = True):
        if not self.record:
            self.record.start_line = line.number
        self.record.fields[key] = value
        if remember:
            self.last_key = key

    def append_to_last(self, token: str):
        current = self.record.fields.get(self.last_key)
        if isinstance(current, list):
            current.append(token)
        elif current in (None, ''):
            self.record.fields[self.last_key] = [token]
        else:
            self.record.fields[self.last_key] = [current, token]

    def value_is_open(self) -> bool:
        """True while the last field's value has an unclosed '('"""
        if self.last_key is None:
            return False
        value = self.record.fields.get(self.last_key)
        text = ' '.join(value) if isinstance(value, list) else str(value or '')
        return text.count('(') > text.count(')')

    def close(self):
        if self.record:
            self.records.append(self.record)
        self.record = Record()
        self.last_key = None


class RecordAssembler:
    """Single pass over significant lines with one line of lookahead"""

    def assemble(self, lines: Sequence[RawLine], block_name: str = '') -> List[Record]:
        significant = [line for line in lines if line.stripped and not is_comment(line.text)]
        state = _AssemblyState()
        last_structural = None

        for index, line in enumerate(significant):
            text = line.stripped

            if is_separator(text):
                # closing punctuation of a value list, e.g. a lone ')'
                if state.value_is_open():
                    state.append_to_last(text)
                continue

            prior, last_structural = last_structural, line
            next_line = _next_structural(significant, index + 1)

            if '=' in text:
                terminated = text.endswith(TERMINATOR)
                if terminated:
                    text = text[:-len(TERMINATOR)]
                key, _, value = text.partition('=')
                state.set(unquote(key), unquote(value), line)
                if terminated:
                    state.close()
                continue

            if text.endswith(TERMINATOR):
                body = text[:-len(TERMINATOR)].strip()
                if body and is_separator(body) and state.value_is_open():
                    state.append_to_last(body)
                elif body:
                    # "END .." style one-line record
                    state.set(unquote(body), '', line, remember=False)
                state.close()
                continue

            if next_line is not None and is_terminator(next_line.text):
                if prior is None or is_terminator(prior.text) or state.last_key is None:
                    state.set(unquote(text), '', line, remember=False)
                else:
                    state.append_to_last(text.strip())
                continue

            name = clean_record_name(text)
            if name:
                state.set(name, [], line, remember=False)

        if state.record:
            raise IncompleteRecordError(
                f"Record in block '{block_name}' is missing its '..' terminator",
                line_number=state.record.start_line,
                block_name=block_name,
            )

        logger.debug(f"Assembled {len(state.records)} records for block '{block_name}'")
        return state.records


def _next_structural(lines: Sequence[RawLine], start: int) -> Optional[RawLine]:
    for line in lines[start:]:
        if not is_separator(line.text):
            return line
    return None


def assemble_records(lines: Sequence[RawLine], block_name: str = '') -> List[Record]:
    return RecordAssembler().assemble(lines, block_name)
