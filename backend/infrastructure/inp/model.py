"""
In-memory model of a decoded INP file: raw lines, named blocks and the
records assembled from each block body.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple, Union

from domain.core.geometry import polygon_area

FieldValue = Union[str, List[str]]


@dataclass(frozen=True)
class RawLine:
    """One source line and its 1-based position in the file"""
    text: str
    number: int

    @property
    def stripped(self) -> str:
        return self.text.strip()


@dataclass
class Record:
    """
    Ordered field name -> value mapping for one `..`-terminated entry.

    A value is either a scalar string or a list of continuation tokens.
    The first key is the record's name, e.g. ``Baseline Glass`` for
    ``"Baseline Glass" = GLASS-TYPE``.
    """
    fields: Dict[str, FieldValue] = field(default_factory=dict)
    start_line: int = 0

    @property
    def name(self) -> str:
        return next(iter(self.fields), '')

    def has(self, key: str) -> bool:
        return key in self.fields

    def has_any(self, *keys: str) -> bool:
        return any(key in self.fields for key in keys)

    def get(self, key: str, default: Optional[FieldValue] = None) -> Optional[FieldValue]:
        return self.fields.get(key, default)

    def text(self, key: str, default: str = '') -> str:
        """Scalar view of a field; list values are joined with a space."""
        value = self.fields.get(key)
        if value is None:
            return default
        if isinstance(value, list):
            return ' '.join(value)
        return value

    def values(self) -> List[FieldValue]:
        return list(self.fields.values())

    def keys(self) -> List[str]:
        return list(self.fields)

    def __contains__(self, key: str) -> bool:
        return key in self.fields

    def __getitem__(self, key: str) -> FieldValue:
        return self.fields[key]

    def __len__(self) -> int:
        return len(self.fields)

    def __bool__(self) -> bool:
        return bool(self.fields)


@dataclass
class Block:
    """A named section of the file and the records parsed from its body"""
    name: str
    records: List[Record] = field(default_factory=list)
    start_line: int = 0

    def __iter__(self) -> Iterator[Record]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)


@dataclass
class FloorPolygon:
    """Floor outline from a Polygons record, with its floor multiplier"""
    name: str
    vertices: List[Tuple[float, float]] = field(default_factory=list)
    multiplier: int = 1

    @property
    def area(self) -> float:
        return polygon_area(self.vertices) * self.multiplier
