"""
Core Record Model

Defines the data structures that decoded documents are viewed through:
    - MapItem (a single key/value pair)
    - OrderedRecord (an order-preserving map)
    - EntryKind (the shape of an arbitrary decoded value)

ARCHITECTURAL RULE:
    These objects:
        - Know nothing about YAML/JSON parsing
        - Preserve key order exactly as decoded
        - Are never mutated by lookups
        - Represent structure, not behavior
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, List, Sequence, Tuple


@dataclass(frozen=True)
class MapItem:
    """
    One key/value pair of an ordered record.

    Properties:
        key: The map key (usually a string, but YAML allows any scalar)
        value: The decoded value (record, list, scalar or None)
    """

    key: Any
    value: Any


@dataclass
class OrderedRecord:
    """
    An ordered sequence of key/value pairs representing one decoded map.

    Unlike a plain dict, the order of pairs is part of the record's identity:
    two records holding the same pairs in a different order are not equal.

    Properties:
        items:
            The pairs, in the order they appeared in the source document

    INVARIANTS:
        - Order is preserved on construction
        - A key should appear at most once; this is not enforced and
          every lookup in this package is first-match
    """

    items: List[MapItem] = field(default_factory=list)

    @classmethod
    def from_pairs(cls, pairs: Sequence[Tuple[Any, Any]]) -> "OrderedRecord":
        return cls(items=[MapItem(key, value) for key, value in pairs])

    def pairs(self) -> List[Tuple[Any, Any]]:
        return [(item.key, item.value) for item in self.items]

    def __iter__(self) -> Iterator[MapItem]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


class EntryKind(Enum):
    """Shape of a decoded value."""
    RECORD = "record"
    SCALAR = "scalar"
    SEQUENCE = "sequence"
    NULL = "null"


def kind_of(value: Any) -> EntryKind:
    """
    Classify a decoded value.

    Only OrderedRecord counts as a record. Plain mappings have to go
    through conversion.from_decoded first, since their order is not part
    of their equality.
    """
    if value is None:
        return EntryKind.NULL
    if isinstance(value, OrderedRecord):
        return EntryKind.RECORD
    if isinstance(value, (list, tuple)):
        return EntryKind.SEQUENCE
    return EntryKind.SCALAR


def deep_equal(a: Any, b: Any) -> bool:
    """
    Structural equality between two decoded values.

    Booleans only ever equal booleans, so a YAML `true` does not match `1`.
    """
    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool) and a is b

    if isinstance(a, OrderedRecord) or isinstance(b, OrderedRecord):
        if not (isinstance(a, OrderedRecord) and isinstance(b, OrderedRecord)):
            return False
        if len(a) != len(b):
            return False
        return all(
            deep_equal(x.key, y.key) and deep_equal(x.value, y.value)
            for x, y in zip(a, b)
        )

    if isinstance(a, (list, tuple)) and isinstance(b, (list, tuple)):
        if len(a) != len(b):
            return False
        return all(deep_equal(x, y) for x, y in zip(a, b))

    if isinstance(a, Mapping) and isinstance(b, Mapping):
        if set(a.keys()) != set(b.keys()):
            return False
        return all(deep_equal(a[k], b[k]) for k in a)

    return a == b


def _is_map_shaped(value: Any) -> bool:
    return isinstance(value, (OrderedRecord, Mapping))


def is_complex_list(values: Sequence[Any]) -> bool:
    """
    True if every entry of a non-empty list is map-shaped.

    By definition an empty list is a simple list.
    """
    if len(values) == 0:
        return False
    return all(_is_map_shaped(entry) for entry in values)


def get_type(value: Any) -> str:
    """Human-readable type name, used in error messages."""
    if isinstance(value, OrderedRecord):
        return "map"
    if isinstance(value, list):
        if is_complex_list(value):
            return "complex-list"
        return "list"
    if isinstance(value, str):
        return "string"
    return type(value).__name__
