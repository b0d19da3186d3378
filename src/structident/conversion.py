"""
Conversion between plain decoded data and ordered records.

YAML and JSON decoders hand out dicts that keep insertion order. These
helpers turn them into OrderedRecord trees (and back) without parsing
any text themselves.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict

from structident.model import MapItem, OrderedRecord


def from_decoded(obj: Any) -> Any:
    if isinstance(obj, OrderedRecord):
        return OrderedRecord(items=[MapItem(item.key, from_decoded(item.value)) for item in obj])
    if isinstance(obj, Mapping):
        return OrderedRecord(items=[MapItem(k, from_decoded(v)) for k, v in obj.items()])
    if isinstance(obj, (list, tuple)):
        return [from_decoded(entry) for entry in obj]
    return obj


def record_to_dict(record: OrderedRecord) -> Dict[Any, Any]:
    """
    Convert one record to a dict.

    With duplicate keys the first pair wins, like every lookup in this package.
    """
    result: Dict[Any, Any] = {}
    for item in record:
        if item.key not in result:
            result[item.key] = to_decoded(item.value)
    return result


def to_decoded(obj: Any) -> Any:
    if isinstance(obj, OrderedRecord):
        return record_to_dict(obj)
    if isinstance(obj, (list, tuple)):
        return [to_decoded(entry) for entry in obj]
    return obj
