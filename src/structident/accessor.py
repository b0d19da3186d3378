"""
Map accessor: safe key lookup and key enumeration over ordered records.
"""

from typing import Any, List, Sequence

from structident.errors import EntryNotFoundError, KeyNotFoundError
from structident.model import OrderedRecord, deep_equal


def keys_of(record: OrderedRecord) -> List[str]:
    """String form of every key of the record, in record order."""
    return [str(item.key) for item in record]


def value_for(record: OrderedRecord, key: Any) -> Any:
    """
    Look up the value of the first pair whose key equals `key`.

    Raises:
        KeyNotFoundError: carrying the missing key and the keys present
    """
    for item in record:
        if deep_equal(item.key, key):
            return item.value

    raise KeyNotFoundError(missing_key=key, available_keys=keys_of(record))


def entry_by_identifier_and_name(
    records: Sequence[OrderedRecord], identifier: Any, name: Any
) -> OrderedRecord:
    """
    Return the first record holding the pair identifier: name.

    Duplicates are not reported, the earliest record wins.

    Raises:
        EntryNotFoundError: if no record matches
    """
    for record in records:
        for item in record:
            if deep_equal(item.key, identifier) and deep_equal(item.value, name):
                return record

    raise EntryNotFoundError(identifier=identifier, name=name)
