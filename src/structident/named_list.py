"""
Named lists — Identity resolution for lists of records.

A list of records is a *named list* when one field identifies every entry.
Such a list can be compared by matching identities instead of positions:

    - name: nginx          - name: redis
      image: nginx:1.25      image: redis:7
    - name: redis          - name: nginx
      image: redis:7         image: nginx:1.27

Both versions hold the same two entries, only the nginx image changed.

This module provides:
    - Identifier resolution (which field, if any, names the entries)
    - Entry lookup by identifier
    - Bulk name extraction
    - Splitting an entry into its name and remaining data

IMPORTANT: Nothing here modifies the lists or records it is given.
"""

from collections import Counter
from typing import Any, List, Optional, Sequence, Tuple

from structident.accessor import value_for
from structident.errors import NotANamedListError
from structident.logging import get_logger
from structident.model import EntryKind, MapItem, OrderedRecord, deep_equal, kind_of

logger = get_logger(__name__)

# Ranked: the first candidate present in every entry wins
IDENTIFIER_CANDIDATES = ("name", "key", "id")


def resolve_identifier(values: Sequence[Any]) -> str:
    """
    Find the field that identifies every entry of a list.

    Every candidate in IDENTIFIER_CANDIDATES is tested in order; a candidate
    qualifies when it occurs as often as the list has entries. Entries that
    are not records count as having no keys at all, so a single scalar in
    the list disqualifies every candidate.

    Args:
        values: A decoded list (records or arbitrary values)

    Returns:
        The identifier field, or "" if the list has to be compared by index
    """
    counters: Counter = Counter()
    for entry in values:
        if kind_of(entry) is not EntryKind.RECORD:
            continue
        # Each record counts a key once, even if the key is repeated.
        # Candidates are strings, other keys cannot qualify anyway
        counters.update({item.key for item in entry if isinstance(item.key, str)})

    total = len(values)
    identifier = ""
    for candidate in IDENTIFIER_CANDIDATES:
        if candidate in counters and counters[candidate] == total:
            identifier = candidate
            break

    logger.debug(
        "named_list_identifier_resolved",
        identifier=identifier or None,
        entries=total,
    )
    return identifier


def find_by_identifier(
    values: Sequence[Any], identifier: str, name: Any
) -> Tuple[Optional[OrderedRecord], bool]:
    """
    Find the first record with identifier == name.

    Only call this on lists that resolve_identifier accepted.

    Returns:
        (record, True) on a match, (None, False) otherwise

    Raises:
        TypeError: if an entry is not a record
    """
    for entry in values:
        if kind_of(entry) is not EntryKind.RECORD:
            raise TypeError(f"named list entry is not a record: {entry!r}")

        for item in entry:
            if deep_equal(item.key, identifier) and deep_equal(item.value, name):
                return entry, True

    return None, False


def names_of_named_list(values: Sequence[Any], identifier: str) -> List[str]:
    """
    Names of all entries of a named list, in list order.

    Raises:
        NotANamedListError: if any entry is not a record
        KeyNotFoundError: if any entry lacks the identifier field
        TypeError: if a name is not a string
    """
    names: List[str] = []
    for entry in values:
        if kind_of(entry) is not EntryKind.RECORD:
            raise NotANamedListError()

        name = value_for(entry, identifier)
        if not isinstance(name, str):
            raise TypeError(
                f"value of '{identifier}' is not a string: {name!r}"
            )
        names.append(name)

    return names


def split_name_and_data(record: OrderedRecord, identifier: str) -> Tuple[Any, OrderedRecord]:
    """
    Separate an entry's name from the rest of its data.

    Example:
        name: web, replicas: 2, port: 80  ->  ("web", replicas: 2, port: 80)

    Returns:
        The identifier's value (None if absent) and a new record holding
        every other pair in the original order
    """
    name = None
    found = False
    remainder: List[MapItem] = []
    for item in record:
        if not found and isinstance(item.key, str) and item.key == identifier:
            name = item.value
            found = True
        else:
            remainder.append(item)

    return name, OrderedRecord(items=remainder)
