"""
structident — Structural identity for decoded YAML/JSON documents

Answers the two questions a structural comparison needs before it can
compare two versions of a list:

    - Is there a field (name, key or id) that identifies every entry,
      so the list can be matched by identity instead of by position?
    - Given that field, where is a specific entry, or a specific value
      inside an entry?

ARCHITECTURAL GUARANTEE:
------------------------
This package contains ZERO knowledge of:
    - Parsing YAML/JSON text
    - Computing or rendering differences
    - Terminals and colors

It only reads already-decoded data and never modifies it.
"""

from .accessor import entry_by_identifier_and_name, keys_of, value_for
from .conversion import from_decoded, to_decoded
from .errors import (
    EntryNotFoundError,
    InvalidPathStringError,
    KeyNotFoundError,
    NotANamedListError,
    PathTraversalError,
    StructIdentError,
)
from .model import EntryKind, MapItem, OrderedRecord, deep_equal, get_type, is_complex_list, kind_of
from .named_list import (
    IDENTIFIER_CANDIDATES,
    find_by_identifier,
    names_of_named_list,
    resolve_identifier,
    split_name_and_data,
)
from .path import Path, PathElement, PathStyle, grab, list_paths, parse_path_string

__version__ = "0.1.0"

__all__ = [
    "EntryKind",
    "EntryNotFoundError",
    "IDENTIFIER_CANDIDATES",
    "InvalidPathStringError",
    "KeyNotFoundError",
    "MapItem",
    "NotANamedListError",
    "OrderedRecord",
    "Path",
    "PathElement",
    "PathStyle",
    "PathTraversalError",
    "StructIdentError",
    "deep_equal",
    "entry_by_identifier_and_name",
    "find_by_identifier",
    "from_decoded",
    "get_type",
    "grab",
    "is_complex_list",
    "keys_of",
    "kind_of",
    "list_paths",
    "names_of_named_list",
    "parse_path_string",
    "resolve_identifier",
    "split_name_and_data",
    "to_decoded",
    "value_for",
]
