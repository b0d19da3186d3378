"""
Error taxonomy for structident.

Every error keeps the data it was raised with as attributes, so callers
can build their own messages without re-deriving context.
"""

from typing import Any, List


class StructIdentError(Exception):
    """Base class for all structident errors."""
    pass


class KeyNotFoundError(StructIdentError, KeyError):
    """Raised when a record has no pair for the requested key."""

    def __init__(self, missing_key: Any, available_keys: List[str]):
        self.missing_key = missing_key
        self.available_keys = list(available_keys)
        super().__init__(missing_key, self.available_keys)

    def __str__(self) -> str:
        return "no key '{}' found in map, available keys: {}".format(
            self.missing_key, ", ".join(self.available_keys)
        )


class NotANamedListError(StructIdentError):
    """Raised when a list that should hold only records holds something else."""

    def __str__(self) -> str:
        return "not a named-entry list, one or more entries are not of type map"


class InvalidPathStringError(StructIdentError):
    """Raised when a path string cannot be parsed in the given style."""

    def __init__(self, style: Any, path_string: str, explanation: str):
        self.style = style
        self.path_string = path_string
        self.explanation = explanation
        super().__init__(style, path_string, explanation)

    def __str__(self) -> str:
        style = getattr(self.style, "value", self.style)
        return f"invalid {style} style path {self.path_string}, {self.explanation}"


class EntryNotFoundError(StructIdentError):
    """Raised when no record of a list carries identifier == name."""

    def __init__(self, identifier: Any, name: Any):
        self.identifier = identifier
        self.name = name
        super().__init__(identifier, name)

    def __str__(self) -> str:
        return f"there is no entry {self.identifier}={self.name} in the list"


class PathTraversalError(StructIdentError):
    """Raised when the data does not have the shape a path walks through."""

    def __init__(self, message: str, path: Any = None):
        self.message = message
        self.path = path
        super().__init__(message, path)

    def __str__(self) -> str:
        return self.message
