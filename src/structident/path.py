"""
Structural paths — Addressing a position inside a decoded document.

Two path notations are supported:

    DOT style:       spec.template.spec.containers.nginx.image
    GO_PATCH style:  /spec/template/spec/containers/name=nginx/image

Named-list entries are addressed by their name instead of their position,
which is what makes a path stable when a list is reordered. In GO_PATCH
style the identifier field is explicit (`name=nginx`); in DOT style it is
resolved from the data the path is parsed against.

ARCHITECTURAL RULE:
    Paths are values. Building a longer path never modifies the shorter
    one it started from.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Optional, Sequence, Tuple

from structident.accessor import value_for
from structident.errors import (
    InvalidPathStringError,
    KeyNotFoundError,
    NotANamedListError,
    PathTraversalError,
)
from structident.logging import get_logger
from structident.model import EntryKind, get_type, kind_of
from structident.named_list import (
    find_by_identifier,
    names_of_named_list,
    resolve_identifier,
    split_name_and_data,
)

logger = get_logger(__name__)

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

# Stand-in for an escaped slash while a go-patch path is split into sections
_ESCAPED_SLASH = "%2F"


class PathStyle(Enum):
    """Notations a path string can be written in."""
    DOT = "dot"
    GO_PATCH = "go-patch"


@dataclass(frozen=True)
class PathElement:
    """
    One step of a path.

    Exactly one of three shapes:
        - map key:          name set, key None
        - named-list entry: key (the identifier field) and name set
        - list index:       idx set
    """

    idx: Optional[int] = None
    key: Optional[str] = None
    name: Optional[str] = None


@dataclass(frozen=True)
class Path:
    """
    A position inside one document of a (possibly multi-document) input.

    Properties:
        document_idx: Index of the document the path points into
        elements: Steps from the document root, outermost first
    """

    document_idx: int = 0
    elements: Tuple[PathElement, ...] = ()

    def __str__(self) -> str:
        return self.to_go_patch_style()

    def to_go_patch_style(self) -> str:
        if not self.elements:
            return "/"

        sections = [""]
        for element in self.elements:
            if element.key is not None:
                sections.append(f"{element.key}={element.name}")
            elif element.name is not None:
                sections.append(element.name)
            else:
                sections.append(str(element.idx))

        return "/".join(sections)

    def to_dot_style(self) -> str:
        sections = []
        for element in self.elements:
            if element.name is not None:
                sections.append(element.name)
            elif element.idx is not None:
                sections.append(str(element.idx))

        return ".".join(sections)

    def with_element(self, element: PathElement) -> "Path":
        return Path(document_idx=self.document_idx, elements=self.elements + (element,))

    def with_named_element(self, name: Any) -> "Path":
        return self.with_element(PathElement(name=str(name)))

    def with_named_list_element(self, identifier: Any, name: Any) -> "Path":
        return self.with_element(PathElement(key=str(identifier), name=str(name)))

    def with_indexed_list_element(self, idx: int) -> "Path":
        return self.with_element(PathElement(idx=idx))


def _unescape(section: str) -> str:
    return section.replace(_ESCAPED_SLASH, "/")


def _invalid(style: PathStyle, path_string: str, explanation: str) -> InvalidPathStringError:
    logger.debug(
        "path_string_invalid",
        style=style.value,
        path=path_string,
        explanation=explanation,
    )
    return InvalidPathStringError(style=style, path_string=path_string, explanation=explanation)


def parse_go_patch_style_path_string(path_string: str) -> Path:
    """
    Parse a go-patch style path such as `/spec/containers/name=nginx/0`.

    A slash inside a section is written as `\\/`.

    Raises:
        InvalidPathStringError: if a section holds more than one `=`
    """
    if path_string == "/":
        return Path()

    escaped = path_string.replace("\\/", _ESCAPED_SLASH)

    elements: List[PathElement] = []
    for section in escaped.split("/")[1:]:
        key_name = section.split("=")
        if len(key_name) == 1:
            if _INTEGER_RE.fullmatch(key_name[0]):
                elements.append(PathElement(idx=int(key_name[0])))
            else:
                elements.append(PathElement(name=_unescape(key_name[0])))

        elif len(key_name) == 2:
            elements.append(PathElement(key=_unescape(key_name[0]), name=_unescape(key_name[1])))

        else:
            raise _invalid(
                PathStyle.GO_PATCH,
                path_string,
                f"element '{_unescape(section)}' cannot contain more than one equal sign",
            )

    return Path(elements=tuple(elements))


def _missing_named_entry(path_string: str, section: str, values: Sequence[Any], identifier: str):
    explanation = f"provided named list entry '{section}' cannot be found in list"
    try:
        names = names_of_named_list(values, identifier)
    except (KeyNotFoundError, NotANamedListError, TypeError):
        return _invalid(PathStyle.DOT, path_string, explanation)

    return _invalid(
        PathStyle.DOT,
        path_string,
        f"{explanation}, available names are: {', '.join(names)}",
    )


def parse_dot_style_path_string(path_string: str, obj: Any) -> Path:
    """
    Parse a dot style path such as `spec.containers.nginx.image` against `obj`.

    The data decides how a section is read: in a record it is a key, in a
    list it is an index if it is numeric and a named-list entry otherwise.
    Once a key is not found, every remaining section is taken as a map key.

    Raises:
        InvalidPathStringError: for an out-of-range index or an unknown
            named-list entry
    """
    elements: List[PathElement] = []

    pointer = obj
    for section in path_string.split("."):
        kind = kind_of(pointer)

        if kind is EntryKind.RECORD:
            try:
                pointer = value_for(pointer, section)
            except KeyNotFoundError:
                pointer = None
            elements.append(PathElement(name=section))

        elif kind is EntryKind.SEQUENCE:
            if _INTEGER_RE.fullmatch(section):
                idx = int(section)
                if idx < 0 or idx >= len(pointer):
                    raise _invalid(
                        PathStyle.DOT,
                        path_string,
                        f"provided list index {idx} is not in range: 0..{len(pointer) - 1}",
                    )

                pointer = pointer[idx]
                elements.append(PathElement(idx=idx))

            else:
                identifier = resolve_identifier(pointer)
                entry, found = None, False
                if identifier:
                    entry, found = find_by_identifier(pointer, identifier, section)
                if not found:
                    raise _missing_named_entry(path_string, section, pointer, identifier)

                pointer = entry
                elements.append(PathElement(key=identifier, name=section))

        else:
            # Nothing left to look into, the rest of the path is map keys
            pointer = None
            elements.append(PathElement(name=section))

    return Path(elements=tuple(elements))


def parse_path_string(path_string: str, obj: Any) -> Path:
    """Parse go-patch style if the string starts with `/`, dot style otherwise."""
    if path_string.startswith("/"):
        return parse_go_patch_style_path_string(path_string)

    return parse_dot_style_path_string(path_string, obj)


def _traverse(path: Path, obj: Any, leaf: Callable[[Path, Any], None]) -> None:
    kind = kind_of(obj)

    if kind is EntryKind.SEQUENCE:
        identifier = resolve_identifier(obj)
        if identifier:
            for entry in obj:
                name, data = split_name_and_data(entry, identifier)
                _traverse(path.with_named_list_element(identifier, name), data, leaf)
        else:
            for idx, entry in enumerate(obj):
                _traverse(path.with_indexed_list_element(idx), entry, leaf)

    elif kind is EntryKind.RECORD:
        for item in obj:
            _traverse(path.with_named_element(item.key), item.value, leaf)

    else:
        leaf(path, obj)


def list_paths(documents: Sequence[Any]) -> List[Path]:
    """
    Paths of all leaf values, document by document.

    Args:
        documents: Decoded documents (records, lists or scalars)
    """
    paths: List[Path] = []
    for idx, document in enumerate(documents):
        _traverse(Path(document_idx=idx), document, lambda path, _: paths.append(path))

    return paths


def _traversal_error(expected: str, pointer: Any, walked: Path) -> PathTraversalError:
    message = (
        f"failed to traverse tree, expected a {expected} "
        f"but found type {get_type(pointer)} at {walked.to_go_patch_style()}"
    )
    logger.debug("path_traversal_failed", path=str(walked), reason=message)
    return PathTraversalError(message, path=walked)


def grab(obj: Any, path_string: str) -> Any:
    """
    Value at `path_string` inside `obj`.

    Raises:
        InvalidPathStringError: if the path string cannot be parsed
        KeyNotFoundError: if a map along the path lacks the key
        PathTraversalError: if the data does not have the shape the path needs
    """
    path = parse_path_string(path_string, obj)

    pointer = obj
    walked = Path(document_idx=path.document_idx)
    for element in path.elements:
        kind = kind_of(pointer)

        if element.key is not None:
            if kind is not EntryKind.SEQUENCE or not all(
                kind_of(entry) is EntryKind.RECORD for entry in pointer
            ):
                raise _traversal_error("complex-list", pointer, walked)

            entry, found = find_by_identifier(pointer, element.key, element.name)
            if not found:
                message = f"there is no entry {element.key}: {element.name} in the list"
                logger.debug("path_traversal_failed", path=str(walked), reason=message)
                raise PathTraversalError(message, path=walked)

            pointer = entry

        elif element.name is not None:
            if kind is not EntryKind.RECORD:
                raise _traversal_error("map", pointer, walked)

            pointer = value_for(pointer, element.name)

        else:
            if kind is not EntryKind.SEQUENCE:
                raise _traversal_error("list", pointer, walked)

            if element.idx < 0 or element.idx >= len(pointer):
                message = (
                    f"failed to traverse tree, provided list index {element.idx} "
                    f"is not in range: 0..{len(pointer) - 1}"
                )
                logger.debug("path_traversal_failed", path=str(walked), reason=message)
                raise PathTraversalError(message, path=walked)

            pointer = pointer[element.idx]

        walked = walked.with_element(element)

    return pointer
