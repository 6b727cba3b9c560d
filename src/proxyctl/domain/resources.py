"""Structured views of resources fetched from the REST control API.

A fetched resource is a JSON:API-style document. `ResourceRepresentation`
keeps the decoded document together with the path it came from and offers
RFC 6901 JSON-pointer lookups into it. `LogsConfiguration` is the typed
view of the logs resource, exposing the active log priorities as a named
field.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from .errors import InvalidPointerError, MalformedResourceError

ATTRIBUTES_POINTER = "/data/attributes"
LOG_PRIORITIES_POINTER = "/data/attributes/log_priorities"
LOGS_RESOURCE_PATH = "maxscale/logs"

_MISSING = object()


def normalize_path(path: str) -> str:
    """Return a resource path without leading or trailing slashes."""
    return path.strip().strip("/")


def _unescape(token: str) -> str:
    # order matters: "~01" must decode to "~1", not "/"
    return token.replace("~1", "/").replace("~0", "~")


def resolve_pointer(document: Any, pointer: str) -> Any:
    """Resolve an RFC 6901 JSON pointer against a decoded JSON document.

    Args:
        document: The decoded JSON value (mappings, sequences and scalars).
        pointer: The pointer, e.g. ``/data/attributes/log_priorities``. The
            empty string refers to the whole document.

    Returns:
        The value the pointer refers to.

    Raises:
        InvalidPointerError: If the pointer is non-empty and does not start with ``/``.
        KeyError: If any token along the pointer does not exist.
    """
    if pointer == "":
        return document
    if not pointer.startswith("/"):
        raise InvalidPointerError(pointer)

    current = document
    for raw in pointer[1:].split("/"):
        token = _unescape(raw)
        if isinstance(current, Mapping):
            if token not in current:
                raise KeyError(pointer)
            current = current[token]
        elif isinstance(current, Sequence) and not isinstance(current, (str, bytes)):
            if not token.isdigit() or (len(token) > 1 and token.startswith("0")):
                raise KeyError(pointer)
            index = int(token)
            if index >= len(current):
                raise KeyError(pointer)
            current = current[index]
        else:
            raise KeyError(pointer)
    return current


@dataclass(frozen=True)
class ResourceRepresentation:
    """A decoded REST resource and the path it was fetched from.

    Attributes:
        path: Resource path relative to the API root, e.g. ``maxscale/logs``.
        document: The decoded response body.
    """

    path: str
    document: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", normalize_path(self.path))
        object.__setattr__(self, "document", MappingProxyType(dict(self.document)))

    @property
    def attributes(self) -> Mapping[str, Any]:
        """The ``data.attributes`` mapping, or an empty mapping if there is none."""
        value = self.get(ATTRIBUTES_POINTER, None)
        return value if isinstance(value, Mapping) else MappingProxyType({})

    def pointer(self, json_pointer: str) -> Any:
        """Return the value at ``json_pointer``; raise ``KeyError`` if absent."""
        return resolve_pointer(self.document, json_pointer)

    def get(self, json_pointer: str, default: Any = None) -> Any:
        """Return the value at ``json_pointer`` or ``default`` if absent."""
        try:
            return self.pointer(json_pointer)
        except KeyError:
            return default

    def is_type(self, json_pointer: str, expected: type | tuple[type, ...]) -> bool:
        """Whether ``json_pointer`` resolves to a value of the ``expected`` type."""
        value = self.get(json_pointer, _MISSING)
        return value is not _MISSING and isinstance(value, expected)


@dataclass(frozen=True)
class LogsConfiguration:
    """Typed view of the logs resource.

    Attributes:
        log_priorities: Active log priorities, in the order the server reports them.
    """

    log_priorities: tuple[str, ...]

    @classmethod
    def from_representation(cls, rep: ResourceRepresentation) -> LogsConfiguration:
        """Build the view from a fetched logs resource.

        Raises:
            MalformedResourceError: If ``log_priorities`` is missing, is not a
                list, or holds non-string entries.
        """
        try:
            value = rep.pointer(LOG_PRIORITIES_POINTER)
        except KeyError as e:
            raise MalformedResourceError(
                rep.path, LOG_PRIORITIES_POINTER, "attribute is missing"
            ) from e
        if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
            raise MalformedResourceError(
                rep.path, LOG_PRIORITIES_POINTER, "expected a list of strings"
            )
        if not all(isinstance(item, str) for item in value):
            raise MalformedResourceError(
                rep.path, LOG_PRIORITIES_POINTER, "expected a list of strings"
            )
        return cls(log_priorities=tuple(value))

    def to_patch_document(self) -> dict[str, Any]:
        """The body that sets these priorities with a PATCH to the logs resource."""
        return {"data": {"attributes": {"log_priorities": list(self.log_priorities)}}}
