"""Shape tags for parsed YAML documents."""

from enum import Enum
from typing import Any


class DocumentKind(str, Enum):
    """What a parsed YAML value looks like at the top level."""

    sequence = "sequence"
    mapping = "mapping"
    scalar = "scalar"
    empty = "empty"


def kind_of(value: Any) -> DocumentKind:
    if value is None:
        return DocumentKind.empty
    if isinstance(value, list):
        return DocumentKind.sequence if value else DocumentKind.empty
    if isinstance(value, dict):
        return DocumentKind.mapping if value else DocumentKind.empty
    return DocumentKind.scalar


def as_mapping(value: Any) -> dict[str, Any]:
    """Return ``value`` if it is a mapping, else an empty one."""

    return value if isinstance(value, dict) else {}


def sequence_under(value: Any, key: str) -> list[Any] | None:
    """Return ``value[key]`` when ``value`` is a mapping holding a list there."""

    if isinstance(value, dict) and isinstance(value.get(key), list):
        return value[key]
    return None
