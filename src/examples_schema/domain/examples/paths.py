# examples/paths.py

from collections.abc import Iterable
from enum import Enum, auto
from typing import NamedTuple


class SegmentKind(Enum):
    """
    How a path segment is rendered.

    Attributes:
        FIELD: Fixed document field, rendered as ``.name``.
        KEY: User-defined map key, rendered as ``['name']``.
        INDEX: Sequence position, rendered as ``[0]``.
    """

    FIELD = auto()
    KEY = auto()
    INDEX = auto()


class PathSegment(NamedTuple):
    """
    One step from the document root towards a node.
    """

    kind: SegmentKind
    value: str | int


def field(name: str) -> PathSegment:
    """
    Build a segment for a fixed document field.

    Args:
        name: Field name defined by the OpenAPI document structure.

    Returns:
        PathSegment: A segment rendered as ``.name``.
    """
    return PathSegment(SegmentKind.FIELD, name)


def key(name: object) -> PathSegment:
    """
    Build a segment for a user-defined map key.

    YAML may hand back non-string keys, such as unquoted status codes, so
    the key is stringified.

    Args:
        name: Map key as found in the document.

    Returns:
        PathSegment: A segment rendered as ``['name']``.
    """
    return PathSegment(SegmentKind.KEY, str(name))


def index(position: int) -> PathSegment:
    """
    Build a segment for a position within a sequence.

    Args:
        position: Zero-based sequence index.

    Returns:
        PathSegment: A segment rendered as ``[position]``.
    """
    return PathSegment(SegmentKind.INDEX, position)


def build_path(segments: Iterable[PathSegment]) -> str:
    """
    Render path segments as a JSONPath-style location rooted at ``$``.

    Args:
        segments: Ordered segments from the root.

    Returns:
        str: e.g. ``$.components.schemas['Herbs'].examples[0]``.
    """
    return "$" + "".join(_render(segment) for segment in segments)


def _render(segment: PathSegment) -> str:
    """
    Render a single segment in its bracket or dot form.

    Returns:
        str: The rendered segment.
    """
    if segment.kind is SegmentKind.FIELD:
        return f".{segment.value}"

    if segment.kind is SegmentKind.INDEX:
        return f"[{segment.value}]"

    escaped = str(segment.value).replace("\\", "\\\\").replace("'", "\\'")
    return f"['{escaped}']"
