"""
Field address encoding and decoding for the fieldtree framework.

An address is a slash separated list of segments describing the traversal
from the root scene object to a selected field:

    !My Scene Object/:Camera/path/to/field

Scene object segments are prefixed with "!", component segments with ":",
and field segments carry no prefix. Names are never escaped, so a name
containing one of the reserved characters yields an ambiguous address.
"""

import logging
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)

SEPARATOR = "/"
OBJECT_PREFIX = "!"
COMPONENT_PREFIX = ":"

RESERVED_CHARACTERS = frozenset({SEPARATOR, OBJECT_PREFIX, COMPONENT_PREFIX})


class SegmentKind(Enum):
    """Kind of a single address segment, derived from its leading character."""

    OBJECT = "object"
    COMPONENT = "component"
    FIELD = "field"


@dataclass(frozen=True)
class PathSegment:
    """One decoded address segment."""

    kind: SegmentKind
    name: str

    def __str__(self) -> str:
        """Re-encode the segment with its prefix."""
        if self.kind is SegmentKind.OBJECT:
            return object_segment(self.name)
        if self.kind is SegmentKind.COMPONENT:
            return component_segment(self.name)
        return field_segment(self.name)


def contains_reserved(name: str) -> bool:
    """Check whether a name contains characters that make addresses ambiguous."""
    return any(char in RESERVED_CHARACTERS for char in name)


def _check_reserved(name: str) -> None:
    if contains_reserved(name):
        logger.debug("Name %r contains reserved address characters", name)


def object_segment(name: str) -> str:
    """
    Build the address segment for a scene object.

    Params:
        name: Display name of the scene object

    Returns:
        The name prefixed with "!"
    """
    _check_reserved(name)
    return f"{OBJECT_PREFIX}{name}"


def component_segment(type_name: str) -> str:
    """
    Build the address segment for a component.

    Params:
        type_name: Runtime type name of the component

    Returns:
        The type name prefixed with ":"
    """
    _check_reserved(type_name)
    return f"{COMPONENT_PREFIX}{type_name}"


def field_segment(name: str) -> str:
    """Build the address segment for a field (the bare field name)."""
    _check_reserved(name)
    return name


def join_path(parent: str, segment: str) -> str:
    """
    Append a segment to a parent address.

    Params:
        parent: Address of the parent row, empty for the tree root
        segment: Already encoded segment to append

    Returns:
        The combined address. An empty parent yields the segment alone.

    Examples:
        join_path("", "!Root") -> "!Root"
        join_path("!Root", ":Camera") -> "!Root/:Camera"
    """
    if not parent:
        return segment
    return f"{parent}{SEPARATOR}{segment}"


def split_path(address: str) -> list[PathSegment]:
    """
    Decode an address into its segments.

    Params:
        address: Address produced by the field selector

    Returns:
        List of PathSegment in root-to-leaf order, empty for an empty address

    Examples:
        "!Root/:Camera/fov" -> [OBJECT "Root", COMPONENT "Camera", FIELD "fov"]
    """
    if not address:
        return []

    segments = []
    for part in address.split(SEPARATOR):
        if part.startswith(OBJECT_PREFIX):
            segments.append(PathSegment(SegmentKind.OBJECT, part[1:]))
        elif part.startswith(COMPONENT_PREFIX):
            segments.append(PathSegment(SegmentKind.COMPONENT, part[1:]))
        else:
            segments.append(PathSegment(SegmentKind.FIELD, part))
    return segments
