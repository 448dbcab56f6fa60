"""
Core fieldtree components.

This package provides the field type tags, value types and the address
codec shared by the rest of the framework.
"""

from fieldtree.core.path_utils import (
    COMPONENT_PREFIX,
    OBJECT_PREFIX,
    SEPARATOR,
    PathSegment,
    SegmentKind,
    component_segment,
    contains_reserved,
    field_segment,
    join_path,
    object_segment,
    split_path,
)
from fieldtree.core.types import (
    ANIMATABLE_VALUE_TYPES,
    Color,
    FieldType,
    Vector2,
    Vector3,
    Vector4,
)

__all__ = [
    "ANIMATABLE_VALUE_TYPES",
    "COMPONENT_PREFIX",
    "OBJECT_PREFIX",
    "SEPARATOR",
    "Color",
    "FieldType",
    "PathSegment",
    "SegmentKind",
    "Vector2",
    "Vector3",
    "Vector4",
    "component_segment",
    "contains_reserved",
    "field_segment",
    "join_path",
    "object_segment",
    "split_path",
]
