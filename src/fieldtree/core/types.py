"""
Core type definitions for the fieldtree framework.

This module contains the field type tags reported by introspection and the
small value types (colors and vectors) that are treated as animatable leaves.
"""

from enum import Enum

from attrs import frozen


class FieldType(Enum):
    """Declared value type of a reflected field."""

    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    STRING = "string"
    COLOR = "color"
    VECTOR2 = "vector2"
    VECTOR3 = "vector3"
    VECTOR4 = "vector4"
    OBJECT = "object"  # Nested composite model
    ARRAY = "array"
    DICTIONARY = "dictionary"
    OTHER = "other"


# Field types that can be driven directly by an animation curve
ANIMATABLE_VALUE_TYPES = frozenset(
    {
        FieldType.BOOL,
        FieldType.FLOAT,
        FieldType.INT,
        FieldType.COLOR,
        FieldType.VECTOR2,
        FieldType.VECTOR3,
        FieldType.VECTOR4,
    }
)


@frozen
class Vector2:
    x: float = 0.0
    y: float = 0.0


@frozen
class Vector3:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@frozen
class Vector4:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0


@frozen
class Color:
    """Linear RGBA color, each channel in [0, 1]."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0
