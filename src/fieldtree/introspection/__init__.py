"""
Field introspection for fieldtree.

This package enumerates the fields of pydantic component types and
classifies them into selectable leaves, expandable branches or ignored.
"""

from fieldtree.introspection.classifier import FieldClass, classify
from fieldtree.introspection.fields import (
    ANIMATABLE_KEY,
    FieldDescriptor,
    animatable_field,
    field_type_of,
    fields_of,
)

__all__ = [
    "ANIMATABLE_KEY",
    "FieldClass",
    "FieldDescriptor",
    "animatable_field",
    "classify",
    "field_type_of",
    "fields_of",
]
