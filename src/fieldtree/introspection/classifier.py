"""
Decides which rows a field descriptor contributes to the field tree.
"""

from enum import Enum

from fieldtree.core.types import ANIMATABLE_VALUE_TYPES, FieldType
from fieldtree.introspection.fields import FieldDescriptor


class FieldClass(Enum):
    """Outcome of classifying a field descriptor."""

    IGNORED = "ignored"  # No row
    LEAF = "leaf"  # Selectable field row
    BRANCH = "branch"  # Expandable nested object row


def classify(descriptor: FieldDescriptor) -> FieldClass:
    """
    Classify a field descriptor as a leaf, a branch or ignored.

    Params:
        descriptor: Field descriptor produced by `fields_of`

    Returns:
        LEAF for animatable value types, BRANCH for animatable nested models,
        IGNORED for everything else (including all non-animatable fields)
    """
    if not descriptor.is_animatable:
        return FieldClass.IGNORED

    if descriptor.declared_type in ANIMATABLE_VALUE_TYPES:
        return FieldClass.LEAF

    if (
        descriptor.declared_type is FieldType.OBJECT
        and descriptor.nested_type is not None
    ):
        return FieldClass.BRANCH

    return FieldClass.IGNORED
