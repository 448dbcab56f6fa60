"""
Field enumeration for component and nested composite types.

Component types are pydantic models. Their fields are enumerated from
`model_fields` in declaration order and mapped onto FieldType tags. A field
opts into animation by being declared with `animatable_field`.
"""

import types
from typing import Any, Union, get_args, get_origin

from attrs import frozen
from pydantic import BaseModel, Field

from fieldtree.core.types import Color, FieldType, Vector2, Vector3, Vector4
from fieldtree.exceptions import FieldTypeError

ANIMATABLE_KEY = "animatable"

# Exact annotation matches; bool is listed before int since it subclasses int
_VALUE_TYPE_TAGS: list[tuple[type, FieldType]] = [
    (bool, FieldType.BOOL),
    (int, FieldType.INT),
    (float, FieldType.FLOAT),
    (str, FieldType.STRING),
    (Color, FieldType.COLOR),
    (Vector2, FieldType.VECTOR2),
    (Vector3, FieldType.VECTOR3),
    (Vector4, FieldType.VECTOR4),
]

_ARRAY_ORIGINS = (list, tuple, set, frozenset)


@frozen
class FieldDescriptor:
    """Introspection metadata for a single field of a model type."""

    name: str
    declared_type: FieldType
    is_animatable: bool
    nested_type: type[BaseModel] | None = None
    annotation: Any = None


def animatable_field(default: Any = ..., **kwargs: Any) -> Any:
    """
    Declare a pydantic field that can be driven by an animation curve.

    Accepts the same arguments as `pydantic.Field`; any extra JSON schema
    entries are preserved alongside the animatable flag.

    Example::

        class Camera(Component):
            field_of_view: float = animatable_field(60.0)
    """
    extra = dict(kwargs.pop("json_schema_extra", None) or {})
    extra[ANIMATABLE_KEY] = True
    if default is not ...:
        kwargs["default"] = default
    return Field(json_schema_extra=extra, **kwargs)


def _unwrap_optional(annotation: Any) -> Any:
    """Strip None from `X | None` / `Optional[X]`, leaving other unions alone."""
    origin = get_origin(annotation)
    if origin is Union or origin is types.UnionType:
        members = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(members) == 1:
            return members[0]
    return annotation


def field_type_of(annotation: Any) -> tuple[FieldType, type[BaseModel] | None]:
    """
    Map a type annotation onto a FieldType tag.

    Params:
        annotation: Annotation taken from the pydantic FieldInfo

    Returns:
        Tuple of (field type, nested model type). The nested type is only set
        for FieldType.OBJECT.
    """
    annotation = _unwrap_optional(annotation)
    origin = get_origin(annotation)

    if origin is not None:
        if origin in _ARRAY_ORIGINS:
            return FieldType.ARRAY, None
        if origin is dict:
            return FieldType.DICTIONARY, None
        return FieldType.OTHER, None

    if not isinstance(annotation, type):
        return FieldType.OTHER, None

    for value_type, tag in _VALUE_TYPE_TAGS:
        if annotation is value_type:
            return tag, None

    if issubclass(annotation, BaseModel):
        return FieldType.OBJECT, annotation
    if issubclass(annotation, _ARRAY_ORIGINS):
        return FieldType.ARRAY, None
    if issubclass(annotation, dict):
        return FieldType.DICTIONARY, None
    return FieldType.OTHER, None


def _is_animatable(field_info: Any) -> bool:
    extra = field_info.json_schema_extra
    if not isinstance(extra, dict):
        return False
    return bool(extra.get(ANIMATABLE_KEY, False))


def fields_of(model_type: type) -> list[FieldDescriptor]:
    """
    Enumerate the field descriptors of a model type.

    Params:
        model_type: A pydantic model class (component or nested composite)

    Returns:
        One FieldDescriptor per declared field, in declaration order

    Raises:
        FieldTypeError: If model_type is not a pydantic model class
    """
    if not isinstance(model_type, type) or not issubclass(model_type, BaseModel):
        raise FieldTypeError(getattr(model_type, "__name__", repr(model_type)))

    descriptors = []
    for name, field_info in model_type.model_fields.items():
        declared_type, nested_type = field_type_of(field_info.annotation)
        descriptors.append(
            FieldDescriptor(
                name=name,
                declared_type=declared_type,
                is_animatable=_is_animatable(field_info),
                nested_type=nested_type,
                annotation=field_info.annotation,
            )
        )
    return descriptors
