"""
fieldtree - Select an animatable field anywhere in a scene object hierarchy

fieldtree lazily builds a tree of scene objects, their components and
reflected fields, and reports the selected field as a stable "/" separated
address together with its value type.
"""

from importlib.metadata import version

from fieldtree.config import SelectorConfig
from fieldtree.core.types import Color, FieldType, Vector2, Vector3, Vector4
from fieldtree.introspection import animatable_field
from fieldtree.scene import Component, ObjectGraph, SceneGraph, SceneObject, Serializable
from fieldtree.selector import FieldSelector
from fieldtree.tree import FieldNode, NodeKind

__version__ = version("fieldtree")

__all__ = [
    "__version__",
    "Color",
    "Component",
    "FieldNode",
    "FieldSelector",
    "FieldType",
    "NodeKind",
    "ObjectGraph",
    "SceneGraph",
    "SceneObject",
    "SelectorConfig",
    "Serializable",
    "Vector2",
    "Vector3",
    "Vector4",
    "animatable_field",
]
