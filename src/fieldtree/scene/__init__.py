"""
Scene model for fieldtree.

This package provides the ObjectGraph capability used by the tree builder
together with a default in-memory scene object and component model.
"""

from fieldtree.scene.graph import ObjectGraph, SceneGraph
from fieldtree.scene.objects import Component, SceneObject, Serializable

__all__ = [
    "Component",
    "ObjectGraph",
    "SceneGraph",
    "SceneObject",
    "Serializable",
]
