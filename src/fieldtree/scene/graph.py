"""
Host object model capabilities consumed by the field tree builder.

The builder never touches scene objects directly; it asks an ObjectGraph for
components, children and display names. SceneGraph adapts the default
in-memory SceneObject model. Other hosts provide their own ObjectGraph.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

from fieldtree.scene.objects import Component, SceneObject


class ObjectGraph(ABC):
    """Abstract access to a host scene graph."""

    @abstractmethod
    def list_components(self, scene_object: Any) -> Sequence[Any]:
        """Return the components attached to an object, in enumeration order."""
        pass

    @abstractmethod
    def child_count(self, scene_object: Any) -> int:
        """Return the number of direct child objects."""
        pass

    @abstractmethod
    def child_at(self, scene_object: Any, index: int) -> Any:
        """Return the child object at the given index."""
        pass

    @abstractmethod
    def display_name(self, item: Any) -> str:
        """Return the display name of an object or a component."""
        pass


class SceneGraph(ObjectGraph):
    """ObjectGraph over SceneObject and Component instances."""

    def list_components(self, scene_object: SceneObject) -> list[Component]:
        return scene_object.get_components()

    def child_count(self, scene_object: SceneObject) -> int:
        return scene_object.get_num_children()

    def child_at(self, scene_object: SceneObject, index: int) -> SceneObject:
        return scene_object.get_child(index)

    def display_name(self, item: SceneObject | Component) -> str:
        """
        Return the display name used for rows and address segments.

        Components are named after their runtime type; scene objects use
        their own name.
        """
        if isinstance(item, Component):
            return type(item).__name__
        return item.name
