"""
Default in-memory scene model.

SceneObject forms the hierarchy (name, attached components, ordered child
objects). Components and nested composite values are pydantic models so
their fields can be introspected by `fieldtree.introspection`.
"""

import logging
from typing import Optional

from pydantic import BaseModel, ConfigDict, PrivateAttr

from fieldtree.exceptions import ObjectDestroyedError

logger = logging.getLogger(__name__)


class Serializable(BaseModel):
    """Base class for nested composite values stored in component fields."""

    model_config = ConfigDict(arbitrary_types_allowed=True)


class Component(Serializable):
    """
    Base class for typed units of behavior/data attached to a SceneObject.

    Subclasses declare their fields with pydantic annotations; fields declared
    with `animatable_field` can be selected in the field tree.
    """

    _scene_object: Optional["SceneObject"] = PrivateAttr(default=None)

    @property
    def scene_object(self) -> Optional["SceneObject"]:
        """Scene object this component is attached to, if any."""
        return self._scene_object


class SceneObject:
    """A node in the scene hierarchy owning components and child objects.

    Thread safety: Not thread-safe (all operations expected on main thread).
    """

    def __init__(self, name: str, parent: Optional["SceneObject"] = None):
        self._name = name
        self._parent: SceneObject | None = None
        self._children: list[SceneObject] = []
        self._components: list[Component] = []
        self._destroyed = False

        if parent is not None:
            self.set_parent(parent)

    def __repr__(self) -> str:
        state = " destroyed" if self._destroyed else ""
        return f"<SceneObject {self._name!r}{state}>"

    def _check_alive(self) -> None:
        if self._destroyed:
            raise ObjectDestroyedError(self._name)

    @property
    def name(self) -> str:
        self._check_alive()
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._check_alive()
        self._name = value

    @property
    def parent(self) -> Optional["SceneObject"]:
        self._check_alive()
        return self._parent

    @property
    def is_destroyed(self) -> bool:
        return self._destroyed

    def set_parent(self, parent: Optional["SceneObject"]) -> None:
        """
        Move this object under a new parent, appending it as the last child.

        Params:
            parent: New parent object, or None to detach
        """
        self._check_alive()
        if parent is self:
            raise ValueError("A scene object cannot be its own parent")
        ancestor = parent
        while ancestor is not None:
            if ancestor is self:
                raise ValueError(
                    f"Cannot parent '{self._name}' under its own "
                    f"descendant '{parent._name}'"
                )
            ancestor = ancestor._parent
        if self._parent is not None:
            self._parent._children.remove(self)
        self._parent = parent
        if parent is not None:
            parent._check_alive()
            parent._children.append(self)

    def add_component(self, component: Component) -> Component:
        """
        Attach a component to this object.

        Params:
            component: Component instance, must not be attached elsewhere

        Returns:
            The attached component
        """
        self._check_alive()
        if component.scene_object is not None:
            raise ValueError(
                f"{type(component).__name__} is already attached to "
                f"'{component.scene_object.name}'"
            )
        component._scene_object = self
        self._components.append(component)
        return component

    def remove_component(self, component: Component) -> None:
        """
        Detach a component from this object.

        Components are matched by identity; pydantic equality would confuse
        two components with equal field values.

        Raises:
            ValueError: If the component is not attached to this object
        """
        self._check_alive()
        for index, attached in enumerate(self._components):
            if attached is component:
                del self._components[index]
                component._scene_object = None
                return
        raise ValueError(
            f"{type(component).__name__} is not attached to '{self._name}'"
        )

    def get_components(self) -> list[Component]:
        """Return attached components in attachment order."""
        self._check_alive()
        return list(self._components)

    def get_component(self, component_type: type[Component]) -> Component | None:
        """Return the first attached component of the given type, if any."""
        self._check_alive()
        for component in self._components:
            if isinstance(component, component_type):
                return component
        return None

    def get_num_children(self) -> int:
        self._check_alive()
        return len(self._children)

    def get_child(self, index: int) -> "SceneObject":
        self._check_alive()
        return self._children[index]

    def destroy(self) -> None:
        """Destroy this object and its whole subtree, detaching it from its parent."""
        if self._destroyed:
            return
        for child in list(self._children):
            child.destroy()
        if self._parent is not None and not self._parent.is_destroyed:
            self._parent._children.remove(self)
        self._parent = None
        for component in self._components:
            component._scene_object = None
        self._components.clear()
        self._destroyed = True
        logger.debug("Destroyed scene object %r", self._name)
