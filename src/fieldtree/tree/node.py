"""
Row model for the field tree.

A FieldNode is one row: a scene object, its transform group, a component,
a children group, a nested object field or a selectable field leaf.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from fieldtree.core.types import FieldType


class NodeKind(Enum):
    """Row kinds; each kind selects one expansion rule."""

    ROOT_OBJECT = "root_object"
    TRANSFORM_GROUP = "transform_group"
    COMPONENT = "component"
    CHILDREN_GROUP = "children_group"
    CHILD_OBJECT = "child_object"
    FIELD = "field"
    OBJECT_FIELD = "object_field"


_FIXED_ATTRIBUTES = frozenset({"kind", "address"})


@dataclass(eq=False)
class FieldNode:
    """Single row in the field tree.

    Attributes:
        kind:            Row kind, fixed at creation.
        label:           Display name of the row.
        owner_object:    Scene object this row belongs to. Never None.
        address:         Path from the tree root to this row, fixed at creation.
        owner_component: Component this row belongs to; None for rows owned
                         by the scene object itself.
        field_type:      Value type of a FIELD leaf; None for other kinds.
        bound_type:      Model type whose fields a COMPONENT or OBJECT_FIELD
                         row enumerates on expansion.
        expanded:        Whether the row is currently expanded.
        children:        Materialized child rows; None unless expanded.
    """

    kind: NodeKind
    label: str
    owner_object: Any
    address: str
    owner_component: Any = None
    field_type: FieldType | None = None
    bound_type: type | None = None
    expanded: bool = False
    children: list["FieldNode"] | None = field(default=None, repr=False)

    def __post_init__(self):
        if self.owner_object is None:
            raise ValueError(f"Row '{self.label}' has no owner object")

    def __setattr__(self, name: str, value: Any) -> None:
        # kind and address are set once by __init__
        if name in _FIXED_ATTRIBUTES and name in self.__dict__:
            raise AttributeError(f"FieldNode.{name} cannot be reassigned")
        super().__setattr__(name, value)

    @property
    def is_leaf(self) -> bool:
        """True for selectable field rows."""
        return self.kind is NodeKind.FIELD

    def iter_children(self):
        """Iterate over materialized children (nothing when collapsed)."""
        return iter(self.children or ())
