"""
Expansion rules for the field tree.

`expand_children` is a pure function: given a row and the live object graph
it derives the row's children without touching the row itself. Each row
kind has exactly one rule, looked up in `_EXPANSION_RULES`. FIELD rows have
no rule and cannot be expanded.

Addressing:
- The root row has the empty address; scene object rows compose their own
  object segment ("!name") onto their address when expanded.
- Transform and children groups share the object's scope address.
- Component rows append ":TypeName", field rows append the field name.
"""

from collections.abc import Callable
from typing import Any

from fieldtree.config import SelectorConfig
from fieldtree.core.path_utils import (
    component_segment,
    field_segment,
    join_path,
    object_segment,
)
from fieldtree.core.types import FieldType
from fieldtree.exceptions import InvalidOperationError
from fieldtree.introspection import FieldClass, classify, fields_of
from fieldtree.scene.graph import ObjectGraph
from fieldtree.tree.node import FieldNode, NodeKind

ExpansionRule = Callable[[FieldNode, ObjectGraph, SelectorConfig], list[FieldNode]]


def make_root(scene_object: Any, graph: ObjectGraph) -> FieldNode:
    """
    Create the root row for a scene object.

    Params:
        scene_object: Root of the inspected hierarchy
        graph: Object graph used to resolve the display name

    Returns:
        Unexpanded ROOT_OBJECT row with the empty address
    """
    return FieldNode(
        kind=NodeKind.ROOT_OBJECT,
        label=graph.display_name(scene_object),
        owner_object=scene_object,
        address="",
    )


def _scene_object_rows(
    node: FieldNode, graph: ObjectGraph, config: SelectorConfig
) -> list[FieldNode]:
    """Transform group, one row per component, then the children group."""
    scene_object = node.owner_object
    scope = join_path(node.address, object_segment(graph.display_name(scene_object)))

    rows = [
        FieldNode(
            kind=NodeKind.TRANSFORM_GROUP,
            label=config.transform_label,
            owner_object=scene_object,
            address=scope,
        )
    ]

    for component in graph.list_components(scene_object):
        type_name = graph.display_name(component)
        rows.append(
            FieldNode(
                kind=NodeKind.COMPONENT,
                label=type_name,
                owner_object=scene_object,
                owner_component=component,
                address=join_path(scope, component_segment(type_name)),
                bound_type=type(component),
            )
        )

    if graph.child_count(scene_object) > 0:
        rows.append(
            FieldNode(
                kind=NodeKind.CHILDREN_GROUP,
                label=config.children_label,
                owner_object=scene_object,
                address=scope,
            )
        )

    return rows


def _transform_rows(
    node: FieldNode, graph: ObjectGraph, config: SelectorConfig
) -> list[FieldNode]:
    return [
        FieldNode(
            kind=NodeKind.FIELD,
            label=name,
            owner_object=node.owner_object,
            address=join_path(node.address, field_segment(name)),
            field_type=FieldType.VECTOR3,
        )
        for name in config.transform_fields
    ]


def _model_field_rows(
    node: FieldNode, graph: ObjectGraph, config: SelectorConfig
) -> list[FieldNode]:
    """Rows for the animatable fields of the row's bound model type."""
    rows = []
    for descriptor in fields_of(node.bound_type):
        field_class = classify(descriptor)
        if field_class is FieldClass.IGNORED:
            continue

        address = join_path(node.address, field_segment(descriptor.name))
        if field_class is FieldClass.LEAF:
            rows.append(
                FieldNode(
                    kind=NodeKind.FIELD,
                    label=descriptor.name,
                    owner_object=node.owner_object,
                    owner_component=node.owner_component,
                    address=address,
                    field_type=descriptor.declared_type,
                )
            )
        else:
            rows.append(
                FieldNode(
                    kind=NodeKind.OBJECT_FIELD,
                    label=descriptor.name,
                    owner_object=node.owner_object,
                    owner_component=node.owner_component,
                    address=address,
                    bound_type=descriptor.nested_type,
                )
            )
    return rows


def _child_object_rows(
    node: FieldNode, graph: ObjectGraph, config: SelectorConfig
) -> list[FieldNode]:
    # Child rows keep the group's address; each adds its own object segment
    # once it is expanded.
    scene_object = node.owner_object
    rows = []
    for index in range(graph.child_count(scene_object)):
        child = graph.child_at(scene_object, index)
        rows.append(
            FieldNode(
                kind=NodeKind.CHILD_OBJECT,
                label=graph.display_name(child),
                owner_object=child,
                address=node.address,
            )
        )
    return rows


_EXPANSION_RULES: dict[NodeKind, ExpansionRule] = {
    NodeKind.ROOT_OBJECT: _scene_object_rows,
    NodeKind.CHILD_OBJECT: _scene_object_rows,
    NodeKind.TRANSFORM_GROUP: _transform_rows,
    NodeKind.COMPONENT: _model_field_rows,
    NodeKind.OBJECT_FIELD: _model_field_rows,
    NodeKind.CHILDREN_GROUP: _child_object_rows,
}


def expand_children(
    node: FieldNode, graph: ObjectGraph, config: SelectorConfig | None = None
) -> list[FieldNode]:
    """
    Derive the child rows of a row from the live object graph.

    Does not modify `node`; the caller decides where the result goes.

    Params:
        node: Row to expand
        graph: Object graph to read components, children and names from
        config: Labels for the generated group rows, defaults if omitted

    Returns:
        Fresh, unexpanded child rows in display order

    Raises:
        InvalidOperationError: If the row is a FIELD leaf
    """
    rule = _EXPANSION_RULES.get(node.kind)
    if rule is None:
        raise InvalidOperationError(node.kind.value, "expand")
    return rule(node, graph, config or SelectorConfig())
