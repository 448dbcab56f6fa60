"""
FieldSelector: interactive field tree over a scene object hierarchy.

The selector owns the root row and applies the expansion rules from
`fieldtree.tree.builder` in response to expand, collapse and activate
actions. Children are materialized only while a row is expanded and are
dropped on collapse, so every expansion reflects the live scene graph.

When the user activates a field leaf, the single registered listener
receives the owning scene object, the owning component (None for fields of
the scene object itself), the field address and the field type. Addresses
are "/" separated; scene object segments start with "!", components with
":", and fields carry no prefix:

    !My Scene Object/:Camera/path/to/field
"""

import logging
from collections.abc import Callable, Iterator
from typing import Any

from fieldtree.config import SelectorConfig
from fieldtree.core.types import FieldType
from fieldtree.exceptions import InvalidOperationError
from fieldtree.rendering import RowSink
from fieldtree.scene.graph import ObjectGraph, SceneGraph
from fieldtree.tree.builder import expand_children, make_root
from fieldtree.tree.node import FieldNode, NodeKind

logger = logging.getLogger(__name__)

FieldSelectedCallback = Callable[[Any, Any, str, FieldType], None]


class FieldSelector:
    """Lazily built tree of scene objects, components and animatable fields.

    Responsibilities:
      - Build the root row and expand it one level on binding.
      - Expand and collapse individual rows without touching siblings.
      - Notify at most one listener when a field leaf is activated.

    Notes:
      - Not thread-safe; all calls are expected on the UI thread.
      - Rows referencing destroyed objects must not be expanded; the error
        raised by the object graph propagates unchanged.
    """

    def __init__(
        self,
        scene_object: Any = None,
        graph: ObjectGraph | None = None,
        config: SelectorConfig | None = None,
        on_field_selected: FieldSelectedCallback | None = None,
    ):
        self.graph = graph or SceneGraph()
        self.config = config or SelectorConfig()
        self.on_field_selected = on_field_selected
        self._root_object = None
        self._root: FieldNode | None = None
        self.build_root(scene_object)

    @property
    def root(self) -> FieldNode | None:
        """Root row, None when no scene object is bound."""
        return self._root

    @property
    def rows(self) -> list[FieldNode]:
        """Top level rows (the children of the root row)."""
        if self._root is None:
            return []
        return list(self._root.iter_children())

    def build_root(self, scene_object: Any) -> None:
        """
        Bind a scene object and build the first level of rows.

        Params:
            scene_object: Root object to inspect, or None for an empty tree
        """
        self._root_object = scene_object
        self._root = None

        if scene_object is None:
            logger.debug("No scene object bound, field tree is empty")
            return

        self._root = make_root(scene_object, self.graph)
        self.expand(self._root)

    def rebuild(self) -> None:
        """Discard every row and rebuild the tree for the bound scene object."""
        self.build_root(self._root_object)

    def expand(self, node: FieldNode) -> None:
        """
        Expand a row, deriving its children from the live object graph.

        Expanding an already expanded row replaces its children.

        Params:
            node: Row to expand

        Raises:
            InvalidOperationError: If the row is a field leaf
        """
        children = expand_children(node, self.graph, self.config)
        node.children = children
        node.expanded = True
        logger.debug(
            "Expanded %s row '%s' into %d rows", node.kind.value, node.label, len(children)
        )

    def collapse(self, node: FieldNode) -> None:
        """Collapse a row, discarding its whole subtree."""
        node.children = None
        node.expanded = False
        logger.debug("Collapsed %s row '%s'", node.kind.value, node.label)

    def toggle(self, node: FieldNode, expand: bool) -> None:
        """Expand or collapse a row; the shape of a foldout toggle callback."""
        if expand:
            self.expand(node)
        else:
            self.collapse(node)

    def activate(self, node: FieldNode) -> None:
        """
        Select a field leaf and notify the registered listener.

        Does nothing beyond validation when no listener is registered.

        Params:
            node: Field row that was selected

        Raises:
            InvalidOperationError: If the row is not a field leaf
        """
        if node.kind is not NodeKind.FIELD:
            raise InvalidOperationError(node.kind.value, "activate")

        logger.debug("Selected field '%s' (%s)", node.address, node.field_type)
        if self.on_field_selected is not None:
            self.on_field_selected(
                node.owner_object, node.owner_component, node.address, node.field_type
            )

    def visible_rows(self) -> Iterator[tuple[int, FieldNode]]:
        """
        Walk the currently visible rows in display order.

        Yields:
            (depth, row) pairs; top level rows have depth 0
        """
        stack = [(0, row) for row in reversed(self.rows)]
        while stack:
            depth, row = stack.pop()
            yield depth, row
            stack.extend((depth + 1, child) for child in reversed(row.children or ()))

    def render(self, sink: RowSink) -> None:
        """Feed the header and every visible row to a row sink."""
        if self._root is None:
            return

        sink.add_header(self.config.header)
        for depth, row in self.visible_rows():
            if row.is_leaf:
                sink.add_field_row(row, depth)
            else:
                sink.add_foldout_row(row, depth)
