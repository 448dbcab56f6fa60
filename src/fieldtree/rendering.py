"""
Row sinks: the seam between the field tree and a widget toolkit.

A hosting UI implements RowSink to append foldout rows (expandable) and
field rows (selectable) to its own layout. TextRowSink renders the visible
tree as indented text, which is handy for debugging and tests.
"""

from abc import ABC, abstractmethod

from fieldtree.config import SelectorConfig
from fieldtree.tree.node import FieldNode


class RowSink(ABC):
    """Receives the visible rows of a field tree in display order."""

    @abstractmethod
    def add_header(self, text: str) -> None:
        """Append the header shown above the tree."""
        pass

    @abstractmethod
    def add_foldout_row(self, node: FieldNode, depth: int) -> None:
        """Append an expandable row at the given depth."""
        pass

    @abstractmethod
    def add_field_row(self, node: FieldNode, depth: int) -> None:
        """Append a selectable field row at the given depth."""
        pass


class TextRowSink(RowSink):
    """RowSink collecting one indented text line per row.

    Foldout rows are marked "[+]" (collapsed) or "[-]" (expanded); field rows
    end with "(select)".
    """

    def __init__(self, config: SelectorConfig | None = None):
        self.config = config or SelectorConfig()
        self.lines: list[str] = []

    def _indent(self, depth: int) -> str:
        return " " * (self.config.padding + depth * self.config.indent_amount)

    def add_header(self, text: str) -> None:
        self.lines.append(text)

    def add_foldout_row(self, node: FieldNode, depth: int) -> None:
        marker = "[-]" if node.expanded else "[+]"
        self.lines.append(f"{self._indent(depth)}{marker} {node.label}")

    def add_field_row(self, node: FieldNode, depth: int) -> None:
        self.lines.append(f"{self._indent(depth)}    {node.label} (select)")

    @property
    def text(self) -> str:
        return "\n".join(self.lines)
