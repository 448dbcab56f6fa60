"""
Field tree row model and expansion rules.
"""

from fieldtree.tree.builder import expand_children, make_root
from fieldtree.tree.node import FieldNode, NodeKind

__all__ = [
    "FieldNode",
    "NodeKind",
    "expand_children",
    "make_root",
]
