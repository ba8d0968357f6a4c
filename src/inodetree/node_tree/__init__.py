"""In-memory inode tree.

This package provides the INode node type and the NodeTree arena that owns nodes and
implements creation, soft and hard deletion, pre-order traversal and path lookup.
"""

from .delete_mode import DeleteMode
from .inode import INode
from .node_tree import NodeTree

__all__ = [
    "DeleteMode",
    "INode",
    "NodeTree",
]
