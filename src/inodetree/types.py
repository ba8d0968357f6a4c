from enum import Enum
from os import PathLike
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from inodetree.node_tree.inode import INode

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]

# Anything an operation accepts as a reference to a node: the node itself or its inode number
NodeHandle = Union["INode", int]


class NodeKind(Enum):
    """Enumeration of node kinds in an inode tree.

    The kind of a node is fixed when the node is created.

    Attributes:
        DIRECTORY: A node that may own an ordered sequence of children
        FILE: A node that holds a byte payload and can never own children
    """

    DIRECTORY = "directory"
    FILE = "file"
