"""Node representation for directories and files in an inode tree."""

from typing import TYPE_CHECKING, Callable, Iterator, Optional, Tuple, Union

from anytree import Node, PreOrderIter

from inodetree.exceptions import ActionNotAllowedError
from inodetree.types import NodeKind

if TYPE_CHECKING:
    from inodetree.node_tree.node_tree import NodeTree

# Inode number of the root directory of every tree
ROOT_INO = 1

PayloadType = Union[bytes, bytearray, memoryview, str]


def validate_name(name: str) -> str:
    """Check that a name can be used as a single path segment.

    Raises:
        ValueError: If the name is empty, not a string, or contains a slash.
    """
    if not isinstance(name, str) or not name:
        raise ValueError(f"Node names must be non-empty strings, got {name!r}")
    if "/" in name:
        raise ValueError(f"Node names must not contain '/': {name!r}")
    return name


def to_payload(data: PayloadType) -> bytes:
    """Normalize file data to immutable bytes. Strings are encoded as UTF-8."""
    if isinstance(data, str):
        return data.encode("utf-8")
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise ValueError(f"File data must be bytes-like or str, got {type(data).__name__}")


class INode(Node):  # type: ignore
    """Node class representing a directory or a file in an inode tree.

    Extends anytree.Node with a fixed kind, a byte payload for files, creation and
    modification timestamps and a tombstone flag. Parent/child linkage, loop detection
    and iteration are inherited from anytree.

    INodes are created by their owning NodeTree, which assigns the inode number and
    stamps the timestamps from its clock. They should not be instantiated directly.

    Attributes:
        name (str): The name of the node, a single path segment.
        ino (int): Inode number, stable and unique within the owning tree.
        tree (NodeTree): The tree that owns this node.
        created_at (int): Creation time in POSIX seconds. Never changes.
        modified_at (int): Last modification time in POSIX seconds.
        deleted (bool): True once the node has been soft-deleted.
        parent (Optional[INode]): The parent node (inherited from anytree.Node).
        children (tuple[INode]): The child nodes (inherited from anytree.Node).

    Example:
        >>> from inodetree.node_tree.node_tree import NodeTree
        >>> tree = NodeTree()
        >>> docs = tree.create_directory("docs", tree.root)
        >>> readme = tree.create_file("README", docs, b"hi")
        >>> readme.pathname
        '/docs/README'
        >>> readme.size
        2
        >>> readme.entries is None
        True
    """

    def __init__(
        self,
        name: str,
        kind: NodeKind,
        tree: "NodeTree",
        ino: int,
        timestamp: int,
        data: Optional[PayloadType] = None,
    ) -> None:
        self._kind = kind
        self._data: Optional[bytes] = None if kind is NodeKind.DIRECTORY else to_payload(b"" if data is None else data)
        self.tree = tree
        self.ino = ino
        self.created_at = timestamp
        self.modified_at = timestamp
        self.deleted = False
        super().__init__(name)

    @property
    def kind(self) -> NodeKind:
        return self._kind

    @property
    def is_dir(self) -> bool:
        return self._kind is NodeKind.DIRECTORY

    @property
    def is_file(self) -> bool:
        return self._kind is NodeKind.FILE

    @property
    def data(self) -> Optional[bytes]:
        """The file payload, or None for directories."""
        return self._data

    # Shadows anytree's subtree size
    @property
    def size(self) -> Optional[int]:
        """Length of the file payload in bytes, or None for directories."""
        if self._data is None:
            return None
        return len(self._data)

    @property
    def entries(self) -> Optional[Tuple["INode", ...]]:
        """The child sequence in insertion order, or None for files which cannot hold children."""
        if self.is_file:
            return None
        return tuple(self.children)

    @property
    def pathname(self) -> str:
        """Slash-separated path from the topmost ancestor, e.g. ``/dir1/file1.txt``.

        The root itself is ``/``. For a detached subtree the path starts at the detached node.
        """
        names = [node.name for node in self.path]
        if names[0] == "/":
            names = names[1:]
        return "/" + "/".join(names)

    def _pre_attach(self, parent: "INode") -> None:
        # Called by anytree before the parent link is set, whichever way it is set
        if getattr(parent, "tree", None) is not self.tree:
            raise ActionNotAllowedError(f"cannot attach {self.name!r} beneath a node of another tree")
        if getattr(parent, "is_file", False):
            raise ActionNotAllowedError(f"cannot attach {self.name!r} beneath file {parent.name!r}")
        if self.ino == ROOT_INO:
            raise ActionNotAllowedError("the root cannot be attached beneath another node")

    def find(self, path: str) -> "INode":
        """Resolve a path relative to this node. See NodeTree.find."""
        return self.tree.find(self, path)

    def walk(self, visit: Callable[["INode"], object]) -> None:
        """Visit this node and its descendants in pre-order. See NodeTree.walk."""
        self.tree.walk(self, visit)

    def delete(self, *options: str) -> None:
        """Soft-delete this node, or unlink it if ``--force`` or ``-f`` is given. See NodeTree.delete."""
        self.tree.delete(self, *options)

    def iter_nodes(self) -> Iterator["INode"]:
        return PreOrderIter(self)

    def __repr__(self) -> str:
        marker = " deleted" if self.deleted else ""
        return f"INode({self.pathname!r}, kind={self._kind.value}, ino={self.ino}{marker})"
