"""In-memory inode tree with soft and hard deletion.

This module provides the NodeTree class, which owns a root directory and every node
created beneath it, and implements creation, deletion, traversal and path lookup.
"""

from typing import Callable, Dict, Iterator, Optional, Tuple

from anytree import LoopError, PreOrderIter

from inodetree.clock import BaseClock, SystemClock
from inodetree.exceptions import ActionNotAllowedError, InvalidHandleError, NodeNotFoundError
from inodetree.exclusion_rules.base_rules import BaseExclusionRules
from inodetree.node_tree.delete_mode import DeleteMode
from inodetree.node_tree.inode import ROOT_INO, INode, PayloadType, to_payload, validate_name
from inodetree.types import NodeHandle, NodeKind


class NodeTree:
    """An arena owning a tree of directory and file nodes.

    The tree is created with a single root directory named ``/``. Every other node is
    created beneath an existing directory and is given an inode number that stays valid
    for as long as the tree knows the node. Operations accept either the node itself or
    its inode number.

    Deletion comes in two flavours:
        - Soft (default): the node is marked deleted and its modification time refreshed.
          It stays in the tree and is still visited by walk() and resolved by find().
        - Hard (``--force`` or ``-f``): the node is unlinked from its parent. Its own
          subtree stays attached to it and is no longer reachable from the root.
          Unreachable nodes remain registered until collect() is called.

    Attributes:
        root (INode): The root directory.
        clock (BaseClock): Source of creation and modification times.

    Example:
        >>> from inodetree.clock import ManualClock
        >>> tree = NodeTree(clock=ManualClock(1257894000))
        >>> dir1 = tree.create_directory("dir1", tree.root)
        >>> file1 = tree.create_file("file1.txt", dir1, b"Hello, World!")
        >>> tree.find(tree.root, "dir1/file1.txt") is file1
        True
        >>> [node.name for node in tree.iter_nodes()]
        ['/', 'dir1', 'file1.txt']
    """

    def __init__(self, clock: Optional[BaseClock] = None) -> None:
        """Initialize a NodeTree with an empty root directory.

        Args:
            clock: Source of timestamps. Defaults to the system clock.
        """
        self.clock = clock if clock is not None else SystemClock()
        self._inodes: Dict[int, INode] = {}
        self._next_ino = ROOT_INO
        self.root = self._new_node("/", NodeKind.DIRECTORY)

    def _new_node(self, name: str, kind: NodeKind, data: Optional[PayloadType] = None) -> INode:
        node = INode(name, kind, tree=self, ino=self._next_ino, timestamp=self.clock.now(), data=data)
        self._inodes[node.ino] = node
        self._next_ino += 1
        return node

    def _resolve(self, handle: NodeHandle) -> INode:
        """Turn a handle into a node owned by this tree.

        Raises:
            InvalidHandleError: If the handle is not a node or inode number of this tree.
        """
        if isinstance(handle, INode):
            if handle.tree is not self or self._inodes.get(handle.ino) is not handle:
                raise InvalidHandleError(handle, "node does not belong to this tree")
            return handle
        if isinstance(handle, int) and not isinstance(handle, bool):
            node = self._inodes.get(handle)
            if node is None:
                raise InvalidHandleError(handle, "unknown inode number")
            return node
        raise InvalidHandleError(handle, f"expected INode or int, got {type(handle).__name__}")

    def get_node(self, ino: int) -> INode:
        """Get a node by its inode number.

        Raises:
            InvalidHandleError: If no node with that number is registered.
        """
        return self._resolve(ino)

    def __contains__(self, handle: object) -> bool:
        try:
            self._resolve(handle)  # type: ignore[arg-type]
        except InvalidHandleError:
            return False
        return True

    def __len__(self) -> int:
        return len(self._inodes)

    def create_directory(self, name: str, parent: NodeHandle) -> INode:
        """Create a directory and append it to the children of parent.

        Args:
            name: Name of the new directory.
            parent: Directory to create it in.

        Returns:
            The new directory node.

        Raises:
            ValueError: If the name is empty or contains a slash.
            InvalidHandleError: If parent does not belong to this tree.
            ActionNotAllowedError: If parent is a file.
        """
        return self._create(name, parent, NodeKind.DIRECTORY)

    def create_file(self, name: str, parent: NodeHandle, data: PayloadType = b"") -> INode:
        """Create a file holding data and append it to the children of parent.

        Args:
            name: Name of the new file.
            parent: Directory to create it in.
            data: File payload. Strings are stored UTF-8 encoded.

        Returns:
            The new file node.

        Raises:
            ValueError: If the name is invalid or data is not bytes-like or str.
            InvalidHandleError: If parent does not belong to this tree.
            ActionNotAllowedError: If parent is a file.
        """
        return self._create(name, parent, NodeKind.FILE, data)

    def _create(self, name: str, parent: NodeHandle, kind: NodeKind, data: Optional[PayloadType] = None) -> INode:
        validate_name(name)
        parent_node = self._resolve(parent)
        # Check before registering so a failed create leaves no orphan in the arena
        if parent_node.is_file:
            raise ActionNotAllowedError(f"cannot create {name!r} beneath file {parent_node.name!r}")
        if data is not None:
            data = to_payload(data)
        node = self._new_node(name, kind, data)
        self.add_child(parent_node, node)
        return node

    def add_child(self, parent: NodeHandle, child: NodeHandle) -> None:
        """Append child to the children of parent.

        A child that already has a parent is moved. Names are not checked for
        uniqueness among siblings.

        Raises:
            InvalidHandleError: If either handle does not belong to this tree.
            ActionNotAllowedError: If parent is a file, child is the root, or parent is
                child itself or one of its descendants.
        """
        parent_node = self._resolve(parent)
        child_node = self._resolve(child)
        # anytree detaches the child from its old parent before its attach hooks run, so refuse early
        if child_node is self.root:
            raise ActionNotAllowedError("the root cannot be attached beneath another node")
        if parent_node.is_file:
            raise ActionNotAllowedError(f"cannot attach {child_node.name!r} beneath file {parent_node.name!r}")
        try:
            child_node.parent = parent_node
        except LoopError as e:
            raise ActionNotAllowedError(f"cannot attach {child_node.name!r} beneath itself: {e}") from e

    def delete(self, node: NodeHandle, *options: str) -> None:
        """Delete a node, softly unless a force option is given.

        Args:
            node: The node to delete.
            *options: Option tokens. ``--force`` or ``-f`` selects a hard delete;
                anything else is ignored.

        Raises:
            InvalidHandleError: If node does not belong to this tree.
            ActionNotAllowedError: If node is the root.
        """
        target = self._resolve(node)
        if target is self.root:
            raise ActionNotAllowedError("the root cannot be deleted")

        if DeleteMode.from_options(options) is DeleteMode.SOFT:
            target.deleted = True
            target.modified_at = self.clock.now()
            return

        # Already detached nodes have nothing to unlink from
        if target.parent is not None:
            target.parent = None

    def walk(self, node: NodeHandle, visit: Callable[[INode], object]) -> None:
        """Call visit on node and every descendant in pre-order.

        Children are visited in insertion order, and soft-deleted nodes are visited too.
        The return value of visit is ignored.

        Raises:
            InvalidHandleError: If node does not belong to this tree.
        """
        for current in PreOrderIter(self._resolve(node)):
            visit(current)

    def iter_nodes(self, node: Optional[NodeHandle] = None) -> Iterator[INode]:
        """Iterate over node (the root by default) and its descendants in pre-order."""
        start = self.root if node is None else self._resolve(node)
        yield from PreOrderIter(start)

    def find(self, node: NodeHandle, path: str) -> INode:
        """Resolve a slash-separated path relative to node.

        ``""`` and ``"/"`` resolve to node itself. Otherwise leading and trailing slashes
        are stripped and each segment selects the first child with exactly that name.
        An empty segment (as in ``a//b``) never matches.

        Args:
            node: Node to resolve the path from.
            path: Path such as ``dir1/file1.txt``.

        Returns:
            The resolved node.

        Raises:
            NodeNotFoundError: If some segment matches no child.
            InvalidHandleError: If node does not belong to this tree.
            TypeError: If path is not a string.
        """
        current = self._resolve(node)
        if not isinstance(path, str):
            raise TypeError(f"path must be a str, got {type(path).__name__}")
        if path in ("", "/"):
            return current

        for segment in path.strip("/").split("/"):
            match = next((child for child in current.children if child.name == segment), None)
            if match is None:
                raise NodeNotFoundError(path)
            current = match
        return current

    def iterate_paths(
        self, node: Optional[NodeHandle] = None, exclusion_rules: Optional[BaseExclusionRules] = None
    ) -> Iterator[Tuple[str, INode]]:
        """Iterate over (relative_path, node) pairs in pre-order.

        The start node (the root by default) is yielded first with the path ``""``.
        Descendant paths are relative to it, e.g. ``dir1/file1.txt``. When exclusion
        rules are given, each descendant is offered to ``exclusion_rules.excludes`` and
        an excluded directory is skipped together with its whole subtree.

        Example:
            >>> tree = NodeTree()
            >>> build = tree.create_directory("build", tree.root)
            >>> _ = tree.create_file("out.o", build)
            >>> [path for path, _ in tree.iterate_paths()]
            ['', 'build', 'build/out.o']
        """
        start = self.root if node is None else self._resolve(node)
        yield from self._iterate(start, "", exclusion_rules)

    def _iterate(
        self, node: INode, current_path: str, exclusion_rules: Optional[BaseExclusionRules]
    ) -> Iterator[Tuple[str, INode]]:
        if exclusion_rules is not None and current_path and exclusion_rules.excludes(current_path, node):
            return

        yield (current_path, node)
        for child in node.children:
            child_path = f"{current_path}/{child.name}" if current_path else child.name
            yield from self._iterate(child, child_path, exclusion_rules)

    def collect(self) -> int:
        """Forget every registered node that is no longer reachable from the root.

        Returns:
            Number of nodes dropped. Their handles are invalid afterwards.
        """
        reachable = {id(node) for node in PreOrderIter(self.root)}
        unreachable = [ino for ino, node in self._inodes.items() if id(node) not in reachable]
        for ino in unreachable:
            del self._inodes[ino]
        return len(unreachable)

    def get_file_count(self) -> int:
        """Get the number of files reachable from the root, tombstones included."""
        return sum(1 for node in PreOrderIter(self.root) if node.is_file)

    def get_directory_count(self) -> int:
        """Get the number of directories reachable from the root, excluding the root itself."""
        return sum(1 for node in PreOrderIter(self.root) if node.is_dir) - 1

    def get_deleted_count(self) -> int:
        """Get the number of soft-deleted nodes reachable from the root."""
        return sum(1 for node in PreOrderIter(self.root) if node.deleted)
