"""Text rendering of inode tree nodes.

Nodes own no presentation logic. This module turns their attributes into an ``ls -l``
style line per node and into a ``tree(1)`` style outline of a subtree.
"""

from datetime import datetime, tzinfo
from typing import Iterator, Optional

from inodetree.node_tree.inode import INode


def format_timestamp(timestamp: int, tz: Optional[tzinfo] = None) -> str:
    """Format POSIX seconds as an RFC 3339 timestamp.

    Args:
        timestamp: Seconds since the epoch.
        tz: Time zone to render in. Defaults to the local time zone.

    Example:
        >>> from datetime import timezone
        >>> format_timestamp(1257894000, timezone.utc)
        '2009-11-10T23:00:00Z'
    """
    if tz is None:
        moment = datetime.fromtimestamp(timestamp).astimezone()
    else:
        moment = datetime.fromtimestamp(timestamp, tz)
    text = moment.isoformat(timespec="seconds")
    if text.endswith("+00:00"):
        text = text[: -len("+00:00")] + "Z"
    return text


def format_info(node: INode, tz: Optional[tzinfo] = None) -> str:
    """Render a single ``ls -l`` style line describing a node.

    Directories render as ``d <name> <created> <modified>`` and files as
    ``- <name> <created> <modified> <size> bytes``.

    Example:
        >>> from datetime import timezone
        >>> from inodetree.clock import ManualClock
        >>> from inodetree.node_tree.node_tree import NodeTree
        >>> tree = NodeTree(clock=ManualClock(1257894000))
        >>> dir1 = tree.create_directory("dir1", tree.root)
        >>> format_info(dir1, timezone.utc)
        'd dir1 2009-11-10T23:00:00Z 2009-11-10T23:00:00Z'
        >>> format_info(tree.create_file("file1.txt", dir1, b"Hello, World!"), timezone.utc)
        '- file1.txt 2009-11-10T23:00:00Z 2009-11-10T23:00:00Z 13 bytes'
    """
    created = format_timestamp(node.created_at, tz)
    modified = format_timestamp(node.modified_at, tz)
    if node.is_dir:
        return f"d {node.name} {created} {modified}"
    return f"- {node.name} {created} {modified} {node.size} bytes"


def stream_tree_representation(node: INode, show_deleted: bool = True) -> Iterator[str]:
    """Generate a tree representation of a subtree one line at a time.

    Children are listed in insertion order. Directories carry a trailing slash and
    soft-deleted nodes a ``[deleted]`` marker.

    Args:
        node: Node at the top of the rendering.
        show_deleted: Whether to include soft-deleted nodes (and their subtrees).

    Yields:
        Lines of the tree representation, including the connecting lines.

    Example:
        >>> from inodetree.node_tree.node_tree import NodeTree
        >>> tree = NodeTree()
        >>> dir1 = tree.create_directory("dir1", tree.root)
        >>> _ = tree.create_file("file1.txt", dir1)
        >>> tree.create_directory("dir2", tree.root).delete()
        >>> for line in stream_tree_representation(tree.root):
        ...     print(line)
        /
        ├── dir1/
        │   └── file1.txt
        └── dir2/ [deleted]
    """

    def label(current: INode) -> str:
        text = current.name
        if current.is_dir and text != "/":
            text += "/"
        if current.deleted:
            text += " [deleted]"
        return text

    def write_node(current: INode, prefix: str = "", is_last: bool = True, is_top: bool = False) -> Iterator[str]:
        if is_top:
            yield label(current)
        else:
            connector = "└── " if is_last else "├── "
            yield f"{prefix}{connector}{label(current)}"

        children = [child for child in current.children if show_deleted or not child.deleted]
        for i, child in enumerate(children):
            is_last_child = i == len(children) - 1

            # Direct children of the top node get no indentation
            if is_top:
                new_prefix = ""
            else:
                new_prefix = prefix + ("    " if is_last else "│   ")

            yield from write_node(child, new_prefix, is_last_child)

    yield from write_node(node, is_top=True)


def get_tree_representation(node: INode, show_deleted: bool = True) -> str:
    """Get a complete string representation of a subtree."""
    return "\n".join(stream_tree_representation(node, show_deleted))
