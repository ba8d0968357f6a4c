from typing import Any


class ActionNotAllowedError(Exception):
    """
    Exception raised when an operation is not allowed on a node.

    This is raised when attempting to delete the root node, attaching a child beneath
    a file, or attaching a node beneath itself or one of its own descendants.

    Example:
        >>> error = ActionNotAllowedError()
        >>> str(error)
        'action not allowed on this node'
    """

    def __init__(self, message: str = "action not allowed on this node") -> None:
        self.message = message
        super().__init__(self.message)


class NodeNotFoundError(FileNotFoundError):
    """
    Exception raised when a path cannot be resolved to a node.

    Subclasses FileNotFoundError so that callers can treat a failed lookup the same
    way they would treat a missing file on disk.

    Attributes:
        path (str): The path that failed to resolve.

    Example:
        >>> error = NodeNotFoundError("dir1/nope.txt")
        >>> str(error)
        'No such node: dir1/nope.txt'
        >>> isinstance(error, FileNotFoundError)
        True
    """

    def __init__(self, path: str) -> None:
        """
        Initialize the exception with the path that could not be resolved.

        Args:
            path (str): The path that failed to resolve.
        """
        self.path = path
        super().__init__(f"No such node: {path}")


class InvalidHandleError(Exception):
    """
    Exception raised when a node handle does not refer to a node of the tree it is used with.

    A handle is invalid when it is neither an INode nor an inode number, when it is a node
    owned by another tree, or when it is an inode number the tree does not know (or has
    already collected).

    Attributes:
        handle (Any): The offending handle.

    Example:
        >>> error = InvalidHandleError(42)
        >>> str(error)
        'Invalid node handle: 42'
    """

    def __init__(self, handle: Any, reason: str = "") -> None:
        self.handle = handle
        message = f"Invalid node handle: {handle!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
