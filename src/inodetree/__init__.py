"""In-memory inode trees.

This package models a hierarchical namespace of directories and files as a
tree of nodes held entirely in memory, with soft and hard deletion,
pre-order traversal and relative path lookup.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("inodetree")
except PackageNotFoundError:
    __version__ = "unknown"
