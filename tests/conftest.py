"""Test configuration and fixtures for inodetree."""

import pytest

from inodetree.clock import ManualClock
from inodetree.node_tree.node_tree import NodeTree

# 2009-11-10T23:00:00Z
START_TIME = 1257894000


@pytest.fixture
def clock():
    """A clock that only moves when a test advances it."""
    return ManualClock(START_TIME)


@pytest.fixture
def tree(clock):
    """An empty tree stamped by the manual clock."""
    return NodeTree(clock=clock)


@pytest.fixture
def demo_tree(tree):
    """root -> dir1 -> file1.txt and root -> dir2 -> file2.txt."""
    dir1 = tree.create_directory("dir1", tree.root)
    file1 = tree.create_file("file1.txt", dir1, b"Hello, World!")
    dir2 = tree.create_directory("dir2", tree.root)
    file2 = tree.create_file("file2.txt", dir2, b"Another file content.")
    return tree, dir1, file1, dir2, file2
