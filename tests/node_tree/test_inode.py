"""Unit tests for the INode class."""

import pytest

from inodetree.exceptions import ActionNotAllowedError, NodeNotFoundError
from inodetree.node_tree.inode import to_payload, validate_name
from inodetree.node_tree.node_tree import NodeTree
from inodetree.types import NodeKind


def test_inode_initialization(tree, clock):
    """Test the attributes of freshly created directory and file nodes."""
    dir_node = tree.create_directory("docs", tree.root)
    assert dir_node.name == "docs"
    assert dir_node.kind is NodeKind.DIRECTORY
    assert dir_node.is_dir
    assert not dir_node.is_file
    assert dir_node.tree is tree
    assert dir_node.created_at == clock.now()
    assert not dir_node.deleted

    file_node = tree.create_file("notes.txt", dir_node, b"text")
    assert file_node.kind is NodeKind.FILE
    assert file_node.is_file
    assert not file_node.is_dir
    assert file_node.data == b"text"


def test_kind_and_data_are_read_only(tree):
    file_node = tree.create_file("f", tree.root, b"x")

    with pytest.raises(AttributeError):
        file_node.kind = NodeKind.DIRECTORY
    with pytest.raises(AttributeError):
        file_node.data = b"y"


def test_file_children_are_absent(tree):
    """Files report no child sequence at all, directories an empty one."""
    file_node = tree.create_file("f", tree.root)
    dir_node = tree.create_directory("d", tree.root)

    assert file_node.entries is None
    assert file_node.children == ()
    assert dir_node.entries == ()


def test_setting_parent_to_file_is_refused(tree):
    """Assigning the anytree parent link directly still honours the file invariant."""
    file_node = tree.create_file("f", tree.root)
    orphan = tree.create_directory("d", tree.root)
    tree.delete(orphan, "-f")

    with pytest.raises(ActionNotAllowedError):
        orphan.parent = file_node
    assert orphan.parent is None
    assert file_node.children == ()


def test_setting_parent_to_node_of_other_tree_is_refused(tree):
    other = NodeTree()
    foreign = other.create_directory("foreign", other.root)

    with pytest.raises(ActionNotAllowedError):
        foreign.parent = tree.root
    with pytest.raises(ActionNotAllowedError):
        tree.root.children = [foreign]
    assert foreign.parent is not tree.root
    assert tree.root.children == ()


def test_pathname(demo_tree):
    tree, dir1, file1, *_ = demo_tree

    assert tree.root.pathname == "/"
    assert dir1.pathname == "/dir1"
    assert file1.pathname == "/dir1/file1.txt"


def test_delegating_methods(demo_tree, clock):
    tree, dir1, file1, dir2, file2 = demo_tree

    assert tree.root.find("dir1/file1.txt") is file1
    assert dir2.find("file2.txt") is file2
    with pytest.raises(NodeNotFoundError):
        tree.root.find("dir1/nope.txt")

    visited = []
    dir2.walk(visited.append)
    assert visited == [dir2, file2]
    assert list(tree.root.iter_nodes()) == [tree.root, dir1, file1, dir2, file2]

    clock.advance()
    file1.delete()
    assert file1.deleted
    assert file1.modified_at == clock.now()

    dir2.delete("--force")
    assert dir2.parent is None

    with pytest.raises(ActionNotAllowedError):
        tree.root.delete("-f")


def test_repr(demo_tree):
    tree, dir1, file1, *_ = demo_tree
    file1.delete()

    assert repr(dir1) == "INode('/dir1', kind=directory, ino=2)"
    assert repr(file1) == "INode('/dir1/file1.txt', kind=file, ino=3 deleted)"


@pytest.mark.parametrize("name", ["a", "file.txt", " spaced ", ".", ".."])
def test_validate_name_accepts(name):
    assert validate_name(name) == name


@pytest.mark.parametrize("name", ["", "a/b", "/", 3])
def test_validate_name_rejects(name):
    with pytest.raises(ValueError):
        validate_name(name)


def test_to_payload():
    assert to_payload("Hello, World!") == b"Hello, World!"
    assert isinstance(to_payload(bytearray(b"a")), bytes)
    with pytest.raises(ValueError):
        to_payload([1, 2, 3])
