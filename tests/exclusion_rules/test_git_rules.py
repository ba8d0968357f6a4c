from pathlib import Path

import pytest

from inodetree.exclusion_rules.base_rules import BaseExclusionRules
from inodetree.exclusion_rules.git_rules import GitIgnoreExclusionRules


@pytest.fixture
def temp_ignore_file(tmp_path):
    ignore_file = tmp_path / ".treeignore"
    ignore_file.write_text("# listing filters\n*.txt\n!file2.txt\ntmp/\n")
    return ignore_file


@pytest.fixture
def temp_second_ignore_file(tmp_path):
    ignore_file = tmp_path / ".extraignore"
    ignore_file.write_text("*.log\n!keep.log\n")
    return ignore_file


@pytest.mark.parametrize(
    "path,expected",
    [
        ("dir1/file1.txt", True),
        ("dir2/file2.txt", False),
        ("dir1/", False),
        ("tmp/", True),
        ("dir1/tmp/", True),
        ("tmp/scratch.bin", True),
        ("notes.md", False),
        ("deep/nested/a.txt", True),
    ],
)
def test_gitignore_exclusion_rules(temp_ignore_file, path, expected):
    rules = GitIgnoreExclusionRules(temp_ignore_file)
    assert rules.exclude(path) == expected, f"Failed for path: {path}"


def test_empty_file_excludes_nothing(tmp_path):
    empty = tmp_path / "empty"
    empty.write_text("")
    rules = GitIgnoreExclusionRules(empty)
    assert not rules.exclude("dir1/file1.txt")


def test_nonexistent_file():
    with pytest.raises(FileNotFoundError):
        GitIgnoreExclusionRules("nonexistent_file")


def test_multiple_files(temp_ignore_file, temp_second_ignore_file):
    rules = GitIgnoreExclusionRules([temp_ignore_file, temp_second_ignore_file])

    assert rules.exclude("a.txt")
    assert not rules.exclude("file2.txt")
    assert rules.exclude("debug.log")
    assert not rules.exclude("keep.log")


def test_load_rules_incrementally(temp_ignore_file, temp_second_ignore_file):
    rules = GitIgnoreExclusionRules(str(temp_ignore_file))
    assert not rules.exclude("debug.log")

    rules.load_rules(temp_second_ignore_file)

    assert rules.exclude("a.txt")
    assert rules.exclude("debug.log")


def test_add_rule_order_matters():
    rules = GitIgnoreExclusionRules()
    rules.add_rule("!file1.txt")
    rules.add_rule("*.txt")
    assert rules.exclude("dir1/file1.txt")

    rules = GitIgnoreExclusionRules()
    rules.add_rule("*.txt")
    rules.add_rule("!file1.txt")
    assert not rules.exclude("dir1/file1.txt")


def test_add_rule_after_loading(temp_ignore_file):
    rules = GitIgnoreExclusionRules(Path(temp_ignore_file))
    rules.add_rule("dir2/")
    assert rules.exclude("dir2/")
    assert rules.exclude("dir1/file1.txt")


def test_none_does_not_exclude():
    rules = GitIgnoreExclusionRules(None)
    assert not rules.exclude("dir1/")
    assert not rules.exclude("dir1/file1.txt")


def test_base_rules_optional_capabilities():
    class NothingExcluded(BaseExclusionRules):
        def exclude(self, path: str) -> bool:
            return False

    rules = NothingExcluded()
    with pytest.raises(NotImplementedError):
        rules.add_rule("*.txt")
    with pytest.raises(NotImplementedError):
        rules.load_rules("rules.txt")


def test_rules_keep_lines_in_order(temp_ignore_file):
    rules = GitIgnoreExclusionRules(temp_ignore_file)
    rules.add_rule("dir2/")

    assert rules.rules == ("# listing filters", "*.txt", "!file2.txt", "tmp/", "dir2/")


def test_excludes_matches_directories_with_trailing_slash(demo_tree):
    tree, dir1, file1, dir2, file2 = demo_tree
    rules = GitIgnoreExclusionRules()
    rules.add_rule("dir1/")
    rules.add_rule("file2.txt/")

    assert rules.excludes("dir1", dir1)
    assert not rules.excludes("dir1", file1)
    assert not rules.excludes("dir2/file2.txt", file2)


@pytest.mark.parametrize("hide_deleted,expected", [(False, False), (True, True)])
def test_excludes_hides_tombstones_on_request(demo_tree, hide_deleted, expected):
    tree, dir1, *_ = demo_tree
    tree.delete(dir1)
    rules = GitIgnoreExclusionRules(hide_deleted=hide_deleted)

    assert rules.excludes("dir1", dir1) == expected


def test_base_rules_excludes_uses_exclude(demo_tree):
    tree, dir1, file1, *_ = demo_tree

    class DirectoriesExcluded(BaseExclusionRules):
        def exclude(self, path: str) -> bool:
            return path.endswith("/")

    rules = DirectoriesExcluded()
    assert rules.excludes("dir1", dir1)
    assert not rules.excludes("dir1/file1.txt", file1)
