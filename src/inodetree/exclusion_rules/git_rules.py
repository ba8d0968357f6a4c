"""Exclusion rules for inode tree listings written in .gitignore syntax."""

from os import PathLike
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

from pathspec import PathSpec

from inodetree.types import PathType

from .base_rules import BaseExclusionRules


class GitIgnoreExclusionRules(BaseExclusionRules):
    """Hide nodes of an inode tree listing whose paths match .gitignore patterns.

    Patterns are kept as the lines they were given in, in order, and compiled into a
    single pathspec matcher whenever a line is added. Paths are those produced by
    NodeTree.iterate_paths(), relative to the listing's start node, so ``dir2/``
    hides the directory dir2 and everything under it, while ``*.txt`` followed by
    ``!file1.txt`` hides every text file except file1.txt.

    Blank lines and ``#`` comments are kept in rules but never match.

    Attributes:
        spec (PathSpec): Matcher compiled from the current rule lines.
        hide_deleted (bool): Also hide soft-deleted nodes, whatever their paths.

    Example:
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rule("dir2/")
        >>> rules.exclude("dir2/")
        True
        >>> rules.exclude("dir1/file1.txt")
        False
        >>> rules.rules
        ('dir2/',)
    """

    def __init__(
        self, rules_files: Optional[Union[PathType, Sequence[PathType]]] = None, hide_deleted: bool = False
    ) -> None:
        """Initialize the rules, optionally loading patterns from files.

        Args:
            rules_files: Path(s) to file(s) containing .gitignore patterns.
            hide_deleted: Hide soft-deleted nodes as well.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        self.hide_deleted = hide_deleted
        self._lines: List[str] = []
        self.spec = PathSpec.from_lines("gitwildmatch", self._lines)

        if rules_files is not None:
            self.load_rules(rules_files)

    @property
    def rules(self) -> Tuple[str, ...]:
        """Rule lines in the order they were added."""
        return tuple(self._lines)

    def exclude(self, path: str) -> bool:
        """Check if a node path is hidden by the patterns.

        Args:
            path: Relative node path, with a trailing slash for directories.

        Returns:
            bool: True if the last pattern matching the path is not a negation.
        """
        return self.spec.match_file(path)

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Append the lines of one or more .gitignore-style files to the rules.

        Args:
            rules_files: Path(s) to file(s) containing .gitignore patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist. Files named before
                the missing one have already been added.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.is_file():
                raise FileNotFoundError(f"Rules file not found: {path}")
            self._add_lines(path.read_text().splitlines())

    def add_rule(self, rule: str) -> None:
        """Add a single .gitignore pattern such as ``*.txt``, ``dir2/`` or ``!keep.txt``.

        Example:
            >>> rules = GitIgnoreExclusionRules()
            >>> rules.add_rule("*.txt")
            >>> rules.add_rule("!file1.txt")
            >>> rules.exclude("dir2/file2.txt")
            True
            >>> rules.exclude("dir1/file1.txt")
            False
        """
        self._add_lines([rule])

    def _add_lines(self, lines: Sequence[str]) -> None:
        self._lines.extend(lines)
        self.spec = PathSpec.from_lines("gitwildmatch", self._lines)
