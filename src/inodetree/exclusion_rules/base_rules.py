from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Sequence, Union

from inodetree.types import PathType

if TYPE_CHECKING:
    from inodetree.node_tree.inode import INode


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for node exclusion rules.

    Exclusion rules decide which nodes are left out of a listing produced by
    NodeTree.iterate_paths(). They only affect what is shown; the tree itself is never
    modified. Implementations must provide exclude(), which judges a single path;
    loading rules from files and adding individual rules are optional capabilities.

    NodeTree asks excludes() about each node. It turns the node into the path form
    exclude() expects (directories get a trailing slash) and, when hide_deleted is
    set, leaves out soft-deleted nodes without consulting the path rules at all.

    Attributes:
        hide_deleted (bool): Exclude tombstoned nodes regardless of their paths.

    Example:
        >>> class BackupFileRules(BaseExclusionRules):
        ...     def exclude(self, path: str) -> bool:
        ...         return path.endswith('.bak')
        >>> rules = BackupFileRules()
        >>> rules.exclude("dir1/old.bak")
        True
        >>> rules.exclude("dir1/")
        False
        >>> rules.add_rule("*.tmp")
        Traceback (most recent call last):
        ...
        NotImplementedError: BackupFileRules doesn't support adding individual rules.
    """

    hide_deleted: bool = False

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Determine if a given node path should be excluded based on the loaded rules.

        Args:
            path (str): Relative path of the node, e.g. ``dir1/file1.txt`` or ``dir1/``.

        Returns:
            bool: True if the node should be excluded, False if it should be included.
        """
        pass

    def excludes(self, path: str, node: "INode") -> bool:
        """
        Determine if a node found at a relative path should be left out of a listing.

        Args:
            path (str): Relative path of the node without a trailing slash, e.g. ``dir1``.
            node (INode): The node itself.

        Returns:
            bool: True if the node (and, for a directory, its subtree) should be skipped.
        """
        if self.hide_deleted and node.deleted:
            return True
        return self.exclude(path + "/" if node.is_dir else path)

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """
        Load and parse exclusion rules from one or more files.

        Rule types that don't support file operations use this default implementation.

        Args:
            rules_files: Path to a file or sequence of paths containing exclusion rules.

        Raises:
            NotImplementedError: If this rule type doesn't support loading from files.
            FileNotFoundError: If any rules file does not exist (for file-supporting rule types).
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support loading rules from files.")

    def add_rule(self, rule: str) -> None:
        """
        Add a single exclusion rule directly.

        Args:
            rule (str): The exclusion rule to add, e.g. a gitignore pattern like ``*.txt``.

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")
