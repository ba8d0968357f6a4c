"""Delete mode enum for choosing between tombstoning and unlinking a node."""

from enum import Enum
from typing import Iterable

# Option tokens that request a hard delete
FORCE_OPTIONS = frozenset({"--force", "-f"})


class DeleteMode(str, Enum):
    """How a node is removed by NodeTree.delete.

    Values:
        SOFT: Mark the node deleted and refresh its modification time; it stays in the tree (default)
        HARD: Unlink the node from its parent's children
    """

    SOFT = "soft"
    HARD = "hard"

    @classmethod
    def from_options(cls, options: Iterable[str]) -> "DeleteMode":
        """Select a delete mode from command-line style option tokens.

        A hard delete is chosen when either ``--force`` or ``-f`` is present. Any other
        token is ignored.

        Example:
            >>> DeleteMode.from_options(["-f"])
            <DeleteMode.HARD: 'hard'>
            >>> DeleteMode.from_options(["--verbose"])
            <DeleteMode.SOFT: 'soft'>
        """
        if FORCE_OPTIONS.intersection(options):
            return cls.HARD
        return cls.SOFT
