"""Command-line argument parsing for inodetree.

This module defines the command-line interface of the inodetree demonstration,
handling argument parsing and validation.
"""

import argparse
import os
from pathlib import Path
from typing import Any, List, Optional, Sequence, Type, Union

from inodetree import __version__
from inodetree.exclusion_rules.base_rules import BaseExclusionRules


def create_exclusion_action(exclusion_rules: BaseExclusionRules) -> Type[argparse.Action]:
    """Create a custom action class for handling exclusion rules.

    The returned action updates the provided exclusion rules object as arguments are
    processed, preserving the order in which -e and -i options appear on the command line.

    Args:
        exclusion_rules: The exclusion rules object to update during parsing.

    Returns:
        A custom action class for use with argparse.
    """

    class ExclusionRulesAction(argparse.Action):
        """Action to update exclusion rules as arguments are processed."""

        def __init__(self, option_strings: List[str], dest: str, **kwargs: Any) -> None:
            super().__init__(option_strings, dest, **kwargs)

        def __call__(
            self,
            parser: argparse.ArgumentParser,
            namespace: argparse.Namespace,
            values: Union[str, Sequence[Any], None],
            option_string: Optional[str] = None,
        ) -> None:
            if values is None:
                return

            if option_string in ("-e", "--exclude"):
                if isinstance(values, (str, os.PathLike)):
                    exclusion_rules.load_rules(values)
                else:
                    exclusion_rules.load_rules(Path(str(values)))
                dest = "exclude"
            else:  # -i/--ignore
                exclusion_rules.add_rule(str(values))
                dest = "ignore"

            if getattr(namespace, dest, None) is None:
                setattr(namespace, dest, [])
            getattr(namespace, dest).append(values)

    return ExclusionRulesAction


def create_parser(exclusion_rules: BaseExclusionRules) -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Args:
        exclusion_rules: The exclusion rules object to update during parsing.

    Returns:
        An ArgumentParser instance configured with inodetree's options.
    """
    description = """
    inodetree: a demonstration of an in-memory inode tree.

    Builds a small tree of directories and files held entirely in memory:

      /
      ├── dir1/
      │   └── file1.txt   "Hello, World!"
      └── dir2/
          └── file2.txt   "Another file content."

    then optionally deletes nodes, lists every node in pre-order in ls -l style,
    prints the root and both files, and resolves paths against the tree.
    """

    epilog = """
    Examples:
      # Run the demonstration
      inodetree

      # Soft-delete a node (it is still listed and still found)
      inodetree --delete dir1/file1.txt

      # Hard-delete a node (it is unlinked from its parent)
      inodetree --delete dir2 --force

      # Resolve paths from the root
      inodetree --find dir1/file1.txt --find dir1/nope.txt

      # Leave nodes out of the listing with gitignore-style patterns
      inodetree -i "*.txt" -i "!file2.txt"

      # Also print a tree outline, with times in UTC
      inodetree --tree --utc
    """

    parser = argparse.ArgumentParser(
        prog="inodetree",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"inodetree {__version__}", help="Show the version and exit"
    )

    ExclusionAction = create_exclusion_action(exclusion_rules)

    parser.add_argument(
        "-e",
        "--exclude",
        type=Path,
        metavar="FILE",
        action=ExclusionAction,
        help="Path to a file of gitignore-style patterns for leaving nodes out of the listing (repeatable).",
    )
    parser.add_argument(
        "-i",
        "--ignore",
        type=str,
        metavar="PATTERN",
        action=ExclusionAction,
        help=(
            "Individual gitignore-style pattern for leaving nodes out of the listing. Directories are "
            "matched with a trailing slash (dir2/). Repeatable, processed in order with -e/--exclude."
        ),
    )
    parser.add_argument(
        "-d",
        "--delete",
        metavar="PATH",
        action="append",
        default=[],
        help="Delete the node at PATH (relative to the root) before listing. Soft unless -f is given. Repeatable.",
    )
    parser.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="Make --delete unlink nodes from their parent instead of marking them deleted.",
    )
    parser.add_argument(
        "--find",
        metavar="PATH",
        action="append",
        default=[],
        help=(
            "Resolve PATH from the root and print the node (repeatable). By default dir1/file1.txt is "
            "resolved from the root and file2.txt from dir2."
        ),
    )
    parser.add_argument(
        "-t",
        "--tree",
        action="store_true",
        help="Also print a tree outline of the nodes.",
    )
    parser.add_argument(
        "--hide-deleted",
        action="store_true",
        help="Leave soft-deleted nodes out of the listing.",
    )
    parser.add_argument(
        "--utc",
        action="store_true",
        help="Print times in UTC instead of local time.",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.force and not args.delete:
        raise ValueError("-f/--force requires -d/--delete to be specified")
