"""Command-line interface for inodetree.

This module runs the inodetree demonstration: it builds a small in-memory tree,
applies any requested deletions, lists every node in pre-order, prints a few nodes
individually and resolves paths against the tree.

Exit Codes:
    0: Successful completion
    1: Runtime error, or at least one path failed to resolve
    2: Command-line syntax error
    141: Broken pipe (output closed early, e.g. when piping to `head`)

Example:
    # Run the demonstration
    $ inodetree

    # Hard-delete dir2, then look for its file
    $ inodetree --delete dir2 -f --find dir2/file2.txt
"""

import os
import sys
from datetime import timezone
from typing import List, Optional, Sequence, Tuple

from inodetree.cli.argparser import create_parser, validate_args
from inodetree.clock import BaseClock
from inodetree.exceptions import NodeNotFoundError
from inodetree.exclusion_rules.git_rules import GitIgnoreExclusionRules
from inodetree.formatting import format_info, get_tree_representation
from inodetree.node_tree.inode import INode
from inodetree.node_tree.node_tree import NodeTree


class DemoTree:
    """The demonstration tree and handles to the nodes the demonstration prints.

    Attributes:
        tree (NodeTree): The tree itself.
        dir1 (INode): ``/dir1``
        file1 (INode): ``/dir1/file1.txt`` holding "Hello, World!"
        dir2 (INode): ``/dir2``
        file2 (INode): ``/dir2/file2.txt`` holding "Another file content."
    """

    def __init__(self, clock: Optional[BaseClock] = None) -> None:
        self.tree = NodeTree(clock=clock)
        self.dir1 = self.tree.create_directory("dir1", self.tree.root)
        self.file1 = self.tree.create_file("file1.txt", self.dir1, b"Hello, World!")
        self.dir2 = self.tree.create_directory("dir2", self.tree.root)
        self.file2 = self.tree.create_file("file2.txt", self.dir2, b"Another file content.")

    def default_lookups(self) -> List[Tuple[INode, str, str]]:
        """Lookups performed when none are requested: (start node, path, heading)."""
        return [
            (self.tree.root, "dir1/file1.txt", "Finding dir1/file1.txt:"),
            (self.dir2, "file2.txt", "Finding file2.txt in dir2:"),
        ]


def main(argv: Optional[Sequence[str]] = None, clock: Optional[BaseClock] = None) -> None:
    """Main entry point for the inodetree command-line interface.

    Args:
        argv: Arguments to parse instead of sys.argv[1:].
        clock: Clock for the demonstration tree. Defaults to the system clock.

    Exit codes:
        0: Successful completion
        1: Runtime error, or at least one path failed to resolve
        2: Command-line syntax error
        141: Broken pipe
    """
    lookup_failed = False

    try:
        # Create the exclusion rules object that will be populated during parsing
        exclusion_rules = GitIgnoreExclusionRules()
        parser = create_parser(exclusion_rules)
        args = parser.parse_args(argv)
        validate_args(args)
        exclusion_rules.hide_deleted = args.hide_deleted

        tz = timezone.utc if args.utc else None
        demo = DemoTree(clock=clock)
        tree = demo.tree

        options = ["--force"] if args.force else []
        for path in args.delete:
            tree.delete(tree.find(tree.root, path), *options)

        try:
            for _, node in tree.iterate_paths(exclusion_rules=exclusion_rules):
                print(format_info(node, tz))

            if args.tree:
                print(get_tree_representation(tree.root))

            for node in (tree.root, demo.file1, demo.file2):
                print(format_info(node, tz))

            if args.find:
                lookups = [(tree.root, path, f"Finding {path}:") for path in args.find]
            else:
                lookups = demo.default_lookups()

            for start, path, heading in lookups:
                print(heading)
                try:
                    print(format_info(tree.find(start, path), tz))
                except NodeNotFoundError as e:
                    print(f"Error: {str(e)}", file=sys.stderr)
                    lookup_failed = True

            sys.stdout.flush()
        except BrokenPipeError:
            # Point stdout at devnull so the interpreter's final flush does not fail again
            devnull = os.open(os.devnull, os.O_WRONLY)
            os.dup2(devnull, sys.stdout.fileno())
            sys.exit(141)

    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    if lookup_failed:
        sys.exit(1)


if __name__ == "__main__":
    main()
