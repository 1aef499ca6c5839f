"""Command-line interface for flattree.

Builds a budgeted tree of a directory and writes it as indented text or nested JSON.

Exit Codes:
    0: Successful completion
    1: Runtime error during execution
    2: Command-line syntax error
    126: Unreadable file or directory with -P fail
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE)

Example:
    $ flattree -n 20 /path/to/dir
    $ flattree -P warn --format json /path/to/dir
"""

import sys
from typing import List, Optional

from flattree.cli.argparser import create_parser, validate_args
from flattree.cli.safe_writer import SafeWriter
from flattree.cli.signal_handler import setup_signal_handling, signal_handler
from flattree.exclusion_rules.base_rules import BaseExclusionRules
from flattree.exclusion_rules.composite_rules import CompositeExclusionRules
from flattree.exclusion_rules.git_rules import GitIgnoreExclusionRules
from flattree.exclusion_rules.size_rules import SizeExclusionRules
from flattree.flat_tree.permission_action import PermissionAction
from flattree.flat_tree.tree_builder import build_tree
from flattree.flat_tree.tree_line import Tree
from flattree.output import format_json, stream_text
from flattree.tree_options import TreeOptions


def format_counts(tree: Tree) -> str:
    """Format the tree's counts into a human-readable summary."""
    return "\n".join(
        [
            f"Lines: {len(tree)}",
            f"Directories: {tree.directory_count()}",
            f"Files: {tree.file_count()}",
            f"Unlisted: {tree.unlisted_count()}",
            f"Warnings: {len(tree.warnings)}",
        ]
    )


def combine_rules(pattern_rules: GitIgnoreExclusionRules, size_rules: Optional[SizeExclusionRules]) -> BaseExclusionRules:
    rules: List[BaseExclusionRules] = [pattern_rules]
    if size_rules is not None:
        rules.append(size_rules)
    return CompositeExclusionRules(rules)


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the flattree command-line interface.

    Args:
        argv: Arguments to parse instead of sys.argv[1:].
    """
    setup_signal_handling()

    try:
        pattern_rules = GitIgnoreExclusionRules()
        parser = create_parser(pattern_rules)
        args = parser.parse_args(argv)
        validate_args(args)

        options = TreeOptions()
        options.apply(args)
        size_rules = SizeExclusionRules(args.max_size, root_path=args.directory) if args.max_size else None
        exclusion_rules = combine_rules(pattern_rules, size_rules)

        perm_action = {
            "ignore": PermissionAction.IGNORE,
            "warn": PermissionAction.IGNORE,
            "fail": PermissionAction.RAISE,
        }[args.permission_action]

        try:
            tree = build_tree(
                args.directory,
                args.budget,
                options=options,
                exclusion_rules=exclusion_rules,
                permission_action=perm_action,
            )
        except PermissionError as e:
            print(f"Error: {str(e)}", file=sys.stderr)
            sys.exit(126)

        if args.permission_action == "warn":
            for warning in tree.warnings:
                print(f"Warning: {warning}", file=sys.stderr)

        output_file = args.output if args.output else sys.stdout.fileno()
        with SafeWriter(output_file) as safe_writer:
            try:
                if args.format == "json":
                    safe_writer.write(format_json(tree))
                else:
                    safe_writer.write_lines(stream_text(tree))

                if args.summary in ("stdout", "file"):
                    safe_writer.write("\n" + format_counts(tree) + "\n")
                elif args.summary == "stderr":
                    print(format_counts(tree), file=sys.stderr)
            except BrokenPipeError:
                pass  # SafeWriter will automatically close in the context manager

    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    exit_code = signal_handler.exit_code()
    if exit_code is not None:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
