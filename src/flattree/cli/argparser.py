"""Command-line argument parsing for flattree."""

import argparse
from pathlib import Path
from typing import Any, List, Optional, Sequence, Type, Union

from flattree import __version__
from flattree.exclusion_rules.base_rules import BaseExclusionRules
from flattree.exclusion_rules.size_rules import parse_file_size

DEFAULT_BUDGET = 40


def create_exclusion_action(exclusion_rules: BaseExclusionRules) -> Type[argparse.Action]:
    """Create an action class feeding -e/--exclude and -i/--ignore into `exclusion_rules`.

    Rules are added while parsing, so files and patterns keep their command-line order
    and a later ``!pattern`` can re-include what an earlier file excluded.
    """

    class ExclusionRulesAction(argparse.Action):
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
                exclusion_rules.load_rules(Path(str(values)))
            else:
                exclusion_rules.add_rule(str(values))

            seen = getattr(namespace, self.dest, None) or []
            setattr(namespace, self.dest, seen + [values])

    return ExclusionRulesAction


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number of lines: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"the budget must be at least 1, got {number}")
    return number


def file_size(value: str) -> int:
    try:
        size = parse_file_size(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))
    if size < 1:
        raise argparse.ArgumentTypeError(f"the size limit must be at least 1 byte, got {value!r}")
    return size


def _add_toggle(parser: argparse.ArgumentParser, name: str, help_on: str, short: Optional[str] = None) -> None:
    flags = [f"--{name}"] if short is None else [short, f"--{name}"]
    parser.add_argument(*flags, action="store_true", help=help_on)
    parser.add_argument(f"--no-{name}", action="store_true", help=argparse.SUPPRESS)


def create_parser(exclusion_rules: BaseExclusionRules) -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Args:
        exclusion_rules: The exclusion rules object to update during parsing.
    """
    description = """
    flattree: show a directory as a tree that always fits in a given number of lines.

    Children are taken fairly: every directory at a level gets one more entry before
    any gets a second, and deeper levels are only explored once the shallower ones are
    fully shown. Directories that could not be fully shown end with an
    "... N more files" line.
    """

    epilog = """
    Examples:
      # At most 40 lines (default)
      flattree /path/to/project

      # At most 100 lines, hidden files included
      flattree -n 100 -H /path/to/project

      # Directories only, biggest files claimed first
      flattree -f --sort-by-size /path/to/project

      # Extra ignore patterns and files, in order
      flattree -e .dockerignore -i "*.log" -i "!keep.log" /path/to/project

      # Nested JSON and a summary on stderr
      flattree --format json -s stderr /path/to/project
    """

    parser = argparse.ArgumentParser(
        prog="flattree",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"flattree {__version__}", help="Show the version and exit"
    )

    ExclusionAction = create_exclusion_action(exclusion_rules)

    parser.add_argument("directory", type=Path, help="The directory to show.")
    parser.add_argument(
        "-n",
        "--budget",
        type=positive_int,
        default=DEFAULT_BUDGET,
        metavar="LINES",
        help=f"Maximum number of lines in the tree (default: {DEFAULT_BUDGET}).",
    )
    parser.add_argument(
        "-e",
        "--exclude",
        type=Path,
        metavar="FILE",
        action=ExclusionAction,
        help="Ignore file in .gitignore format (can be specified multiple times).",
    )
    parser.add_argument(
        "-i",
        "--ignore",
        type=str,
        metavar="PATTERN",
        action=ExclusionAction,
        help="Gitignore-style pattern to exclude (can be specified multiple times).",
    )
    parser.add_argument(
        "-M",
        "--max-size",
        metavar="SIZE",
        type=file_size,
        help="Exclude files larger than SIZE (e.g. 500KB, 1MiB). SIZE must be at least 1 byte.",
    )
    _add_toggle(parser, "hidden", "Show files whose name starts with a dot.", short="-H")
    _add_toggle(parser, "only-folders", "Only show directories.", short="-f")
    _add_toggle(parser, "show-gitignored", "Show files excluded by the root .gitignore.")
    _add_toggle(parser, "sizes", "Compute file sizes for display.")
    parser.add_argument(
        "-w",
        "--whale-spotting",
        action="store_true",
        help="Find the biggest entries: show hidden and gitignored files, largest claimed first.",
    )
    _add_toggle(parser, "dates", "Compute modification dates for display.")
    _add_toggle(parser, "permissions", "Compute permissions for display.")
    _add_toggle(parser, "show-git-info", "Compute git status for display.")
    parser.add_argument("--sort-by-count", action="store_true", help="Claim directories with most entries first.")
    parser.add_argument("--sort-by-date", action="store_true", help="Claim most recently modified entries first.")
    parser.add_argument("--sort-by-size", action="store_true", help="Claim largest entries first.")
    parser.add_argument("--no-sort", action="store_true", help="Claim entries by name (default).")
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text).",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output file path. If not specified, output is written to stdout.",
    )
    parser.add_argument(
        "-s",
        "--summary",
        metavar="DEST",
        choices=["stderr", "stdout", "file"],
        help="Print summary report. Valid destinations: stderr, stdout, file (requires -o)",
    )
    parser.add_argument(
        "-P",
        "--permission-action",
        choices=["ignore", "warn", "fail"],
        default="ignore",
        help="How to handle unreadable files and directories (default: ignore).",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate combinations argparse cannot check on its own.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.summary == "file" and not args.output:
        raise ValueError("--summary=file requires -o/--output to be specified")
