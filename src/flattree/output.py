"""Serializations of a flattened tree for the command line."""

import json
from typing import Iterator

from flattree.flat_tree.nesting import to_dict
from flattree.flat_tree.tree_line import Tree

INDENT = "  "


def stream_text(tree: Tree) -> Iterator[str]:
    """Yield one line per tree line, indented by depth, directories suffixed with '/'.

    Example:
        >>> from flattree import build_tree
        >>> print("".join(stream_text(build_tree("src", 4))))  # doctest: +SKIP
        src/
          main.py
          utils/
            ... 3 more files
    """
    for line in tree:
        suffix = "/" if line.is_dir() else ""
        yield f"{INDENT * line.depth}{line.name}{suffix}\n"


def format_json(tree: Tree) -> str:
    """Render the tree as nested JSON objects."""
    return json.dumps(to_dict(tree), indent=2, ensure_ascii=False) + "\n"
