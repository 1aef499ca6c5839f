"""Explicit parent/child structure for consumers that need random access.

A `Tree` only implies its nesting through line order and depth. These helpers rebuild
that nesting as anytree nodes, checking on the way that the lines really form a tree.
"""

from typing import Any, Dict, List, Optional

from anytree import Node
from anytree.exporter import DictExporter

from flattree.flat_tree.tree_line import Tree


def to_node_tree(tree: Tree) -> Node:
    """Rebuild the nesting of `tree` as anytree nodes.

    Each node carries the `line` it was made from, the line's `kind`, its `rel_path` relative
    to the root, and, for placeholders, the `count` of entries it stands for.

    Raises:
        ValueError: If the tree is empty, has more than one root, or a line is more than
            one level deeper than the line before it.

    Example:
        >>> from flattree import build_tree
        >>> root = to_node_tree(build_tree("src", 10))  # doctest: +SKIP
        >>> [child.name for child in root.children]  # doctest: +SKIP
        ['main.py', 'utils']
    """
    if not len(tree):
        raise ValueError("Cannot nest an empty tree")

    root_path = tree.root.path
    root: Optional[Node] = None
    stack: List[Node] = []
    for line in tree:
        while stack and stack[-1].line.depth >= line.depth:
            stack.pop()
        parent = stack[-1] if stack else None
        if parent is None and root is not None:
            raise ValueError(f"Line {line.path} is a second root")
        if parent is not None and parent.line.depth != line.depth - 1:
            raise ValueError(f"Line {line.path} at depth {line.depth} has no parent at depth {line.depth - 1}")
        if parent is None and line.depth != 0:
            raise ValueError(f"First line {line.path} must have depth 0, not {line.depth}")

        node = Node(
            line.name,
            parent=parent,
            line=line,
            kind=line.content.value,
            rel_path=line.path.relative_to(root_path).as_posix(),
            count=line.pruned_count if line.is_pruned() else None,
        )
        if root is None:
            root = node
        stack.append(node)

    assert root is not None
    return root


def to_dict(tree: Tree) -> Dict[str, Any]:
    """Export `tree` as nested dictionaries with `name`, `kind`, `rel_path`, `count` and `children`."""
    exporter = DictExporter(
        attriter=lambda attrs: [
            (key, value) for key, value in attrs if not key.startswith("_") and key != "line" and value is not None
        ]
    )
    return exporter.export(to_node_tree(tree))
