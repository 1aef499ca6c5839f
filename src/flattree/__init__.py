"""Budgeted, flattened directory trees.

This package turns a directory hierarchy into a flat, depth-annotated list of at most
N entries, expanded fairly across siblings and depths, with placeholders marking the
children that did not fit.
"""

from importlib.metadata import PackageNotFoundError, version

from flattree.flat_tree.tree_builder import TreeBuilder, build_tree
from flattree.flat_tree.tree_line import Tree, TreeLine
from flattree.types import LineType

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("flattree")
except PackageNotFoundError:
    __version__ = "unknown"

__all__ = ["LineType", "Tree", "TreeBuilder", "TreeLine", "build_tree", "__version__"]
