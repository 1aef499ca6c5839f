"""Budgeted, fair expansion of a directory into a flattened tree.

This module provides the TreeBuilder class, which grows a flat list of lines from a root
path without ever listing more of the hierarchy than the budget lets it show.
"""

from pathlib import Path
from typing import List, Optional, Union

from flattree.exceptions import InvalidBudgetError
from flattree.exclusion_rules.base_rules import BaseExclusionRules
from flattree.flat_tree.child_iterator import ChildIterator
from flattree.flat_tree.child_lister import ChildLister
from flattree.flat_tree.permission_action import PermissionAction
from flattree.flat_tree.tree_line import Tree, TreeLine
from flattree.tree_options import TreeOptions
from flattree.types import PathType


class TreeBuilder:
    """Builds a flattened tree of at most a given number of lines.

    The builder keeps two index-aligned lists: `lines`, the lines appended so far, and
    `child_iterators`, where `child_iterators[i]` hands out the children of `lines[i]`.
    A builder is single use.

    Expansion works one depth at a time. In each round, every line at the current depth
    that still has unclaimed children gets exactly one more child appended. Rounds repeat
    at the same depth as long as one of them appends something, then expansion moves one
    level deeper. It stops as soon as the budget is reached, even in the middle of a
    round, or when no depth can grow anymore. This keeps the tree as wide as possible near
    the root and keeps a large directory from starving its siblings.

    Once expansion stops, each directory that still has unclaimed children has its last
    appended child replaced by a placeholder counting that child plus the unclaimed ones.
    Lines are finally sorted by path, which puts each directory right before its
    descendants.

    Error Handling:
        With PermissionAction.IGNORE (default), a child that cannot be inspected is
        skipped and a directory that cannot be listed is shown without children; both are
        recorded in `Tree.warnings`. With PermissionAction.RAISE, the first such error
        aborts the build with a PermissionError.

    Attributes:
        root_path (Path): Root of the tree, as given.
        options (TreeOptions): Visibility and sort options used when listing children.
        permission_action (PermissionAction): How to handle filesystem errors.
        lines (List[TreeLine]): Lines appended so far, in append order.
        child_iterators (List[ChildIterator]): Cursor of each line, same order.
        warnings (List[str]): Absorbed errors.

    Example:
        >>> builder = TreeBuilder("src")  # doctest: +SKIP
        >>> tree = builder.build(20)  # doctest: +SKIP
        >>> len(tree) <= 20  # doctest: +SKIP
        True
    """

    def __init__(
        self,
        root_path: PathType,
        options: Optional[TreeOptions] = None,
        exclusion_rules: Optional[BaseExclusionRules] = None,
        permission_action: Union[str, PermissionAction] = PermissionAction.IGNORE,
    ) -> None:
        """Initialize the builder with the root line and its cursor.

        Args:
            root_path: Directory (or file) the tree starts from.
            options: Visibility and sort options. Defaults to TreeOptions().
            exclusion_rules: Rules for leaving paths out, on top of the options and the root
                .gitignore (read when `options.respect_git_ignore` is set).
            permission_action: "ignore" or "raise", or a PermissionAction.

        Raises:
            FileNotFoundError: If the root path doesn't exist.
            ValueError: If permission_action is not a known action.
            PermissionError: If the root cannot be listed and permission_action is RAISE.
        """
        self.root_path = Path(root_path)
        if not self.root_path.exists():
            raise FileNotFoundError(f"Root path does not exist: {self.root_path}")

        if isinstance(permission_action, str):
            try:
                permission_action = PermissionAction(permission_action.lower())
            except ValueError:
                raise ValueError(f"Invalid permission_action: {permission_action}. Must be one of: 'ignore', 'raise'")
        self.permission_action = permission_action

        self.options = options if options is not None else TreeOptions()
        rules = self.options.exclusion_rules_for(self.root_path, exclusion_rules)
        self._lister = ChildLister(self.root_path, self.options, rules)
        self.lines: List[TreeLine] = []
        self.child_iterators: List[ChildIterator] = []
        self.warnings: List[str] = []
        self._built = False

        # The root cannot be skipped, so failing to inspect it is always fatal
        self._append(TreeLine.create(self.root_path, 0))

    def build(self, budget: int) -> Tree:
        """Expand, prune and sort the lines into a tree of at most `budget` lines.

        Args:
            budget: Maximum number of lines in the tree. Must be at least 1.

        Returns:
            The finished tree.

        Raises:
            InvalidBudgetError: If budget is not a positive integer.
            RuntimeError: If the builder was already used.
            PermissionError: On filesystem errors when permission_action is RAISE.
        """
        if isinstance(budget, bool) or not isinstance(budget, int) or budget < 1:
            raise InvalidBudgetError(budget)
        if self._built:
            raise RuntimeError("A TreeBuilder can only build one tree")
        self._built = True

        self._expand(budget)
        self._prune()
        self.lines.sort(key=lambda line: line.path.parts)
        return Tree(self.lines, self.warnings)

    def _expand(self, budget: int) -> None:
        current_depth = 0
        max_depth = 0
        while len(self.lines) < budget:
            appended = False
            # Lines appended during this round are one level deeper and not revisited
            for index in range(len(self.lines)):
                if self.lines[index].depth != current_depth:
                    continue
                if len(self.lines) >= budget:
                    return
                if self._append_next_child(index):
                    appended = True
                    max_depth = max(max_depth, current_depth + 1)
            if not appended:
                if max_depth > current_depth:
                    current_depth += 1
                else:
                    break

    def _append_next_child(self, index: int) -> bool:
        """Append the next child of `lines[index]` that can be inspected.

        Returns:
            True if a child was appended, False once the directory has nothing left.
        """
        iterator = self.child_iterators[index]
        depth = self.lines[index].depth + 1
        child = iterator.take_next()
        while child is not None:
            try:
                line = TreeLine.create(child, depth)
            except OSError as e:
                self._absorb(child, e)
            else:
                iterator.last_emitted_line = len(self.lines)
                self._append(line)
                return True
            child = iterator.take_next()
        return False

    def _append(self, line: TreeLine) -> None:
        try:
            iterator = ChildIterator.open(line, self._lister)
        except OSError as e:
            self._absorb(line.path, e)
            iterator = ChildIterator()
        self.lines.append(line)
        self.child_iterators.append(iterator)

    def _absorb(self, path: Path, error: OSError) -> None:
        """Record a filesystem error as a warning, or raise it under PermissionAction.RAISE."""
        if self.permission_action == PermissionAction.RAISE:
            if isinstance(error, PermissionError):
                raise PermissionError(f"Access denied to {path}: {error}") from error
            raise PermissionError(f"Error accessing {path}: {error}") from error
        self.warnings.append(f"Skipped {path}: {error.strerror or error}")

    def _prune(self) -> None:
        for iterator in self.child_iterators:
            index = iterator.last_emitted_line
            if index == 0:
                continue
            count = iterator.remaining_count()
            if count == 0:
                continue
            # The replaced child is no longer listed, so it counts towards the placeholder
            self.lines[index] = self.lines[index].pruned(count + 1)


def build_tree(
    root_path: PathType,
    budget: int,
    *,
    options: Optional[TreeOptions] = None,
    exclusion_rules: Optional[BaseExclusionRules] = None,
    permission_action: Union[str, PermissionAction] = PermissionAction.IGNORE,
) -> Tree:
    """Build a flattened tree of at most `budget` lines rooted at `root_path`.

    Shortcut for ``TreeBuilder(root_path, ...).build(budget)``.

    Example:
        >>> tree = build_tree(".", 30)  # doctest: +SKIP
        >>> for line in tree:  # doctest: +SKIP
        ...     print("  " * line.depth + line.name)
    """
    builder = TreeBuilder(
        root_path, options=options, exclusion_rules=exclusion_rules, permission_action=permission_action
    )
    return builder.build(budget)
