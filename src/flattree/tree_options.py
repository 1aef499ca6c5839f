"""Options deciding which children a tree may show and in which order they are claimed.

The tree builder does not interpret these options itself. They are consumed by the
child lister, which filters and orders each directory's snapshot before the builder's
cursor hands children out one at a time.
"""

import argparse
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from flattree.exclusion_rules.base_rules import BaseExclusionRules
from flattree.exclusion_rules.composite_rules import CompositeExclusionRules
from flattree.exclusion_rules.git_rules import GitIgnoreExclusionRules
from flattree.types import PathType

GITIGNORE_FILE = ".gitignore"


class Sort(str, Enum):
    """Key used to order siblings before they are claimed.

    Values:
        NONE: Alphabetical by name (default).
        COUNT: Directories with the most direct entries first.
        DATE: Most recently modified first.
        SIZE: Largest first.
    """

    NONE = "none"
    COUNT = "count"
    DATE = "date"
    SIZE = "size"


@dataclass
class TreeOptions:
    """Options defining how the tree should be built and displayed.

    Only `show_hidden`, `only_folders`, `respect_git_ignore` and `sort` influence which
    lines are produced. The `show_*` toggles are carried for the display layer.
    """

    show_hidden: bool = False  # whether files whose name starts with a dot should be shown
    only_folders: bool = False  # whether to hide normal files and links
    show_counts: bool = False
    show_dates: bool = False
    show_sizes: bool = False
    show_permissions: bool = False
    show_git_file_info: bool = False
    respect_git_ignore: bool = True  # hide files as requested by the root .gitignore
    sort: Sort = Sort.NONE

    def needs_counts(self) -> bool:
        """Counts must be computed, either for sorting or just for display."""
        return self.show_counts or self.sort == Sort.COUNT

    def needs_dates(self) -> bool:
        """Dates must be computed, either for sorting or just for display."""
        return self.show_dates or self.sort == Sort.DATE

    def needs_sizes(self) -> bool:
        """Sizes must be computed, either for sorting or just for display."""
        return self.show_sizes or self.sort == Sort.SIZE

    def needs_sum(self) -> bool:
        return self.needs_counts() or self.needs_dates() or self.needs_sizes()

    def is_visible(self, name: str, is_dir: bool) -> bool:
        """Whether a child with this name and kind passes the hidden and folder filters."""
        if not self.show_hidden and name.startswith("."):
            return False
        if self.only_folders and not is_dir:
            return False
        return True

    def apply(self, args: argparse.Namespace) -> None:
        """Change the options according to parsed command-line arguments.

        Each toggle comes as a pair of flags; the positive flag wins when both are given.
        Choosing a sort key also turns on display of the matching attribute.
        Whale spotting shows every entry, hidden and gitignored ones included, biggest first.
        """
        if getattr(args, "sizes", False):
            self.show_sizes = True
        elif getattr(args, "no_sizes", False):
            self.show_sizes = False
        if getattr(args, "whale_spotting", False):
            self.show_hidden = True
            self.respect_git_ignore = False
            self.sort = Sort.SIZE
            self.show_sizes = True
        if getattr(args, "only_folders", False):
            self.only_folders = True
        elif getattr(args, "no_only_folders", False):
            self.only_folders = False
        if getattr(args, "hidden", False):
            self.show_hidden = True
        elif getattr(args, "no_hidden", False):
            self.show_hidden = False
        if getattr(args, "dates", False):
            self.show_dates = True
        elif getattr(args, "no_dates", False):
            self.show_dates = False
        if getattr(args, "permissions", False):
            self.show_permissions = True
        elif getattr(args, "no_permissions", False):
            self.show_permissions = False
        if getattr(args, "show_gitignored", False):
            self.respect_git_ignore = False
        elif getattr(args, "no_show_gitignored", False):
            self.respect_git_ignore = True
        if getattr(args, "show_git_info", False):
            self.show_git_file_info = True
        elif getattr(args, "no_show_git_info", False):
            self.show_git_file_info = False
        if getattr(args, "sort_by_count", False):
            self.sort = Sort.COUNT
            self.show_counts = True
        if getattr(args, "sort_by_date", False):
            self.sort = Sort.DATE
            self.show_dates = True
        if getattr(args, "sort_by_size", False):
            self.sort = Sort.SIZE
            self.show_sizes = True
        if getattr(args, "no_sort", False):
            self.sort = Sort.NONE

    def exclusion_rules_for(
        self, root_path: PathType, extra_rules: Optional[BaseExclusionRules] = None
    ) -> Optional[BaseExclusionRules]:
        """Combine the root's .gitignore (when respected) with any extra rules.

        Returns:
            The rules to apply while listing, or None when nothing would be excluded.
        """
        rules = []
        gitignore = Path(root_path) / GITIGNORE_FILE
        if self.respect_git_ignore and gitignore.is_file():
            rules.append(GitIgnoreExclusionRules(gitignore))
        if extra_rules is not None and extra_rules.has_rules():
            rules.append(extra_rules)
        if not rules:
            return None
        if len(rules) == 1:
            return rules[0]
        return CompositeExclusionRules(rules)
