"""One-shot, filtered and ordered snapshots of a directory's children."""

import os
from pathlib import Path
from typing import List, Optional, Tuple

from flattree.exclusion_rules.base_rules import BaseExclusionRules
from flattree.tree_options import Sort, TreeOptions
from flattree.types import PathType


class ChildLister:
    """Lists the children of a directory the way the tree options ask for.

    Each call reads the directory once, releases the handle immediately, drops the
    children that are hidden, filtered out by `only_folders` or matched by the exclusion
    rules, and returns the remaining paths ordered by the configured sort key (by name
    when no key is set, with the name also breaking ties).

    Attributes:
        root_path (Path): Root of the tree; exclusion rules see paths relative to it.
        options (TreeOptions): Visibility and sort options.
        exclusion_rules (Optional[BaseExclusionRules]): Extra rules for leaving paths out.
    """

    def __init__(
        self,
        root_path: PathType,
        options: Optional[TreeOptions] = None,
        exclusion_rules: Optional[BaseExclusionRules] = None,
    ) -> None:
        self.root_path = Path(root_path)
        self.options = options if options is not None else TreeOptions()
        self.exclusion_rules = exclusion_rules

    def __call__(self, directory: Path) -> List[Path]:
        """Return the visible children of `directory`, ordered.

        Raises:
            OSError: If the directory cannot be listed.
        """
        candidates: List[Tuple[float, str, Path]] = []
        with os.scandir(directory) as entries:
            for entry in entries:
                is_dir = _is_dir(entry)
                if not self.options.is_visible(entry.name, is_dir):
                    continue
                path = directory / entry.name
                if self._is_excluded(path, is_dir):
                    continue
                candidates.append((self._sort_key(entry, is_dir), entry.name, path))
        candidates.sort(key=lambda candidate: (candidate[0], candidate[1]))
        return [path for _, _, path in candidates]

    def _is_excluded(self, path: Path, is_dir: bool) -> bool:
        if self.exclusion_rules is None:
            return False
        relative_path = path.relative_to(self.root_path).as_posix()
        if is_dir:
            relative_path += "/"
        return self.exclusion_rules.exclude(relative_path)

    def _sort_key(self, entry: "os.DirEntry[str]", is_dir: bool) -> float:
        # Negated so that the biggest, newest or fullest entries come first
        sort = self.options.sort
        if sort == Sort.NONE:
            return 0
        if sort == Sort.COUNT:
            return -_count_entries(entry.path) if is_dir else -1
        try:
            stat_result = entry.stat()
        except OSError:
            return 0
        if sort == Sort.SIZE:
            return -stat_result.st_size
        return -stat_result.st_mtime


def _is_dir(entry: "os.DirEntry[str]") -> bool:
    try:
        return entry.is_dir()
    except OSError:
        return False


def _count_entries(path: str) -> int:
    try:
        with os.scandir(path) as entries:
            return sum(1 for _ in entries)
    except OSError:
        return 0
