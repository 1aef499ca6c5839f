"""Lines of a flattened tree and the immutable tree they form."""

import os
import stat
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Iterator, Sequence, Tuple

from flattree.types import LineType

PRUNED_NAME = "... {count} more files"


@dataclass(frozen=True)
class TreeLine:
    """One line of a flattened tree.

    A line is either a real file or directory, or a placeholder that took the place of
    a real child when its directory could not be fully listed. A placeholder keeps the
    path and depth of the child it replaced, so it sorts and nests exactly where that
    child would have.

    Attributes:
        name: Base name of the file or directory, or the placeholder label.
        depth: Distance from the root line, which has depth 0.
        path: Path of the entry, starting with the root path as it was given.
        content: Kind of line.
        pruned_count: For placeholders, how many real entries the line stands for,
            itself included. Zero otherwise.
    """

    name: str
    depth: int
    path: Path
    content: LineType
    pruned_count: int = 0

    @classmethod
    def create(cls, path: Path, depth: int) -> "TreeLine":
        """Inspect `path` and make a file or directory line for it.

        Symbolic links are followed to decide the kind of line.

        Raises:
            OSError: If the path cannot be stat'ed (vanished, access denied, broken link).
        """
        mode = os.stat(path).st_mode
        content = LineType.DIRECTORY if stat.S_ISDIR(mode) else LineType.FILE
        name = path.name or path.resolve().name or str(path)
        return cls(name=name, depth=depth, path=path, content=content)

    def is_dir(self) -> bool:
        return self.content is LineType.DIRECTORY

    def is_pruned(self) -> bool:
        return self.content is LineType.PRUNED

    def pruned(self, count: int) -> "TreeLine":
        """Return a placeholder standing for `count` entries at this line's position."""
        return replace(self, name=PRUNED_NAME.format(count=count), content=LineType.PRUNED, pruned_count=count)


class Tree:
    """Immutable result of a build: lines in preorder, plus the warnings raised on the way.

    Lines are ordered so that every directory directly precedes its descendants and
    siblings follow each other by name. Nesting is implied by that order and the depths:
    the parent of a line is the nearest preceding line one level shallower.

    Example:
        >>> from flattree import build_tree
        >>> tree = build_tree("src", 10)  # doctest: +SKIP
        >>> [(line.depth, line.name) for line in tree]  # doctest: +SKIP
        [(0, 'src'), (1, 'main.py'), (1, 'utils'), (2, '... 3 more files')]
    """

    def __init__(self, lines: Sequence[TreeLine], warnings: Sequence[str] = ()) -> None:
        self._lines: Tuple[TreeLine, ...] = tuple(lines)
        self._warnings: Tuple[str, ...] = tuple(warnings)

    @property
    def lines(self) -> Tuple[TreeLine, ...]:
        return self._lines

    @property
    def warnings(self) -> Tuple[str, ...]:
        """Errors that were absorbed while building, one message per skipped path."""
        return self._warnings

    @property
    def root(self) -> TreeLine:
        return self._lines[0]

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[TreeLine]:
        return iter(self._lines)

    def __getitem__(self, index: int) -> TreeLine:
        return self._lines[index]

    def __repr__(self) -> str:
        return f"Tree(lines={len(self._lines)}, warnings={len(self._warnings)})"

    def directory_count(self) -> int:
        """Number of directory lines, root excluded."""
        return sum(1 for line in self._lines[1:] if line.is_dir())

    def file_count(self) -> int:
        return sum(1 for line in self._lines[1:] if line.content is LineType.FILE)

    def pruned_count(self) -> int:
        """Number of placeholder lines."""
        return sum(1 for line in self._lines if line.is_pruned())

    def unlisted_count(self) -> int:
        """Number of real entries hidden behind placeholders."""
        return sum(line.pruned_count for line in self._lines)
