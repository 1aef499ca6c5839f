"""Cursor over the sorted children of one directory line."""

from pathlib import Path
from typing import Callable, List, Optional, Sequence, Tuple

from flattree.flat_tree.tree_line import TreeLine


class ChildIterator:
    """Hands out the children of a directory one at a time, in order.

    The children are read once, when the cursor is opened, and never re-read. The cursor
    also remembers which line of the builder it produced last, so that line can later
    be turned into a placeholder if the directory was not fully listed.

    Attributes:
        children: Snapshot of the children, empty for anything but a directory.
        next_index: Number of children handed out so far.
        last_emitted_line: Index, in the builder's lines, of the last child appended for
            this directory. 0 means none yet, since index 0 always holds the root.
    """

    def __init__(self, children: Sequence[Path] = ()) -> None:
        self.children: Tuple[Path, ...] = tuple(children)
        self.next_index = 0
        self.last_emitted_line = 0

    @classmethod
    def open(cls, line: TreeLine, lister: Callable[[Path], List[Path]]) -> "ChildIterator":
        """Snapshot the children of `line` with `lister`, or make an empty cursor for non-directories.

        Raises:
            OSError: If the directory cannot be listed.
        """
        if not line.is_dir():
            return cls()
        return cls(lister(line.path))

    def take_next(self) -> Optional[Path]:
        """Claim the next child, or return None once every child has been claimed."""
        if self.next_index >= len(self.children):
            return None
        child = self.children[self.next_index]
        self.next_index += 1
        return child

    def remaining_count(self) -> int:
        """Number of children not claimed yet."""
        return len(self.children) - self.next_index
