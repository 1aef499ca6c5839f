from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class LineType(Enum):
    """Kind of a line in a flattened tree.

    Attributes:
        FILE: Anything that is not a directory.
        DIRECTORY: A directory, whose children may or may not have been listed.
        PRUNED: A placeholder standing in for children that did not fit in the budget.
    """

    FILE = "file"
    DIRECTORY = "directory"
    PRUNED = "pruned"
