"""What to do when a directory cannot be listed or a child cannot be inspected."""

from enum import Enum


class PermissionAction(str, Enum):
    """Action to take on filesystem errors while building a tree.

    Values:
        IGNORE: Skip the unreadable child or treat the unlistable directory as empty,
            recording a warning on the resulting tree (default behavior)
        RAISE: Raise a PermissionError and abort the build
    """

    IGNORE = "ignore"
    RAISE = "raise"
