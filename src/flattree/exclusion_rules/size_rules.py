"""Size-based exclusion rules for filtering files by size."""

from pathlib import Path
from typing import Optional, Union

from flattree.types import PathType

from .base_rules import BaseExclusionRules


def parse_file_size(size_str: str) -> int:
    """Parse a human-readable file size to bytes.

    Args:
        size_str: Size string like '1GB', '500MB', '2.5K', or just '1024'

    Returns:
        Size in bytes

    Raises:
        ValueError: If size_str is not a valid size format
        ImportError: If humanfriendly library is not available
    """
    try:
        from humanfriendly import parse_size
    except ImportError:
        raise ImportError("humanfriendly is required for size parsing. Install it with: pip install humanfriendly")

    try:
        return int(parse_size(size_str))
    except Exception as e:
        raise ValueError(f"Invalid size format '{size_str}': {e}")


class SizeExclusionRules(BaseExclusionRules):
    """Exclude regular files larger than a limit.

    Directories are never excluded by size. Relative paths are resolved against
    `root_path` (the root of the tree being built) when one is given, otherwise against
    the current working directory.

    Attributes:
        max_size_bytes (int): Largest file size, in bytes, that is still listed.
        root_path (Optional[Path]): Directory relative paths are resolved against.

    Example:
        >>> rules = SizeExclusionRules("1MB")
        >>> rules.max_size_bytes
        1000000
    """

    def __init__(self, max_size: Union[str, int], root_path: Optional[PathType] = None):
        """Initialize size exclusion rules.

        Args:
            max_size: Human-readable size ('1GB', '500MB', '2.5K') or a byte count.
            root_path: Directory that relative paths passed to `exclude` start from.

        Raises:
            ValueError: If max_size format is invalid or negative.
        """
        if isinstance(max_size, str):
            self.max_size_bytes = parse_file_size(max_size)
        elif isinstance(max_size, int):
            if max_size < 0:
                raise ValueError("Size cannot be negative")
            self.max_size_bytes = max_size
        else:
            raise ValueError(f"max_size must be string or int, got {type(max_size)}")
        self.root_path = Path(root_path) if root_path is not None else None

    def exclude(self, path: str) -> bool:
        """Check if a file is larger than the limit.

        Returns False for directories and for files whose size cannot be read.
        """
        path_obj = Path(path)
        if self.root_path is not None and not path_obj.is_absolute():
            path_obj = self.root_path / path_obj
        try:
            if not path_obj.is_file():
                return False
            return path_obj.stat().st_size > self.max_size_bytes
        except OSError:
            return False

    def has_rules(self) -> bool:
        return self.max_size_bytes > 0
