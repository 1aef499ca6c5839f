"""Exclusion rules written in .gitignore pattern syntax."""

from os import PathLike
from pathlib import Path
from typing import Optional, Sequence, Union

from pathspec import PathSpec
from pathspec.patterns import GitWildMatchPattern  # type: ignore

from flattree.types import PathType

from .base_rules import BaseExclusionRules


class GitIgnoreExclusionRules(BaseExclusionRules):
    """Exclusion rules using .gitignore pattern syntax.

    Patterns are matched with the pathspec library exactly the way Git matches them:
    globs, directory patterns ending in ``/``, ``!`` negations, ``**`` and comments.
    Patterns from files and patterns added one by one are kept in a single ordered list,
    so a later negation can re-include something an earlier pattern excluded.

    Attributes:
        spec (PathSpec): Compiled pattern matcher.

    Example:
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rule("*.log")
        >>> rules.add_rule("!keep.log")
        >>> rules.exclude("debug.log")
        True
        >>> rules.exclude("keep.log")
        False
    """

    def __init__(self, rules_files: Optional[Union[PathType, Sequence[PathType]]] = None):
        """Create the rules, optionally loading patterns from one or more ignore files.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        self.spec = PathSpec.from_lines(GitWildMatchPattern, [])

        if rules_files is not None:
            self.load_rules(rules_files)

    def exclude(self, path: str) -> bool:
        return bool(self.spec.match_file(path))

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Append the patterns found in one or more ignore files.

        Args:
            rules_files: Path or sequence of paths to files in .gitignore format.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.exists():
                raise FileNotFoundError(f"Rules file not found: {path}")

            with open(path, "r") as f:
                lines = f.read().splitlines()

            self._extend(PathSpec.from_lines(GitWildMatchPattern, lines).patterns)

    def add_rule(self, rule: str) -> None:
        """Append a single .gitignore pattern such as ``"*.pyc"`` or ``"!important.txt"``."""
        self._extend([GitWildMatchPattern(rule)])

    def has_rules(self) -> bool:
        return any(pattern.include is not None for pattern in self.spec.patterns)

    def _extend(self, patterns: Sequence[GitWildMatchPattern]) -> None:
        # The matcher must be rebuilt to see new patterns
        self.spec = PathSpec(list(self.spec.patterns) + list(patterns))
