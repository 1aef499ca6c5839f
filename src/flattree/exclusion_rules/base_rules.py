from abc import ABC, abstractmethod
from typing import Sequence, Union

from flattree.types import PathType


class BaseExclusionRules(ABC):
    """
    Abstract base class for rules deciding which children never enter a flattened tree.

    Exclusion happens while a directory's children are listed, before any of them can be
    claimed by the tree builder, so excluded entries neither consume budget nor count
    towards a placeholder's "more files" total.

    Paths handed to `exclude` are relative to the root of the tree, use forward slashes,
    and carry a trailing slash when they name a directory (the convention .gitignore
    patterns expect).

    Example:
        >>> from flattree.exclusion_rules.git_rules import GitIgnoreExclusionRules
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rule('build/')
        >>> rules.exclude('build/')
        True
        >>> rules.exclude('src/main.py')
        False
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Determine if a path should be left out of the tree.

        Args:
            path (str): Root-relative POSIX path, with a trailing slash for directories.

        Returns:
            bool: True if the path should be excluded, False if it should be listed.
        """
        pass

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """
        Load exclusion rules from one or more files.

        Only rule types backed by pattern files override this.

        Raises:
            NotImplementedError: If this rule type doesn't support loading from files.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support loading rules from files.")

    def add_rule(self, rule: str) -> None:
        """
        Add a single exclusion rule.

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")

    def has_rules(self) -> bool:
        """Whether this object would ever exclude anything."""
        return True
