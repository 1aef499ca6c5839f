"""Composite exclusion rules for combining multiple rule types."""

from typing import List, Sequence

from .base_rules import BaseExclusionRules


class CompositeExclusionRules(BaseExclusionRules):
    """Exclude a path when ANY of the constituent rules excludes it.

    Used by the CLI to combine gitignore patterns with a size limit.

    Attributes:
        rules (List[BaseExclusionRules]): Constituent rules, evaluated in order.

    Example:
        >>> from flattree.exclusion_rules.git_rules import GitIgnoreExclusionRules
        >>> logs = GitIgnoreExclusionRules()
        >>> logs.add_rule("*.log")
        >>> temp = GitIgnoreExclusionRules()
        >>> temp.add_rule("*.tmp")
        >>> composite = CompositeExclusionRules([logs, temp])
        >>> composite.exclude("a.tmp"), composite.exclude("a.txt")
        (True, False)
    """

    def __init__(self, rules: Sequence[BaseExclusionRules]):
        """Combine rules.

        Raises:
            ValueError: If rules is empty.
            TypeError: If any rule doesn't implement BaseExclusionRules.
        """
        if not rules:
            raise ValueError("At least one exclusion rule must be provided")

        for i, rule in enumerate(rules):
            if not isinstance(rule, BaseExclusionRules):
                raise TypeError(f"Rule at index {i} must implement BaseExclusionRules, got {type(rule)}")

        self.rules: List[BaseExclusionRules] = list(rules)

    def exclude(self, path: str) -> bool:
        return any(rule.exclude(path) for rule in self.rules)

    def has_rules(self) -> bool:
        return any(rule.has_rules() for rule in self.rules)

    def add_rule_object(self, rule: BaseExclusionRules) -> None:
        """Add another rule object to the composite.

        Raises:
            TypeError: If rule doesn't implement BaseExclusionRules.
        """
        if not isinstance(rule, BaseExclusionRules):
            raise TypeError(f"Rule must implement BaseExclusionRules, got {type(rule)}")
        self.rules.append(rule)
