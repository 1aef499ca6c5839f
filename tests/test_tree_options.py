"""Unit tests for TreeOptions and its command-line binding."""

import argparse

import pytest

from flattree.exclusion_rules.composite_rules import CompositeExclusionRules
from flattree.exclusion_rules.git_rules import GitIgnoreExclusionRules
from flattree.tree_options import Sort, TreeOptions


def namespace(**flags):
    return argparse.Namespace(**flags)


def test_defaults():
    options = TreeOptions()
    assert not options.show_hidden
    assert not options.only_folders
    assert options.respect_git_ignore
    assert options.sort == Sort.NONE
    assert not options.needs_sum()


@pytest.mark.parametrize(
    "sort, needs",
    [
        (Sort.COUNT, "needs_counts"),
        (Sort.DATE, "needs_dates"),
        (Sort.SIZE, "needs_sizes"),
    ],
)
def test_sort_needs_attribute(sort, needs):
    options = TreeOptions(sort=sort)
    assert getattr(options, needs)()
    assert options.needs_sum()


def test_display_toggle_needs_attribute():
    assert TreeOptions(show_sizes=True).needs_sizes()
    assert TreeOptions(show_dates=True).needs_dates()
    assert TreeOptions(show_counts=True).needs_counts()


def test_is_visible():
    options = TreeOptions()
    assert options.is_visible("a.txt", False)
    assert not options.is_visible(".env", False)
    assert TreeOptions(show_hidden=True).is_visible(".env", False)
    assert not TreeOptions(only_folders=True).is_visible("a.txt", False)
    assert TreeOptions(only_folders=True).is_visible("src", True)


def test_apply_toggles():
    options = TreeOptions()
    options.apply(namespace(hidden=True, only_folders=True, show_gitignored=True, permissions=True))
    assert options.show_hidden
    assert options.only_folders
    assert not options.respect_git_ignore
    assert options.show_permissions

    options.apply(namespace(no_hidden=True, no_only_folders=True, no_show_gitignored=True, no_permissions=True))
    assert not options.show_hidden
    assert not options.only_folders
    assert options.respect_git_ignore
    assert not options.show_permissions


def test_apply_positive_flag_wins():
    options = TreeOptions()
    options.apply(namespace(hidden=True, no_hidden=True))
    assert options.show_hidden


def test_apply_sort_flags():
    options = TreeOptions()
    options.apply(namespace(sort_by_size=True))
    assert options.sort == Sort.SIZE
    assert options.show_sizes

    options.apply(namespace(sort_by_date=True))
    assert options.sort == Sort.DATE
    assert options.show_dates

    options.apply(namespace(sort_by_count=True))
    assert options.sort == Sort.COUNT
    assert options.show_counts

    options.apply(namespace(no_sort=True))
    assert options.sort == Sort.NONE


def test_apply_whale_spotting():
    options = TreeOptions()
    options.apply(namespace(whale_spotting=True))
    assert options.show_hidden
    assert not options.respect_git_ignore
    assert options.sort == Sort.SIZE
    assert options.show_sizes


def test_apply_later_flags_refine_whale_spotting():
    options = TreeOptions()
    options.apply(namespace(whale_spotting=True, no_show_gitignored=True, no_sort=True))
    assert options.show_hidden
    assert options.respect_git_ignore
    assert options.sort == Sort.NONE


def test_apply_ignores_missing_flags():
    options = TreeOptions(show_hidden=True)
    options.apply(namespace())
    assert options == TreeOptions(show_hidden=True)


def test_exclusion_rules_without_anything(tmp_path):
    assert TreeOptions().exclusion_rules_for(tmp_path) is None


def test_exclusion_rules_from_gitignore(tmp_path):
    (tmp_path / ".gitignore").write_text("*.log\n")
    rules = TreeOptions().exclusion_rules_for(tmp_path)
    assert isinstance(rules, GitIgnoreExclusionRules)
    assert rules.exclude("debug.log")
    assert TreeOptions(respect_git_ignore=False).exclusion_rules_for(tmp_path) is None


def test_exclusion_rules_combined(tmp_path):
    (tmp_path / ".gitignore").write_text("*.log\n")
    extra = GitIgnoreExclusionRules()
    extra.add_rule("*.tmp")
    rules = TreeOptions().exclusion_rules_for(tmp_path, extra)
    assert isinstance(rules, CompositeExclusionRules)
    assert rules.exclude("a.log")
    assert rules.exclude("a.tmp")
    assert not rules.exclude("a.txt")


def test_empty_extra_rules_are_dropped(tmp_path):
    assert TreeOptions().exclusion_rules_for(tmp_path, GitIgnoreExclusionRules()) is None
