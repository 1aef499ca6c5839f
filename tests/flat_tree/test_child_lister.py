"""Unit tests for ChildLister filtering and ordering."""

import os

import pytest

from flattree.exclusion_rules.git_rules import GitIgnoreExclusionRules
from flattree.flat_tree.child_lister import ChildLister
from flattree.tree_options import Sort, TreeOptions


def names(paths):
    return [path.name for path in paths]


@pytest.fixture
def mixed(layout):
    return layout(
        {
            "b.txt": None,
            "a": {"inner.txt": None},
            ".hidden": None,
            "C.txt": None,
            "build": {"out.o": None},
        }
    )


def test_lists_by_name(mixed):
    lister = ChildLister(mixed)
    children = lister(mixed)
    # Codepoint order: uppercase before lowercase
    assert names(children) == ["C.txt", "a", "b.txt", "build"]
    assert all(child.parent == mixed for child in children)


def test_show_hidden(mixed):
    lister = ChildLister(mixed, TreeOptions(show_hidden=True))
    assert names(lister(mixed)) == [".hidden", "C.txt", "a", "b.txt", "build"]


def test_only_folders(mixed):
    lister = ChildLister(mixed, TreeOptions(only_folders=True))
    assert names(lister(mixed)) == ["a", "build"]


def test_exclusion_rules_see_relative_paths(mixed):
    rules = GitIgnoreExclusionRules()
    rules.add_rule("build/")
    rules.add_rule("a/inner.txt")
    lister = ChildLister(mixed, exclusion_rules=rules)
    assert names(lister(mixed)) == ["C.txt", "a", "b.txt"]
    assert names(lister(mixed / "a")) == []


def test_directory_pattern_does_not_match_files(layout):
    root = layout({"build": None, "src": {"build": {}}})
    rules = GitIgnoreExclusionRules()
    rules.add_rule("build/")
    lister = ChildLister(root, exclusion_rules=rules)
    assert names(lister(root)) == ["build", "src"]
    assert names(lister(root / "src")) == []


def test_sort_by_size(layout):
    root = layout({"a.txt": "x", "b.txt": "x" * 10, "c.txt": "x" * 100})
    lister = ChildLister(root, TreeOptions(sort=Sort.SIZE))
    assert names(lister(root)) == ["c.txt", "b.txt", "a.txt"]


def test_sort_by_date(layout):
    root = layout({"old.txt": None, "new.txt": None, "mid.txt": None})
    os.utime(root / "old.txt", (1_000_000, 1_000_000))
    os.utime(root / "mid.txt", (2_000_000, 2_000_000))
    os.utime(root / "new.txt", (3_000_000, 3_000_000))
    lister = ChildLister(root, TreeOptions(sort=Sort.DATE))
    assert names(lister(root)) == ["new.txt", "mid.txt", "old.txt"]


def test_sort_by_count(layout):
    root = layout(
        {
            "few": {"1": None},
            "many": {"1": None, "2": None, "3": None},
            "some": {"1": None, "2": None},
            "file.txt": None,
        }
    )
    lister = ChildLister(root, TreeOptions(sort=Sort.COUNT))
    assert names(lister(root)) == ["many", "some", "few", "file.txt"]


def test_ties_broken_by_name(layout):
    root = layout({"b.txt": "xx", "a.txt": "xx", "c.txt": "x"})
    lister = ChildLister(root, TreeOptions(sort=Sort.SIZE))
    assert names(lister(root)) == ["a.txt", "b.txt", "c.txt"]


def test_missing_directory_raises(tmp_path):
    lister = ChildLister(tmp_path)
    with pytest.raises(FileNotFoundError):
        lister(tmp_path / "missing")
