"""Unit tests for gitignore-style exclusion rules."""

import warnings

import pytest

from flattree.exclusion_rules.git_rules import GitIgnoreExclusionRules


@pytest.fixture
def ignore_file(tmp_path):
    path = tmp_path / ".gitignore"
    path.write_text("# build output\n*.pyc\nbuild/\n\n!keep.pyc\n")
    return path


def test_empty_rules_exclude_nothing():
    rules = GitIgnoreExclusionRules()
    assert not rules.exclude("anything.txt")
    assert not rules.has_rules()


def test_load_from_file(ignore_file):
    rules = GitIgnoreExclusionRules(ignore_file)
    assert rules.has_rules()
    assert rules.exclude("module.pyc")
    assert rules.exclude("pkg/module.pyc")
    assert rules.exclude("build/")
    assert not rules.exclude("keep.pyc")
    assert not rules.exclude("module.py")


def test_load_from_several_files(tmp_path):
    first = tmp_path / "first"
    first.write_text("*.txt\n")
    second = tmp_path / "second"
    second.write_text("!important.txt\n")
    rules = GitIgnoreExclusionRules([first, str(second)])
    assert rules.exclude("notes.txt")
    assert not rules.exclude("important.txt")


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError, match="Rules file not found"):
        GitIgnoreExclusionRules(tmp_path / "missing")


def test_directory_pattern_needs_trailing_slash():
    rules = GitIgnoreExclusionRules()
    rules.add_rule("node_modules/")
    assert rules.exclude("node_modules/")
    assert rules.exclude("web/node_modules/")
    assert not rules.exclude("node_modules")


def test_rules_apply_in_order(ignore_file):
    rules = GitIgnoreExclusionRules()
    rules.add_rule("!keep.pyc")
    rules.load_rules(ignore_file)
    rules.add_rule("keep.pyc")
    assert rules.exclude("keep.pyc")


def test_comments_only_is_not_a_rule(tmp_path):
    path = tmp_path / "comments"
    path.write_text("# nothing here\n\n")
    assert not GitIgnoreExclusionRules(path).has_rules()


def test_matching_raises_no_deprecation_warning(ignore_file):
    with warnings.catch_warnings():
        warnings.simplefilter("error", DeprecationWarning)
        rules = GitIgnoreExclusionRules(ignore_file)
        rules.add_rule("*.log")
        assert rules.exclude("debug.log")
