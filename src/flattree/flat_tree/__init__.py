"""Flattened, budget-bounded directory trees.

A tree is built breadth-first and fairly: every open directory at the current depth
gets one more child per round before any of them gets a second one, and expansion only
moves deeper once a depth can no longer grow. Directories that still had children when
the budget ran out get their last listed child replaced with a placeholder line.
"""
