"""Test configuration and fixtures for flattree."""

from pathlib import Path
from typing import Dict, Union

import pytest

# A directory is a dict of name -> content; a file is its text (None for an empty file)
Layout = Dict[str, Union["Layout", str, None]]


def make_layout(root: Path, layout: Layout) -> Path:
    """Create `layout` under `root` and return `root`."""
    root.mkdir(parents=True, exist_ok=True)
    for name, content in layout.items():
        path = root / name
        if isinstance(content, dict):
            make_layout(path, content)
        else:
            path.write_text(content or "")
    return root


@pytest.fixture
def layout(tmp_path):
    """Factory creating a directory layout under a fresh `root` directory."""

    def create(structure: Layout) -> Path:
        return make_layout(tmp_path / "root", structure)

    return create
