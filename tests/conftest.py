"""Pytest configuration and fixtures for dircompare tests."""

import pytest
from pathlib import Path
from typing import Dict

# Add the project root to the Python path
import sys

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dircompare.config import Config


@pytest.fixture
def test_config(tmp_path):
    """Configuration with progress output off and list files under tmp_path."""
    output_dir = tmp_path / "out"
    output_dir.mkdir()
    return Config(
        max_workers=4,
        show_progress=False,
        progress_log_every=1000,
        output_dir=output_dir,
    )


@pytest.fixture
def make_tree(tmp_path):
    """Create a directory tree from a {relative_path: content} mapping."""

    def _make(name: str, files: Dict[str, str]) -> Path:
        root = tmp_path / name
        root.mkdir(parents=True, exist_ok=True)
        for rel, content in files.items():
            path = root / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return root

    return _make


@pytest.fixture
def scenario_trees(make_tree):
    """A holds a.txt ("hello"); B holds b.txt ("hello") and c.txt ("world")."""
    dir_a = make_tree("A", {"a.txt": "hello"})
    dir_b = make_tree("B", {"b.txt": "hello", "c.txt": "world"})
    return dir_a, dir_b
