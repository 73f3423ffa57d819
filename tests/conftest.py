"""Shared fixtures for NodePathLib tests."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from nodepathlib import MemoryNode, AttributeTreeAdapter
from nodepathlib.testing import TraceRecorder


def build_sample_tree() -> dict:
    """Create the standard test tree and return its nodes by label.

    Structure:
    root
    ├── a (dir)
    │   ├── x   (file)      <- x1
    │   └── y   (dir)
    │       └── x (file)    <- x2
    ├── b (dir)
    │   └── c (dir)
    │       └── x (file)    <- x3
    └── d (file)
    """
    x1 = MemoryNode("x", kind="file")
    x2 = MemoryNode("x", kind="file")
    x3 = MemoryNode("x", kind="file")
    y = MemoryNode("y", x2, kind="dir")
    a = MemoryNode("a", x1, y, kind="dir")
    c = MemoryNode("c", x3, kind="dir")
    b = MemoryNode("b", c, kind="dir")
    d = MemoryNode("d", kind="file")
    root = MemoryNode("root", a, b, d, kind="dir")
    return {
        "root": root, "a": a, "b": b, "c": c, "d": d, "y": y,
        "x1": x1, "x2": x2, "x3": x3,
    }


@pytest.fixture
def tree():
    """Fresh sample tree for each test."""
    return build_sample_tree()


@pytest.fixture
def adapter():
    return AttributeTreeAdapter()


@pytest.fixture
def recorder():
    return TraceRecorder()


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: large-tree tests excluded from quick runs")
