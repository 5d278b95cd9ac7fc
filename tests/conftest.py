"""Pytest configuration and shared fixtures for dslab tests.

This module provides:
- A deterministic numpy RNG for randomized property tests
- An autouse fixture that enables debug mode, so every mutation made in a
  test is followed by an invariant check
- Small prebuilt structures used across test modules
"""

import os
from typing import Iterator

import numpy as np
import pytest

from dslab.diagnostics import debug_context
from dslab.graphs import Graph
from dslab.trees import SearchTree


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    This ensures tests are reproducible while allowing override for debugging.

    Returns:
        A seeded numpy.random.Generator instance.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def debug_checks() -> Iterator[None]:
    """Run every test with invariant checks enabled."""
    with debug_context(True):
        yield


@pytest.fixture
def sample_tree() -> SearchTree:
    """Tree built from inserts [5, 3, 8, 1, 4]."""
    tree = SearchTree()
    for key in [5, 3, 8, 1, 4]:
        tree.insert(key)
    return tree


@pytest.fixture
def path_graph() -> Graph:
    """Undirected graph A - B - C."""
    G = Graph()
    for label in ["A", "B", "C"]:
        G.add_vertex(label)
    G.add_edge("A", "B")
    G.add_edge("B", "C")
    return G
