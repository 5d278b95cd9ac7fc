"""Tests for graph utility functions."""

from dslab.graphs import vertex_index_map


def test_vertex_index_map_keeps_order():
    """Test that indices follow the given order."""
    vertex_to_idx, idx_to_vertex = vertex_index_map(["c", "a", "b"])
    assert vertex_to_idx == {"c": 0, "a": 1, "b": 2}
    assert idx_to_vertex == ["c", "a", "b"]


def test_vertex_index_map_repeats():
    """Test that a repeated label keeps its first position."""
    vertex_to_idx, idx_to_vertex = vertex_index_map(["x", "y", "x"])
    assert vertex_to_idx == {"x": 0, "y": 1}
    assert idx_to_vertex == ["x", "y"]


def test_vertex_index_map_empty():
    """Test empty input."""
    assert vertex_index_map([]) == ({}, [])
