"""End-to-end scenarios through the top-level package API."""

import dslab as ds


def test_version():
    """Test that the package exposes a version."""
    assert isinstance(ds.__version__, str)


def test_hash_table_collision_scenario():
    """Test the cat/act collision scenario."""
    table = ds.new_hash_table(ds.EngineConfig(hash_capacity=7))
    cat = table.insert("cat", "x")
    act = table.insert("act", "y")

    assert cat.index == act.index
    assert table.search("cat").value == "x"
    assert table.search("act").value == "y"
    assert ds.is_valid_hash_table(table)


def test_search_tree_scenario():
    """Test the [5, 3, 8, 1, 4] tree scenario."""
    tree = ds.SearchTree()
    for key in [5, 3, 8, 1, 4]:
        tree.insert(key)

    assert tree.inorder_traversal() == [1, 3, 4, 5, 8]
    assert tree.height() == 3

    result = tree.remove(3)
    assert result.removal_case == "two_children"
    assert tree.inorder_traversal() == [1, 4, 5, 8]
    assert ds.is_valid_search_tree(tree)


def test_graph_scenario():
    """Test the A - B - C graph and the cascade on removing B."""
    G = ds.new_graph(ds.EngineConfig(directed=False))
    for label in "ABC":
        G.add_vertex(label)
    G.add_edge("A", "B")
    G.add_edge("B", "C")

    assert G.bfs("A").order == ("A", "B", "C")
    assert G.adjacency_matrix().tolist() == [[0, 1, 0], [1, 0, 1], [0, 1, 0]]

    G.remove_vertex("B")
    assert G.vertices == ("A", "C")
    assert G.edges == ()
    assert ds.is_valid_graph(G)


def test_failures_are_results_not_exceptions():
    """Test that every user-facing failure comes back as a status."""
    G = ds.Graph()
    G.add_vertex("A")
    statuses = {
        G.add_vertex("A").status,
        G.add_edge("A", "Z").status,
        G.add_edge("A", "A").status,
        G.remove_edge("A", "Z").status,
        G.dfs("Z").status,
        ds.HashTable(capacity=7).insert("", "").status,
    }
    assert statuses == {
        ds.Status.DUPLICATE_VERTEX,
        ds.Status.UNKNOWN_VERTEX,
        ds.Status.SELF_LOOP,
        ds.Status.NOT_FOUND,
        ds.Status.INVALID_INPUT,
    }
