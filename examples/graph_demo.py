"""Example: Graph traversal with dslab

Builds the same edges as an undirected and a directed graph and compares
BFS, DFS and the adjacency matrices.
"""

from dslab import Graph


def build(directed: bool) -> Graph:
    G = Graph(directed=directed)
    for label in ["A", "B", "C", "D", "E"]:
        G.add_vertex(label)
    for source, target in [("A", "B"), ("A", "C"), ("B", "D"), ("C", "D"), ("E", "A")]:
        G.add_edge(source, target)
    return G


def print_matrix(G: Graph) -> None:
    labels = G.vertices
    print("    " + " ".join(labels))
    for label, row in zip(labels, G.adjacency_matrix()):
        print(f"  {label} " + " ".join(str(cell) for cell in row))


def main():
    for directed in (False, True):
        kind = "Directed" if directed else "Undirected"
        print("=" * 60)
        print(f"{kind} graph")
        print("=" * 60)

        G = build(directed)
        print(G.add_edge("B", "A").message)
        print(G.add_edge("A", "A").message)
        print(G.bfs("A").message)
        print(G.dfs("A").message)
        print_matrix(G)
        print()

    G = build(False)
    result = G.remove_vertex("A")
    dropped = ", ".join(str(edge) for edge in result.removed_edges)
    print(f"{result.message} Dropped edges: {dropped}")
    print(G.bfs("A").message)
    print(G.bfs("B").message)


if __name__ == "__main__":
    main()
