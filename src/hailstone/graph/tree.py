from __future__ import annotations

from typing import Mapping

import networkx as nx


def edges_to_nx(edges: Mapping[int, int]) -> nx.DiGraph:
    """Directed graph with one child -> parent edge per mapping entry."""
    G = nx.DiGraph()
    G.add_edges_from(edges.items())
    return G


def is_rooted_tree(edges: Mapping[int, int], root: int = 1) -> bool:
    """
    True iff the edges form a tree in which every node leads to root.

    A self-loop at root (collapse maps 5 -> 1 onto 1 -> 1) is ignored.
    An empty mapping is the one-node tree.
    """
    G = edges_to_nx(edges)
    if G.has_edge(root, root):
        G.remove_edge(root, root)
    if G.number_of_nodes() == 0:
        return True
    if root not in G or G.out_degree(root) != 0:
        return False
    # child -> parent reversed is parent -> child: an arborescence from root
    return nx.is_arborescence(G.reverse(copy=False))


def depth(edges: Mapping[int, int], node: int, root: int = 1) -> int:
    """Number of edges from node up to root, following the mapping."""
    d = 0
    cur = node
    seen = set()
    while cur != root:
        if cur in seen or cur not in edges:
            raise ValueError(f"{node} does not reach {root} through the given edges")
        seen.add(cur)
        cur = edges[cur]
        d += 1
    return d
