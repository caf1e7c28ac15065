from .edges import pairs, merge_edges
from .aggregate import DEFAULT_LO, DEFAULT_HI, graph_edges, graph
from .tree import edges_to_nx, is_rooted_tree, depth

__all__ = [
    "pairs",
    "merge_edges",
    "DEFAULT_LO",
    "DEFAULT_HI",
    "graph_edges",
    "graph",
    "edges_to_nx",
    "is_rooted_tree",
    "depth",
]
