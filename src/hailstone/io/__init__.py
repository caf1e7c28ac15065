from .dot import edge_to_dot, edges_to_dot, dot_to_edges

__all__ = [
    "edge_to_dot",
    "edges_to_dot",
    "dot_to_edges",
]
