"""
hailstone: Collatz trajectories, their run-length encoding, and the rooted
tree obtained by merging many trajectories, written out as DOT.
"""

from .core.parity import is_even, is_odd, is_natural, require_natural
from .core.generator import step, iter_run, run, run_odd
from .core.collapse import collapse, base_orbit
from .core.encoding import InvalidEncodingError, sequence, unsequence

from .graph.edges import pairs, merge_edges
from .graph.aggregate import DEFAULT_LO, DEFAULT_HI, graph_edges, graph
from .graph.tree import edges_to_nx, is_rooted_tree, depth

from .io.dot import edge_to_dot, edges_to_dot, dot_to_edges

__all__ = [
    # Predicates
    "is_even",
    "is_odd",
    "is_natural",
    "require_natural",
    # Generator
    "step",
    "iter_run",
    "run",
    "run_odd",
    # Canonicalization
    "collapse",
    "base_orbit",
    # Encoding
    "InvalidEncodingError",
    "sequence",
    "unsequence",
    # Graph
    "pairs",
    "merge_edges",
    "DEFAULT_LO",
    "DEFAULT_HI",
    "graph_edges",
    "graph",
    "edges_to_nx",
    "is_rooted_tree",
    "depth",
    # IO
    "edge_to_dot",
    "edges_to_dot",
    "dot_to_edges",
]
