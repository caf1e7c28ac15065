from __future__ import annotations

import re
from typing import Dict, Mapping, Tuple


DOT_HEADER = "digraph G {"
DOT_FOOTER = "}"

_EDGE_RE = re.compile(r"^\s*(\d+)\s*->\s*(\d+)\s*;\s*$")


def edge_to_dot(edge: Tuple[int, int]) -> str:
    """Format one (child, parent) pair as an indented DOT edge statement."""
    v1, v2 = edge
    return f"  {v1} -> {v2};"


def edges_to_dot(edges: Mapping[int, int]) -> str:
    """
    Serialize a child -> parent mapping as a DOT digraph:

      digraph G {
        7 -> 11;
        ...
      }

    Edges appear in mapping order.
    """
    body = "\n".join(edge_to_dot(e) for e in edges.items())
    return f"{DOT_HEADER}\n{body}\n{DOT_FOOTER}\n"


def dot_to_edges(text: str) -> Dict[int, int]:
    """
    Parse a document written by edges_to_dot back into an ordered mapping.

    Blank lines inside the braces are skipped; anything else that is not
    an 'a -> b;' statement raises ValueError, as does a second edge out
    of the same node.
    """
    lines = text.strip().splitlines()
    if not lines or lines[0].strip() != DOT_HEADER:
        raise ValueError(f"missing {DOT_HEADER!r} header")
    if len(lines) < 2 or lines[-1].strip() != DOT_FOOTER:
        raise ValueError(f"missing closing {DOT_FOOTER!r}")

    edges: Dict[int, int] = {}
    for ln in lines[1:-1]:
        if not ln.strip():
            continue
        m = _EDGE_RE.match(ln)
        if not m:
            raise ValueError(f"malformed edge line: {ln!r}")
        child, parent = int(m.group(1)), int(m.group(2))
        if child in edges:
            raise ValueError(f"duplicate edge for {child}: {child} -> {edges[child]} vs {child} -> {parent}")
        edges[child] = parent
    return edges
