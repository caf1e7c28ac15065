from __future__ import annotations

import os
import sys
from typing import Dict, Optional

from hailstone.core.collapse import collapse
from hailstone.core.generator import run, run_odd
from hailstone.core.parity import require_natural
from hailstone.io.dot import edges_to_dot
from .edges import merge_edges, pairs


DEFAULT_LO = 1
DEFAULT_HI_FALLBACK = 256


def _env_int(name: str, default: int) -> int:
    """Read a positive int from the environment, falling back to default."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        value = 0
    if value < 1:
        print(f"[config] ignoring {name}={raw!r}, using {default}", file=sys.stderr)
        return default
    return value


DEFAULT_HI = _env_int("HAILSTONE_GRAPH_HI", DEFAULT_HI_FALLBACK)


def graph_edges(
    lo: int = DEFAULT_LO,
    hi: Optional[int] = None,
    *,
    odd: bool = True,
    canonical: bool = False,
    verbose: bool = False,
) -> Dict[int, int]:
    """
    Merge the trajectories of every n in [lo, hi] into one child -> parent mapping.

    Parameters
    ----------
    lo, hi : int
        Inclusive range of starting values. hi defaults to DEFAULT_HI.
        An empty range (lo > hi) gives an empty mapping.
    odd : bool
        Use run_odd (default) or the full run trajectory.
    canonical : bool
        Pass every value through collapse() before pairing. Only valid
        together with odd=True.
    verbose : bool
        Print a summary line to stderr.

    A non-natural lo, or a non-int hi, raises ValueError.
    """
    if hi is None:
        hi = DEFAULT_HI
    require_natural(lo, "lo")
    if not isinstance(hi, int) or isinstance(hi, bool):
        raise ValueError(f"hi must be an int, got {hi!r}")
    if canonical and not odd:
        raise ValueError("canonical=True requires odd=True: collapse only preserves odd successors")
    trajectory = run_odd if odd else run

    edges: Dict[int, int] = {}
    for n in range(lo, hi + 1):
        seq = trajectory(n)
        if canonical:
            seq = [collapse(v) for v in seq]
        merge_edges(edges, pairs(seq))

    if verbose:
        kind = "odd" if odd else "full"
        print(f"[graph {lo}..{hi} {kind}] {len(edges)} edges", file=sys.stderr)
    return edges


def graph(lo: int = DEFAULT_LO, hi: Optional[int] = None, **kwargs) -> str:
    """
    DOT document for graph_edges(lo, hi, **kwargs).

    The default range is DEFAULT_LO..DEFAULT_HI (1..256 unless
    HAILSTONE_GRAPH_HI is set).
    """
    return edges_to_dot(graph_edges(lo, hi, **kwargs))
