from __future__ import annotations

from itertools import tee
from typing import Dict, Iterable, Iterator, Tuple


def pairs(seq: Iterable[int]) -> Iterator[Tuple[int, int]]:
    """
    Consecutive overlapping pairs (a, b), b directly following a.

      pairs([7, 11, 17]) -> (7, 11), (11, 17)
    """
    a, b = tee(seq)
    next(b, None)
    return zip(a, b)


def merge_edges(edges: Dict[int, int], new: Iterable[Tuple[int, int]]) -> Dict[int, int]:
    """
    Fold (child, parent) pairs into edges, in place, and return it.

    The union of all hailstone trajectories is a tree rooted at 1 in which
    every node has one parent. Keying on the child therefore never loses an
    edge: a repeated key always carries the same parent. The first-seen
    position of each key is kept.

    Raises RuntimeError if a key reappears with a different parent.
    """
    for child, parent in new:
        seen = edges.setdefault(child, parent)
        if seen != parent:
            raise RuntimeError(
                f"edge collision at {child}: {child} -> {seen} vs {child} -> {parent}"
            )
    return edges
