#!/usr/bin/env python3
"""
Write the merged hailstone tree for a range of starting values as DOT.

Usage:
    python write_graph.py [lo] [hi] [--full] [--canonical] [-o OUT]

Render with Graphviz, e.g.:
    dot -Tpng collatz.dot -o collatz.png

Requires the hailstone package.
"""

import argparse
import sys

from hailstone.graph.aggregate import DEFAULT_LO, DEFAULT_HI, graph, graph_edges
from hailstone.graph.tree import is_rooted_tree


def main():
    ap = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    ap.add_argument("lo", type=int, nargs="?", default=DEFAULT_LO)
    ap.add_argument("hi", type=int, nargs="?", default=DEFAULT_HI)
    ap.add_argument("--full", action="store_true", help="keep even values (run instead of run_odd)")
    ap.add_argument("--canonical", action="store_true", help="collapse values before pairing")
    ap.add_argument("--check", action="store_true", help="verify the edges form a tree rooted at 1")
    ap.add_argument("-o", "--out", default=None, help="output file (default: stdout)")
    args = ap.parse_args()

    kw = dict(odd=not args.full, canonical=args.canonical, verbose=True)

    if args.check:
        ok = is_rooted_tree(graph_edges(args.lo, args.hi, **kw))
        print(f"[check] rooted tree: {ok}", file=sys.stderr)

    text = graph(args.lo, args.hi, **kw)
    if args.out:
        with open(args.out, "w", encoding="utf-8") as f:
            f.write(text)
        print(f"wrote {args.out}", file=sys.stderr)
    else:
        sys.stdout.write(text)


if __name__ == "__main__":
    main()
