#!/usr/bin/env python3
"""
Print the trajectory of n, its odd-only form, and its run-length encoding,
then decode the encoding again.

Usage: python3 encode_trajectory.py n [n ...]
"""

import sys

from hailstone.core.generator import run, run_odd
from hailstone.core.encoding import InvalidEncodingError, sequence, unsequence


def main(argv):
    if not argv:
        print(__doc__.strip(), file=sys.stderr)
        return 2
    for tok in argv:
        n = int(tok)
        enc = sequence(n)
        print(f"n={n}")
        print(f"  steps:    {len(run(n)) - 1}")
        print(f"  odd:      {run_odd(n)}")
        print(f"  encoding: {enc}")
        try:
            back = unsequence(enc)
        except InvalidEncodingError as e:
            print(f"  decode failed: {e}", file=sys.stderr)
            return 1
        print(f"  decoded:  {back}")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
