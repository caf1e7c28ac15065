"""
Run-length encoding of hailstone trajectories.

A trajectory is described by how many halving steps separate its odd
values. sequence(n) records

    [e0, e1, ..., ek]

where e0 >= 0 counts the halvings before the first odd value and every
following ei >= 1 counts the halvings after the i-th 3n + 1 step.
unsequence() inverts this by walking back up from 1.

e0 is always present, even when it is 0. Lists that omit a zero leading
count are read differently: [1, 1, 2, 3, 4] decodes to 22, not 7.
"""

from __future__ import annotations

from typing import List, Sequence

from .parity import is_even, require_natural


class InvalidEncodingError(ValueError):
    """Raised when a run-length list corresponds to no hailstone trajectory."""

    def __init__(self, encoding: Sequence[int], reason: str):
        self.encoding = list(encoding) if isinstance(encoding, (list, tuple)) else encoding
        self.reason = reason
        super().__init__(f"not a valid hailstone encoding {encoding!r}: {reason}")


def sequence(n: int) -> List[int]:
    """
    Encode the trajectory of n as halving run lengths.

      sequence(1) == [0]
      sequence(7) == [0, 1, 1, 2, 3, 4]
      sequence(8) == [3]
    """
    require_natural(n)
    out: List[int] = []
    e = 0
    cur = n
    while cur != 1:
        if is_even(cur):
            cur //= 2
            e += 1
        else:
            out.append(e)
            cur = 3 * cur + 1
            e = 0
    out.append(e)
    return out


def unsequence(encoding: Sequence[int]) -> int:
    """
    Reconstruct the starting value from sequence(n).

    Applies the inverse of each odd step (multiply by 2**e, subtract 1,
    divide by 3) from the end of the list, then restores the leading
    halvings. Raises InvalidEncodingError if any stage fails.
    """
    if not isinstance(encoding, (list, tuple)) or len(encoding) == 0:
        raise InvalidEncodingError(encoding, "expected a non-empty list of run lengths")
    for e in encoding:
        if not isinstance(e, int) or isinstance(e, bool) or e < 0:
            raise InvalidEncodingError(encoding, f"run length {e!r} is not a non-negative int")

    head, tail = encoding[0], encoding[1:]
    acc = 1
    for e in reversed(tail):
        if e < 1:
            raise InvalidEncodingError(encoding, "3n + 1 is always even, run length must be >= 1")
        q, r = divmod(acc * 2**e - 1, 3)
        if r != 0:
            raise InvalidEncodingError(encoding, f"{acc * 2**e} - 1 is not divisible by 3")
        if q == 1:
            raise InvalidEncodingError(encoding, "trajectory passes through 1 before its end")
        acc = q
    return acc * 2**head
