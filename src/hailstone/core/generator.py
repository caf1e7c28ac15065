from __future__ import annotations

from typing import Iterator, List

from .parity import is_even, is_odd, require_natural


def step(n: int) -> int:
    """
    One Collatz step:
      n even -> n / 2
      n odd  -> 3n + 1
    """
    require_natural(n)
    if is_even(n):
        return n // 2
    return 3 * n + 1


def iter_run(n: int) -> Iterator[int]:
    """
    Lazily yield the hailstone trajectory n, step(n), ..., 1.

    The loop stops at the first 1; it does not follow the 1 -> 4 -> 2 -> 1 cycle.
    """
    require_natural(n)
    cur = n
    while cur != 1:
        yield cur
        cur = step(cur)
    yield 1


def run(n: int) -> List[int]:
    """
    Full hailstone sequence [n, step(n), step(step(n)), ..., 1].

    run(1) == [1].
    """
    return list(iter_run(n))


def run_odd(n: int) -> List[int]:
    """
    Hailstone sequence restricted to odd values.

    Walks the same trajectory as run(n) and keeps a value only when it is
    odd, so an even starting value is dropped and the terminal 1 is kept:

      run_odd(7) == [7, 11, 17, 13, 5, 1]
      run_odd(6) == [3, 5, 1]
    """
    return [v for v in iter_run(n) if is_odd(v)]
