from __future__ import annotations

from typing import Iterator

from .parity import is_even, require_natural


def _exact_div(num: int, den: int) -> int:
    q, r = divmod(num, den)
    if r != 0:
        raise RuntimeError(
            f"internal consistency failure: {num} is not divisible by {den}"
        )
    return q


def collapse(n: int) -> int:
    """
    Strip trailing repeats of 0b01 from n.

    While n = 4m + 1, replace n by m (reaching 0 means the result is 1).
    A remaining odd value is returned; an even value n maps to 4n + 1.

    For odd n, collapse(n) and n reach the same next odd value, since
    3(4m + 1) + 1 = 4(3m + 1).
    """
    require_natural(n)
    cur = n
    while cur % 4 == 1:
        cur = _exact_div(cur - 1, 4)
        if cur == 0:
            return 1
    if is_even(cur):
        return 4 * cur + 1
    return cur


def _base_orbit_1() -> Iterator[int]:
    # 0b101, 0b10101, 0b1010101, ...
    total = 1
    power = 1
    while True:
        power *= 4
        total += power
        yield total


def _base_orbit_2() -> Iterator[int]:
    # 0b11, 0b1110001, 0b11100011, 0b1110001110001, ...
    total = 1
    while True:
        total = 2 * total + 1
        if total % 7 == 0:
            total = 16 * total + 1
        yield total


def base_orbit(level: int) -> Iterator[int]:
    """
    Infinite stream of representative values for the given level.

    level 1: 5, 21, 85, ...        (all collapse to 1)
    level 2: 3, 113, 227, 7281, ...

    Other levels have no known closed form and raise ValueError.
    """
    if level == 1:
        return _base_orbit_1()
    if level == 2:
        return _base_orbit_2()
    raise ValueError(f"base_orbit is only defined for level 1 or 2, got {level!r}")
