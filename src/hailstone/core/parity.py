from __future__ import annotations


def is_even(n: int) -> bool:
    """True for nonzero multiples of 2 (negative values included)."""
    return n % 2 == 0 and n != 0


def is_odd(n: int) -> bool:
    return abs(n % 2) == 1


def is_natural(n: object) -> bool:
    """
    True iff n is an int strictly greater than 0.

    bool is rejected even though it subclasses int, and so are floats with
    an integral value (2.0 is not a natural number here).
    """
    return isinstance(n, int) and not isinstance(n, bool) and n > 0


def require_natural(n: object, name: str = "n") -> int:
    """Guard clause: return n unchanged, or raise ValueError."""
    if not is_natural(n):
        raise ValueError(f"{name} must be a natural number (int > 0), got {n!r}")
    return n  # type: ignore[return-value]
