from .parity import is_even, is_odd, is_natural, require_natural
from .generator import step, iter_run, run, run_odd
from .collapse import collapse, base_orbit
from .encoding import InvalidEncodingError, sequence, unsequence

__all__ = [
    "is_even",
    "is_odd",
    "is_natural",
    "require_natural",
    "step",
    "iter_run",
    "run",
    "run_odd",
    "collapse",
    "base_orbit",
    "InvalidEncodingError",
    "sequence",
    "unsequence",
]
