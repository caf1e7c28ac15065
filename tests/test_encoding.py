"""Tests for hailstone.core.encoding."""
import pytest

from hailstone.core.encoding import InvalidEncodingError, sequence, unsequence


def test_sequence_examples():
    assert sequence(1) == [0]
    assert sequence(7) == [0, 1, 1, 2, 3, 4]
    assert sequence(8) == [3]
    assert sequence(6) == [1, 1, 4]


def test_unsequence_seven():
    assert unsequence([0, 1, 1, 2, 3, 4]) == 7


def test_roundtrip_range():
    for n in range(1, 2000):
        assert unsequence(sequence(n)) == n


def test_roundtrip_big():
    n = 2**200 + 7
    assert unsequence(sequence(n)) == n


def test_sequence_rejects_non_natural():
    with pytest.raises(ValueError):
        sequence(0)
    with pytest.raises(ValueError):
        sequence(-7)


def test_unsequence_inexact_division():
    # 1 * 2**3 - 1 = 7 is not a multiple of 3
    with pytest.raises(InvalidEncodingError, match="not a valid hailstone encoding"):
        unsequence([0, 3])


def test_unsequence_passes_through_one():
    # (1 * 4 - 1) / 3 == 1: the trajectory would already have ended
    with pytest.raises(InvalidEncodingError):
        unsequence([0, 2])


def test_unsequence_zero_tail_run():
    with pytest.raises(InvalidEncodingError):
        unsequence([0, 0, 4])


@pytest.mark.parametrize("bad", [[], None, [1.0], [-1], [True]])
def test_unsequence_malformed(bad):
    with pytest.raises(InvalidEncodingError):
        unsequence(bad)


def test_invalid_encoding_is_value_error():
    with pytest.raises(ValueError) as exc:
        unsequence([0, 3])
    assert exc.value.encoding == [0, 3]


def test_leading_count_always_present():
    # [1, 1, 2, 3, 4] starts with one halving: 22 -> 11 -> ...
    assert sequence(22) == [1, 1, 2, 3, 4]
    assert unsequence([1, 1, 2, 3, 4]) == 22
    assert unsequence([0, 1, 1, 2, 3, 4]) == 7
