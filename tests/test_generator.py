"""Tests for hailstone.core.generator."""
import pytest

from hailstone.core.generator import step, iter_run, run, run_odd


def test_step_trivial_cycle():
    # 1 -> 4 -> 2 -> 1
    assert step(1) == 4
    assert step(4) == 2
    assert step(2) == 1


@pytest.mark.parametrize("bad", [0, -1, 0.2, 2.0, None])
def test_step_rejects_non_natural(bad):
    with pytest.raises(ValueError):
        step(bad)


@pytest.mark.parametrize("bad", [0, -1, 0.2])
def test_run_rejects_non_natural(bad):
    with pytest.raises(ValueError):
        run(bad)
    with pytest.raises(ValueError):
        run_odd(bad)


def test_run_one():
    assert run(1) == [1]
    assert run_odd(1) == [1]


def test_run_seven():
    assert run(7) == [7, 22, 11, 34, 17, 52, 26, 13, 40, 20, 10, 5, 16, 8, 4, 2, 1]


def test_run_odd_seven():
    assert run_odd(7) == [7, 11, 17, 13, 5, 1]


def test_run_odd_drops_even_start():
    assert run_odd(6) == [3, 5, 1]
    assert run_odd(16) == [1]


def test_run_follows_step():
    for n in range(1, 300):
        seq = run(n)
        assert seq[0] == n
        assert seq[-1] == 1
        assert seq.count(1) == 1
        for a, b in zip(seq, seq[1:]):
            assert b == (a // 2 if a % 2 == 0 else 3 * a + 1)


def test_run_odd_is_odd_subsequence_of_run():
    for n in range(1, 300):
        assert run_odd(n) == [v for v in run(n) if v % 2 == 1]


def test_huge_power_of_two():
    n = 2**1023
    assert run_odd(n) == [1]
    seq = run(n)
    assert len(seq) == 1024
    assert seq == [2**k for k in range(1023, -1, -1)]


def test_big_odd_value_exact():
    # 2**100 + 1 is odd, 3n + 1 must not lose precision
    n = 2**100 + 1
    assert run(n)[1] == 3 * 2**100 + 4


def test_iter_run_is_lazy():
    it = iter_run(27)
    assert next(it) == 27
    assert next(it) == 82
    assert list(iter_run(27))[-1] == 1
