import unittest

import pytest

from fieldscan.interval import (
    UNBOUND, After, At, Before, BoundedInterval, Continue, Interval, OutOfBounds, Stop,
)


def B(low, high):
    return BoundedInterval(low, high)


def test_constructors():
    assert Interval.exact(3) == Interval(At(3), At(3))
    assert Interval.at_least(2) == Interval(At(2), UNBOUND)
    assert Interval.at_most(5) == Interval(UNBOUND, At(5))
    assert Interval.all() == Interval(UNBOUND, UNBOUND)
    assert repr(Interval.all()) == 'Interval(UNBOUND, UNBOUND)'


def test_endpoint_kind_matters():
    assert At(3) != After(3)
    assert Interval(At(3), UNBOUND) != Interval(After(3), UNBOUND)
    assert hash(Interval.exact(4)) == hash(Interval(At(4), At(4)))


def test_invalid_ends():
    with pytest.raises(ValueError):
        Interval(Before(1), UNBOUND)
    with pytest.raises(ValueError):
        Interval(UNBOUND, After(1))
    with pytest.raises(ValueError):
        BoundedInterval(At(0), UNBOUND)


def test_first_last():
    assert B(After(2), Before(5)).first == 3
    assert B(After(2), Before(5)).last == 4
    assert Interval.all().first is None
    assert Interval.at_least(1).last is None
    # Before(0) on lengths is empty, not wrapped around
    assert B(At(0), Before(0)).last == -1
    assert B(At(0), Before(0)).is_empty()


def test_is_empty():
    assert not Interval.all().is_empty()
    assert not Interval.at_least(10).is_empty()
    assert not Interval.exact(0).is_empty()
    assert Interval(At(5), At(4)).is_empty()
    assert Interval(After(4), Before(5)).is_empty()


def test_contains():
    interval = B(At(2), Before(5))
    assert not interval.contains(1)
    assert interval.contains(2)
    assert 4 in interval
    assert 5 not in interval
    assert 0 not in B(At(0), Before(0))


def test_is_within():
    outer = B(At(0), At(10))
    assert B(At(2), At(3)).is_within(outer)
    assert B(At(0), At(10)).is_within(outer)
    assert not B(At(0), At(11)).is_within(outer)
    assert not B(After(-2), At(3)).is_within(outer)
    # empty inner is within any non-empty outer
    assert B(At(20), At(19)).is_within(outer)
    # nothing is within an empty outer
    assert not B(At(20), At(19)).is_within(B(At(1), At(0)))
    assert not B(At(0), At(0)).is_within(B(At(1), At(0)))


def test_bounded_within():
    assert Interval.all().bounded_within(0, 7) == B(At(0), At(7))
    assert Interval.at_least(3).bounded_within(0, 7) == B(At(3), At(7))
    assert Interval.at_most(3).bounded_within(0, 7) == B(At(0), At(3))
    assert Interval.exact(7).bounded_within(0, 7) == B(At(7), At(7))
    # at_least past the domain clamps to an empty interval
    assert Interval.at_least(9).bounded_within(0, 7).is_empty()

    with pytest.raises(OutOfBounds):
        Interval.exact(8).bounded_within(0, 7)
    with pytest.raises(OutOfBounds):
        Interval.at_most(8).bounded_within(0, 7)
    with pytest.raises(OutOfBounds):
        Interval.all().bounded_within(3, 2)


def test_enumeration():
    interval = B(After(1), At(5))
    assert interval.to_list() == [2, 3, 4, 5]
    assert list(interval.descending()) == [5, 4, 3, 2]
    assert len(interval) == 4
    assert interval.map(lambda x: x * 10) == [20, 30, 40, 50]
    assert interval.walk(0, lambda acc, x: acc + x) == 14

    empty = B(At(3), Before(3))
    assert empty.to_list() == []
    assert list(empty.descending()) == []
    assert len(empty) == 0
    assert empty.walk('s', lambda acc, x: acc + 'x') == 's'


def test_walk_until():
    interval = B(At(1), At(100))

    def until_over_ten(acc, value):
        acc = acc + value
        return Stop(acc) if acc > 10 else Continue(acc)

    assert interval.walk_until(0, until_over_ten) == 15
    assert B(At(1), At(3)).walk_until(0, until_over_ten) == 6

    with pytest.raises(TypeError):
        interval.walk_until(0, lambda acc, value: acc)


def test_str():
    assert str(Interval.exact(3)) == '[3, 3]'
    assert str(Interval(After(2), Before(5))) == '(2, 5)'
    assert str(Interval.at_least(0)) == '[0, +inf)'
    assert str(Interval.all()) == '(-inf, +inf)'


class TestLengthDomain(unittest.TestCase):
    """Clamping lengths against what is left of an input."""

    def setUp(self):
        self.remaining = 5
        self.outer = B(At(0), At(self.remaining))

    def clamp(self, interval):
        return interval.bounded_within(0, self.remaining)

    def test_unbound_takes_domain(self):
        bounded = self.clamp(Interval.all())
        assert bounded == self.outer
        assert list(bounded.descending()) == [5, 4, 3, 2, 1, 0]

    def test_exclusive_ends(self):
        bounded = self.clamp(Interval(After(0), Before(5)))
        assert bounded.to_list() == [1, 2, 3, 4]
        assert bounded.is_within(self.outer)

    def test_too_long(self):
        with pytest.raises(OutOfBounds):
            self.clamp(Interval.exact(6))

    def test_nothing_left(self):
        self.remaining = 0
        assert self.clamp(Interval.all()).to_list() == [0]
        assert self.clamp(Interval.at_least(1)).is_empty()
