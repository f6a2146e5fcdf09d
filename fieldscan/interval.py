from collections import namedtuple
from typing import Callable, Iterator, List, Optional


class OutOfBounds(Exception):
    pass


class _Unbound:
    def __repr__(self):
        return 'UNBOUND'


UNBOUND = _Unbound()


class _Endpoint:
    __slots__ = ('value',)

    def __init__(self, value: int):
        self.value = value

    def __eq__(self, other):
        return type(self) is type(other) and self.value == other.value

    def __hash__(self):
        return hash((type(self).__name__, self.value))

    def __repr__(self):
        return '%s(%r)' % (type(self).__name__, self.value)


class At(_Endpoint):
    __slots__ = ()


class After(_Endpoint):
    __slots__ = ()


class Before(_Endpoint):
    __slots__ = ()


Continue = namedtuple('Continue', 'value')
Stop = namedtuple('Stop', 'value')


class Interval:
    """A range of integers, each end inclusive, exclusive or unbound.

    ``low`` is one of ``At``, ``After`` or ``UNBOUND``;
    ``high`` is one of ``At``, ``Before`` or ``UNBOUND``.
    """
    __slots__ = ('low', 'high')

    def __init__(self, low, high):
        if not (low is UNBOUND or isinstance(low, (At, After))):
            raise ValueError('invalid low end: %r' % (low,))
        if not (high is UNBOUND or isinstance(high, (At, Before))):
            raise ValueError('invalid high end: %r' % (high,))
        self.low = low
        self.high = high

    @classmethod
    def exact(cls, value: int) -> 'Interval':
        return cls(At(value), At(value))

    @classmethod
    def at_least(cls, value: int) -> 'Interval':
        return cls(At(value), UNBOUND)

    @classmethod
    def at_most(cls, value: int) -> 'Interval':
        return cls(UNBOUND, At(value))

    @classmethod
    def all(cls) -> 'Interval':
        return cls(UNBOUND, UNBOUND)

    @property
    def first(self) -> Optional[int]:
        """Inclusive lower end, or None when unbound."""
        if self.low is UNBOUND:
            return None
        elif isinstance(self.low, After):
            return self.low.value + 1
        return self.low.value

    @property
    def last(self) -> Optional[int]:
        """Inclusive upper end, or None when unbound."""
        if self.high is UNBOUND:
            return None
        elif isinstance(self.high, Before):
            # Before(0) -> -1, an empty interval on the unsigned domain
            return self.high.value - 1
        return self.high.value

    def is_unbounded(self):
        return self.low is UNBOUND or self.high is UNBOUND

    def is_empty(self):
        """An interval with an unbound end is never empty."""
        if self.is_unbounded():
            return False
        return self.first > self.last

    def bounded_within(self, lowest: int, highest: int) -> 'BoundedInterval':
        """Clamp unbound ends to ``lowest``/``highest``.

        Raise ``OutOfBounds`` if the clamped interval is not within
        ``[lowest, highest]``.
        """
        low = At(lowest) if self.low is UNBOUND else self.low
        high = At(highest) if self.high is UNBOUND else self.high
        bounded = BoundedInterval(low, high)
        if not bounded.is_within(BoundedInterval(At(lowest), At(highest))):
            raise OutOfBounds(self, lowest, highest)
        return bounded

    def __eq__(self, other):
        if not isinstance(other, Interval):
            return NotImplemented
        return self.low == other.low and self.high == other.high

    def __hash__(self):
        return hash((self.low, self.high))

    def __repr__(self):
        return '%s(%r, %r)' % (type(self).__name__, self.low, self.high)

    def __str__(self):
        if self.low is UNBOUND:
            left = '(-inf'
        elif isinstance(self.low, After):
            left = '(%d' % self.low.value
        else:
            left = '[%d' % self.low.value

        if self.high is UNBOUND:
            right = '+inf)'
        elif isinstance(self.high, Before):
            right = '%d)' % self.high.value
        else:
            right = '%d]' % self.high.value

        return '{left}, {right}'.format_map(locals())


class BoundedInterval(Interval):
    __slots__ = ()

    def __init__(self, low, high):
        if low is UNBOUND or high is UNBOUND:
            raise ValueError('bounded interval needs concrete ends')
        super().__init__(low, high)

    def contains(self, value: int):
        return self.first <= value <= self.last

    def __contains__(self, value):
        return self.contains(value)

    def is_within(self, outer: 'BoundedInterval'):
        if outer.is_empty():
            return False
        if self.is_empty():
            return True
        return outer.first <= self.first and self.last <= outer.last

    def __len__(self):
        return max(0, self.last - self.first + 1)

    def __iter__(self) -> Iterator[int]:
        return iter(range(self.first, self.last + 1))

    def descending(self) -> Iterator[int]:
        return iter(range(self.last, self.first - 1, -1))

    def to_list(self) -> List[int]:
        return list(self)

    def map(self, func: Callable) -> list:
        return [func(value) for value in self]

    def walk(self, state, func: Callable):
        """Fold ``func(state, value)`` over the values in ascending order."""
        for value in self:
            state = func(state, value)
        return state

    def walk_until(self, state, func: Callable):
        """Like ``walk`` but ``func`` returns ``Continue(state)`` or ``Stop(state)``.

        The fold ends at the first ``Stop`` and returns its value.
        """
        for value in self:
            step = func(state, value)
            if isinstance(step, Stop):
                return step.value
            elif isinstance(step, Continue):
                state = step.value
            else:
                raise TypeError('walk_until expects Continue or Stop, got %r' % (step,))
        return state
