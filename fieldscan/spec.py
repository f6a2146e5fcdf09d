from collections import namedtuple

from fieldscan.interval import Interval


WHITESPACE = frozenset(b' \t\n\r\x0b\x0c')
DIGITS = frozenset(b'0123456789')
SIGNS = frozenset(b'+-')
DOT = ord('.')


class _Anonymous:
    def __repr__(self):
        return 'ANONYMOUS'


ANONYMOUS = _Anonymous()

Named = namedtuple('Named', 'identifier')


def field_name(text: str):
    if text in ('', '_'):
        return ANONYMOUS
    return Named(text)


class Matcher:
    """Acceptance rule for one input segment.

    ``scan`` walks the input once; ``complete`` is the constant time check
    left for a prefix ``scan`` has already accepted.
    """

    def scan(self, data: bytes, start: int, stop: int) -> int:
        """Return the length of the longest accepted prefix of ``data[start:stop]``."""
        raise NotImplementedError

    def complete(self, data: bytes, start: int, stop: int) -> bool:
        """Final check on ``data[start:stop]``, a prefix accepted by ``scan``."""
        return True

    def accepts(self, segment: bytes) -> bool:
        size = len(segment)
        return self.scan(segment, 0, size) == size and self.complete(segment, 0, size)

    def __eq__(self, other):
        return type(self) is type(other) and self._key() == other._key()

    def __hash__(self):
        return hash((type(self).__name__, self._key()))

    def _key(self):
        return ()

    def __repr__(self):
        return '<%s>' % (type(self).__name__,)


class ByteMatcher(Matcher):
    """Checks each byte of a segment with ``accept_byte(index, byte)``."""

    def accept_byte(self, index: int, byte: int) -> bool:
        raise NotImplementedError

    def scan(self, data, start, stop):
        accept = self.accept_byte
        for pos in range(start, stop):
            if not accept(pos - start, data[pos]):
                return pos - start
        return stop - start


def _skip_sign(data, start, stop):
    if start < stop and data[start] in SIGNS:
        return start + 1
    return start


class AnyByte(ByteMatcher):
    def accept_byte(self, index, byte):
        return True

    def scan(self, data, start, stop):
        return stop - start


class NonWhitespace(ByteMatcher):
    def accept_byte(self, index, byte):
        return byte not in WHITESPACE


class Whitespace(ByteMatcher):
    def accept_byte(self, index, byte):
        return byte in WHITESPACE


class UnsignedInteger(ByteMatcher):
    def accept_byte(self, index, byte):
        return byte in DIGITS

    def complete(self, data, start, stop):
        return stop > start


class SignedInteger(ByteMatcher):
    def accept_byte(self, index, byte):
        return byte in DIGITS or (index == 0 and byte in SIGNS)

    def complete(self, data, start, stop):
        # a sign can only lead, so anything after it is a digit
        return _skip_sign(data, start, stop) < stop


class Decimal(ByteMatcher):
    def accept_byte(self, index, byte):
        return byte in DIGITS or byte == DOT or (index == 0 and byte in SIGNS)

    def scan(self, data, start, stop):
        seen_dot = False
        for pos in range(start, stop):
            byte = data[pos]
            if byte == DOT:
                if seen_dot:
                    return pos - start
                seen_dot = True
            elif not self.accept_byte(pos - start, byte):
                return pos - start
        return stop - start

    def complete(self, data, start, stop):
        # digits are needed before the dot
        body = _skip_sign(data, start, stop)
        return body < stop and data[body] != DOT


class ByteSet(ByteMatcher):
    def __init__(self, chars: bytes, negated=False):
        self.chars = frozenset(chars)
        self.negated = negated

    def accept_byte(self, index, byte):
        return (byte in self.chars) != self.negated

    def _key(self):
        return self.chars, self.negated

    def __repr__(self):
        return '<ByteSet %s%r>' % ('^' if self.negated else '', bytes(sorted(self.chars)))


class Literal(Matcher):
    def __init__(self, text: bytes):
        self.text = text

    def scan(self, data, start, stop):
        if data.startswith(self.text, start, stop):
            return len(self.text)
        count = 0
        for expected, pos in zip(self.text, range(start, stop)):
            if data[pos] != expected:
                break
            count += 1
        return count

    def complete(self, data, start, stop):
        return stop - start == len(self.text)

    def accepts(self, segment):
        return segment == self.text

    def _key(self):
        return self.text

    def __repr__(self):
        return '<Literal %r>' % (self.text,)


class Spec(namedtuple('Spec', 'field_name length matcher')):
    """One template unit: a field name (or ANONYMOUS), a length Interval and a Matcher."""
    __slots__ = ()

    @classmethod
    def literal(cls, text: bytes) -> 'Spec':
        return cls(ANONYMOUS, Interval.exact(len(text)), Literal(text))

    @property
    def is_anonymous(self):
        return self.field_name is ANONYMOUS

    def __str__(self):
        if isinstance(self.matcher, Literal):
            return repr(self.matcher.text)
        name = '_' if self.is_anonymous else self.field_name.identifier
        return '{%s %s %s}' % (name, type(self.matcher).__name__, self.length)
