from fieldscan.interval import Interval
from fieldscan.spec import (
    ANONYMOUS, AnyByte, ByteSet, Decimal, Literal, Named, NonWhitespace, SignedInteger,
    Spec, UnsignedInteger, Whitespace, field_name,
)


def test_field_name():
    assert field_name('') is ANONYMOUS
    assert field_name('_') is ANONYMOUS
    assert field_name('name') == Named('name')
    assert field_name('__') == Named('__')
    assert repr(ANONYMOUS) == 'ANONYMOUS'


def test_literal_spec():
    spec = Spec.literal(b'abc')
    assert spec.is_anonymous
    assert spec.length == Interval.exact(3)
    assert spec.matcher == Literal(b'abc')
    assert spec.matcher != Literal(b'abd')


def test_byte_matchers():
    def A(matcher, segment, expect):
        assert matcher.accepts(segment) is expect, (matcher, segment)

    A(AnyByte(), b'', True)
    A(AnyByte(), b'\x00 \xff', True)

    A(NonWhitespace(), b'ab-c', True)
    A(NonWhitespace(), b'ab c', False)
    A(NonWhitespace(), b'', True)

    A(Whitespace(), b' \t\r\n', True)
    A(Whitespace(), b' x', False)

    A(UnsignedInteger(), b'0123', True)
    A(UnsignedInteger(), b'', False)
    A(UnsignedInteger(), b'+1', False)

    A(SignedInteger(), b'-12', True)
    A(SignedInteger(), b'+0', True)
    A(SignedInteger(), b'12', True)
    A(SignedInteger(), b'1-2', False)
    A(SignedInteger(), b'-', False)
    A(SignedInteger(), b'', False)

    A(Decimal(), b'3.14', True)
    A(Decimal(), b'-3.', True)
    A(Decimal(), b'42', True)
    A(Decimal(), b'.5', False)
    A(Decimal(), b'1.2.3', False)
    A(Decimal(), b'+', False)

    A(ByteSet(b'abc'), b'cab', True)
    A(ByteSet(b'abc'), b'cabd', False)
    A(ByteSet(b'abc', negated=True), b'xyz', True)
    A(ByteSet(b'abc', negated=True), b'xaz', False)
    A(ByteSet(b''), b'', True)


def test_scan():
    data = b'-12a34'
    assert SignedInteger().scan(data, 0, len(data)) == 3
    assert SignedInteger().scan(data, 1, len(data)) == 2
    assert UnsignedInteger().scan(data, 0, len(data)) == 0
    assert AnyByte().scan(data, 2, 4) == 2
    assert Literal(b'-13').scan(data, 0, len(data)) == 2
    assert Literal(b'-12a34xyz').scan(data, 0, len(data)) == 6
    assert Decimal().scan(b'1.2.3', 0, 5) == 3
    assert Decimal().scan(b'-1.5x', 0, 5) == 4


def test_complete():
    assert not UnsignedInteger().complete(b'', 0, 0)
    assert UnsignedInteger().complete(b'7', 0, 1)
    assert not SignedInteger().complete(b'-', 0, 1)
    assert SignedInteger().complete(b'x-4', 1, 3)
    assert not Decimal().complete(b'.5', 0, 2)
    assert not Decimal().complete(b'+.5', 0, 3)
    assert Decimal().complete(b'+0.5', 0, 4)
    assert Literal(b'ab').complete(b'xab', 1, 3)
    assert not Literal(b'ab').complete(b'xab', 1, 2)


def test_matcher_equality():
    assert AnyByte() == AnyByte()
    assert AnyByte() != NonWhitespace()
    assert ByteSet(b'ab') == ByteSet(b'ba')
    assert ByteSet(b'ab') != ByteSet(b'ab', negated=True)
    assert len({SignedInteger(), SignedInteger(), Literal(b'x')}) == 2
