import re
from typing import List, Tuple

from fieldscan import logger
from fieldscan.errors import (
    InvalidTokenLength, InvalidTokenType, MissingClosingBracket, TooManyTokenParts,
)
from fieldscan.interval import Interval
from fieldscan.spec import (
    AnyByte, ByteSet, Decimal, Matcher, NonWhitespace, SignedInteger, Spec,
    UnsignedInteger, Whitespace, field_name,
)


OPEN_MARK = '{'
CLOSE_MARK = '}'
PART_SEP = ':'
LENGTH_RE = re.compile(r'[0-9]+')

TYPE_CODES = {
    '': AnyByte,
    '*': AnyByte,
    's': AnyByte,
    'w': NonWhitespace,
    'W': Whitespace,
    'i': SignedInteger,
    'u': UnsignedInteger,
    'd': Decimal,
}


def next_segment(rest: str) -> Tuple[str, str]:
    """Split off the leading literal run or ``{...}`` token of ``rest``."""
    if rest.startswith(OPEN_MARK):
        end = rest.find(CLOSE_MARK)
        if end < 0:
            raise MissingClosingBracket(rest)
        return rest[:end + 1], rest[end + 1:]

    end = rest.find(OPEN_MARK)
    if end < 0:
        return rest, ''
    return rest[:end], rest[end:]


def parse_type(code: str) -> Matcher:
    try:
        return TYPE_CODES[code]()
    except KeyError:
        pass

    if len(code) >= 2 and code.startswith('[') and code.endswith(']'):
        chars = code[1:-1]
        negated = chars.startswith('^')
        if negated:
            chars = chars[1:]
        return ByteSet(chars.encode('utf8'), negated=negated)

    raise InvalidTokenType(code)


def parse_length(text: str) -> Interval:
    if not LENGTH_RE.fullmatch(text):
        raise InvalidTokenLength(text)
    return Interval.exact(int(text))


def parse_token(token: str) -> Spec:
    """Parse ``{name:type:length}`` (braces included) into a Spec."""
    parts = token[1:-1].split(PART_SEP)
    if len(parts) > 3:
        raise TooManyTokenParts(token)

    name, code, length = parts + [None] * (3 - len(parts))
    matcher = parse_type(code) if code is not None else AnyByte()
    interval = parse_length(length) if length is not None else Interval.all()
    return Spec(field_name(name), interval, matcher)


def parse_template(template: str) -> List[Spec]:
    specs = []
    rest = template
    while rest:
        segment, rest = next_segment(rest)
        if segment.startswith(OPEN_MARK):
            spec = parse_token(segment)
        else:
            spec = Spec.literal(segment.encode('utf8'))
        logger.debug('parse.token', segment=segment, spec=str(spec))
        specs.append(spec)

    logger.debug('parse.done', template=template, count=len(specs))
    return specs
