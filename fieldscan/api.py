from typing import Dict, Optional

from fieldscan.errors import (
    MatchError, DoesNotMatch, SearchExhausted, TemplateError, MissingClosingBracket,
    InvalidTokenLength, InvalidTokenType, TooManyTokenParts,
)
from fieldscan.pattern import Pattern


__all__ = [
    'match_all', 'parse', 'Pattern',
    'MatchError', 'DoesNotMatch', 'SearchExhausted', 'TemplateError', 'MissingClosingBracket',
    'InvalidTokenLength', 'InvalidTokenType', 'TooManyTokenParts',
]


def parse(template: str) -> Pattern:
    return Pattern(template)


def match_all(template: str, input: str, max_steps: Optional[int] = None) -> Dict[str, str]:
    """Match ``input`` against ``template`` and return the named fields.

    Raise a ``TemplateError`` subclass for a malformed template,
    ``DoesNotMatch`` when no decomposition exists and ``SearchExhausted``
    when ``max_steps`` candidate trials were not enough to decide.
    """
    return parse(template).match_all(input, max_steps=max_steps)
