class MatchError(Exception):
    pass


class DoesNotMatch(MatchError):
    pass


class SearchExhausted(MatchError):
    """The backtracking search ran past its step budget."""

    @property
    def steps(self) -> int:
        return self.args[0]


class TemplateError(MatchError):
    @property
    def text(self) -> str:
        return self.args[0] if self.args else ''


class MissingClosingBracket(TemplateError):
    pass


class InvalidTokenLength(TemplateError):
    pass


class InvalidTokenType(TemplateError):
    pass


class TooManyTokenParts(TemplateError):
    pass
