from lexdiag.identifiers import is_valid_identifier
from lexdiag.kinds import (
    KINDS, ErrorKind,
    ExpectedIdentifier, ExpectedToken, ExpectedEscape, UnexpectedToken,
    InvalidEscape, InvalidIdentifier,
)


class LexDiagError(Exception):
    pass


class Error(LexDiagError):
    "a syntax error found while scanning. exactly one kind of error"

    __match_args__ = ('kind',)

    def __init__(self, kind: ErrorKind, /):
        if not isinstance(kind, KINDS):
            raise TypeError(
                f'expected one of {", ".join(k.__name__ for k in KINDS)},'
                f' got {type(kind).__name__}'
            )
        super().__init__(kind)
        self.kind = kind

    def __str__(self):
        return str(self.kind)

    def __repr__(self):
        return f'{self.__class__.__name__}({self.kind!r})'

    def __eq__(self, o):
        if not isinstance(o, Error):
            return NotImplemented
        return self.kind == o.kind

    def __hash__(self):
        return hash(self.kind)

    @property
    def line(self):
        return self.kind.line

    @classmethod
    def expected_identifier(cls, line, index):
        return cls(ExpectedIdentifier.new(line, index))

    @classmethod
    def expected_token(cls, line, index, tokens):
        return cls(ExpectedToken.new(line, index, tokens))

    @classmethod
    def expected_escape(cls, line, index, replace):
        return cls(ExpectedEscape.new(line, index, replace))

    @classmethod
    def unexpected_token(cls, line, index):
        return cls(UnexpectedToken.new(line, index))

    @classmethod
    def invalid_escape(cls, line, escape):
        return cls(InvalidEscape.new(line, escape))

    @classmethod
    def invalid_identifier(
        cls, line, identifier, is_valid=is_valid_identifier
    ):
        return cls(InvalidIdentifier.new(line, identifier, is_valid))
