from dataclasses import dataclass, field
from typing import Callable, Union

from lexdiag.identifiers import is_valid_identifier
from lexdiag.position import byte_len, char_at, split_at


# -------------
#  Error Kinds
# -------------
#
# Offsets are byte offsets into the UTF-8 encoding of `line`. Each kind
# checks its fields in __post_init__, however it was built; `new` derives
# whatever fields can be worked out from the line. Bad arguments are a bug
# in the scanner, not bad input, so they fail an assertion rather than
# raise a LexDiagError.

HERE = '{here}'


def _assert_index(line, index):
    assert 0 <= index < byte_len(line), \
        f"`index` must be a valid index in `line` ({index=}, {line=})"


def _assert_token(line, index, token):
    # char_at checks the index is in range and on a character boundary
    assert token == char_at(line, index), \
        f"`token` must be the character at `index` ({token=}, {index=})"


@dataclass(frozen=True, slots=True)
class ExpectedIdentifier:
    line: str
    index: int

    def __post_init__(self):
        _assert_index(self.line, self.index)

    @classmethod
    def new(cls, line, index):
        """
        line: the line where the error occurred. Should be complete
        index: the index where the identifier is expected
        """
        return cls(line, index)

    def __str__(self):
        before, after = split_at(self.line, self.index)
        return f"Expected identifier {before}{HERE}{after}"


@dataclass(frozen=True, slots=True)
class ExpectedToken:
    line: str
    index: int
    # printed as is to the end user, so format it for them
    tokens: str

    def __post_init__(self):
        _assert_index(self.line, self.index)

    @classmethod
    def new(cls, line, index, tokens):
        return cls(line, index, tokens)

    def __str__(self):
        before, after = split_at(self.line, self.index)
        return f"Expected {self.tokens} {before}{HERE}{after}"


@dataclass(frozen=True, slots=True)
class ExpectedEscape:
    line: str
    index: int
    replace: str
    token: str

    def __post_init__(self):
        _assert_token(self.line, self.index, self.token)

    @classmethod
    def new(cls, line, index, replace):
        """
        line: the line where the error occurred
        index: the index of the character that should have been escaped
        replace: the escape sequence which should be used instead

        `index` must be in range and at the start of a character.
        """
        return cls(line, index, replace, char_at(line, index))

    def __str__(self):
        before, _ = split_at(self.line, self.index)
        _, rest = split_at(self.line, self.index + byte_len(self.token))
        return (
            f"Expected escape sequence {self.replace} instead of {self.token}"
            f" in {before}{HERE}{rest}"
        )


@dataclass(frozen=True, slots=True)
class UnexpectedToken:
    line: str
    index: int
    token: str

    def __post_init__(self):
        _assert_token(self.line, self.index, self.token)

    @classmethod
    def new(cls, line, index):
        return cls(line, index, char_at(line, index))

    def __str__(self):
        before, _ = split_at(self.line, self.index)
        return f"Unexpected token {self.token} {before}{HERE}"


@dataclass(frozen=True, slots=True)
class InvalidEscape:
    line: str
    escape: str

    def __post_init__(self):
        assert self.escape in self.line, \
            f"`line` must contain `escape` ({self.escape=}, {self.line=})"

    @classmethod
    def new(cls, line, escape):
        return cls(line, escape)

    def __str__(self):
        return f"Invalid escape sequence {self.escape} in {self.line}"


@dataclass(frozen=True, slots=True)
class InvalidIdentifier:
    line: str
    ident: str
    # the scanner's notion of a valid identifier
    is_valid: Callable[[str], bool] = field(
        default=is_valid_identifier, repr=False, compare=False
    )

    def __post_init__(self):
        assert self.ident in self.line, \
            f"`line` must contain `identifier` ({self.ident=}, {self.line=})"
        assert not self.is_valid(self.ident), \
            f"`identifier` must be an invalid identifier ({self.ident=})"

    @classmethod
    def new(
        cls,
        line: str,
        identifier: str,
        is_valid: Callable[[str], bool] = is_valid_identifier,
    ):
        """
        line: the line where the error occurred
        identifier: the identifier found. It must be invalid according to
            `is_valid`
        """
        return cls(line, identifier, is_valid)

    def __str__(self):
        return f"Invalid identifier {self.ident} in {self.line}"


ErrorKind = Union[
    ExpectedIdentifier,
    ExpectedToken,
    ExpectedEscape,
    UnexpectedToken,
    InvalidEscape,
    InvalidIdentifier,
]

KINDS = (
    ExpectedIdentifier,
    ExpectedToken,
    ExpectedEscape,
    UnexpectedToken,
    InvalidEscape,
    InvalidIdentifier,
)
