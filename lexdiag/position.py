"""
Byte offsets into UTF-8 text.

Scanners count positions in bytes of the UTF-8 encoding, while python
strings index by code point. These helpers translate between the two and
refuse offsets that do not land on the start of a character.
"""


def byte_len(string):
    """
    The length of the UTF-8 encoding of `string`

    Text with lone surrogates (from a surrogateescape decode, say) has no
    UTF-8 encoding and fails an assertion.
    """
    try:
        return len(string.encode('utf-8'))
    except UnicodeEncodeError as e:
        raise AssertionError(
            f"`string` must be encodable as UTF-8 ({string=})"
        ) from e


def _char_width(c):
    return byte_len(c)


def char_at(string, index):
    """
    Returns the character whose encoding starts at byte offset `index`

    Fails an assertion if `index` is out of range or falls between two
    bytes of the same character.
    """
    assert 0 <= index < byte_len(string), \
        f"`index` must be a valid index in `string` ({index=}, {string=})"

    offset = 0
    for c in string:
        if offset == index:
            return c
        if offset > index:
            break
        offset += _char_width(c)

    raise AssertionError(
        f"`index` is not a valid index in `string` ({index=}, {string=})"
    )


def split_at(string, index):
    """
    Splits `string` at byte offset `index`: ABCDEF, 2 -> AB CDEF

    `index` may be the length of the string, giving an empty tail.
    """
    assert 0 <= index <= byte_len(string), \
        f"`index` is out of range ({index=}, {string=})"

    offset = 0
    for i, c in enumerate(string):
        if offset == index:
            return string[:i], string[i:]
        if offset > index:
            break
        offset += _char_width(c)
    else:
        if offset == index:
            return string, ''

    raise AssertionError(
        f"`index` is not on a character boundary ({index=}, {string=})"
    )
