# The scanner owns the definition of an identifier. This is the rule used
# when it doesn't supply one of its own.


def is_ident_start(c):
    return 'a' <= c <= 'z' or 'A' <= c <= 'Z' or c == '_'


def is_ident(c):
    return is_ident_start(c) or '0' <= c <= '9'


def is_valid_identifier(text):
    """an identifier is a letter or underscore followed by letters, digits
    and underscores: x, _tmp, foo_2"""
    if not text:
        return False
    return is_ident_start(text[0]) and all(is_ident(c) for c in text[1:])
