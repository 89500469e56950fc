"""
Lexical classifiers for right-hand side values.

Each classifier looks ahead from a cursor and answers whether the text
there matches one value grammar. Cursors are immutable, so classification
never consumes input.

Supports:
- Integers: optional sign, digits, no leading zero, not followed by '.'
- Reals: optional sign, digits, '.', digits (a bare '.' is rejected)
- Strings: '"' ... '"' on the same line
- Arrays: '[' ... ']' with balanced brackets on the same line
"""

from collections.abc import Callable

from ..models.values import ValueKind
from .cursor import Cursor


def is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _skip_sign(cursor: Cursor) -> Cursor:
    if cursor.current() in ("+", "-"):
        return cursor.advance()
    return cursor


def is_integer(cursor: Cursor) -> bool:
    """
    Check for an integer literal.

    A literal whose first digit is '0' is rejected, so "0" itself never
    classifies as an integer.
    """
    it = _skip_sign(cursor)
    if it.at_end or it.current() == "0":
        return False

    digits_end = it.skip_while(is_digit)
    if digits_end.current() == ".":
        # This is a real
        return False
    return digits_end.pos > it.pos


def is_real(cursor: Cursor) -> bool:
    """Check for a real literal such as 1.5, 3. or .5"""
    it = _skip_sign(cursor)
    if it.at_end:
        return False

    after_int = it.skip_while(is_digit)
    if after_int.current() != ".":
        return False
    after_frac = after_int.advance().skip_while(is_digit)

    return it.span_to(after_frac) != "."


def is_string(cursor: Cursor) -> bool:
    """Check for a double-quoted string closed on the same line."""
    if cursor.current() != '"':
        return False
    closing = cursor.advance().skip_until('"')
    return not closing.at_end


def is_array(cursor: Cursor) -> bool:
    """Check for an array literal whose brackets balance before end of line."""
    if cursor.current() != "[":
        return False

    it = cursor.advance()
    level = 1
    while not it.at_end:
        char = it.current()
        if char == "[":
            level += 1
        elif char == "]":
            level -= 1
            if level == 0:
                return True
        it = it.advance()
    return False


# Classification order matters: first match wins
CLASSIFIERS: tuple[tuple[ValueKind, Callable[[Cursor], bool]], ...] = (
    (ValueKind.INTEGER, is_integer),
    (ValueKind.REAL, is_real),
    (ValueKind.STRING, is_string),
    (ValueKind.ARRAY, is_array),
)


def classify(cursor: Cursor) -> ValueKind | None:
    """Return the kind of value starting at cursor, or None."""
    for kind, predicate in CLASSIFIERS:
        if predicate(cursor):
            return kind
    return None
