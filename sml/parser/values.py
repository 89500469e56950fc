"""
Value parsers.

Each parser takes a cursor positioned at the start of a value and returns
a (cursor, value) pair, where the new cursor sits just past the value.
"""

import math
import struct
from collections.abc import Callable

from ..errors import (
    InvalidArrayFormat,
    NumericConversionFailure,
    UnexpectedCharacter,
    UnexpectedEndOfLine,
    UnrecognizedValue,
)
from ..models.values import Array, Integer, Real, String, Value, ValueKind
from ..options import ParserOptions, RealPrecision
from .cursor import Cursor
from .lexer import classify, is_digit


ParseResult = tuple[Cursor, Value]
ElementParser = Callable[[Cursor], ParseResult]


def _unexpected(cursor: Cursor) -> Exception:
    """Error for the character under cursor (or end of line)."""
    if cursor.at_end:
        return UnexpectedEndOfLine(cursor.line, cursor.column)
    return UnexpectedCharacter(cursor.current(), cursor.line, cursor.column)


def _read_sign(cursor: Cursor) -> tuple[Cursor, int]:
    char = cursor.current()
    if char in ("+", "-"):
        return cursor.advance(), -1 if char == "-" else 1
    return cursor, 1


class ValueParser:
    """
    Recursive descent parser for right-hand side values.

    Grammar:
        value    := integer | real | string | array
        integer  := ('+'|'-')? digit+
        real     := ('+'|'-')? digit* '.' digit*
        string   := '"' (any char except '"')* '"'
        array    := '[' ws* value (sep ws* value ws*)* ']'
    """

    def __init__(self, options: ParserOptions | None = None):
        self.options = options or ParserOptions()
        self._parsers: dict[ValueKind, ElementParser] = {
            ValueKind.INTEGER: self.parse_integer,
            ValueKind.REAL: self.parse_real,
            ValueKind.STRING: self.parse_string,
            ValueKind.ARRAY: self.parse_array,
        }

    def parse_value(self, cursor: Cursor) -> ParseResult:
        """Classify the value at cursor and parse it."""
        if cursor.at_end:
            raise UnexpectedEndOfLine(cursor.line, cursor.column)

        kind = classify(cursor)
        if kind is None:
            raise UnrecognizedValue(cursor.line, cursor.column)

        return self._parsers[kind](cursor)

    def parse_integer(self, cursor: Cursor) -> tuple[Cursor, Integer]:
        start = cursor
        it, sign = _read_sign(cursor)

        digits_end = it.skip_while(is_digit)
        if digits_end.pos == it.pos:
            raise _unexpected(it)

        digits = it.span_to(digits_end)
        low, high = self.options.integer_range()
        # Longer digit runs cannot fit and would trip int()'s length limit
        if len(digits.lstrip("0")) > len(str(high)):
            raise NumericConversionFailure(
                start.span_to(digits_end), start.line, start.column
            )

        value = sign * int(digits)
        if not low <= value <= high:
            raise NumericConversionFailure(
                start.span_to(digits_end), start.line, start.column
            )

        return digits_end, Integer(value)

    def parse_real(self, cursor: Cursor) -> tuple[Cursor, Real]:
        start = cursor
        it, sign = _read_sign(cursor)

        dot = it.skip_while(is_digit)
        if dot.current() != ".":
            raise _unexpected(dot)
        end = dot.advance().skip_while(is_digit)

        text = it.span_to(end)
        if text == ".":
            raise _unexpected(end)

        value = self._to_float(text, start)
        return end, Real(value * sign)

    def _to_float(self, text: str, start: Cursor) -> float:
        """Convert digits with the configured precision; overflow and underflow both fail."""
        value = float(text)
        if math.isinf(value):
            raise NumericConversionFailure(text, start.line, start.column)

        if self.options.precision is RealPrecision.SINGLE:
            try:
                (value,) = struct.unpack("f", struct.pack("f", value))
            except OverflowError:
                raise NumericConversionFailure(text, start.line, start.column) from None

        if value == 0.0 and text.strip("0.") != "":
            raise NumericConversionFailure(text, start.line, start.column)

        return value

    def parse_string(self, cursor: Cursor) -> tuple[Cursor, String]:
        if cursor.current() != '"':
            raise _unexpected(cursor)

        begin = cursor.advance()  # skip opening quote
        end = begin.skip_until('"')
        if end.at_end:
            raise UnexpectedEndOfLine(end.line, end.column)

        return end.advance(), String(begin.span_to(end))

    def parse_array(self, cursor: Cursor) -> tuple[Cursor, Array]:
        """
        Parse an array literal.

        The element kind is fixed by looking ahead at the first element;
        every element is then parsed with that kind's parser. Empty arrays
        are not supported.
        """
        if cursor.current() != "[":
            raise _unexpected(cursor)

        first = cursor.advance().skip_whitespace()
        kind = classify(first)
        if kind is None:
            raise InvalidArrayFormat(cursor.line, cursor.column)

        return self._parse_elements(cursor, self._parsers[kind])

    def _parse_elements(self, cursor: Cursor, parse_element: ElementParser) -> tuple[Cursor, Array]:
        array = Array()
        it = cursor

        while it.current() != "]":
            if it.at_end:
                raise InvalidArrayFormat(cursor.line, cursor.column)

            # Skip '[' or the separator; any single character is accepted
            it = it.advance().skip_whitespace()

            it, element = parse_element(it)
            array.append(element)

            it = it.skip_whitespace()

        return it.advance(), array  # skip ']'
