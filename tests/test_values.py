"""
Tests for the value parsers.
"""

import pytest

from sml.errors import (
    InvalidArrayFormat,
    NumericConversionFailure,
    ParseError,
    UnexpectedCharacter,
    UnexpectedEndOfLine,
    UnrecognizedValue,
)
from sml.models.values import Array, Integer, Real, String
from sml.options import ParserOptions, RealPrecision
from sml.parser.values import ValueParser

from conftest import cursor


@pytest.fixture
def values() -> ValueParser:
    return ValueParser()


def parse(values: ValueParser, text: str):
    it, value = values.parse_value(cursor(text))
    return value, text[it.pos:]


def test_integer(values: ValueParser) -> None:
    assert parse(values, "8080") == (Integer(8080), "")
    assert parse(values, "-15 # c") == (Integer(-15), " # c")
    assert parse(values, "+3") == (Integer(3), "")


def test_integer_overflow_32_bit(values: ValueParser) -> None:
    assert parse(values, "2147483647")[0] == Integer(2147483647)
    assert parse(values, "-2147483648")[0] == Integer(-2147483648)

    with pytest.raises(NumericConversionFailure):
        values.parse_value(cursor("2147483648"))


def test_integer_beyond_conversion_limit() -> None:
    """Very long digit runs fail as out of range, not with int() errors."""
    with pytest.raises(NumericConversionFailure):
        ValueParser().parse_value(cursor("9" * 5000))
    with pytest.raises(NumericConversionFailure):
        ValueParser(ParserOptions(integer_bits=64)).parse_value(cursor("-" + "1" * 20))


def test_integer_64_bit_option() -> None:
    values = ValueParser(ParserOptions(integer_bits=64))

    assert parse(values, "2147483648")[0] == Integer(2147483648)
    with pytest.raises(NumericConversionFailure):
        values.parse_value(cursor("9223372036854775808"))


def test_zero_is_not_a_value(values: ValueParser) -> None:
    with pytest.raises(UnrecognizedValue):
        values.parse_value(cursor("0"))


def test_real(values: ValueParser) -> None:
    assert parse(values, "1.5") == (Real(1.5), "")
    assert parse(values, "3.") == (Real(3.0), "")
    assert parse(values, ".5") == (Real(0.5), "")
    assert parse(values, "-0.25") == (Real(-0.25), "")
    assert parse(values, "0.1")[0] == Real(0.1)


def test_bare_dot_is_unrecognized(values: ValueParser) -> None:
    with pytest.raises(UnrecognizedValue):
        values.parse_value(cursor("."))


def test_real_single_precision() -> None:
    values = ValueParser(ParserOptions(precision=RealPrecision.SINGLE))
    value, _ = parse(values, "0.1")

    assert value.value != 0.1
    assert value.value == pytest.approx(0.1, rel=1e-7)


def test_real_out_of_range() -> None:
    huge = "9" * 400 + ".0"
    with pytest.raises(NumericConversionFailure):
        ValueParser().parse_value(cursor(huge))

    with pytest.raises(NumericConversionFailure):
        ValueParser(ParserOptions(precision="single")).parse_value(cursor("1" + "0" * 40 + "."))


def test_real_underflow() -> None:
    tiny = "0." + "0" * 400 + "1"
    with pytest.raises(NumericConversionFailure):
        ValueParser().parse_value(cursor(tiny))

    # Fits a double but not a float
    small = "0." + "0" * 50 + "1"
    assert ValueParser().parse_value(cursor(small))[1].value > 0
    with pytest.raises(NumericConversionFailure):
        ValueParser(ParserOptions(precision="single")).parse_value(cursor(small))


def test_real_zero_is_not_underflow() -> None:
    assert ValueParser().parse_value(cursor("0.000"))[1] == Real(0.0)
    assert ValueParser().parse_value(cursor("-.0"))[1] == Real(0.0)


def test_string_is_raw(values: ValueParser) -> None:
    assert parse(values, '"localhost"') == (String("localhost"), "")
    assert parse(values, '"a\\nb" x') == (String("a\\nb"), " x")
    assert parse(values, '""') == (String(""), "")
    assert parse(values, '"# not a comment"')[0] == String("# not a comment")


def test_array_of_integers(values: ValueParser) -> None:
    value, rest = parse(values, "[1, 2, 3]")

    assert isinstance(value, Array)
    assert value.to_python() == [1, 2, 3]
    assert value.array_is(Integer)
    assert rest == ""


def test_array_whitespace(values: ValueParser) -> None:
    value, _ = parse(values, '[ "a" ,"b",\t"c" ]')

    assert value.to_python() == ["a", "b", "c"]


def test_nested_arrays(values: ValueParser) -> None:
    value, _ = parse(values, '[[1, 2], ["x"], [1.5]]')

    assert value.to_python() == [[1, 2], ["x"], [1.5]]
    assert value.array_is(Array)


def test_mixed_array_fails_on_second_element(values: ValueParser) -> None:
    with pytest.raises(ParseError) as exc_info:
        values.parse_value(cursor('[1, "x"]'))

    assert isinstance(exc_info.value, UnexpectedCharacter)
    assert exc_info.value.column == 5


def test_mixed_real_then_integer_fails(values: ValueParser) -> None:
    with pytest.raises(ParseError):
        values.parse_value(cursor("[1.5, 2]"))


@pytest.mark.parametrize("text", ["[]", "[ ]", "[[]]", "[x]"])
def test_empty_or_unknown_array_fails(values: ValueParser, text: str) -> None:
    with pytest.raises(InvalidArrayFormat):
        values.parse_value(cursor(text))


def test_unterminated_array_is_unrecognized(values: ValueParser) -> None:
    with pytest.raises(UnrecognizedValue):
        values.parse_value(cursor("[1, 2"))


def test_array_separator_is_not_validated(values: ValueParser) -> None:
    """Any single character is skipped before each element."""
    assert parse(values, "[1;2]")[0].to_python() == [1, 2]
    assert parse(values, "[1|2|3]")[0].to_python() == [1, 2, 3]
    # The separator skip swallows the '2'
    assert parse(values, "[1 2 3]")[0].to_python() == [1, 3]


def test_trailing_separator_fails(values: ValueParser) -> None:
    with pytest.raises(UnexpectedCharacter):
        values.parse_value(cursor("[1, 2,]"))


def test_value_at_end_of_line(values: ValueParser) -> None:
    with pytest.raises(UnexpectedEndOfLine):
        values.parse_value(cursor(""))


@pytest.mark.parametrize("text", ["abc", "true", "'x'", "-", "007"])
def test_unrecognized_values(values: ValueParser, text: str) -> None:
    with pytest.raises(UnrecognizedValue):
        values.parse_value(cursor(text))
