"""
Error kinds raised while parsing a document.

Every error is fatal to the parse call that raised it.
"""

from enum import Enum, auto


class ErrorKind(Enum):
    """Categories of parse failure."""

    UNEXPECTED_END_OF_LINE = auto()
    UNEXPECTED_CHARACTER = auto()
    DUPLICATE_KEY = auto()
    UNDEFINED_PATH = auto()
    INVALID_ARRAY_FORMAT = auto()
    UNRECOGNIZED_VALUE = auto()
    NUMERIC_CONVERSION_FAILURE = auto()
    SOURCE_UNAVAILABLE = auto()


class ParseError(Exception):
    """Base class for all parse errors."""

    kind: ErrorKind | None = None

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
        filename: str | None = None,
    ):
        self.message = message
        self.line = line
        self.column = column
        self.filename = filename
        if line is not None and column is not None:
            super().__init__(f"Line {line}, column {column}: {message}")
        elif line is not None:
            super().__init__(f"Line {line}: {message}")
        else:
            super().__init__(message)


class UnexpectedEndOfLine(ParseError):
    """A construct was not closed before the line ended."""

    kind = ErrorKind.UNEXPECTED_END_OF_LINE

    def __init__(self, line: int | None = None, column: int | None = None):
        super().__init__("Unexpected EOL.", line, column)


class UnexpectedCharacter(ParseError):
    """Trailing or otherwise unexpected content on a line."""

    kind = ErrorKind.UNEXPECTED_CHARACTER

    def __init__(self, char: str, line: int | None = None, column: int | None = None):
        self.char = char
        super().__init__(f"Unexpected character '{char}'.", line, column)


class DuplicateKey(ParseError):
    """A key or table path was defined twice."""

    kind = ErrorKind.DUPLICATE_KEY

    def __init__(self, key: str, line: int | None = None, column: int | None = None):
        self.key = key
        super().__init__(f"Key duplicated ({key})", line, column)


class UndefinedPath(ParseError):
    """An intermediate table path does not exist or is not a table."""

    kind = ErrorKind.UNDEFINED_PATH

    def __init__(self, path: str, line: int | None = None, column: int | None = None):
        self.path = path
        super().__init__(f"Key is not defined ({path}).", line, column)


class InvalidArrayFormat(ParseError):
    """Malformed, empty or unterminated array literal."""

    kind = ErrorKind.INVALID_ARRAY_FORMAT

    def __init__(self, line: int | None = None, column: int | None = None):
        super().__init__("Invalid array format.", line, column)


class UnrecognizedValue(ParseError):
    """The right-hand side matched no value grammar."""

    kind = ErrorKind.UNRECOGNIZED_VALUE

    def __init__(self, line: int | None = None, column: int | None = None):
        super().__init__("Unexpected right value.", line, column)


class NumericConversionFailure(ParseError):
    """A number does not fit the configured width or precision."""

    kind = ErrorKind.NUMERIC_CONVERSION_FAILURE

    def __init__(self, text: str, line: int | None = None, column: int | None = None):
        self.text = text
        shown = text if len(text) <= 40 else f"{text[:37]}..."
        super().__init__(f"Number out of range ({shown})", line, column)


class SourceUnavailable(ParseError):
    """The input source could not be opened or read."""

    kind = ErrorKind.SOURCE_UNAVAILABLE

    def __init__(self, path: str, reason: str | None = None):
        message = f"Failed to open file ({path})"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, filename=path)
