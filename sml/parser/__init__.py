"""
Parser for the SML configuration format.
"""

from .cursor import Cursor
from .document import DocumentParser, parse_lines, parse_string
from ..errors import (
    DuplicateKey,
    ErrorKind,
    InvalidArrayFormat,
    NumericConversionFailure,
    ParseError,
    SourceUnavailable,
    UndefinedPath,
    UnexpectedCharacter,
    UnexpectedEndOfLine,
    UnrecognizedValue,
)
from .lexer import classify
from .loader import DocumentLoader, parse
from .tables import TableHeader, parse_table_header, resolve_table
from .values import ValueParser

__all__ = [
    "Cursor",
    "DocumentLoader",
    "DocumentParser",
    "DuplicateKey",
    "ErrorKind",
    "InvalidArrayFormat",
    "NumericConversionFailure",
    "ParseError",
    "SourceUnavailable",
    "TableHeader",
    "UndefinedPath",
    "UnexpectedCharacter",
    "UnexpectedEndOfLine",
    "UnrecognizedValue",
    "ValueParser",
    "classify",
    "parse",
    "parse_lines",
    "parse_string",
    "parse_table_header",
    "resolve_table",
]
