"""
SML: a small, human-editable configuration format.

Usage:
    import sml

    doc = sml.parse("settings.sml")
    port = doc.find("server.port").value
"""

from .const import APP_VERSION
from .errors import (
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
from .models import (
    Array,
    DocumentError,
    FrozenDocumentError,
    Integer,
    MissingKeyError,
    Real,
    String,
    Table,
    Value,
    ValueKind,
    ValueKindError,
)
from .options import ParserOptions, RealPrecision
from .parser import DocumentLoader, parse, parse_string

__version__ = APP_VERSION

__all__ = [
    "Array",
    "DocumentError",
    "DocumentLoader",
    "DuplicateKey",
    "ErrorKind",
    "FrozenDocumentError",
    "Integer",
    "InvalidArrayFormat",
    "MissingKeyError",
    "NumericConversionFailure",
    "ParseError",
    "ParserOptions",
    "Real",
    "RealPrecision",
    "SourceUnavailable",
    "String",
    "Table",
    "UndefinedPath",
    "UnexpectedCharacter",
    "UnexpectedEndOfLine",
    "UnrecognizedValue",
    "Value",
    "ValueKind",
    "ValueKindError",
    "__version__",
    "parse",
    "parse_string",
]
