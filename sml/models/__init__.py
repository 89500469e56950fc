"""
Document model types.
"""

from .values import (
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

__all__ = [
    "Array",
    "DocumentError",
    "FrozenDocumentError",
    "Integer",
    "MissingKeyError",
    "Real",
    "String",
    "Table",
    "Value",
    "ValueKind",
    "ValueKindError",
]
