"""
Parser options: numeric width and floating point precision.
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from enum import Enum

from .const import DEFAULT_INTEGER_BITS, DEFAULT_PRECISION, SUPPORTED_INTEGER_BITS


class RealPrecision(Enum):
    """Precision used when converting Real values."""
    SINGLE = "single"          # IEEE-754 binary32
    DOUBLE = "double"          # IEEE-754 binary64 (Python float)


@dataclass
class ParserOptions:
    """Numeric conversion settings for a parse call."""
    integer_bits: int = DEFAULT_INTEGER_BITS
    precision: RealPrecision = RealPrecision(DEFAULT_PRECISION)

    def __post_init__(self) -> None:
        if isinstance(self.precision, str):
            try:
                self.precision = RealPrecision(self.precision.lower())
            except ValueError:
                raise ValueError(f"Unknown precision: {self.precision}") from None
        if self.integer_bits not in SUPPORTED_INTEGER_BITS:
            raise ValueError(
                f"Unsupported integer width: {self.integer_bits} "
                f"(expected one of {', '.join(map(str, SUPPORTED_INTEGER_BITS))})"
            )

    def integer_range(self) -> tuple[int, int]:
        """Inclusive bounds of the signed integer type."""
        bound = 1 << (self.integer_bits - 1)
        return -bound, bound - 1

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "ParserOptions":
        """Create options from parsed command-line arguments."""
        return cls(
            integer_bits=getattr(args, "integer_bits", None) or DEFAULT_INTEGER_BITS,
            precision=getattr(args, "precision", None) or DEFAULT_PRECISION,
        )
