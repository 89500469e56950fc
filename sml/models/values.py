"""
Document model: the typed value tree produced by the parser.

A document is a Table whose values are scalars (Integer, Real, String),
Arrays, or nested Tables. Containers are mutated only while parsing; the
parser freezes the whole tree before handing it to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, ClassVar, Iterator, Mapping, TypeVar

from ..errors import DuplicateKey


class ValueKind(Enum):
    """Closed set of value kinds."""

    INTEGER = "integer"
    REAL = "real"
    STRING = "string"
    ARRAY = "array"
    TABLE = "table"


class DocumentError(Exception):
    """Base class for document access errors."""


class MissingKeyError(DocumentError, KeyError):
    """Lookup of a key that is not present."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class ValueKindError(DocumentError, TypeError):
    """Typed access on a value of a different kind."""


class FrozenDocumentError(DocumentError):
    """Mutation of a document after parsing finished."""


class Value:
    """Base class for all document values."""

    kind: ClassVar[ValueKind]

    def to_python(self) -> Any:
        raise NotImplementedError


V = TypeVar("V", bound=Value)


@dataclass(frozen=True)
class Integer(Value):
    """Signed fixed-width integer."""

    kind: ClassVar[ValueKind] = ValueKind.INTEGER
    value: int

    def to_python(self) -> int:
        return self.value


@dataclass(frozen=True)
class Real(Value):
    """Floating point number."""

    kind: ClassVar[ValueKind] = ValueKind.REAL
    value: float

    def to_python(self) -> float:
        return self.value


@dataclass(frozen=True)
class String(Value):
    """Raw string, stored exactly as written between the quotes."""

    kind: ClassVar[ValueKind] = ValueKind.STRING
    value: str

    def to_python(self) -> str:
        return self.value


def _check_kind(value: Value, cls: type[V], where: str) -> V:
    if not isinstance(value, cls):
        raise ValueKindError(
            f"{where} is {value.kind.value}, expected {cls.kind.value}"
        )
    return value


@dataclass(eq=False)
class Array(Value):
    """
    Ordered sequence of values.

    Arrays parsed from a literal hold elements of one kind; table-arrays
    hold one Table per repeated '+[...]' header.
    """

    kind: ClassVar[ValueKind] = ValueKind.ARRAY
    _elements: list[Value] = field(default_factory=list)
    _frozen: bool = field(default=False, init=False, repr=False)

    @property
    def elements(self) -> tuple[Value, ...]:
        """Snapshot of the elements; mutate only through append()."""
        return tuple(self._elements)

    def append(self, value: Value) -> None:
        if self._frozen:
            raise FrozenDocumentError("Cannot append to a frozen array")
        self._elements.append(value)

    def length(self) -> int:
        return len(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __getitem__(self, index: int) -> Value:
        return self._elements[index]

    def __iter__(self) -> Iterator[Value]:
        return iter(self._elements)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Array):
            return NotImplemented
        return self._elements == other._elements

    def last(self) -> Value:
        """Most recently appended element."""
        return self._elements[-1]

    def value_as(self, index: int, cls: type[V]) -> V:
        """Get element at index, failing if it is not of kind cls."""
        return _check_kind(self._elements[index], cls, f"Element {index}")

    def array_is(self, cls: type[Value]) -> bool:
        """True if every element is of kind cls."""
        return all(isinstance(e, cls) for e in self._elements)

    def is_homogeneous(self) -> bool:
        """True if all elements share one kind."""
        return len({e.kind for e in self._elements}) <= 1

    def freeze(self) -> None:
        self._frozen = True
        for element in self._elements:
            if isinstance(element, (Array, Table)):
                element.freeze()

    def to_python(self) -> list[Any]:
        return [e.to_python() for e in self._elements]


@dataclass(eq=False)
class Table(Value):
    """
    Ordered mapping from key to value.

    Keys are unique and case-sensitive. Iteration follows insertion order.
    """

    kind: ClassVar[ValueKind] = ValueKind.TABLE
    _values: dict[str, Value] = field(default_factory=dict)
    _frozen: bool = field(default=False, init=False, repr=False)

    @property
    def values(self) -> Mapping[str, Value]:
        """Read-only view of the key/value pairs."""
        return MappingProxyType(self._values)

    def add_value(self, key: str, value: Value) -> None:
        """Insert a new key. Existing keys are never replaced."""
        if self._frozen:
            raise FrozenDocumentError("Cannot modify a frozen table")
        if key in self._values:
            raise DuplicateKey(key)
        self._values[key] = value

    def contains(self, key: str) -> bool:
        return key in self._values

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __getitem__(self, key: str) -> Value:
        try:
            return self._values[key]
        except KeyError:
            raise MissingKeyError(f"Key not found: {key}") from None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Table):
            return NotImplemented
        return self._values == other._values

    def keys(self) -> list[str]:
        return list(self._values)

    def items(self) -> list[tuple[str, Value]]:
        return list(self._values.items())

    def get(self, key: str, default: Value | None = None) -> Value | None:
        return self._values.get(key, default)

    def get_value(self, key: str, default: Any = None) -> Any:
        """Plain Python value for key, or default if absent."""
        value = self._values.get(key)
        if value is None:
            return default
        return value.to_python()

    def value_is(self, key: str, cls: type[Value]) -> bool:
        """True if key exists and holds a value of kind cls."""
        return isinstance(self._values.get(key), cls)

    def value_as(self, key: str, cls: type[V]) -> V:
        """Get the value for key, failing if absent or of another kind."""
        return _check_kind(self[key], cls, f"Key '{key}'")

    def find(self, path: str) -> Value:
        """
        Look up a dotted path such as "server.routes.0.path".

        Numeric segments index into arrays. Segments are split on every
        '.', so a key that itself contains a dot (e.g. `a.b = 1`) cannot be
        reached this way; use `table["a.b"]` instead.
        """
        node: Value = self
        walked: list[str] = []
        for segment in path.split("."):
            walked.append(segment)
            if isinstance(node, Table):
                if segment not in node._values:
                    raise MissingKeyError(f"Key not found: {'.'.join(walked)}")
                node = node._values[segment]
            elif isinstance(node, Array):
                try:
                    node = node._elements[int(segment)]
                except (ValueError, IndexError):
                    raise MissingKeyError(
                        f"Invalid array index: {'.'.join(walked)}"
                    ) from None
            else:
                raise MissingKeyError(f"Not a container: {'.'.join(walked[:-1])}")
        return node

    def freeze(self) -> None:
        self._frozen = True
        for value in self._values.values():
            if isinstance(value, (Array, Table)):
                value.freeze()

    @property
    def frozen(self) -> bool:
        return self._frozen

    def to_python(self) -> dict[str, Any]:
        return {key: value.to_python() for key, value in self._values.items()}
