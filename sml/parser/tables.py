"""
Table headers and table-path resolution.

    [a.b.c]     create table c inside the existing table a.b
    +[a.b.c]    append a new table to the table-array a.b.c
"""

from dataclasses import dataclass

from ..errors import DuplicateKey, UndefinedPath, UnexpectedCharacter, UnexpectedEndOfLine
from ..logging import get_logger
from ..models.values import Array, Table
from .cursor import WHITESPACE, Cursor


logger = get_logger("parser.tables")

SEGMENT_TERMINATORS = WHITESPACE + ".]"


@dataclass(frozen=True)
class TableHeader:
    """A parsed table header line."""
    path: tuple[str, ...]
    is_array: bool = False
    line: int = 0
    column: int = 0

    @property
    def dotted(self) -> str:
        return ".".join(self.path)


def parse_table_header(cursor: Cursor) -> tuple[Cursor, TableHeader]:
    """
    Parse '+'? '[' segment ('.' segment)* ']'.

    Whitespace is allowed around segments, dots and the closing bracket.
    """
    start = cursor.skip_whitespace()
    if start.at_end:
        raise UnexpectedEndOfLine(start.line, start.column)

    it = start
    is_array = it.current() == "+"
    if is_array:
        it = it.advance()

    if it.current() != "[":
        if it.at_end:
            raise UnexpectedEndOfLine(it.line, it.column)
        raise UnexpectedCharacter(it.current(), it.line, it.column)

    path: list[str] = []
    while it.current() != "]":
        it = it.advance().skip_whitespace()  # skip '[' or '.'

        key_end = it.skip_until(SEGMENT_TERMINATORS)
        if key_end.at_end:
            raise UnexpectedEndOfLine(key_end.line, key_end.column)

        key = it.span_to(key_end)
        if not key:
            raise UnexpectedCharacter(key_end.current(), key_end.line, key_end.column)
        path.append(key)

        it = key_end.skip_whitespace()
        if it.at_end:
            raise UnexpectedEndOfLine(it.line, it.column)
        if it.current() not in ".]":
            raise UnexpectedCharacter(it.current(), it.line, it.column)

    header = TableHeader(
        path=tuple(path),
        is_array=is_array,
        line=start.line,
        column=start.column,
    )
    return it.advance(), header  # skip ']'


def resolve_table(root: Table, header: TableHeader) -> Table:
    """
    Create the table named by header and return it.

    Intermediate segments must already exist. A table-array segment
    resolves to its most recently appended table.
    """
    current = root
    walked: list[str] = []

    for key in header.path[:-1]:
        walked.append(key)
        value = current.get(key)

        if isinstance(value, Table):
            current = value
        elif isinstance(value, Array) and len(value) and value.array_is(Table):
            current = value.last()
        else:
            raise UndefinedPath(".".join(walked), header.line, header.column)

    key = header.path[-1]
    walked.append(key)
    fullpath = ".".join(walked)
    table = Table()

    if header.is_array:
        existing = current.get(key)
        if existing is None:
            array = Array()
            current.add_value(key, array)
            array.append(table)
            logger.debug(f"Created table-array {fullpath}")
        elif isinstance(existing, Array) and existing.array_is(Table):
            existing.append(table)
            logger.debug(f"Appended table #{len(existing)} to {fullpath}")
        else:
            raise UndefinedPath(fullpath, header.line, header.column)
    else:
        if current.contains(key):
            raise DuplicateKey(fullpath, header.line, header.column)
        current.add_value(key, table)
        logger.debug(f"Created table {fullpath}")

    return table
