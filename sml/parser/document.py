"""
Line-oriented document parser.

Reads a document one line at a time. Each significant line is either a
table header, which changes the current table, or a key/value pair,
which is inserted into the current table.
"""

from collections.abc import Iterable

from ..errors import DuplicateKey, ParseError, UnexpectedCharacter, UnexpectedEndOfLine
from ..logging import get_logger
from ..models.values import Table
from ..options import ParserOptions
from .cursor import WHITESPACE, Cursor
from .tables import parse_table_header, resolve_table
from .values import ValueParser


logger = get_logger("parser")

KEY_TERMINATORS = WHITESPACE + "="


class DocumentParser:
    """
    Parser state for one document.

    Grammar:
        document     := line*
        line         := ws* (comment | table_header | key_value)? ws* comment?
        table_header := '+'? '[' ws* path ws* ']'
        key_value    := key ws* '=' ws* value
    """

    def __init__(self, options: ParserOptions | None = None, filename: str = "<string>"):
        self.options = options or ParserOptions()
        self.filename = filename
        self.values = ValueParser(self.options)

        self.root = Table()
        self.current_table = self.root

    def parse_line(self, text: str, line_no: int = 1) -> None:
        """Parse a single line of input."""
        it = Cursor(text, 0, line_no).skip_whitespace()

        if it.at_end or it.current() == "#":
            return

        if it.current() in ("[", "+"):
            it, header = parse_table_header(it)
            self.current_table = resolve_table(self.root, header)
        else:
            it = self._parse_key_value(it)

        # The rest of the line may only hold whitespace or a comment
        it = it.skip_whitespace()
        if not it.at_end and it.current() != "#":
            raise UnexpectedCharacter(it.current(), it.line, it.column)

    def _parse_key_value(self, cursor: Cursor) -> Cursor:
        """Parse 'key = value' into the current table."""
        key_end = cursor.skip_until(KEY_TERMINATORS)
        if key_end.at_end:
            raise UnexpectedEndOfLine(key_end.line, key_end.column)

        key = cursor.span_to(key_end)
        if not key:
            raise UnexpectedCharacter(key_end.current(), key_end.line, key_end.column)
        if self.current_table.contains(key):
            raise DuplicateKey(key, cursor.line, cursor.column)

        eq = key_end.skip_whitespace()
        if eq.at_end:
            raise UnexpectedEndOfLine(eq.line, eq.column)
        if eq.current() != "=":
            raise UnexpectedCharacter(eq.current(), eq.line, eq.column)

        it, value = self.values.parse_value(eq.advance().skip_whitespace())
        self.current_table.add_value(key, value)
        return it

    def parse_lines(self, lines: Iterable[str]) -> Table:
        """Parse every line and return the finished document."""
        for line_no, line in enumerate(lines, start=1):
            if line.endswith("\n"):
                line = line[:-1]
            if line.endswith("\r"):
                line = line[:-1]
            try:
                self.parse_line(line, line_no)
            except ParseError as e:
                e.filename = self.filename
                raise

        return self.finish()

    def finish(self) -> Table:
        """Freeze and return the root table."""
        self.root.freeze()
        logger.debug(f"Parsed {self.filename}: {len(self.root)} top-level keys")
        return self.root


def parse_lines(
    lines: Iterable[str],
    options: ParserOptions | None = None,
    filename: str = "<string>",
) -> Table:
    """Parse an iterable of lines into a document."""
    return DocumentParser(options, filename).parse_lines(lines)


def parse_string(
    source: str,
    options: ParserOptions | None = None,
    filename: str = "<string>",
) -> Table:
    """
    Convenience function to parse a document from a string.

    Args:
        source: Document text
        options: Numeric conversion options
        filename: Name used in log messages

    Returns:
        Frozen root Table
    """
    return parse_lines(source.split("\n"), options, filename)
