"""
Document loader: acquires a source and runs the parser over it.
"""

import os
from pathlib import Path
from typing import IO

from ..const import DEFAULT_ENCODING
from ..errors import SourceUnavailable
from ..logging import get_logger
from ..models.values import Table
from ..options import ParserOptions
from .document import DocumentParser


logger = get_logger("parser.loader")


class DocumentLoader:
    """
    Loads documents from files, open handles or strings.

    Usage:
        loader = DocumentLoader()
        doc = loader.load_file("/etc/myapp/settings.sml")
        # or
        doc = loader.load_string(text)
    """

    def __init__(self, options: ParserOptions | None = None, encoding: str = DEFAULT_ENCODING):
        self.options = options or ParserOptions()
        self.encoding = encoding
        self.last_document: Table | None = None
        self.last_path: Path | None = None

    def load_file(self, path: str | os.PathLike) -> Table:
        """
        Load a document from a file.

        Args:
            path: Path to the document

        Returns:
            Frozen root Table

        Raises:
            SourceUnavailable: If the file cannot be opened or decoded
            ParseError: If the content is malformed
        """
        path = Path(path)

        if not path.exists():
            raise SourceUnavailable(str(path), "no such file")

        if not path.is_file():
            raise SourceUnavailable(str(path), "not a file")

        try:
            with path.open("r", encoding=self.encoding) as handle:
                document = self._parse(handle, str(path))
        except (OSError, UnicodeDecodeError) as e:
            raise SourceUnavailable(str(path), str(e)) from e

        self.last_path = path
        return document

    def load_handle(self, handle: IO[str], filename: str | None = None) -> Table:
        """Load a document from an open text handle. The handle is not closed."""
        name = filename or getattr(handle, "name", None) or "<stream>"
        try:
            return self._parse(handle, str(name))
        except (OSError, UnicodeDecodeError) as e:
            raise SourceUnavailable(str(name), str(e)) from e

    def load_string(self, source: str, filename: str = "<string>") -> Table:
        """Load a document from a string."""
        return self._parse(source.split("\n"), filename)

    def _parse(self, lines, filename: str) -> Table:
        parser = DocumentParser(self.options, filename)
        document = parser.parse_lines(lines)
        self.last_document = document
        logger.info(f"Loaded {filename} ({len(document)} top-level keys)")
        return document


def parse(source: str | os.PathLike | IO[str], options: ParserOptions | None = None) -> Table:
    """
    Parse a document from a path or an open text handle.

    Args:
        source: File path, or a readable text stream
        options: Numeric conversion options

    Returns:
        Frozen root Table
    """
    loader = DocumentLoader(options)
    if hasattr(source, "read"):
        return loader.load_handle(source)  # type: ignore[arg-type]
    return loader.load_file(source)  # type: ignore[arg-type]
