"""
Pytest configuration and fixtures.
"""

from pathlib import Path
from textwrap import dedent
from typing import Callable

import pytest

from sml.parser.cursor import Cursor


SERVER_DOC = """\
[server]
host = "localhost"
port = 8080
+[server.routes]
path = "/a"
+[server.routes]
path = "/b"
"""


@pytest.fixture
def write_doc(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write a document to a temporary file and return its path."""

    def _write(text: str, name: str = "doc.sml") -> Path:
        path = tmp_path / name
        path.write_text(dedent(text), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def server_doc_path(write_doc) -> Path:
    return write_doc(SERVER_DOC, "server.sml")


def cursor(text: str, pos: int = 0) -> Cursor:
    """Cursor at pos in a one-line text."""
    return Cursor(text, pos, 1)
