"""
Tests for the document model accessors.
"""

import pytest

from sml.errors import DuplicateKey
from sml.models.values import (
    Array,
    Integer,
    MissingKeyError,
    Real,
    String,
    Table,
    ValueKind,
    ValueKindError,
)
from sml.parser.document import parse_string

from conftest import SERVER_DOC


@pytest.fixture
def doc() -> Table:
    return parse_string(SERVER_DOC)


def test_lookup_with_existence_check(doc: Table) -> None:
    server = doc["server"]

    assert doc.contains("server")
    assert "server" in doc
    assert not doc.contains("client")
    assert server.get("missing") is None
    assert server.get_value("missing", 42) == 42


def test_missing_key_raises(doc: Table) -> None:
    with pytest.raises(MissingKeyError):
        doc["client"]

    # Also usable as a plain KeyError
    with pytest.raises(KeyError):
        doc.value_as("client", Table)


def test_typed_get_checks_kind(doc: Table) -> None:
    server = doc.value_as("server", Table)

    assert server.value_as("port", Integer).value == 8080
    assert server.value_is("port", Integer)
    assert not server.value_is("port", Real)

    with pytest.raises(ValueKindError) as exc_info:
        server.value_as("port", String)
    assert "integer" in str(exc_info.value)
    assert isinstance(exc_info.value, TypeError)


def test_array_length_and_index(doc: Table) -> None:
    routes = doc.find("server.routes")

    assert isinstance(routes, Array)
    assert routes.length() == len(routes) == 2
    assert routes[1].get_value("path") == "/b"
    with pytest.raises(ValueKindError):
        routes.value_as(0, Integer)


def test_array_homogeneity() -> None:
    array = Array()
    assert array.array_is(Integer)
    assert array.is_homogeneous()

    array.append(Integer(1))
    array.append(Integer(2))
    assert array.array_is(Integer)
    assert array.is_homogeneous()

    array.append(String("x"))
    assert not array.array_is(Integer)
    assert not array.is_homogeneous()


def test_find_with_array_index(doc: Table) -> None:
    assert doc.find("server.routes.0.path") == String("/a")
    assert doc.find("server.port") == Integer(8080)

    with pytest.raises(MissingKeyError):
        doc.find("server.routes.5")
    with pytest.raises(MissingKeyError):
        doc.find("server.routes.x")
    with pytest.raises(MissingKeyError):
        doc.find("server.port.value")
    with pytest.raises(MissingKeyError):
        doc.find("server.user")


def test_insertion_order_preserved() -> None:
    table = Table()
    for key in ("zeta", "alpha", "mid"):
        table.add_value(key, Integer(1))

    assert table.keys() == ["zeta", "alpha", "mid"]
    assert list(table) == ["zeta", "alpha", "mid"]
    assert [k for k, _ in table.items()] == ["zeta", "alpha", "mid"]


def test_add_value_never_replaces() -> None:
    table = Table()
    table.add_value("a", Integer(1))

    with pytest.raises(DuplicateKey) as exc_info:
        table.add_value("a", Integer(2))

    assert exc_info.value.key == "a"
    assert table["a"] == Integer(1)


def test_containers_expose_read_only_views(doc: Table) -> None:
    with pytest.raises(TypeError):
        doc.values["extra"] = Integer(1)  # type: ignore[index]

    routes = doc.find("server.routes")
    assert routes.elements == (routes[0], routes[1])
    with pytest.raises(AttributeError):
        routes.elements.append(Table())  # type: ignore[attr-defined]

    assert "extra" not in doc
    assert len(routes) == 2


def test_find_cannot_reach_dotted_keys() -> None:
    doc = parse_string("a.b = 1\n")

    assert doc["a.b"] == Integer(1)
    with pytest.raises(MissingKeyError):
        doc.find("a.b")


def test_value_kinds() -> None:
    assert Integer(1).kind is ValueKind.INTEGER
    assert Real(1.0).kind is ValueKind.REAL
    assert String("").kind is ValueKind.STRING
    assert Array().kind is ValueKind.ARRAY
    assert Table().kind is ValueKind.TABLE


def test_structural_equality() -> None:
    assert parse_string("a = [1, 2]\n[t]\nb = \"x\"\n") == parse_string(
        "a = [1,2]\n[t]\nb = \"x\" # same\n"
    )
    assert parse_string("a = 1\n") != parse_string("a = 2\n")
