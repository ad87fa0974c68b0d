"""Unit tests covering route table construction and lookup."""

from pathlib import Path

import pytest

from mockun.domain.errors import FileLoadError, UsageError
from mockun.domain.response_builders import route_response
from mockun.domain.routes import RouteEntry, RouteRecord, RouteTable, content_type_for
from mockun.pipeline.route_loader import build_route_table, read_file_text


@pytest.mark.parametrize(
    ("file_name", "expected"),
    [
        ("a.json", "application/json"),
        ("a.js", "application/javascript"),
        ("a.text", "text/plain"),
        ("a.html", "text/html"),
        ("a.png", "text/plain"),
        ("a", "text/plain"),
        ("./dir/response.json", "application/json"),
        ("a.JSON", "text/plain"),
    ],
)
def test_content_type_for(file_name, expected):
    assert content_type_for(file_name) == expected


def test_build_route_table_uses_injected_provider():
    """Records keep argument order and carry the provider's contents."""
    contents = {"one.json": '{"a":1}', "two.html": "<p>two</p>", "three": "3"}
    entries = [
        RouteEntry("/one", "one.json"),
        RouteEntry("/two", "two.html"),
        RouteEntry("/three", "three"),
    ]

    table = build_route_table(entries, contents.__getitem__)

    assert table.paths == ("/one", "/two", "/three")
    assert [record.body for record in table] == ['{"a":1}', "<p>two</p>", "3"]
    assert [record.content_type for record in table] == [
        "application/json",
        "text/html",
        "text/plain",
    ]


def test_build_route_table_reads_files_from_disk(tmp_path: Path):
    target = tmp_path / "response.json"
    target.write_text('{"k":1}', encoding="utf-8")

    table = build_route_table([RouteEntry("/aa", str(target))])

    assert len(table) == 1
    assert table.lookup("/aa") == RouteRecord("/aa", '{"k":1}', "application/json")


def test_build_route_table_missing_file_is_fatal(tmp_path: Path):
    missing = tmp_path / "missing.json"
    with pytest.raises(FileLoadError) as excinfo:
        build_route_table([RouteEntry("/aa", str(missing))])
    assert excinfo.value.file_name == str(missing)
    assert isinstance(excinfo.value.reason, FileNotFoundError)


def test_build_route_table_rejects_undecodable_file(tmp_path: Path):
    target = tmp_path / "binary.text"
    target.write_bytes(b"\xff\xfe\x00")
    with pytest.raises(FileLoadError):
        build_route_table([RouteEntry("/bin", str(target))])


def test_build_route_table_requires_entries():
    with pytest.raises(UsageError):
        build_route_table([], read_file_text)


def test_lookup_first_match_wins():
    table = RouteTable(
        (
            RouteRecord("/dup", "first", "text/plain"),
            RouteRecord("/dup", "second", "text/plain"),
        )
    )
    assert table.lookup("/dup").body == "first"


def test_lookup_uses_exact_string_equality():
    table = RouteTable((RouteRecord("/aa", "body", "text/plain"),))
    assert table.lookup("/aa") is not None
    assert table.lookup("/aa/") is None
    assert table.lookup("/aa?x=1") is None


def test_route_table_is_immutable():
    table = RouteTable((RouteRecord("/aa", "body", "text/plain"),))
    with pytest.raises(AttributeError):
        table.records = ()


def test_crlf_file_is_served_verbatim(tmp_path: Path):
    """Windows line endings reach the wire unchanged."""
    target = tmp_path / "crlf.text"
    target.write_bytes(b"line1\r\nline2\r\n")

    table = build_route_table([RouteEntry("/crlf", str(target))])
    response = route_response(table.lookup("/crlf"), ())

    assert response.body == b"line1\r\nline2\r\n"
    assert response.header("Content-Length") == "14"
