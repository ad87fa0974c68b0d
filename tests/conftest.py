"""Shared pytest fixtures for integration and unit tests."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Generator

import pytest

from tests.utils.http import reserve_port
from tests.utils.process import PROJECT_ROOT, ServerProcessInfo, launch_server

if TYPE_CHECKING:
    from _pytest.tmpdir import TempPathFactory

MOCK_FILES = {
    "response.json": '{"k":1}',
    "script.js": "console.log('mock');",
    "page.html": "<h1>mock</h1>",
    "notes.text": "plain notes",
}


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Expose the repository root path to tests."""

    return PROJECT_ROOT


@pytest.fixture()
def mock_files(tmp_path: Path) -> Path:
    """Write a small set of response files into a temporary directory."""

    for name, content in MOCK_FILES.items():
        (tmp_path / name).write_text(content, encoding="utf-8")
    return tmp_path


@pytest.fixture(name="server_process")
def _server_process(
    tmp_path_factory: "TempPathFactory",
) -> Generator[ServerProcessInfo, None, None]:
    """Launch the mock server with the example routes from the README usage."""

    host = "127.0.0.1"
    port = reserve_port(host)
    workdir = tmp_path_factory.mktemp("mock-files")
    for name, content in MOCK_FILES.items():
        (workdir / name).write_text(content, encoding="utf-8")
    route_args = [
        "-h",
        "x-debug",
        "/aa:./response.json",
        "/js:script.js",
        "/page:page.html",
        "/notes:notes.text",
    ]
    yield from launch_server(host, port, workdir, route_args)


@pytest.fixture()
def base_url(server_process: ServerProcessInfo) -> str:
    """Expose the running server base URL to integration tests."""

    return server_process["base_url"]
