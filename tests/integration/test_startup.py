"""Integration tests for command-line startup behaviour."""

from __future__ import annotations

import socket
import subprocess
from pathlib import Path

import pytest

from tests.utils.http import reserve_port, send_raw_request
from tests.utils.process import launch_server, server_command, server_env

pytestmark = pytest.mark.integration


def _run(args: list[str], workdir: Path) -> subprocess.CompletedProcess[str]:
    return subprocess.run(
        server_command(args),
        cwd=workdir,
        env=server_env(workdir / "server.log"),
        capture_output=True,
        text=True,
        timeout=10,
        check=False,
    )


@pytest.mark.parametrize(
    "args",
    [
        [],
        ["-p"],
        ["/aa"],
        ["/aa:missing.json"],
    ],
)
def test_invalid_invocation_exits_with_usage(tmp_path: Path, args: list[str]) -> None:
    result = _run(args, tmp_path)
    assert result.returncode == 1
    assert "Usage:" in result.stderr


def test_port_in_use_exits_non_zero(mock_files: Path) -> None:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as holder:
        holder.bind(("127.0.0.1", 0))
        holder.listen()
        port = holder.getsockname()[1]
        result = _run(["-p", str(port), "/aa:response.json"], mock_files)
    assert result.returncode == 1
    assert "Cannot listen" in result.stderr


def test_combined_flags_and_first_duplicate_route(mock_files: Path) -> None:
    """``-pPORT`` form works and the earlier of two identical paths wins."""

    host = "127.0.0.1"
    port = reserve_port(host)
    (mock_files / "second.json").write_text('{"k":2}', encoding="utf-8")
    server = launch_server(
        host,
        port,
        mock_files,
        ["-hx-a, x-b", "/dup:response.json", "/dup:second.json"],
    )
    info = next(server)
    try:
        response = send_raw_request(host, port, b"GET /dup HTTP/1.1\r\n\r\n")
        assert response.body == b'{"k":1}'
        assert response.headers["access-control-allow-headers"] == (
            "Origin,Authorization,Accept,Content-Type,x-a,x-b"
        )
        assert info["process"].poll() is None
    finally:
        server.close()
