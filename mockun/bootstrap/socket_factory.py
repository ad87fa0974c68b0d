"""Listening socket creation."""

import logging
import socket

from mockun.domain.correlation_id import CorrelationLoggerAdapter
from mockun.domain.errors import BindError

SOCKET_LOGGER = CorrelationLoggerAdapter(logging.getLogger("mockun.socket"), {})

ACCEPT_POLL_SECONDS = 0.5


def create_server_socket(host: str, port: str) -> socket.socket:
    """Bind a TCP listener on ``host:port``, raising BindError on failure."""
    try:
        port_number = int(port)
    except ValueError as error:
        SOCKET_LOGGER.critical(
            "Invalid port",
            extra={"event": "bind_failed", "host": host, "port": port},
        )
        raise BindError(f"Invalid port {port!r}") from error

    try:
        server_socket = socket.create_server((host, port_number))
    except (OSError, OverflowError) as error:
        SOCKET_LOGGER.critical(
            "Failed to bind listening socket",
            extra={
                "event": "bind_failed",
                "host": host,
                "port": port_number,
                "error_type": type(error).__name__,
            },
        )
        raise BindError(f"Cannot listen on {host}:{port}: {error}") from error
    server_socket.settimeout(ACCEPT_POLL_SECONDS)
    return server_socket
