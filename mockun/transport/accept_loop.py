"""Main connection acceptance loop."""

import logging
import socket
import threading
from typing import Optional

from mockun.bootstrap.config import ServerConfig
from mockun.bootstrap.socket_factory import create_server_socket
from mockun.domain.correlation_id import CorrelationLoggerAdapter
from mockun.transport.context import WorkerContext
from mockun.transport.worker import handle_client

ACCEPT_LOGGER = CorrelationLoggerAdapter(
    logging.getLogger("mockun.transport.accept"), {}
)


def _handle_accepted_client(
    client_socket: socket.socket,
    client_address: tuple[str, int],
    handler_context: WorkerContext,
) -> threading.Thread:
    """Start a dedicated handler thread for a newly accepted connection."""
    if ACCEPT_LOGGER.logger.isEnabledFor(logging.DEBUG):
        ACCEPT_LOGGER.debug(
            "Client connection accepted",
            extra={
                "event": "client_accepted",
                "client": f"{client_address[0]}:{client_address[1]}",
            },
        )

    thread = threading.Thread(
        target=handle_client,
        args=(client_socket, client_address, handler_context),
        daemon=True,
    )
    thread.start()
    return thread


def run_server(
    config: ServerConfig, stop_event: Optional[threading.Event] = None
) -> None:
    """Listen on the configured port and serve every connection on its own thread.

    The loop runs until ``stop_event`` is set; the command line never sets it,
    so a normal process only stops when it is killed.
    """
    server_socket = create_server_socket(config.host, config.port)

    ACCEPT_LOGGER.info(
        "Server listening for connections",
        extra={
            "event": "server_listening",
            "host": config.host,
            "port": config.port,
            "routes": list(config.route_table.paths),
        },
    )

    handler_context = WorkerContext(
        route_table=config.route_table,
        custom_headers=config.custom_headers,
        socket_timeout=config.socket_timeout,
    )

    try:
        while stop_event is None or not stop_event.is_set():
            try:
                client_socket, client_address = server_socket.accept()
            except socket.timeout:
                continue
            except OSError as error:
                ACCEPT_LOGGER.error(
                    "Socket accept failed",
                    extra={"event": "accept_error", "error_type": type(error).__name__},
                )
                continue

            _handle_accepted_client(client_socket, client_address, handler_context)
    finally:
        server_socket.close()
        ACCEPT_LOGGER.info("Server stopped", extra={"event": "server_stopped"})
