"""Worker thread logic for handling individual client connections."""

import logging
import socket

from mockun.domain.correlation_id import (
    CorrelationLoggerAdapter,
    clear_correlation_id,
    generate_correlation_id,
    set_correlation_id,
)
from mockun.domain.response_builders import route_response
from mockun.pipeline.io import (
    MalformedRequestLine,
    parse_request_line,
    read_request_line,
    send_response,
)
from mockun.transport.context import WorkerContext

WORKER_LOGGER = CorrelationLoggerAdapter(
    logging.getLogger("mockun.transport.worker"), {}
)


def _serve_request(
    client_socket: socket.socket, context: WorkerContext, client_addr_str: str
) -> None:
    with client_socket.makefile("rb") as stream:
        request_line = read_request_line(stream)
    if request_line is None:
        WORKER_LOGGER.debug(
            "Client disconnected before sending a request line",
            extra={"event": "client_disconnected", "client": client_addr_str},
        )
        return

    method, path = parse_request_line(request_line)
    WORKER_LOGGER.debug(
        "Request line parsed",
        extra={"event": "request_line_parsed", "method": method, "route": path},
    )

    record = context.route_table.lookup(path)
    if record is None:
        WORKER_LOGGER.info(
            "No mock configured for path",
            extra={"event": "route_not_found", "route": path, "method": method},
        )
    elif WORKER_LOGGER.logger.isEnabledFor(logging.DEBUG):
        WORKER_LOGGER.debug(
            "Route matched",
            extra={
                "event": "route_matched",
                "route": path,
                "content_type": record.content_type,
            },
        )

    send_response(client_socket, route_response(record, context.custom_headers))


def _cleanup_worker(client_socket: socket.socket, client_addr_str: str) -> None:
    try:
        client_socket.shutdown(socket.SHUT_WR)
    except OSError:
        pass
    client_socket.close()

    WORKER_LOGGER.debug(
        "Socket closed",
        extra={"event": "socket_closed", "client": client_addr_str},
    )
    clear_correlation_id()


def handle_client(
    client_socket: socket.socket,
    client_address: tuple[str, int],
    context: WorkerContext,
) -> None:
    """Answer exactly one request on ``client_socket`` and close it.

    Failures are confined to this connection: they are logged and the socket is
    closed, leaving the listener and every other handler running.
    """
    client_addr_str = f"{client_address[0]}:{client_address[1]}"
    set_correlation_id(generate_correlation_id())

    try:
        client_socket.settimeout(context.socket_timeout)
        _serve_request(client_socket, context, client_addr_str)
    except (MalformedRequestLine, UnicodeDecodeError) as error:
        WORKER_LOGGER.warning(
            "Malformed request received",
            extra={
                "event": "malformed_request",
                "client": client_addr_str,
                "error_type": type(error).__name__,
            },
        )
    except (ConnectionError, TimeoutError, OSError) as error:
        WORKER_LOGGER.error(
            "Error handling client connection",
            extra={
                "event": "connection_error",
                "client": client_addr_str,
                "error_type": type(error).__name__,
            },
        )
    except Exception as error:  # pylint: disable=broad-except
        WORKER_LOGGER.error(
            "Unexpected error in worker",
            extra={
                "event": "worker_error",
                "client": client_addr_str,
                "error_type": type(error).__name__,
                "error": str(error),
            },
            exc_info=True,
        )
    finally:
        _cleanup_worker(client_socket, client_addr_str)
