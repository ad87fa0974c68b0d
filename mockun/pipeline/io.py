"""Request line reading and response writing."""

import logging
import socket
from typing import BinaryIO, Optional

from mockun.domain.correlation_id import CorrelationLoggerAdapter
from mockun.domain.http_types import HttpResponse

IO_LOGGER = CorrelationLoggerAdapter(logging.getLogger("mockun.io"), {})


class MalformedRequestLine(ValueError):
    """Raised when the request line has no path field."""


def parse_request_line(request_line: str) -> tuple[str, str]:
    """Return the method and path fields of a whitespace-delimited request line."""
    fields = request_line.split()
    if len(fields) < 2:
        raise MalformedRequestLine(f"Invalid request line: {request_line!r}")
    return fields[0], fields[1]


def read_request_line(stream: BinaryIO) -> Optional[str]:
    """Read one line from the client, or None when it closed without sending one."""
    raw_line = stream.readline()
    if not raw_line:
        return None
    return raw_line.decode("utf-8")


def send_response(client_socket: socket.socket, response: HttpResponse) -> int:
    """Serialize and send the response, returning the number of bytes written."""
    payload = response.serialize()
    client_socket.sendall(payload)
    IO_LOGGER.debug(
        "Sent response",
        extra={
            "event": "response_sent",
            "status_code": response.status_code,
            "bytes_out": len(payload),
        },
    )
    return len(payload)
