"""Response type shared by the builders and the IO layer."""

from dataclasses import dataclass

CRLF = "\r\n"


@dataclass(frozen=True)
class HttpResponse:
    """Represents an HTTP response to be sent to a client."""

    status_line: str
    headers: tuple[tuple[str, str], ...]
    body: bytes

    @property
    def status_code(self) -> int:
        return int(self.status_line.split()[1])

    def header(self, name: str) -> str | None:
        """Return the first header value matching ``name`` case-insensitively."""
        wanted = name.lower()
        for key, value in self.headers:
            if key.lower() == wanted:
                return value
        return None

    def serialize(self) -> bytes:
        """Render the status line, headers, body and trailing newline."""
        lines = [self.status_line]
        lines.extend(f"{name}: {value}" for name, value in self.headers)
        head = (CRLF.join(lines) + CRLF + CRLF).encode("utf-8")
        return head + self.body + b"\n"
