"""Pure HTTP response builders."""

from typing import Optional, Sequence

from mockun.domain.http_types import HttpResponse
from mockun.domain.routes import DEFAULT_CONTENT_TYPE, RouteRecord
from mockun.security.cors import cors_headers

STATUS_OK = "HTTP/1.1 200 OK"
SERVER_NAME = "mockun"
PLACEHOLDER_BODY = "nothing response is set!"


def mock_response(
    body: str, content_type: str, custom_headers: Sequence[str]
) -> HttpResponse:
    """Return a 200 response carrying ``body`` with the fixed header layout."""
    payload = body.encode("utf-8")
    headers = cors_headers(custom_headers)
    headers.extend(
        [
            ("Content-Type", f"{content_type}; charset=UTF-8"),
            ("Content-Length", str(len(payload))),
            ("Server", SERVER_NAME),
        ]
    )
    return HttpResponse(STATUS_OK, tuple(headers), payload)


def route_response(
    record: Optional[RouteRecord], custom_headers: Sequence[str]
) -> HttpResponse:
    """Serve a matched record, or the placeholder when nothing matched."""
    if record is None:
        return mock_response(PLACEHOLDER_BODY, DEFAULT_CONTENT_TYPE, custom_headers)
    return mock_response(record.body, record.content_type, custom_headers)
