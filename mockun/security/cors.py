"""CORS (Cross-Origin Resource Sharing) headers emitted on every mock response."""

from typing import Sequence

ALLOW_ORIGIN = "*"
ALLOW_METHODS = ("GET", "POST", "PUT", "DELETE", "HEAD", "OPTIONS")
BASE_ALLOW_HEADERS = ("Origin", "Authorization", "Accept", "Content-Type")


def allow_headers_value(custom_headers: Sequence[str]) -> str:
    """Join the fixed allow-headers set with the caller's custom header names.

    The fixed set always ends with a comma, so an empty custom list leaves a
    trailing separator in place.
    """
    return ",".join(BASE_ALLOW_HEADERS) + "," + ",".join(custom_headers)


def cors_headers(custom_headers: Sequence[str]) -> list[tuple[str, str]]:
    """Return the CORS header lines in their wire order."""
    return [
        ("Access-Control-Allow-Origin", ALLOW_ORIGIN),
        ("Access-Control-Allow-Methods", ",".join(ALLOW_METHODS)),
        ("Access-Control-Allow-Headers", allow_headers_value(custom_headers)),
    ]
