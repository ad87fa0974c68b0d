"""Command-line token normalization and option extraction."""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from mockun.bootstrap.config import (
    HEADERS_FLAG,
    PORT_FLAG,
    RECOGNIZED_FLAGS,
    ROUTE_SEPARATOR,
)
from mockun.domain.correlation_id import CorrelationLoggerAdapter
from mockun.domain.errors import UsageError
from mockun.domain.routes import RouteEntry

ARGS_LOGGER = CorrelationLoggerAdapter(logging.getLogger("mockun.bootstrap.args"), {})


@dataclass(frozen=True)
class ParsedArgs:
    """Options and route entries pulled out of the command line."""

    port: Optional[str]
    custom_headers: tuple[str, ...]
    entries: tuple[RouteEntry, ...]


def normalize_args(
    argv: Sequence[str], flags: Sequence[str] = RECOGNIZED_FLAGS
) -> list[str]:
    """Split combined ``-pVALUE`` tokens into ``-p`` followed by ``VALUE``."""
    tokens: list[str] = []
    for arg in argv:
        flag = next((prefix for prefix in flags if arg.startswith(prefix)), None)
        if flag is None:
            tokens.append(arg)
            continue
        tokens.append(flag)
        remainder = arg[len(flag) :]
        if remainder:
            tokens.append(remainder)
    return tokens


def extract_option(
    flag: str, tokens: Sequence[str]
) -> tuple[Optional[str], list[str]]:
    """Remove the first ``flag`` and its value from ``tokens``.

    Later occurrences of the same flag are left in place.
    """
    remaining = list(tokens)
    index = next(
        (i for i, token in enumerate(remaining) if token.startswith(flag)), None
    )
    if index is None:
        return None, remaining
    if index + 1 >= len(remaining):
        raise UsageError(f"Option {flag} requires a value")
    value = remaining[index + 1]
    del remaining[index : index + 2]
    return value, remaining


def parse_custom_headers(value: Optional[str]) -> tuple[str, ...]:
    """Split a comma-separated header list, trimming each name."""
    if value is None:
        return ()
    return tuple(name.strip() for name in value.split(","))


def parse_route_entries(tokens: Sequence[str]) -> tuple[RouteEntry, ...]:
    """Parse ``path:file`` tokens, requiring at least one."""
    entries = []
    for token in tokens:
        segments = token.split(ROUTE_SEPARATOR)
        if len(segments) != 2:
            raise UsageError(f"Expected <path>:<file>, got {token!r}")
        entries.append(RouteEntry(path=segments[0], file_name=segments[1]))
    if not entries:
        raise UsageError("At least one <path>:<file> mapping is required")
    return tuple(entries)


def parse_args(argv: Sequence[str]) -> ParsedArgs:
    """Turn raw argv (without the program name) into port, headers and routes."""
    tokens = normalize_args(argv)
    port, tokens = extract_option(PORT_FLAG, tokens)
    header_value, tokens = extract_option(HEADERS_FLAG, tokens)
    entries = parse_route_entries(tokens)
    custom_headers = parse_custom_headers(header_value)
    if ARGS_LOGGER.logger.isEnabledFor(logging.DEBUG):
        ARGS_LOGGER.debug(
            "Arguments parsed",
            extra={
                "event": "arguments_parsed",
                "port": port,
                "custom_headers": list(custom_headers),
                "routes": [entry.path for entry in entries],
            },
        )
    return ParsedArgs(port=port, custom_headers=custom_headers, entries=entries)
