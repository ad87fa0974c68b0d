"""Eager loading of route files into the immutable route table."""

import logging
from pathlib import Path
from typing import Callable, Iterable

from mockun.domain.correlation_id import CorrelationLoggerAdapter
from mockun.domain.errors import FileLoadError
from mockun.domain.routes import RouteEntry, RouteRecord, RouteTable, content_type_for

LOADER_LOGGER = CorrelationLoggerAdapter(
    logging.getLogger("mockun.pipeline.route_loader"), {}
)

FileContentProvider = Callable[[str], str]


def read_file_text(file_name: str) -> str:
    """Read a whole file as UTF-8 text, keeping its line endings byte for byte."""
    return Path(file_name).read_bytes().decode("utf-8")


def load_route(
    entry: RouteEntry, read_file: FileContentProvider = read_file_text
) -> RouteRecord:
    """Read one entry's file and classify its content type."""
    try:
        body = read_file(entry.file_name)
    except (OSError, UnicodeDecodeError) as error:
        LOADER_LOGGER.error(
            "Failed to load route file",
            extra={
                "event": "route_load_failed",
                "route": entry.path,
                "file": entry.file_name,
                "error_type": type(error).__name__,
            },
        )
        raise FileLoadError(entry.file_name, error) from error

    record = RouteRecord(
        path=entry.path, body=body, content_type=content_type_for(entry.file_name)
    )
    LOADER_LOGGER.debug(
        "Route file loaded",
        extra={
            "event": "route_loaded",
            "route": record.path,
            "file": entry.file_name,
            "content_type": record.content_type,
        },
    )
    return record


def build_route_table(
    entries: Iterable[RouteEntry], read_file: FileContentProvider = read_file_text
) -> RouteTable:
    """Load every entry in order; any unreadable file aborts the whole build."""
    return RouteTable(tuple(load_route(entry, read_file) for entry in entries))
