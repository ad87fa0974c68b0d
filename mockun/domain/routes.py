"""Route table data model and content type inference."""

from dataclasses import dataclass
from typing import Iterator, Optional

from mockun.domain.errors import UsageError

DEFAULT_CONTENT_TYPE = "text/plain"

CONTENT_TYPES = {
    "json": "application/json",
    "js": "application/javascript",
    "text": "text/plain",
    "html": "text/html",
}


def content_type_for(file_name: str) -> str:
    """Map the final dot-delimited segment of a file name to a content type."""
    extension = file_name.split(".")[-1]
    return CONTENT_TYPES.get(extension, DEFAULT_CONTENT_TYPE)


@dataclass(frozen=True)
class RouteEntry:
    """A request path paired with the file that backs it."""

    path: str
    file_name: str


@dataclass(frozen=True)
class RouteRecord:
    """A servable route with its preloaded body."""

    path: str
    body: str
    content_type: str


@dataclass(frozen=True)
class RouteTable:
    """Immutable ordered collection of routes; the first matching path wins."""

    records: tuple[RouteRecord, ...]

    def __post_init__(self) -> None:
        if not self.records:
            raise UsageError("At least one route must be configured")

    def __iter__(self) -> Iterator[RouteRecord]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)

    @property
    def paths(self) -> tuple[str, ...]:
        return tuple(record.path for record in self.records)

    def lookup(self, path: str) -> Optional[RouteRecord]:
        """Return the first record whose path equals ``path`` exactly."""
        for record in self.records:
            if record.path == path:
                return record
        return None
