"""Context object shared across worker threads."""

from dataclasses import dataclass
from typing import Optional

from mockun.domain.routes import RouteTable


@dataclass(frozen=True)
class WorkerContext:
    """Read-only dependencies handed to every connection handler."""

    route_table: RouteTable
    custom_headers: tuple[str, ...] = ()
    socket_timeout: Optional[float] = None
