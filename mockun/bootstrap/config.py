"""Server configuration, environment defaults and usage text."""

import os
from dataclasses import dataclass
from typing import Optional

from mockun.domain.routes import RouteTable


def _env_str(name: str, default: str) -> str:
    value = os.getenv(name)
    return value if value else default


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    return int(value) if value is not None else default


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.lower() in {"1", "true", "yes", "on"}


DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = "7878"
PORT_FLAG = "-p"
HEADERS_FLAG = "-h"
RECOGNIZED_FLAGS = (PORT_FLAG, HEADERS_FLAG)
ROUTE_SEPARATOR = ":"

USAGE = """
Usage:
  mockun [-p <port>] [-h <header,header...>] /path:/xxx/file ...

Example:
  mockun -p 6789 -h x-debug,x-trace /aa:./response.json /aa/bb:/response.text
"""


@dataclass(frozen=True)
class LoggingSettings:
    """Logging options sourced from the environment."""

    level: str
    destination: str
    use_json: bool


def logging_settings_from_env() -> LoggingSettings:
    """Read MOCKUN_LOG_* variables, falling back to stdout JSON at INFO."""
    return LoggingSettings(
        level=_env_str("MOCKUN_LOG_LEVEL", "INFO").upper(),
        destination=_env_str("MOCKUN_LOG_DESTINATION", "stdout"),
        use_json=_env_bool("MOCKUN_LOG_JSON", True),
    )


def socket_timeout_from_env() -> Optional[float]:
    """Return the per-connection timeout, or None for blocking reads."""
    seconds = _env_int("MOCKUN_SOCKET_TIMEOUT", 0)
    return float(seconds) if seconds > 0 else None


@dataclass(frozen=True)
class ServerConfig:
    """Fully resolved configuration shared read-only with every handler."""

    route_table: RouteTable
    custom_headers: tuple[str, ...] = ()
    port: str = DEFAULT_PORT
    host: str = DEFAULT_HOST
    socket_timeout: Optional[float] = None
