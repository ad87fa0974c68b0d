"""Mock HTTP server serving files under fixed request paths."""

import logging
import sys
from typing import Optional, Sequence

from mockun.bootstrap.arguments import parse_args
from mockun.bootstrap.config import (
    DEFAULT_PORT,
    USAGE,
    ServerConfig,
    logging_settings_from_env,
    socket_timeout_from_env,
)
from mockun.bootstrap.logging_setup import configure_logging
from mockun.domain.correlation_id import CorrelationLoggerAdapter
from mockun.domain.errors import BindError, FileLoadError, UsageError
from mockun.pipeline.route_loader import build_route_table
from mockun.transport.accept_loop import run_server

SERVER_LOGGER = CorrelationLoggerAdapter(logging.getLogger("mockun.server"), {})


def build_config(argv: Sequence[str]) -> ServerConfig:
    """Parse arguments and eagerly load every route file."""
    args = parse_args(argv)
    route_table = build_route_table(args.entries)
    return ServerConfig(
        route_table=route_table,
        custom_headers=args.custom_headers,
        port=args.port if args.port is not None else DEFAULT_PORT,
        socket_timeout=socket_timeout_from_env(),
    )


def _log_startup(config: ServerConfig) -> None:
    SERVER_LOGGER.info(
        "Mock server started",
        extra={
            "event": "server_started",
            "host": config.host,
            "port": config.port,
            "custom_headers": list(config.custom_headers),
        },
    )
    for record in config.route_table:
        SERVER_LOGGER.info(
            "Route registered",
            extra={
                "event": "route_registered",
                "route": record.path,
                "content_type": record.content_type,
            },
        )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the mock server; returns a non-zero status on startup failure."""
    settings = logging_settings_from_env()
    configure_logging(settings.level, settings.destination, settings.use_json)

    try:
        config = build_config(sys.argv[1:] if argv is None else argv)
    except (UsageError, FileLoadError) as error:
        SERVER_LOGGER.critical(
            "Invalid invocation",
            extra={"event": "usage_error", "error_type": type(error).__name__},
        )
        print(f"{error}\n{USAGE}", file=sys.stderr)
        return 1

    _log_startup(config)
    try:
        run_server(config)
    except BindError as error:
        print(error, file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        SERVER_LOGGER.info("Interrupted", extra={"event": "server_interrupted"})
    return 0


if __name__ == "__main__":
    sys.exit(main())
