"""Startup error taxonomy for the mock server."""

from typing import Optional


class MockunError(Exception):
    """Base class for fatal startup failures."""


class UsageError(MockunError):
    """Raised when command-line arguments are malformed."""


class FileLoadError(MockunError):
    """Raised when a mapped response file cannot be read."""

    def __init__(self, file_name: str, reason: Optional[BaseException] = None) -> None:
        self.file_name = file_name
        self.reason = reason
        detail = f": {reason}" if reason is not None else ""
        super().__init__(f"Failed to load {file_name}{detail}")


class BindError(MockunError):
    """Raised when the listening socket cannot be created."""
