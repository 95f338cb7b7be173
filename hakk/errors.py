"""Exception hierarchy for hakk.

Every fatal condition is raised as a :class:`HakkError` subclass so the CLI
can catch a single type, print one line and exit non-zero.
"""

from __future__ import annotations

from pathlib import Path


class HakkError(Exception):
    """Base class for all fatal hakk errors."""


class ConfigStoreError(HakkError):
    """Raised when the defaults file cannot be located or written."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        self.path = path
        super().__init__(message)


class ScaffoldError(HakkError):
    """Raised when a directory or file of the project skeleton cannot be created."""

    def __init__(self, message: str, path: str | Path | None = None) -> None:
        self.path = path
        super().__init__(message)


class GitInitError(HakkError):
    """Raised when ``git init`` fails to launch or exits non-zero."""

    def __init__(self, message: str, command: str = "", stderr: str = "") -> None:
        self.command = command
        self.stderr = stderr
        super().__init__(message)
