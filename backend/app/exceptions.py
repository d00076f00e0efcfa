"""
Service Skeleton Backend — Custom Exception Hierarchy
=======================================================

What:  Application-specific exceptions for the failure modes the skeleton has.
How:   Each exception carries a message and an optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses.
Who:   Raised by services; caught by global handlers or by the CLI entry point.

Exception Hierarchy:
    AppError (base)
    └── BootstrapError               → 500 Internal Server Error
        ├── DataDirectoryError       → fatal at startup
        └── LogWriteError            → diagnostic line could not be appended

Failure Policy:
    Every filesystem failure during bootstrap is fatal for the caller of
    ApplicationRunner.run(). Callers that only want to observe the failure
    use ApplicationRunner.attempt(), which returns an outcome instead.
"""

from typing import Any, Dict, Optional


class AppError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class BootstrapError(AppError):
    """
    Raised when the bootstrap runner cannot complete its filesystem work.

    The API response stays generic; the path and the OS error are logged
    server-side only.
    """

    def __init__(
        self,
        message: str = "Service bootstrap failed",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DataDirectoryError(BootstrapError):
    """
    Raised when the working-data directory cannot be created.

    When:    Permission denied, disk full, or the path exists but is not a directory.
    Effect:  Aborts application startup; nothing else can work without it.
    """

    def __init__(
        self,
        path: str = "",
        reason: str = "",
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["path"] = path
        if reason:
            ctx["reason"] = reason
        super().__init__(message="Working-data directory could not be created", context=ctx)
        self.path = path


class LogWriteError(BootstrapError):
    """
    Raised when the diagnostic log line cannot be appended.

    When:    Permission denied, disk full, or the log path is a directory.
    """

    def __init__(
        self,
        path: str = "",
        reason: str = "",
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["path"] = path
        if reason:
            ctx["reason"] = reason
        super().__init__(message="Diagnostic log entry could not be written", context=ctx)
        self.path = path
