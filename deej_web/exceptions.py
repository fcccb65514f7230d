# =============================================================================
# deej_web/exceptions.py - Custom Exceptions and Handlers
# =============================================================================
# Centralized error taxonomy for the web UI server.
#
# Lifecycle errors (AlreadyRunningError, BindError, StartupError,
# StaticAssetsError, ShutdownError) are raised synchronously from
# WebServer.start()/stop().
#
# Request errors (BadRequestError, MethodNotAllowedError) are raised inside
# route handlers and turned into plain-text responses by the handlers at the
# bottom of this module.
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.responses import PlainTextResponse

logger = logging.getLogger(__name__)


class DeejWebException(Exception):
    """
    Base exception for the web UI server.

    All custom exceptions inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: str = "DEEJ_WEB_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f" Suggestion: {self.suggestion}"
        return result


# =============================================================================
# Lifecycle Exceptions
# =============================================================================

class AlreadyRunningError(DeejWebException):
    """Raised when start() is called on a running server."""

    def __init__(self, url: str):
        super().__init__(
            message="Server already running",
            code="ALREADY_RUNNING",
            suggestion="Call stop() before starting the server again",
            details={"url": url},
        )


class BindError(DeejWebException):
    """Raised when the listening socket cannot be set up."""

    def __init__(self, host: str, port: int, error: str):
        super().__init__(
            message=f"Listen on port {port}: {error}",
            code="BIND_ERROR",
            suggestion="Check that no other program is using the port, or pick another one",
            details={"host": host, "port": port, "error": error},
        )


class StartupError(DeejWebException):
    """Raised when uvicorn stops or stalls before it starts accepting requests."""

    def __init__(self, port: int, error: str):
        super().__init__(
            message=f"Start server on port {port}: {error}",
            code="STARTUP_ERROR",
            suggestion="Check the log for the error uvicorn reported during startup",
            details={"port": port, "error": error},
        )


class StaticAssetsError(DeejWebException):
    """Raised when the web UI bundle directory is missing."""

    def __init__(self, path: str):
        super().__init__(
            message=f"Static asset directory not found: {path}",
            code="STATIC_ASSETS_MISSING",
            suggestion="Reinstall the package or point STATIC_DIR at a built UI bundle",
            details={"path": path},
        )


class ShutdownError(DeejWebException):
    """Raised when graceful shutdown doesn't finish in time."""

    def __init__(self, timeout: float, error: str | None = None):
        reason = error or f"in-flight requests did not finish within {timeout:g}s"
        super().__init__(
            message=f"Shutdown server: {reason}",
            code="SHUTDOWN_ERROR",
            suggestion="Call stop() again once long-running requests have completed",
            details={"timeout_seconds": timeout},
        )


# =============================================================================
# Request Exceptions
# =============================================================================

class BadRequestError(DeejWebException):
    """Raised for a malformed slider id or request body."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            message=message,
            code="BAD_REQUEST",
            status_code=400,
            details=details,
        )


class InvalidSliderIdError(BadRequestError):
    """Raised when the path segment after /api/sliders/ is not a slider index."""

    def __init__(self, raw_id: str):
        super().__init__("Invalid slider ID", details={"slider_id": raw_id})


class InvalidRequestBodyError(BadRequestError):
    """Raised when a PUT body isn't a JSON object with an "apps" string list."""

    def __init__(self, error: str):
        super().__init__("Invalid request body", details={"error": error})


class MethodNotAllowedError(DeejWebException):
    """Raised when a route is called with an unsupported HTTP method."""

    def __init__(self, method: str, path: str):
        super().__init__(
            message="Method not allowed",
            code="METHOD_NOT_ALLOWED",
            status_code=405,
            details={"method": method, "path": path},
        )


class EncodeError(DeejWebException):
    """
    Raised when a response payload can't be serialized.

    Never reaches the client: it is logged and an empty body is sent.
    """

    def __init__(self, payload_type: str, error: str):
        super().__init__(
            message=f"Failed to encode JSON response: {error}",
            code="ENCODE_ERROR",
            details={"payload_type": payload_type},
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def deej_web_exception_handler(
    request: Request,
    exc: DeejWebException
) -> PlainTextResponse:
    """
    Convert a DeejWebException to a plain-text response.

    Error bodies are short human-readable strings, e.g. "Invalid slider ID".
    """
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
    return PlainTextResponse(exc.message, status_code=exc.status_code)


async def unexpected_exception_handler(
    request: Request,
    exc: Exception
) -> PlainTextResponse:
    """Handle anything a route didn't anticipate without killing the server."""
    logger.exception(f"Unexpected error handling {request.method} {request.url.path}: {exc}")
    return PlainTextResponse("Internal server error", status_code=500)
