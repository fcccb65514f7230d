# =============================================================================
# deej_web/routers/common.py - Shared Routing Helpers
# =============================================================================

from fastapi import Request

from deej_web.exceptions import MethodNotAllowedError

# Methods API routes are registered for (OPTIONS is answered by CORS middleware)
ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE"]


def require_method(request: Request, *allowed: str) -> None:
    """Raise MethodNotAllowedError unless the request uses one of `allowed`."""
    if request.method not in allowed:
        raise MethodNotAllowedError(request.method, request.url.path)
