# =============================================================================
# deej_web/middleware.py - Request Middleware
# =============================================================================
# Two interceptors wrap the router, outermost first:
#
#   CORSMiddleware -> AccessLogMiddleware -> router
#
# CORS answers OPTIONS itself, so preflight requests never show up in the
# access log. It also turns unexpected handler errors into a plain-text 500.
#
# Starlette runs the most recently added middleware first; install_middleware()
# adds them in the right order.
# =============================================================================

import logging
import time

from fastapi import FastAPI, Request
from fastapi.responses import Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from deej_web.exceptions import unexpected_exception_handler

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


class CORSMiddleware(BaseHTTPMiddleware):
    """
    Permissive CORS for the bundled UI and dev servers.

    Unlike Starlette's CORSMiddleware, the headers are set on every response
    whether or not the request carried an Origin header. That includes the
    plain-text 500 sent when a handler raises something unexpected.
    """

    async def dispatch(self, request: Request, call_next):
        if request.method == "OPTIONS":
            return Response(status_code=200, headers=CORS_HEADERS)

        try:
            response = await call_next(request)
        except Exception as e:
            response = await unexpected_exception_handler(request, e)
        response.headers.update(CORS_HEADERS)
        return response


class StatusRecorder:
    """
    Wraps an ASGI send callable and remembers the response status.

    Only the first http.response.start message counts. If the downstream app
    never sends one, status stays 200.
    """

    def __init__(self, send: Send):
        self._send = send
        self.status_code = 200
        self.started = False

    async def __call__(self, message: Message) -> None:
        if message["type"] == "http.response.start" and not self.started:
            self.started = True
            self.status_code = message["status"]
        await self._send(message)


class AccessLogMiddleware:
    """Logs method, path, status and duration of every HTTP request it sees."""

    def __init__(self, app: ASGIApp):
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        start = time.perf_counter()
        recorder = StatusRecorder(send)
        try:
            await self.app(scope, receive, recorder)
        except Exception:
            if not recorder.started:
                recorder.status_code = 500
            raise
        finally:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.debug(
                f"HTTP request method={scope['method']} path={scope['path']} "
                f"status={recorder.status_code} duration={duration_ms:.2f}ms"
            )


def install_middleware(app: FastAPI) -> None:
    """Add the middleware chain so that CORS wraps the access log."""
    app.add_middleware(AccessLogMiddleware)
    app.add_middleware(CORSMiddleware)
