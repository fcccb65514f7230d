# =============================================================================
# deej_web/main.py - FastAPI Application Factory
# =============================================================================
# Builds the web UI application: API routers, exception handlers, the
# middleware chain and the static single-page UI mounted at "/".
#
# The application is built per server start because it is bound to the
# host's collaborators:
#
#   app = create_app(config_accessor, session_registry, static_dir, web_url)
#
# WebServer (server.py) does this for you.
# =============================================================================

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from deej_core.interfaces import ConfigAccessor, SessionRegistry
from deej_web.exceptions import (
    DeejWebException,
    StaticAssetsError,
    deej_web_exception_handler,
)
from deej_web.middleware import install_middleware
from deej_web.routers import sessions, sliders, status

logger = logging.getLogger(__name__)

API_PREFIX = "/api"


def default_static_dir() -> Path:
    """The UI bundle shipped inside the package."""
    return Path(__file__).resolve().parent / "static"


def resolve_static_dir(static_dir: str | Path | None = None) -> Path:
    """
    Resolve the directory the UI bundle is served from.

    Raises:
        StaticAssetsError: If the directory doesn't exist
    """
    path = Path(static_dir) if static_dir is not None else default_static_dir()
    if not path.is_dir():
        raise StaticAssetsError(str(path))
    return path


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log when the application starts and stops serving."""
    logger.info(f"Web UI application started at {app.state.web_url}")
    yield
    logger.info("Web UI application shutting down")


def create_app(
    config_accessor: ConfigAccessor,
    session_registry: SessionRegistry,
    static_dir: Path,
    web_url: str,
) -> FastAPI:
    """
    Create the web UI application.

    Args:
        config_accessor: Source and sink of the slider mapping
        session_registry: Source of live audio session keys
        static_dir: Directory holding the UI bundle (already resolved)
        web_url: URL reported by /api/status

    Returns:
        FastAPI: The application, wrapped in CORS and access-log middleware
    """
    app = FastAPI(
        title="deej web UI",
        description="Slider mapping configuration for deej",
        version="1.0.0",
        # Everything outside /api belongs to the static UI
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=lifespan,
    )

    app.state.config_accessor = config_accessor
    app.state.session_registry = session_registry
    app.state.web_url = web_url

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------

    app.add_exception_handler(DeejWebException, deej_web_exception_handler)
    # Unexpected errors become a 500 in CORSMiddleware so they keep CORS headers

    # -------------------------------------------------------------------------
    # Routers
    # -------------------------------------------------------------------------

    app.include_router(sliders.router, prefix=API_PREFIX, tags=["Sliders"])
    app.include_router(sessions.router, prefix=API_PREFIX, tags=["Sessions"])
    app.include_router(status.router, prefix=API_PREFIX, tags=["Status"])

    # Static UI catches every path the API didn't match
    app.mount("/", StaticFiles(directory=static_dir, html=True), name="ui")

    # -------------------------------------------------------------------------
    # Middleware
    # -------------------------------------------------------------------------

    install_middleware(app)

    return app
