# =============================================================================
# deej_web/ - Web UI Server Package
# =============================================================================
# This package contains the embedded HTTP server for deej's configuration UI:
# - server.py: WebServer lifecycle (start/stop on a background thread)
# - main.py: FastAPI app factory, routers and static UI mount
# - middleware.py: CORS and access logging
# - routers/: API endpoint definitions
# - config.py: Environment variable loading and settings
# - exceptions.py: Error taxonomy and HTTP error handlers
#
# The web layer is thin - slider configuration and audio sessions belong to
# the host and are reached through deej_core.interfaces.
# =============================================================================

from deej_web.server import WebServer

__all__ = ["WebServer"]
