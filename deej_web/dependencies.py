# =============================================================================
# deej_web/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for the host collaborators.
# create_app() stores them on app.state; these functions hand them to route
# handlers via Depends().
# =============================================================================

from typing import Annotated

from fastapi import Depends, Request

from deej_core.interfaces import ConfigAccessor, SessionRegistry


def get_config_accessor(request: Request) -> ConfigAccessor:
    """Get the slider mapping accessor the app was built with."""
    return request.app.state.config_accessor


def get_session_registry(request: Request) -> SessionRegistry:
    """Get the session registry the app was built with."""
    return request.app.state.session_registry


def get_web_url(request: Request) -> str:
    """Get the URL the server reports for itself."""
    return request.app.state.web_url


# Type aliases for dependency injection
ConfigAccessorDep = Annotated[ConfigAccessor, Depends(get_config_accessor)]
SessionRegistryDep = Annotated[SessionRegistry, Depends(get_session_registry)]
WebUrlDep = Annotated[str, Depends(get_web_url)]
