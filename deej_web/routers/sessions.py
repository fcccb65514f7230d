# =============================================================================
# deej_web/routers/sessions.py - Audio Session Endpoints
# =============================================================================
# Read-only view of the audio sessions the host has discovered. The UI uses
# it to suggest process names when editing a slider.
# =============================================================================

from fastapi import APIRouter, Request
from fastapi.responses import Response

from deej_core.models import SessionsResponse
from deej_web.dependencies import SessionRegistryDep
from deej_web.responses import json_response
from deej_web.routers.common import ALL_METHODS, require_method

router = APIRouter()


@router.api_route("/sessions", methods=ALL_METHODS)
def list_sessions(request: Request, registry: SessionRegistryDep) -> Response:
    """List the keys of all current audio sessions."""
    require_method(request, "GET")

    return json_response(SessionsResponse(sessions=registry.list_keys()))
