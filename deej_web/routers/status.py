# =============================================================================
# deej_web/routers/status.py - Server Status Endpoint
# =============================================================================

from fastapi import APIRouter, Request
from fastapi.responses import Response

from deej_core.models import ServerState, StatusResponse
from deej_web.dependencies import ConfigAccessorDep, WebUrlDep
from deej_web.responses import json_response
from deej_web.routers.common import ALL_METHODS, require_method

router = APIRouter()


@router.api_route("/status", methods=ALL_METHODS)
def get_status(
    request: Request,
    accessor: ConfigAccessorDep,
    web_url: WebUrlDep,
) -> Response:
    """
    Report that the server is up, how many sliders are mapped, and where
    the UI lives.
    """
    require_method(request, "GET")

    return json_response(
        StatusResponse(
            status=ServerState.RUNNING.value,
            slider_count=len(accessor.get_mapping()),
            web_url=web_url,
        )
    )
