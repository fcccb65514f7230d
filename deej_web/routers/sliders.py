# =============================================================================
# deej_web/routers/sliders.py - Slider Mapping Endpoints
# =============================================================================
# GET  /api/sliders       - full slider -> apps mapping
# GET  /api/sliders/{id}  - apps bound to one slider
# PUT  /api/sliders/{id}  - replace the apps bound to one slider
#
# Updates are read-modify-write against the accessor's current snapshot.
# The host notices the config change and reloads it on its own.
#
# Accessor calls run in the threadpool, never on the event loop.
# =============================================================================

import logging

from fastapi import APIRouter, Request
from fastapi.responses import Response
from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool

from deej_core.interfaces import ConfigAccessor, PersistenceError
from deej_core.models import (
    SliderAppsResponse,
    SliderUpdateRequest,
    SliderUpdateResponse,
    SlidersResponse,
)
from deej_web.dependencies import ConfigAccessorDep
from deej_web.exceptions import InvalidRequestBodyError, InvalidSliderIdError
from deej_web.responses import json_response
from deej_web.routers.common import ALL_METHODS, require_method

logger = logging.getLogger(__name__)

router = APIRouter()

SAVE_FAILED_MESSAGE = "Failed to save configuration"
SAVE_OK_MESSAGE = "Slider updated - config will auto-reload"


def parse_slider_id(raw: str) -> int:
    """
    Parse the path remainder after /api/sliders/ into a slider index.

    Only plain ASCII digits are accepted, so "-1", "1/2" and "" are all
    rejected.

    Raises:
        InvalidSliderIdError: If raw is not a non-negative integer
    """
    if not (raw.isascii() and raw.isdigit()):
        raise InvalidSliderIdError(raw)
    return int(raw)


# =============================================================================
# Endpoints
# =============================================================================

@router.api_route("/sliders", methods=ALL_METHODS)
def list_sliders(request: Request, accessor: ConfigAccessorDep) -> Response:
    """
    Get the full slider mapping.

    Slider indexes are returned as string keys.
    """
    require_method(request, "GET")

    return json_response(SlidersResponse.from_mapping(accessor.get_mapping()))


@router.api_route("/sliders/{slider_id:path}", methods=ALL_METHODS)
async def slider_by_id(
    slider_id: str,
    request: Request,
    accessor: ConfigAccessorDep,
) -> Response:
    """
    Read (GET) or replace (PUT) the apps bound to one slider.

    A slider without a mapping entry reads as an empty list.
    """
    slider = parse_slider_id(slider_id)
    require_method(request, "GET", "PUT")

    if request.method == "GET":
        mapping = await run_in_threadpool(accessor.get_mapping)
        apps = mapping.get(slider, [])
        return json_response(SliderAppsResponse(apps=apps))

    try:
        update = SliderUpdateRequest.model_validate_json(await request.body())
    except ValidationError as e:
        raise InvalidRequestBodyError(str(e)) from e

    result = await run_in_threadpool(_update_slider, accessor, slider, update.apps)
    return json_response(result)


def _update_slider(accessor: ConfigAccessor, slider: int, apps: list[str]) -> SliderUpdateResponse:
    """
    Overwrite one slider's entry and write the whole mapping back.

    A save failure is reported in the payload (success=false) rather than as
    an HTTP error.
    """
    try:
        mapping = accessor.get_mapping()
        mapping[slider] = list(apps)
        accessor.write_mapping(mapping)
    except (PersistenceError, OSError) as e:
        logger.error(f"Failed to write config for slider {slider}: {e}")
        return SliderUpdateResponse(success=False, message=SAVE_FAILED_MESSAGE)

    logger.info(f"Slider {slider} mapped to {apps}")
    return SliderUpdateResponse(success=True, message=SAVE_OK_MESSAGE)
