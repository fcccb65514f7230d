# =============================================================================
# deej_web/responses.py - JSON Response Helpers
# =============================================================================
# Every JSON body the API sends goes through json_response(), so encoding
# happens in exactly one place. Pydantic models are dumped by alias
# (camelCase field names where the UI expects them).
# =============================================================================

import logging

from fastapi.responses import Response
from pydantic import BaseModel

from deej_web.exceptions import EncodeError

logger = logging.getLogger(__name__)

JSON_MEDIA_TYPE = "application/json"


def encode_json(payload: BaseModel) -> bytes:
    """
    Serialize a response payload.

    Raises:
        EncodeError: If the payload contains something JSON can't represent
    """
    try:
        return payload.model_dump_json(by_alias=True).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise EncodeError(type(payload).__name__, str(e)) from e


def json_response(payload: BaseModel) -> Response:
    """
    Build a 200 application/json response.

    An encode failure is logged and answered with an empty JSON body; the
    status line is already committed by then, so the client can't be told.
    """
    try:
        body = encode_json(payload)
    except EncodeError as e:
        logger.error(str(e))
        body = b""
    return Response(content=body, media_type=JSON_MEDIA_TYPE)
