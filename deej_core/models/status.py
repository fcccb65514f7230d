# =============================================================================
# deej_core/models/status.py - Server Status Schemas
# =============================================================================

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ServerState(str, Enum):
    """
    Lifecycle state of the web server.

    Flow: stopped -> running -> stopped
    """
    STOPPED = "stopped"
    RUNNING = "running"


class StatusResponse(BaseModel):
    """
    Body of GET /api/status.

    Example:
        {
            "status": "running",
            "sliderCount": 2,
            "webUrl": "http://localhost:9123"
        }
    """

    model_config = ConfigDict(populate_by_name=True)

    status: str = Field(default=ServerState.RUNNING.value)
    slider_count: int = Field(
        ...,
        ge=0,
        alias="sliderCount",
        description="Number of sliders with a mapping entry"
    )
    web_url: str = Field(
        ...,
        alias="webUrl",
        description="URL the web UI is served from"
    )
