# =============================================================================
# deej_core/models/ - Pydantic Data Models
# =============================================================================
# This package contains the HTTP contract of the web UI API:
# - slider.py: Slider mapping request/response schemas
# - session.py: Audio session listing schema
# - status.py: Server status and lifecycle state
#
# Field aliases match the JSON names the bundled UI expects (camelCase).
# =============================================================================

from .slider import (
    SliderAppsResponse,
    SliderUpdateRequest,
    SliderUpdateResponse,
    SlidersResponse,
)
from .session import SessionsResponse
from .status import ServerState, StatusResponse

__all__ = [
    # Sliders
    "SliderAppsResponse",
    "SliderUpdateRequest",
    "SliderUpdateResponse",
    "SlidersResponse",
    # Sessions
    "SessionsResponse",
    # Status
    "ServerState",
    "StatusResponse",
]
