# =============================================================================
# deej_web/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - sliders.py: Slider mapping read/update endpoints
# - sessions.py: Live audio session listing
# - status.py: Server status
# - common.py: Method dispatch helpers shared by the routers
#
# Each router is mounted in main.py under the /api prefix. Handlers accept
# every method and reject the ones they don't support themselves, so a wrong
# method on an API path is a 405 instead of falling through to the static UI.
# =============================================================================

from . import sessions
from . import sliders
from . import status

__all__ = [
    "sessions",
    "sliders",
    "status",
]
