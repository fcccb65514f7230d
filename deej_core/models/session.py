# =============================================================================
# deej_core/models/session.py - Audio Session Schemas
# =============================================================================

from pydantic import BaseModel, Field


class SessionsResponse(BaseModel):
    """Keys of the audio sessions the host currently knows about."""
    sessions: list[str] = Field(
        default_factory=list,
        description="Opaque session keys, as supplied by the host"
    )
