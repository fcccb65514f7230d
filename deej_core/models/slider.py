# =============================================================================
# deej_core/models/slider.py - Slider Mapping Schemas
# =============================================================================
# These models define the API contract for slider operations:
# - SlidersResponse: GET /api/sliders
# - SliderAppsResponse: GET /api/sliders/{id}
# - SliderUpdateRequest / SliderUpdateResponse: PUT /api/sliders/{id}
#
# JSON object keys are always strings, so slider indexes are sent as
# "0", "1", ... in SlidersResponse.
# =============================================================================

from pydantic import BaseModel, Field

from deej_core.interfaces import SliderMapping


class SlidersResponse(BaseModel):
    """
    The full slider mapping.

    Example:
        {
            "sliders": {
                "0": ["master"],
                "1": ["chrome.exe", "firefox.exe"]
            }
        }
    """

    sliders: dict[str, list[str]] = Field(
        default_factory=dict,
        description="Slider index (as string) -> app names"
    )

    @classmethod
    def from_mapping(cls, mapping: SliderMapping) -> "SlidersResponse":
        """Build the response from an int-keyed mapping, ordered by slider index."""
        return cls(
            sliders={str(slider): list(apps) for slider, apps in sorted(mapping.items())}
        )


class SliderAppsResponse(BaseModel):
    """Apps bound to a single slider (empty if the slider is unmapped)."""
    apps: list[str] = Field(default_factory=list)


class SliderUpdateRequest(BaseModel):
    """
    Body of PUT /api/sliders/{id}.

    A missing "apps" field clears the slider.
    """
    apps: list[str] = Field(
        default_factory=list,
        description="Process names (or reserved tokens) to bind to the slider"
    )


class SliderUpdateResponse(BaseModel):
    """
    Result of a slider update.

    Save failures are reported here with success=false; the HTTP status
    stays 200.
    """
    success: bool
    message: str
