# =============================================================================
# deej_core/interfaces.py - Collaborator Contracts
# =============================================================================
# The web server never owns slider configuration or audio sessions. It talks
# to the host application through two small contracts:
#
# - ConfigAccessor: read/write the slider -> app-list mapping
# - SessionRegistry: list the keys of the currently known audio sessions
#
# The host is responsible for persistence and for hot-reloading the config
# after a write.
# =============================================================================

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

# Slider index -> ordered list of process names (or reserved tokens like "master")
SliderMapping = dict[int, list[str]]


class PersistenceError(Exception):
    """
    Raised by a ConfigAccessor when a mapping could not be read or saved.

    Carries a short code and optional details so the caller can log
    something actionable.
    """

    def __init__(
        self,
        message: str,
        code: str = "PERSISTENCE_ERROR",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ConfigAccessor(ABC):
    """
    Read/write access to the slider mapping.

    Implementations must make each write_mapping() call an atomic replace of
    the whole mapping. Callers do read-modify-write without any extra
    locking, so concurrent writers may lose updates.
    """

    @abstractmethod
    def get_mapping(self) -> SliderMapping:
        """
        Return the current mapping.

        The returned dict belongs to the caller and may be mutated freely.
        """

    @abstractmethod
    def write_mapping(self, mapping: SliderMapping) -> None:
        """
        Replace the stored mapping.

        Raises:
            PersistenceError: If the mapping could not be saved
        """


class SessionRegistry(ABC):
    """Read-only view of the host's live audio sessions."""

    @abstractmethod
    def list_keys(self) -> list[str]:
        """Return the opaque keys of all known sessions."""
