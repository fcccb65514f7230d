# =============================================================================
# deej_core/ - Framework-Agnostic Core Package
# =============================================================================
# This package contains everything the web layer talks to:
# - interfaces.py: Collaborator contracts (config accessor, session registry)
# - stores.py: Reference implementations of those contracts
# - models/: Pydantic schemas for the HTTP request/response contract
#
# Code in this package should NOT import from FastAPI or uvicorn.
# =============================================================================

from deej_core.interfaces import (
    ConfigAccessor,
    PersistenceError,
    SessionRegistry,
    SliderMapping,
)
from deej_core.stores import (
    InMemoryConfigAccessor,
    JsonFileConfigAccessor,
    StaticSessionRegistry,
)

__all__ = [
    # Contracts
    "ConfigAccessor",
    "PersistenceError",
    "SessionRegistry",
    "SliderMapping",
    # Reference implementations
    "InMemoryConfigAccessor",
    "JsonFileConfigAccessor",
    "StaticSessionRegistry",
]
