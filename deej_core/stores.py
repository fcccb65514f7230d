# =============================================================================
# deej_core/stores.py - Reference Collaborator Implementations
# =============================================================================
# Concrete ConfigAccessor / SessionRegistry implementations:
# - InMemoryConfigAccessor: dict behind a lock (tests, embedding)
# - JsonFileConfigAccessor: JSON file on disk, atomic replace on write
# - StaticSessionRegistry: fixed list of session keys the host can update
#
# File format used by JsonFileConfigAccessor:
#   {
#       "slider_mapping": {
#           "0": "master",
#           "1": ["chrome.exe", "firefox.exe"]
#       }
#   }
# A bare string value is treated as a one-element list.
# =============================================================================

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Any, Iterable

from deej_core.interfaces import (
    ConfigAccessor,
    PersistenceError,
    SessionRegistry,
    SliderMapping,
)

logger = logging.getLogger(__name__)

MAPPING_KEY = "slider_mapping"


def copy_mapping(mapping: SliderMapping) -> SliderMapping:
    """Copy a mapping so neither side can mutate the other's lists."""
    return {slider: list(apps) for slider, apps in mapping.items()}


def parse_mapping(raw: Any) -> SliderMapping:
    """
    Convert a decoded JSON object into a SliderMapping.

    Keys must be non-negative integers (as strings). Values may be a list of
    strings or a single string. Entries that don't fit are skipped.

    Raises:
        PersistenceError: If raw is not a JSON object
    """
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise PersistenceError(
            f"'{MAPPING_KEY}' must be an object, got {type(raw).__name__}",
            code="INVALID_MAPPING",
        )

    mapping: SliderMapping = {}
    for key, value in raw.items():
        try:
            slider = int(key)
        except (TypeError, ValueError):
            logger.warning(f"Skipping slider mapping with non-integer key: {key!r}")
            continue
        if slider < 0:
            logger.warning(f"Skipping slider mapping with negative key: {key!r}")
            continue

        if isinstance(value, str):
            mapping[slider] = [value]
        elif isinstance(value, list) and all(isinstance(app, str) for app in value):
            mapping[slider] = list(value)
        elif value is None:
            mapping[slider] = []
        else:
            logger.warning(f"Skipping slider {slider}: value must be a string or list of strings")

    return mapping


# =============================================================================
# Config Accessors
# =============================================================================

class InMemoryConfigAccessor(ConfigAccessor):
    """Keeps the mapping in memory. Every write replaces the whole snapshot."""

    def __init__(self, initial: SliderMapping | None = None):
        self._lock = threading.Lock()
        self._mapping: SliderMapping = copy_mapping(initial or {})

    def get_mapping(self) -> SliderMapping:
        with self._lock:
            return copy_mapping(self._mapping)

    def write_mapping(self, mapping: SliderMapping) -> None:
        snapshot = copy_mapping(mapping)
        with self._lock:
            self._mapping = snapshot


class JsonFileConfigAccessor(ConfigAccessor):
    """
    Stores the mapping in a JSON file.

    Writes go to a temporary file in the same directory which then replaces
    the target with os.replace(), so readers (including the host's reload
    watcher) never see a half-written file. Other top-level keys in the file
    are preserved.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self._lock = threading.Lock()

    def _read_document(self) -> dict[str, Any]:
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except OSError as e:
            raise PersistenceError(
                f"Failed to read config file: {e}",
                code="CONFIG_READ_ERROR",
                details={"path": str(self.path)},
            ) from e

        if not text.strip():
            return {}

        try:
            document = json.loads(text)
        except json.JSONDecodeError as e:
            raise PersistenceError(
                f"Config file is not valid JSON: {e}",
                code="CONFIG_PARSE_ERROR",
                details={"path": str(self.path)},
            ) from e

        if not isinstance(document, dict):
            raise PersistenceError(
                "Config file must contain a JSON object",
                code="CONFIG_PARSE_ERROR",
                details={"path": str(self.path)},
            )
        return document

    def get_mapping(self) -> SliderMapping:
        with self._lock:
            document = self._read_document()
        return parse_mapping(document.get(MAPPING_KEY))

    def write_mapping(self, mapping: SliderMapping) -> None:
        with self._lock:
            document = self._read_document()
            document[MAPPING_KEY] = {
                str(slider): list(apps) for slider, apps in sorted(mapping.items())
            }
            self._replace(json.dumps(document, indent=2) + "\n")

        logger.info(f"Wrote {len(mapping)} slider mappings to {self.path}")

    def _replace(self, content: str) -> None:
        directory = self.path.parent
        tmp_name = None
        try:
            directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=directory
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
            os.replace(tmp_name, self.path)
        except OSError as e:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise PersistenceError(
                f"Failed to write config file: {e}",
                code="CONFIG_WRITE_ERROR",
                details={"path": str(self.path)},
            ) from e


# =============================================================================
# Session Registries
# =============================================================================

class StaticSessionRegistry(SessionRegistry):
    """
    Session registry backed by a plain list.

    The host pushes new keys with set_keys() whenever its audio session
    enumeration changes.
    """

    def __init__(self, keys: Iterable[str] = ()):
        self._lock = threading.Lock()
        self._keys = list(keys)

    def list_keys(self) -> list[str]:
        with self._lock:
            return list(self._keys)

    def set_keys(self, keys: Iterable[str]) -> None:
        with self._lock:
            self._keys = list(keys)
