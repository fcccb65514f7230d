# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Provides in-memory collaborators and a TestClient for the app
# =============================================================================

import os
import socket

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing deej_web.config which loads settings immediately

os.environ.setdefault("WEB_HOST", "127.0.0.1")
os.environ.setdefault("DEBUG", "true")

import pytest
from fastapi.testclient import TestClient

from deej_core.interfaces import ConfigAccessor, PersistenceError
from deej_core.stores import InMemoryConfigAccessor, StaticSessionRegistry
from deej_web.main import create_app, default_static_dir


class FailingConfigAccessor(ConfigAccessor):
    """Accessor whose writes always fail, for save-failure paths."""

    def __init__(self, mapping=None):
        self.mapping = dict(mapping or {})
        self.write_calls = 0

    def get_mapping(self):
        return {k: list(v) for k, v in self.mapping.items()}

    def write_mapping(self, mapping):
        self.write_calls += 1
        raise PersistenceError("disk is read-only", code="CONFIG_WRITE_ERROR")


class BrokenConfigAccessor(ConfigAccessor):
    """Accessor that fails with an error no handler expects."""

    def get_mapping(self):
        raise RuntimeError("mapping store exploded")

    def write_mapping(self, mapping):
        raise RuntimeError("mapping store exploded")


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def sample_mapping():
    """Slider mapping with one bound slider."""
    return {0: ["chrome.exe"]}


@pytest.fixture
def config_accessor(sample_mapping):
    """In-memory accessor seeded with sample_mapping."""
    return InMemoryConfigAccessor(sample_mapping)


@pytest.fixture
def session_registry():
    """Registry reporting a few typical session keys."""
    return StaticSessionRegistry(["chrome.exe", "spotify.exe", "system"])


@pytest.fixture
def web_url():
    return "http://localhost:9123"


@pytest.fixture
def app(config_accessor, session_registry, web_url):
    """Web UI application wired to the in-memory collaborators."""
    return create_app(
        config_accessor=config_accessor,
        session_registry=session_registry,
        static_dir=default_static_dir(),
        web_url=web_url,
    )


@pytest.fixture
def client(app):
    """HTTP client talking to the app in-process."""
    return TestClient(app)


@pytest.fixture
def free_port():
    """A TCP port nothing is listening on right now."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


@pytest.fixture
def failing_accessor(sample_mapping):
    """Accessor that can be read but refuses every write."""
    return FailingConfigAccessor(sample_mapping)


@pytest.fixture
def broken_client(session_registry, web_url):
    """Client for an app whose accessor raises unexpected errors."""
    app = create_app(
        config_accessor=BrokenConfigAccessor(),
        session_registry=session_registry,
        static_dir=default_static_dir(),
        web_url=web_url,
    )
    return TestClient(app, raise_server_exceptions=False)
