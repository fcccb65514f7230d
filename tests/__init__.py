# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the deej web UI server:
# - test_sliders_api.py / test_status_sessions_api.py: API endpoints
# - test_middleware.py: CORS and access logging
# - test_static_ui.py: Bundled UI file serving
# - test_server.py: WebServer lifecycle on real sockets
# - test_stores.py: Reference config accessors and session registry
# - test_models.py, test_config.py, test_exceptions.py, test_cli.py
#
# Run tests with: pytest
# =============================================================================
