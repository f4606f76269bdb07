"""
Pytest configuration for API integration tests
"""

import pytest
from fastapi.testclient import TestClient


@pytest.fixture(scope="function")
def api_config(snapshot_dir):
    """Settings dictionary pointing at the test snapshot directory"""
    return {
        "snapshot": {
            "directory": str(snapshot_dir),
            "prefix": None,
            "output_suffix": "-vlc-print-out",
        },
        "printing": {"enabled": True},
    }


@pytest.fixture(scope="function")
def client(api_config):
    """
    Create a test client with properly initialized app state.
    Each test gets a fresh client to avoid state contamination.
    """
    from core.print_dispatcher import PrintDispatcher
    from core.snapshot_store import SnapshotStore
    from main import app

    app.state.snapshot_store = SnapshotStore()
    app.state.print_dispatcher = PrintDispatcher(platform="linux")
    app.state.config = api_config

    # No context manager: lifespan would overwrite the state set above
    yield TestClient(app, raise_server_exceptions=False)
