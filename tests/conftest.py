"""Shared fixtures for the live class tests."""
import pytest
from fastapi.testclient import TestClient

from lectern.main import app
from lectern.runtime.hub import LiveClassHub


@pytest.fixture
def hub():
    """A fresh hub with no directory (any live class id is accepted)."""
    return LiveClassHub()


@pytest.fixture
def client():
    """TestClient with the lifespan running, so app.state.hub exists."""
    with TestClient(app) as test_client:
        yield test_client
