"""Pytest configuration and fixtures

Provides an application built around a fixed ServiceState and a TestClient
for it.
"""

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Add project root to sys.path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from main import create_app
from models import ServiceState

TEST_PORT = 9099


@pytest.fixture
def service_state():
    return ServiceState(service_name="beacon-test", version="9.9.9", port=TEST_PORT)


@pytest.fixture
def app(service_state):
    return create_app(service_state)


@pytest.fixture
def client(app):
    return TestClient(app, follow_redirects=False)
