# services/gateway/tests/conftest.py
"""
Shared test configuration and fixtures for gateway tests.
"""

import os
import sys
from pathlib import Path

import pytest


# Configure Python path for testing
def setup_python_path():
    """Set up Python path to allow imports from both service and shared libs."""
    project_root = Path(__file__).parent.parent.parent.parent.absolute()
    gateway_src = Path(__file__).parent.parent / "src"

    paths_to_add = [str(gateway_src), str(project_root)]
    for path in paths_to_add:
        if path not in sys.path:
            sys.path.insert(0, path)


# Set up paths immediately when module is imported
setup_python_path()


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Set up test environment variables."""
    os.environ["TESTING"] = "true"


@pytest.fixture
def store():
    """Fresh in-memory store with the sample catalog."""
    from gateway.stores.memory_store import InMemoryCatalogStore

    return InMemoryCatalogStore.with_sample_data()


@pytest.fixture
def catalog(store):
    from gateway.services.catalog_service import CatalogService

    return CatalogService(store, default_page_size=10, max_page_size=50)


@pytest.fixture
def client(catalog):
    """TestClient whose routes and GraphQL context use the fresh catalog."""
    from fastapi.testclient import TestClient

    from gateway.app import app
    from gateway.dependencies import get_catalog_service

    app.dependency_overrides[get_catalog_service] = lambda: catalog
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
