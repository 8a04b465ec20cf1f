# tests/test_api/conftest.py
import pytest
from fastapi.testclient import TestClient

from api.main import create_app
from core.catalog import CatalogStore


@pytest.fixture
def client():
    """Client for an app serving an empty catalog"""
    return TestClient(create_app(CatalogStore(), sample_data=False))


@pytest.fixture
def sample_client():
    """Client for an app serving the sample catalog"""
    return TestClient(create_app(CatalogStore(), sample_data=True))
