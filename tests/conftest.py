# tests/conftest.py
from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from product_api.api.dependencies import reset_repository
from product_api.core.config import Settings, get_settings
from product_api.main import app

TEST_API_KEY = "test-api-key"


@pytest.fixture
def test_settings() -> Settings:
    return Settings(api_key=TEST_API_KEY, seed_sample_data=True)


@pytest.fixture
def client(test_settings: Settings) -> Generator[TestClient, None, None]:
    # Fresh seeded store for every test; the repository is a module-level singleton.
    reset_repository()
    app.dependency_overrides[get_settings] = lambda: test_settings
    try:
        with TestClient(app) as c:
            yield c
    finally:
        app.dependency_overrides.clear()
        reset_repository()


@pytest.fixture
def auth_headers() -> dict:
    return {"X-API-Key": TEST_API_KEY}


@pytest.fixture
def valid_payload() -> dict:
    return {
        "name": "Blender",
        "description": "1000W countertop blender",
        "price": 89.99,
        "category": "kitchen",
        "inStock": True,
    }
