"""Test fixtures for API tests."""
import pytest
from fastapi.testclient import TestClient

from bakery.database import get_db
from bakery.main import app


@pytest.fixture
def client(engine, db):
    """Create a TestClient with overridden database dependency.

    Requires both engine (to ensure tables are created) and db (the session).
    """

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    # Clean up
    app.dependency_overrides.clear()
