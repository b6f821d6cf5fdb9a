import os

# Must be set before golfcartly.core.config is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "test"

import pytest
from fastapi.testclient import TestClient

import golfcartly.models  # noqa: F401
from golfcartly.core.database import Base, SessionLocal, engine
from golfcartly.main import app


@pytest.fixture(autouse=True)
def tables():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def other_client():
    """A second browser with its own session cookie."""
    return TestClient(app)


@pytest.fixture
def brand(client):
    response = client.post("/api/brands", json={"name": "Club Car", "description": "Precedent and Onward lines"})
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def part(client):
    response = client.post(
        "/api/parts",
        json={
            "partNumber": "BAT-12V-100",
            "name": "Deep Cycle Battery",
            "category": "Batteries",
            "price": "189.99",
            "compatibleBrands": ["Club Car", "E-Z-GO"],
        },
    )
    assert response.status_code == 201
    return response.json()
