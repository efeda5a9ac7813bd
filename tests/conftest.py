"""
Shared pytest fixtures.

The application is pointed at an in-memory SQLite database before it is
imported; every test starts from freshly created tables.
"""
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key"

import pytest
from fastapi.testclient import TestClient

from app.database import Base, SessionLocal, engine
from app.main import app


@pytest.fixture(autouse=True)
def fresh_database():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


# =============================================================================
# API helpers
# =============================================================================

@pytest.fixture
def make_user(client):
    """Register a user; returns (user payload, auth headers)."""
    def _make_user(username="alice"):
        response = client.post("/api/auth/register", json={
            "username": username,
            "email": f"{username}@example.com",
            "password": "password123"
        })
        assert response.status_code == 201, response.text
        data = response.json()["data"]
        return data["user"], {"Authorization": f"Bearer {data['token']}"}
    return _make_user


@pytest.fixture
def make_channel(client):
    def _make_channel(headers, channelName="Tech", **extra):
        response = client.post("/api/channels/", json={"channelName": channelName, **extra}, headers=headers)
        assert response.status_code == 201, response.text
        return response.json()["data"]
    return _make_channel


@pytest.fixture
def make_video(client):
    def _make_video(headers, channel_id, title="Intro to FastAPI", **extra):
        body = {
            "title": title,
            "videoUrl": "https://cdn.example.com/v.mp4",
            "category": "Technology",
            "channelId": channel_id,
            **extra
        }
        response = client.post("/api/videos/", json=body, headers=headers)
        assert response.status_code == 201, response.text
        return response.json()["data"]
    return _make_video


def get_me(client, headers):
    response = client.get("/api/auth/me", headers=headers)
    assert response.status_code == 200, response.text
    return response.json()["data"]
