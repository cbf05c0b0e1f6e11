from datetime import datetime
from typing import AsyncIterator

import pytest
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient

from app.core.database import get_database
from app.main import app
from app.services.video_store import VideoStore


@pytest.fixture
def mock_db():
    """In-memory Motor database; real Mongo predicates are evaluated."""
    return AsyncMongoMockClient()["simple_video_api_test"]


@pytest.fixture
def store(mock_db) -> VideoStore:
    return VideoStore(mock_db["videos"])


@pytest.fixture
async def client(mock_db) -> AsyncIterator[AsyncClient]:
    """HTTP client against the app with the database dependency swapped out."""
    app.dependency_overrides[get_database] = lambda: mock_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as http:
        yield http
    app.dependency_overrides.clear()


def make_video(**overrides) -> dict:
    video = {
        "url": "https://videos.example.com/watch/1",
        "title": "First video",
        "tags": ["music"],
        "thumbnail": "https://videos.example.com/thumbs/1.jpg",
        "disabled": False,
    }
    video.update(overrides)
    return video


@pytest.fixture
async def seeded(mock_db):
    """Mixed collection stored in a known order.

    ``legacy`` has no ``disabled`` field at all.
    """
    docs = {
        "old": make_video(title="old", tags=["a"], thumbnail="old.jpg", date_added=datetime(2021, 1, 1)),
        "hidden": make_video(title="hidden", tags=["a", "b"], thumbnail="hidden.jpg", disabled=True, date_added=datetime(2023, 1, 1)),
        "new": make_video(title="new", tags=["a", "c"], thumbnail="new.jpg", date_added=datetime(2022, 6, 1)),
        "other": make_video(title="other", tags=["c"], thumbnail="other.jpg", date_added=datetime(2021, 6, 1)),
    }
    legacy = make_video(title="legacy", tags=["b"], thumbnail="legacy.jpg", date_added=datetime(2020, 1, 1))
    del legacy["disabled"]
    docs["legacy"] = legacy
    for doc in docs.values():
        await mock_db["videos"].insert_one(doc)
    return docs
