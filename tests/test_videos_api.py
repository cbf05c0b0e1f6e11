from unittest.mock import MagicMock

import pytest
from bson import ObjectId
from httpx import AsyncClient
from pymongo.errors import ServerSelectionTimeoutError

from app.api.deps import get_video_store
from app.main import app
from app.services.video_store import VideoStore
from tests.conftest import make_video

BASE = "/api/v1/videos"


async def create(client: AsyncClient, **overrides) -> dict:
    response = await client.post(BASE, json=make_video(**overrides))
    assert response.status_code == 201
    return response.json()["data"]


class TestCrud:

    async def test_create(self, client: AsyncClient) -> None:
        response = await client.post(BASE, json=make_video())

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert ObjectId.is_valid(body["data"]["_id"])
        assert body["data"]["title"] == "First video"
        assert body["data"]["disabled"] is False
        assert "date_added" in body["data"]

    async def test_create_missing_fields(self, client: AsyncClient) -> None:
        response = await client.post(BASE, json={"title": "only a title", "tags": []})

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert len(body["error"]) == 3

    async def test_create_with_invalid_json(self, client: AsyncClient) -> None:
        response = await client.post(BASE, content=b"{not json", headers={"content-type": "application/json"})

        assert response.status_code == 400
        assert response.json()["success"] is False

    async def test_collection_path_with_trailing_slash(self, client: AsyncClient) -> None:
        created = await client.post(f"{BASE}/", json=make_video())
        listed = await client.get(f"{BASE}/")

        assert created.status_code == 201
        assert listed.status_code == 200
        assert listed.json()["data"] == [created.json()["data"]]

    async def test_created_date_added_matches_later_reads(self, client: AsyncClient) -> None:
        created = await create(client)

        listed = (await client.get(BASE)).json()["data"]

        assert listed[0]["_id"] == created["_id"]
        assert listed[0]["date_added"] == created["date_added"]

    async def test_get_all(self, client: AsyncClient, seeded) -> None:
        response = await client.get(BASE)

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["resultsCount"] == 5
        assert [video["title"] for video in body["data"]] == ["old", "hidden", "new", "other", "legacy"]

    async def test_round_trip(self, client: AsyncClient, store: VideoStore) -> None:
        created = await create(client)

        response = await client.post(f"{BASE}/{created['_id']}", json={"title": "Renamed", "tags": ["x", "y"]})

        assert response.status_code == 200
        assert response.json()["data"]["title"] == "Renamed"
        stored = await store.find_by_id(created["_id"])
        assert stored["title"] == "Renamed"
        assert stored["tags"] == ["x", "y"]
        assert stored["url"] == created["url"]
        assert stored["thumbnail"] == created["thumbnail"]
        assert stored["disabled"] is False

    @pytest.mark.parametrize("payload", [{"title": "x"}, {}, {"disabled": "not-a-bool"}])
    async def test_update_missing_video(self, client: AsyncClient, payload) -> None:
        response = await client.post(f"{BASE}/{ObjectId()}", json=payload)

        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Video not found."}

    async def test_update_malformed_id(self, client: AsyncClient) -> None:
        response = await client.post(f"{BASE}/12345", json={"title": "x"})
        assert response.status_code == 404

    async def test_delete_twice(self, client: AsyncClient) -> None:
        created = await create(client)

        first = await client.delete(f"{BASE}/{created['_id']}")
        second = await client.delete(f"{BASE}/{created['_id']}")

        assert first.status_code == 200
        assert first.json() == {"success": True, "data": {}}
        assert second.status_code == 404
        assert second.json()["error"] == "Video not found."


class TestQueryEndpoints:

    async def test_query_videos(self, client: AsyncClient, seeded) -> None:
        body = (await client.get(f"{BASE}/queryVideos")).json()

        assert body["resultsCount"] == 4
        assert [video["title"] for video in body["data"]] == ["new", "other", "old", "legacy"]
        assert all(video.get("disabled") is not True for video in body["data"])

    async def test_query_by_tags(self, client: AsyncClient, seeded) -> None:
        body = (await client.get(f"{BASE}/queryByTags", params={"tags": "a,b"})).json()
        assert sorted(video["title"] for video in body["data"]) == ["legacy", "new", "old"]

    async def test_query_thumbnails(self, client: AsyncClient, seeded) -> None:
        body = (await client.get(f"{BASE}/queryThumbnails")).json()

        assert body["resultsCount"] == 4
        assert {"thumbnail": "new.jpg"} in body["data"]
        assert all(set(item) == {"thumbnail"} for item in body["data"])

    async def test_query_disabled(self, client: AsyncClient, seeded) -> None:
        response = await client.get(f"{BASE}/queryDisabled")

        assert response.status_code == 200
        assert response.json() == {"success": True, "resultsCount": 2}


class TestFilterEndpoints:

    async def test_filter_videos(self, client: AsyncClient, seeded) -> None:
        body = (await client.get(f"{BASE}/filterVideos")).json()

        assert body["resultsCount"] == 4
        assert [video["title"] for video in body["data"]] == ["old", "new", "other", "legacy"]

    async def test_filter_by_tags(self, client: AsyncClient, seeded) -> None:
        body = (await client.get(f"{BASE}/filterByTags", params={"tags": "a,b"})).json()
        assert [video["title"] for video in body["data"]] == ["old", "new", "legacy"]

    async def test_filter_by_tags_without_parameter(self, client: AsyncClient, seeded) -> None:
        body = (await client.get(f"{BASE}/filterByTags")).json()
        assert body == {"success": True, "resultsCount": 0, "data": []}

    async def test_filter_thumbnails(self, client: AsyncClient, seeded) -> None:
        body = (await client.get(f"{BASE}/filterThumbnails")).json()

        assert len(body["data"]) == 4
        assert body["resultsCount"] == 5

    async def test_filter_disabled(self, client: AsyncClient, seeded) -> None:
        response = await client.get(f"{BASE}/filterDisabled")
        assert response.json() == {"success": True, "resultsCount": 1}


class TestServerErrors:

    @pytest.fixture
    def broken_store(self):
        collection = MagicMock()
        collection.find.side_effect = ServerSelectionTimeoutError("mongo.internal:27017 refused")
        collection.count_documents.side_effect = ServerSelectionTimeoutError("mongo.internal:27017 refused")
        app.dependency_overrides[get_video_store] = lambda: VideoStore(collection)
        yield
        app.dependency_overrides.pop(get_video_store, None)

    @pytest.mark.parametrize("path", [
        "", "/queryVideos", "/queryByTags?tags=a", "/queryThumbnails", "/queryDisabled",
        "/filterVideos", "/filterByTags?tags=a", "/filterThumbnails", "/filterDisabled",
    ])
    async def test_store_failure_is_generic(self, client: AsyncClient, broken_store, path: str) -> None:
        response = await client.get(f"{BASE}{path}")

        assert response.status_code == 500
        assert response.json() == {"success": False, "error": "Server Error"}


class TestApp:

    async def test_root(self, client: AsyncClient) -> None:
        response = await client.get("/")
        assert response.json() == {"message": "Welcome to Simple Video API"}

    async def test_health(self, client: AsyncClient) -> None:
        response = await client.get("/health")
        assert response.json() == {"status": "healthy"}
