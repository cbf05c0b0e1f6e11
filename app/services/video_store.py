"""
Persistence gateway for the videos collection

app/services/video_store.py

"""


from typing import Any, Dict, List, Optional, Tuple
from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection
from pydantic import ValidationError as PydanticValidationError
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError
from app.core.errors import NotFoundError, StoreError, ValidationError
from app.models.video import VideoCreate, VideoUpdate
import logging

logger = logging.getLogger(__name__)

REQUIRED_ERROR_TYPES = {"missing", "string_too_short"}

def validation_messages(error: PydanticValidationError) -> List[str]:
    """One message per invalid field path, in the order pydantic reports them"""
    messages: Dict[str, str] = {}
    for err in error.errors():
        path = ".".join(str(part) for part in err["loc"])
        if path in messages:
            continue
        if err["type"] in REQUIRED_ERROR_TYPES:
            messages[path] = f"Path `{path}` is required."
        else:
            messages[path] = f"Invalid value for path `{path}`: {err['msg']}"
    return list(messages.values())

def _object_id(video_id: str) -> ObjectId:
    # Malformed ids can't match any document
    if not ObjectId.is_valid(video_id):
        raise NotFoundError(video_id)
    return ObjectId(video_id)

class VideoStore:
    """Create/find/update/delete against a Motor collection of videos."""

    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    async def create(self, fields: Any) -> dict:
        if not isinstance(fields, dict):
            raise ValidationError(["Request body must be a JSON object"])
        try:
            video = VideoCreate.model_validate(fields)
        except PydanticValidationError as e:
            raise ValidationError(validation_messages(e))

        video_doc = video.model_dump()
        try:
            result = await self.collection.insert_one(video_doc)
        except PyMongoError as e:
            raise StoreError(str(e)) from e

        logger.info(f"Created video {result.inserted_id}")
        # Answer with the stored form so later reads match
        try:
            stored = await self.collection.find_one({"_id": result.inserted_id})
        except PyMongoError as e:
            raise StoreError(str(e)) from e
        if not stored:
            video_doc["_id"] = result.inserted_id
            return video_doc
        return stored

    async def find_all(
        self,
        query: Optional[dict] = None,
        projection: Optional[dict] = None,
        sort: Optional[List[Tuple[str, int]]] = None,
    ) -> List[dict]:
        try:
            cursor = self.collection.find(query or {}, projection)
            if sort:
                cursor = cursor.sort(sort)
            return [video async for video in cursor]
        except PyMongoError as e:
            raise StoreError(str(e)) from e

    async def count(self, query: Optional[dict] = None) -> int:
        try:
            return await self.collection.count_documents(query or {})
        except PyMongoError as e:
            raise StoreError(str(e)) from e

    async def find_by_id(self, video_id: str) -> dict:
        oid = _object_id(video_id)
        try:
            video = await self.collection.find_one({"_id": oid})
        except PyMongoError as e:
            raise StoreError(str(e)) from e
        if not video:
            raise NotFoundError(video_id)
        return video

    async def update_by_id(self, video_id: str, fields: Any) -> dict:
        """Apply a partial update and return the document as it is afterwards.

        Only the fields present in ``fields`` are written; required-field
        checks from creation are not repeated.
        """
        oid = _object_id(video_id)
        try:
            update_data = self._update_fields(fields)
        except ValidationError:
            # An unknown id is reported as missing whatever the body holds
            await self.find_by_id(video_id)
            raise

        if not update_data:
            return await self.find_by_id(video_id)

        try:
            video = await self.collection.find_one_and_update(
                {"_id": oid},
                {"$set": update_data},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            raise StoreError(str(e)) from e
        if not video:
            raise NotFoundError(video_id)
        return video

    @staticmethod
    def _update_fields(fields: Any) -> dict:
        if not isinstance(fields, dict):
            raise ValidationError(["Request body must be a JSON object"])
        try:
            update = VideoUpdate.model_validate(fields)
        except PydanticValidationError as e:
            raise ValidationError(validation_messages(e))
        return update.model_dump(exclude_unset=True)

    async def delete_by_id(self, video_id: str) -> None:
        oid = _object_id(video_id)
        try:
            result = await self.collection.delete_one({"_id": oid})
        except PyMongoError as e:
            raise StoreError(str(e)) from e
        if result.deleted_count == 0:
            raise NotFoundError(video_id)
        logger.info(f"Deleted video {video_id}")
