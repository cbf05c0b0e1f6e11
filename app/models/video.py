"""
app/models/video.py

"""


from datetime import datetime, timezone
from typing import Optional, List, Any, Annotated
from pydantic import BaseModel, Field, field_validator
from app.models.base import BaseDocument, PyObjectId, stringify_object_id

Tag = Annotated[str, Field(min_length=1)]

def utc_now() -> datetime:
    # MongoDB keeps milliseconds
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)

class VideoCreate(BaseModel):
    """Fields accepted when a video is created"""
    url: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    tags: List[Tag] = Field(default_factory=list)
    thumbnail: str = Field(..., min_length=1)
    date_added: datetime = Field(default_factory=utc_now)
    disabled: bool

class VideoUpdate(BaseModel):
    """Partial update. Values are type-checked only; nothing is required."""
    url: Optional[str] = None
    title: Optional[str] = None
    tags: Optional[List[str]] = None
    thumbnail: Optional[str] = None
    date_added: Optional[datetime] = None
    disabled: Optional[bool] = None

class VideoResponse(BaseDocument):
    """Video as returned to clients.

    Every field is optional so projected documents (thumbnail only) and
    documents written before ``disabled`` was required still serialize.
    Dump with ``exclude_unset=True`` to keep the stored shape.
    """
    id: Optional[PyObjectId] = Field(default=None, alias="_id")
    url: Optional[str] = None
    title: Optional[str] = None
    tags: Optional[List[str]] = None
    thumbnail: Optional[str] = None
    date_added: Optional[datetime] = None
    disabled: Optional[bool] = None

    @field_validator("id", mode="before")
    @classmethod
    def convert_object_id(cls, value: Any) -> Any:
        return stringify_object_id(value)

    def to_json(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)
