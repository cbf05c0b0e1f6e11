"""
Read-side listings for the videos endpoints

app/services/video_lister.py

Two strategies answer the same four listings:

* ``QueryVideoLister`` hands the predicate, sort and projection to MongoDB.
* ``FilterVideoLister`` loads the whole collection and filters in Python.
  Every call reads every document, and the reported counts can disagree
  with concurrent writers. It is kept as its own set of routes.

A document without ``disabled`` is active for both strategies and is also
counted by ``QueryVideoLister.count_disabled`` (``$ne: False``).
"""


from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, List, Optional, Set
from app.services.video_store import VideoStore

NOT_DISABLED = {"disabled": {"$ne": True}}
NOT_ENABLED = {"disabled": {"$ne": False}}

@dataclass
class VideoListing:
    results_count: int
    data: Optional[List[dict]] = None

def parse_tags(raw: Optional[str]) -> List[str]:
    """Split a comma separated ``tags`` query parameter"""
    if not raw:
        return []
    return [tag.strip() for tag in raw.split(",") if tag.strip()]

class VideoLister(ABC):
    """The listings served by the read endpoints"""

    def __init__(self, store: VideoStore):
        self.store = store

    @abstractmethod
    async def list_active(self) -> VideoListing:
        """Videos that are not disabled, newest first where supported"""

    @abstractmethod
    async def list_by_tags(self, tags: Iterable[str]) -> VideoListing:
        """Active videos carrying at least one of ``tags``"""

    @abstractmethod
    async def list_thumbnails(self) -> VideoListing:
        """``{thumbnail}`` of every active video"""

    @abstractmethod
    async def count_disabled(self) -> VideoListing:
        """Number of disabled videos, without the videos themselves"""

class QueryVideoLister(VideoLister):

    async def list_active(self) -> VideoListing:
        videos = await self.store.find_all(NOT_DISABLED, sort=[("date_added", -1)])
        return VideoListing(len(videos), videos)

    async def list_by_tags(self, tags: Iterable[str]) -> VideoListing:
        query = {**NOT_DISABLED, "tags": {"$in": list(tags)}}
        videos = await self.store.find_all(query)
        return VideoListing(len(videos), videos)

    async def list_thumbnails(self) -> VideoListing:
        thumbnails = await self.store.find_all(NOT_DISABLED, projection={"thumbnail": 1, "_id": 0})
        return VideoListing(len(thumbnails), thumbnails)

    async def count_disabled(self) -> VideoListing:
        return VideoListing(await self.store.count(NOT_ENABLED))

def _newest_first_key(video: dict):
    # Videos without date_added go last
    date_added = video.get("date_added")
    return (date_added is not None, date_added or 0)

class FilterVideoLister(VideoLister):

    def __init__(self, store: VideoStore, sort_newest_first: bool = False):
        super().__init__(store)
        self.sort_newest_first = sort_newest_first

    async def list_active(self) -> VideoListing:
        videos = await self.store.find_all()
        active = [video for video in videos if video.get("disabled") is not True]
        # /filterVideos has always answered in storage order
        if self.sort_newest_first:
            active.sort(key=_newest_first_key, reverse=True)
        return VideoListing(len(active), active)

    async def list_by_tags(self, tags: Iterable[str]) -> VideoListing:
        wanted: Set[str] = set(tags)
        videos = await self.store.find_all()
        active = [video for video in videos if not video.get("disabled")]
        matching = [
            video for video in active
            if any(tag in wanted for tag in video.get("tags") or [])
        ]
        return VideoListing(len(matching), matching)

    async def list_thumbnails(self) -> VideoListing:
        videos = await self.store.find_all()
        thumbnails = [
            {"thumbnail": video.get("thumbnail")}
            for video in videos if not video.get("disabled")
        ]
        # Count is the size of the whole fetch, not of the thumbnails returned
        return VideoListing(len(videos), thumbnails)

    async def count_disabled(self) -> VideoListing:
        videos = await self.store.find_all()
        return VideoListing(len([video for video in videos if video.get("disabled")]))
