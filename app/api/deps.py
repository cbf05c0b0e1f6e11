#app/api/deps.py

from fastapi import Depends
from motor.motor_asyncio import AsyncIOMotorDatabase
from app.core.config import settings
from app.core.database import get_database
from app.services.video_store import VideoStore
from app.services.video_lister import QueryVideoLister, FilterVideoLister

def get_video_store(db: AsyncIOMotorDatabase = Depends(get_database)) -> VideoStore:
    """Gateway over the videos collection of the injected database"""
    return VideoStore(db[settings.VIDEOS_COLLECTION])

def get_query_lister(store: VideoStore = Depends(get_video_store)) -> QueryVideoLister:
    return QueryVideoLister(store)

def get_filter_lister(store: VideoStore = Depends(get_video_store)) -> FilterVideoLister:
    return FilterVideoLister(store, sort_newest_first=settings.FILTER_SORT_NEWEST_FIRST)
