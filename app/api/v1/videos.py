"""
Video CRUD, query and filter endpoints

app/api/v1/videos.py

"""
from typing import Optional
from fastapi import APIRouter, Depends, Query, Request, status
from app.api.deps import get_video_store, get_query_lister, get_filter_lister
from app.api import responses
from app.core.errors import NotFoundError, ValidationError
from app.services.video_store import VideoStore
from app.services.video_lister import FilterVideoLister, QueryVideoLister, parse_tags
import logging

logger = logging.getLogger(__name__)

router = APIRouter()

async def read_body(request: Request):
    """Parsed JSON body, or None when the body isn't JSON"""
    try:
        return await request.json()
    except ValueError:
        return None

# ----------------------------------------------------------------
# CRUD endpoints
# ----------------------------------------------------------------

@router.get("/")
@router.get("", include_in_schema=False)
async def get_videos(store: VideoStore = Depends(get_video_store)):
    """Get all videos"""
    try:
        videos = await store.find_all()
        return responses.success(responses.serialize_videos(videos), results_count=len(videos))
    except Exception as e:
        logger.error(f"Error fetching videos: {e}")
        return responses.server_error()

@router.post("/", status_code=status.HTTP_201_CREATED)
@router.post("", include_in_schema=False)
async def add_video(request: Request, store: VideoStore = Depends(get_video_store)):
    """Add a video"""
    try:
        video = await store.create(await read_body(request))
        return responses.success(responses.serialize_video(video), status_code=status.HTTP_201_CREATED)
    except ValidationError as e:
        return responses.failure(e.messages, status.HTTP_400_BAD_REQUEST)
    except Exception as e:
        logger.error(f"Error creating video: {e}")
        return responses.server_error()

@router.post("/{video_id}")
async def update_video(video_id: str, request: Request, store: VideoStore = Depends(get_video_store)):
    """Update a video with the fields present in the body"""
    try:
        video = await store.update_by_id(video_id, await read_body(request))
        return responses.success(responses.serialize_video(video))
    except NotFoundError:
        return responses.not_found()
    except ValidationError as e:
        return responses.failure(e.messages, status.HTTP_400_BAD_REQUEST)
    except Exception as e:
        logger.error(f"Error updating video {video_id}: {e}")
        return responses.server_error()

@router.delete("/{video_id}")
async def delete_video(video_id: str, store: VideoStore = Depends(get_video_store)):
    """Delete a video"""
    try:
        await store.delete_by_id(video_id)
        return responses.success({})
    except NotFoundError:
        return responses.not_found()
    except Exception as e:
        logger.error(f"Error deleting video {video_id}: {e}")
        return responses.server_error()

# ----------------------------------------------------------------
# Query endpoints: filtering done by MongoDB
# ----------------------------------------------------------------

@router.get("/queryVideos")
async def query_videos(lister: QueryVideoLister = Depends(get_query_lister)):
    """Active videos, newest first"""
    try:
        return responses.listing(await lister.list_active())
    except Exception as e:
        logger.error(f"Error querying videos: {e}")
        return responses.server_error()

@router.get("/queryByTags")
async def query_by_tags(
    tags: Optional[str] = Query(None, description="Comma separated tags"),
    lister: QueryVideoLister = Depends(get_query_lister),
):
    """Active videos with at least one of the given tags"""
    try:
        return responses.listing(await lister.list_by_tags(parse_tags(tags)))
    except Exception as e:
        logger.error(f"Error querying videos by tags: {e}")
        return responses.server_error()

@router.get("/queryThumbnails")
async def query_thumbnails(lister: QueryVideoLister = Depends(get_query_lister)):
    try:
        return responses.listing(await lister.list_thumbnails())
    except Exception as e:
        logger.error(f"Error querying thumbnails: {e}")
        return responses.server_error()

@router.get("/queryDisabled")
async def query_disabled_videos(lister: QueryVideoLister = Depends(get_query_lister)):
    try:
        return responses.listing(await lister.count_disabled())
    except Exception as e:
        logger.error(f"Error counting disabled videos: {e}")
        return responses.server_error()

# ----------------------------------------------------------------
# Filter endpoints: everything fetched, filtered in the app
# ----------------------------------------------------------------

@router.get("/filterVideos")
async def filter_videos(lister: FilterVideoLister = Depends(get_filter_lister)):
    """Active videos in storage order"""
    try:
        return responses.listing(await lister.list_active())
    except Exception as e:
        logger.error(f"Error filtering videos: {e}")
        return responses.server_error()

@router.get("/filterByTags")
async def filter_by_tags(
    tags: Optional[str] = Query(None, description="Comma separated tags"),
    lister: FilterVideoLister = Depends(get_filter_lister),
):
    try:
        return responses.listing(await lister.list_by_tags(parse_tags(tags)))
    except Exception as e:
        logger.error(f"Error filtering videos by tags: {e}")
        return responses.server_error()

@router.get("/filterThumbnails")
async def filter_thumbnails(lister: FilterVideoLister = Depends(get_filter_lister)):
    """Thumbnails of active videos; resultsCount is the total fetched"""
    try:
        return responses.listing(await lister.list_thumbnails())
    except Exception as e:
        logger.error(f"Error filtering thumbnails: {e}")
        return responses.server_error()

@router.get("/filterDisabled")
async def filter_disabled_videos(lister: FilterVideoLister = Depends(get_filter_lister)):
    try:
        return responses.listing(await lister.count_disabled())
    except Exception as e:
        logger.error(f"Error filtering disabled videos: {e}")
        return responses.server_error()
