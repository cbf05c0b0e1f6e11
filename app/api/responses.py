"""
JSON envelopes shared by the video endpoints

app/api/responses.py

"""
from typing import Any, Iterable, List, Optional, Union
from fastapi import status
from fastapi.responses import JSONResponse
from app.models.video import VideoResponse
from app.services.video_lister import VideoListing

SERVER_ERROR = "Server Error"
VIDEO_NOT_FOUND = "Video not found."

def serialize_video(video: dict) -> dict:
    return VideoResponse.model_validate(video).to_json()

def serialize_videos(videos: Iterable[dict]) -> List[dict]:
    return [serialize_video(video) for video in videos]

def success(data: Any = None, status_code: int = status.HTTP_200_OK, results_count: Optional[int] = None) -> JSONResponse:
    content = {"success": True}
    if results_count is not None:
        content["resultsCount"] = results_count
    if data is not None:
        content["data"] = data
    return JSONResponse(status_code=status_code, content=content)

def listing(result: VideoListing) -> JSONResponse:
    """200 with the count, plus the records when the listing carries them"""
    data = serialize_videos(result.data) if result.data is not None else None
    return success(data, results_count=result.results_count)

def failure(error: Union[str, List[str]], status_code: int) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": error})

def not_found() -> JSONResponse:
    return failure(VIDEO_NOT_FOUND, status.HTTP_404_NOT_FOUND)

def server_error() -> JSONResponse:
    return failure(SERVER_ERROR, status.HTTP_500_INTERNAL_SERVER_ERROR)
