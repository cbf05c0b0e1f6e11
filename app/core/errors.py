"""

app/core/errors.py

"""


from typing import List


class VideoAPIError(Exception):
    """Base class for errors raised by the video services"""


class ValidationError(VideoAPIError):
    """One or more fields of a video payload are missing or invalid"""

    def __init__(self, messages: List[str]):
        super().__init__("; ".join(messages))
        self.messages = messages


class NotFoundError(VideoAPIError):
    """No video matches the requested id"""

    def __init__(self, video_id: str):
        super().__init__(f"Video {video_id} not found")
        self.video_id = video_id


class StoreError(VideoAPIError):
    """The document store failed to carry out an operation"""
