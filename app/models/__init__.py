"""

app/models/_init_.py

"""


from app.models.base import *
from app.models.video import *

__all__ = [
    # Base
    "PyObjectId",
    "BaseDocument",
    "stringify_object_id",
    
    # Video models
    "VideoCreate",
    "VideoUpdate",
    "VideoResponse",
]
