"""

app/core/config.py

"""


from pydantic_settings import BaseSettings
from typing import List

class Settings(BaseSettings):
    # App
    APP_NAME: str = "Simple Video API"
    DEBUG: bool = False
    
    # Database
    MONGODB_URL: str = "mongodb://localhost:27017"
    DATABASE_NAME: str = "simple_video_api"
    VIDEOS_COLLECTION: str = "videos"
    
    # CORS
    CORS_ORIGINS: List[str] = ["*"]
    
    # /filterVideos keeps storage order unless this is switched on
    FILTER_SORT_NEWEST_FIRST: bool = False
    
    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()
