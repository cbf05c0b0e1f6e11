"""
API v1 routers

app/api/v1/_init_.py
"""
from fastapi import APIRouter

# Create the main API router
api_router = APIRouter()

# Import individual routers
from app.api.v1.videos import router as videos_router



# Include all routers
api_router.include_router(videos_router, prefix="/videos", tags=["videos"])
