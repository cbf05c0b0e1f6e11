"""
app/main.py

"""


from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging
from app.core.config import settings
from app.core.database import Database
from app.api.v1 import api_router



# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: a store that can't be reached stops the process here
    database = Database(settings.MONGODB_URL, settings.DATABASE_NAME, settings.VIDEOS_COLLECTION)
    await database.connect()
    app.state.database = database
    yield
    # Shutdown
    await database.close()

# Create FastAPI app.
app = FastAPI(
    title=settings.APP_NAME,
    lifespan=lifespan,
    debug=settings.DEBUG
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix="/api/v1")

@app.get("/")
async def root():
    return {"message": "Welcome to Simple Video API"}

@app.get("/health")
async def health_check():
    return {"status": "healthy"}
