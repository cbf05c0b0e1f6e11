"""

app/core/database.py

"""


from typing import Optional
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from fastapi import Request
import logging

logger = logging.getLogger(__name__)

class Database:
    """Owns the Motor client for the lifetime of the application."""

    def __init__(self, url: str, name: str, videos_collection: str = "videos"):
        self.url = url
        self.name = name
        self.videos_collection = videos_collection
        self.client: Optional[AsyncIOMotorClient] = None
        self.db: Optional[AsyncIOMotorDatabase] = None

    async def connect(self):
        """Create database connection. Raises if the server can't be reached."""
        try:
            self.client = AsyncIOMotorClient(self.url, tz_aware=True)
            self.db = self.client[self.name]
            
            # Fail fast instead of serving with a broken store
            await self.db.command("ping")
            
            await create_indexes(self.db, self.videos_collection)
            
            logger.info("Connected to MongoDB")
        except Exception as e:
            logger.error(f"Could not connect to MongoDB: {e}")
            await self.close()
            raise

    async def close(self):
        """Close database connection."""
        if self.client:
            self.client.close()
            self.client = None
            self.db = None
            logger.info("Disconnected from MongoDB")

async def create_indexes(db, collection_name: str):
    """Create database indexes for the listing queries"""
    try:
        videos = db[collection_name]
        await videos.create_index([("date_added", -1)])
        await videos.create_index([("tags", 1)])
        await videos.create_index([("disabled", 1)])
        
        logger.info("Database indexes created")
    except Exception as e:
        logger.error(f"Error creating indexes: {e}")

def get_database(request: Request) -> AsyncIOMotorDatabase:
    """Get the database handle opened at startup"""
    return request.app.state.database.db
