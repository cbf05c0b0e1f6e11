# Connectivity check: python check_connection.py

import asyncio
from motor.motor_asyncio import AsyncIOMotorClient
from dotenv import load_dotenv

# Load environment variables before the settings are read
load_dotenv()

from app.core.config import settings

async def check_connection():
    print("=== Settings ===")
    print(f"MONGODB_URL: '{settings.MONGODB_URL}'")
    print(f"DATABASE_NAME: '{settings.DATABASE_NAME}'")
    print(f"VIDEOS_COLLECTION: '{settings.VIDEOS_COLLECTION}'")
    print("=" * 30)
    
    client = AsyncIOMotorClient(settings.MONGODB_URL, serverSelectionTimeoutMS=5000)
    try:
        print(f"\nConnecting to: {settings.MONGODB_URL}")
        
        await client.admin.command("ping")
        print("\n✅ Connection successful!")
        
        videos = client[settings.DATABASE_NAME][settings.VIDEOS_COLLECTION]
        total = await videos.count_documents({})
        disabled = await videos.count_documents({"disabled": True})
        missing_flag = await videos.count_documents({"disabled": {"$exists": False}})
        print(f"\nVideos: {total} ({disabled} disabled, {missing_flag} without a disabled flag)")
        
    except Exception as e:
        print(f"\n❌ Connection failed: {e}")
        print(f"Error type: {type(e)}")
        raise SystemExit(1)
    finally:
        client.close()

if __name__ == "__main__":
    asyncio.run(check_connection())
