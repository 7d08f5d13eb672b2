from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from contextlib import asynccontextmanager
from app.core.config import settings
import logging
import asyncio
import time
from typing import AsyncIterator, Dict, Any

logger = logging.getLogger(__name__)

COLLECTIONS = ("properties", "support", "appState")


def build_client_kwargs() -> Dict[str, Any]:
    """Client options shared by every connection the API opens"""
    client_kwargs = {
        "serverSelectionTimeoutMS": settings.server_selection_timeout_ms,
        "connectTimeoutMS": 5000,
        "socketTimeoutMS": 30000,
        "retryWrites": True,
        "retryReads": True,
        "appname": "RealEstateManagerAPI",
    }

    if settings.mongo_uri.startswith('mongodb+srv://'):
        client_kwargs.update({
            "tls": True,
            "tlsAllowInvalidCertificates": False,
            "tlsAllowInvalidHostnames": False,
        })

    return client_kwargs


def create_client() -> AsyncIOMotorClient:
    """Create a new MongoDB client"""
    return AsyncIOMotorClient(settings.mongo_uri, **build_client_kwargs())


@asynccontextmanager
async def open_database() -> AsyncIterator[AsyncIOMotorDatabase]:
    """Open a client for a single unit of work and close it on exit"""
    client = create_client()
    logger.debug(f"Opened MongoDB client for database: {settings.database_name}")
    try:
        yield client[settings.database_name]
    finally:
        client.close()
        logger.debug("MongoDB client closed")


async def check_connection() -> bool:
    """Ping MongoDB once, used for startup diagnostics"""
    try:
        async with open_database() as database:
            await asyncio.wait_for(database.command('ping'), timeout=settings.server_selection_timeout_ms / 1000 + 1)
        logger.info(f"Connected to MongoDB: {settings.database_name}")
        return True
    except asyncio.TimeoutError:
        logger.error("MongoDB connection timeout")
        return False
    except Exception as e:
        logger.error(f"Failed to connect to MongoDB: {e}")
        return False


async def get_database_health(database: AsyncIOMotorDatabase) -> Dict[str, Any]:
    """Get database connection health status"""
    try:
        start_time = time.time()
        await database.command('ping')
        response_time = time.time() - start_time

        build_info = await database.command('buildInfo')

        counts = {}
        for name in COLLECTIONS:
            counts[name] = await database[name].count_documents({})

        return {
            "status": "healthy",
            "response_time_ms": round(response_time * 1000, 2),
            "mongodb_version": build_info.get('version', 'unknown'),
            "collections": counts,
        }

    except Exception as e:
        logger.error(f"Database health check failed: {e}")
        return {"status": "unhealthy", "error": str(e)}
