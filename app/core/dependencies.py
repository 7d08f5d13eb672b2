"""
FastAPI dependencies for dependency injection
"""
from typing import AsyncIterator
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.core.database import open_database


async def get_db() -> AsyncIterator[AsyncIOMotorDatabase]:
    """Dependency yielding a database handle whose client lives for one request"""
    async with open_database() as database:
        yield database
