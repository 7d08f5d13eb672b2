#!/usr/bin/env python3
"""
Database indexes setup script for the Real Estate Manager API
"""

import sys
import asyncio
from pathlib import Path

# Add project root to path
project_dir = Path(__file__).parent.parent
sys.path.insert(0, str(project_dir))

from app.core.database import open_database


async def setup_indexes():
    """Create the id lookup indexes every route filters on"""
    print("Setting up database indexes...")

    try:
        async with open_database() as db:
            # Duplicate ids are rejected by the API, not by the index
            print("Creating properties collection indexes...")
            await db.properties.create_index("id")
            await db.properties.create_index("city")
            await db.properties.create_index("availability")

            print("Creating appState collection indexes...")
            await db.appState.create_index("id")

            print("Database indexes created successfully!")

    except Exception as e:
        print(f"Error setting up indexes: {e}")
        raise


if __name__ == "__main__":
    asyncio.run(setup_indexes())
