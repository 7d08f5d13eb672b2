#!/usr/bin/env python3
"""
Database seeding script for the Real Estate Manager API
"""
import sys
import asyncio
import logging
from pathlib import Path

project_dir = Path(__file__).parent.parent
sys.path.insert(0, str(project_dir))

from app.core.config import settings
from app.core.database import open_database


logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


SAMPLE_PROPERTIES = [
    {
        "id": "1",
        "address": "123 Maple Street",
        "city": "Springfield",
        "state": "IL",
        "zip": 62704,
        "propertyValue": 250000,
        "monthlyRentalIncome": 1800,
        "squareFeet": 1600,
        "bedrooms": 3,
        "bathrooms": 2,
        "availability": "Available",
        "image": "https://example.com/images/maple-street.jpg",
        "amenities": ["Garage", "Backyard", "Central Air"],
        "notes": "Recently renovated kitchen."
    },
    {
        "id": "2",
        "address": "48 Harbor View Drive",
        "city": "Portland",
        "state": "ME",
        "zip": 4101,
        "propertyValue": 410000,
        "monthlyRentalIncome": 2600,
        "squareFeet": 2100,
        "bedrooms": 4,
        "bathrooms": 3,
        "availability": "Not Available",
        "image": "https://example.com/images/harbor-view.jpg",
        "amenities": ["Ocean View", "Fireplace"],
        "notes": "Lease ends in August."
    },
]

SAMPLE_FAQS = [
    {
        "question": "How do I add a new property?",
        "answer": "Open the Properties page and use the Add Property form."
    },
    {
        "question": "Can I switch between list and grid views?",
        "answer": "Yes, use the View Properties toggle at the top of the page."
    },
]

DEFAULT_APP_STATE = {"id": "1", "viewMode": "list"}


async def seed_database(clear: bool = False):
    """Seed the database with sample data"""
    async with open_database() as db:
        logger.info(f"Connected to database: {settings.database_name}")

        if clear:
            await db.properties.delete_many({})
            await db.support.delete_many({})
            await db.appState.delete_many({})
            logger.info("Cleared existing data")

        inserted = 0
        for property_doc in SAMPLE_PROPERTIES:
            if not await db.properties.find_one({"id": property_doc["id"]}):
                await db.properties.insert_one(dict(property_doc))
                inserted += 1
        logger.info(f"Inserted {inserted} sample properties")

        if await db.support.count_documents({}) == 0:
            result = await db.support.insert_many([dict(faq) for faq in SAMPLE_FAQS])
            logger.info(f"Inserted {len(result.inserted_ids)} FAQs")

        if not await db.appState.find_one({"id": DEFAULT_APP_STATE["id"]}):
            await db.appState.insert_one(dict(DEFAULT_APP_STATE))
            logger.info("Inserted default View Properties toggle state")

        logger.info("Database seeding completed successfully!")


async def main():
    """Main entry point"""
    logger.info("Starting database seeding...")
    await seed_database(clear="--clear" in sys.argv)


if __name__ == "__main__":
    asyncio.run(main())
