"""
Document services for the properties, support and app-state collections
"""
import logging
from typing import List, Optional, Dict, Any
from motor.motor_asyncio import AsyncIOMotorDatabase, AsyncIOMotorCollection
from bson import ObjectId


logger = logging.getLogger(__name__)


def serialize_document(value: Any) -> Any:
    """Render BSON values the JSON encoder does not know, ObjectId as hex string"""
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, dict):
        return {key: serialize_document(item) for key, item in value.items()}
    if isinstance(value, list):
        return [serialize_document(item) for item in value]
    return value


class DocumentService:
    """Pass-through operations on a single collection keyed by the ``id`` field"""

    def __init__(self, collection_name: str):
        self.collection_name = collection_name

    def collection(self, db: AsyncIOMotorDatabase) -> AsyncIOMotorCollection:
        return db[self.collection_name]

    async def list_documents(self, db: AsyncIOMotorDatabase) -> List[Dict[str, Any]]:
        """Return every document in the collection"""
        cursor = self.collection(db).find({})
        documents = await cursor.to_list(length=None)
        return [serialize_document(doc) for doc in documents]

    async def get_document(self, db: AsyncIOMotorDatabase, document_id: str) -> Optional[Dict[str, Any]]:
        """Find a document by its application id"""
        document = await self.collection(db).find_one({"id": document_id})
        if document is None:
            return None
        return serialize_document(document)

    async def create_document(self, db: AsyncIOMotorDatabase, data: Dict[str, Any]) -> bool:
        """
        Insert a document unless one with the same id already exists.

        Returns False on duplicate id. A body without an id collides with
        any stored document that has no id either.
        """
        collection = self.collection(db)

        existing = await collection.find_one({"id": data.get("id")})
        if existing:
            logger.info(f"Duplicate id {data.get('id')!r} rejected for {self.collection_name}")
            return False

        result = await collection.insert_one(data)
        logger.debug(f"Inserted {result.inserted_id} into {self.collection_name}")
        return True

    async def update_document(self, db: AsyncIOMotorDatabase, document_id: str, data: Dict[str, Any]) -> bool:
        """Apply ``$set`` with the given fields; False when no document matched"""
        result = await self.collection(db).update_one(
            {"id": document_id},
            {"$set": data}
        )
        logger.debug(
            f"MongoDB update result for {self.collection_name}/{document_id}: "
            f"matched={result.matched_count} modified={result.modified_count}"
        )
        return result.matched_count == 1

    async def delete_document(self, db: AsyncIOMotorDatabase, document_id: str) -> bool:
        """Delete a document by id; False when nothing was deleted"""
        result = await self.collection(db).delete_one({"id": document_id})
        return result.deleted_count > 0


# Global service instances
property_service = DocumentService("properties")
support_service = DocumentService("support")
app_state_service = DocumentService("appState")
