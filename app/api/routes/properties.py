"""
Properties API routes
"""
from typing import Any, Dict, List, Optional
from fastapi import APIRouter, HTTPException, status, Body, Depends
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.api.models import Property, MessageResponse, ErrorResponse
from app.api.services import property_service
from app.core.dependencies import get_db
from app.core.logging import get_logger

logger = get_logger(__name__)

router = APIRouter()

INTERNAL_ERROR = "Internal Server Error"


@router.get(
    "",
    response_model=List[Dict[str, Any]],
    status_code=status.HTTP_200_OK,
    summary="Get all properties",
    description="Retrieve all properties from the database.",
    responses={500: {"model": ErrorResponse, "description": "Internal Server Error."}}
)
async def list_properties(db: AsyncIOMotorDatabase = Depends(get_db)):
    try:
        properties = await property_service.list_documents(db)
        logger.info(f"Retrieved {len(properties)} properties")
        return properties

    except Exception as e:
        logger.error(f"Error listing properties: {e}", exc_info=True)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=INTERNAL_ERROR)


@router.get(
    "/{id}",
    response_model=Dict[str, Any],
    status_code=status.HTTP_200_OK,
    summary="Get a property by ID",
    description="Retrieve a property from the database by its ID.",
    responses={
        404: {"model": ErrorResponse, "description": "Property not found."},
        500: {"model": ErrorResponse, "description": "Internal Server Error."},
    }
)
async def get_property(id: str, db: AsyncIOMotorDatabase = Depends(get_db)):
    try:
        property_doc = await property_service.get_document(db, id)

        if not property_doc:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Property not found")

        return property_doc

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error getting property {id}: {e}", exc_info=True)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=INTERNAL_ERROR)


@router.post(
    "",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new property",
    description="Create a new property and add it to the database.",
    responses={
        400: {"model": ErrorResponse, "description": "Bad request. Check your request data."},
        500: {"model": ErrorResponse, "description": "Internal Server Error."},
    }
)
async def create_property(
    property_data: Optional[Property] = Body(None),
    db: AsyncIOMotorDatabase = Depends(get_db)
):
    if property_data is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Bad request. Property data is required."
        )

    try:
        created = await property_service.create_document(db, property_data.to_mongo())

        if not created:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Property with this ID already exists."
            )

        return MessageResponse(message="Successfully added a new property.")

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error creating property: {e}", exc_info=True)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=INTERNAL_ERROR)


@router.put(
    "/{id}",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    summary="Update a property by ID",
    description="Update all fields of a property based on its ID.",
    responses={
        400: {"model": ErrorResponse, "description": "Bad request. Check your request data."},
        404: {"model": ErrorResponse, "description": "Property not found."},
        500: {"model": ErrorResponse, "description": "Internal Server Error."},
    }
)
async def update_property(
    id: str,
    property_data: Optional[Property] = Body(None),
    db: AsyncIOMotorDatabase = Depends(get_db)
):
    logger.info(f"Received update request for ID: {id}")

    if property_data is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Bad request. Property data is required."
        )

    try:
        update_fields = property_data.to_mongo()
        logger.debug(f"Updated property data: {update_fields}")

        updated = await property_service.update_document(db, id, update_fields)

        if not updated:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Property not found.")

        return MessageResponse(message="Successfully updated an existing property.")

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error updating property {id}: {e}", exc_info=True)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=INTERNAL_ERROR)


@router.delete(
    "/{id}",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    summary="Delete a property by ID",
    responses={
        404: {"model": ErrorResponse, "description": "Property not found"},
        500: {"model": ErrorResponse, "description": "Internal Server Error"},
    }
)
async def delete_property(id: str, db: AsyncIOMotorDatabase = Depends(get_db)):
    try:
        deleted = await property_service.delete_document(db, id)

        if not deleted:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Property not found")

        logger.info(f"Deleted property {id}")
        return MessageResponse(message="Property deleted successfully")

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error deleting property {id}: {e}", exc_info=True)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=INTERNAL_ERROR)
