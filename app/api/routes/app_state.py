"""
App state API routes for the View Properties toggle
"""
from typing import Any, Dict, List, Optional
from fastapi import APIRouter, HTTPException, status, Body, Depends
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.api.models import ViewPropertiesToggleState, MessageResponse, ErrorResponse
from app.api.services import app_state_service
from app.core.dependencies import get_db
from app.core.logging import get_logger

logger = get_logger(__name__)

router = APIRouter()

INTERNAL_ERROR = "Internal Server Error"
MISSING_BODY = "Bad request. App State data is required."


@router.get(
    "",
    response_model=List[Dict[str, Any]],
    status_code=status.HTTP_200_OK,
    summary="Get the state of the View Properties toggle switch",
    description="Retrieve the state from the database.",
    responses={500: {"model": ErrorResponse, "description": "Internal Server Error."}}
)
async def list_app_states(db: AsyncIOMotorDatabase = Depends(get_db)):
    try:
        return await app_state_service.list_documents(db)

    except Exception as e:
        logger.error(f"Error listing app states: {e}", exc_info=True)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=INTERNAL_ERROR)


@router.post(
    "",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new App State",
    description="Create a new App State and add it to the database.",
    responses={
        400: {"model": ErrorResponse, "description": "Bad request. Check your request data."},
        500: {"model": ErrorResponse, "description": "Internal Server Error."},
    }
)
async def create_app_state(
    app_state_data: Optional[ViewPropertiesToggleState] = Body(None),
    db: AsyncIOMotorDatabase = Depends(get_db)
):
    if app_state_data is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=MISSING_BODY)

    try:
        document = app_state_data.to_mongo()
        logger.debug(f"appStateData: {document}")

        created = await app_state_service.create_document(db, document)

        if not created:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="AppState with this ID already exists."
            )

        return MessageResponse(message="Successfully added a App State.")

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error creating app state: {e}", exc_info=True)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=INTERNAL_ERROR)


@router.put(
    "/{id}",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    summary="Update a App State by ID",
    description="Update App State based on its ID.",
    responses={
        400: {"model": ErrorResponse, "description": "Bad request. Check your request data."},
        404: {"model": ErrorResponse, "description": "App State not found."},
        500: {"model": ErrorResponse, "description": "Internal Server Error."},
    }
)
async def update_app_state(
    id: str,
    app_state_data: Optional[ViewPropertiesToggleState] = Body(None),
    db: AsyncIOMotorDatabase = Depends(get_db)
):
    logger.info(f"Received update request for ID: {id}")

    if app_state_data is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=MISSING_BODY)

    try:
        update_fields = app_state_data.to_mongo()
        logger.debug(f"Updated App State data: {update_fields}")

        updated = await app_state_service.update_document(db, id, update_fields)

        if not updated:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="App State not found.")

        return MessageResponse(message="Successfully updated an existing App State.")

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error updating app state {id}: {e}", exc_info=True)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=INTERNAL_ERROR)
