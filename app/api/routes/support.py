"""
Support FAQ API routes
"""
from typing import Any, Dict, List
from fastapi import APIRouter, HTTPException, status, Depends
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.api.models import ErrorResponse
from app.api.services import support_service
from app.core.dependencies import get_db
from app.core.logging import get_logger

logger = get_logger(__name__)

router = APIRouter()


@router.get(
    "",
    response_model=List[Dict[str, Any]],
    status_code=status.HTTP_200_OK,
    summary="Get all faqs",
    description="Retrieve all questions and answers from the database.",
    responses={500: {"model": ErrorResponse, "description": "Internal Server Error."}}
)
async def list_faqs(db: AsyncIOMotorDatabase = Depends(get_db)):
    try:
        return await support_service.list_documents(db)

    except Exception as e:
        logger.error(f"Error listing faqs: {e}", exc_info=True)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal Server Error")
