"""
Base Pydantic models for standard API responses
"""
from typing import Optional, Any, Dict, List
from pydantic import BaseModel, Field
from datetime import datetime


class MessageResponse(BaseModel):
    """Acknowledgement returned by write operations"""
    message: str = Field(..., description="Human readable outcome", example="Successfully added a new property.")


class ErrorResponse(BaseModel):
    """Error response schema"""
    message: str = Field(..., description="Error message", example="Internal Server Error")
    details: Optional[List[Dict[str, Any]]] = Field(None, description="Validation error details")


class HealthCheckResponse(BaseModel):
    """Health check response schema"""
    status: str = Field(..., description="Service status", example="healthy")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Check timestamp")
    version: str = Field(..., description="Application version")
    service: str = Field(..., description="Service name")
    environment: str = Field(..., description="development or production")


class Document(BaseModel):
    """Free-form MongoDB document; undeclared fields are stored as sent"""

    # Strict: a value of the wrong type is rejected, never converted before storage
    model_config = {
        "extra": "allow",
        "strict": True
    }

    def to_mongo(self) -> Dict[str, Any]:
        """Fields the client actually sent, ready for insert or $set"""
        return self.model_dump(exclude_unset=True)
