# Services package
from .document_service import (
    DocumentService,
    serialize_document,
    property_service,
    support_service,
    app_state_service,
)

__all__ = [
    "DocumentService",
    "serialize_document",
    "property_service",
    "support_service",
    "app_state_service",
]
