# Models package
from .base import MessageResponse, ErrorResponse, HealthCheckResponse, Document
from .property import Property
from .app_state import ViewPropertiesToggleState, ViewMode

__all__ = [
    "MessageResponse",
    "ErrorResponse",
    "HealthCheckResponse",
    "Document",
    "Property",
    "ViewPropertiesToggleState",
    "ViewMode",
]
