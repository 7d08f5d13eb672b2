"""
OpenAPI documentation metadata served at the docs URL
"""
from typing import Any, Dict

from app.core.config import settings

OPENAPI_TITLE = "Real Estate Manager API Documentation"
OPENAPI_DESCRIPTION = "API documentation Real Estate Manager application."

TAGS_METADATA = [
    {"name": "Properties", "description": "API endpoints for managing properties."},
    {"name": "Support", "description": "API endpoints for support-related functionalities."},
    {"name": "AppState", "description": "API endpoints for app-wide functionalities."},
    {"name": "Health", "description": "Service and database health checks."},
]


def openapi_options() -> Dict[str, Any]:
    """Keyword arguments for the FastAPI constructor"""
    return {
        "title": OPENAPI_TITLE,
        "description": OPENAPI_DESCRIPTION,
        "version": settings.version,
        "openapi_tags": TAGS_METADATA,
        "docs_url": settings.docs_url,
        "openapi_url": f"{settings.docs_url}/openapi.json",
        "redoc_url": None,
    }
