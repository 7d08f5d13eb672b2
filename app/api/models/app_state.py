from typing import Literal, Optional
from pydantic import Field

from .base import Document


ViewMode = Literal["list", "grid"]


class ViewPropertiesToggleState(Document):
    """State of the View Properties toggle switch"""
    id: Optional[str] = Field(None, description="The unique identifier for the View Properties toggle state.")
    viewMode: Optional[ViewMode] = Field(
        None,
        description="The view mode for displaying properties, either 'list' or 'grid'."
    )
