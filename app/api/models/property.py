"""
Property models for the Real Estate Manager API
"""
from typing import List, Optional, Union
from pydantic import Field

from .base import Document


class Property(Document):
    """A rental property listing"""
    id: Optional[str] = Field(None, description="The ID of the property.")
    address: Optional[str] = Field(None, description="The address of the property.")
    city: Optional[str] = Field(None, description="The city where the property is located.")
    state: Optional[str] = Field(None, description="The state where the property is located.")
    zip: Optional[int] = Field(None, description="The zip code of the property.")
    propertyValue: Optional[int] = Field(None, description="The value of the property.")
    monthlyRentalIncome: Optional[int] = Field(None, description="The monthly rental income from the property.")
    squareFeet: Optional[int] = Field(None, description="The square footage of the property.")
    bedrooms: Optional[int] = Field(None, description="The number of bedrooms in the property.")
    bathrooms: Optional[Union[int, float]] = Field(None, description="The number of bathrooms in the property.")
    availability: Optional[str] = Field(
        None,
        description='The availability status of the property (e.g., "Available", "Not Available").'
    )
    image: Optional[str] = Field(None, description="The URL of the property image.")
    amenities: Optional[List[str]] = Field(None, description="List of amenities available at the property.")
    notes: Optional[str] = Field(None, description="Additional notes or description of the property.")
