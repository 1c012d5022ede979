"""
Pydantic schemas for phone number records.
"""

from pydantic import BaseModel, ConfigDict, Field


class PhoneNumber(BaseModel):
    """A stored phone number."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="Identifier assigned by the store")
    number: str = Field(..., description="Phone number value, stored as given")
