"""
User Response DTOs

DTOs for user-related API responses.
"""

from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime


class UserDto(BaseModel):
    """
    Response DTO for user information.

    This is the public projection of the User entity; anything not declared
    here is dropped during response serialization.
    """

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(description="User ID")
    email: str = Field(description="Email address")
    first_name: str = Field(description="Given name")
    last_name: str = Field(description="Family name")
    is_active: bool = Field(description="Whether the account is enabled")
    created_at: datetime = Field(description="Creation timestamp")
