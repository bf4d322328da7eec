"""
User Request DTOs

DTOs for user-related API requests.
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from typing import Optional

from constants import NAME_MAX_LENGTH


class UpdateUserDto(BaseModel):
    """
    Request DTO for a partial user update.

    Every field is optional; only the fields present in the request body are
    applied (see model_dump(exclude_unset=True) in the users service).
    """

    model_config = ConfigDict(
        extra='forbid',
        str_strip_whitespace=True,
        json_schema_extra={
            "example": {
                "first_name": "Ada",
                "email": "ada@example.com"
            }
        }
    )

    email: Optional[EmailStr] = Field(None, description="New email address")
    first_name: Optional[str] = Field(None, min_length=1, max_length=NAME_MAX_LENGTH, description="Given name")
    last_name: Optional[str] = Field(None, min_length=1, max_length=NAME_MAX_LENGTH, description="Family name")
    is_active: Optional[bool] = Field(None, description="Whether the account is enabled")

    @field_validator("email")
    @classmethod
    def lower_case_email(cls, v):
        """Emails are stored lower-cased."""
        return v.lower() if v is not None else v

    @field_validator("email", "first_name", "last_name", "is_active", mode="before")
    @classmethod
    def reject_explicit_null(cls, v):
        """A field that is sent must carry a value; omit it to leave it unchanged."""
        if v is None:
            raise ValueError("Field may be omitted but not null")
        return v
