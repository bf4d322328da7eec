"""
User entity.
"""

from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """
    Domain view of an account holder.

    password_hash is excluded from every dump so it cannot reach a response
    body or a log line.
    """

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    first_name: str
    last_name: str
    is_active: bool = True
    password_hash: str = Field(default='', exclude=True, repr=False)
    created_at: datetime
    updated_at: datetime

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
