"""
Report Response DTOs

DTOs for report-related API responses.
"""

from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from typing import Optional

from constants import ReportStatus


class ReportDto(BaseModel):
    """Response DTO for report information."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(description="Report ID")
    author_id: int = Field(description="ID of the authoring user")
    title: str = Field(description="Report title")
    status: ReportStatus = Field(description="Review state")
    approved: bool = Field(description="Latest approval decision")
    reviewed_at: Optional[datetime] = Field(None, description="When the latest decision was made")
    created_at: datetime = Field(description="Creation timestamp")
