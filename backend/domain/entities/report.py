"""
Report entity.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict

from constants import ReportStatus


class Report(BaseModel):
    """Domain view of a report and its review state."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    author_id: int
    title: str
    status: ReportStatus
    approved: bool
    reviewed_at: Optional[datetime] = None
    created_at: datetime
