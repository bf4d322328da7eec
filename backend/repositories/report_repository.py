"""
Report repository for report-specific data access operations.
"""

from sqlalchemy.orm import Session

from models import Report as ReportModel
from .base_repository import BaseRepository


class ReportRepository(BaseRepository[ReportModel]):
    """Repository for Report model operations."""

    def __init__(self, db: Session):
        super().__init__(db, ReportModel)
