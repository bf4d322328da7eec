"""
Reports Service

Handles the review workflow for reports: looking them up and recording
approval decisions. Database work runs in the default executor, as in
UsersService.
"""

import asyncio
from datetime import datetime, timezone
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from constants import ReportStatus
from domain.entities import Report
from dtos.request import ApproveReportDto
from dtos.response import ResponseWrapper
from exceptions import NotFoundError, DatabaseError
from models import Report as ReportModel
from repositories.report_repository import ReportRepository
from services.interfaces import IReportsService
from utils.logging_utils import StructuredLogger

logger = StructuredLogger(__name__)


class ReportsService(IReportsService):
    """SQLAlchemy-backed implementation of IReportsService."""

    def __init__(self, db: Session):
        self.db = db
        self.report_repo = ReportRepository(db)

    async def get(self, id: int, trace_id: str) -> ResponseWrapper[Report]:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self._get, id, trace_id)

    async def approve(self, id: int, body: ApproveReportDto, trace_id: str) -> ResponseWrapper[Report]:
        """
        Record an approval decision.

        The latest decision wins: approving a rejected report (or the other way
        round) is allowed and moves reviewed_at forward.
        """
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self._approve, id, body, trace_id)

    def _get(self, id: int, trace_id: str) -> ResponseWrapper[Report]:
        row = self._require_report(id, trace_id)
        return ResponseWrapper[Report].ok(Report.model_validate(row))

    def _approve(self, id: int, body: ApproveReportDto, trace_id: str) -> ResponseWrapper[Report]:
        row = self._require_report(id, trace_id)
        status = ReportStatus.from_decision(body.approved)

        try:
            self.report_repo.update(
                row,
                approved=body.approved,
                status=status.value,
                reviewed_at=datetime.now(timezone.utc),
            )
            self.db.commit()
            self.db.refresh(row)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to record decision for report {id}: {e}", extra={"trace_id": trace_id}, exc_info=True)
            raise DatabaseError("approve_report", f"Failed to record decision for report {id}") from e

        logger.info(f"Report {id} marked {status.value}", extra={"trace_id": trace_id})
        return ResponseWrapper[Report].ok(Report.model_validate(row))

    def _require_report(self, id: int, trace_id: str) -> ReportModel:
        try:
            row = self.report_repo.get_by_id(id)
        except SQLAlchemyError as e:
            raise DatabaseError("get_report", f"Failed to load report {id}: {e}") from e

        if row is None:
            logger.debug(f"Report {id} not found", extra={"trace_id": trace_id})
            raise NotFoundError("Report", id)
        return row
