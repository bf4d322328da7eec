"""
Reports API endpoints
"""
from fastapi import APIRouter, Depends

from constants import HTTPStatus
from dependencies import get_full_request, get_logger, get_reports_service, require_bearer_token
from dtos.internal import FullRequest
from dtos.request import ApproveReportDto
from dtos.response import ResponseWrapper, ReportDto
from services.interfaces import IReportsService
from utils.logging_utils import StructuredLogger

router = APIRouter(
    prefix="/reports",
    tags=["reports"],
    dependencies=[Depends(require_bearer_token)],
    responses={HTTPStatus.UNAUTHORIZED: {"model": ResponseWrapper, "description": "Missing or invalid bearer token"}},
)


@router.get("/{id}", response_model=ResponseWrapper[ReportDto])
async def get_report(
    id: int,
    full_request: FullRequest = Depends(get_full_request),
    reports_service: IReportsService = Depends(get_reports_service),
    logger: StructuredLogger = Depends(get_logger),
):
    """Get a single report with its review state."""
    context = {"operation": "get_report", "trace_id": full_request.trace_id}
    logger.debug(f"Begin - Id: {id}", extra=context)

    res = await reports_service.get(id, full_request.trace_id)

    logger.debug(f"End - Response: {res.model_dump_json()} - Time: {full_request.elapsed_ms()}ms", extra=context)
    return res


@router.patch(
    "/{id}/approve",
    response_model=ResponseWrapper[ReportDto],
    responses={HTTPStatus.NOT_FOUND: {"model": ResponseWrapper, "description": "Report not found"}},
)
async def approve_report(
    id: int,
    body: ApproveReportDto,
    full_request: FullRequest = Depends(get_full_request),
    reports_service: IReportsService = Depends(get_reports_service),
    logger: StructuredLogger = Depends(get_logger),
):
    """
    Approve or reject a report.

    The body must be `{"approved": true}` or `{"approved": false}`; an empty
    object counts as not approved.
    """
    context = {"operation": "approve_report", "trace_id": full_request.trace_id}
    logger.debug(f"Begin - Id: {id} - Approved: {body.approved}", extra=context)

    res = await reports_service.approve(id, body, full_request.trace_id)

    logger.debug(f"End - Response: {res.model_dump_json()} - Time: {full_request.elapsed_ms()}ms", extra=context)
    return res
