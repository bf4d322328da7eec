"""
Users API endpoints

Thin handlers: log, delegate to IUsersService, return its ResponseWrapper.
Serialization to UserDto happens through each route's response_model, and
errors raised by the service are left to the global exception handlers.
"""
from fastapi import APIRouter, Depends, Query
from typing import List, Optional

from constants import HTTPStatus
from dependencies import get_full_request, get_logger, get_users_service, require_bearer_token
from dtos.internal import FullRequest
from dtos.request import UpdateUserDto
from dtos.response import ResponseWrapper, UserDto
from services.interfaces import IUsersService
from utils.logging_utils import StructuredLogger

router = APIRouter(
    prefix="/users",
    tags=["users"],
    dependencies=[Depends(require_bearer_token)],
    responses={HTTPStatus.UNAUTHORIZED: {"model": ResponseWrapper, "description": "Missing or invalid bearer token"}},
)


def _context(operation: str, full_request: FullRequest) -> dict:
    return {"operation": operation, "trace_id": full_request.trace_id}


@router.get("", response_model=ResponseWrapper[List[UserDto]])
async def get_all_users(
    email: Optional[str] = Query(None, description="Only return the user with this email"),
    full_request: FullRequest = Depends(get_full_request),
    users_service: IUsersService = Depends(get_users_service),
    logger: StructuredLogger = Depends(get_logger),
):
    """
    List users, optionally filtered by email.
    """
    context = _context("get_all_users", full_request)
    logger.debug(f"Begin - Email: {email}" if email else "Begin", extra=context)

    res = await users_service.get_all(email, full_request.trace_id)

    amount = len(res.data) if res is not None and res.data is not None else None
    logger.debug(
        f"End - Amount of users returned: {amount} - Time: {full_request.elapsed_ms()}ms",
        extra=context
    )

    return res


@router.get(
    "/{id}",
    response_model=ResponseWrapper[UserDto],
    responses={
        HTTPStatus.NO_CONTENT: {"description": "No content"},
        HTTPStatus.INTERNAL_SERVER_ERROR: {"model": ResponseWrapper, "description": "Internal server error"},
    },
)
async def get_user(
    id: int,
    full_request: FullRequest = Depends(get_full_request),
    users_service: IUsersService = Depends(get_users_service),
    logger: StructuredLogger = Depends(get_logger),
):
    """
    Get a single user by ID.
    """
    context = _context("get_user", full_request)
    logger.debug(f"Begin - Id: {id}", extra=context)

    res = await users_service.get(id, full_request.trace_id)

    logger.debug(
        f"End - Response: {res.model_dump_json()} - Time: {full_request.elapsed_ms()}ms",
        extra=context
    )

    return res


@router.patch("/{id}", response_model=ResponseWrapper[UserDto])
async def update_user(
    id: int,
    body: UpdateUserDto,
    full_request: FullRequest = Depends(get_full_request),
    users_service: IUsersService = Depends(get_users_service),
    logger: StructuredLogger = Depends(get_logger),
):
    """
    Partially update a user. Fields left out of the body are not changed.
    """
    context = _context("update_user", full_request)
    logger.debug(f"Begin - Id: {id}", extra=context)

    res = await users_service.update(id, body, full_request.trace_id)

    logger.debug(
        f"End - Response: {res.model_dump_json()} - Time: {full_request.elapsed_ms()}ms",
        extra=context
    )

    return res


@router.delete(
    "/{id}",
    response_model=ResponseWrapper[bool],
    responses={HTTPStatus.NO_CONTENT: {"description": "Successful response"}},
)
async def remove_user(
    id: int,
    full_request: FullRequest = Depends(get_full_request),
    users_service: IUsersService = Depends(get_users_service),
    logger: StructuredLogger = Depends(get_logger),
):
    """
    Delete a user. `data` is false when there was no such user.
    """
    context = _context("remove_user", full_request)
    logger.debug(f"Begin - Id: {id}", extra=context)

    res = await users_service.delete(id, full_request.trace_id)

    logger.debug(
        f"End - Response: {res.model_dump_json()} - Time: {full_request.elapsed_ms()}ms",
        extra=context
    )

    return res
