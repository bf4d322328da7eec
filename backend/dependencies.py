"""
Dependency injection providers for FastAPI.

This module provides factory functions for creating service instances, the
request context and the bearer-token guard, following the Dependency
Inversion Principle. Tests swap any of them through app.dependency_overrides.
"""

import hmac
import time
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from config.settings import Settings, get_settings
from database import get_db
from dtos.internal import FullRequest
from exceptions import AuthenticationError
from services.interfaces import IUsersService, IReportsService
from services.users_service import UsersService
from services.reports_service import ReportsService
from utils.logging_utils import StructuredLogger
from utils.request_context import new_trace_id

bearer_scheme = HTTPBearer(auto_error=False, description="API token")


def get_users_service(db: Session = Depends(get_db)) -> IUsersService:
    """
    Factory function for creating UsersService instances.

    Args:
        db: Database session (injected)

    Returns:
        IUsersService: Users service implementation
    """
    return UsersService(db)


def get_reports_service(db: Session = Depends(get_db)) -> IReportsService:
    """
    Factory function for creating ReportsService instances.

    Args:
        db: Database session (injected)

    Returns:
        IReportsService: Reports service implementation
    """
    return ReportsService(db)


def get_logger(request: Request) -> StructuredLogger:
    """
    Provide the logger for a route, named after the module that defines it.
    """
    endpoint = request.scope.get("endpoint")
    return StructuredLogger(getattr(endpoint, "__module__", __name__))


def get_full_request(request: Request) -> FullRequest:
    """
    Build the request context from what the tracing middleware stored.

    Falls back to a fresh trace id and the current time when the middleware
    is not installed (e.g. a bare router mounted in a test app).
    """
    trace_id = getattr(request.state, "trace_id", None) or new_trace_id()
    start_time = getattr(request.state, "start_time", None)
    if start_time is None:
        start_time = time.perf_counter()
    return FullRequest(trace_id=trace_id, start_time=start_time)


def require_bearer_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings),
) -> str:
    """
    Guard for protected routers.

    Returns:
        The accepted token

    Raises:
        AuthenticationError: If the Authorization header is missing, is not a
            bearer token, or carries a token that is not configured
    """
    if credentials is None:
        raise AuthenticationError("Missing bearer token")

    token = credentials.credentials
    matched = False
    for accepted in settings.api_tokens:
        if hmac.compare_digest(token.encode(), accepted.encode()):
            matched = True
    if not matched:
        raise AuthenticationError("Invalid bearer token")
    return token
