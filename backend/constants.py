"""
Application-wide constants.

This module centralizes the magic strings and numbers used throughout the application
to improve maintainability and reduce duplication.
"""
from enum import Enum


class ReportStatus(str, Enum):
    """
    Review state of a report.

    A report starts PENDING and moves to APPROVED or REJECTED once a reviewer
    submits an approval decision. A later decision overwrites an earlier one.
    """

    PENDING = 'PENDING'
    APPROVED = 'APPROVED'
    REJECTED = 'REJECTED'

    @classmethod
    def from_decision(cls, approved: bool) -> 'ReportStatus':
        """Map an approval decision to the resulting status"""
        return cls.APPROVED if approved else cls.REJECTED


class ErrorCode(str, Enum):
    """Machine-readable codes carried in error envelopes"""

    NOT_FOUND = 'NOT_FOUND'
    CONFLICT = 'CONFLICT'
    VALIDATION_ERROR = 'VALIDATION_ERROR'
    UNAUTHORIZED = 'UNAUTHORIZED'
    DATABASE_ERROR = 'DATABASE_ERROR'
    INTERNAL_ERROR = 'INTERNAL_ERROR'


class HTTPStatus:
    """HTTP status codes used throughout the application"""

    # Success
    OK = 200
    CREATED = 201
    NO_CONTENT = 204

    # Client Errors
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404
    CONFLICT = 409
    UNPROCESSABLE_ENTITY = 422

    # Server Errors
    INTERNAL_SERVER_ERROR = 500
    SERVICE_UNAVAILABLE = 503


# Request tracing
TRACE_ID_HEADER = 'X-Trace-Id'
NO_TRACE_ID = '-'

# Field limits
NAME_MAX_LENGTH = 100
EMAIL_MAX_LENGTH = 254
REPORT_TITLE_MAX_LENGTH = 200
