"""
Response Envelope

Every endpoint answers with a ResponseWrapper, whether it succeeded or failed,
so clients can always branch on `success` and read `data` or `error`.
"""

from pydantic import BaseModel, Field
from typing import Any, Dict, Generic, Optional, TypeVar

T = TypeVar('T')


class Pagination(BaseModel):
    """Size information for collection responses."""

    total: int = Field(description="Number of items returned")


class ErrorDetail(BaseModel):
    """Error payload carried by failed responses."""

    code: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable message")
    details: Dict[str, Any] = Field(default_factory=dict, description="Extra context")


class ResponseWrapper(BaseModel, Generic[T]):
    """
    Generic response envelope.

    Services build it with ok(); the global exception handlers build it with
    fail(). Routers pass it through untouched and let response_model narrow
    `data` to the public DTO.
    """

    success: bool = Field(True, description="Whether the operation succeeded")
    data: Optional[T] = Field(None, description="Operation result")
    error: Optional[ErrorDetail] = Field(None, description="Error information when success is false")
    pagination: Optional[Pagination] = Field(None, description="Collection size information")

    @classmethod
    def ok(cls, data: Any = None, pagination: Optional[Pagination] = None) -> "ResponseWrapper":
        return cls(success=True, data=data, pagination=pagination)

    @classmethod
    def fail(cls, code: str, message: str, details: Optional[Dict[str, Any]] = None) -> "ResponseWrapper":
        return cls(
            success=False,
            error=ErrorDetail(code=code, message=message, details=details or {})
        )
