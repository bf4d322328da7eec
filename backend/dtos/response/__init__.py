"""
Response DTOs

DTOs for outgoing API responses. These decouple the API from the domain
entities and control exactly what data is exposed.
"""

from .response_wrapper import ResponseWrapper, ErrorDetail, Pagination
from .user_response import UserDto
from .report_response import ReportDto

__all__ = ["ResponseWrapper", "ErrorDetail", "Pagination", "UserDto", "ReportDto"]
