"""
Request DTOs

DTOs for incoming API requests. These decouple the API from database models
and provide a clear contract for what data the API expects.
"""

from .user_request import UpdateUserDto
from .report_request import ApproveReportDto

__all__ = ["UpdateUserDto", "ApproveReportDto"]
