"""
Domain Entities

Entities are business objects with identity and lifecycle. They are built from
ORM rows by the service layer and handed to routers inside a ResponseWrapper,
so routers never touch SQLAlchemy objects.

- User: an account holder
- Report: a report awaiting a reviewer's approval decision
"""

from .user import User
from .report import Report

__all__ = ["User", "Report"]
