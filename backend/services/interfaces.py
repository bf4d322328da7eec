"""
Service Interfaces

Abstract base classes for service layer following Dependency Inversion Principle.
Routers depend on these interfaces only, so implementations can be swapped or
replaced with fakes in tests through FastAPI dependency overrides.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from domain.entities import User, Report
from dtos.request import UpdateUserDto, ApproveReportDto
from dtos.response import ResponseWrapper


class IUsersService(ABC):
    """
    Abstract interface for user management services.

    Every method receives the caller's trace id for log correlation and
    returns its result inside a ResponseWrapper.
    """

    @abstractmethod
    async def get_all(self, email: Optional[str], trace_id: str) -> ResponseWrapper[List[User]]:
        """
        List users.

        Args:
            email: Optional exact-match email filter; None lists every user
            trace_id: Request correlation id

        Returns:
            Wrapped list of users
        """
        pass

    @abstractmethod
    async def get(self, id: int, trace_id: str) -> ResponseWrapper[User]:
        """
        Get a single user.

        Args:
            id: User ID
            trace_id: Request correlation id

        Returns:
            Wrapped user

        Raises:
            NotFoundError: If the user does not exist
        """
        pass

    @abstractmethod
    async def update(self, id: int, body: UpdateUserDto, trace_id: str) -> ResponseWrapper[User]:
        """
        Apply a partial update to a user.

        Args:
            id: User ID
            body: Validated update; only fields that were sent are applied
            trace_id: Request correlation id

        Returns:
            Wrapped updated user

        Raises:
            NotFoundError: If the user does not exist
            ConflictError: If the new email belongs to another user
        """
        pass

    @abstractmethod
    async def delete(self, id: int, trace_id: str) -> ResponseWrapper[bool]:
        """
        Delete a user.

        Args:
            id: User ID
            trace_id: Request correlation id

        Returns:
            Wrapped True if a user was removed, False if there was none
        """
        pass


class IReportsService(ABC):
    """
    Abstract interface for report review services.
    """

    @abstractmethod
    async def get(self, id: int, trace_id: str) -> ResponseWrapper[Report]:
        """
        Get a single report.

        Raises:
            NotFoundError: If the report does not exist
        """
        pass

    @abstractmethod
    async def approve(self, id: int, body: ApproveReportDto, trace_id: str) -> ResponseWrapper[Report]:
        """
        Record a reviewer's approval decision.

        Args:
            id: Report ID
            body: Approval decision
            trace_id: Request correlation id

        Returns:
            Wrapped report with its new status

        Raises:
            NotFoundError: If the report does not exist
        """
        pass
