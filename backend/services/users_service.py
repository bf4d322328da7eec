"""
Users Service

Business logic for reading, updating and deleting users. Converts ORM rows
into domain entities so nothing above this layer depends on SQLAlchemy.

SQLAlchemy sessions are synchronous, so each public coroutine hands its
database work to the default executor and awaits the result.
"""

import asyncio
from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from domain.entities import User
from dtos.request import UpdateUserDto
from dtos.response import ResponseWrapper, Pagination
from exceptions import NotFoundError, ConflictError, DatabaseError
from models import User as UserModel
from repositories.user_repository import UserRepository
from services.interfaces import IUsersService
from utils.logging_utils import StructuredLogger

logger = StructuredLogger(__name__)


class UsersService(IUsersService):
    """SQLAlchemy-backed implementation of IUsersService."""

    def __init__(self, db: Session):
        """
        Initialize UsersService.

        Args:
            db: Database session
        """
        self.db = db
        self.user_repo = UserRepository(db)

    async def get_all(self, email: Optional[str], trace_id: str) -> ResponseWrapper[List[User]]:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self._get_all, email, trace_id)

    async def get(self, id: int, trace_id: str) -> ResponseWrapper[User]:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self._get, id, trace_id)

    async def update(self, id: int, body: UpdateUserDto, trace_id: str) -> ResponseWrapper[User]:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self._update, id, body, trace_id)

    async def delete(self, id: int, trace_id: str) -> ResponseWrapper[bool]:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self._delete, id, trace_id)

    def _get_all(self, email: Optional[str], trace_id: str) -> ResponseWrapper[List[User]]:
        try:
            rows = self.user_repo.list_users(email)
        except SQLAlchemyError as e:
            raise DatabaseError("list_users", f"Failed to list users: {e}") from e

        users = [User.model_validate(row) for row in rows]
        logger.debug(f"Listed {len(users)} user(s)", extra={"trace_id": trace_id, "email_filter": email})
        return ResponseWrapper[List[User]].ok(users, pagination=Pagination(total=len(users)))

    def _get(self, id: int, trace_id: str) -> ResponseWrapper[User]:
        row = self._require_user(id, trace_id)
        return ResponseWrapper[User].ok(User.model_validate(row))

    def _update(self, id: int, body: UpdateUserDto, trace_id: str) -> ResponseWrapper[User]:
        row = self._require_user(id, trace_id)
        changes = body.model_dump(exclude_unset=True)

        if "email" in changes and self.user_repo.email_taken(changes["email"], exclude_id=id):
            logger.info(f"Rejected email change for user {id}: address in use", extra={"trace_id": trace_id})
            raise ConflictError(f"Email '{changes['email']}' is already in use", field="email")

        try:
            if changes:
                self.user_repo.update(row, **changes)
            self.db.commit()
            self.db.refresh(row)
        except IntegrityError as e:
            self.db.rollback()
            raise ConflictError("User update violates a uniqueness constraint") from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to update user {id}: {e}", extra={"trace_id": trace_id}, exc_info=True)
            raise DatabaseError("update_user", f"Failed to update user {id}") from e

        logger.info(f"Updated user {id} fields: {sorted(changes)}", extra={"trace_id": trace_id})
        return ResponseWrapper[User].ok(User.model_validate(row))

    def _delete(self, id: int, trace_id: str) -> ResponseWrapper[bool]:
        try:
            deleted = self.user_repo.delete_by_id(id)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to delete user {id}: {e}", extra={"trace_id": trace_id}, exc_info=True)
            raise DatabaseError("delete_user", f"Failed to delete user {id}") from e

        if deleted:
            logger.info(f"Deleted user {id}", extra={"trace_id": trace_id})
        else:
            logger.debug(f"User {id} already absent, nothing deleted", extra={"trace_id": trace_id})
        return ResponseWrapper[bool].ok(deleted)

    def _require_user(self, id: int, trace_id: str) -> UserModel:
        try:
            row = self.user_repo.get_by_id(id)
        except SQLAlchemyError as e:
            raise DatabaseError("get_user", f"Failed to load user {id}: {e}") from e

        if row is None:
            logger.debug(f"User {id} not found", extra={"trace_id": trace_id})
            raise NotFoundError("User", id)
        return row
