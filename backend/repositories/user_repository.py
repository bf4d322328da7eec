"""
User repository for user-specific data access operations.
"""

from typing import List, Optional
from sqlalchemy.orm import Session

from models import User as UserModel
from .base_repository import BaseRepository


class UserRepository(BaseRepository[UserModel]):
    """Repository for User model operations."""

    def __init__(self, db: Session):
        super().__init__(db, UserModel)

    def get_by_email(self, email: str) -> Optional[UserModel]:
        """
        Find a user by email, ignoring case.

        Args:
            email: Email address

        Returns:
            User or None if no user has that email
        """
        return self.db.query(self.model).filter(
            self.model.email == email.strip().lower()
        ).first()

    def list_users(self, email: Optional[str] = None) -> List[UserModel]:
        """
        List users, optionally narrowed to one email address.

        Args:
            email: Exact email to match (case-insensitive); None or blank lists everyone

        Returns:
            Users ordered by ID
        """
        if not email or not email.strip():
            return self.get_all()
        user = self.get_by_email(email)
        return [user] if user else []

    def email_taken(self, email: str, exclude_id: Optional[int] = None) -> bool:
        """
        Check whether another user already owns an email.

        Args:
            email: Email address to check
            exclude_id: User ID to ignore (the user being updated)

        Returns:
            True if a different user has this email
        """
        query = self.db.query(self.model.id).filter(self.model.email == email.strip().lower())
        if exclude_id is not None:
            query = query.filter(self.model.id != exclude_id)
        return query.first() is not None
