"""
Generic data access shared by the user and report repositories.
"""

from typing import Generic, TypeVar, List, Optional, Type, Any
from sqlalchemy.orm import Session

T = TypeVar('T')


class BaseRepository(Generic[T]):
    """
    Lookups and writes common to every table keyed by an integer ``id``.

    Writes are flushed, never committed: the calling service owns the
    transaction and decides when to commit or roll back.
    """

    def __init__(self, db: Session, model: Type[T]):
        self.db = db
        self.model = model

    def create(self, obj: T) -> T:
        """Add a row and flush so the database assigns its id."""
        self.db.add(obj)
        self.db.flush()
        return obj

    def get_by_id(self, id: int) -> Optional[T]:
        return self.db.query(self.model).filter(self.model.id == id).first()

    def get_all(self) -> List[T]:
        """Every row, oldest id first."""
        return self.db.query(self.model).order_by(self.model.id).all()

    def update(self, obj: T, **changes: Any) -> T:
        """
        Set the given attributes on a loaded row.

        Args:
            obj: Row previously loaded through this session
            **changes: Column name to new value

        Returns:
            The same row, flushed
        """
        for column, value in changes.items():
            setattr(obj, column, value)
        self.db.flush()
        return obj

    def delete_by_id(self, id: int) -> bool:
        """
        Remove the row with this id, if any.

        Returns:
            False when there was nothing to remove
        """
        obj = self.get_by_id(id)
        if obj is None:
            return False
        self.db.delete(obj)
        self.db.flush()
        return True
