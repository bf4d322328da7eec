from sqlalchemy import Column, String, Integer, Boolean, DateTime, ForeignKey, CheckConstraint, Index
from sqlalchemy.orm import relationship
from datetime import datetime, timezone

from database import Base
from constants import ReportStatus, NAME_MAX_LENGTH, EMAIL_MAX_LENGTH, REPORT_TITLE_MAX_LENGTH


def utcnow():
    return datetime.now(timezone.utc)


class User(Base):
    """
    An account holder.

    Emails are stored lower-cased so lookups and the uniqueness constraint are
    case-insensitive. Deleting a user removes the reports they authored.
    """
    __tablename__ = 'users'

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(EMAIL_MAX_LENGTH), nullable=False, unique=True)
    first_name = Column(String(NAME_MAX_LENGTH), nullable=False)
    last_name = Column(String(NAME_MAX_LENGTH), nullable=False)
    password_hash = Column(String, nullable=False, default='')
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    reports = relationship("Report", back_populates="author", cascade="all, delete-orphan", passive_deletes=True)

    __table_args__ = (
        CheckConstraint("email != ''"),
    )


class Report(Base):
    """
    A report awaiting (or having received) a reviewer's approval decision.

    Report States:
    - PENDING: Submitted, no decision yet
    - APPROVED: Reviewer approved the report
    - REJECTED: Reviewer declined the report
    """
    __tablename__ = 'reports'

    id = Column(Integer, primary_key=True, autoincrement=True)
    author_id = Column(Integer, ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    title = Column(String(REPORT_TITLE_MAX_LENGTH), nullable=False)
    status = Column(String, nullable=False, default=ReportStatus.PENDING.value)
    approved = Column(Boolean, nullable=False, default=False)
    reviewed_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    author = relationship("User", back_populates="reports")

    __table_args__ = (
        CheckConstraint("status IN ('PENDING', 'APPROVED', 'REJECTED')", name='check_report_status'),
        Index('idx_reports_author', 'author_id'),
    )
