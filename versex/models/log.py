"""ORM model for the activity log shown in the dashboard terminal."""

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer, Text

from versex.models.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Log(Base):
    """One human-readable activity entry (who did what to which record)."""

    __tablename__ = "logs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    timestamp = Column(DateTime(timezone=True), nullable=False, default=_utcnow, index=True)
    message = Column(Text, nullable=False)
