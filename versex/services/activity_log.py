"""Activity log: persisted, human-readable entries shown in the dashboard terminal."""

import logging
from datetime import datetime, timezone

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from versex.models import Log
from versex.services.errors import ServiceError

logger = logging.getLogger(__name__)

MAX_LOGS_PER_REQUEST = 1000


def commit_or_raise(db: Session) -> None:
    """Commit the session; on failure roll back and raise ServiceError with the driver message."""
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        message = str(getattr(e, "orig", None) or e)
        logger.warning("Database commit failed", extra={"reason": message[:500]})
        raise ServiceError(message) from e


def record_activity(db: Session, message: str) -> Log:
    """Persist one activity entry and commit it."""
    entry = Log(timestamp=datetime.now(timezone.utc), message=message)
    db.add(entry)
    commit_or_raise(db)
    logger.info("Activity recorded: %s", message)
    return entry


def list_logs(db: Session, limit: int | None = None) -> list[Log]:
    """
    Return activity entries oldest first.

    With limit, only the newest `limit` entries are returned (still oldest first).
    """
    if limit is None:
        return db.query(Log).order_by(Log.timestamp, Log.id).all()
    newest = (
        db.query(Log)
        .order_by(Log.timestamp.desc(), Log.id.desc())
        .limit(min(limit, MAX_LOGS_PER_REQUEST))
        .all()
    )
    return list(reversed(newest))
