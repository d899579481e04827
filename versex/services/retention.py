"""Activity log retention: delete log rows older than LOG_RETENTION_HOURS."""

import logging
from datetime import datetime, timezone, timedelta
from typing import TYPE_CHECKING

from sqlalchemy.orm import Session

from versex.models import Log

if TYPE_CHECKING:
    from versex.core.config import Settings

logger = logging.getLogger(__name__)


def run_log_retention(session: Session, settings: "Settings") -> int:
    """
    Delete activity log entries older than LOG_RETENTION_HOURS.

    Returns the number of deleted rows. Idempotent: safe to run repeatedly.
    """
    if not settings.LOG_RETENTION_ENABLED:
        logger.info("Log retention is disabled (LOG_RETENTION_ENABLED=false); skipping.")
        return 0

    cutoff = datetime.now(timezone.utc) - timedelta(hours=settings.LOG_RETENTION_HOURS)
    deleted_count = (
        session.query(Log)
        .filter(Log.timestamp < cutoff)
        .delete(synchronize_session=False)
    )
    session.commit()

    if deleted_count > 0:
        logger.info(
            "Log retention run: cutoff=%s, logs_deleted=%s",
            cutoff.isoformat(),
            deleted_count,
        )
    return deleted_count
