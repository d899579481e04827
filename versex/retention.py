"""
CLI entrypoint for the activity log retention job. Run from cron, e.g.:

  python -m versex.retention

Or daily: 0 3 * * * cd /path/to/versex && .venv/bin/python -m versex.retention
"""

import logging
import sys

from versex.core.config import get_settings
from versex.core.database import SessionLocal
from versex.services.retention import run_log_retention

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main() -> int:
    """Run retention: delete log rows older than LOG_RETENTION_HOURS."""
    settings = get_settings()
    db = SessionLocal()
    try:
        logs_deleted = run_log_retention(db, settings)
        logger.info("Log retention completed: logs_deleted=%s", logs_deleted)
        return 0
    except Exception as e:
        logger.exception("Log retention job failed: %s", e)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
