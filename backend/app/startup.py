"""
Startup checks and logging configuration for the API process.
"""

import logging

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from core.config import Settings

logger = logging.getLogger(__name__)


def configure_startup_logging(level: str = "INFO"):
    """Configure root logging once for the process"""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def run_startup_checks(config: Settings, engine) -> bool:
    """
    Log the effective configuration and verify the database answers.

    A failed database check is logged, not raised: report endpoints surface
    the outage per request as STORE_UNAVAILABLE.
    """
    logger.info("=" * 60)
    logger.info(f"Starting in {config.environment.upper()} mode")
    logger.info(f"Sales listing cap: {config.max_list_rows} rows")

    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        logger.info("Database connection OK")
        passed = True
    except SQLAlchemyError as e:
        logger.error(f"Database connection failed: {e}")
        passed = False

    logger.info("=" * 60)
    return passed
