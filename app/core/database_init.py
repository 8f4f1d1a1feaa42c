"""Database initialization - runs on backend startup."""
import logging

from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError

from app.infrastructure.persistence import models  # noqa: F401  registers tables
from app.infrastructure.persistence.db import Base, engine

logger = logging.getLogger(__name__)

REQUIRED_TABLES = ("alcohol_shops", "users")


def initialize_database(bind=None) -> bool:
    """Create missing catalog tables.

    Returns:
        bool: True if the schema is in place, False otherwise
    """
    bind = bind if bind is not None else engine
    try:
        Base.metadata.create_all(bind=bind)
        logger.info("Database schema initialized successfully")
        return True
    except SQLAlchemyError as e:
        logger.error(f"Error initializing database: {e}")
        return False


def check_database_health(bind=None) -> bool:
    """Check if all required tables exist."""
    bind = bind if bind is not None else engine
    try:
        existing = set(inspect(bind).get_table_names())
    except SQLAlchemyError as e:
        logger.error(f"Error checking database health: {e}")
        return False

    missing = [table for table in REQUIRED_TABLES if table not in existing]
    if missing:
        logger.error(f"Missing tables: {', '.join(missing)}")
        return False
    return True
