"""Infrastructure - Database, logging."""

from app.infra.database import (
    close_db_engine,
    create_tables,
    get_db_session,
)
from app.infra.logging import setup_logging, get_logger

__all__ = [
    "get_db_session",
    "close_db_engine",
    "create_tables",
    "setup_logging",
    "get_logger",
]
