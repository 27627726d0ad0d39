"""
Centralized database layer for Webeze.

This package provides a unified location for all database entities and repositories.

Structure:
- entities/: Database entity models, one module per table
- repositories/: Data access layer, one repository per entity
- session.py: Global engine and session factory management
- utils.py: Database utility functions (engine, session factory, create_all)
"""

from .base import Base, TimestampedEntity
from .session import (
    async_session_maker,
    engine,
    get_session,
    init_db,
)
from .utils import (
    create_all,
    create_engine,
    create_sessionmaker,
    normalize_database_url,
)

__all__ = [
    "Base",
    "TimestampedEntity",
    "async_session_maker",
    "create_all",
    "create_engine",
    "create_sessionmaker",
    "engine",
    "get_session",
    "init_db",
    "normalize_database_url",
]
