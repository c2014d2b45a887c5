"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, UUIDMixin, TimestampMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(): Async connection management
  - create_tables(): Schema bootstrap for fresh databases

Models and CRUD singletons are imported from their subpackages
(scm_backend.boundary.db.models, scm_backend.boundary.db.CRUD).

Dependencies: sqlalchemy, scm_backend.configs
System role: Database adapter providing persistent storage for users,
synced domain records, notifications, KYC and onboarding.
"""

from scm_backend.boundary.db.base import Base, TimestampMixin, UUIDMixin
from scm_backend.boundary.db.connection import (
    get_async_db,
    create_tables,
    get_async_engine,
    get_async_session_factory,
)
from scm_backend.boundary.db import models  # noqa: F401  registers all tables

__all__ = [
    "Base",
    "TimestampMixin",
    "UUIDMixin",
    "create_tables",
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
]
