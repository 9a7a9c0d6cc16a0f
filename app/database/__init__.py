"""
Database Module

Async engine, session dependency and schema helpers.
"""

from app.database.async_db import (
    check_db_connection,
    dispose_engine,
    get_async_db,
    get_async_engine,
    get_session_maker,
)
from app.database.setup import create_tables, drop_tables

__all__ = [
    "check_db_connection",
    "create_tables",
    "dispose_engine",
    "drop_tables",
    "get_async_db",
    "get_async_engine",
    "get_session_maker",
]
