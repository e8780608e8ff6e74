"""Database layer for MagSell."""

from .connection import open_connection, transaction
from .locator import resolve_db_path, connection_target
from .migrations import (
    AddColumn,
    MIGRATIONS,
    apply_migrations,
    create_schema,
    get_table_columns,
    verify_schema,
)
from . import schema

__all__ = [
    'open_connection',
    'transaction',
    'resolve_db_path',
    'connection_target',
    'AddColumn',
    'MIGRATIONS',
    'apply_migrations',
    'create_schema',
    'get_table_columns',
    'verify_schema',
    'schema',
]
