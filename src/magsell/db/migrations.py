"""
Database migration management for MagSell.
Creates the schema and applies additive, forward-only migrations.
"""

import sqlite3
from dataclasses import dataclass

from .connection import transaction
from .schema import TABLE_COLUMNS, get_schema_statements
from ..errors import MigrationError, SchemaError
from ..utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class AddColumn:
    """
    Additive migration: add a column to an existing table.
    """
    
    table: str
    column: str
    definition: str
    
    @property
    def statement(self) -> str:
        return f"ALTER TABLE {self.table} ADD COLUMN {self.column} {self.definition}"
    
    def is_applied(self, conn: sqlite3.Connection) -> bool:
        """Check whether the column already exists."""
        return self.column in get_table_columns(conn, self.table)
    
    def apply(self, conn: sqlite3.Connection) -> bool:
        """
        Add the column unless it is already present.
        
        Args:
            conn: Open database connection
            
        Returns:
            True if the column was added, False if it already existed
            
        Raises:
            MigrationError: If the ALTER statement fails
        """
        if self.is_applied(conn):
            return False
        try:
            conn.execute(self.statement)
            conn.commit()
        except sqlite3.Error as e:
            raise MigrationError(f"{self.statement} failed: {e}") from e
        return True


# Forward migrations for databases created by earlier versions, oldest first
MIGRATIONS = (
    AddColumn('products', 'image_path', 'TEXT'),
)


def get_table_columns(conn: sqlite3.Connection, table: str) -> list[str]:
    """
    List the column names of a table.
    
    Args:
        conn: Open database connection
        table: Table name
        
    Returns:
        Column names in declaration order (empty if the table is missing)
    """
    rows = conn.execute(f"PRAGMA table_info({table})").fetchall()
    return [row[1] for row in rows]


def create_schema(conn: sqlite3.Connection):
    """
    Create all tables in a single transaction.
    
    Args:
        conn: Connection opened in autocommit mode
        
    Raises:
        SchemaError: If any statement fails (nothing is left half-created)
    """
    try:
        with transaction(conn):
            for statement in get_schema_statements():
                conn.execute(statement)
    except sqlite3.Error as e:
        raise SchemaError(f"Failed to create schema: {e}") from e


def apply_migrations(conn: sqlite3.Connection) -> list[AddColumn]:
    """
    Apply every pending migration, tolerating failures.
    
    A failed migration is logged at debug level and skipped.
    
    Args:
        conn: Open database connection
        
    Returns:
        Migrations that were actually applied
    """
    applied = []
    for migration in MIGRATIONS:
        try:
            if migration.apply(conn):
                logger.info(f"Applied migration: {migration.statement}")
                applied.append(migration)
            else:
                logger.debug(f"Migration already applied: {migration.statement}")
        except (MigrationError, sqlite3.Error) as e:
            logger.debug(f"Skipping migration {migration.table}.{migration.column}: {e}")
    return applied


def verify_schema(conn: sqlite3.Connection) -> bool:
    """
    Verify that schema is correct and complete.
    
    Args:
        conn: Open database connection
        
    Returns:
        True if every table exists with every expected column
    """
    try:
        for table, expected in TABLE_COLUMNS.items():
            columns = get_table_columns(conn, table)
            if not columns or not set(expected).issubset(columns):
                return False
        return True
    except sqlite3.Error:
        return False
