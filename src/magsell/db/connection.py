"""
Database connection management for MagSell.
Every call opens a fresh connection; nothing is cached or shared.
"""

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional, Union

from ..config import SQLITE_PRAGMAS
from ..errors import DatabaseError


def open_connection(
    db_path: Union[str, Path],
    isolation_level: Optional[str] = 'DEFERRED',
) -> sqlite3.Connection:
    """
    Open a new SQLite connection with the standard settings applied.
    
    Args:
        db_path: Path to SQLite database file
        isolation_level: sqlite3 isolation level (None for autocommit)
        
    Returns:
        SQLite connection object owned by the caller
        
    Raises:
        DatabaseError: If connection fails
    """
    conn = None
    try:
        conn = sqlite3.connect(
            str(db_path),
            isolation_level=isolation_level,
            check_same_thread=False,  # Caller may hand the connection to a worker thread
        )
        for name, value in SQLITE_PRAGMAS:
            conn.execute(f"PRAGMA {name} = {value}")
        
        # Row factory for dict-like access
        conn.row_factory = sqlite3.Row
        return conn
    
    except sqlite3.Error as e:
        if conn is not None:
            conn.close()
        raise DatabaseError(f"Failed to connect to database {db_path}: {e}") from e


@contextmanager
def transaction(conn: sqlite3.Connection) -> Iterator[sqlite3.Connection]:
    """
    Run a block inside an explicit transaction, including DDL.
    
    Usage:
        with transaction(conn):
            conn.execute(...)
    """
    conn.execute("BEGIN")
    try:
        yield conn
        conn.commit()
    except Exception:
        conn.rollback()
        raise
