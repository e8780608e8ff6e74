"""
MagSell database service.

Owns the database location and schema lifecycle and hands out
connections. Query execution stays with the callers: every consumer opens
its own connection through this service and closes it when done.
"""

import sqlite3
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Callable, Dict, Iterator, Optional, Union

from .db.connection import open_connection
from .db.locator import resolve_db_path, connection_target
from .db.migrations import apply_migrations, create_schema, verify_schema
from .db.schema import get_table_names
from .errors import DatabaseError, InitializationError, NotInitializedError
from .utils.logger import get_logger

logger = get_logger(__name__)

SeedHook = Callable[[], Any]


class DatabaseService:
    """
    Bootstrap and connection provider for the local MagSell database.

    Lifecycle:
    - initialize(): locate the file, create the schema, migrate, seed
      (is_initialized turns True only after seeding has finished)
    - open_connection(): one new connection per caller operation
    - shutdown(): nothing is held, kept for symmetry with initialize()
    """

    def __init__(self, home: Optional[Union[str, Path]] = None):
        """
        Create an uninitialized service.

        Args:
            home: Base directory for the database (defaults to user home)
        """
        self._home = home
        self._db_path: Optional[Path] = None
        self._ready = False
        self._lock = threading.RLock()

    @property
    def is_initialized(self) -> bool:
        return self._ready

    @property
    def db_path(self) -> Path:
        """Resolved database file path."""
        if self._db_path is None:
            raise NotInitializedError("Database service is not initialized")
        return self._db_path

    @property
    def target(self) -> str:
        """Connection target string for the resolved database."""
        return connection_target(self.db_path)

    # ==================== Lifecycle ====================

    def initialize(self, seed_hook: Optional[SeedHook] = None):
        """
        Initialize the database. Safe to call more than once.

        Steps run in a fixed order: locate the file, create the tables,
        apply migrations, run the seed hook. Only the first two are fatal.

        Args:
            seed_hook: Called with no arguments once the schema is ready;
                raising or returning False is logged and tolerated

        Raises:
            InitializationError: If the database cannot be located,
                opened or given its schema
        """
        with self._lock:
            if self._ready:
                logger.debug(f"Database already initialized: {self.target}")
                return

            try:
                db_path = resolve_db_path(self._home)
            except OSError as e:
                logger.error(f"Cannot create database directory: {e}")
                raise InitializationError(f"Could not create database directory: {e}") from e

            logger.info(f"Connecting to database: {connection_target(db_path)}")
            try:
                conn = open_connection(db_path, isolation_level=None)
            except DatabaseError as e:
                logger.error(f"Cannot open database: {e}")
                raise InitializationError(f"Could not open database: {e}") from e

            try:
                create_schema(conn)
                logger.info("Database schema is ready")
                apply_migrations(conn)
            except DatabaseError as e:
                logger.error(f"Cannot create database schema: {e}")
                raise InitializationError(f"Could not initialize database: {e}") from e
            finally:
                conn.close()

            self._db_path = db_path

            if seed_hook is not None:
                self._run_seed_hook(seed_hook)
            self._ready = True

    def _run_seed_hook(self, seed_hook: SeedHook):
        try:
            result = seed_hook()
        except Exception as e:
            logger.warning(f"Default data seeding failed: {e}")
            return
        if result is False:
            logger.warning("Default data seeding reported failure")

    def shutdown(self):
        """Release resources. No connection is held, so this never fails."""
        logger.info("Database service shut down")

    # ==================== Connections ====================

    def open_connection(self) -> sqlite3.Connection:
        """
        Open a new connection to the initialized database.

        While initialize() runs, only the seed hook (on the initializing
        thread) gets connections; other threads wait until it finishes.

        Returns:
            A connection the caller must close

        Raises:
            NotInitializedError: If initialize() has not succeeded
            DatabaseError: If the connection cannot be opened
        """
        db_path = self._db_path
        if not self._ready:
            with self._lock:
                db_path = self._db_path
        if db_path is None:
            raise NotInitializedError(
                "Database service is not initialized. Call initialize() first."
            )
        return open_connection(db_path)

    @contextmanager
    def connection(self) -> Iterator[sqlite3.Connection]:
        """
        Scoped connection: commits on success, rolls back on error.

        Usage:
            with service.connection() as conn:
                conn.execute(...)
        """
        conn = self.open_connection()
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    # ==================== Utilities ====================

    def health_check(self) -> Dict[str, Any]:
        """
        Report schema validity and table row counts.

        Returns:
            Health status dictionary
        """
        if not self.is_initialized:
            return {'status': 'uninitialized'}
        try:
            with self.connection() as conn:
                schema_valid = verify_schema(conn)
                counts = {
                    table: conn.execute(f"SELECT COUNT(*) FROM {table}").fetchone()[0]
                    for table in get_table_names()
                }
            return {
                'status': 'healthy' if schema_valid else 'unhealthy',
                'path': str(self._db_path),
                'schema_valid': schema_valid,
                'tables': counts,
            }
        except Exception as e:
            return {
                'status': 'error',
                'error': str(e),
            }

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.shutdown()
