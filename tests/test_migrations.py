"""
Tests for forward migrations on databases created by older versions.
"""

import logging
import sqlite3

from magsell import DatabaseService
from magsell.config import DB_DIR_NAME, DB_FILE_NAME
from magsell.db import migrations
from magsell.db.migrations import AddColumn, apply_migrations, get_table_columns, verify_schema
from magsell.db.schema import TABLE_COLUMNS


OLD_PRODUCTS_TABLE = """
CREATE TABLE products (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL UNIQUE,
    description TEXT,
    price DECIMAL(10,2) NOT NULL,
    quantity INTEGER NOT NULL,
    category TEXT,
    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
)
"""


def _create_old_database(home):
    db_path = home / DB_DIR_NAME / DB_FILE_NAME
    db_path.parent.mkdir(parents=True)
    conn = sqlite3.connect(db_path)
    conn.execute(OLD_PRODUCTS_TABLE)
    conn.execute(
        "INSERT INTO products (name, price, quantity, category) VALUES ('Eclair', 6.0, 12, 'pastry')"
    )
    conn.commit()
    conn.close()
    return db_path


class TestUpgrade:
    """Test upgrading a database created before image_path existed."""
    
    def test_image_path_added(self, home):
        """Test that the missing column is added."""
        _create_old_database(home)
        db = DatabaseService(home)
        db.initialize()
        
        with db.connection() as conn:
            columns = get_table_columns(conn, 'products')
            assert 'image_path' in columns
            assert set(columns) == set(TABLE_COLUMNS['products'])
            assert verify_schema(conn)
    
    def test_existing_rows_preserved(self, home):
        """Test that upgrading keeps product data."""
        _create_old_database(home)
        db = DatabaseService(home)
        db.initialize()
        
        with db.connection() as conn:
            row = conn.execute("SELECT name, quantity, image_path FROM products").fetchone()
        
        assert row['name'] == 'Eclair'
        assert row['quantity'] == 12
        assert row['image_path'] is None
    
    def test_missing_tables_created(self, home):
        """Test that tables added in later versions are created."""
        _create_old_database(home)
        db = DatabaseService(home)
        db.initialize()
        
        with db.connection() as conn:
            for table in ('users', 'sales', 'customers'):
                assert get_table_columns(conn, table) == list(TABLE_COLUMNS[table])
    
    def test_upgrade_repeated(self, home):
        """Test that a second run after the upgrade is harmless."""
        _create_old_database(home)
        DatabaseService(home).initialize()
        db = DatabaseService(home)
        db.initialize()
        
        with db.connection() as conn:
            assert get_table_columns(conn, 'products').count('image_path') == 1


class TestAddColumn:
    """Test the additive column migration."""
    
    def test_apply_once(self):
        """Test that the column is added only when absent."""
        conn = sqlite3.connect(":memory:")
        conn.execute("CREATE TABLE products (id INTEGER PRIMARY KEY)")
        migration = AddColumn('products', 'image_path', 'TEXT')
        
        assert not migration.is_applied(conn)
        assert migration.apply(conn) is True
        assert migration.is_applied(conn)
        assert migration.apply(conn) is False
        conn.close()
    
    def test_statement(self):
        """Test the generated ALTER statement."""
        migration = AddColumn('products', 'image_path', 'TEXT')
        
        assert migration.statement == "ALTER TABLE products ADD COLUMN image_path TEXT"


class TestTolerantMigrations:
    """Test that failing migrations never abort initialization."""
    
    def test_failure_logged_and_skipped(self, monkeypatch, caplog):
        """Test that a failing migration is logged at debug and skipped."""
        monkeypatch.setattr(migrations, "MIGRATIONS", (
            AddColumn('missing_table', 'extra', 'TEXT'),
            AddColumn('products', 'image_path', 'TEXT'),
        ))
        conn = sqlite3.connect(":memory:")
        conn.execute("CREATE TABLE products (id INTEGER PRIMARY KEY)")
        
        with caplog.at_level(logging.DEBUG, logger="magsell.db.migrations"):
            applied = apply_migrations(conn)
        
        assert [m.column for m in applied] == ['image_path']
        assert any(
            r.levelno == logging.DEBUG and 'missing_table' in r.getMessage()
            for r in caplog.records
        )
        conn.close()
    
    def test_initialize_survives_failing_migration(self, home, monkeypatch):
        """Test that initialize succeeds when a migration cannot apply."""
        monkeypatch.setattr(migrations, "MIGRATIONS", (
            AddColumn('missing_table', 'extra', 'TEXT'),
        ))
        db = DatabaseService(home)
        db.initialize()
        
        assert db.is_initialized


class TestVerifySchema:
    """Test schema verification."""
    
    def test_incomplete_schema(self):
        """Test that a missing table fails verification."""
        conn = sqlite3.connect(":memory:")
        conn.execute(OLD_PRODUCTS_TABLE)
        
        assert not verify_schema(conn)
        conn.close()
    
    def test_complete_schema(self, service):
        """Test that an initialized database passes verification."""
        with service.connection() as conn:
            assert verify_schema(conn)
