"""
Database schema definitions for MagSell.
Every statement is safe to run against a database that already has the table.
"""

USERS_TABLE = """
CREATE TABLE IF NOT EXISTS users (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    username TEXT NOT NULL UNIQUE,
    password_hash TEXT NOT NULL,
    salt TEXT NOT NULL,
    role TEXT DEFAULT 'user',
    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
)
"""

PRODUCTS_TABLE = """
CREATE TABLE IF NOT EXISTS products (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL UNIQUE,
    description TEXT,
    price DECIMAL(10,2) NOT NULL,
    quantity INTEGER NOT NULL,
    category TEXT,
    image_path TEXT,
    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
)
"""

SALES_TABLE = """
CREATE TABLE IF NOT EXISTS sales (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    product_id INTEGER NOT NULL,
    product_name TEXT NOT NULL,
    quantity INTEGER NOT NULL,
    unit_price DECIMAL(10,2) NOT NULL,
    total_price DECIMAL(10,2) NOT NULL,
    sale_date TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    notes TEXT,
    FOREIGN KEY (product_id) REFERENCES products(id)
)
"""

CUSTOMERS_TABLE = """
CREATE TABLE IF NOT EXISTS customers (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    email TEXT,
    phone TEXT,
    address TEXT,
    first_purchase TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    last_purchase TIMESTAMP,
    notes TEXT
)
"""

# Columns every table must expose once initialization has finished
TABLE_COLUMNS = {
    'users': (
        'id', 'username', 'password_hash', 'salt', 'role', 'created_at',
    ),
    'products': (
        'id', 'name', 'description', 'price', 'quantity', 'category',
        'image_path', 'created_at', 'updated_at',
    ),
    'sales': (
        'id', 'product_id', 'product_name', 'quantity', 'unit_price',
        'total_price', 'sale_date', 'notes',
    ),
    'customers': (
        'id', 'name', 'email', 'phone', 'address', 'first_purchase',
        'last_purchase', 'notes',
    ),
}


def get_schema_statements() -> list[str]:
    """
    Get all schema creation statements in order.
    
    Referenced tables come before the tables that reference them.
    
    Returns:
        List of SQL statements to create schema
    """
    return [
        USERS_TABLE,
        PRODUCTS_TABLE,
        SALES_TABLE,
        CUSTOMERS_TABLE,
    ]


def get_table_names() -> list[str]:
    """Names of all tables managed by the schema, in creation order."""
    return list(TABLE_COLUMNS)
