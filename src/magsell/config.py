"""
Configuration constants for MagSell.
These are immutable system constants, not runtime configuration.
"""

# Database location (resolved under the user's home directory)
DB_DIR_NAME = ".magsell"
DB_FILE_NAME = "magsell.db"
CONNECTION_SCHEME = "sqlite:///"

# Pragmas applied to every connection handed out
SQLITE_PRAGMAS = (
    ("foreign_keys", "OFF"),  # sales.product_id is a loose reference
    ("trusted_schema", "OFF"),
    ("journal_mode", "WAL"),
)

# User roles
DEFAULT_ROLE = "user"
ADMIN_ROLE = "admin"
VALID_ROLES = frozenset([DEFAULT_ROLE, ADMIN_ROLE])

# Default administrative account seeded at startup
DEFAULT_ADMIN_USERNAME = "admin"
DEFAULT_ADMIN_PASSWORD = "1234"

# Password hashing
SALT_LENGTH_BYTES = 16
PASSWORD_ENCODING = "utf-8"

# Logging
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
