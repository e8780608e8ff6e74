"""
Domain-specific exceptions for MagSell.
All exceptions are explicit and carry meaningful context.
"""


class MagSellError(Exception):
    """Base exception for all MagSell errors."""
    pass


class DatabaseError(MagSellError):
    """Base exception for database-related errors."""
    pass


class InitializationError(DatabaseError):
    """Raised when the database cannot be located, opened or created."""
    pass


class NotInitializedError(DatabaseError):
    """Raised when a connection is requested before initialization."""
    pass


class SchemaError(DatabaseError):
    """Raised when database schema operations fail."""
    pass


class MigrationError(DatabaseError):
    """Raised when a database migration fails."""
    pass


class UserError(MagSellError):
    """Base exception for user-related errors."""
    pass


class UserNotFoundError(UserError):
    """Raised when a user does not exist."""
    pass


class UserAlreadyExistsError(UserError):
    """Raised when attempting to create a duplicate username."""
    pass
