"""
MagSell - local database bootstrap

Locates the SQLite database file, creates and migrates its schema, and
hands out one connection per caller operation.

Main exports:
- DatabaseService: Schema lifecycle and connection provider
- UserService: User accounts and default admin seeding
- init_database: Startup wiring for both
"""

from .service import DatabaseService
from .users import User, UserService
from .bootstrap import init_database
from .errors import *
from .config import *

__version__ = "0.1.0"

__all__ = [
    'DatabaseService',
    'User',
    'UserService',
    'init_database',
]
