"""
Application startup wiring for the MagSell database.
"""

from pathlib import Path
from typing import Optional, Union

from .service import DatabaseService
from .users import UserService


def init_database(home: Optional[Union[str, Path]] = None) -> DatabaseService:
    """
    Create and initialize the database service, seeding the default admin.
    
    Args:
        home: Base directory for the database (defaults to user home)
        
    Returns:
        Initialized DatabaseService to pass to data-access components
        
    Raises:
        InitializationError: If the database cannot be created
    """
    db = DatabaseService(home)
    users = UserService(db)
    db.initialize(seed_hook=users.ensure_default_admin)
    return db
