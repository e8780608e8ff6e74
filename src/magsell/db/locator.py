"""
Database file location for MagSell.
The database lives in a dot-directory under the user's home.
"""

from pathlib import Path
from typing import Optional, Union

from ..config import DB_DIR_NAME, DB_FILE_NAME, CONNECTION_SCHEME


def resolve_db_path(home: Optional[Union[str, Path]] = None) -> Path:
    """
    Resolve the database file path, creating its directory if needed.
    
    Args:
        home: Base directory (defaults to the current user's home)
        
    Returns:
        Absolute path to the database file
        
    Raises:
        OSError: If the database directory cannot be created
    """
    base = Path(home) if home is not None else Path.home()
    db_dir = base.expanduser().resolve() / DB_DIR_NAME
    db_dir.mkdir(parents=True, exist_ok=True)
    return db_dir / DB_FILE_NAME


def connection_target(db_path: Union[str, Path]) -> str:
    """Render the connection target string for a database path."""
    return f"{CONNECTION_SCHEME}{Path(db_path)}"
