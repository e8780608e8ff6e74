"""User accounts for MagSell."""

from .passwords import generate_salt, hash_password, verify_password
from .user_store import User, UserService

__all__ = [
    'User',
    'UserService',
    'generate_salt',
    'hash_password',
    'verify_password',
]
