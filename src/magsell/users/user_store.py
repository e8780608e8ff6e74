"""
User account storage and the default administrator seed.
"""

import sqlite3
from typing import Any, Dict, Optional

from ..config import (
    ADMIN_ROLE,
    DEFAULT_ADMIN_PASSWORD,
    DEFAULT_ADMIN_USERNAME,
    DEFAULT_ROLE,
    VALID_ROLES,
)
from ..errors import UserAlreadyExistsError, UserError, UserNotFoundError
from ..service import DatabaseService
from ..utils.logger import get_logger
from .passwords import generate_salt, hash_password, verify_password

logger = get_logger(__name__)


class User:
    """
    Represents an application user.
    """

    def __init__(
        self,
        user_id: int,
        username: str,
        password_hash: str,
        salt: str,
        role: str = DEFAULT_ROLE,
        created_at: Optional[str] = None,
    ):
        self.user_id = user_id
        self.username = username
        self.password_hash = password_hash
        self.salt = salt
        self.role = role
        self.created_at = created_at

    @property
    def is_admin(self) -> bool:
        return (self.role or '').lower() == ADMIN_ROLE

    @classmethod
    def from_row(cls, row: sqlite3.Row) -> 'User':
        return cls(
            user_id=row['id'],
            username=row['username'],
            password_hash=row['password_hash'],
            salt=row['salt'],
            role=row['role'],
            created_at=row['created_at'],
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert user to dictionary (without credentials)."""
        return {
            'id': self.user_id,
            'username': self.username,
            'role': self.role,
            'created_at': self.created_at,
        }


class UserService:
    """
    Manages user accounts. Each operation uses its own connection.
    """

    def __init__(self, db: DatabaseService):
        """
        Initialize user service.

        Args:
            db: Database service providing connections
        """
        self.db = db

    def get_user_by_username(self, username: str) -> Optional[User]:
        """
        Look up a user by username.

        Returns:
            User object or None
        """
        with self.db.connection() as conn:
            row = conn.execute(
                "SELECT * FROM users WHERE username = ?",
                (username,)
            ).fetchone()
        return User.from_row(row) if row else None

    def create_user(self, username: str, password: str, role: str = DEFAULT_ROLE) -> User:
        """
        Create a new user with a freshly salted password.

        Args:
            username: Unique username
            password: Plain-text password
            role: 'user' or 'admin'

        Returns:
            Created User object

        Raises:
            UserAlreadyExistsError: If the username is taken
            UserError: If the role is unknown
        """
        if role not in VALID_ROLES:
            raise UserError(f"Invalid role: {role}")

        salt = generate_salt()
        password_hash = hash_password(password, salt)
        try:
            with self.db.connection() as conn:
                conn.execute(
                    """
                    INSERT INTO users (username, password_hash, salt, role)
                    VALUES (?, ?, ?, ?)
                    """,
                    (username, password_hash, salt, role)
                )
        except sqlite3.IntegrityError as e:
            raise UserAlreadyExistsError(f"User {username} already exists") from e

        logger.info(f"Created user: {username} role={role}")
        return self.get_user_by_username(username)

    def authenticate(self, username: str, password: str) -> bool:
        """
        Check a username/password pair.

        Returns:
            True if the user exists and the password matches
        """
        user = self.get_user_by_username(username)
        if user is None:
            return False
        return verify_password(password, user.salt, user.password_hash)

    def update_password(self, username: str, new_password: str):
        """
        Replace a user's password (and salt).

        Raises:
            UserNotFoundError: If the user does not exist
        """
        salt = generate_salt()
        password_hash = hash_password(new_password, salt)
        with self.db.connection() as conn:
            cursor = conn.execute(
                "UPDATE users SET password_hash = ?, salt = ? WHERE username = ?",
                (password_hash, salt, username)
            )
            if cursor.rowcount == 0:
                raise UserNotFoundError(f"User {username} not found")
        logger.info(f"Updated password for user: {username}")

    def list_users(self) -> list[User]:
        """
        List all users ordered by username.

        Returns:
            List of User objects
        """
        with self.db.connection() as conn:
            rows = conn.execute("SELECT * FROM users ORDER BY username").fetchall()
        return [User.from_row(row) for row in rows]

    def delete_user(self, user_id: int):
        """
        Delete a user.

        Raises:
            UserNotFoundError: If the user does not exist
        """
        with self.db.connection() as conn:
            cursor = conn.execute("DELETE FROM users WHERE id = ?", (user_id,))
            if cursor.rowcount == 0:
                raise UserNotFoundError(f"User with ID {user_id} not found")
        logger.info(f"Deleted user with ID: {user_id}")

    def ensure_default_admin(self) -> bool:
        """
        Make sure the default administrator exists with the default password.

        Creates the account when missing and resets its password when the
        default no longer authenticates.

        Returns:
            True once the account is in place
        """
        admin = self.get_user_by_username(DEFAULT_ADMIN_USERNAME)
        if admin is None:
            self.create_user(DEFAULT_ADMIN_USERNAME, DEFAULT_ADMIN_PASSWORD, ADMIN_ROLE)
            logger.info(f"Created default admin user '{DEFAULT_ADMIN_USERNAME}'")
        elif not verify_password(DEFAULT_ADMIN_PASSWORD, admin.salt, admin.password_hash):
            logger.info("Resetting admin password to default")
            self.update_password(DEFAULT_ADMIN_USERNAME, DEFAULT_ADMIN_PASSWORD)
        return True
