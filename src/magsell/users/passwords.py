"""
Salted password hashing.
Hashes are base64(SHA-256(salt || password)); salts are random and base64-encoded.
"""

import base64
import os

from cryptography.hazmat.primitives import constant_time, hashes

from ..config import SALT_LENGTH_BYTES, PASSWORD_ENCODING


def generate_salt() -> str:
    """
    Generate a random salt.
    
    Returns:
        Base64-encoded salt string
    """
    return base64.b64encode(os.urandom(SALT_LENGTH_BYTES)).decode('ascii')


def hash_password(password: str, salt: str) -> str:
    """
    Hash a password with a salt.
    
    Args:
        password: Plain-text password
        salt: Base64-encoded salt
        
    Returns:
        Base64-encoded SHA-256 digest
        
    Raises:
        ValueError: If the salt is not valid base64
    """
    if not isinstance(password, str):
        raise TypeError(f"Expected str for password, got {type(password)}")
    
    try:
        salt_bytes = base64.b64decode(salt, validate=True)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid salt: {e}")
    
    digest = hashes.Hash(hashes.SHA256())
    digest.update(salt_bytes)
    digest.update(password.encode(PASSWORD_ENCODING))
    return base64.b64encode(digest.finalize()).decode('ascii')


def verify_password(password: str, salt: str, expected_hash: str) -> bool:
    """
    Check a password against a stored hash.
    
    Args:
        password: Plain-text password
        salt: Salt stored with the hash
        expected_hash: Stored base64 hash
        
    Returns:
        True if the password matches
    """
    try:
        actual = hash_password(password, salt)
    except ValueError:
        return False
    return constant_time.bytes_eq(actual.encode('ascii'), expected_hash.encode('ascii'))
