"""
Password hashing.

Hashes use argon2 through passlib so the scheme can be rotated later by
adding it to the context and marking the old one deprecated.
"""

import logging

from passlib.context import CryptContext

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain: str, hashed: str) -> bool:
    """Check a password against a stored hash. Unreadable hashes never match."""
    try:
        return pwd_context.verify(plain, hashed)
    except ValueError:
        logger.warning("Stored password hash could not be identified")
        return False
