"""Authentication helpers for dashboard users.

This module provides a minimal username/password layer on top of the
storage backend. Passwords are stored as salted PBKDF2 hashes.
"""

from __future__ import annotations

import hashlib
import hmac
import logging
import os
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from codecraft.models import UserRecord
    from codecraft.storage import Storage

logger = logging.getLogger(__name__)

_PBKDF2_ITERATIONS = 100_000
_SALT_BYTES = 16

USERNAME_TAKEN = "Username already exists."


def hash_password(password: str) -> str:
    """Return a salted PBKDF2 hash for the given password.

    The result is stored as ``<salt_hex>:<hash_hex>``.
    """
    salt = os.urandom(_SALT_BYTES)
    derived = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, _PBKDF2_ITERATIONS)
    return f"{salt.hex()}:{derived.hex()}"


def verify_password(password: str, stored_hash: str) -> bool:
    """Verify a password against a stored ``salt:hash`` string."""
    try:
        salt_hex, hash_hex = stored_hash.split(":", 1)
    except ValueError:
        return False

    try:
        salt = bytes.fromhex(salt_hex)
        expected = bytes.fromhex(hash_hex)
    except ValueError:
        return False

    candidate = hashlib.pbkdf2_hmac(
        "sha256",
        password.encode("utf-8"),
        salt,
        _PBKDF2_ITERATIONS,
    )
    return hmac.compare_digest(candidate, expected)


def create_user(
    storage: Storage, username: str, password: str
) -> tuple[UserRecord | None, str | None]:
    """Create a new user account.

    Returns:
        Tuple of (created user, error message). On success, error is None.
    """
    username_clean = username.strip()
    if not username_clean:
        return None, "Username cannot be empty."
    if not password:
        return None, "Password cannot be empty."

    if storage.get_user_by_username(username_clean) is not None:
        return None, USERNAME_TAKEN

    user = storage.create_user(username_clean, hash_password(password))
    logger.info("Created user %s", username_clean)
    return user, None


def authenticate_user(storage: Storage, username: str, password: str) -> tuple[bool, str | None]:
    """Authenticate a user by username and password.

    Returns:
        Tuple of (success flag, error message). On success, error is None.
    """
    username_clean = username.strip()
    if not username_clean or not password:
        return False, "Username and password are required."

    user = storage.get_user_by_username(username_clean)
    if user is None or not verify_password(password, user.password_hash):
        logger.debug("Failed login attempt for %s", username_clean)
        return False, "Invalid username or password."

    return True, None
