"""
bcrypt password hashing.

The work factor comes from ``Settings.bcrypt_rounds``; bcrypt embeds it,
together with the salt, in the hash string itself.
"""

from __future__ import annotations

import bcrypt


def hash_password(password: str, rounds: int = 4) -> str:
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(password.encode(), salt).decode()


def verify_password(password: str, password_hash: str) -> bool:
    """True if *password* matches *password_hash*; a corrupt hash never matches."""
    try:
        return bcrypt.checkpw(password.encode(), password_hash.encode())
    except (ValueError, TypeError):
        return False
