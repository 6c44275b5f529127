"""User lookup and bcrypt password handling."""

from __future__ import annotations

from typing import Any

import bcrypt

from taskboard.models import User

DEFAULT_COST = 10


class UserNotFoundError(LookupError):
    """Raised when no user has the requested name."""

    def __init__(self, username: str) -> None:
        super().__init__(f"user not found: {username}")
        self.username = username


def check_user_exists(conn: Any, username: str) -> User:
    """Return the stored user called ``username``."""
    cursor = conn.cursor()
    try:
        cursor.execute(
            "SELECT username, hashed_password FROM users WHERE username = ?",
            (username,),
        )
        row = cursor.fetchone()
    finally:
        cursor.close()
    if row is None:
        raise UserNotFoundError(username)
    name, hashed = row
    if isinstance(hashed, str):
        hashed = hashed.encode("utf-8")
    return User(username=name, hashed_password=bytes(hashed))


def compare_password_with_hash(password: str, hashed_password: bytes) -> bool:
    """Tell whether ``password`` matches the bcrypt hash.

    A malformed hash raises ValueError.
    """
    return bcrypt.checkpw(password.encode("utf-8"), bytes(hashed_password))


def generate_bcrypt_hash(password: str) -> bytes:
    """Hash ``password`` with bcrypt at the default cost."""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=DEFAULT_COST))