"""Password hashing with bcrypt."""

from __future__ import annotations

import bcrypt as _bcrypt

from app.exceptions import MalformedHashError, PasswordHashingError

# ~tens of milliseconds per hash on current hardware
BCRYPT_ROUNDS = 10
MAX_PASSWORD_BYTES = 72


def hash_password(password: str) -> str:
    """Hash password with a fresh salt. The result embeds salt and cost."""
    secret = password.encode("utf-8")
    if len(secret) > MAX_PASSWORD_BYTES:
        # older bcrypt releases truncate silently
        raise PasswordHashingError("Password exceeds 72 bytes")
    try:
        hashed = _bcrypt.hashpw(secret, _bcrypt.gensalt(rounds=BCRYPT_ROUNDS))
    except ValueError as exc:
        raise PasswordHashingError("Failed to hash password") from exc
    return hashed.decode("utf-8")


def verify_password(password_hash: str, password: str) -> bool:
    """Return True if password matches the stored hash.

    Raises MalformedHashError when password_hash is not a bcrypt hash.
    """
    candidate = password.encode("utf-8")
    if len(candidate) > MAX_PASSWORD_BYTES:
        # Could never have been hashed
        return False
    try:
        return _bcrypt.checkpw(candidate, password_hash.encode("utf-8"))
    except ValueError as exc:
        raise MalformedHashError("Stored password hash is malformed") from exc
