"""Password hashing and JWT creation/verification for authentication."""

import base64
import hashlib
import hmac
from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt

from versex.core.config import settings

# Min/max lengths for username and password validation.
USERNAME_MIN_LEN = 1
USERNAME_MAX_LEN = 255
PASSWORD_MIN_LEN = 8
PASSWORD_MAX_LEN = 128


def _pepper_password(plain_password: str, pepper: str) -> bytes:
    # HMAC-SHA256 output is 44 base64 bytes, well under bcrypt's 72-byte limit.
    digest = hmac.new(
        pepper.encode("utf-8"), plain_password.encode("utf-8"), hashlib.sha256
    ).digest()
    return base64.b64encode(digest)


def generate_salt(rounds: int | None = None) -> str:
    """Return a fresh bcrypt salt; the cost defaults to BCRYPT_ROUNDS."""
    return bcrypt.gensalt(rounds=rounds or settings.BCRYPT_ROUNDS).decode("utf-8")


def hash_password(plain_password: str, salt: str, pepper: str | None = None) -> str:
    """Hash a plain-text password with the given salt and the server pepper."""
    if pepper is None:
        pepper = settings.AUTH_PEPPER.get_secret_value()
    peppered = _pepper_password(plain_password, pepper)
    return bcrypt.hashpw(peppered, salt.encode("utf-8")).decode("utf-8")


def verify_password(plain_password: str, hashed: str, pepper: str | None = None) -> bool:
    """Verify a plain password against a stored hash."""
    if pepper is None:
        pepper = settings.AUTH_PEPPER.get_secret_value()
    peppered = _pepper_password(plain_password, pepper)
    try:
        return bcrypt.checkpw(peppered, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def create_access_token(sub: str | int, role: str) -> str:
    """Create a JWT access token with sub (user id), role, and exp."""
    now = datetime.now(UTC)
    expire = now + timedelta(minutes=settings.JWT_EXPIRE_MINUTES)
    payload: dict[str, Any] = {
        "sub": str(sub),
        "role": role,
        "exp": expire,
        "iat": now,
    }
    secret = settings.JWT_SECRET.get_secret_value()
    return jwt.encode(
        payload,
        secret,
        algorithm=settings.JWT_ALGORITHM,
    )


def decode_access_token(token: str) -> dict[str, Any]:
    """
    Decode and validate JWT; return payload (sub, role, exp, iat).
    Raises jwt.PyJWTError on invalid or expired token.
    """
    secret = settings.JWT_SECRET.get_secret_value()
    return jwt.decode(
        token,
        secret,
        algorithms=[settings.JWT_ALGORITHM],
    )
