"""
Password hashing and login tokens.
"""
import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional

from passlib.context import CryptContext

from ..utils.config import TOKEN_TTL_MINUTES

pwd_context: CryptContext = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    """Hash a plain-text password with bcrypt."""
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    """Check a plain-text password against its stored hash."""
    return pwd_context.verify(password, password_hash)


def new_token() -> str:
    """Random 64-character hex login token."""
    return secrets.token_hex(32)


def token_expiry(now: Optional[datetime] = None, ttl_minutes: int = TOKEN_TTL_MINUTES) -> datetime:
    base = now or datetime.now(timezone.utc)
    return base + timedelta(minutes=ttl_minutes)
