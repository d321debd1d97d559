"""
Registration and login.

Depends only on the UserRepository interface; the interview engine does not
use this module.
"""
import threading
from datetime import datetime, timezone
from typing import Dict, Optional, Tuple

from .repository import InMemoryUserRepository, User, UserRepository
from .security import hash_password, new_token, token_expiry, verify_password
from ..interview.errors import AuthenticationError, InputError
from ..utils.logger import setup_logger

logger = setup_logger("auth_service")


class AuthService:
    def __init__(self, repository: Optional[UserRepository] = None):
        self.repository = repository if repository is not None else InMemoryUserRepository()
        self._tokens: Dict[str, Tuple[str, datetime]] = {}
        self._lock = threading.Lock()

    def register(self, email: str, password: str) -> User:
        """
        Create a user account.

        Raises:
            InputError: Missing email/password or email already registered
        """
        email = (email or "").strip()
        if not email or not password:
            raise InputError("Email and password are required")
        if self.repository.find(email) is not None:
            raise InputError(f"User already registered: {email}")

        user = User(email=email, password_hash=hash_password(password))
        self.repository.insert(user)
        logger.info(f"Registered user: {email}")
        return user

    def login(self, email: str, password: str) -> Dict[str, str]:
        """
        Verify credentials and issue a token.

        Raises:
            AuthenticationError: Unknown user or wrong password
        """
        user = self.repository.find((email or "").strip())
        if user is None or not password or not verify_password(password, user.password_hash):
            logger.warning(f"Failed login for: {email}")
            raise AuthenticationError("Invalid credentials")

        token = new_token()
        expires_at = token_expiry()
        with self._lock:
            self._tokens[token] = (user.email, expires_at)

        logger.info(f"User logged in: {user.email}")
        return {"token": token, "expires_at": expires_at.isoformat()}

    def resolve_token(self, token: str) -> Optional[str]:
        """Email for a live token, or None when unknown or expired."""
        with self._lock:
            entry = self._tokens.get(token)
            if entry is None:
                return None
            email, expires_at = entry
            if expires_at <= datetime.now(timezone.utc):
                del self._tokens[token]
                return None
            return email
