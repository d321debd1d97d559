"""
User storage behind a small repository interface.
"""
import threading
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Optional, Protocol


@dataclass
class User:
    email: str
    password_hash: str
    created_at: str = field(default_factory=lambda: datetime.now().isoformat())


class UserRepository(Protocol):
    def find(self, email: str) -> Optional[User]: ...

    def insert(self, user: User) -> None: ...


class InMemoryUserRepository:
    """Process-local user store; contents are lost on restart."""

    def __init__(self):
        self._users: Dict[str, User] = {}
        self._lock = threading.Lock()

    def find(self, email: str) -> Optional[User]:
        with self._lock:
            return self._users.get(email.lower())

    def insert(self, user: User) -> None:
        with self._lock:
            self._users[user.email.lower()] = user
