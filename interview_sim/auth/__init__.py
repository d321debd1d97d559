"""
User accounts: repository interface, password hashing and login tokens.
"""
from .repository import InMemoryUserRepository, User, UserRepository
from .service import AuthService

__all__ = ['InMemoryUserRepository', 'User', 'UserRepository', 'AuthService']
