"""
Authentication module.

Handles account creation, password login, bearer-token sessions and
token resolution.

Public API:
- IAuthService: Interface for auth operations
- IAccountStore / ISessionStore: Pluggable storage
- AuthService: Default implementation
- Auth exceptions: InvalidCredentialsError, SessionExpiredError, etc.
"""

from .interfaces import IAuthService, IAccountStore, ISessionStore
from .models import AccountRecord, Session, AuthResult
from .service import AuthService
from .store import InMemoryAccountStore, InMemorySessionStore
from .exceptions import (
    MissingFieldError,
    InvalidEmailError,
    WeakPasswordError,
    EmailTakenError,
    InvalidCredentialsError,
    NotAuthenticatedError,
    SessionExpiredError,
)

__all__ = [
    # Interfaces
    "IAuthService",
    "IAccountStore",
    "ISessionStore",
    # Models
    "AccountRecord",
    "Session",
    "AuthResult",
    # Implementations
    "AuthService",
    "InMemoryAccountStore",
    "InMemorySessionStore",
    # Exceptions
    "MissingFieldError",
    "InvalidEmailError",
    "WeakPasswordError",
    "EmailTakenError",
    "InvalidCredentialsError",
    "NotAuthenticatedError",
    "SessionExpiredError",
]
