"""
Authentication module interfaces.

Other modules should depend on IAuthService, not the concrete implementation.
Storage sits behind IAccountStore and ISessionStore so the in-memory maps
can be swapped for a database without touching call sites.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import Account

from .models import AccountRecord, AuthResult, Session


@runtime_checkable
class IAccountStore(Protocol):
    """Account storage keyed by id and by (normalized) email."""

    async def add(self, record: AccountRecord) -> None:
        """
        Insert a new account.

        Raises:
            EmailTakenError: If an account with the same email exists.
                The check and the insert are atomic.
        """
        ...

    async def get_by_email(self, email: str) -> Optional[AccountRecord]:
        ...

    async def get_by_id(self, user_id: str) -> Optional[AccountRecord]:
        ...


@runtime_checkable
class ISessionStore(Protocol):
    """Session storage keyed by token."""

    async def put(self, session: Session) -> None:
        ...

    async def get(self, token: str) -> Optional[Session]:
        ...

    async def delete(self, token: str) -> bool:
        """Remove a session. Returns whether anything was removed."""
        ...


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for account and session operations.

    Every failure is raised as a typed auth exception; nothing here is
    allowed to take the host process down.
    """

    async def create_account(
        self,
        email: str,
        password: str,
        first_name: str,
        last_name: str,
    ) -> Account:
        """
        Create an account. Does not create a session.

        Raises:
            MissingFieldError: If any field is empty
            InvalidEmailError: If the email is malformed
            WeakPasswordError: If the password is too short
            EmailTakenError: If the email is already registered
        """
        ...

    async def authenticate(self, email: str, password: str) -> Session:
        """
        Check credentials and mint a fresh session.

        Raises:
            InvalidCredentialsError: If the email is unknown or the password is wrong
        """
        ...

    async def invalidate(self, token: Optional[str]) -> None:
        """Remove a session. Idempotent; never raises for unknown tokens."""
        ...

    async def resolve(self, token: Optional[str]) -> Account:
        """
        Return the account owning a live session.

        Raises:
            NotAuthenticatedError: If no session exists for the token
            SessionExpiredError: If the session has expired (it is purged)
        """
        ...

    async def signup(
        self,
        email: str,
        password: str,
        first_name: str,
        last_name: str,
    ) -> AuthResult:
        """Create an account and log it in."""
        ...

    async def login(self, email: str, password: str) -> AuthResult:
        """Authenticate and return the account with its new session."""
        ...
