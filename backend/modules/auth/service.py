"""
Authentication service implementation.

Owns the account/session lifecycle: signup, login, logout and token
resolution. Sessions expire lazily: an expired session is only noticed,
and purged, when someone tries to use it.
"""

import logging
import secrets
import uuid
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from email_validator import EmailNotValidError, validate_email

from shared.models import Account

from .interfaces import IAccountStore, IAuthService, ISessionStore
from .models import AccountRecord, AuthResult, Session
from .passwords import PasswordHashing
from .exceptions import (
    InvalidCredentialsError,
    InvalidEmailError,
    MissingFieldError,
    NotAuthenticatedError,
    SessionExpiredError,
    WeakPasswordError,
)

logger = logging.getLogger(__name__)

DEFAULT_SESSION_TTL = timedelta(days=7)
DEFAULT_MIN_PASSWORD_LENGTH = 8


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def normalize_email(email: str) -> str:
    return email.strip().lower()


def generate_token() -> str:
    """256 bits from the OS CSPRNG, URL-safe."""
    return secrets.token_urlsafe(32)


def _token_hint(token: str) -> str:
    return f"{token[:6]}..."


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Storage is injected, so the same service runs over the in-memory
    stores (default, tests) or the Supabase stores.
    """

    def __init__(
        self,
        accounts: IAccountStore,
        sessions: ISessionStore,
        session_ttl: timedelta = DEFAULT_SESSION_TTL,
        min_password_length: int = DEFAULT_MIN_PASSWORD_LENGTH,
        passwords: Optional[PasswordHashing] = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        self._accounts = accounts
        self._sessions = sessions
        self._session_ttl = session_ttl
        self._min_password_length = min_password_length
        self._passwords = passwords or PasswordHashing()
        self._clock = clock
        self._dummy_hash: Optional[str] = None

    async def create_account(
        self,
        email: str,
        password: str,
        first_name: str,
        last_name: str,
    ) -> Account:
        """Validate input, hash the password and persist a new account."""
        fields = {
            "email": email,
            "password": password,
            "firstName": first_name,
            "lastName": last_name,
        }
        missing = [name for name, value in fields.items() if not value or not value.strip()]
        if missing:
            raise MissingFieldError(missing)

        if len(password) < self._min_password_length:
            raise WeakPasswordError(self._min_password_length)

        email = normalize_email(email)
        try:
            validate_email(email, check_deliverability=False)
        except EmailNotValidError as e:
            raise InvalidEmailError(str(e))

        record = AccountRecord(
            id=str(uuid.uuid4()),
            email=email,
            password_hash=self._passwords.hash(password),
            first_name=first_name.strip(),
            last_name=last_name.strip(),
            created_at=self._clock(),
        )
        await self._accounts.add(record)

        logger.info(f"Account created: {record.id}")
        return record.to_public()

    async def authenticate(self, email: str, password: str) -> Session:
        """
        Verify credentials and mint a new session.

        Unknown emails still pay for a hash verification so both failure
        paths look the same from outside.
        """
        missing = [name for name, value in (("email", email), ("password", password)) if not value]
        if missing:
            raise MissingFieldError(missing)

        record = await self._accounts.get_by_email(normalize_email(email))
        if record is None:
            self._passwords.verify(self._get_dummy_hash(), password)
            raise InvalidCredentialsError()

        if not self._passwords.verify(record.password_hash, password):
            raise InvalidCredentialsError()

        now = self._clock()
        session = Session(
            token=generate_token(),
            user_id=record.id,
            email=record.email,
            created_at=now,
            expires_at=now + self._session_ttl,
        )
        await self._sessions.put(session)

        logger.info(f"Session issued for account {record.id}, expires {session.expires_at.isoformat()}")
        return session

    async def invalidate(self, token: Optional[str]) -> None:
        if not token:
            return
        if await self._sessions.delete(token):
            logger.info(f"Session {_token_hint(token)} invalidated")

    async def resolve(self, token: Optional[str]) -> Account:
        if not token:
            raise NotAuthenticatedError()

        session = await self._sessions.get(token)
        if session is None:
            raise NotAuthenticatedError()

        if session.is_expired(self._clock()):
            await self._sessions.delete(token)
            logger.info(f"Expired session {_token_hint(token)} purged")
            raise SessionExpiredError()

        record = await self._accounts.get_by_id(session.user_id)
        if record is None:
            # Orphaned session; drop it so it can't be retried.
            await self._sessions.delete(token)
            logger.warning(f"Session {_token_hint(token)} references missing account")
            raise NotAuthenticatedError("User not found")

        return record.to_public()

    async def signup(
        self,
        email: str,
        password: str,
        first_name: str,
        last_name: str,
    ) -> AuthResult:
        account = await self.create_account(email, password, first_name, last_name)
        session = await self.authenticate(account.email, password)
        return AuthResult(account=account, session=session)

    async def login(self, email: str, password: str) -> AuthResult:
        session = await self.authenticate(email, password)
        record = await self._accounts.get_by_id(session.user_id)
        if record is None:
            await self._sessions.delete(session.token)
            raise NotAuthenticatedError("User not found")
        return AuthResult(account=record.to_public(), session=session)

    async def seed_account(
        self,
        email: str,
        password: str,
        first_name: str = "Admin",
        last_name: str = "User",
    ) -> Optional[Account]:
        """Create an account unless it already exists. Used for the demo login."""
        if await self._accounts.get_by_email(normalize_email(email)):
            return None
        return await self.create_account(email, password, first_name, last_name)

    def _get_dummy_hash(self) -> str:
        if self._dummy_hash is None:
            self._dummy_hash = self._passwords.hash(secrets.token_hex(16))
        return self._dummy_hash
