"""
Authentication module data models.

``AccountRecord`` and ``Session`` are the stored shapes; ``Account`` (in
shared.models) is the public projection handed to everything else.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from shared.models import Account, CamelModel


class AccountRecord(BaseModel):
    """Stored account, including the password hash."""

    model_config = {"frozen": True}

    id: str
    email: str
    password_hash: str
    first_name: str
    last_name: str
    phone: str = ""
    created_at: datetime

    def to_public(self) -> Account:
        """Strip the credential."""
        return Account(
            id=self.id,
            email=self.email,
            first_name=self.first_name,
            last_name=self.last_name,
            phone=self.phone,
            created_at=self.created_at,
        )


class Session(BaseModel):
    """
    A bearer-token session.

    Valid iff it is present in the store and ``now < expires_at``.
    """

    model_config = {"frozen": True}

    token: str
    user_id: str
    email: str
    created_at: datetime
    expires_at: datetime

    def is_expired(self, now: datetime) -> bool:
        return now >= self.expires_at


class SignupRequest(CamelModel):
    """Signup body. Empty fields are rejected by the service, not the schema."""

    email: str = ""
    password: str = ""
    first_name: str = ""
    last_name: str = ""


class LoginRequest(CamelModel):
    email: str = ""
    password: str = ""


class LogoutRequest(CamelModel):
    token: Optional[str] = None


class AuthResult(CamelModel):
    """Account plus the session minted for it."""

    account: Account
    session: Session


class AuthResponse(CamelModel):
    """Envelope returned by signup and login."""

    success: bool = True
    user: Account
    token: str
    expires_at: datetime = Field(..., description="Session expiry (UTC)")


class MeResponse(CamelModel):
    success: bool = True
    user: Account


class LogoutResponse(CamelModel):
    success: bool = True
    message: str = "Logged out successfully"
