"""
In-memory account and session stores.

Both are plain dicts guarded by a lock, so concurrent logins never lose
a session and a reader never sees a half-written entry. Records are
frozen models and are replaced, never mutated.
"""

import threading
from typing import Optional

from .exceptions import EmailTakenError
from .models import AccountRecord, Session


class InMemoryAccountStore:
    """Accounts keyed by email, with a secondary id index."""

    def __init__(self) -> None:
        self._by_email: dict[str, AccountRecord] = {}
        self._email_by_id: dict[str, str] = {}
        self._lock = threading.Lock()

    async def add(self, record: AccountRecord) -> None:
        with self._lock:
            if record.email in self._by_email:
                raise EmailTakenError(record.email)
            self._by_email[record.email] = record
            self._email_by_id[record.id] = record.email

    async def get_by_email(self, email: str) -> Optional[AccountRecord]:
        with self._lock:
            return self._by_email.get(email)

    async def get_by_id(self, user_id: str) -> Optional[AccountRecord]:
        with self._lock:
            email = self._email_by_id.get(user_id)
            return self._by_email.get(email) if email else None

    def __len__(self) -> int:
        return len(self._by_email)


class InMemorySessionStore:
    """Sessions keyed by token. No background sweep; expiry is lazy."""

    def __init__(self) -> None:
        self._sessions: dict[str, Session] = {}
        self._lock = threading.Lock()

    async def put(self, session: Session) -> None:
        with self._lock:
            self._sessions[session.token] = session

    async def get(self, token: str) -> Optional[Session]:
        with self._lock:
            return self._sessions.get(token)

    async def delete(self, token: str) -> bool:
        with self._lock:
            return self._sessions.pop(token, None) is not None

    def __len__(self) -> int:
        return len(self._sessions)
