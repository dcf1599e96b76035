"""
Supabase-backed account and session stores.

Tables (created out of band):

    storefront_accounts(id text primary key, email text unique not null,
        password_hash text not null, first_name text, last_name text,
        phone text default '', created_at timestamptz not null)

    storefront_sessions(token text primary key, user_id text not null,
        email text not null, created_at timestamptz not null,
        expires_at timestamptz not null)

The unique constraint on email makes ``add`` atomic across processes.
"""

import logging
from datetime import datetime
from typing import Any, Optional

from postgrest.exceptions import APIError

from shared.repository import BaseRepository

from .exceptions import EmailTakenError
from .models import AccountRecord, Session

logger = logging.getLogger(__name__)

# Postgres unique_violation
UNIQUE_VIOLATION = "23505"


class SupabaseAccountStore(BaseRepository[AccountRecord]):
    """Account storage in the ``storefront_accounts`` table."""

    table_name = "storefront_accounts"

    async def add(self, record: AccountRecord) -> None:
        try:
            self._table().insert(record.model_dump(mode="json")).execute()
        except APIError as e:
            if e.code == UNIQUE_VIOLATION:
                raise EmailTakenError(record.email) from e
            raise

    async def get_by_email(self, email: str) -> Optional[AccountRecord]:
        result = self._table().select("*").eq("email", email).execute()
        return self._map_to_record(result.data[0]) if result.data else None

    async def get_by_id(self, user_id: str) -> Optional[AccountRecord]:
        result = self._table().select("*").eq("id", user_id).execute()
        return self._map_to_record(result.data[0]) if result.data else None

    def _map_to_record(self, data: dict[str, Any]) -> AccountRecord:
        return AccountRecord(
            id=data["id"],
            email=data["email"],
            password_hash=data["password_hash"],
            first_name=data.get("first_name") or "",
            last_name=data.get("last_name") or "",
            phone=data.get("phone") or "",
            created_at=data["created_at"],
        )


class SupabaseSessionStore(BaseRepository[Session]):
    """Session storage in the ``storefront_sessions`` table."""

    table_name = "storefront_sessions"

    async def put(self, session: Session) -> None:
        self._table().upsert(session.model_dump(mode="json")).execute()

    async def get(self, token: str) -> Optional[Session]:
        result = self._table().select("*").eq("token", token).execute()
        if not result.data:
            return None
        data = result.data[0]
        return Session(
            token=data["token"],
            user_id=data["user_id"],
            email=data["email"],
            created_at=_parse_timestamp(data["created_at"]),
            expires_at=_parse_timestamp(data["expires_at"]),
        )

    async def delete(self, token: str) -> bool:
        result = self._table().delete().eq("token", token).execute()
        return bool(result.data)


def _parse_timestamp(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value).replace("Z", "+00:00"))
