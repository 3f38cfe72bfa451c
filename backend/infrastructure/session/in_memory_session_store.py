"""In-memory session store."""

from typing import Optional

from domain.account.core.ports.session_store import ISessionStore


class InMemorySessionStore(ISessionStore):
    """Session state for a single client, kept in memory."""

    def __init__(self) -> None:
        self._account_id: Optional[str] = None
        self._account_deleted = False

    async def current_account_id(self) -> Optional[str]:
        return self._account_id

    async def start_session(self, account_id: str) -> None:
        self._account_id = account_id

    async def clear_session(self) -> None:
        self._account_id = None

    async def mark_account_just_deleted(self) -> None:
        self._account_deleted = True

    async def consume_account_deleted_notice(self) -> bool:
        notice = self._account_deleted
        self._account_deleted = False
        return notice
