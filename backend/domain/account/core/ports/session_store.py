"""Session store port (interface)."""

from abc import ABC, abstractmethod
from typing import Optional


class ISessionStore(ABC):
    """Signed-in session state for one client.

    Passed explicitly into the operations that need it instead of being
    read from a global.
    """

    @abstractmethod
    async def current_account_id(self) -> Optional[str]:
        """Account signed in on this session, if any."""
        pass

    @abstractmethod
    async def start_session(self, account_id: str) -> None:
        """Record a successful sign-in."""
        pass

    @abstractmethod
    async def clear_session(self) -> None:
        """Sign out."""
        pass

    @abstractmethod
    async def mark_account_just_deleted(self) -> None:
        """Arm the one-shot "account deleted" notice."""
        pass

    @abstractmethod
    async def consume_account_deleted_notice(self) -> bool:
        """Return True once after mark_account_just_deleted, then False."""
        pass
