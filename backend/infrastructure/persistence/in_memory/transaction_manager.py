"""In-memory transaction manager.

Snapshots the participating stores when a transaction opens and restores
them if the block raises.
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Protocol

logger = logging.getLogger(__name__)


class SupportsSnapshot(Protocol):
    """Store whose whole state can be copied and put back."""

    def snapshot(self) -> Any: ...

    def restore(self, state: Any) -> None: ...


class InMemoryTransactionManager:
    """
    In-memory implementation of ITransactionManager.

    Thread safety: NOT thread-safe; nested atomic() blocks each keep their
    own snapshot.

    Example:
        >>> tx = InMemoryTransactionManager(profiles, logs)
        >>> async with tx.atomic():
        ...     await profiles.save_profile(profile)
        ...     await logs.delete_all_entries(profile.account_id)
    """

    def __init__(self, *stores: SupportsSnapshot) -> None:
        self._stores = stores

    @asynccontextmanager
    async def atomic(self) -> AsyncIterator[None]:
        snapshots = [(store, store.snapshot()) for store in self._stores]
        try:
            yield
        except Exception as e:
            for store, state in snapshots:
                store.restore(state)
            logger.warning(
                "Transaction rolled back",
                extra={"store_count": len(snapshots), "error": str(e)},
            )
            raise
