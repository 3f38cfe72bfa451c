"""MongoDB transaction manager.

Requires a replica set or sharded cluster; standalone servers reject
multi-document transactions.
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict

from motor.motor_asyncio import AsyncIOMotorClient

from .base import current_session

logger = logging.getLogger(__name__)


class MongoTransactionManager:
    """ITransactionManager backed by a client session transaction.

    Repositories built on MongoBaseRepository pick up the open session
    automatically, so every write inside atomic() joins the transaction.
    """

    def __init__(self, client: AsyncIOMotorClient[Dict[str, Any]]):
        self._client = client

    @asynccontextmanager
    async def atomic(self) -> AsyncIterator[None]:
        async with await self._client.start_session() as session:
            async with session.start_transaction():
                token = current_session.set(session)
                try:
                    yield
                except Exception as e:
                    logger.warning("Transaction aborted", extra={"error": str(e)})
                    raise
                finally:
                    current_session.reset(token)
