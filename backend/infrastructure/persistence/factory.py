"""Repository Factory for Persistence Layer.

Environment-based repository selection with graceful fallback to in-memory.
Strategy:
- .env (runtime): REPOSITORY_BACKEND=mongodb (production persistence)
- .env.test (pytest): REPOSITORY_BACKEND=inmemory (fast, isolated tests)
- Default: inmemory (safe fallback if env vars not set)

All stores are created together so that the transaction manager covers
every repository that takes part in a cascade.

Usage:
    from infrastructure.persistence.factory import get_repositories

    repos = get_repositories()
    profile = await repos.profiles.load_profile(account_id)
"""

import logging
from dataclasses import dataclass
from typing import Optional

from domain.account.core.ports.account_repository import IAccountRepository
from domain.food_log.core.ports.repository import IDailyLogRepository
from domain.health_profile.core.ports.repository import IHealthProfileRepository
from domain.shared.ports.transaction_manager import ITransactionManager
from infrastructure.config import get_mongodb_uri, get_repository_backend
from infrastructure.persistence.in_memory import (
    InMemoryAccountRepository,
    InMemoryDailyLogRepository,
    InMemoryHealthProfileRepository,
    InMemoryTransactionManager,
)

logger = logging.getLogger(__name__)


@dataclass
class Repositories:
    """Store bundle shared by the orchestrators."""

    accounts: IAccountRepository
    profiles: IHealthProfileRepository
    logs: IDailyLogRepository
    transactions: ITransactionManager


def create_in_memory_repositories() -> Repositories:
    accounts = InMemoryAccountRepository()
    profiles = InMemoryHealthProfileRepository()
    logs = InMemoryDailyLogRepository()
    return Repositories(
        accounts=accounts,
        profiles=profiles,
        logs=logs,
        transactions=InMemoryTransactionManager(accounts, profiles, logs),
    )


def create_mongodb_repositories() -> Repositories:
    """Create MongoDB repositories sharing one motor client.

    Raises:
        ValueError: If MONGODB_URI is not set
    """
    from infrastructure.persistence.mongodb import (
        MongoAccountRepository,
        MongoDailyLogRepository,
        MongoHealthProfileRepository,
        MongoTransactionManager,
    )
    from infrastructure.persistence.mongodb.base import create_client

    client = create_client()
    return Repositories(
        accounts=MongoAccountRepository(client),
        profiles=MongoHealthProfileRepository(client),
        logs=MongoDailyLogRepository(client),
        transactions=MongoTransactionManager(client),
    )


def create_repositories() -> Repositories:
    """Create repositories based on REPOSITORY_BACKEND env var.

    Values:
        - "inmemory": In-memory repositories (default, fast, transient)
        - "mongodb": MongoDB repositories (persistent, requires MONGODB_URI)

    Raises:
        ValueError: If mongodb selected but MONGODB_URI not set
    """
    mode = get_repository_backend()

    if mode == "mongodb":
        if not get_mongodb_uri():
            raise ValueError(
                "REPOSITORY_BACKEND=mongodb but MONGODB_URI not set. "
                "Set MONGODB_URI in .env or use REPOSITORY_BACKEND=inmemory"
            )
        logger.info("Using MongoDB repositories")
        return create_mongodb_repositories()

    if mode != "inmemory":
        logger.warning(
            "Unknown REPOSITORY_BACKEND, falling back to inmemory",
            extra={"backend": mode},
        )

    return create_in_memory_repositories()


# Singleton instance (lazy initialization)
_repositories: Optional[Repositories] = None


def get_repositories() -> Repositories:
    """Get singleton repository bundle."""
    global _repositories
    if _repositories is None:
        _repositories = create_repositories()
    return _repositories


def reset_repositories() -> None:
    """Reset singleton repository bundle.

    Useful for testing to force re-creation with different env vars.
    """
    global _repositories
    _repositories = None
