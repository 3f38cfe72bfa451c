"""Ports for account domain."""

from .account_repository import IAccountRepository
from .session_store import ISessionStore

__all__ = ["IAccountRepository", "ISessionStore"]
