"""In-memory Account repository for testing."""

from copy import deepcopy
from typing import Dict, Optional

from domain.account.core.entities.account import Account
from domain.account.core.ports.account_repository import IAccountRepository
from domain.account.core.value_objects.email import Email


class InMemoryAccountRepository(IAccountRepository):
    """In-memory implementation of Account repository.

    Stores accounts in memory keyed by account_id. Passwords are
    compared as stored (plaintext scheme).
    """

    def __init__(self) -> None:
        self._accounts: Dict[str, Account] = {}

    async def load_account(self, account_id: str) -> Optional[Account]:
        account = self._accounts.get(account_id)
        return deepcopy(account) if account else None

    async def save_account(self, account: Account) -> None:
        self._accounts[account.account_id] = deepcopy(account)

    async def find_by_email(self, email: Email) -> Optional[Account]:
        for account in self._accounts.values():
            if account.email == email:
                return deepcopy(account)
        return None

    async def verify_credentials(self, account: Account, password: str) -> bool:
        stored = self._accounts.get(account.account_id)
        return stored is not None and stored.password == password

    async def list_accounts(self) -> list[Account]:
        accounts = sorted(self._accounts.values(), key=lambda a: a.created_at, reverse=True)
        return [deepcopy(a) for a in accounts]

    def snapshot(self) -> Dict[str, Account]:
        """Copy of the current state, for transaction rollback."""
        return deepcopy(self._accounts)

    def restore(self, state: Dict[str, Account]) -> None:
        self._accounts = state

    def clear(self) -> None:
        self._accounts.clear()

    def count(self) -> int:
        return len(self._accounts)
