"""Tests for GetAccountStatsQueryHandler."""

from unittest.mock import AsyncMock

import pytest

from application.account.queries import AccountStats, GetAccountStatsQueryHandler
from domain.account.core.entities.account import Account
from domain.account.core.value_objects.email import Email
from infrastructure.persistence.in_memory import InMemoryAccountRepository


class TestGetAccountStats:
    def setup_method(self):
        self.accounts = InMemoryAccountRepository()
        self.handler = GetAccountStatsQueryHandler(self.accounts)

    @pytest.mark.asyncio
    async def test_counts_by_status(self):
        for name in ("a", "b", "c"):
            await self.accounts.save_account(Account.create(Email(f"{name}@example.com"), "pw123456"))
        retired = Account.create(Email("d@example.com"), "pw123456")
        retired.deactivate()
        await self.accounts.save_account(retired)

        stats = await self.handler.handle()

        assert stats == AccountStats(total=4, active=3, deactivated=1)

    @pytest.mark.asyncio
    async def test_no_accounts(self):
        assert await self.handler.handle() == AccountStats(total=0, active=0, deactivated=0)

    @pytest.mark.asyncio
    async def test_reads_through_list_accounts(self):
        accounts = AsyncMock()
        accounts.list_accounts.return_value = []

        await GetAccountStatsQueryHandler(accounts).handle()

        accounts.list_accounts.assert_awaited_once()
