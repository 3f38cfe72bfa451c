"""Tests for InMemoryTransactionManager."""

import pytest

from domain.health_profile.core.factories.profile_factory import HealthProfileFactory
from infrastructure.persistence.in_memory import (
    InMemoryHealthProfileRepository,
    InMemoryTransactionManager,
)


class TestInMemoryTransactionManager:
    def setup_method(self):
        self.profiles = InMemoryHealthProfileRepository()
        self.tx = InMemoryTransactionManager(self.profiles)

    @pytest.mark.asyncio
    async def test_commit_keeps_writes(self):
        async with self.tx.atomic():
            await self.profiles.save_profile(HealthProfileFactory.create_default("acc-1"))

        assert self.profiles.count() == 1

    @pytest.mark.asyncio
    async def test_exception_restores_state_and_propagates(self):
        await self.profiles.save_profile(HealthProfileFactory.create_default("acc-1"))

        with pytest.raises(RuntimeError):
            async with self.tx.atomic():
                await self.profiles.save_profile(HealthProfileFactory.create_default("acc-2"))
                raise RuntimeError("boom")

        assert self.profiles.count() == 1
        assert await self.profiles.load_profile("acc-2") is None
