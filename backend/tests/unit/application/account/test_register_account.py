"""Tests for register account command."""

import pytest

from application.account.commands import RegisterAccountCommand
from domain.account.core.exceptions.account_errors import EmailAlreadyRegisteredError
from domain.account.core.value_objects.email import Email
from domain.account.core.value_objects.role import Role
from infrastructure.persistence.in_memory import (
    InMemoryAccountRepository,
    InMemoryHealthProfileRepository,
)
from infrastructure.session import InMemorySessionStore


@pytest.fixture
def accounts():
    return InMemoryAccountRepository()


@pytest.fixture
def profiles():
    return InMemoryHealthProfileRepository()


@pytest.fixture
def session():
    return InMemorySessionStore()


@pytest.fixture
def command(accounts, profiles, session):
    return RegisterAccountCommand(accounts, profiles, session)


@pytest.mark.asyncio
async def test_register_creates_account_profile_and_session(command, accounts, profiles, session):
    result = await command.execute(" Jane@Example.com ", "secret123", "secret123")

    assert result.succeeded
    account = await accounts.find_by_email(Email("jane@example.com"))
    assert account is not None
    assert account.role is Role.USER
    profile = await profiles.load_profile(account.account_id)
    assert profile.current_onboarding_step == 1
    assert profile.onboarding_completed is False
    assert await session.current_account_id() == account.account_id


@pytest.mark.asyncio
async def test_register_validation_failures(command, accounts):
    result = await command.execute("not-an-email", "short", "other")

    assert not result.succeeded
    assert set(result.failures.as_dict()) == {"email", "password", "confirm_password"}
    assert accounts.count() == 0


@pytest.mark.asyncio
async def test_register_duplicate_email_raises(command):
    await command.execute("jane@example.com", "secret123", "secret123")

    with pytest.raises(EmailAlreadyRegisteredError):
        await command.execute("JANE@example.com", "secret456", "secret456")
