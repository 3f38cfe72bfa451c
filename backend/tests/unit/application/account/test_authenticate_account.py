"""Tests for authenticate account command."""

import pytest
import pytest_asyncio

from application.account.commands import AuthenticateAccountCommand, RegisterAccountCommand
from domain.account.core.exceptions.account_errors import (
    AccountDeactivatedError,
    AccountNotFoundError,
    InvalidCredentialsError,
)
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
    return AuthenticateAccountCommand(accounts, profiles, session)


@pytest_asyncio.fixture
async def registered(accounts, profiles, session):
    result = await RegisterAccountCommand(accounts, profiles, session).execute(
        "jane@example.com", "secret123", "secret123"
    )
    await session.clear_session()
    return result.account


@pytest.mark.asyncio
async def test_sign_in_routes_to_onboarding(command, session, registered):
    result = await command.execute("jane@example.com", "secret123")

    assert result.account == registered
    assert result.onboarding_completed is False
    assert await session.current_account_id() == registered.account_id


@pytest.mark.asyncio
async def test_unknown_email(command):
    with pytest.raises(AccountNotFoundError):
        await command.execute("nobody@example.com", "secret123")


@pytest.mark.asyncio
async def test_wrong_password(command, session, registered):
    with pytest.raises(InvalidCredentialsError) as exc_info:
        await command.execute("jane@example.com", "wrong-pass")

    assert str(exc_info.value) == "Incorrect password"
    assert await session.current_account_id() is None


@pytest.mark.asyncio
async def test_deactivated_account_refused_before_password_check(command, accounts, registered):
    registered.deactivate()
    await accounts.save_account(registered)

    with pytest.raises(AccountDeactivatedError) as exc_info:
        await command.execute("jane@example.com", "wrong-pass")

    assert "no longer accessible" in str(exc_info.value)
