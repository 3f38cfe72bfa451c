"""Authenticate account command."""

import logging
from dataclasses import dataclass

from domain.account.core.entities.account import Account
from domain.account.core.exceptions.account_errors import (
    AccountDeactivatedError,
    AccountNotFoundError,
    InvalidCredentialsError,
)
from domain.account.core.ports.account_repository import IAccountRepository
from domain.account.core.ports.session_store import ISessionStore
from domain.account.core.value_objects.email import Email
from domain.health_profile.core.ports.repository import IHealthProfileRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthenticationResult:
    """Signed-in account and where the client should go next.

    Attributes:
        account: Authenticated account
        onboarding_completed: True routes to the dashboard, False to onboarding
    """

    account: Account
    onboarding_completed: bool


@dataclass
class AuthenticateAccountCommand:
    """Command to sign an account in with email and password.

    Deactivated accounts are refused with a dedicated error before the
    password is checked.

    Examples:
        >>> command = AuthenticateAccountCommand(accounts, profiles, session)
        >>> result = await command.execute("jane@example.com", "secret123")
        >>> result.onboarding_completed
        False
    """

    accounts: IAccountRepository
    profiles: IHealthProfileRepository
    session: ISessionStore

    async def execute(self, email: str, password: str) -> AuthenticationResult:
        """Execute authentication.

        Raises:
            InvalidEmailError: If the email is malformed
            AccountNotFoundError: No account with this email
            AccountDeactivatedError: Account was deleted/deactivated
            InvalidCredentialsError: Wrong password
        """
        normalized = Email(email)
        account = await self.accounts.find_by_email(normalized)
        if account is None:
            logger.warning("Sign-in for unknown email")
            raise AccountNotFoundError(normalized.value)

        if not account.is_active:
            logger.warning(
                "Sign-in refused for deactivated account",
                extra={"account_id": account.account_id},
            )
            raise AccountDeactivatedError(account.account_id)

        if not await self.accounts.verify_credentials(account, password):
            logger.warning(
                "Sign-in with wrong password", extra={"account_id": account.account_id}
            )
            raise InvalidCredentialsError(normalized.value)

        await self.session.start_session(account.account_id)
        profile = await self.profiles.load_profile(account.account_id)
        completed = profile is not None and profile.onboarding_completed

        logger.info(
            "Account signed in",
            extra={"account_id": account.account_id, "onboarding_completed": completed},
        )
        return AuthenticationResult(account=account, onboarding_completed=completed)
