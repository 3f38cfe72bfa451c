"""Register account command."""

import logging
from dataclasses import dataclass

from domain.account.core.entities.account import Account
from domain.account.core.exceptions.account_errors import EmailAlreadyRegisteredError
from domain.account.core.ports.account_repository import IAccountRepository
from domain.account.core.ports.session_store import ISessionStore
from domain.account.core.value_objects.email import Email
from domain.health_profile.core.factories.profile_factory import HealthProfileFactory
from domain.health_profile.core.ports.repository import IHealthProfileRepository
from domain.shared.validation import ValidationResult

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 8


@dataclass
class RegistrationResult:
    """Outcome of a registration attempt.

    Attributes:
        failures: Field failures; when present nothing was created
        account: The new account on success
    """

    failures: ValidationResult
    account: Account | None = None

    @property
    def succeeded(self) -> bool:
        return self.account is not None


@dataclass
class RegisterAccountCommand:
    """Command to create an account together with its empty health profile.

    The new account is signed in immediately and lands on onboarding step 1.

    Examples:
        >>> command = RegisterAccountCommand(accounts, profiles, session)
        >>> result = await command.execute("jane@example.com", "secret123", "secret123")
    """

    accounts: IAccountRepository
    profiles: IHealthProfileRepository
    session: ISessionStore

    async def execute(self, email: str, password: str, confirm_password: str) -> RegistrationResult:
        """Execute registration.

        Raises:
            EmailAlreadyRegisteredError: If the email is already taken
        """
        failures = self.validate(email, password, confirm_password)
        if not failures.is_valid:
            return RegistrationResult(failures=failures)

        normalized = Email(email)
        if await self.accounts.find_by_email(normalized) is not None:
            raise EmailAlreadyRegisteredError(normalized.value)

        account = Account.create(normalized, password)
        await self.accounts.save_account(account)
        await self.profiles.save_profile(HealthProfileFactory.create_default(account.account_id))
        await self.session.start_session(account.account_id)

        logger.info("Account registered", extra={"account_id": account.account_id})
        return RegistrationResult(failures=failures, account=account)

    @staticmethod
    def validate(email: str, password: str, confirm_password: str) -> ValidationResult:
        result = ValidationResult()
        if not email or not email.strip():
            result.add("email", "Email is required")
        elif not Email.is_valid(email):
            result.add("email", "Please enter a valid email")
        if len(password or "") < MIN_PASSWORD_LENGTH:
            result.add("password", "Password must be at least 8 characters")
        if password != confirm_password:
            result.add("confirm_password", "Passwords do not match")
        return result
