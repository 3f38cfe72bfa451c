"""Account domain exceptions."""


class AccountDomainError(Exception):
    """Base exception for Account domain errors."""

    pass


class AccountNotFoundError(AccountDomainError):
    """Account was not found in the repository."""

    def __init__(self, identifier: str):
        """Initialize with account identifier.

        Args:
            identifier: Account ID or email that was not found
        """
        self.identifier = identifier
        super().__init__(f"No account found: {identifier}")


class AccountDeactivatedError(AccountDomainError):
    """Account exists but was deactivated; sign-in is refused."""

    def __init__(self, account_id: str):
        self.account_id = account_id
        super().__init__(
            "This account is no longer accessible as it was deleted. "
            "Please contact support."
        )


class InvalidCredentialsError(AccountDomainError):
    """Password does not match the account."""

    def __init__(self, email: str):
        self.email = email
        super().__init__("Incorrect password")


class EmailAlreadyRegisteredError(AccountDomainError):
    """An account with this email already exists."""

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"This email is already registered: {email}")


class InvalidEmailError(AccountDomainError):
    """Email address is malformed."""

    def __init__(self, email: str, reason: str):
        self.email = email
        self.reason = reason
        super().__init__(f"Invalid email '{email}': {reason}")
