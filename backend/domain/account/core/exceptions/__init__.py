"""Domain exceptions for account."""

from .account_errors import (
    AccountDeactivatedError,
    AccountDomainError,
    AccountNotFoundError,
    EmailAlreadyRegisteredError,
    InvalidCredentialsError,
    InvalidEmailError,
)

__all__ = [
    "AccountDeactivatedError",
    "AccountDomainError",
    "AccountNotFoundError",
    "EmailAlreadyRegisteredError",
    "InvalidCredentialsError",
    "InvalidEmailError",
]
