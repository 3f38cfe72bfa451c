"""Account commands."""

from .authenticate_account import AuthenticateAccountCommand, AuthenticationResult
from .register_account import RegisterAccountCommand, RegistrationResult

__all__ = [
    "AuthenticateAccountCommand",
    "AuthenticationResult",
    "RegisterAccountCommand",
    "RegistrationResult",
]
