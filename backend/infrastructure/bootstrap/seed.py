"""Super-admin seeding.

Runs at startup; safe to call repeatedly.
"""

import logging
from typing import Optional

from domain.account.core.entities.account import Account
from domain.account.core.ports.account_repository import IAccountRepository
from domain.account.core.value_objects.email import Email
from domain.health_profile.core.factories.profile_factory import HealthProfileFactory
from domain.health_profile.core.ports.repository import IHealthProfileRepository
from infrastructure.config import get_super_admin_credentials

logger = logging.getLogger(__name__)


async def seed_super_admin(
    accounts: IAccountRepository,
    profiles: IHealthProfileRepository,
    email: Optional[str] = None,
    password: Optional[str] = None,
) -> Account:
    """Ensure the super-admin account and its profile exist.

    Credentials default to SUPER_ADMIN_EMAIL / SUPER_ADMIN_PASSWORD.
    An existing account with that email is returned unchanged.

    Returns:
        The super-admin account
    """
    if email is None or password is None:
        default_email, default_password = get_super_admin_credentials()
        email = email or default_email
        password = password or default_password

    existing = await accounts.find_by_email(Email(email))
    if existing is not None:
        return existing

    admin = Account.create_super_admin(Email(email), password)
    await accounts.save_account(admin)
    await profiles.save_profile(HealthProfileFactory.create_default(admin.account_id))

    logger.info(
        "Super admin seeded",
        extra={"account_id": admin.account_id, "email": admin.email.value},
    )
    return admin
