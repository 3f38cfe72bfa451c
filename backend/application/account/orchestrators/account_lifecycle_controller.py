"""AccountLifecycleController - account status and admin access changes."""

import logging
from typing import Optional, Union

from domain.account.core.entities.account import Account
from domain.account.core.exceptions.account_errors import AccountNotFoundError
from domain.account.core.ports.account_repository import IAccountRepository
from domain.account.core.ports.session_store import ISessionStore
from domain.account.core.value_objects.role import AccountStatus
from domain.health_profile.core.ports.repository import IHealthProfileRepository
from domain.shared.authorization import AuthorizationDenied, DenialReason

logger = logging.getLogger(__name__)


class AccountLifecycleController:
    """
    Account status transitions and admin-access grant/revoke.

    Accounts are never hard-deleted: deactivation is a status change and
    the owning health profile is retired alongside it.

    Admin-access rules:
    1. Only the super admin may change another account's admin access
    2. Nobody may revoke their own admin access
    3. The super admin's access can never be changed

    A refused change returns AuthorizationDenied and writes nothing.
    """

    def __init__(
        self,
        accounts: IAccountRepository,
        profiles: Optional[IHealthProfileRepository] = None,
    ):
        self._accounts = accounts
        self._profiles = profiles

    async def toggle_status(
        self, actor_id: str, target_id: str
    ) -> Union[AccountStatus, AuthorizationDenied]:
        """
        Flip a target account between active and deactivated.

        Admins may toggle any account, their own included.

        Returns:
            The new status, or AuthorizationDenied if the actor is not an admin

        Raises:
            AccountNotFoundError: If either account does not exist
        """
        actor = await self._load(actor_id)
        if not actor.is_admin:
            return self._deny(actor_id, target_id, DenialReason.NOT_ADMIN)

        target = actor if target_id == actor_id else await self._load(target_id)
        status = target.toggle_status()
        await self._accounts.save_account(target)
        await self._sync_profile(target)

        logger.info(
            "Account status toggled",
            extra={"actor_id": actor_id, "target_id": target_id, "status": status.value},
        )
        return status

    async def delete_own_account(self, session: ISessionStore) -> Account:
        """
        Deactivate the signed-in account and sign it out.

        Arms the one-shot "account deleted" notice for the sign-in screen.

        Raises:
            AccountNotFoundError: If no account is signed in or it no longer exists
        """
        account_id = await session.current_account_id()
        if account_id is None:
            raise AccountNotFoundError("no signed-in account")

        account = await self._load(account_id)
        account.deactivate()
        await self._accounts.save_account(account)
        await self._sync_profile(account)

        await session.mark_account_just_deleted()
        await session.clear_session()

        logger.info("Account self-deleted", extra={"account_id": account_id})
        return account

    async def set_admin_access(
        self, actor_id: str, target_id: str, granted: bool
    ) -> Union[Account, AuthorizationDenied]:
        """
        Grant or revoke a target account's admin access.

        Returns:
            The updated account, or AuthorizationDenied with no change made

        Raises:
            AccountNotFoundError: If either account does not exist
        """
        actor = await self._load(actor_id)
        if not actor.is_super_admin:
            return self._deny(actor_id, target_id, DenialReason.NOT_SUPER_ADMIN)
        if actor_id == target_id and not granted:
            return self._deny(actor_id, target_id, DenialReason.SELF_REVOCATION)

        target = await self._load(target_id)
        if target.is_super_admin:
            return self._deny(actor_id, target_id, DenialReason.TARGET_IS_SUPER_ADMIN)

        target.set_admin_access(granted)
        await self._accounts.save_account(target)

        logger.info(
            "Admin access changed",
            extra={"actor_id": actor_id, "target_id": target_id, "granted": granted},
        )
        return target

    async def _load(self, account_id: str) -> Account:
        account = await self._accounts.load_account(account_id)
        if account is None:
            raise AccountNotFoundError(account_id)
        return account

    async def _sync_profile(self, account: Account) -> None:
        """Retire or reinstate the profile to match the account status."""
        if self._profiles is None:
            return
        profile = await self._profiles.load_profile(account.account_id)
        if profile is None:
            return
        if account.is_active:
            profile.reinstate()
        else:
            profile.retire()
        await self._profiles.save_profile(profile)

    @staticmethod
    def _deny(actor_id: str, target_id: str, reason: DenialReason) -> AuthorizationDenied:
        logger.warning(
            "Privileged account change denied",
            extra={"actor_id": actor_id, "target_id": target_id, "reason": reason.value},
        )
        return AuthorizationDenied(actor_id=actor_id, target_id=target_id, reason=reason)
