"""Get account stats query - account counts for the admin console."""

from dataclasses import dataclass
import logging

from domain.account.core.ports.account_repository import IAccountRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AccountStats:
    """
    Account totals.

    Attributes:
        total: Every registered account
        active: Accounts whose status is active
        deactivated: Accounts whose status is deactivated
    """

    total: int
    active: int
    deactivated: int


class GetAccountStatsQueryHandler:
    """Handler for the admin account statistics."""

    def __init__(self, accounts: IAccountRepository):
        self._accounts = accounts

    async def handle(self) -> AccountStats:
        accounts = await self._accounts.list_accounts()
        active = sum(1 for a in accounts if a.is_active)

        stats = AccountStats(
            total=len(accounts),
            active=active,
            deactivated=len(accounts) - active,
        )
        logger.info(
            "Account stats calculated",
            extra={"total": stats.total, "active": stats.active},
        )
        return stats
