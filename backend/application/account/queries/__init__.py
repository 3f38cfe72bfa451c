"""Account queries."""

from .get_account_stats import AccountStats, GetAccountStatsQueryHandler

__all__ = ["AccountStats", "GetAccountStatsQueryHandler"]
