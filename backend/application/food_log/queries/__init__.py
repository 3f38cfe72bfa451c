"""Food log queries."""

from .get_daily_summary import DailySummary, GetDailySummaryQuery, GetDailySummaryQueryHandler

__all__ = ["DailySummary", "GetDailySummaryQuery", "GetDailySummaryQueryHandler"]
